from lazypost_tui import LazyPostConfig, run_app

# --- Entry point for running from a checkout ---
if __name__ == "__main__":
    config = LazyPostConfig.from_cli()
    raise SystemExit(run_app(config))
