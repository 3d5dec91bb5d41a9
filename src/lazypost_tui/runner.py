import logging
import sys
from importlib import resources
from pathlib import Path
from typing import List, Optional

from .config import LazyPostConfig, get_config, set_config
from .errors import StartupError
from .loggers import setup_logging

logger = logging.getLogger(__name__)


def load_banner(config: LazyPostConfig) -> str:
    """Read the banner asset. A missing asset is a startup failure."""
    if not config.show_banner:
        return ""
    try:
        if config.banner_path:
            return Path(config.banner_path).read_text(encoding="utf-8")
        return resources.files("lazypost_tui").joinpath("assets").joinpath("banner.txt").read_text(encoding="utf-8")
    except OSError as e:
        raise StartupError(f"Could not load banner asset: {e}") from e


class LazyPostRunner:
    def __init__(self, config: Optional[LazyPostConfig] = None):
        self.config = config or get_config()
        set_config(self.config)

    def run(self) -> int:
        """Start the TUI and block until it exits; returns the exit status."""
        setup_logging(self.config)
        banner = load_banner(self.config)

        from .app import LazyPostApp
        app = LazyPostApp(config=self.config, banner=banner)
        logger.info("Starting LazyPost")
        app.run()
        return app.return_code or 0


def run_app(config: Optional[LazyPostConfig] = None) -> int:
    try:
        return LazyPostRunner(config).run()
    except StartupError as e:
        print(f"[LazyPost] {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> None:
    config = LazyPostConfig.from_cli(argv)
    sys.exit(run_app(config))
