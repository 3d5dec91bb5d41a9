import os
import sys
from dataclasses import dataclass
from typing import Optional, List
from enum import Enum

class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


_TRUTHY = ("1", "true", "yes")


@dataclass
class LazyPostConfig:
    """
    Configuration for the LazyPost TUI.
    """

    # Request defaults
    default_url: str = ""
    default_method: str = "GET"
    request_timeout: float = 30.0
    verify_tls: bool = True

    # Display settings
    pretty_json: bool = True
    show_banner: bool = True
    banner_path: Optional[str] = None
    spinner_interval: float = 0.08

    # Logging settings
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = False
    log_file_path: str = "lazypost.log"

    def override_from_cli(self, argv: Optional[List[str]] = None) -> None:
        """Command line arguments take precedence over the environment."""
        args = sys.argv[1:] if argv is None else argv

        if "--insecure" in args:
            self.verify_tls = False
        if "--no-banner" in args:
            self.show_banner = False
        if "--raw" in args:
            self.pretty_json = False

        for i in range(len(args)):
            name, value = _split_option(args, i)
            if value is None:
                continue

            if name == "--url":
                self.default_url = value
            elif name == "--method":
                self.default_method = value.upper()
            elif name == "--timeout":
                try:
                    self.request_timeout = float(value)
                except ValueError: pass
            elif name == "--log-file":
                self.log_to_file = True
                self.log_file_path = value
            elif name == "--log-level":
                try:
                    self.log_level = LogLevel(value.lower())
                except ValueError: pass
            elif name == "--banner":
                self.banner_path = value

    @classmethod
    def from_env(cls) -> "LazyPostConfig":
        log_file = os.getenv("LAZYPOST_LOG_FILE", "")

        return cls(
            default_url=os.getenv("LAZYPOST_URL", ""),
            default_method=os.getenv("LAZYPOST_METHOD", "GET").upper(),
            request_timeout=_env_float("LAZYPOST_TIMEOUT", 30.0),
            verify_tls=os.getenv("LAZYPOST_VERIFY_TLS", "1").lower() in _TRUTHY,
            pretty_json=os.getenv("LAZYPOST_PRETTY_JSON", "1").lower() in _TRUTHY,
            show_banner=os.getenv("LAZYPOST_BANNER", "1").lower() in _TRUTHY,
            banner_path=os.getenv("LAZYPOST_BANNER_PATH") or None,
            spinner_interval=_env_float("LAZYPOST_SPINNER_INTERVAL", 0.08),
            log_level=_env_log_level("LAZYPOST_LOG_LEVEL", LogLevel.INFO),
            log_to_file=bool(log_file),
            log_file_path=log_file or "lazypost.log",
        )

    @classmethod
    def from_cli(cls, argv: Optional[List[str]] = None) -> "LazyPostConfig":
        config = cls.from_env()
        config.override_from_cli(argv)
        return config


def _split_option(args: List[str], index: int):
    """Read `--name=value` or `--name value` at `index`."""
    arg = args[index]
    if not arg.startswith("--"):
        return arg, None
    if "=" in arg:
        name, value = arg.split("=", 1)
        return name, value
    if index + 1 < len(args) and not args[index + 1].startswith("--"):
        return arg, args[index + 1]
    return arg, None


def _env_float(name: str, default: float) -> float:
    """Unparsable values fall back to the default, like bad CLI values."""
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_log_level(name: str, default: LogLevel) -> LogLevel:
    try:
        return LogLevel(os.getenv(name, default.value).lower())
    except ValueError:
        return default


# Global config instance
_config: Optional[LazyPostConfig] = None

def get_config() -> LazyPostConfig:
    global _config
    if _config is None:
        _config = LazyPostConfig.from_cli()
    return _config

def set_config(config: LazyPostConfig) -> None:
    global _config
    _config = config
