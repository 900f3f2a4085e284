"""
Configuration management for Serato Library
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

ROOT_ENV_VAR = "SERATO_LIBRARY_ROOT"


@dataclass
class LibraryConfig:
    """Where the Serato library lives and how its files are named."""

    root: str = "."
    serato_dir: str = "_Serato_"
    database_filename: str = "database V2"
    subcrates_dir: str = "Subcrates"
    crate_extension: str = ".crate"
    subcrate_delimiter: str = "%%"

    def validate(self) -> None:
        """Validate library configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.subcrate_delimiter:
            raise ValueError("subcrate_delimiter must not be empty")
        if not self.crate_extension.startswith(".") or len(self.crate_extension) < 2:
            raise ValueError(
                f"Invalid crate_extension {self.crate_extension!r}: "
                "must start with '.' followed by at least one character"
            )
        for name in ("serato_dir", "database_filename", "subcrates_dir"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/serato-library/serato-library.log)
    )
    console_output: bool = False  # Also output to stderr (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    library: LibraryConfig = field(default_factory=LibraryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "serato-library"
    return Path.home() / ".config" / "serato-library"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "serato-library"
    return Path.home() / ".local" / "share" / "serato-library"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honoring a custom path from config."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "serato-library.log"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/serato-library (or ~/.config/serato-library)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    A missing config file is not an error. Environment variables override
    TOML values (a .env file in the config directory is loaded first):
    - SERATO_LIBRARY_ROOT

    Args:
        config_path: Explicit config file (default: see get_config_path)

    Raises:
        ValueError: If an explicit config file is missing, or the file is not
            valid TOML or holds invalid values
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is not None and not config_path.exists():
        raise ValueError(f"Config file not found: {config_path}")

    config_path = config_path or get_config_path()
    config = Config()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e

        if "library" in toml_data:
            library_data = toml_data["library"]
            config.library = LibraryConfig(
                root=library_data.get("root", config.library.root),
                serato_dir=library_data.get("serato_dir", config.library.serato_dir),
                database_filename=library_data.get(
                    "database_filename", config.library.database_filename
                ),
                subcrates_dir=library_data.get(
                    "subcrates_dir", config.library.subcrates_dir
                ),
                crate_extension=library_data.get(
                    "crate_extension", config.library.crate_extension
                ),
                subcrate_delimiter=library_data.get(
                    "subcrate_delimiter", config.library.subcrate_delimiter
                ),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level),
                log_file=logging_data.get("log_file"),
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )

    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        config.library.root = env_root

    config.library.root = str(Path(config.library.root).expanduser())
    config.library.validate()
    return config
