"""Core infrastructure layer - no domain dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LibraryConfig,
    LoggingConfig,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)

# Logging
from .output import setup_loguru

# Console
from .console import get_console, safe_print

__all__ = [
    # Config
    "Config",
    "LibraryConfig",
    "LoggingConfig",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    # Logging
    "setup_loguru",
    # Console
    "get_console",
    "safe_print",
]
