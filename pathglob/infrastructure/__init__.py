"""pathglob Infrastructure Layer.

Services used by the expansion engine and the CLI:
- PatternCache: Process-wide cache of compiled segment matchers
- ConfigManager: Hierarchical configuration (defaults, YAML, environment)
- Logger: Structured logging system
"""

from .cache_manager import PatternCache, get_pattern_cache, set_global_cache
from .config_manager import ConfigError
from .config_manager import ConfigManager as Config
from .config_manager import ConfigManager, ConfigSource, get_config_manager, set_global_config
from .logger import Logger, LogLevel, get_logger, set_global_logger

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "get_logger",
    "set_global_logger",
    # PatternCache exports
    "PatternCache",
    "get_pattern_cache",
    "set_global_cache",
    # ConfigManager exports
    "ConfigSource",
    "ConfigError",
    "Config",
    "ConfigManager",
    "get_config_manager",
    "set_global_config",
]
