# keyboard_predict/utils/__init__.py
# config and logging helpers

from .config_manager import ConfigError, EngineConfig, load_config
from .logger_utils import Log, configure_logging

__all__ = ["ConfigError", "EngineConfig", "Log", "configure_logging", "load_config"]
