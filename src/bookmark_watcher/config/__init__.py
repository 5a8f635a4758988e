from .errors import ConfigError
from .loader import load_config
from .models import AppConfig, BookmarkConfig, CheckConfig

__all__ = [
    "AppConfig",
    "BookmarkConfig",
    "CheckConfig",
    "ConfigError",
    "load_config",
]
