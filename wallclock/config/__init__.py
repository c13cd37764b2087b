from .app_config import AppConfig
from .log_config import LogConfig
from .resolver_config import ResolverConfig, AmbiguityPolicy
from .display_config import DisplayConfig

__all__ = ["AppConfig", "LogConfig", "ResolverConfig", "AmbiguityPolicy", "DisplayConfig"]
