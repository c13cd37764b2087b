#!filepath: wallclock/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .core.types import Instant, WallTime, ResolvedMoment, LOCAL_ZONE
from .core.oracle import ZoneInfoOracle
from .core.resolver import WallTimeResolver
from .core.formatting import Formatter

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "Instant", "WallTime", "ResolvedMoment", "LOCAL_ZONE",
    "ZoneInfoOracle", "WallTimeResolver", "Formatter",
]
