# autocorrecter/utils/__init__.py
# app-layer helpers: config, logging, metrics, timing

from .config_manager import Config
from .logger_utils import Log
from .metrics_tracker import Metrics
from .cache_utils import timed

__all__ = ["Config", "Log", "Metrics", "timed"]
