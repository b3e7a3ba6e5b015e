from .config_loader import load_config, load_grid_config
from .grid_utils import validate_grid
from .logger import get_logger

__all__ = [
    "load_config",
    "load_grid_config",
    "validate_grid",
    "get_logger",
]
