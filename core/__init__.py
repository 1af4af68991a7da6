"""
🔧 Core Module
Configuration and logging shared by the solver and its launcher
"""

__version__ = "0.1.0"
__description__ = "Genetic algorithm solver for the six-number arithmetic game"

from .config import Settings, get_settings
from .logger import get_logger, get_solver_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
    "get_solver_logger",
    "setup_logging"
]
