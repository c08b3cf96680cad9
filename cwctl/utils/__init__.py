"""Utilities for cwctl."""

from .config_manager import ConfigManager
from .project_detector import determine_project_info

__all__ = [
    'ConfigManager',
    'determine_project_info'
]
