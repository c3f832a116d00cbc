"""Utility components for csscraft."""

from csscraft.utils.files import get_logs_path, get_project_root, init_csscraft
from csscraft.utils.logging import setup_local_logging

__all__ = [
    'get_logs_path',
    'get_project_root',
    'init_csscraft',
    'setup_local_logging',
]
