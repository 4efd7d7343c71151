"""
Utility modules for the jr command
"""

from .logging import setup_logging
from .config import load_config, get_env_config, merge_configs, resolve_config

__all__ = ['setup_logging', 'load_config', 'get_env_config', 'merge_configs', 'resolve_config']
