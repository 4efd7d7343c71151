"""
CLI Interface for jr
"""

from .main_cli import main_cli, main
from .invocation import Invocation, execute

__all__ = ['main_cli', 'main', 'Invocation', 'execute']
