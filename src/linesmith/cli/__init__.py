"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from linesmith.cli import macros

__all__ = ['macros']
