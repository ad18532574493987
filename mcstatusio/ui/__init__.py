"""
mcstatusio UI package
"""

from .console import StatusConsole

__all__ = [
    'StatusConsole'
]
