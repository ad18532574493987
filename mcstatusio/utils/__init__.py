"""
mcstatusio utils package
"""

from .export import StatusExporter

__all__ = [
    'StatusExporter'
]
