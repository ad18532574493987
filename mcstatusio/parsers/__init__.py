"""
mcstatusio parsers package
"""

from .status_parser import (
    PlayerEntry, ModEntry, PluginEntry, SrvRecord, StatusSummary, parse_document
)

__all__ = [
    'PlayerEntry',
    'ModEntry',
    'PluginEntry',
    'SrvRecord',
    'StatusSummary',
    'parse_document'
]
