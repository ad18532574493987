"""
Shared configuration types for mcstatusio
"""

from typing import Optional
from dataclasses import dataclass

API_BASE = "https://api.mcstatus.io/v2"
DEFAULT_TIMEOUT = 5.0

@dataclass
class ClientConfig:
    api_base: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT
    query: bool = True
    timeout_margin: float = 0.0  # added to the HTTP timeout on top of the API timeout
    user_agent: str = "mcstatusio/0.1.0"

@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None

@dataclass
class UIConfig:
    show_players: bool = True
    show_plugins: bool = True
    show_mods: bool = True
    max_list_items: int = 20
