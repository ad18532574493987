"""
Status document parsing and typed entry records
"""

import json
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field

from ..core.exceptions import ParseError, MissingFieldError

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "Unknown"

@dataclass(frozen=True)
class PlayerEntry:
    """One player from players.list"""
    name_raw: str
    name_clean: str
    uuid: Optional[str] = None

@dataclass(frozen=True)
class ModEntry:
    name: str
    version: str

@dataclass(frozen=True)
class PluginEntry:
    name: str
    version: Optional[str] = None

@dataclass(frozen=True)
class SrvRecord:
    host: str
    port: int

@dataclass
class StatusSummary:
    """Flat view of a status used for display and export"""
    edition: str
    host: str
    port: int
    online: bool
    ip_address: Optional[str] = None
    eula_blocked: bool = False
    version: Optional[str] = None
    protocol: int = -1
    players_online: int = 0
    players_max: int = 0
    motd: Optional[str] = None
    software: Optional[str] = None
    gamemode: Optional[str] = None
    retrieved_at: int = 0
    expires_at: int = 0
    players: List[str] = field(default_factory=list)
    plugins: Dict[str, str] = field(default_factory=dict)
    mods: Dict[str, str] = field(default_factory=dict)

def parse_document(body: bytes) -> Dict[str, Any]:
    """Parse a UTF-8 JSON response body into a status document"""
    try:
        text = body.decode('utf-8') if isinstance(body, (bytes, bytearray)) else body
        document = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Failed to parse status document: {e}")
        raise ParseError(f"Response is not valid JSON: {e}", cause=e) from e
    
    if not isinstance(document, dict):
        raise ParseError(f"Expected a JSON object, got {type(document).__name__}")
    
    return document

def require(data: Dict[str, Any], key: str, path: str = "") -> Any:
    """Read a required field, raising MissingFieldError when absent or null"""
    value = data.get(key) if isinstance(data, dict) else None
    if value is None:
        raise MissingFieldError(f"{path}.{key}" if path else key)
    return value

def require_object(data: Dict[str, Any], key: str, path: str = "") -> Dict[str, Any]:
    value = require(data, key, path)
    if not isinstance(value, dict):
        raise MissingFieldError(f"{path}.{key}" if path else key)
    return value

def optional_list(data: Dict[str, Any], key: str) -> Optional[List[Any]]:
    """Read an optional array; anything that is not a list counts as absent"""
    value = data.get(key)
    return value if isinstance(value, list) else None

def parse_player(entry: Dict[str, Any]) -> PlayerEntry:
    return PlayerEntry(
        name_raw=require(entry, 'name_raw', 'players.list'),
        name_clean=require(entry, 'name_clean', 'players.list'),
        uuid=entry.get('uuid')
    )

def parse_mod(entry: Dict[str, Any]) -> ModEntry:
    return ModEntry(
        name=require(entry, 'name', 'mods'),
        version=require(entry, 'version', 'mods')
    )

def parse_plugin(entry: Dict[str, Any]) -> PluginEntry:
    return PluginEntry(
        name=require(entry, 'name', 'plugins'),
        version=entry.get('version')
    )

def parse_srv_record(value: Any) -> Optional[SrvRecord]:
    if not isinstance(value, dict):
        return None
    return SrvRecord(
        host=require(value, 'host', 'srv_record'),
        port=int(require(value, 'port', 'srv_record'))
    )
