"""
Java and Bedrock status clients for the mcstatus.io v2 API

A status client wraps one parsed status document. Documents are obtained
through the fetch factories, which return a FetchResult instead of raising,
so a failed request never produces a client object:

    result = await fetch_java_status("play.example.com")
    if result.ok:
        print(result.value.players_online)

Online-only accessors return a sentinel (None, 0, -1, empty collection) when
the server is offline and never touch the missing substructure. Fields the API
always sends raise MissingFieldError when absent.
"""

import asyncio
import base64
import binascii
import copy
import logging
from typing import Dict, Any, Optional, List, Mapping
from abc import ABC, abstractmethod

from .exceptions import McStatusError, InvalidArgumentError, RemoteError, MissingFieldError, IconDecodeError
from .config_types import ClientConfig, DEFAULT_TIMEOUT
from .request import java_status_url, bedrock_status_url
from .result import FetchResult
from .transport import Transport, AiohttpTransport
from .icon import decode_icon
from ..parsers.status_parser import (
    PlayerEntry, ModEntry, PluginEntry, SrvRecord, StatusSummary, UNKNOWN_VERSION,
    parse_document, parse_player, parse_mod, parse_plugin, parse_srv_record,
    require, require_object, optional_list
)

logger = logging.getLogger(__name__)

class BaseStatus(ABC):
    """Fields shared by Java and Bedrock status documents"""

    EDITION = ""

    def __init__(self, document: Mapping[str, Any]):
        if not isinstance(document, Mapping):
            raise InvalidArgumentError(f"Status document must be a mapping, got {type(document).__name__}")
        self._document: Dict[str, Any] = copy.deepcopy(dict(document))

    def __repr__(self) -> str:
        host = self._document.get('host')
        online = self._document.get('online')
        return f"{type(self).__name__}(host={host!r}, online={online!r})"

    @property
    def raw(self) -> Dict[str, Any]:
        """Copy of the underlying document"""
        return copy.deepcopy(self._document)

    @property
    def is_online(self) -> bool:
        return bool(require(self._document, 'online'))

    @property
    def host(self) -> str:
        return require(self._document, 'host')

    @property
    def port(self) -> int:
        return int(require(self._document, 'port'))

    @property
    def ip_address(self) -> Optional[str]:
        return self._document.get('ip_address')

    @property
    def eula_blocked(self) -> bool:
        return bool(require(self._document, 'eula_blocked'))

    @property
    def retrieved_at(self) -> int:
        """Unix timestamp in milliseconds when the API fetched the data"""
        return int(require(self._document, 'retrieved_at'))

    @property
    def expires_at(self) -> int:
        """Unix timestamp in milliseconds when the API's cached copy expires"""
        return int(require(self._document, 'expires_at'))

    def _section(self, key: str) -> Dict[str, Any]:
        return require_object(self._document, key)

    @property
    def version_protocol(self) -> int:
        if not self.is_online:
            return -1
        return int(require(self._section('version'), 'protocol', 'version'))

    @property
    def players_online(self) -> int:
        if not self.is_online:
            return 0
        return int(require(self._section('players'), 'online', 'players'))

    @property
    def players_max(self) -> int:
        if not self.is_online:
            return 0
        return int(require(self._section('players'), 'max', 'players'))

    def _motd(self, key: str) -> Optional[str]:
        if not self.is_online:
            return None
        return require(self._section('motd'), key, 'motd')

    @property
    def motd_raw(self) -> Optional[str]:
        return self._motd('raw')

    @property
    def motd_clean(self) -> Optional[str]:
        return self._motd('clean')

    @property
    def motd_html(self) -> Optional[str]:
        return self._motd('html')

    @property
    @abstractmethod
    def version_label(self) -> Optional[str]:
        """Human readable version name"""
        pass

    def summary(self) -> StatusSummary:
        """Flatten into a StatusSummary"""
        return StatusSummary(
            edition=self.EDITION,
            host=self.host,
            port=self.port,
            online=self.is_online,
            ip_address=self.ip_address,
            eula_blocked=self.eula_blocked,
            version=self.version_label,
            protocol=self.version_protocol,
            players_online=self.players_online,
            players_max=self.players_max,
            motd=self.motd_clean,
            retrieved_at=self.retrieved_at,
            expires_at=self.expires_at
        )

class JavaStatus(BaseStatus):
    """Status of a Java edition server"""

    EDITION = "java"

    @property
    def srv_record(self) -> Optional[SrvRecord]:
        return parse_srv_record(self._document.get('srv_record'))

    def _version_name(self, key: str) -> Optional[str]:
        if not self.is_online:
            return None
        return require(self._section('version'), key, 'version')

    @property
    def version_name_raw(self) -> Optional[str]:
        return self._version_name('name_raw')

    @property
    def version_name_clean(self) -> Optional[str]:
        return self._version_name('name_clean')

    @property
    def version_name_html(self) -> Optional[str]:
        return self._version_name('name_html')

    @property
    def version_label(self) -> Optional[str]:
        return self.version_name_clean

    def _player_entries(self) -> List[Dict[str, Any]]:
        if not self.is_online:
            return []
        return optional_list(self._section('players'), 'list') or []

    @property
    def players_list(self) -> Optional[List[PlayerEntry]]:
        """Player sample, or None when offline or not reported"""
        if not self.is_online:
            return None
        entries = optional_list(self._section('players'), 'list')
        if entries is None:
            return None
        return [parse_player(entry) for entry in entries]

    def player_names(self) -> List[str]:
        return [require(entry, 'name_clean', 'players.list') for entry in self._player_entries()]

    def player_names_raw(self) -> List[str]:
        return [require(entry, 'name_raw', 'players.list') for entry in self._player_entries()]

    @property
    def icon(self) -> Optional[str]:
        """Icon as a data URI (data:image/png;base64,...)"""
        if not self.is_online:
            return None
        return self._document.get('icon')

    def icon_bytes(self) -> Optional[bytes]:
        """Decoded icon PNG bytes, or None when there is no icon"""
        icon = self.icon
        if not icon:
            return None
        payload = icon.split('base64,', 1)[1] if 'base64,' in icon else icon
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise IconDecodeError(f"Icon is not valid base64: {e}", cause=e) from e

    def icon_image(self):
        """Icon decoded into a PIL image, or None when there is no icon"""
        data = self.icon_bytes()
        if data is None:
            return None
        return decode_icon(data)

    @property
    def mods(self) -> Optional[List[ModEntry]]:
        if not self.is_online:
            return None
        entries = optional_list(self._document, 'mods')
        if entries is None:
            return None
        return [parse_mod(entry) for entry in entries]

    def _mod_entries(self) -> List[Dict[str, Any]]:
        if not self.is_online:
            return []
        return optional_list(self._document, 'mods') or []

    def mod_names(self) -> List[str]:
        return [require(entry, 'name', 'mods') for entry in self._mod_entries()]

    def mods_with_versions(self) -> Dict[str, str]:
        """Mod name -> version. Every mod entry must carry a version."""
        return {
            require(entry, 'name', 'mods'): require(entry, 'version', 'mods')
            for entry in self._mod_entries()
        }

    @property
    def software(self) -> Optional[str]:
        if not self.is_online:
            return None
        return self._document.get('software')

    @property
    def plugins(self) -> Optional[List[PluginEntry]]:
        if not self.is_online:
            return None
        entries = optional_list(self._document, 'plugins')
        if entries is None:
            return None
        return [parse_plugin(entry) for entry in entries]

    def _plugin_entries(self) -> List[Dict[str, Any]]:
        if not self.is_online:
            return []
        return optional_list(self._document, 'plugins') or []

    def plugin_names(self) -> List[str]:
        return [require(entry, 'name', 'plugins') for entry in self._plugin_entries()]

    def plugins_with_versions(self) -> Dict[str, str]:
        """Plugin name -> version, "Unknown" where a plugin reports none"""
        return {
            require(entry, 'name', 'plugins'): (
                entry['version'] if entry.get('version') is not None else UNKNOWN_VERSION
            )
            for entry in self._plugin_entries()
        }

    def summary(self) -> StatusSummary:
        summary = super().summary()
        summary.software = self.software
        summary.players = self.player_names()
        summary.plugins = self.plugins_with_versions()
        try:
            summary.mods = self.mods_with_versions()
        except MissingFieldError:
            summary.mods = {name: UNKNOWN_VERSION for name in self.mod_names()}
        return summary

class BedrockStatus(BaseStatus):
    """Status of a Bedrock edition server"""

    EDITION = "bedrock"

    def _online_field(self, key: str) -> Optional[str]:
        if not self.is_online:
            return None
        return require(self._document, key)

    @property
    def version_name(self) -> Optional[str]:
        if not self.is_online:
            return None
        return require(self._section('version'), 'name', 'version')

    @property
    def version_label(self) -> Optional[str]:
        return self.version_name

    @property
    def gamemode(self) -> Optional[str]:
        return self._online_field('gamemode')

    @property
    def server_id(self) -> Optional[str]:
        return self._online_field('server_id')

    @property
    def edition(self) -> Optional[str]:
        """MCPE or MCEE"""
        return self._online_field('edition')

    def summary(self) -> StatusSummary:
        summary = super().summary()
        summary.gamemode = self.gamemode
        return summary

async def _fetch_document(url: str, timeout: float, transport: Optional[Transport],
                          config: ClientConfig) -> Dict[str, Any]:
    """GET a status URL and parse the body"""
    transport = transport or AiohttpTransport(config.user_agent)
    response = await transport.get(url, timeout + config.timeout_margin)

    if response.status != 200:
        logger.warning(f"Status request to {url} returned HTTP {response.status}")
        raise RemoteError(response.status, url)

    return parse_document(response.body)

async def fetch_java_status(address: str, query: bool = True, timeout: float = DEFAULT_TIMEOUT,
                            transport: Optional[Transport] = None,
                            config: Optional[ClientConfig] = None) -> FetchResult[JavaStatus]:
    """Fetch the status of a Java edition server"""
    config = config or ClientConfig()
    try:
        url = java_status_url(address, query, timeout, config.api_base)
        document = await _fetch_document(url, timeout, transport, config)
    except McStatusError as e:
        logger.debug(f"Java status fetch for {address!r} failed: {e}")
        return FetchResult.failure(e)

    return FetchResult.success(JavaStatus(document))

async def fetch_bedrock_status(address: str, timeout: float = DEFAULT_TIMEOUT,
                               transport: Optional[Transport] = None,
                               config: Optional[ClientConfig] = None) -> FetchResult[BedrockStatus]:
    """Fetch the status of a Bedrock edition server"""
    config = config or ClientConfig()
    try:
        url = bedrock_status_url(address, timeout, config.api_base)
        document = await _fetch_document(url, timeout, transport, config)
    except McStatusError as e:
        logger.debug(f"Bedrock status fetch for {address!r} failed: {e}")
        return FetchResult.failure(e)

    return FetchResult.success(BedrockStatus(document))

def get_java_status(address: str, query: bool = True, timeout: float = DEFAULT_TIMEOUT,
                    transport: Optional[Transport] = None,
                    config: Optional[ClientConfig] = None) -> FetchResult[JavaStatus]:
    """Blocking fetch_java_status. Must not be called from a running event loop."""
    return asyncio.run(fetch_java_status(address, query, timeout, transport, config))

def get_bedrock_status(address: str, timeout: float = DEFAULT_TIMEOUT,
                       transport: Optional[Transport] = None,
                       config: Optional[ClientConfig] = None) -> FetchResult[BedrockStatus]:
    """Blocking fetch_bedrock_status. Must not be called from a running event loop."""
    return asyncio.run(fetch_bedrock_status(address, timeout, transport, config))
