"""
mcstatusio core package
"""

from .status import BaseStatus, JavaStatus, BedrockStatus
from .icon import IconClient, decode_icon
from .transport import Transport, AiohttpTransport, HttpResponse
from .result import FetchResult
from .config import ConfigManager
from .exceptions import *

__all__ = [
    'BaseStatus',
    'JavaStatus',
    'BedrockStatus',
    'IconClient',
    'decode_icon',
    'Transport',
    'AiohttpTransport',
    'HttpResponse',
    'FetchResult',
    'ConfigManager',
    'McStatusError',
    'InvalidArgumentError',
    'TransportError',
    'RemoteError',
    'ParseError',
    'MissingFieldError',
    'IconDecodeError',
    'ConfigError',
    'ExportError'
]
