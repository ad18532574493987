"""
mcstatusio - Minecraft server status client

Typed bindings for the mcstatus.io v2 web API: Java and Bedrock server
status lookups and server icon downloads.
"""

__version__ = "0.1.0"
__author__ = "mcstatusio contributors"
__license__ = "MIT"
__description__ = "Client for the mcstatus.io Minecraft server status API"

# Core imports for easy access
from .core.status import (
    JavaStatus, BedrockStatus,
    fetch_java_status, fetch_bedrock_status,
    get_java_status, get_bedrock_status
)
from .core.icon import IconClient, icon_url, fetch_icon, get_icon
from .core.result import FetchResult
from .core.exceptions import McStatusError

# Version info
VERSION_INFO = {
    'version': __version__,
    'author': __author__,
    'license': __license__,
    'description': __description__
}

def get_version():
    """Get version string"""
    return __version__

def get_version_info():
    """Get detailed version information"""
    return VERSION_INFO.copy()

# Main exports
__all__ = [
    'JavaStatus',
    'BedrockStatus',
    'fetch_java_status',
    'fetch_bedrock_status',
    'get_java_status',
    'get_bedrock_status',
    'IconClient',
    'icon_url',
    'fetch_icon',
    'get_icon',
    'FetchResult',
    'McStatusError',
    'get_version',
    'get_version_info',
    '__version__'
]
