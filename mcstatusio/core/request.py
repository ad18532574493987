"""
Request builders for the mcstatus.io v2 endpoints
"""

from urllib.parse import quote

from .exceptions import InvalidArgumentError
from .config_types import API_BASE, DEFAULT_TIMEOUT

def format_timeout(timeout: float) -> str:
    """Render a timeout the way the API expects (5 -> '5.0')"""
    return str(float(timeout))

def format_bool(value: bool) -> str:
    return 'true' if value else 'false'

def quote_address(address: str) -> str:
    """URL-encode an address, keeping host:port and IPv6 brackets readable"""
    return quote(address, safe=':[]')

def validate_address(address) -> str:
    """Reject None, non-string and blank addresses"""
    if address is None or not isinstance(address, str) or not address.strip():
        raise InvalidArgumentError("Server address cannot be null or empty")
    return address

def java_status_url(address: str, query: bool = True, timeout: float = DEFAULT_TIMEOUT,
                    api_base: str = API_BASE) -> str:
    validate_address(address)
    return (f"{api_base.rstrip('/')}/status/java/{quote_address(address)}"
            f"?query={format_bool(query)}&timeout={format_timeout(timeout)}")

def bedrock_status_url(address: str, timeout: float = DEFAULT_TIMEOUT,
                       api_base: str = API_BASE) -> str:
    validate_address(address)
    return (f"{api_base.rstrip('/')}/status/bedrock/{quote_address(address)}"
            f"?timeout={format_timeout(timeout)}")

def icon_url(address: str, timeout: float = DEFAULT_TIMEOUT, api_base: str = API_BASE) -> str:
    """Direct image URL for a server icon. Pure formatting, no validation."""
    return f"{api_base.rstrip('/')}/icon/{quote_address(address)}?timeout={format_timeout(timeout)}"
