"""
Server icon client
"""

import asyncio
import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .exceptions import McStatusError, RemoteError, IconDecodeError
from .config_types import ClientConfig, DEFAULT_TIMEOUT
from .request import icon_url as build_icon_url
from .result import FetchResult
from .transport import Transport, AiohttpTransport

logger = logging.getLogger(__name__)

def icon_url(address: str, timeout: float = DEFAULT_TIMEOUT, config: Optional[ClientConfig] = None) -> str:
    """Direct image URL for a server's icon"""
    config = config or ClientConfig()
    return build_icon_url(address, timeout, config.api_base)

def decode_icon(data: bytes) -> Image.Image:
    """Decode image bytes into a fully loaded PIL image"""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise IconDecodeError(f"Icon is not a valid image: {e}", cause=e) from e
    return image

async def fetch_icon(address: str, timeout: float = DEFAULT_TIMEOUT,
                     transport: Optional[Transport] = None,
                     config: Optional[ClientConfig] = None) -> FetchResult[Image.Image]:
    """Download and decode a server icon.

    Failures are returned in the result rather than swallowed: RemoteError for
    a non-200 response, TransportError for network trouble and IconDecodeError
    when the body is not an image.
    """
    config = config or ClientConfig()
    transport = transport or AiohttpTransport(config.user_agent)
    url = icon_url(address, timeout, config)

    try:
        response = await transport.get(url, timeout + config.timeout_margin)
        if response.status != 200:
            logger.warning(f"Icon request to {url} returned HTTP {response.status}")
            raise RemoteError(response.status, url)
        image = decode_icon(response.body)
    except McStatusError as e:
        logger.error(f"Error downloading the icon for {address!r}: {e}")
        return FetchResult.failure(e)

    return FetchResult.success(image)

def get_icon(address: str, timeout: float = DEFAULT_TIMEOUT,
             transport: Optional[Transport] = None,
             config: Optional[ClientConfig] = None) -> FetchResult[Image.Image]:
    """Blocking fetch_icon"""
    return asyncio.run(fetch_icon(address, timeout, transport, config))

class IconClient:
    """Icon lookups sharing one transport and configuration"""

    def __init__(self, transport: Optional[Transport] = None, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self.transport = transport or AiohttpTransport(self.config.user_agent)

    def url(self, address: str, timeout: float = DEFAULT_TIMEOUT) -> str:
        return icon_url(address, timeout, self.config)

    async def fetch(self, address: str, timeout: float = DEFAULT_TIMEOUT) -> FetchResult[Image.Image]:
        return await fetch_icon(address, timeout, self.transport, self.config)

    def get(self, address: str, timeout: float = DEFAULT_TIMEOUT) -> FetchResult[Image.Image]:
        return get_icon(address, timeout, self.transport, self.config)
