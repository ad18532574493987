"""
HTTP transport used by the status and icon clients
"""

import asyncio
import logging
from typing import Optional
from dataclasses import dataclass
from abc import ABC, abstractmethod

import aiohttp

from .exceptions import TransportError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class HttpResponse:
    """Fully read HTTP response"""
    status: int
    body: bytes
    content_type: Optional[str] = None

class Transport(ABC):
    """Performs a single HTTP GET and returns the complete response"""
    
    @abstractmethod
    async def get(self, url: str, timeout: float) -> HttpResponse:
        """GET url, raising TransportError on network failure or timeout"""
        pass

class AiohttpTransport(Transport):
    """aiohttp-backed transport, one session per request"""
    
    def __init__(self, user_agent: Optional[str] = None):
        self.headers = {'User-Agent': user_agent} if user_agent else {}
    
    async def get(self, url: str, timeout: float) -> HttpResponse:
        logger.debug(f"GET {url} (timeout {timeout}s)")
        try:
            client_timeout = aiohttp.ClientTimeout(total=timeout)
            async with aiohttp.ClientSession(timeout=client_timeout, headers=self.headers) as session:
                async with session.get(url) as response:
                    body = await response.read()
                    return HttpResponse(
                        status=response.status,
                        body=body,
                        content_type=response.content_type
                    )
        except asyncio.TimeoutError as e:
            logger.error(f"Request to {url} timed out after {timeout}s")
            raise TransportError(f"Request timed out after {timeout}s", cause=e, timed_out=True) from e
        except aiohttp.ClientError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"Request failed: {e}", cause=e) from e
