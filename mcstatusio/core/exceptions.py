"""
Custom exceptions for mcstatusio
"""

from typing import Optional


class McStatusError(Exception):
    """Base exception for mcstatusio"""
    pass

class InvalidArgumentError(McStatusError):
    """Bad input rejected before any I/O"""
    pass

class TransportError(McStatusError):
    """DNS, connect, timeout or read failure"""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None, timed_out: bool = False):
        super().__init__(message)
        self.cause = cause
        self.timed_out = timed_out

class RemoteError(McStatusError):
    """Non-200 HTTP response from the API"""
    
    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"API returned HTTP {status_code}" + (f" for {url}" if url else ""))
        self.status_code = status_code
        self.url = url

class ParseError(McStatusError):
    """Response body is not a valid JSON document"""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

class MissingFieldError(McStatusError):
    """Required field absent from an otherwise well-formed document"""
    
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field

class IconDecodeError(McStatusError):
    """Icon bytes are not a valid image"""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

class ConfigError(McStatusError):
    """Configuration-related errors"""
    pass

class ExportError(McStatusError):
    """Export-related errors"""
    pass
