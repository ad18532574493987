"""
Typed fetch result
"""

from typing import Generic, Optional, TypeVar
from dataclasses import dataclass

from .exceptions import McStatusError

T = TypeVar('T')

@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single fetch: either a value or the error that prevented it"""
    value: Optional[T] = None
    error: Optional[McStatusError] = None
    
    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of value or error")
    
    @classmethod
    def success(cls, value: T) -> 'FetchResult[T]':
        return cls(value=value)
    
    @classmethod
    def failure(cls, error: McStatusError) -> 'FetchResult[T]':
        return cls(error=error)
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    def unwrap(self) -> T:
        """Return the value or raise the stored error"""
        if self.error is not None:
            raise self.error
        return self.value
    
    def unwrap_or(self, default: T) -> T:
        return self.value if self.error is None else default
