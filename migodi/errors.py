"""
Error types raised by the Migodi API client
"""
from enum import Enum
from typing import Dict, Optional


class ErrorKind(Enum):
    """Failure categories, usable for branching without matching on messages"""
    API = "api"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    NETWORK = "network"


class MigodiError(Exception):
    """
    Error raised for every failed client operation

    Attributes:
        message: Human-readable description
        code: Machine-readable code (AUTH_ERROR, RATE_LIMIT, TIMEOUT, ...)
        status: HTTP status code, None when no response was received
        kind: ErrorKind discriminant
    """

    def __init__(self, message: str, code: str, status: Optional[int] = None,
                 kind: ErrorKind = ErrorKind.API):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.kind = kind

    @classmethod
    def auth(cls, message: str = "Authentication failed") -> 'MigodiError':
        return cls(message, 'AUTH_ERROR', 401, ErrorKind.AUTH)

    @classmethod
    def rate_limit(cls, message: str = "Rate limit exceeded") -> 'MigodiError':
        return cls(message, 'RATE_LIMIT', 429, ErrorKind.RATE_LIMIT)

    @classmethod
    def validation(cls, message: str) -> 'MigodiError':
        return cls(message, 'VALIDATION_ERROR', None, ErrorKind.VALIDATION)

    @classmethod
    def timeout(cls, message: str = "Request timeout") -> 'MigodiError':
        return cls(message, 'TIMEOUT', None, ErrorKind.TIMEOUT)

    @classmethod
    def network(cls, message: str = "Unknown error") -> 'MigodiError':
        return cls(message, 'NETWORK_ERROR', None, ErrorKind.NETWORK)

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            'kind': self.kind.value,
            'message': self.message,
            'code': self.code,
            'status': self.status
        }

    def __repr__(self):
        return (f"MigodiError(kind={self.kind.value!r}, code={self.code!r}, "
                f"status={self.status!r}, message={self.message!r})")
