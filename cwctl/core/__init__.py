"""Core functionality for cwctl."""

from .http_client import create_client, dispatch_http_request

__all__ = [
    'create_client',
    'dispatch_http_request'
]
