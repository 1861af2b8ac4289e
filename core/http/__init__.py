"""
HTTP Client Module

requests-based HTTP client for the prover service adapter.
"""

from .client import HttpClient, HttpError, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
]
