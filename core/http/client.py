"""
HTTP Client

requests-based transport for the prover service adapter.

Proof generation can take minutes, so the default timeout is generous
and callers may override it per request. Transport failures surface as
HttpError; status handling is left to the caller.
"""

from __future__ import annotations

import json as jsonlib
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "shielded-transfer/0.1.0"


@dataclass
class HttpResponse:
    """Status, body and headers of a completed request."""
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body; raises ValueError on malformed JSON."""
        return jsonlib.loads(self.content)

    def raise_for_status(self) -> None:
        if not self.ok:
            raise HttpError(
                f"HTTP {self.status_code} from {self.url or 'server'}",
                status_code=self.status_code,
                response=self,
            )


class HttpError(Exception):
    """Connection failure, timeout, or a status rejected by raise_for_status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[HttpResponse] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class HttpClient:
    """
    Blocking HTTP client sharing one requests session.

    The session is created on first use and released by close() or by
    leaving a `with` block.

    Usage:
        with HttpClient(timeout=600) as client:
            response = client.post("http://localhost:8080/prove", json=payload)
            response.raise_for_status()
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        default_headers: Optional[dict[str, str]] = None,
        proxy: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        self.default_headers = {"User-Agent": DEFAULT_USER_AGENT, **(default_headers or {})}
        self.proxy = proxy
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers.update(self.default_headers)
            if self.proxy:
                session.proxies = {"http": self.proxy, "https": self.proxy}
            self._session = session
        return self._session

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """
        Send a request and wrap the result.

        Args:
            method: HTTP verb
            url: Absolute URL
            headers: Extra headers merged over the defaults
            params: Query string parameters
            json: JSON-serializable body
            timeout: Seconds; falls back to the client default

        Raises:
            HttpError: If the request could not be completed
        """
        merged_headers = {**self.default_headers, **(headers or {})}

        try:
            raw = self._get_session().request(
                method=method,
                url=url,
                headers=merged_headers,
                params=params,
                json=json,
                timeout=timeout or self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise HttpError(str(e)) from e

        response = HttpResponse(
            status_code=raw.status_code,
            content=raw.content,
            headers=dict(raw.headers),
            url=str(raw.url),
            elapsed_ms=raw.elapsed.total_seconds() * 1000,
        )
        logger.debug(
            "%s %s -> %d (%.0f ms)", method, url, response.status_code, response.elapsed_ms
        )
        return response

    def get(self, url: str, **kwargs: Any) -> HttpResponse:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> HttpResponse:
        return self.request("POST", url, **kwargs)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["DEFAULT_USER_AGENT", "HttpClient", "HttpError", "HttpResponse"]
