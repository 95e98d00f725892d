"""
HTTP Client - Timeout-bounded HTTP requests for nodes.

All HTTP calls use timeouts (sync worker requirement).
This module wraps requests and turns a RequestSpec into a parsed
JSON payload, or raises a structured error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import requests
from requests.exceptions import Timeout, RequestException

if TYPE_CHECKING:
    from helium_nodes.models import RequestSpec


logger = logging.getLogger(__name__)

# Default timeout in seconds
DEFAULT_TIMEOUT = 30


class NodeTimeoutError(Exception):
    """Raised when an HTTP request times out."""
    
    def __init__(self, message: str, timeout: float, url: str):
        self.timeout = timeout
        self.url = url
        super().__init__(message)


class HttpApiError(Exception):
    """
    Error from HTTP request.
    
    status_code is None when the request never produced a response
    (DNS failure, refused connection, TLS error, ...).
    """
    
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Any = None,
        url: Optional[str] = None,
        method: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        self.url = url
        self.method = method
        super().__init__(message)


class HttpResponse:
    """
    Wrapper for HTTP response with convenient accessors.
    """
    
    def __init__(self, response: requests.Response):
        self._response = response
    
    @property
    def status_code(self) -> int:
        return self._response.status_code
    
    @property
    def text(self) -> str:
        return self._response.text
    
    @property
    def ok(self) -> bool:
        """True if status code is below 400."""
        return self._response.ok
    
    def json(self) -> Any:
        """Parse response as JSON. An empty body yields an empty dict."""
        if not self._response.content:
            return {}
        return self._response.json()
    
    def body(self) -> Any:
        """Response body as JSON when possible, else the (truncated) text."""
        try:
            return self.json()
        except ValueError:
            return self.text[:1000] if self.text else None
    
    def raise_for_status(self) -> None:
        """Raise HttpApiError if status code indicates error."""
        if not self.ok:
            raise HttpApiError(
                message=f"HTTP {self.status_code}: {self._response.reason}",
                status_code=self.status_code,
                response_body=self.body(),
                url=str(self._response.url),
                method=self._response.request.method if self._response.request else None,
            )


class HttpClient:
    """
    HTTP client with timeout enforcement.
    
    Usage:
        client = HttpClient(timeout=10)
        payload = client.send(request_spec)
    """
    
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        default_headers: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize HTTP client.
        
        Args:
            timeout: Timeout in seconds for every request
            default_headers: Headers included in all requests
            session: Optional requests session (connection reuse)
        """
        self.timeout = timeout
        self.headers: Dict[str, str] = dict(default_headers or {})
        self._session = session
    
    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """
        Make HTTP request with timeout enforcement.
        
        Args:
            method: HTTP method (GET, POST, PATCH, DELETE, ...)
            url: Absolute URL
            params: Query parameters (form-encoded by requests)
            json: JSON body (auto-serialized)
            headers: Additional headers (merged with defaults)
            timeout: Override default timeout
            
        Returns:
            HttpResponse wrapper
            
        Raises:
            NodeTimeoutError: If request times out
            HttpApiError: If the request could not be completed
        """
        request_headers = {**self.headers, **(headers or {})}
        request_timeout = timeout or self.timeout
        sender = self._session.request if self._session is not None else requests.request
        
        try:
            response = sender(
                method=method,
                url=url,
                params=params,
                json=json,
                headers=request_headers,
                timeout=request_timeout,
            )
            return HttpResponse(response)
            
        except Timeout as e:
            raise NodeTimeoutError(
                message=f"Request timed out after {request_timeout}s",
                timeout=request_timeout,
                url=url,
            ) from e
            
        except RequestException as e:
            raise HttpApiError(
                message=f"Request failed: {e}",
                url=url,
                method=method,
            ) from e
    
    def send(self, spec: "RequestSpec") -> Any:
        """
        Execute a RequestSpec and return the decoded JSON response.
        
        Raises:
            HttpApiError: Non-2xx response (with status and body) or
                transport failure (without status)
            NodeTimeoutError: If the request times out
        """
        logger.debug("%s %s query=%s", spec.method, spec.url, spec.query)
        response = self.request(
            spec.method,
            spec.url,
            params=spec.query,
            json=spec.body,
            headers=spec.headers,
        )
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            raise HttpApiError(
                message=f"Invalid JSON in response: {e}",
                status_code=response.status_code,
                response_body=response.text[:1000],
                url=spec.url,
                method=spec.method,
            ) from e
