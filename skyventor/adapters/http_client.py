"""Shared HTTP transport utilities for the backend REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the
adapter shares one timeout policy, retry behavior, and API-key header
construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``skyventor.adapters.api_errors.ApiTimeoutError`` for typed transport
      failures.

Call context:
    - Constructed by ``skyventor/adapters/backend_rest.py``.
    - Used only inside adapter methods; use cases interact through ports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from skyventor.adapters.api_errors import ApiError, ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of retry attempts after the initial request.
    """
    request_timeout_s: float = 10
    retries: int = 2


class RetryingSession:
    """Shared requests wrapper with API-key headers and retry loops.

    Transport-only: callers provide endpoint URLs and decide how to map
    non-2xx responses into typed errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg
        self._log = logging.getLogger(__name__)

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a GET request with retries on timeout/connectivity failures.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
            ApiError: For any other ``requests`` failure.
        """
        return self._send("GET", url, params=params, timeout=timeout)

    def put(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a JSON PUT request with retries on transport failures."""
        return self._send("PUT", url, json_body=json_body, timeout=timeout)

    def _send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        context = f"{method} {url}"
        data = None if json_body is None else json.dumps(json_body)
        attempts = self.cfg.retries + 1
        last_err: Optional[ApiTimeoutError] = None
        for attempt in range(1, attempts + 1):
            try:
                return self.session.request(
                    method,
                    url,
                    params=params,
                    data=data,
                    headers=self._headers(json_body=json_body is not None),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError) as exc:
                self._log.debug("%s failed (attempt %d/%d): %s", context, attempt, attempts, exc)
                last_err = ApiTimeoutError(f"Timeout contacting {url}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise last_err


__all__ = ["HttpConfig", "RetryingSession"]
