from __future__ import annotations

import logging
import requests
from typing import Any, Dict, Optional

from tempmail_mcp.core.errors import TransportError, UpstreamHttpError, UpstreamPayloadError

logger = logging.getLogger(__name__)


class TempMailClient:
    def __init__(
            self,
            base_url: str,
            api_key: str,
            *,
            timeout: Optional[float] = 30.0,
            session: Optional[requests.Session] = None,
    ):
        """
        Thin client for the temp mail REST API.

        :param base_url: Service root, e.g. https://chat-tempmail.com
        :param api_key: Value sent in the X-API-Key header
        :param timeout: Per-request timeout in seconds (None waits forever)
        :param session: Optional pre-built session (tests inject a fake one)
        """
        base_url = (base_url or "").strip()
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def headers(self) -> Dict[str, str]:
        return {
            "X-API-Key": self.api_key,
            "Content-Type": "application/json",
        }

    def request(
            self,
            method: str,
            path: str,
            *,
            params: Optional[Dict[str, Any]] = None,
            json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        :raises TransportError: the request never got a response
        :raises UpstreamHttpError: the service answered with a non-2xx status
        :raises UpstreamPayloadError: a 2xx answer whose body is not JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)

        try:
            r = self.session.request(
                method,
                url,
                headers=self.headers(),
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(str(e)) from e

        if not 200 <= r.status_code < 300:
            body = self._body(r)
            logger.warning("%s %s -> %s %s", method, url, r.status_code, body)
            raise UpstreamHttpError(r.status_code, r.reason or "", body)

        if not (r.text or "").strip():
            return {}
        try:
            return r.json()
        except ValueError as e:
            raise UpstreamPayloadError(f"{method} {path}", f"body is not JSON ({e})") from e

    @staticmethod
    def _body(r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError:
            return (r.text or "")[:2000]

    def close(self) -> None:
        self.session.close()
