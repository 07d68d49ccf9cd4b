"""Async HTTP transport used by provider adapters.

Each request opens a short-lived `httpx.AsyncClient` that follows redirects,
so nothing is shared between calls and no client has to be closed. Any
response with status >= 400, and any network failure or timeout, surfaces as
`TransportError`. There are no retries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from .errors import TransportError
from .url_utils import clean_params

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

DEFAULT_TIMEOUT = 10.0
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_BODY_FORM_METHODS = {"POST", "PUT", "PATCH"}


class HttpClient:
    """Thin wrapper around httpx with form encoding and uniform error surfacing.

    Args:
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (e.g. `httpx.MockTransport` in tests).
        headers: Headers sent with every request.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: Mapping[str, str] | None = None,
    ):
        self.timeout = timeout
        self._transport = transport
        self._headers = dict(headers or {})

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            headers=self._headers,
            follow_redirects=True,
        )

    async def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        """Send a request and return the parsed response body.

        `data` on POST/PUT/PATCH is form-encoded unless a non-form Content-Type
        is given, in which case it is sent as JSON. `data` on other methods is
        always sent as a JSON body.

        Returns:
            Parsed JSON, raw text when the body is not JSON, or None when empty.

        Raises:
            TransportError: status >= 400, connection failure or timeout.
        """
        request_headers = dict(headers or {})
        content_type = next(
            (value for key, value in request_headers.items() if key.lower() == "content-type"),
            None,
        )

        form: dict[str, str] | None = None
        json_body: Any = None
        if data is not None:
            if method in _BODY_FORM_METHODS and (
                content_type is None or FORM_CONTENT_TYPE in content_type
            ):
                form = clean_params(data)
                if content_type is None:
                    request_headers["Content-Type"] = FORM_CONTENT_TYPE
            else:
                json_body = dict(data)

        basic_auth = httpx.BasicAuth(*auth) if auth is not None else None

        logger.debug(f"{method} {url}")
        try:
            async with self._create_client() as client:
                response = await client.request(
                    method,
                    url,
                    headers=request_headers,
                    params=clean_params(params),
                    data=form,
                    json=json_body,
                    auth=basic_auth if basic_auth is not None else httpx.USE_CLIENT_DEFAULT,
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "HTTP request failed",
                extra={"method": method, "url": url, "error": type(exc).__name__},
            )
            raise TransportError(
                f"Request failed: {method} {url}: {exc}", method=method, url=url
            ) from exc

        body = self._parse_body(response)
        if response.status_code >= 400:
            logger.warning(
                "HTTP request returned error status",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise TransportError(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=body,
                method=method,
                url=url,
            )
        return body

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self.request("GET", url, headers=headers, params=params)

    async def post(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", url, headers=headers, data=data, auth=auth)

    async def put(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        return await self.request("PUT", url, headers=headers, data=data, auth=auth)

    async def patch(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        return await self.request("PATCH", url, headers=headers, data=data, auth=auth)

    async def delete(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: Mapping[str, Any] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        return await self.request("DELETE", url, headers=headers, data=data, auth=auth)


__all__ = ["DEFAULT_TIMEOUT", "FORM_CONTENT_TYPE", "HttpClient", "HttpMethod"]
