"""Clio Manage API v4 transport.

Handles all HTTP communication with Clio: authenticated JSON requests,
cursor pagination over list endpoints, and binary document upload/download.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from clio_adapter.config import settings
from clio_adapter.constants import API_ENDPOINTS, DEFAULT_REGION
from clio_adapter.exceptions import ClioAdapterError
from clio_adapter.models.clio import ClioApiResponse
from clio_adapter.services.credentials import TEST_REQUEST_PATH, ClioCredentials, TokenError


class ClioAPIError(ClioAdapterError):
    """Raised when Clio returns a non-2xx response or cannot be reached."""

    def __init__(self, status_code: int | None, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Clio API {status_code}: {detail}")


def get_base_url(region: str | None) -> str:
    """Return the API base URL for a region, defaulting to the US data center."""
    return API_ENDPOINTS.get(region or DEFAULT_REGION, API_ENDPOINTS[DEFAULT_REGION])


def _form_fields(fields: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested dicts into ``parent[child]`` multipart form keys."""
    flat: dict[str, str] = {}
    for key, value in fields.items():
        name = f"{prefix}[{key}]" if prefix else key
        if isinstance(value, dict):
            flat.update(_form_fields(value, name))
        elif value is not None:
            flat[name] = str(value)
    return flat


class ClioClient:
    """Async HTTP client for the Clio Manage API v4.

    Usage::

        async with ClioClient() as clio:
            me = await clio.who_am_i()
    """

    def __init__(
        self,
        credentials: ClioCredentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        page_size: int | None = None,
        max_pages: int | None = None,
    ) -> None:
        # Clients built from settings keep refreshed tokens there for the next client
        self._sync_settings = credentials is None
        self.credentials = credentials or ClioCredentials.from_settings()
        self.page_size = page_size or settings.clio_page_size
        self.max_pages = max_pages or settings.clio_max_pages

        self._http = httpx.AsyncClient(
            base_url=get_base_url(self.credentials.region),
            timeout=timeout or settings.clio_request_timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    def _build_headers(self, extra: dict[str, str] | None = None, *, json_content: bool = True) -> dict[str, str]:
        headers = {"Accept": "application/json", **self.credentials.auth_headers()}
        if json_content:
            headers["Content-Type"] = "application/json"
        if extra:
            headers.update(extra)
        return headers

    # -- Context manager ---------------------------------------------------

    async def __aenter__(self) -> ClioClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- Central send method -----------------------------------------------

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict | None = None,
        json_body: dict | None = None,
        headers: dict[str, str] | None = None,
        json_content: bool = True,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send one request; a 401 triggers a single token refresh when possible.

        Any other failure is wrapped into ClioAPIError and raised, nothing is retried.
        """
        refreshed = False
        while True:
            logger.debug("Clio {} {} params={}", method, url, params)

            request_kwargs: dict[str, Any] = {
                "params": params,
                "headers": self._build_headers(headers, json_content=json_content),
                **kwargs,
            }
            if json_body:
                request_kwargs["json"] = json_body

            try:
                resp = await self._http.request(method, url, **request_kwargs)
            except httpx.HTTPError as e:
                logger.error("Clio request {} {} failed: {}", method, url, e)
                raise ClioAPIError(None, f"{type(e).__name__}: {e}") from e

            # 401 → refresh token and retry once
            if resp.status_code == 401 and not refreshed and self.credentials.can_refresh:
                logger.warning("Got 401, refreshing token…")
                try:
                    await self.credentials.refresh(http=self._http)
                except TokenError as e:
                    raise ClioAPIError(e.status_code, f"Token refresh failed: {e.detail}") from e
                if self._sync_settings:
                    settings.clio_access_token = self.credentials.access_token
                    settings.clio_refresh_token = self.credentials.refresh_token
                refreshed = True
                continue

            if 200 <= resp.status_code < 300:
                return resp

            detail = resp.text[:500]
            logger.error("Clio API error {} on {} {}: {}", resp.status_code, method, url, detail)
            raise ClioAPIError(resp.status_code, detail)

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        # Some endpoints return empty body (204)
        if resp.status_code == 204 or not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise ClioAPIError(resp.status_code, f"Invalid JSON in response: {resp.text[:200]}") from e

    # =====================================================================
    # JSON requests
    # =====================================================================

    async def request(
        self,
        method: str,
        endpoint: str,
        body: dict | None = None,
        qs: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a JSON request and unwrap the ``data`` member when present.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE).
            endpoint: Path relative to the region's API base, e.g. ``/matters/1.json``.
            body: JSON body; omitted when empty.
            qs: Query parameters.
            headers: Extra headers merged over the defaults.
        """
        resp = await self._send(method, endpoint, params=qs or None, json_body=body, headers=headers)
        payload = self._decode(resp)
        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload

    async def request_with_meta(
        self,
        method: str,
        endpoint: str,
        body: dict | None = None,
        qs: dict | None = None,
    ) -> ClioApiResponse:
        """Send a JSON request and return the full ``{data, meta}`` envelope."""
        resp = await self._send(method, endpoint, params=qs or None, json_body=body)
        payload = self._decode(resp)
        if not isinstance(payload, dict):
            return ClioApiResponse(data=payload)
        try:
            return ClioApiResponse.model_validate(payload)
        except ValidationError as e:
            raise ClioAPIError(resp.status_code, f"Unexpected response shape: {e}") from e

    async def request_all_items(
        self,
        method: str,
        endpoint: str,
        body: dict | None = None,
        qs: dict | None = None,
        limit: int = 0,
    ) -> list[dict]:
        """Walk every page of a list endpoint and return the accumulated items.

        The first page is requested with ``page[size]``; after that the
        ``meta.paging.next`` link is followed as-is until it disappears.
        With ``limit > 0`` walking stops as soon as enough items are in hand.
        At most ``max_pages`` pages are fetched; hitting that cap returns what
        was collected so far.
        """
        params: dict | None = {**(qs or {}), "page[size]": self.page_size}
        url = endpoint
        items: list[dict] = []

        for page in range(1, self.max_pages + 1):
            response = await self.request_with_meta(method, url, body, params)

            if isinstance(response.data, list):
                items.extend(response.data)
            elif response.data:
                items.append(response.data)

            if limit > 0 and len(items) >= limit:
                return items[:limit]

            next_url = response.next_page
            if not next_url:
                logger.debug("Fetched {} items from {} in {} page(s)", len(items), endpoint, page)
                return items

            # The cursor link already carries every query parameter
            url, params = next_url, None

        logger.warning(
            "Pagination cap of {} pages reached on {}; returning {} items",
            self.max_pages,
            endpoint,
            len(items),
        )
        return items

    request_with_pagination = request_all_items

    async def load_options(
        self,
        endpoint: str,
        label_field: str = "name",
        value_field: str = "id",
    ) -> list[dict]:
        """Fetch every item of a list endpoint as ``{name, value}`` pick-list options."""
        data = await self.request_all_items("GET", endpoint)
        return [
            {
                "name": item.get(label_field) or str(item.get(value_field)),
                "value": item.get(value_field),
            }
            for item in data
        ]

    # =====================================================================
    # Binary documents
    # =====================================================================

    async def download(self, endpoint: str) -> bytes:
        """Download a file's content as raw bytes."""
        resp = await self._send("GET", endpoint, headers={"Accept": "*/*"}, json_content=False)
        return resp.content

    async def upload(
        self,
        endpoint: str,
        content: bytes,
        filename: str,
        mime_type: str,
        additional_fields: dict | None = None,
    ) -> dict:
        """Upload a file as multipart form data alongside extra form fields."""
        resp = await self._send(
            "POST",
            endpoint,
            json_content=False,
            files={"file": (filename, content, mime_type)},
            data=_form_fields(additional_fields or {}),
        )
        payload = self._decode(resp)
        logger.info("Uploaded '{}' ({} bytes) to {}", filename, len(content), endpoint)
        if isinstance(payload, dict) and payload.get("data"):
            return payload["data"]
        return payload

    download_document = download
    upload_document = upload

    # =====================================================================
    # Identity
    # =====================================================================

    async def who_am_i(self, fields: str | None = None) -> dict:
        """Get the authenticated user's info (also the credential test request)."""
        qs = {"fields": fields} if fields else None
        return await self.request("GET", f"{TEST_REQUEST_PATH}.json", qs=qs)
