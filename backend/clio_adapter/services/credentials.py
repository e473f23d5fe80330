"""Clio OAuth2 credential descriptor.

Resolves the region-specific authorize / token / API endpoints and performs
the two form-encoded token grants (authorization code and refresh token).
Tokens only ever live in memory; storing them is the host's job.
"""

from __future__ import annotations

from urllib.parse import urlencode

import httpx
from loguru import logger
from pydantic import BaseModel

from clio_adapter.config import settings
from clio_adapter.constants import API_ENDPOINTS, CREDENTIAL_NAME, DEFAULT_REGION, OAUTH_HOSTS, REGIONS

TEST_REQUEST_PATH = "/users/who_am_i"


def normalize_region(region: str | None) -> str:
    """Map an unknown or empty region to the US default."""
    region = (region or "").strip().lower()
    return region if region in OAUTH_HOSTS else DEFAULT_REGION


def oauth_base_url(region: str | None) -> str:
    return OAUTH_HOSTS[normalize_region(region)]


def authorization_url(region: str | None) -> str:
    return f"{oauth_base_url(region)}/oauth/authorize"


def access_token_url(region: str | None) -> str:
    return f"{oauth_base_url(region)}/oauth/token"


def api_base_url(region: str | None) -> str:
    return API_ENDPOINTS[normalize_region(region)]


class TokenError(Exception):
    """Raised when Clio refuses a token grant."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Clio token request {status_code}: {detail}")


class ClioCredentials(BaseModel):
    """Decrypted ``clioOAuth2Api`` credential values."""

    region: str = DEFAULT_REGION
    access_token: str = ""
    refresh_token: str = ""
    client_id: str = ""
    client_secret: str = ""

    @classmethod
    def from_settings(cls) -> ClioCredentials:
        return cls(
            region=settings.clio_region,
            access_token=settings.clio_access_token,
            refresh_token=settings.clio_refresh_token,
            client_id=settings.clio_client_id,
            client_secret=settings.clio_client_secret,
        )

    @property
    def authorization_url(self) -> str:
        return authorization_url(self.region)

    @property
    def access_token_url(self) -> str:
        return access_token_url(self.region)

    @property
    def api_base_url(self) -> str:
        return api_base_url(self.region)

    @property
    def can_refresh(self) -> bool:
        return bool(self.refresh_token and self.client_id and self.client_secret)

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    def build_authorization_url(self, redirect_uri: str, state: str | None = None) -> str:
        """Authorization-code URL the user is sent to."""
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
        }
        if state:
            params["state"] = state
        return f"{self.authorization_url}?{urlencode(params)}"

    async def exchange_code(
        self,
        code: str,
        redirect_uri: str,
        *,
        http: httpx.AsyncClient | None = None,
    ) -> dict:
        """Exchange an authorization code for tokens and keep them on this object."""
        body = await self._token_request(
            {
                "grant_type": "authorization_code",
                "code": code,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": redirect_uri,
            },
            http=http,
        )
        self.access_token = body["access_token"]
        self.refresh_token = body.get("refresh_token", self.refresh_token)
        return body

    async def refresh(self, *, http: httpx.AsyncClient | None = None) -> dict:
        """Refresh the access token using the refresh token."""
        logger.info("Refreshing Clio access token ({} region)…", normalize_region(self.region))
        body = await self._token_request(
            {
                "grant_type": "refresh_token",
                "refresh_token": self.refresh_token,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            http=http,
        )
        self.access_token = body["access_token"]
        # Clio only rotates the refresh token on some grants
        self.refresh_token = body.get("refresh_token") or self.refresh_token
        logger.info("Clio access token refreshed successfully")
        return body

    async def _token_request(self, form: dict[str, str], *, http: httpx.AsyncClient | None) -> dict:
        # Token endpoint MUST be form-encoded, not JSON
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if http is not None:
            resp = await http.post(self.access_token_url, data=form, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=settings.clio_request_timeout) as client:
                resp = await client.post(self.access_token_url, data=form, headers=headers)

        if resp.status_code != 200:
            detail = resp.text[:500]
            logger.error("Clio token request failed ({}): {}", resp.status_code, detail)
            raise TokenError(resp.status_code, detail)
        return resp.json()


def credential_description() -> dict:
    """Static descriptor of the credential type the node requires."""
    return {
        "name": CREDENTIAL_NAME,
        "display_name": "Clio OAuth2 API",
        "documentation_url": "https://app.clio.com/api/v4/documentation",
        "extends": ["oAuth2Api"],
        "grant_type": "authorizationCode",
        "authentication": "body",
        "properties": [
            {
                "display_name": "Region",
                "name": "region",
                "type": "options",
                "options": REGIONS,
                "default": DEFAULT_REGION,
                "description": "The Clio region your account is in",
            },
        ],
        "endpoints": {
            option["value"]: {
                "auth_url": authorization_url(option["value"]),
                "access_token_url": access_token_url(option["value"]),
                "api_base_url": api_base_url(option["value"]),
            }
            for option in REGIONS
        },
        "test_request": {"method": "GET", "url": TEST_REQUEST_PATH},
    }
