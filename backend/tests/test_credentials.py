from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from clio_adapter.constants import CREDENTIAL_NAME
from clio_adapter.services.credentials import (
    ClioCredentials,
    TokenError,
    access_token_url,
    api_base_url,
    authorization_url,
    credential_description,
    normalize_region,
)


@pytest.mark.parametrize(
    "region, auth, token, api",
    [
        ("us", "https://app.clio.com/oauth/authorize", "https://app.clio.com/oauth/token", "https://app.clio.com/api/v4"),
        ("eu", "https://eu.app.clio.com/oauth/authorize", "https://eu.app.clio.com/oauth/token", "https://eu.app.clio.com/api/v4"),
        ("ca", "https://ca.app.clio.com/oauth/authorize", "https://ca.app.clio.com/oauth/token", "https://ca.app.clio.com/api/v4"),
        ("au", "https://au.app.clio.com/oauth/authorize", "https://au.app.clio.com/oauth/token", "https://au.app.clio.com/api/v4"),
    ],
)
def test_region_endpoints(region, auth, token, api):
    assert authorization_url(region) == auth
    assert access_token_url(region) == token
    assert api_base_url(region) == api


def test_unknown_region_falls_back_to_us():
    assert normalize_region("mars") == "us"
    assert normalize_region(None) == "us"
    assert normalize_region(" EU ") == "eu"


def test_can_refresh_needs_all_three_values():
    assert ClioCredentials(refresh_token="r", client_id="c", client_secret="s").can_refresh
    assert not ClioCredentials(refresh_token="r", client_id="c").can_refresh


def test_build_authorization_url():
    creds = ClioCredentials(region="ca", client_id="abc")

    url = creds.build_authorization_url("http://localhost:8000/api/clio/callback", state="xyz")

    parsed = urlparse(url)
    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://ca.app.clio.com/oauth/authorize"
    query = parse_qs(parsed.query)
    assert query["response_type"] == ["code"]
    assert query["client_id"] == ["abc"]
    assert query["redirect_uri"] == ["http://localhost:8000/api/clio/callback"]
    assert query["state"] == ["xyz"]


@pytest.mark.asyncio
async def test_exchange_code_stores_tokens():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"access_token": "a", "refresh_token": "r", "expires_in": 3600})

    creds = ClioCredentials(region="eu", client_id="c", client_secret="s")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        body = await creds.exchange_code("the-code", "http://cb", http=http)

    assert body["expires_in"] == 3600
    assert creds.access_token == "a"
    assert creds.refresh_token == "r"
    request = seen[0]
    assert str(request.url) == "https://eu.app.clio.com/oauth/token"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    form = parse_qs(request.content.decode())
    assert form["grant_type"] == ["authorization_code"]
    assert form["code"] == ["the-code"]


@pytest.mark.asyncio
async def test_refresh_keeps_refresh_token_when_not_rotated():
    handler = lambda request: httpx.Response(200, json={"access_token": "new"})  # noqa: E731
    creds = ClioCredentials(access_token="old", refresh_token="keep", client_id="c", client_secret="s")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        await creds.refresh(http=http)

    assert creds.access_token == "new"
    assert creds.refresh_token == "keep"


@pytest.mark.asyncio
async def test_token_error():
    handler = lambda request: httpx.Response(401, text="invalid_client")  # noqa: E731
    creds = ClioCredentials(refresh_token="r", client_id="c", client_secret="s")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(TokenError) as exc_info:
            await creds.refresh(http=http)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "invalid_client"


def test_credential_description():
    desc = credential_description()

    assert desc["name"] == CREDENTIAL_NAME
    assert set(desc["endpoints"]) == {"us", "eu", "ca", "au"}
    assert desc["endpoints"]["au"]["api_base_url"] == "https://au.app.clio.com/api/v4"
    assert desc["test_request"] == {"method": "GET", "url": "/users/who_am_i"}
