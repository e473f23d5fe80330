"""Clio Manage OAuth 2.0 authentication endpoints.

Handles the authorize redirect and token exchange callback for the
configured region. Tokens are kept in memory (settings) only.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from loguru import logger

from clio_adapter.config import settings
from clio_adapter.services.credentials import ClioCredentials, TokenError, credential_description

router = APIRouter(prefix="/api/clio", tags=["clio-auth"])


def _mask(token: str) -> str:
    return token[:8] + "…" + token[-4:]


@router.get("/auth")
async def clio_auth(state: str | None = None):
    """Return the Clio OAuth authorization URL for the frontend to redirect to."""
    if not settings.clio_client_id:
        raise HTTPException(status_code=500, detail="CLIO_CLIENT_ID not configured")

    credentials = ClioCredentials.from_settings()
    auth_url = credentials.build_authorization_url(settings.clio_redirect_uri, state)
    logger.info(
        "Generated Clio auth URL (region={}, redirect_uri={})",
        credentials.region,
        settings.clio_redirect_uri,
    )

    return {"auth_url": auth_url, "region": credentials.region}


@router.get("/callback")
async def clio_callback(code: str | None = None, error: str | None = None):
    """Handle the OAuth callback: exchange authorization code for tokens."""
    if error:
        logger.error("Clio OAuth error: {}", error)
        raise HTTPException(status_code=400, detail=f"Clio OAuth error: {error}")

    if not code:
        raise HTTPException(status_code=400, detail="Missing authorization code")

    logger.info("Received Clio OAuth callback, exchanging code for tokens…")

    credentials = ClioCredentials.from_settings()
    try:
        body = await credentials.exchange_code(code, settings.clio_redirect_uri)
    except TokenError as e:
        raise HTTPException(
            status_code=502,
            detail=f"Token exchange failed ({e.status_code}): {e.detail}",
        )

    settings.clio_access_token = credentials.access_token
    settings.clio_refresh_token = credentials.refresh_token

    masked = _mask(credentials.access_token)
    logger.info("Clio OAuth complete. Access token: {}", masked)

    return {
        "status": "success",
        "message": "Clio OAuth tokens received and held in memory",
        "access_token_preview": masked,
        "expires_in": body.get("expires_in"),
    }


@router.get("/status")
async def clio_status():
    """Check whether Clio tokens are configured."""
    has_token = bool(settings.clio_access_token)

    return {
        "region": settings.clio_region,
        "has_access_token": has_token,
        "has_refresh_token": bool(settings.clio_refresh_token),
        "access_token_preview": _mask(settings.clio_access_token) if has_token else None,
    }


@router.get("/credentials")
async def clio_credential_type():
    """Describe the ``clioOAuth2Api`` credential type and its per-region endpoints."""
    return credential_description()
