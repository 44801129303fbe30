# foodhive_api/foodhive/api/auth.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Request, Response

from foodhive.api.schemas import MessageResponse
from foodhive.core import config
from foodhive.core.security import create_session_token, decode_session_token
from foodhive.domain.errors import NotAuthenticated

log = logging.getLogger("api.auth")
router = APIRouter(tags=["Auth"])


def require_session(request: Request) -> Dict[str, Any]:
    """Cookie gate: 401 when the cookie is missing, 403 when it does not verify."""
    token = request.cookies.get(config.SESSION_COOKIE)
    if not token:
        raise NotAuthenticated()
    claims = decode_session_token(token)
    request.state.user = claims
    return claims


@router.post("/jwt", response_model=MessageResponse)
def issue_token(response: Response, claims: Dict[str, Any] = Body(...)) -> Any:
    token = create_session_token(claims)
    response.set_cookie(
        key=config.SESSION_COOKIE,
        value=token,
        max_age=config.SESSION_TTL_SECONDS,
        httponly=True,
        secure=config.IS_PRODUCTION,
    )
    log.info("Issued session token for %s", claims.get("email", "<no email>"))
    return {"message": "JWT token issued"}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> Any:
    response.delete_cookie(
        key=config.SESSION_COOKIE,
        httponly=True,
        secure=config.IS_PRODUCTION,
    )
    return {"message": "Logged out successfully"}
