# foodhive_api/foodhive/core/security.py
"""
Session token signing. Tokens are plain HS256 JWTs; validity depends only
on signature and expiry, there is no server-side session table.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from foodhive.core import config
from foodhive.domain.errors import Forbidden

log = logging.getLogger("core.security")


def create_session_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign arbitrary client claims.

    Args:
        claims: JSON object supplied by the client (e.g. {"email", "name"})
        expires_delta: lifetime override, defaults to SESSION_TTL_SECONDS

    Returns:
        Encoded JWT as string
    """
    to_encode = dict(claims)
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(seconds=config.SESSION_TTL_SECONDS))
    to_encode.update({"exp": expire, "iat": now})
    return jwt.encode(to_encode, config.ACCESS_TOKEN_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_session_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry; raise Forbidden otherwise."""
    try:
        return jwt.decode(token, config.ACCESS_TOKEN_SECRET, algorithms=[config.JWT_ALGORITHM])
    except JWTError as e:
        log.info("Rejected session token: %s", e)
        raise Forbidden() from e
