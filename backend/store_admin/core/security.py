"""JWT helpers for identity-provider tokens."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from store_admin.core.config import settings
from store_admin.core.errors import Unauthenticated

ALGORITHM = "HS256"


def _create_token(data: Dict[str, Any], expires: timedelta) -> str:
    now = datetime.now(timezone.utc)
    expire = now + expires
    to_encode = data.copy()
    to_encode.update(
        {
            "exp": expire,
            "iat": now,
            "nbf": now,
            "iss": settings.JWT_ISSUER,
            "aud": settings.JWT_AUDIENCE,
        }
    )
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def create_access_token(user_id: str, expires: timedelta | None = None) -> str:
    """Mint a token the way the identity provider does (dev tooling and tests)."""

    minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES or 15
    return _create_token(
        {"sub": user_id, "type": "access"}, expires or timedelta(minutes=minutes)
    )


def decode_access_token(token: str) -> str:
    """Return the user identifier carried by a valid access token."""

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError as exc:
        raise Unauthenticated("Invalid token") from exc
    if payload.get("type") != "access":
        raise Unauthenticated("Invalid token type")
    user_id = payload.get("sub")
    if not user_id:
        raise Unauthenticated("Invalid token")
    return str(user_id)
