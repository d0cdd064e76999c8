from datetime import timedelta

import pytest
from jose import jwt

from store_admin.core.config import settings
from store_admin.core.errors import Unauthenticated
from store_admin.core.security import ALGORITHM, create_access_token, decode_access_token


def test_token_round_trip():
    assert decode_access_token(create_access_token("user_1")) == "user_1"


def test_expired_token_is_rejected():
    token = create_access_token("user_1", timedelta(seconds=-5))
    with pytest.raises(Unauthenticated):
        decode_access_token(token)


def test_foreign_audience_is_rejected():
    token = jwt.encode(
        {"sub": "user_1", "type": "access", "iss": settings.JWT_ISSUER, "aud": "someone-else"},
        settings.SECRET_KEY,
        algorithm=ALGORITHM,
    )
    with pytest.raises(Unauthenticated):
        decode_access_token(token)


def test_non_access_token_is_rejected():
    token = jwt.encode(
        {"sub": "user_1", "type": "refresh", "iss": settings.JWT_ISSUER, "aud": settings.JWT_AUDIENCE},
        settings.SECRET_KEY,
        algorithm=ALGORITHM,
    )
    with pytest.raises(Unauthenticated) as ctx:
        decode_access_token(token)
    assert ctx.value.message == "Invalid token type"
