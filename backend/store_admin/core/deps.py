from fastapi import Request

from store_admin.core.errors import Unauthenticated
from store_admin.core.logging import user_id_ctx_var
from store_admin.core.security import decode_access_token
from store_admin.core.validation import FieldValidator


async def get_current_user_id(request: Request) -> str:
    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise Unauthenticated()
    user_id = decode_access_token(auth.split(" ", 1)[1])
    request.state.user_id = user_id
    user_id_ctx_var.set(user_id)
    return user_id


def get_validator(request: Request) -> FieldValidator:
    return request.app.state.validator
