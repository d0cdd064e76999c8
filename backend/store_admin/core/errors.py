"""Error taxonomy shared by guards, validators and resource handlers.

Every error carries its HTTP status and a plain-text message; the app turns
them into ``text/plain`` responses (see ``store_admin.main``).
"""

from __future__ import annotations

from fastapi import status


class StoreAdminError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(StoreAdminError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthenticated"


class BadRequest(StoreAdminError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class Forbidden(StoreAdminError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class NotFound(StoreAdminError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(StoreAdminError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Entity still in use"
