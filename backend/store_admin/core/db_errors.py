"""Shared helpers for database error handling."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from store_admin.core.errors import Conflict

# MySQL: 1451 cannot delete or update a parent row, 1452 cannot add or update a child row
MYSQL_FK_ERROR_CODES = {1451, 1452}


def raise_on_integrity_conflict(exc: IntegrityError, entity: str) -> None:
    """Translate foreign-key violations raised by the database into ``Conflict``."""

    orig = getattr(exc, "orig", None)
    code = None
    if orig and getattr(orig, "args", None):
        try:
            code = int(orig.args[0])
        except (TypeError, ValueError):
            code = None
    message = str(getattr(exc, "orig", exc)).lower()
    if code in MYSQL_FK_ERROR_CODES or "foreign key" in message:
        raise Conflict(f"{entity} is still in use") from exc
    raise exc
