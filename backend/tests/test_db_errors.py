import pytest
from sqlalchemy.exc import IntegrityError

from store_admin.core.db_errors import raise_on_integrity_conflict
from store_admin.core.errors import Conflict


class DummyOrig(Exception):
    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.args = (code, message)


def test_mysql_parent_row_error_translates_to_conflict():
    exc = IntegrityError("stmt", {}, DummyOrig(1451, "Cannot delete or update a parent row"))
    with pytest.raises(Conflict) as ctx:
        raise_on_integrity_conflict(exc, "Billboard")
    assert ctx.value.status_code == 409
    assert ctx.value.message == "Billboard is still in use"


def test_sqlite_foreign_key_message_translates_to_conflict():
    exc = IntegrityError("stmt", {}, Exception("FOREIGN KEY constraint failed"))
    with pytest.raises(Conflict):
        raise_on_integrity_conflict(exc, "Size")


def test_other_integrity_errors_are_re_raised():
    exc = IntegrityError("stmt", {}, DummyOrig(1062, "Duplicate entry"))
    with pytest.raises(IntegrityError):
        raise_on_integrity_conflict(exc, "Color")
