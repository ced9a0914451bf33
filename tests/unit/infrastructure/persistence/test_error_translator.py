"""Unit tests for store error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from bankrepo.domain.banking.exceptions import (
    DuplicateResourceError,
    StoreFailureError,
)
from bankrepo.domain.shared import ErrorCode
from bankrepo.infrastructure.persistence.sqlalchemy.error_translator import (
    store_error_code,
    store_error_message,
    translate_store_error,
)
from tests.shared.fixtures.fake_engine import FakeDriverError


class _PgcodeError(Exception):
    """Driver error exposing psycopg-style ``pgcode``."""

    def __init__(self, message: str, pgcode: str):
        super().__init__(message)
        self.pgcode = pgcode


class TestTranslateStoreError:
    @pytest.mark.parametrize("code", ["23505", "2627", "2601"])
    def test_unique_violation_becomes_duplicate_resource(self, code):
        with pytest.raises(DuplicateResourceError) as exc_info:
            translate_store_error(code, "duplicate key")

        assert exc_info.value.message == "Resource already exist"
        assert exc_info.value.code == ErrorCode.DUPLICATE_RESOURCE

    @pytest.mark.parametrize("code", ["42P01", "08006", None])
    def test_other_codes_become_generic_failure(self, code):
        with pytest.raises(StoreFailureError) as exc_info:
            translate_store_error(code, "relation does not exist")

        error = exc_info.value
        assert error.message == "An error occured"
        assert "relation" not in str(error)
        assert error.details == {
            "store_code": code,
            "reason": "relation does not exist",
        }


class TestStoreErrorCode:
    def test_reads_sqlstate(self):
        exc = IntegrityError("stmt", {}, FakeDriverError("dup", "23505"))

        assert store_error_code(exc) == "23505"

    def test_reads_pgcode(self):
        exc = IntegrityError("stmt", {}, _PgcodeError("dup", "23505"))

        assert store_error_code(exc) == "23505"

    def test_reads_native_error_number(self):
        exc = IntegrityError("stmt", {}, Exception(2627, "Violation of UNIQUE KEY"))

        assert store_error_code(exc) == "2627"

    def test_unknown_code_is_none(self):
        exc = OperationalError("stmt", {}, Exception("server closed connection"))

        assert store_error_code(exc) is None

    def test_message_comes_from_driver_error(self):
        exc = OperationalError("SELECT 1", {}, FakeDriverError("timeout", None))

        assert store_error_message(exc) == "timeout"

    def test_connection_error_has_no_code(self):
        exc = ConnectionRefusedError(111, "Connect call failed")

        assert store_error_code(exc) is None
        assert "Connect call failed" in store_error_message(exc)
