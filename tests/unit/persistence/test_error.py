"""Unit tests for persistence error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError

from engage.domain.error import ErrorKind, UnavailableError
from engage.persistence.error import store_unavailable_on_connection_error


class TestStoreUnavailableOnConnectionError:
    """Tests for the store_unavailable_on_connection_error decorator."""

    @pytest.mark.asyncio
    async def test_operational_error_becomes_unavailable(self):
        """A dropped connection surfaces as UnavailableError."""

        # Arrange
        @store_unavailable_on_connection_error
        async def find_comment():
            raise OperationalError(
                "SELECT 1", {}, ConnectionRefusedError("connection refused")
            )

        # Act & Assert
        with pytest.raises(UnavailableError) as exc_info:
            await find_comment()
        assert exc_info.value.kind == ErrorKind.UNAVAILABLE
        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_interface_error_becomes_unavailable(self):
        """Driver-level interface failures are treated the same way."""

        # Arrange
        @store_unavailable_on_connection_error
        async def save_reaction():
            raise InterfaceError("INSERT", {}, Exception("connection is closed"))

        # Act & Assert
        with pytest.raises(UnavailableError):
            await save_reaction()

    @pytest.mark.asyncio
    async def test_constraint_violations_pass_through(self):
        """Integrity errors are not connection problems and stay as they are."""

        # Arrange
        @store_unavailable_on_connection_error
        async def insert_duplicate():
            raise IntegrityError("INSERT", {}, Exception("duplicate key"))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await insert_duplicate()

    @pytest.mark.asyncio
    async def test_results_are_returned_unchanged(self):
        """Successful calls return their value."""

        # Arrange
        @store_unavailable_on_connection_error
        async def count_comments() -> int:
            return 3

        # Act
        result = await count_comments()

        # Assert
        assert result == 3
