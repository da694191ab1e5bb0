"""Unit tests for the generator's error taxonomy."""

from mockgen.domain.errors import (
    DuplicateOperationIdentifierError,
    InterfaceValidationError,
    OperationExtractionError,
    OperationNameConflictError,
    SourceParseError,
)
from mockgen.domain.exceptions import MockgenError
from mockgen.runtime import MissingStubError


class TestMockgenError:
    """Tests for the MockgenError base class."""

    def test_every_error_is_a_mockgen_error(self) -> None:
        """Callers can catch every failure with MockgenError."""
        for error_type in (
            InterfaceValidationError,
            OperationExtractionError,
            DuplicateOperationIdentifierError,
            OperationNameConflictError,
            SourceParseError,
        ):
            assert issubclass(error_type, MockgenError)

    def test_missing_stub_is_outside_the_taxonomy(self) -> None:
        """The double's halt is neither a MockgenError nor an Exception."""
        assert not issubclass(MissingStubError, MockgenError)
        assert not issubclass(MissingStubError, Exception)
        assert issubclass(MissingStubError, BaseException)


class TestSourceParseError:
    """Tests for SourceParseError."""

    def test_message_with_location(self) -> None:
        """The location is part of the message."""
        error = SourceParseError("unexpected token", line=3, column=7)

        assert error.line == 3
        assert error.column == 7
        assert str(error) == (
            "Could not parse source (line 3, column 7): unexpected token"
        )

    def test_message_without_location(self) -> None:
        """The location is optional."""
        error = SourceParseError("empty")

        assert error.line is None
        assert str(error) == "Could not parse source: empty"


class TestDuplicateOperationIdentifierError:
    """Tests for DuplicateOperationIdentifierError."""

    def test_names_identifier_and_operations(self) -> None:
        """The message names the identifier and every colliding operation."""
        error = DuplicateOperationIdentifierError("call", ["__call__()", "call()"])

        assert error.identifier == "call"
        assert error.operations == ("__call__()", "call()")
        assert "'call'" in str(error)
        assert "__call__(), call()" in str(error)
