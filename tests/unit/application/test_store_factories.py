"""Unit tests for the stub-store and failure-store generators."""

from __future__ import annotations

import libcst as cst
import pytest

from mockgen.application.synthesis.errors_factory import ErrorsFactory
from mockgen.application.synthesis.stubs_factory import StubsFactory, stub_annotation
from mockgen.config.generation_config import ErrorNaming, StubNaming
from mockgen.domain.models.interface_declaration import (
    InterfaceDeclaration,
    OperationSignature,
    ReturnType,
)
from mockgen.domain.models.operation_descriptor import OperationTable
from mockgen.domain.services.operation_extractor import extract_operations


def render(*nodes: cst.BaseStatement) -> str:
    return cst.Module(body=list(nodes)).code


@pytest.fixture
def table(test_protocol: InterfaceDeclaration) -> OperationTable:
    return extract_operations(test_protocol.operations, mock_name="TestProtocolMock")


@pytest.fixture
def silent_table() -> OperationTable:
    """Operations that neither return nor fail."""
    return extract_operations([OperationSignature(name="reset")], mock_name="M")


class TestStubAnnotation:
    """Tests for stub_annotation."""

    def test_non_optional_return_becomes_optional(
        self, table: OperationTable
    ) -> None:
        """A plain return type admits None in the store."""
        assert stub_annotation(table.descriptors[0]) == "str | None"

    def test_optional_return_is_kept(self) -> None:
        """An already optional return type is not wrapped twice."""
        operation = OperationSignature(
            name="find",
            return_type=ReturnType(annotation="Optional[str]", is_optional=True),
        )
        (descriptor,) = extract_operations([operation]).descriptors

        assert stub_annotation(descriptor) == "Optional[str]"

    def test_no_return_type_raises(self, silent_table: OperationTable) -> None:
        """Only returning operations have a stub."""
        with pytest.raises(ValueError):
            stub_annotation(silent_table.descriptors[0])


class TestStubsFactory:
    """Tests for StubsFactory."""

    def test_store(self, table: OperationTable) -> None:
        """One optional field per returning operation."""
        artifact = StubsFactory(StubNaming()).make(table)

        assert artifact is not None
        assert artifact.fields == ("get_string", "get_integer")
        assert render(artifact.store) == (
            "@dataclasses.dataclass\n"
            "class Stubs:\n"
            "    get_string: str | None = None\n"
            "    get_integer: int | None = None\n"
        )
        assert render(artifact.field) == "self.stubs = self.Stubs()\n"

    def test_absent_without_returning_operations(
        self, silent_table: OperationTable
    ) -> None:
        """No returning operation means no store."""
        assert StubsFactory(StubNaming()).make(silent_table) is None

    def test_guard_halts_on_missing_stub(self, table: OperationTable) -> None:
        """A missing stub raises MissingStubError with the qualified name."""
        guard = StubsFactory(StubNaming()).make_guard(table.descriptors[0], "self")

        assert render(*guard) == (
            "stub = self.stubs.get_string\n"
            "if stub is None:\n"
            '    raise MissingStubError("TestProtocolMock.get_string")\n'
        )

    def test_return_of_non_optional(self, table: OperationTable) -> None:
        """Non-optional operations return the resolved stub."""
        statement = StubsFactory(StubNaming()).make_return(
            table.descriptors[0], "self"
        )

        assert render(statement) == "return stub\n"

    def test_return_of_optional(self) -> None:
        """Optional operations return the raw field."""
        operation = OperationSignature(
            name="find",
            return_type=ReturnType(annotation="str | None", is_optional=True),
        )
        (descriptor,) = extract_operations([operation]).descriptors

        statement = StubsFactory(StubNaming()).make_return(descriptor, "self")

        assert render(statement) == "return self.stubs.find\n"


class TestErrorsFactory:
    """Tests for ErrorsFactory."""

    def test_store_has_failing_operations_only(self, table: OperationTable) -> None:
        """Only operations that can fail get a failure field."""
        artifact = ErrorsFactory(ErrorNaming()).make(table)

        assert artifact is not None
        assert artifact.fields == ("get_string",)
        assert artifact.declares("get_string")
        assert not artifact.declares("get_integer")
        assert render(artifact.store) == (
            "@dataclasses.dataclass\n"
            "class Errors:\n"
            "    get_string: Exception | None = None\n"
        )
        assert render(artifact.field) == "self.errors = self.Errors()\n"

    def test_absent_without_failing_operations(
        self, silent_table: OperationTable
    ) -> None:
        """No failing operation means no store."""
        assert ErrorsFactory(ErrorNaming()).make(silent_table) is None

    def test_block_raises_configured_failure(self, table: OperationTable) -> None:
        """The failure is raised only when one is set."""
        block = ErrorsFactory(ErrorNaming()).make_block(table.descriptors[0], "self")

        assert render(block) == (
            "if self.errors.get_string is not None:\n"
            "    raise self.errors.get_string\n"
        )

    def test_custom_naming(self, table: OperationTable) -> None:
        """Type and field names follow the configuration."""
        factory = ErrorsFactory(ErrorNaming(type_name="Failures", field_name="fail"))

        artifact = factory.make(table)

        assert artifact is not None
        assert "class Failures:" in render(artifact.store)
        assert render(artifact.field) == "self.fail = self.Failures()\n"
