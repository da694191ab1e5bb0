"""Stub-store generator.

One optional field per operation that declares a return type:

    @dataclasses.dataclass
    class Stubs:
        get_string: str | None = None
        get_integer: int | None = None

An already optional return type is used as declared. When no operation
returns a value the store is absent and the double declares no stub field.
"""

from __future__ import annotations

import libcst as cst

from mockgen.application.synthesis.artifacts import StoreArtifact
from mockgen.application.synthesis.syntax import class_def, simple_statement, statement
from mockgen.config.generation_config import StubNaming
from mockgen.domain.models.operation_descriptor import (
    OperationDescriptor,
    OperationTable,
)

STORE_DECORATOR = "dataclasses.dataclass"
STUB_VARIABLE = "stub"


def stub_annotation(descriptor: OperationDescriptor) -> str:
    """Annotation of the stub field of a returning operation."""
    return_type = descriptor.operation.return_type
    if return_type is None:
        raise ValueError(f"Operation {descriptor.name} declares no return type")
    if return_type.is_optional:
        return return_type.annotation
    return f"{return_type.annotation} | None"


class StubsFactory:
    """Builds the stub-value store of a double and the code reading it."""

    def __init__(self, configuration: StubNaming) -> None:
        self.configuration = configuration

    def make(self, table: OperationTable) -> StoreArtifact | None:
        """Build the store for an operation table, None when absent."""
        returning = [
            descriptor for descriptor in table.descriptors if descriptor.returns_value
        ]
        if not returning:
            return None

        fields = [
            statement(f"{descriptor.identifier}: {stub_annotation(descriptor)} = None")
            for descriptor in returning
        ]
        return StoreArtifact(
            store=class_def(
                self.configuration.type_name, fields, decorators=[STORE_DECORATOR]
            ),
            field=self.make_field(),
            fields=tuple(descriptor.identifier for descriptor in returning),
        )

    def make_field(self) -> cst.SimpleStatementLine:
        return simple_statement(
            f"self.{self.configuration.field_name} = "
            f"self.{self.configuration.type_name}()"
        )

    def make_access(self, descriptor: OperationDescriptor, receiver: str) -> str:
        """Source text reading the operation's stub field."""
        return f"{receiver}.{self.configuration.field_name}.{descriptor.identifier}"

    def make_guard(
        self, descriptor: OperationDescriptor, receiver: str
    ) -> list[cst.BaseStatement]:
        """Resolve the stub of a non-optional operation or halt.

            stub = self.stubs.get_string
            if stub is None:
                raise MissingStubError("TestProtocolMock.get_string")
        """
        return [
            statement(f"{STUB_VARIABLE} = {self.make_access(descriptor, receiver)}"),
            statement(
                f"if {STUB_VARIABLE} is None:\n"
                f"    raise MissingStubError(\"{descriptor.qualified_name}\")\n"
            ),
        ]

    def make_return(
        self, descriptor: OperationDescriptor, receiver: str
    ) -> cst.SimpleStatementLine:
        """Return the resolved stub, or the raw field for optional returns."""
        if descriptor.returns_optional:
            return simple_statement(f"return {self.make_access(descriptor, receiver)}")
        return simple_statement(f"return {STUB_VARIABLE}")
