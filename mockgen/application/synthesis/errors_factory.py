"""Failure-store generator.

One optional failure per operation that can fail:

    @dataclasses.dataclass
    class Errors:
        get_string: Exception | None = None

Absent when no operation can fail.
"""

from __future__ import annotations

import libcst as cst

from mockgen.application.synthesis.artifacts import StoreArtifact
from mockgen.application.synthesis.syntax import class_def, simple_statement, statement
from mockgen.config.generation_config import ErrorNaming
from mockgen.domain.models.operation_descriptor import (
    OperationDescriptor,
    OperationTable,
)

STORE_DECORATOR = "dataclasses.dataclass"
FAILURE_ANNOTATION = "Exception | None"


class ErrorsFactory:
    """Builds the failure store of a double and the code raising from it."""

    def __init__(self, configuration: ErrorNaming) -> None:
        self.configuration = configuration

    def make(self, table: OperationTable) -> StoreArtifact | None:
        """Build the store for an operation table, None when absent."""
        failing = [descriptor for descriptor in table.descriptors if descriptor.can_fail]
        if not failing:
            return None

        fields = [
            statement(f"{descriptor.identifier}: {FAILURE_ANNOTATION} = None")
            for descriptor in failing
        ]
        return StoreArtifact(
            store=class_def(
                self.configuration.type_name, fields, decorators=[STORE_DECORATOR]
            ),
            field=self.make_field(),
            fields=tuple(descriptor.identifier for descriptor in failing),
        )

    def make_field(self) -> cst.SimpleStatementLine:
        return simple_statement(
            f"self.{self.configuration.field_name} = "
            f"self.{self.configuration.type_name}()"
        )

    def make_block(
        self, descriptor: OperationDescriptor, receiver: str
    ) -> cst.BaseStatement:
        """Raise the configured failure, if any.

            if self.errors.get_string is not None:
                raise self.errors.get_string
        """
        access = f"{receiver}.{self.configuration.field_name}.{descriptor.identifier}"
        return statement(f"if {access} is not None:\n    raise {access}\n")
