"""Double assembler.

Combines the generated artifacts of one interface into a single class
laid out in three sections:

    class TestProtocolMock(TestProtocol):
        def __init__(self) -> None:
            ...

        @property
        def invocations(self) -> list[object]:
            ...

        # Nested types

        class Action:
            ...

        # TestProtocol

        def get_string(self, index: int) -> str:
            ...
"""

from __future__ import annotations

import libcst as cst

from mockgen.application.synthesis.actions_factory import ActionsFactory
from mockgen.application.synthesis.artifacts import AssembledDouble, StoreArtifact
from mockgen.application.synthesis.errors_factory import ErrorsFactory
from mockgen.application.synthesis.implementation_factory import (
    ImplementationFactory,
)
from mockgen.application.synthesis.stubs_factory import StubsFactory
from mockgen.application.synthesis.syntax import (
    blank_line,
    class_def,
    comment_line,
    function_def,
    indented,
    spaced,
    with_leading_lines,
)
from mockgen.config.generation_config import GenerationConfiguration
from mockgen.domain.models.interface_declaration import ValidatedInterface
from mockgen.domain.models.operation_descriptor import OperationTable


class DoubleAssembler:
    """Assembles the recording double of a validated interface."""

    def __init__(self, configuration: GenerationConfiguration) -> None:
        self.configuration = configuration
        self.actions = ActionsFactory(configuration.action)
        self.stubs = StubsFactory(configuration.stub)
        self.errors = ErrorsFactory(configuration.errors)
        self.implementation = ImplementationFactory(configuration)

    def assemble(
        self, interface: ValidatedInterface, table: OperationTable
    ) -> AssembledDouble:
        """Build the double's class declaration.

        Args:
            interface: The interface the double conforms to.
            table: Descriptors of the interface's operations.

        Returns:
            The assembled double with the imports it requires.
        """
        log = self.actions.make(table)
        stubs = self.stubs.make(table)
        errors = self.errors.make(table)
        stores = [store for store in (stubs, errors) if store is not None]

        initializer = self.make_initializer(
            [log.field, *(store.field for store in stores)]
        )
        members: list[cst.BaseStatement] = spaced([initializer, log.accessor])
        members.extend(self.nested_types(log.case_set, stores))
        methods = self.implementation.make_functions(table, log, stubs, errors)
        members.extend(self.conformance(interface.name, methods))

        double_name = self.configuration.double_name(interface.name)
        return AssembledDouble(
            name=double_name,
            interface_name=interface.name,
            declaration=class_def(double_name, members, bases=[interface.name]),
            uses_dataclasses=bool(table.descriptors),
            uses_missing_stub=any(
                descriptor.returns_value and not descriptor.returns_optional
                for descriptor in table.descriptors
            ),
        )

    def make_initializer(self, fields: list[cst.BaseStatement]) -> cst.FunctionDef:
        initializer = function_def("def __init__(self) -> None:\n    ...\n")
        return initializer.with_changes(body=indented(fields))

    def nested_types(
        self, case_set: cst.ClassDef, stores: list[StoreArtifact]
    ) -> list[cst.BaseStatement]:
        nested = spaced([case_set, *(store.store for store in stores)])
        header = [
            blank_line(),
            comment_line(self.configuration.comments.nested_types_header),
            blank_line(),
        ]
        nested[0] = with_leading_lines(nested[0], header)
        return nested

    def conformance(
        self, interface_name: str, methods: list[cst.FunctionDef]
    ) -> list[cst.BaseStatement]:
        if not methods:
            return []
        header = [blank_line()]
        if self.configuration.comments.conformance_header:
            header += [comment_line(interface_name), blank_line()]
        methods[0] = with_leading_lines(methods[0], header)
        return methods
