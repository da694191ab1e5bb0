"""Invocation-log generator.

Builds the closed case set recording "a call happened with these
arguments", the log storage and its read-only accessor:

    class Action:
        @dataclasses.dataclass(frozen=True)
        class get_string:
            index: int

        @dataclasses.dataclass(frozen=True)
        class get_integer:
            pass

    self._invocations: list[object] = []

    @property
    def invocations(self) -> list[object]:
        return list(self._invocations)
"""

from __future__ import annotations

import libcst as cst

from mockgen.application.synthesis.artifacts import LogArtifact
from mockgen.application.synthesis.syntax import (
    class_def,
    expression,
    function_def,
    keyword_argument,
    simple_statement,
    spaced,
    statement,
)
from mockgen.config.generation_config import ActionNaming
from mockgen.domain.models.interface_declaration import Parameter, ParameterKind
from mockgen.domain.models.operation_descriptor import (
    OperationDescriptor,
    OperationTable,
)

CASE_DECORATOR = "dataclasses.dataclass(frozen=True)"
UNANNOTATED = "object"


def case_field_annotation(parameter: Parameter) -> str:
    """Annotation of the case field recording a parameter.

    ``*args: T`` is recorded as ``tuple[T, ...]`` and ``**kwargs: T`` as
    ``dict[str, T]``; unannotated parameters are recorded as ``object``.
    """
    annotation = parameter.annotation or UNANNOTATED
    if parameter.kind is ParameterKind.VAR_POSITIONAL:
        return f"tuple[{annotation}, ...]"
    if parameter.kind is ParameterKind.VAR_KEYWORD:
        return f"dict[str, {annotation}]"
    return annotation


class ActionsFactory:
    """Builds the invocation log of a double."""

    def __init__(self, configuration: ActionNaming) -> None:
        self.configuration = configuration

    def make(self, table: OperationTable) -> LogArtifact:
        """Build the case set, log field and accessor for an operation table.

        An empty table yields an empty case set.
        """
        return LogArtifact(
            case_set=self.make_case_set(table),
            field=self.make_field(),
            accessor=self.make_accessor(),
            cases=table.identifiers,
        )

    def make_case_set(self, table: OperationTable) -> cst.ClassDef:
        cases = [self.make_case(descriptor) for descriptor in table.descriptors]
        return class_def(self.configuration.type_name, spaced(cases))

    def make_case(self, descriptor: OperationDescriptor) -> cst.ClassDef:
        fields = [
            statement(f"{parameter.name}: {case_field_annotation(parameter)}")
            for parameter in descriptor.parameters
        ]
        return class_def(descriptor.identifier, fields, decorators=[CASE_DECORATOR])

    def make_field(self) -> cst.SimpleStatementLine:
        return simple_statement(
            f"self.{self.configuration.storage_name}: list[object] = []"
        )

    def make_accessor(self) -> cst.FunctionDef:
        return function_def(
            "@property\n"
            f"def {self.configuration.field_name}(self) -> list[object]:\n"
            f"    return list(self.{self.configuration.storage_name})\n"
        )

    def make_record(
        self, descriptor: OperationDescriptor, receiver: str
    ) -> cst.SimpleStatementLine:
        """Build the statement appending a new case to the log.

        Each parameter is passed by keyword; the final argument carries no
        trailing separator.
        """
        case = cst.Call(
            func=expression(
                f"{receiver}.{self.configuration.type_name}.{descriptor.identifier}"
            ),
            args=[
                keyword_argument(parameter.name, parameter.name, parameter.is_last)
                for parameter in descriptor.parameters
            ],
        )
        append = cst.Call(
            func=expression(f"{receiver}.{self.configuration.storage_name}.append"),
            args=[cst.Arg(value=case)],
        )
        return cst.SimpleStatementLine(body=[cst.Expr(value=append)])
