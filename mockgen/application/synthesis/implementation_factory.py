"""Method-body synthesizer.

Builds the double's implementation of every interface method. Each body
performs, in this order:

1. Append the invocation to the log
2. Raise the configured failure, if the operation can fail and one is set
3. Resolve the stub of a non-optional return, halting with
   MissingStubError when none is configured
4. Return the stub (non-optional) or the raw stub field (optional)

Operations without a return type stop after step 2.
"""

from __future__ import annotations

from collections.abc import Sequence

import libcst as cst

from mockgen.application.synthesis.actions_factory import ActionsFactory
from mockgen.application.synthesis.artifacts import LogArtifact, StoreArtifact
from mockgen.application.synthesis.errors_factory import ErrorsFactory
from mockgen.application.synthesis.stubs_factory import StubsFactory
from mockgen.application.synthesis.syntax import (
    function_def,
    indented,
    spaced,
)
from mockgen.config.generation_config import GenerationConfiguration
from mockgen.domain.models.interface_declaration import Parameter, ParameterKind
from mockgen.domain.models.operation_descriptor import (
    OperationDescriptor,
    OperationTable,
)


def render_parameter(parameter: Parameter) -> str:
    """Render one parameter as it appears in a ``def`` header."""
    prefix = {
        ParameterKind.VAR_POSITIONAL: "*",
        ParameterKind.VAR_KEYWORD: "**",
    }.get(parameter.kind, "")
    text = f"{prefix}{parameter.name}"
    if parameter.annotation is not None:
        text += f": {parameter.annotation}"
        if parameter.default is not None:
            text += f" = {parameter.default}"
    elif parameter.default is not None:
        text += f"={parameter.default}"
    return text


def render_parameters(receiver: str, parameters: Sequence[Parameter]) -> str:
    """Render a full parameter list, restoring ``/`` and bare ``*`` markers."""
    parts = [receiver]
    keyword_marker_needed = True
    for index, parameter in enumerate(parameters):
        if parameter.kind is ParameterKind.VAR_POSITIONAL:
            keyword_marker_needed = False
        if parameter.kind is ParameterKind.KEYWORD_ONLY and keyword_marker_needed:
            parts.append("*")
            keyword_marker_needed = False
        parts.append(render_parameter(parameter))
        if parameter.kind is ParameterKind.POSITIONAL_ONLY and (
            index + 1 == len(parameters)
            or parameters[index + 1].kind is not ParameterKind.POSITIONAL_ONLY
        ):
            parts.append("/")
    return ", ".join(parts)


class ImplementationFactory:
    """Builds the double's methods from an operation table and its artifacts."""

    def __init__(self, configuration: GenerationConfiguration) -> None:
        self.configuration = configuration
        self.actions = ActionsFactory(configuration.action)
        self.stubs = StubsFactory(configuration.stub)
        self.errors = ErrorsFactory(configuration.errors)

    def make_functions(
        self,
        table: OperationTable,
        log: LogArtifact,
        stubs: StoreArtifact | None,
        errors: StoreArtifact | None,
    ) -> list[cst.FunctionDef]:
        """Build one method per operation, in declaration order.

        Args:
            table: Descriptors of the interface's operations.
            log: The invocation log the methods append to.
            stubs: The stub store, None when no operation returns a value.
            errors: The failure store, None when no operation can fail.

        Raises:
            ValueError: If an artifact lacks the entry an operation needs.
        """
        functions = [
            self.make_function(descriptor, log, stubs, errors)
            for descriptor in table.descriptors
        ]
        return spaced(functions)

    def make_function(
        self,
        descriptor: OperationDescriptor,
        log: LogArtifact,
        stubs: StoreArtifact | None,
        errors: StoreArtifact | None,
    ) -> cst.FunctionDef:
        receiver = descriptor.operation.receiver
        if descriptor.identifier not in log.cases:
            raise ValueError(f"Invocation log has no case for {descriptor.identifier}")

        body: list[cst.BaseStatement] = [self.actions.make_record(descriptor, receiver)]

        if descriptor.can_fail:
            _require_field(errors, descriptor, "failure store")
            body.append(self.errors.make_block(descriptor, receiver))

        if descriptor.returns_value:
            _require_field(stubs, descriptor, "stub store")
            if not descriptor.returns_optional:
                body.extend(self.stubs.make_guard(descriptor, receiver))
            body.append(self.stubs.make_return(descriptor, receiver))

        return self.make_signature(descriptor).with_changes(body=indented(body))

    def make_signature(self, descriptor: OperationDescriptor) -> cst.FunctionDef:
        """Copy the interface's signature for a method of the double."""
        operation = descriptor.operation
        keyword = "async def" if operation.is_async else "def"
        returns = (
            operation.return_type.annotation
            if operation.return_type is not None
            else "None"
        )
        parameters = render_parameters(operation.receiver, descriptor.parameters)
        return function_def(
            f"{keyword} {operation.name}({parameters}) -> {returns}:\n    ...\n"
        )


def _require_field(
    store: StoreArtifact | None, descriptor: OperationDescriptor, what: str
) -> None:
    if store is None or not store.declares(descriptor.identifier):
        raise ValueError(f"The {what} has no field for {descriptor.identifier}")
