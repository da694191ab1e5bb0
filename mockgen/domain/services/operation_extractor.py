"""Operation-data extractor.

Turns the operation list of a validated interface into an OperationTable:
one descriptor per operation, in declaration order, each with an
identifier that is unique within the interface.

Identifier policy:
1. The base name is the operation name; dunder names drop their
   underscores (``__call__`` -> ``call``)
2. A base name used by a single operation is the identifier
3. Operations sharing a base name append their parameter labels
   (``fetch(self, id)`` -> ``fetch_id``)
4. Anything still colliding fails with DuplicateOperationIdentifierError

Identifiers are computed here once and never recomputed downstream.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from structlog import get_logger

from mockgen.domain.errors.extraction import (
    DuplicateOperationIdentifierError,
    OperationNameConflictError,
)
from mockgen.domain.models.interface_declaration import OperationSignature, Parameter
from mockgen.domain.models.operation_descriptor import (
    OperationDescriptor,
    OperationKey,
    OperationTable,
)

logger = get_logger(__name__)


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def base_identifier(name: str) -> str:
    """Return the identifier an operation gets when its name is unique.

    Args:
        name: Operation name.

    Returns:
        The name itself, or the inner word of a dunder name.
    """
    if _is_dunder(name):
        return name[2:-2]
    return name


def _widened_identifier(operation: OperationSignature) -> str:
    base = base_identifier(operation.name)
    return base + "".join(f"_{label}" for label in operation.labels)


def annotate_parameters(parameters: Sequence[Parameter]) -> tuple[Parameter, ...]:
    """Copy a parameter list, flagging its final parameter.

    Args:
        parameters: Parameters in declaration order.

    Returns:
        The same parameters with ``is_last`` set on the last one only.
    """
    last = len(parameters) - 1
    return tuple(
        replace(parameter, is_last=index == last)
        for index, parameter in enumerate(parameters)
    )


def _check_reserved(
    operations: Sequence[OperationSignature], reserved_names: Mapping[str, str]
) -> None:
    for operation in operations:
        member = reserved_names.get(operation.name)
        if member is not None:
            raise OperationNameConflictError(operation.name, member)


def describe_operation(operation: OperationSignature, position: int) -> str:
    """Describe an operation the way it is declared, with its position.

    Args:
        operation: The operation.
        position: One-based position in the interface.

    Returns:
        Text such as ``fetch(id: int) at position 2``.
    """
    parameters = ", ".join(
        parameter.name
        if parameter.annotation is None
        else f"{parameter.name}: {parameter.annotation}"
        for parameter in operation.parameters
    )
    return f"{operation.name}({parameters}) at position {position}"


def _assign_identifiers(operations: Sequence[OperationSignature]) -> list[str]:
    first_seen: dict[OperationKey, int] = {}
    for position, operation in enumerate(operations, start=1):
        key = OperationKey.of(operation)
        if key in first_seen:
            earlier = first_seen[key]
            raise DuplicateOperationIdentifierError(
                _widened_identifier(operation),
                [
                    describe_operation(operations[earlier - 1], earlier),
                    describe_operation(operation, position),
                ],
            )
        first_seen[key] = position

    base_counts = Counter(base_identifier(operation.name) for operation in operations)
    identifiers = [
        base_identifier(operation.name)
        if base_counts[base_identifier(operation.name)] == 1
        else _widened_identifier(operation)
        for operation in operations
    ]

    owners: dict[str, list[str]] = {}
    for position, (identifier, operation) in enumerate(
        zip(identifiers, operations), start=1
    ):
        owners.setdefault(identifier, []).append(
            describe_operation(operation, position)
        )
    for identifier, names in owners.items():
        if len(names) > 1:
            raise DuplicateOperationIdentifierError(identifier, names)

    return identifiers


def extract_operations(
    operations: Iterable[OperationSignature],
    mock_name: str | None = None,
    reserved_names: Mapping[str, str] | None = None,
) -> OperationTable:
    """Build the operation table for one interface.

    Args:
        operations: Operations in declaration order.
        mock_name: Name of the double, used to qualify identifiers.
            Defaults to no qualifier.
        reserved_names: Member names the double declares itself, mapped to
            a description of what they are used for.

    Returns:
        OperationTable with one descriptor per operation, in input order.

    Raises:
        DuplicateOperationIdentifierError: If two operations cannot be
            given distinct identifiers.
        OperationNameConflictError: If an operation would shadow one of
            the reserved member names.
    """
    operations = list(operations)
    _check_reserved(operations, reserved_names or {})
    identifiers = _assign_identifiers(operations)

    descriptors = [
        OperationDescriptor(
            identifier=identifier,
            operation=operation,
            parameters=annotate_parameters(operation.parameters),
            qualified_name=f"{mock_name}.{identifier}" if mock_name else identifier,
        )
        for identifier, operation in zip(identifiers, operations)
    ]
    for descriptor in descriptors:
        if descriptor.identifier != descriptor.name:
            logger.debug(
                "operation_identifier_renamed",
                operation=str(descriptor.key),
                identifier=descriptor.identifier,
            )
    return OperationTable(descriptors)
