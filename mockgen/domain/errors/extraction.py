"""Operation extraction errors.

The extractor assigns every operation an identifier that names its
invocation-log case, its stub field and its failure field. These errors
are raised when no such identifier can be assigned safely.
"""

from __future__ import annotations

from collections.abc import Sequence

from mockgen.domain.exceptions import MockgenError


class OperationExtractionError(MockgenError):
    """Base error for operation extraction failures."""

    pass


class DuplicateOperationIdentifierError(OperationExtractionError):
    """Raised when two operations would share a generated identifier.

    Overloaded names are disambiguated with their parameter labels; this
    error means even the widened key could not tell them apart.

    Attributes:
        identifier: The colliding identifier.
        operations: Names of the colliding operations, in source order.
    """

    def __init__(self, identifier: str, operations: Sequence[str]) -> None:
        self.identifier = identifier
        self.operations = tuple(operations)
        super().__init__(
            f"Operations {', '.join(self.operations)} cannot be told apart: "
            f"all of them map to the identifier '{identifier}'"
        )


class OperationNameConflictError(OperationExtractionError):
    """Raised when an operation would shadow a member of the double.

    Attributes:
        operation: Name of the offending operation.
        member: What the double already uses that name for.
    """

    def __init__(self, operation: str, member: str) -> None:
        self.operation = operation
        self.member = member
        super().__init__(
            f"Operation '{operation}' conflicts with the double's {member}; "
            f"rename the operation or change the naming configuration"
        )
