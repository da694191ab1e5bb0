"""Domain errors for mockgen.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from MockgenError.
"""

from mockgen.domain.errors.extraction import (
    DuplicateOperationIdentifierError,
    OperationExtractionError,
    OperationNameConflictError,
)
from mockgen.domain.errors.parsing import SourceParseError
from mockgen.domain.errors.validation import (
    HasAssociatedTypeError,
    HasDefaultImplementationError,
    HasGenericOperationError,
    HasOverloadedOperationError,
    HasPrimaryAssociatedTypeError,
    InterfaceIsInheritedError,
    InterfaceValidationError,
    NotAnInterfaceError,
)

__all__: list[str] = [
    "DuplicateOperationIdentifierError",
    "HasAssociatedTypeError",
    "HasDefaultImplementationError",
    "HasGenericOperationError",
    "HasOverloadedOperationError",
    "HasPrimaryAssociatedTypeError",
    "InterfaceIsInheritedError",
    "InterfaceValidationError",
    "NotAnInterfaceError",
    "OperationExtractionError",
    "OperationNameConflictError",
    "SourceParseError",
]
