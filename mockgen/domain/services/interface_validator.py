"""Interface validator.

Rejects declarations the generator cannot mock before any artifact is
built. This is the only place that inspects the Declaration variant;
everything downstream receives a ValidatedInterface.

Checks, in order:
1. The declaration is a Protocol (NotAnInterfaceError)
2. It inherits no other interface (InterfaceIsInheritedError)
3. It is not generic (HasPrimaryAssociatedTypeError)
4. Its body declares no type aliases or type variables (HasAssociatedTypeError)
5. No method declares its own type parameters (HasGenericOperationError)
6. No method is declared with ``@overload`` (HasOverloadedOperationError)
7. No method carries a default implementation (HasDefaultImplementationError)
"""

from __future__ import annotations

from mockgen.domain.errors.validation import (
    HasAssociatedTypeError,
    HasDefaultImplementationError,
    HasGenericOperationError,
    HasOverloadedOperationError,
    HasPrimaryAssociatedTypeError,
    InterfaceIsInheritedError,
    NotAnInterfaceError,
)
from mockgen.domain.models.interface_declaration import (
    Declaration,
    InterfaceDeclaration,
    OtherDeclaration,
    StructureDeclaration,
    ValidatedInterface,
)


def validate_interface(declaration: Declaration) -> ValidatedInterface:
    """Validate that a declaration can be turned into a recording double.

    Args:
        declaration: Candidate declaration from the parser.

    Returns:
        The declaration narrowed to a ValidatedInterface.

    Raises:
        NotAnInterfaceError: If the declaration is not a Protocol.
        InterfaceIsInheritedError: If the Protocol inherits other interfaces.
        HasPrimaryAssociatedTypeError: If the Protocol has type parameters.
        HasAssociatedTypeError: If the body declares associated types.
        HasGenericOperationError: If a method has type parameters.
        HasOverloadedOperationError: If a method is overloaded.
        HasDefaultImplementationError: If a method has a body.
    """
    if isinstance(declaration, StructureDeclaration):
        raise NotAnInterfaceError(declaration.name, "class")
    if isinstance(declaration, OtherDeclaration):
        raise NotAnInterfaceError(declaration.name or declaration.kind, declaration.kind)
    if not isinstance(declaration, InterfaceDeclaration):
        raise NotAnInterfaceError(repr(declaration), type(declaration).__name__)

    if declaration.inherited:
        raise InterfaceIsInheritedError(declaration.name, declaration.inherited)

    if declaration.primary_associated_types is not None:
        raise HasPrimaryAssociatedTypeError(
            declaration.name, declaration.primary_associated_types
        )

    if declaration.associated_types:
        raise HasAssociatedTypeError(declaration.name, declaration.associated_types)

    generic = [
        operation.name
        for operation in declaration.operations
        if operation.type_parameters
    ]
    if generic:
        raise HasGenericOperationError(declaration.name, generic)

    overloaded = [
        operation.name
        for operation in declaration.operations
        if operation.is_overload
    ]
    if overloaded:
        raise HasOverloadedOperationError(
            declaration.name, list(dict.fromkeys(overloaded))
        )

    implemented = [
        operation.name
        for operation in declaration.operations
        if operation.has_implementation
    ]
    if implemented:
        raise HasDefaultImplementationError(declaration.name, implemented)

    return ValidatedInterface(declaration=declaration)

