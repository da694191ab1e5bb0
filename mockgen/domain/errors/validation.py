"""Interface validation errors.

Raised by the interface validator before any artifact is generated.
Each error names the offending declaration and explains which shape
is unsupported, so a generation run never returns a partial double.
"""

from __future__ import annotations

from collections.abc import Sequence

from mockgen.domain.exceptions import MockgenError


class InterfaceValidationError(MockgenError):
    """Base error for declarations the generator refuses to mock.

    Attributes:
        interface_name: Name of the rejected declaration.
    """

    def __init__(self, interface_name: str, message: str) -> None:
        self.interface_name = interface_name
        super().__init__(message)


class NotAnInterfaceError(InterfaceValidationError):
    """Raised when a mock is requested for something that is not a Protocol.

    Attributes:
        interface_name: Name of the declaration.
        kind: What the declaration actually is (e.g. "class", "def").
    """

    def __init__(self, interface_name: str, kind: str) -> None:
        self.kind = kind
        super().__init__(
            interface_name,
            f"mockgen can only be applied to protocols: "
            f"'{interface_name}' is a {kind}",
        )


class InterfaceIsInheritedError(InterfaceValidationError):
    """Raised when a protocol inherits from other interfaces.

    Attributes:
        interface_name: Name of the protocol.
        inherited: Names of the inherited interfaces.
    """

    def __init__(self, interface_name: str, inherited: Sequence[str]) -> None:
        self.inherited = tuple(inherited)
        super().__init__(
            interface_name,
            f"mockgen does not support inheritance: '{interface_name}' "
            f"inherits from {', '.join(self.inherited)}",
        )


class HasPrimaryAssociatedTypeError(InterfaceValidationError):
    """Raised when a protocol is generic over type parameters.

    Covers ``Protocol[T]``, ``Generic[T]`` and PEP 695 ``class P[T]``.

    Attributes:
        interface_name: Name of the protocol.
        type_parameters: The declared type parameters.
    """

    def __init__(self, interface_name: str, type_parameters: Sequence[str]) -> None:
        self.type_parameters = tuple(type_parameters)
        super().__init__(
            interface_name,
            f"mockgen does not support primary associated types: "
            f"'{interface_name}' is parameterized by "
            f"[{', '.join(self.type_parameters)}]",
        )


class HasAssociatedTypeError(InterfaceValidationError):
    """Raised when a protocol body declares type aliases or type variables.

    Attributes:
        interface_name: Name of the protocol.
        associated_types: Names of the associated type declarations.
    """

    def __init__(self, interface_name: str, associated_types: Sequence[str]) -> None:
        self.associated_types = tuple(associated_types)
        super().__init__(
            interface_name,
            f"mockgen does not support associated types: '{interface_name}' "
            f"declares {', '.join(self.associated_types)}",
        )


class HasDefaultImplementationError(InterfaceValidationError):
    """Raised when protocol methods carry a default implementation.

    Only a docstring, ``...``, ``pass`` or ``raise NotImplementedError``
    are accepted as a method body.

    Attributes:
        interface_name: Name of the protocol.
        operations: Names of the methods with a body.
    """

    def __init__(self, interface_name: str, operations: Sequence[str]) -> None:
        self.operations = tuple(operations)
        super().__init__(
            interface_name,
            f"mockgen does not support default implementations: "
            f"'{interface_name}' implements {', '.join(self.operations)}",
        )


class HasGenericOperationError(InterfaceValidationError):
    """Raised when protocol methods declare their own type parameters.

    Covers PEP 695 methods such as ``def put[T](self, item: T) -> T``.

    Attributes:
        interface_name: Name of the protocol.
        operations: Names of the generic methods.
    """

    def __init__(self, interface_name: str, operations: Sequence[str]) -> None:
        self.operations = tuple(operations)
        super().__init__(
            interface_name,
            f"mockgen does not support generic methods: '{interface_name}' "
            f"parameterizes {', '.join(self.operations)}",
        )


class HasOverloadedOperationError(InterfaceValidationError):
    """Raised when protocol methods are declared with ``@overload``.

    Attributes:
        interface_name: Name of the protocol.
        operations: Names of the overloaded methods, once each.
    """

    def __init__(self, interface_name: str, operations: Sequence[str]) -> None:
        self.operations = tuple(operations)
        super().__init__(
            interface_name,
            f"mockgen does not support overloaded methods: '{interface_name}' "
            f"overloads {', '.join(self.operations)}",
        )
