"""Abstract interface-declaration model.

This module defines the read-only input of a generation run: the
declarations found in a source file, narrowed to the shapes the
generator understands.

Model:
- Declaration is a closed variant over InterfaceDeclaration,
  StructureDeclaration and OtherDeclaration
- Only the validator inspects the variant; every later stage receives
  a ValidatedInterface
- Type annotations and default values are kept as source text

Developer Golden Rules:
1. IMMUTABILITY - All models are frozen dataclasses
2. ORDER - Operations and parameters keep their declaration order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ParameterKind(Enum):
    """Kind of a method parameter, mirroring ``inspect.Parameter.kind``.

    POSITIONAL_ONLY: Declared before ``/``
    POSITIONAL_OR_KEYWORD: Regular parameter
    VAR_POSITIONAL: ``*args``
    KEYWORD_ONLY: Declared after ``*`` or ``*args``
    VAR_KEYWORD: ``**kwargs``
    """

    POSITIONAL_ONLY = "positional_only"
    POSITIONAL_OR_KEYWORD = "positional_or_keyword"
    VAR_POSITIONAL = "var_positional"
    KEYWORD_ONLY = "keyword_only"
    VAR_KEYWORD = "var_keyword"


@dataclass(frozen=True, eq=True)
class Parameter:
    """A parameter of an operation, receiver excluded.

    Attributes:
        name: Parameter name, also its label at call sites.
        annotation: Annotation source text, None if unannotated.
        default: Default value source text, None if required.
        kind: Parameter kind.
        is_last: True for the final parameter of the list. Call-site
            generators omit the trailing separator after it.
    """

    name: str
    annotation: str | None = None
    default: str | None = None
    kind: ParameterKind = ParameterKind.POSITIONAL_OR_KEYWORD
    is_last: bool = False

    def __post_init__(self) -> None:
        """Validate parameter fields."""
        if not self.name.isidentifier():
            raise ValueError(f"Parameter name must be an identifier, got {self.name!r}")

    @property
    def is_variadic(self) -> bool:
        """True for ``*args`` and ``**kwargs``."""
        return self.kind in (ParameterKind.VAR_POSITIONAL, ParameterKind.VAR_KEYWORD)


@dataclass(frozen=True, eq=True)
class ReturnType:
    """Declared return type of an operation.

    Attributes:
        annotation: Annotation source text.
        is_optional: True when the annotation already admits None.
    """

    annotation: str
    is_optional: bool = False


@dataclass(frozen=True, eq=True)
class OperationSignature:
    """One method declared by an interface.

    Attributes:
        name: Method name.
        parameters: Parameters in declaration order, receiver excluded.
        return_type: Declared return type, None for ``-> None`` or no annotation.
        can_fail: True when the method documents raised exceptions.
        is_async: True for ``async def``.
        receiver: Name of the receiver parameter.
        has_implementation: True when the body is more than a stub.
        type_parameters: PEP 695 type parameters of the method itself.
        is_overload: True for an ``@overload`` variant of the method.
    """

    name: str
    parameters: tuple[Parameter, ...] = ()
    return_type: ReturnType | None = None
    can_fail: bool = False
    is_async: bool = False
    receiver: str = "self"
    has_implementation: bool = False
    type_parameters: tuple[str, ...] = ()
    is_overload: bool = False

    @property
    def labels(self) -> tuple[str, ...]:
        """Parameter labels in declaration order."""
        return tuple(parameter.name for parameter in self.parameters)


@dataclass(frozen=True, eq=True)
class InterfaceDeclaration:
    """A Protocol class found in the source.

    Attributes:
        name: Protocol name.
        operations: Methods in declaration order.
        inherited: Interfaces inherited besides ``Protocol``.
        associated_types: Type aliases and type variables declared in the body.
        primary_associated_types: Type parameters of the protocol itself,
            None when the protocol is not generic.
        is_marked: True when decorated with the ``mockable`` marker.
        skipped_members: Members that are not operations (attributes,
            properties, static methods) and are left out of the double.
    """

    name: str
    operations: tuple[OperationSignature, ...] = ()
    inherited: tuple[str, ...] = ()
    associated_types: tuple[str, ...] = ()
    primary_associated_types: tuple[str, ...] | None = None
    is_marked: bool = False
    skipped_members: tuple[str, ...] = field(default=(), compare=False)


@dataclass(frozen=True, eq=True)
class StructureDeclaration:
    """A concrete class found in the source.

    Attributes:
        name: Class name.
        is_marked: True when decorated with the ``mockable`` marker.
    """

    name: str
    is_marked: bool = False


@dataclass(frozen=True, eq=True)
class OtherDeclaration:
    """Any other top-level statement.

    Attributes:
        kind: Short statement kind, e.g. "def", "import", "assignment".
        name: Declared name when the statement declares one.
        is_marked: True when decorated with the ``mockable`` marker.
        statement: Source text of an import, carried into generated modules.
    """

    kind: str
    name: str = ""
    is_marked: bool = False
    statement: str | None = field(default=None, compare=False)


Declaration = InterfaceDeclaration | StructureDeclaration | OtherDeclaration


@dataclass(frozen=True, eq=True)
class ValidatedInterface:
    """An InterfaceDeclaration that passed validation.

    Only the validator constructs this type; generators accept nothing else.

    Attributes:
        declaration: The validated protocol.
    """

    declaration: InterfaceDeclaration

    @property
    def name(self) -> str:
        """Protocol name."""
        return self.declaration.name

    @property
    def operations(self) -> tuple[OperationSignature, ...]:
        """Protocol operations in declaration order."""
        return self.declaration.operations
