"""Per-operation data model shared by every generator.

The extractor builds one OperationDescriptor per operation and stores
them in an OperationTable. Generators look descriptors up in the table
instead of recomputing names, so the invocation-log case, the stub
field and the failure field of an operation always agree.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from mockgen.domain.models.interface_declaration import OperationSignature, Parameter


@dataclass(frozen=True, eq=True)
class OperationKey:
    """Uniqueness key of an operation: its name plus parameter labels.

    Attributes:
        name: Operation name.
        labels: Parameter labels in declaration order.
    """

    name: str
    labels: tuple[str, ...] = ()

    @classmethod
    def of(cls, operation: OperationSignature) -> OperationKey:
        """Build the key of an operation signature."""
        return cls(name=operation.name, labels=operation.labels)

    def __str__(self) -> str:
        return f"{self.name}({''.join(f'{label}:' for label in self.labels)})"


@dataclass(frozen=True, eq=True)
class OperationDescriptor:
    """Canonical description of one operation for a single generation run.

    Attributes:
        identifier: Generated name of the log case, stub field and failure field.
        operation: The source signature.
        parameters: The signature's parameters with the final one flagged.
        qualified_name: ``<double>.<identifier>``, used in runtime messages.
    """

    identifier: str
    operation: OperationSignature
    parameters: tuple[Parameter, ...]
    qualified_name: str

    def __post_init__(self) -> None:
        """Validate descriptor fields."""
        if not self.identifier.isidentifier():
            raise ValueError(
                f"Operation identifier must be an identifier, got {self.identifier!r}"
            )

    @property
    def key(self) -> OperationKey:
        """Uniqueness key of the described operation."""
        return OperationKey.of(self.operation)

    @property
    def name(self) -> str:
        """Source name of the operation."""
        return self.operation.name

    @property
    def returns_value(self) -> bool:
        """True when the operation declares a return type."""
        return self.operation.return_type is not None

    @property
    def returns_optional(self) -> bool:
        """True when the declared return type admits None."""
        return_type = self.operation.return_type
        return return_type is not None and return_type.is_optional

    @property
    def can_fail(self) -> bool:
        """True when the operation documents raised exceptions."""
        return self.operation.can_fail


class OperationTable(Mapping[OperationKey, OperationDescriptor]):
    """Ordered, uniqueness-checked mapping of operations to descriptors.

    Iteration yields keys in declaration order; ``descriptors`` yields
    the descriptors themselves in the same order.
    """

    def __init__(self, descriptors: Iterable[OperationDescriptor] = ()) -> None:
        self._by_key: dict[OperationKey, OperationDescriptor] = {}
        identifiers: set[str] = set()
        for descriptor in descriptors:
            if descriptor.key in self._by_key or descriptor.identifier in identifiers:
                raise ValueError(
                    f"Operation {descriptor.key} is already in the table"
                )
            self._by_key[descriptor.key] = descriptor
            identifiers.add(descriptor.identifier)

    def __getitem__(self, key: OperationKey | OperationSignature) -> OperationDescriptor:
        if isinstance(key, OperationSignature):
            key = OperationKey.of(key)
        return self._by_key[key]

    def __iter__(self) -> Iterator[OperationKey]:
        return iter(self._by_key)

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"OperationTable({list(self.identifiers)!r})"

    @property
    def descriptors(self) -> tuple[OperationDescriptor, ...]:
        """Descriptors in declaration order."""
        return tuple(self._by_key.values())

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Generated identifiers in declaration order."""
        return tuple(descriptor.identifier for descriptor in self._by_key.values())
