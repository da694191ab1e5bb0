"""Generated artifacts of a single generation pass.

Artifacts are pure values: declaration trees plus the names they
declare, so later stages can address exactly what earlier stages built.
"""

from __future__ import annotations

from dataclasses import dataclass

import libcst as cst


@dataclass(frozen=True)
class LogArtifact:
    """The invocation log of a double.

    Attributes:
        case_set: Nested class holding one case per operation.
        field: ``__init__`` statement creating the empty log.
        accessor: Read-only property exposing a copy of the log.
        cases: Case names in declaration order.
    """

    case_set: cst.ClassDef
    field: cst.SimpleStatementLine
    accessor: cst.FunctionDef
    cases: tuple[str, ...]


@dataclass(frozen=True)
class StoreArtifact:
    """A stub-value or failure store of a double.

    Attributes:
        store: Nested dataclass with one optional field per operation.
        field: ``__init__`` statement creating the default store.
        fields: Field names in declaration order.
    """

    store: cst.ClassDef
    field: cst.SimpleStatementLine
    fields: tuple[str, ...]

    def declares(self, identifier: str) -> bool:
        """True when the store has a field for the identifier."""
        return identifier in self.fields


@dataclass(frozen=True)
class AssembledDouble:
    """The output unit for one interface.

    Attributes:
        name: Name of the double.
        interface_name: Name of the implemented protocol.
        declaration: The double's class declaration.
        uses_dataclasses: True when the declaration needs ``dataclasses``.
        uses_missing_stub: True when a method raises MissingStubError.
    """

    name: str
    interface_name: str
    declaration: cst.ClassDef
    uses_dataclasses: bool
    uses_missing_stub: bool
