"""DeclarationFormatter stub for testing the generation service.

Records the declarations handed to the formatter and renders them with
libcst's default module printer, without any spacing normalization.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import libcst as cst


@dataclass(frozen=True)
class RenderCall:
    """Record of a render call performed on the stub."""

    declarations: tuple[cst.BaseStatement, ...]
    indent: str
    header: tuple[str, ...]

    @property
    def class_names(self) -> list[str]:
        """Names of the top-level classes handed to the formatter."""
        return [
            statement.name.value
            for statement in self.declarations
            if isinstance(statement, cst.ClassDef)
        ]


class DeclarationFormatterStub:
    """In-memory stub for DeclarationFormatterProtocol.

    Usage:
        stub = DeclarationFormatterStub()
        service = MockGeneratorService(parser=parser, formatter=stub)
        service.generate(source)
        assert stub.calls[0].class_names == ["ClockMock"]
    """

    def __init__(self) -> None:
        self.calls: list[RenderCall] = []

    def render(
        self,
        declarations: Sequence[cst.BaseStatement],
        indent: str = "    ",
        header: Sequence[str] = (),
    ) -> str:
        self.calls.append(
            RenderCall(
                declarations=tuple(declarations),
                indent=indent,
                header=tuple(header),
            )
        )
        if not declarations:
            return ""
        return cst.Module(body=list(declarations), default_indent=indent).code

    @property
    def last_call(self) -> RenderCall | None:
        """The most recent render call, None before the first one."""
        return self.calls[-1] if self.calls else None

    def clear(self) -> None:
        """Clear recorded calls."""
        self.calls.clear()
