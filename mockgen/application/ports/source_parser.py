"""SourceParser protocol: source text in, abstract declarations out.

The generator never touches source text directly. A parser adapter
turns the text into top-level Declaration values, classifying each
statement as an interface, a structure or something else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mockgen.domain.models.interface_declaration import Declaration


class SourceParserProtocol(Protocol):
    """Protocol for parsing source text into declarations.

    Implementations must guarantee:
    1. One Declaration per top-level statement, in source order
    2. Operations and parameters keep their declaration order
    3. Parsing is pure: the same text always yields equal declarations
    """

    def parse(self, source: str) -> list[Declaration]:
        """Parse source text into top-level declarations.

        Args:
            source: Python source text.

        Returns:
            Declarations in source order.

        Raises:
            SourceParseError: If the text is not valid Python.
        """
        ...
