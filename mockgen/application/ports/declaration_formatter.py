"""DeclarationFormatter protocol: declaration trees in, source text out."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import libcst as cst


class DeclarationFormatterProtocol(Protocol):
    """Protocol for rendering generated declarations as text.

    Implementations must render deterministically: the same declarations
    and indentation always produce byte-identical text.
    """

    def render(
        self,
        declarations: Sequence[cst.BaseStatement],
        indent: str = "    ",
        header: Sequence[str] = (),
    ) -> str:
        """Render top-level declarations as a module.

        Args:
            declarations: Statements in output order.
            indent: One level of indentation (spaces or a tab).
            header: Comment lines placed above the first declaration,
                without the leading ``#``.

        Returns:
            The rendered source text, empty if there is nothing to render.
        """
        ...
