"""libcst implementation of the DeclarationFormatterProtocol.

Renders generated declarations as a module. Blank lines between
top-level statements follow PEP 8: two around classes and functions,
none between consecutive simple statements such as imports. Nested
blocks are indented with the requested indentation unit.
"""

from __future__ import annotations

from collections.abc import Sequence

import libcst as cst
from structlog import get_logger

logger = get_logger(__name__)

TOP_LEVEL_SPACING = 2


def _is_compound(statement: cst.BaseStatement) -> bool:
    return isinstance(statement, cst.BaseCompoundStatement)


class LibcstDeclarationFormatter:
    """Renders libcst declaration trees to source text.

    Usage:
        formatter = LibcstDeclarationFormatter()
        text = formatter.render(declarations, indent="\\t")
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

        Raises:
            ValueError: If the indentation is not made of spaces or tabs.
        """
        if not declarations:
            return ""
        if not indent or indent.strip(" \t"):
            raise ValueError(f"Indentation must be spaces or tabs, got {indent!r}")

        body = [
            statement.with_changes(
                leading_lines=self._leading_lines(
                    statement, declarations[index - 1] if index else None, bool(header)
                )
            )
            for index, statement in enumerate(declarations)
        ]
        module = cst.Module(
            body=body,
            header=[
                cst.EmptyLine(indent=False, comment=cst.Comment(f"# {line}"))
                for line in header
            ],
            default_indent=indent,
        )
        code = module.code
        logger.debug(
            "declarations_rendered",
            statement_count=len(body),
            line_count=code.count("\n"),
        )
        return code

    def _leading_lines(
        self,
        statement: cst.BaseStatement,
        previous: cst.BaseStatement | None,
        has_header: bool,
    ) -> list[cst.EmptyLine]:
        if previous is None:
            count = 1 if has_header else 0
        elif _is_compound(statement) or _is_compound(previous):
            count = TOP_LEVEL_SPACING
        else:
            count = 0
        return [cst.EmptyLine(indent=False) for _ in range(count)]
