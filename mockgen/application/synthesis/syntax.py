"""Small builders for libcst declaration trees.

Leaf statements are parsed from snippets written with four-space
indentation; parsed blocks keep no indentation of their own, so the
formatter decides the final indentation when the module is rendered.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import libcst as cst

NO_SPACE = cst.SimpleWhitespace("")


def statement(code: str) -> cst.SimpleStatementLine | cst.BaseCompoundStatement:
    """Parse a single statement snippet."""
    return cst.parse_statement(code)


def simple_statement(code: str) -> cst.SimpleStatementLine:
    """Parse a snippet that must be a simple statement line."""
    node = cst.parse_statement(code)
    if not isinstance(node, cst.SimpleStatementLine):
        raise ValueError(f"Expected a simple statement, got: {code!r}")
    return node


def function_def(code: str) -> cst.FunctionDef:
    """Parse a snippet that must be a function definition."""
    node = cst.parse_statement(code)
    if not isinstance(node, cst.FunctionDef):
        raise ValueError(f"Expected a function definition, got: {code!r}")
    return node


def expression(code: str) -> cst.BaseExpression:
    """Parse a single expression snippet."""
    return cst.parse_expression(code)


def indented(body: Iterable[cst.BaseStatement]) -> cst.IndentedBlock:
    """Build an indented block, falling back to ``pass`` when empty."""
    statements = list(body)
    if not statements:
        statements = [cst.SimpleStatementLine(body=[cst.Pass()])]
    return cst.IndentedBlock(body=statements)


def blank_line() -> cst.EmptyLine:
    """An empty line without trailing indentation."""
    return cst.EmptyLine(indent=False)


def comment_line(text: str) -> cst.EmptyLine:
    """An indented ``# text`` line."""
    return cst.EmptyLine(comment=cst.Comment(f"# {text}"))


def class_def(
    name: str,
    body: Iterable[cst.BaseStatement],
    bases: Sequence[str] = (),
    decorators: Sequence[str] = (),
) -> cst.ClassDef:
    """Build a class declaration.

    Args:
        name: Class name.
        body: Class body statements; an empty body becomes ``pass``.
        bases: Base class expressions as source text.
        decorators: Decorator expressions as source text, without ``@``.
    """
    return cst.ClassDef(
        name=cst.Name(name),
        body=indented(body),
        bases=[cst.Arg(value=expression(base)) for base in bases],
        decorators=[cst.Decorator(decorator=expression(item)) for item in decorators],
    )


def with_leading_lines(
    node: cst.BaseCompoundStatement | cst.SimpleStatementLine,
    lines: Sequence[cst.EmptyLine],
) -> cst.BaseCompoundStatement | cst.SimpleStatementLine:
    """Replace the lines rendered above a statement."""
    return node.with_changes(leading_lines=list(lines))


def spaced(
    members: Sequence[cst.BaseCompoundStatement | cst.SimpleStatementLine],
) -> list[cst.BaseCompoundStatement | cst.SimpleStatementLine]:
    """Separate consecutive members with one blank line."""
    return [
        with_leading_lines(member, [blank_line()] if index else [])
        for index, member in enumerate(members)
    ]


def keyword_argument(name: str, value: str, is_last: bool) -> cst.Arg:
    """Build a ``name=value`` call argument.

    Args:
        name: Keyword.
        value: Argument expression as source text.
        is_last: Omit the trailing separator after this argument.
    """
    return cst.Arg(
        keyword=cst.Name(name),
        equal=cst.AssignEqual(whitespace_before=NO_SPACE, whitespace_after=NO_SPACE),
        value=expression(value),
        comma=(
            cst.MaybeSentinel.DEFAULT
            if is_last
            else cst.Comma(whitespace_after=cst.SimpleWhitespace(" "))
        ),
    )
