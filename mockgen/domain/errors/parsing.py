"""Source parsing errors."""

from mockgen.domain.exceptions import MockgenError


class SourceParseError(MockgenError):
    """Raised when source text cannot be parsed into declarations.

    Attributes:
        line: Line of the syntax error, if known.
        column: Column of the syntax error, if known.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Could not parse source{location}: {message}")
