"""Base exception classes for the mockgen domain layer."""


class MockgenError(Exception):
    """Base exception for all generator errors.

    All generator-specific exceptions MUST inherit from this class.
    This enables callers to handle every failure of a generation run
    with a single ``except`` clause.

    Subclasses:
    - InterfaceValidationError (unsupported interface shape)
    - OperationExtractionError (operations cannot be named uniquely)
    - SourceParseError (source text is not valid Python)

    Note:
        ``mockgen.runtime.MissingStubError`` is NOT part of this hierarchy.
        It is raised by generated doubles at test-run time, never by the
        generator itself.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
