"""Runtime support imported by source files and generated doubles.

- mockable: marker decorator requesting a double for a declaration
- MissingStubError: raised by a generated double when a non-optional
  operation is called without a configured stub

MissingStubError derives from BaseException, like SystemExit: code under
test that catches ``Exception`` cannot swallow it. A missing stub is a
defect of the test, not an error the code under test should handle.
"""

from __future__ import annotations

from typing import TypeVar

_T = TypeVar("_T")


def mockable(declaration: _T) -> _T:
    """Mark a Protocol as one the generator must produce a double for.

    The decorator returns its argument unchanged. The generator reads it
    from source: a marked declaration that is not a Protocol fails
    generation with NotAnInterfaceError instead of being skipped.

    Example:
        @mockable
        class Clock(Protocol):
            def now(self) -> datetime: ...
    """
    return declaration


class MissingStubError(BaseException):
    """Raised by a generated double whose stub was never configured.

    Attributes:
        operation: Qualified name of the called operation
            (``<Double>.<identifier>``).
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"{operation} returns a non-optional value but no stub is configured; "
            f"set it on the double's stub store before calling it"
        )
