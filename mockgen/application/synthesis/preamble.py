"""Imports placed above the generated doubles.

Order:
1. ``from __future__ import annotations``
2. Imports carried over from the source, in source order
3. The mocked interfaces, when their module is known
4. ``dataclasses`` and ``MissingStubError``, when a double needs them

Identical lines are emitted once.
"""

from __future__ import annotations

from collections.abc import Sequence

import libcst as cst

from mockgen.application.synthesis.artifacts import AssembledDouble
from mockgen.application.synthesis.syntax import simple_statement

FUTURE_IMPORT = "from __future__ import annotations"
DATACLASSES_IMPORT = "import dataclasses"
MISSING_STUB_IMPORT = "from mockgen.runtime import MissingStubError"


def interface_import(
    source_module: str, doubles: Sequence[AssembledDouble]
) -> str:
    """Import of every mocked interface from the module declaring them."""
    names = dict.fromkeys(double.interface_name for double in doubles)
    return f"from {source_module} import {', '.join(names)}"


def make_preamble(
    doubles: Sequence[AssembledDouble],
    imports: Sequence[str] = (),
    source_module: str | None = None,
) -> list[cst.SimpleStatementLine]:
    """Imports required by a set of doubles, empty when there are none.

    Postponed annotations keep the stores' field annotations unevaluated,
    so doubles may reference types the generated module does not import.

    Args:
        doubles: The doubles rendered below the preamble.
        imports: Source text of the imports declared next to the interfaces.
        source_module: Module the interfaces are imported from, if known.
    """
    if not doubles:
        return []
    lines = [FUTURE_IMPORT, *imports]
    if source_module is not None:
        lines.append(interface_import(source_module, doubles))
    if any(double.uses_dataclasses for double in doubles):
        lines.append(DATACLASSES_IMPORT)
    if any(double.uses_missing_stub for double in doubles):
        lines.append(MISSING_STUB_IMPORT)
    return [simple_statement(line) for line in dict.fromkeys(lines)]
