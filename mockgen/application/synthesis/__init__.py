"""Code synthesis for recording doubles.

Each factory turns an operation table into libcst declaration trees;
the assembler combines them into one class per interface.
"""

from mockgen.application.synthesis.actions_factory import ActionsFactory
from mockgen.application.synthesis.artifacts import (
    AssembledDouble,
    LogArtifact,
    StoreArtifact,
)
from mockgen.application.synthesis.assembler import DoubleAssembler
from mockgen.application.synthesis.errors_factory import ErrorsFactory
from mockgen.application.synthesis.implementation_factory import (
    ImplementationFactory,
)
from mockgen.application.synthesis.preamble import make_preamble
from mockgen.application.synthesis.stubs_factory import StubsFactory

__all__ = [
    "ActionsFactory",
    "AssembledDouble",
    "DoubleAssembler",
    "ErrorsFactory",
    "ImplementationFactory",
    "LogArtifact",
    "StoreArtifact",
    "StubsFactory",
    "make_preamble",
]
