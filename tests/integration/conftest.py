"""
Integration test configuration.

Generated doubles are executed, not only compared as text. The
``load_module`` fixture runs a protocol source and the doubles generated
for it inside a fresh module registered in ``sys.modules``, which
dataclasses needs to resolve string annotations of the nested cases.

Usage:
    @pytest.mark.integration
    def test_example(load_module: ModuleLoader) -> None:
        module = load_module(protocol_source, mockgen.generate(protocol_source))
        double = module.ClockMock()
"""

from __future__ import annotations

import sys
import types
from collections.abc import Callable, Iterator

import pytest

from mockgen.bootstrap.generator import reset_generator

ModuleLoader = Callable[..., types.ModuleType]


@pytest.fixture(autouse=True)
def fresh_generator() -> Iterator[None]:
    """Start every test from an unconfigured default generator."""
    reset_generator()
    yield
    reset_generator()


@pytest.fixture
def load_module(monkeypatch: pytest.MonkeyPatch) -> ModuleLoader:
    """Execute sources, in order, inside one throwaway module."""
    counter = 0

    def load(*sources: str) -> types.ModuleType:
        nonlocal counter
        counter += 1
        module = types.ModuleType(f"mockgen_generated_{counter}")
        monkeypatch.setitem(sys.modules, module.__name__, module)
        for source in sources:
            exec(compile(source, module.__name__, "exec"), module.__dict__)
        return module

    return load
