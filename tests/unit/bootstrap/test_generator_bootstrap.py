"""Unit tests for generator bootstrap wiring."""

from collections.abc import Iterator

import pytest

from mockgen.application.services import MockGeneratorService
from mockgen.bootstrap.generator import (
    create_generator,
    get_generator,
    reset_generator,
    set_generator,
)
from mockgen.config.generation_config import (
    DEFAULT_GENERATION_CONFIG,
    GenerationConfiguration,
)
from mockgen.domain.errors import NotAnInterfaceError


@pytest.fixture(autouse=True)
def clean_singleton() -> Iterator[None]:
    reset_generator()
    yield
    reset_generator()


class _FixedGenerator:
    def generate(self, source: str) -> str:
        return f"# {source}"


class TestCreateGenerator:
    """Tests for create_generator."""

    def test_default_configuration(self) -> None:
        """Without a config, the default configuration is used."""
        generator = create_generator()

        assert isinstance(generator, MockGeneratorService)
        assert generator.configuration is DEFAULT_GENERATION_CONFIG

    def test_custom_marker_reaches_the_parser(self) -> None:
        """The configured marker decorator selects candidates."""
        generator = create_generator(GenerationConfiguration(marker_decorator="fake"))

        with pytest.raises(NotAnInterfaceError):
            generator.generate("@fake\nclass Service:\n    pass\n")


class TestGeneratorSingleton:
    """Tests for get/set/reset_generator."""

    def test_get_returns_same_instance(self) -> None:
        assert get_generator() is get_generator()

    def test_set_overrides(self) -> None:
        """A custom generator replaces the default one."""
        set_generator(_FixedGenerator())

        assert get_generator().generate("x") == "# x"

    def test_package_generate_uses_singleton(self) -> None:
        """mockgen.generate without a config delegates to the singleton."""
        import mockgen

        set_generator(_FixedGenerator())

        assert mockgen.generate("x") == "# x"

    def test_reset(self) -> None:
        """reset_generator drops the override."""
        set_generator(_FixedGenerator())
        reset_generator()

        assert isinstance(get_generator(), MockGeneratorService)
