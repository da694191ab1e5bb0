"""Configuration for mockgen generation runs."""

from mockgen.config.generation_config import (
    DEFAULT_GENERATION_CONFIG,
    ActionNaming,
    CommentPolicy,
    ErrorNaming,
    GenerationConfiguration,
    StubNaming,
)

__all__: list[str] = [
    "ActionNaming",
    "CommentPolicy",
    "DEFAULT_GENERATION_CONFIG",
    "ErrorNaming",
    "GenerationConfiguration",
    "StubNaming",
]
