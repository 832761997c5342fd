"""
Environment-driven harness settings.

Lets CI and developers raise or lower run budgets without code changes.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..core.exceptions import ConfigurationError
from ..domain.configuration import HarnessConfig
from .constants import (
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_INPUT_SIZE,
    ENV_ITERATIONS,
    ENV_MAX_INPUT_SIZE,
    ENV_SEED,
    ENV_TRACK_MEMORY,
)
from .validators import (
    parse_bool_setting,
    parse_int_setting,
    validate_non_negative_number,
    validate_positive_number,
)


@dataclass(frozen=True)
class HarnessSettings:
    """Run budgets and switches resolved from the environment."""

    iterations: int = DEFAULT_ITERATIONS
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    seed: int | None = None
    track_memory: bool = False

    def to_config(self) -> HarnessConfig:
        """Default codec configuration carrying these budgets."""
        return HarnessConfig(iterations=self.iterations, max_input_size=self.max_input_size)


def get_environment_config(environ: Mapping[str, str] | None = None) -> HarnessSettings:
    """
    Read harness settings from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Raises:
        ConfigurationError: If a variable is set to an unusable value
    """
    env = os.environ if environ is None else environ

    iterations = DEFAULT_ITERATIONS
    if ENV_ITERATIONS in env:
        iterations = parse_int_setting(env[ENV_ITERATIONS], ENV_ITERATIONS)
        _checked(validate_positive_number, iterations, ENV_ITERATIONS)

    max_input_size = DEFAULT_MAX_INPUT_SIZE
    if ENV_MAX_INPUT_SIZE in env:
        max_input_size = parse_int_setting(env[ENV_MAX_INPUT_SIZE], ENV_MAX_INPUT_SIZE)
        _checked(validate_non_negative_number, max_input_size, ENV_MAX_INPUT_SIZE)

    seed = None
    if env.get(ENV_SEED, "").strip():
        seed = parse_int_setting(env[ENV_SEED], ENV_SEED)

    track_memory = parse_bool_setting(env.get(ENV_TRACK_MEMORY, ""), ENV_TRACK_MEMORY)

    return HarnessSettings(
        iterations=iterations,
        max_input_size=max_input_size,
        seed=seed,
        track_memory=track_memory,
    )


def _checked(validator, value: int, name: str) -> None:
    try:
        validator(value, name)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
