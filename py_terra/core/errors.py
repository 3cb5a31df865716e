"""Exceptions raised while resolving configs and growing worlds."""

from typing import List


class TerrainGenerationError(Exception):
    """Base class for all generation failures."""


class ConfigurationError(TerrainGenerationError, ValueError):
    """Config failed validation. Holds every violation, not just the first."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


class InvariantViolation(TerrainGenerationError, RuntimeError):
    """A frontier spark holds a cell type the growth rule cannot expand."""


class TargetUnreachableError(TerrainGenerationError, RuntimeError):
    """The frontier ran dry before a growth phase reached its step target."""

    def __init__(self, phase: str, completed: int, target: int):
        self.phase = phase
        self.completed = completed
        self.target = target
        super().__init__(
            f"{phase}: frontier exhausted after {completed} of {target} steps"
        )


class SamplingExhaustedError(TerrainGenerationError, RuntimeError):
    """Rejection sampling gave up before finding a matching coordinate."""
