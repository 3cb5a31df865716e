"""
World generation config: models, defaults, merging and validation.

Callers hand in partial configs as nested mappings. ``resolve_config``
deep-merges them over ``default_config()`` field by field and validates
the result into a ``WorldConfig``. Keys may be snake_case or the
camelCase spelling used by JSON configs (``maxSize``).
"""

import copy
import re
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.errors import ConfigurationError

logger = structlog.get_logger()

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class WatermaskConfig(_ConfigModel):
    """Sea band along the left and right map edges."""

    size: int = Field(default=4, ge=0, description="Masked columns per edge")
    chance: float = Field(
        default=0.75, ge=0, le=1, description="Chance a masked cell becomes sea"
    )


class SeedsConfig(_ConfigModel):
    """Initial mountain seeds."""

    number: int = Field(default=10, ge=0, description="Number of mountain seeds")
    max_size: int = Field(
        default=5, ge=0, alias="maxSize", description="Largest seed square side"
    )


class IslandsConfig(_ConfigModel):
    """Islands raised from open ocean after the main growth phases."""

    number: int = Field(default=10, ge=0, description="Number of islands")
    max_size: int = Field(
        default=5, ge=0, alias="maxSize", description="Largest island core side"
    )


class IcecapsConfig(_ConfigModel):
    """Polar ice."""

    density: float = Field(default=2.0, ge=0, description="Ice chance multiplier")
    extension: float = Field(
        default=0.02, ge=0, le=1, description="Fraction of the height covered per pole"
    )


class GeographyConfig(_ConfigModel):
    """Growth probabilities and finishing features."""

    mountains: float = Field(
        default=0.43, ge=0, le=1, description="Chance a mountain spark stays mountainous"
    )
    land: float = Field(
        default=0.9, ge=0, le=1, description="Chance land spreads instead of sea"
    )
    islands: IslandsConfig = Field(default_factory=IslandsConfig)
    icecaps: IcecapsConfig = Field(default_factory=IcecapsConfig)


class PhasesConfig(_ConfigModel):
    """Step budgets as fractions of the cell count."""

    phase1: float = Field(default=0.1, ge=0, le=1, description="Mountain/land growth")
    phase2: float = Field(default=0.1, ge=0, le=1, description="Land/sea growth")
    phase3: float = Field(
        default=0.1, ge=0, le=1, description="Reserved; island growth is sized per island"
    )


class WorldConfig(_ConfigModel):
    """Fully resolved configuration for one generation run."""

    height: int = Field(..., gt=0, strict=True, description="Rows in the grid")
    width: int = Field(..., gt=0, strict=True, description="Columns in the grid")
    watermask: WatermaskConfig = Field(default_factory=WatermaskConfig)
    seeds: SeedsConfig = Field(default_factory=SeedsConfig)
    geography: GeographyConfig = Field(default_factory=GeographyConfig)
    phases: PhasesConfig = Field(default_factory=PhasesConfig)


def default_config() -> Dict[str, Any]:
    """Every default value; height and width have none."""
    return {
        "watermask": WatermaskConfig().model_dump(),
        "seeds": SeedsConfig().model_dump(),
        "geography": GeographyConfig().model_dump(),
        "phases": PhasesConfig().model_dump(),
    }


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def merge_config(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge ``overrides`` over ``base`` without mutating either.

    Mapping values merge recursively, key by key; any other value present
    in ``overrides`` replaces the one in ``base``.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in overrides.items():
        if isinstance(key, str):
            key = _snake_case(key)
        current = merged.get(key)
        if isinstance(value, Mapping):
            merged[key] = merge_config(current if isinstance(current, Mapping) else {}, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _describe(error: Dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in error["loc"])
    if loc in ("height", "width") and (
        error["type"] == "missing" or error["type"].startswith("int")
    ):
        return f"{loc.capitalize()} is missing or not a valid number."
    return f"{loc}: {error['msg']}"


def resolve_config(
    config: Optional[Union[Mapping[str, Any], WorldConfig]] = None,
) -> WorldConfig:
    """
    Merge a caller config over the defaults and validate it.

    Args:
        config: Partial config mapping, a WorldConfig, or None

    Returns:
        Fully resolved WorldConfig

    Raises:
        ConfigurationError: listing every invalid or missing field
    """
    if config is None:
        overrides: Mapping[str, Any] = {}
    elif isinstance(config, WorldConfig):
        overrides = config.model_dump()
    elif isinstance(config, Mapping):
        overrides = config
    else:
        raise ConfigurationError(
            [f"Config must be a mapping or WorldConfig, got {type(config).__name__}."]
        )

    merged = merge_config(default_config(), overrides)
    try:
        return WorldConfig.model_validate(merged)
    except ValidationError as exc:
        errors: List[str] = [_describe(err) for err in exc.errors()]
        logger.warning("Invalid world config", errors=errors)
        raise ConfigurationError(errors) from exc
