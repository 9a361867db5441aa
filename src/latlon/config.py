from __future__ import annotations

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_PRECISION_ENV = "LATLON_MAX_PRECISION"
VALIDATE_COORDINATES_ENV = "LATLON_VALIDATE_COORDINATES"


class GeohashConfig(BaseModel):
    max_precision: int = Field(default=12, ge=1, le=20)
    validate_coordinates: bool = True

    model_config = ConfigDict(frozen=True)


_default_config: Optional[GeohashConfig] = None


def load_config() -> GeohashConfig:
    """Build a config from ``LATLON_*`` environment variables."""
    values: Dict[str, Any] = {}
    max_precision = os.getenv(MAX_PRECISION_ENV)
    if max_precision:
        values["max_precision"] = max_precision
    validate = os.getenv(VALIDATE_COORDINATES_ENV)
    if validate:
        values["validate_coordinates"] = validate
    return GeohashConfig.model_validate(values)


def setup(config: Optional[GeohashConfig] = None, **overrides: Any) -> GeohashConfig:
    global _default_config
    base = config or load_config()
    if overrides:
        base = GeohashConfig.model_validate({**base.model_dump(), **overrides})
    _default_config = base
    return _default_config


def get_config() -> GeohashConfig:
    if _default_config is None:
        return load_config()
    return _default_config


def reset() -> None:
    global _default_config
    _default_config = None
