"""Shared pydantic base and score handling for provider results."""

from __future__ import annotations

import logging
import math
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Base for shapes exchanged with providers: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def normalize_score(value: object) -> int:
    """Coerce a provider score onto the canonical 0-100 integer scale.

    Values in (0, 1] are treated as fractions and rescaled, so ``1.0`` is
    100. Non-finite numbers and anything outside [0, 100] are rejected
    before rounding.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"score must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"score must be a finite number, got {value!r}")
    if 0 < value <= 1:
        logger.warning("Rescaling fractional score %s to the 0-100 scale", value)
        value = value * 100
    if not 0 <= value <= 100:
        raise ValueError(f"score must be within 0-100, got {value!r}")
    return int(round(value))


Score = Annotated[int, BeforeValidator(normalize_score)]
