"""Engine options.

Options are resolved from:
1. explicit `QueryOptions` passed to an engine or factory
2. environment variables (QBUILDER_STRICT_NUMBERS, QBUILDER_CLAMP_NEGATIVE_COUNTS)
3. the model defaults
"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "QBUILDER_"
_TRUTHY = {"1", "true", "yes", "on"}


class QueryOptions(BaseModel):
    """Behaviour switches shared by an engine and every engine derived from it."""
    model_config = ConfigDict(frozen=True)

    # raise TypeError on non-numeric values in sum/avg instead of producing nan
    strict_numbers: bool = False
    # treat negative skip/take counts as 0 instead of python's from-the-end slicing
    clamp_negative_counts: bool = False


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


def load_options(environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> QueryOptions:
    """Build options from environment variables, then apply keyword overrides."""
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    for field_name in QueryOptions.model_fields:
        env_key = ENV_PREFIX + field_name.upper()
        if env_key in env:
            data[field_name] = _env_flag(env[env_key])

    data.update(overrides)
    return QueryOptions(**data)
