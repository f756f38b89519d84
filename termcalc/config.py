"""Runtime configuration for termcalc.

Values come from the environment and can be overridden on the command line:

    TERMCALC_MAX_TOKENS   token capacity per expression (default 100)
    TERMCALC_PRECISION    fractional digits printed for results (default 6)
    TERMCALC_HISTORY_SIZE lines kept in a session history (default 100)
    TERMCALC_VERBOSE      "1"/"true"/"yes" turns on debug logging
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from termcalc.tokenizer import DEFAULT_MAX_TOKENS

DEFAULT_PRECISION = 6
DEFAULT_HISTORY_SIZE = 100

_TRUTHY = ("1", "true", "yes", "on")


def _env_int(env: Mapping[str, str], key: str, default: int, minimum: int) -> int:
    raw = env.get(key)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= minimum else default


@dataclass(frozen=True)
class CalcConfig:
    max_tokens: int = DEFAULT_MAX_TOKENS
    precision: int = DEFAULT_PRECISION
    history_size: int = DEFAULT_HISTORY_SIZE
    verbose: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> CalcConfig:
        """Build a config from TERMCALC_* variables.

        Missing or malformed values fall back to the defaults.
        """
        env = os.environ if env is None else env
        return cls(
            max_tokens=_env_int(env, "TERMCALC_MAX_TOKENS", DEFAULT_MAX_TOKENS, minimum=1),
            precision=_env_int(env, "TERMCALC_PRECISION", DEFAULT_PRECISION, minimum=0),
            history_size=_env_int(env, "TERMCALC_HISTORY_SIZE", DEFAULT_HISTORY_SIZE, minimum=1),
            verbose=env.get("TERMCALC_VERBOSE", "").strip().lower() in _TRUTHY,
        )

    def override(
        self,
        max_tokens: Optional[int] = None,
        precision: Optional[int] = None,
        verbose: Optional[bool] = None,
    ) -> CalcConfig:
        """Return a copy with any non-None argument applied."""
        changes = {}
        if max_tokens is not None:
            changes["max_tokens"] = max_tokens
        if precision is not None:
            changes["precision"] = precision
        if verbose is not None:
            changes["verbose"] = verbose
        return replace(self, **changes)
