from __future__ import annotations
import os

from lambda_expression.errors import ConfigError


# Defaults
_DEFAULT_RECURSION_LIMIT = 100_000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> int:
    return int_from_env('LAMBDA_EXPRESSION_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
