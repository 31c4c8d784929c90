from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}

def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigurationError(f"Expected a boolean, got {raw!r}", setting_name=name)

def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Expected an integer, got {raw!r}", setting_name=name) from None

@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI and the HTTP API.

    The method is kept as a name; it is resolved (and rejected if unknown)
    when a context is built from these settings.
    """

    method: str = "hechrechi"
    count_nikkud: bool = False
    distinct_vowelizations: bool = True
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            method=env.get("GEMATRIX_METHOD", "").strip() or cls.method,
            count_nikkud=_env_bool(env, "GEMATRIX_COUNT_NIKKUD", cls.count_nikkud),
            distinct_vowelizations=_env_bool(
                env, "GEMATRIX_DISTINCT_VOWELIZATIONS", cls.distinct_vowelizations
            ),
            host=env.get("GEMATRIX_HOST", "").strip() or cls.host,
            port=_env_int(env, "GEMATRIX_PORT", cls.port),
        )
