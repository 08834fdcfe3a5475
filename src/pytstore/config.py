"""Proxy configuration for pytstore."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pytstore.exceptions import TStoreConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ProxyConfig:
    """Wrapper configuration.

    Parameters
    ----------
    separator : str
        String placed between a namespace and a handler identifier when
        building qualified keys. Defaults to ``"/"``.
    trace_commits : bool
        Emit a DEBUG log record (with a redacted payload) for every commit
        issued through a mutation accessor.
    """

    separator: str = "/"
    trace_commits: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or not self.separator:
            raise TStoreConfigError("separator must be a non-empty string")

    @classmethod
    def from_env(cls, **overrides: Any) -> ProxyConfig:
        """Create configuration from environment variables.

        Reads ``TSTORE_SEPARATOR`` and ``TSTORE_TRACE_COMMITS``. Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ProxyConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        separator = env.get("TSTORE_SEPARATOR")
        if separator is not None:
            config_kwargs["separator"] = separator

        if "trace_commits" not in overrides:
            config_kwargs["trace_commits"] = _env_bool(env.get("TSTORE_TRACE_COMMITS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = ProxyConfig()
