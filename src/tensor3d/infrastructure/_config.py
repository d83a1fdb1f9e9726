"""
Runtime configuration for tensor3d.

The configuration controls how contract violations are reported and whether
element access is bounds-checked:

- ``strict``: when True, any contract violation (bad construction, shape
  mismatch, out-of-bounds access, empty reduction) is logged and aborts the
  process immediately instead of raising. Useful while debugging a consumer.
- ``check_bounds``: when False, `Tensor.get`/`Tensor.set` skip the position
  bounds check, leaving correctness of coordinates to the caller.

Initial values are read from the environment:

    TENSOR3D_STRICT=1         enable strict mode
    TENSOR3D_CHECK_BOUNDS=0   disable bounds checking

The active configuration is process-wide.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator, Mapping, Optional

logger = logging.getLogger(__name__)

_FALSE_STRINGS = ("0", "", "false", "no", "off")


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_STRINGS


@dataclass(frozen=True)
class TensorConfig:
    """
    Immutable snapshot of the tensor3d runtime settings.

    Parameters
    ----------
    strict : bool, optional
        Abort the process on contract violations. Defaults to False.
    check_bounds : bool, optional
        Validate positions passed to get/set. Defaults to True.
    """

    strict: bool = False
    check_bounds: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TensorConfig":
        """
        Build a configuration from environment variables.

        Parameters
        ----------
        env : Mapping[str, str], optional
            Mapping to read from. Defaults to ``os.environ``.

        Returns
        -------
        TensorConfig
            Configuration with unset variables falling back to the defaults.
        """
        if env is None:
            env = os.environ
        return cls(
            strict=_env_flag(env, "TENSOR3D_STRICT", False),
            check_bounds=_env_flag(env, "TENSOR3D_CHECK_BOUNDS", True),
        )


_active: TensorConfig = TensorConfig.from_env()


def get_config() -> TensorConfig:
    """Return the active configuration."""
    return _active


def set_config(config: TensorConfig) -> TensorConfig:
    """
    Replace the active configuration.

    Returns
    -------
    TensorConfig
        The previously active configuration, so callers can restore it.
    """
    global _active
    if not isinstance(config, TensorConfig):
        raise TypeError(f"Expected TensorConfig, got {type(config).__name__}")
    previous = _active
    _active = config
    logger.debug("tensor3d config changed: %s -> %s", previous, config)
    return previous


@contextmanager
def configure(**overrides: Any) -> Iterator[TensorConfig]:
    """
    Temporarily override fields of the active configuration.

    Examples
    --------
    >>> with configure(check_bounds=False):
    ...     value = t.get(0, 0, 0)
    """
    previous = set_config(replace(_active, **overrides))
    try:
        yield _active
    finally:
        set_config(previous)
