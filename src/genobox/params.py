"""Shared function parameters.

A ``Params`` object bundles keyword arguments that several plot and
annotation calls have in common (region, assembly, placement, styling).
Explicit keyword arguments always win; a ``Params`` value only fills in
arguments the caller left as ``None``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class Params:
    """A bag of function parameters that can be shared between calls."""

    def __init__(self, **kwargs):
        self._values: Dict[str, Any] = {k: v for k, v in kwargs.items() if v is not None}

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __getattr__(self, key: str) -> Any:
        try:
            return self.__dict__["_values"][key]
        except KeyError:
            raise AttributeError(key) from None

    def __add__(self, other: "Params") -> "Params":
        """Combine two Params; values from ``other`` take precedence."""
        merged = dict(self._values)
        merged.update(other.to_dict())
        return Params(**merged)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"Params({inner})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Params":
        # YAML has no tuples; "just: [left, top]" comes back as a list
        return cls(**{k: tuple(v) if isinstance(v, list) else v for k, v in d.items()})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Params":
        """Load parameters from a YAML mapping."""
        with open(path, "r") as f:
            d = yaml.safe_load(f) or {}
        if not isinstance(d, dict):
            raise ValueError(f"Parameter file {path} must contain a mapping, got {type(d).__name__}")
        logger.debug(f"Loaded {len(d)} parameters from {path}")
        return cls.from_dict(d)

    def to_yaml(self, path: Union[str, Path]) -> None:
        d = {k: list(v) if isinstance(v, tuple) else v for k, v in self._values.items()}
        with open(path, "w") as f:
            yaml.safe_dump(d, f, default_flow_style=False)


def parse_params(params: Optional[Params], object_params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill unset function arguments from a Params object.

    Args:
        params: Optional shared parameters
        object_params: Function arguments, ``None`` where the caller gave nothing

    Returns:
        New dictionary with ``None`` entries replaced where ``params`` has a value

    Raises:
        TypeError: If params is not a Params instance
    """
    merged = dict(object_params)
    if params is None:
        return merged

    if not isinstance(params, Params):
        raise TypeError(f"params must be a Params object, got {type(params).__name__}")

    for key, value in merged.items():
        if value is None and key in params:
            merged[key] = params[key]

    return merged


def fill_defaults(values: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Replace entries still ``None`` with the function's defaults."""
    filled = dict(values)
    for key, default in defaults.items():
        if filled.get(key) is None:
            filled[key] = default
    return filled
