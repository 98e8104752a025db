"""Document-format integrations for epoch timestamps.

Each submodule adapts the codec to one serialization library's hooks.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "EpochJSONDecoder",
    "EpochJSONEncoder",
    "EpochTime",
    "epoch_time_type",
]


def __getattr__(name: str) -> Any:
    """Lazy re-exports so pydantic is only imported when used."""
    if name in ("EpochJSONDecoder", "EpochJSONEncoder"):
        from pyepoch.integrations import json

        return getattr(json, name)
    if name in ("EpochTime", "epoch_time_type"):
        from pyepoch.integrations import pydantic

        return getattr(pydantic, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
