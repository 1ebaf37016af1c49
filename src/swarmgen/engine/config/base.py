"""Base utilities for optimizer configuration."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, Optional, Tuple

from swarmgen.foundation.exceptions import MissingConfigError
from swarmgen.foundation.space import IntervalsLike, as_intervals

StrategySpec = Tuple[str, Dict[str, Any]]
Intervals = Tuple[Tuple[float, float], ...]


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    """Validate that required fields are present in configuration."""
    missing = [field for field in fields if field not in cfg]
    if missing:
        raise MissingConfigError(missing, f"{name}Config")


def _require_stop_criterion(cfg: Dict[str, Any], name: str) -> None:
    if not any(cfg.get(key) is not None for key in ("threshold", "max_iterations", "goal_not_change")):
        raise MissingConfigError(["threshold | max_iterations | goal_not_change"], f"{name}Config")


def _frozen_intervals(value: IntervalsLike) -> Intervals:
    return tuple((float(lo), float(hi)) for lo, hi in as_intervals(value))


class _StopCriteriaMixin:
    """Fluent setters for the stop criteria shared by every optimizer config."""

    _cfg: Dict[str, Any]

    def threshold(self, value: float):
        self._cfg["threshold"] = float(value)
        return self

    def max_iterations(self, value: int):
        self._cfg["max_iterations"] = int(value)
        return self

    def goal_not_change(self, max_iter: int, delta: float):
        self._cfg["goal_not_change"] = (int(max_iter), float(delta))
        return self

    def _stop_fields(self) -> Dict[str, Optional[Any]]:
        return {
            "threshold": self._cfg.get("threshold"),
            "max_iterations": self._cfg.get("max_iterations"),
            "goal_not_change": self._cfg.get("goal_not_change"),
        }


__all__ = ["StrategySpec", "Intervals"]
