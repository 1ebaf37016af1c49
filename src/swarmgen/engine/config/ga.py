"""Genetic algorithm configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from swarmgen.foundation.space import IntervalsLike

from .base import (
    Intervals,
    StrategySpec,
    _frozen_intervals,
    _require_fields,
    _require_stop_criterion,
    _SerializableConfig,
    _StopCriteriaMixin,
)


@dataclass(frozen=True)
class GAConfigData(_SerializableConfig):
    intervals: Intervals
    population_size: int
    pairing: StrategySpec
    cross: StrategySpec
    mutation: StrategySpec
    mutation_probability: float = 100.0
    selections: Tuple[StrategySpec, ...] = ()
    pre_births: Tuple[StrategySpec, ...] = (("interval", {}), ("unique", {}))
    threshold: Optional[float] = None
    max_iterations: Optional[int] = None
    goal_not_change: Optional[Tuple[int, float]] = None


class GAConfig(_StopCriteriaMixin):
    """Declarative configuration holder for genetic algorithm settings.

    ``cross`` and ``mutation`` name per-gene strategies; they are applied to
    every gene of a family and to one random gene of a mutated child. When no
    selection is given, NaN individuals are killed and the population is
    limited to ``population_size``.
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def intervals(self, value: IntervalsLike) -> "GAConfig":
        self._cfg["intervals"] = _frozen_intervals(value)
        return self

    def population_size(self, value: int) -> "GAConfig":
        self._cfg["population_size"] = int(value)
        return self

    def pairing(self, method: str, **kwargs) -> "GAConfig":
        self._cfg["pairing"] = (method, kwargs)
        return self

    def cross(self, method: str, **kwargs) -> "GAConfig":
        self._cfg["cross"] = (method, kwargs)
        return self

    def mutation(self, method: str, probability: float = 100.0, **kwargs) -> "GAConfig":
        self._cfg["mutation"] = (method, kwargs)
        self._cfg["mutation_probability"] = float(probability)
        return self

    def selection(self, method: str, **kwargs) -> "GAConfig":
        self._cfg.setdefault("selections", []).append((method, kwargs))
        return self

    def pre_birth(self, method: str, **kwargs) -> "GAConfig":
        self._cfg.setdefault("pre_births", []).append((method, kwargs))
        return self

    def fixed(self) -> GAConfigData:
        _require_fields(self._cfg, ("intervals", "population_size", "pairing", "cross", "mutation"), "GA")
        _require_stop_criterion(self._cfg, "GA")
        selections = self._cfg.get("selections") or [
            ("kill_nan", {}),
            ("limit", {"max_count": self._cfg["population_size"]}),
        ]
        return GAConfigData(
            intervals=self._cfg["intervals"],
            population_size=self._cfg["population_size"],
            pairing=self._cfg["pairing"],
            cross=self._cfg["cross"],
            mutation=self._cfg["mutation"],
            mutation_probability=float(self._cfg.get("mutation_probability", 100.0)),
            selections=tuple(selections),
            pre_births=tuple(self._cfg.get("pre_births", (("interval", {}), ("unique", {})))),
            **self._stop_fields(),
        )


__all__ = ["GAConfig", "GAConfigData"]
