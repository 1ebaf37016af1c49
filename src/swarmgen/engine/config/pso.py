"""Particle swarm configuration."""

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
class PSOConfigData(_SerializableConfig):
    intervals: Intervals
    particles_count: int
    velocity: StrategySpec
    velocity_init: StrategySpec = ("zero", {})
    post_velocity: Tuple[StrategySpec, ...] = ()
    post_move: Tuple[StrategySpec, ...] = ()
    threshold: Optional[float] = None
    max_iterations: Optional[int] = None
    goal_not_change: Optional[Tuple[int, float]] = None


class PSOConfig(_StopCriteriaMixin):
    """Declarative configuration holder for particle swarm settings.

    Example:
        cfg = (
            PSOConfig()
            .intervals([(-100, 100)] * 5)
            .particles_count(80)
            .velocity("canonical", phi_personal=2.05, phi_global=2.05)
            .post_move("boundary")
            .threshold(1e-6)
            .max_iterations(3000)
            .fixed()
        )
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def intervals(self, value: IntervalsLike) -> "PSOConfig":
        self._cfg["intervals"] = _frozen_intervals(value)
        return self

    def particles_count(self, value: int) -> "PSOConfig":
        self._cfg["particles_count"] = int(value)
        return self

    def velocity(self, method: str, **kwargs) -> "PSOConfig":
        self._cfg["velocity"] = (method, kwargs)
        return self

    def velocity_init(self, method: str, **kwargs) -> "PSOConfig":
        self._cfg["velocity_init"] = (method, kwargs)
        return self

    def post_velocity(self, method: str, **kwargs) -> "PSOConfig":
        self._cfg.setdefault("post_velocity", []).append((method, kwargs))
        return self

    def post_move(self, method: str, **kwargs) -> "PSOConfig":
        self._cfg.setdefault("post_move", []).append((method, kwargs))
        return self

    def fixed(self) -> PSOConfigData:
        _require_fields(self._cfg, ("intervals", "particles_count", "velocity"), "PSO")
        _require_stop_criterion(self._cfg, "PSO")
        return PSOConfigData(
            intervals=self._cfg["intervals"],
            particles_count=self._cfg["particles_count"],
            velocity=self._cfg["velocity"],
            velocity_init=self._cfg.get("velocity_init", ("zero", {})),
            post_velocity=tuple(self._cfg.get("post_velocity", ())),
            post_move=tuple(self._cfg.get("post_move", ())),
            **self._stop_fields(),
        )


__all__ = ["PSOConfig", "PSOConfigData"]
