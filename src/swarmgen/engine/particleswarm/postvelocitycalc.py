"""Velocity clamps applied after the velocity update, in registration order."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from swarmgen.foundation.space import require_non_negative


class PostVelocityCalc(ABC):
    @abstractmethod
    def correct_velocity(self, velocity: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class MaxVelocityDimensions(PostVelocityCalc):
    """Clip every velocity component to ``[-max_velocity[i], max_velocity[i]]``."""

    def __init__(self, max_velocity: float | np.ndarray) -> None:
        limits = np.abs(np.asarray(max_velocity, dtype=float))
        self.max_velocity = limits

    def correct_velocity(self, velocity: np.ndarray) -> np.ndarray:
        return np.clip(velocity, -self.max_velocity, self.max_velocity)


class MaxVelocityAbs(PostVelocityCalc):
    """Rescale the velocity vector when its Euclidean norm exceeds ``max_velocity``."""

    def __init__(self, max_velocity: float) -> None:
        require_non_negative("max_velocity", max_velocity)
        self.max_velocity = float(max_velocity)

    def correct_velocity(self, velocity: np.ndarray) -> np.ndarray:
        norm = float(np.linalg.norm(velocity))
        if norm > self.max_velocity:
            return velocity * (self.max_velocity / norm)
        return velocity


__all__ = ["PostVelocityCalc", "MaxVelocityDimensions", "MaxVelocityAbs"]
