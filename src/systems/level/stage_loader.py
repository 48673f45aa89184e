"""
stage_loader.py
---------------
Loads and validates the stage/phase schedule and resolves the active phase.

Responsibilities
----------------
- Parse stages.json (or an in-memory dict) into immutable Stage/Phase objects
- Validate phase intervals and enemy type references at load time
- Look up the phase active at a given elapsed time within a stage
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from src.core.debug.debug_logger import DebugLogger
from src.core.services.config_manager import load_config


# ===========================================================
# Schedule Types
# ===========================================================

@dataclass(frozen=True)
class Phase:
    """Time-bounded difficulty segment within a stage: [start_time, end_time)."""
    start_time: float
    end_time: float
    spawn_rate: float
    max_enemies: int
    allowed_types: Tuple[str, ...]
    enemy_speed_multiplier: float = 1.0
    bullet_speed: float = 150.0

    def contains(self, elapsed: float) -> bool:
        return self.start_time <= elapsed < self.end_time


@dataclass(frozen=True)
class Stage:
    """Ordered phase list with a total duration in seconds."""
    duration: float
    phases: Tuple[Phase, ...]


def get_current_phase(stage: Stage, elapsed: float) -> Phase:
    """
    Return the phase whose interval contains `elapsed`.

    Scans phases in order. When no interval matches (e.g. time past the
    last phase) the final configured phase is used.
    """
    for phase in stage.phases:
        if phase.contains(elapsed):
            return phase
    return stage.phases[-1]


# ===========================================================
# Loading
# ===========================================================

class StageLoader:
    """Handles stage data loading and validation."""

    DEFAULT_FILE = "stages.json"

    @classmethod
    def load(cls, source=None, known_types: Optional[Iterable[str]] = None) -> Tuple[Stage, ...]:
        """
        Load the stage schedule.

        Args:
            source: Config filename, dict with a "stages" list, or None
                for the bundled stages.json.
            known_types: Enemy type tags phases may reference. When given,
                unknown references raise ValueError.

        Returns:
            tuple[Stage, ...]: Immutable, non-empty schedule.
        """
        if source is None:
            source = cls.DEFAULT_FILE

        if isinstance(source, str):
            data = load_config(source, {"stages": []}, strict=True)
        elif isinstance(source, dict):
            data = source
        else:
            raise ValueError(f"Invalid stage source type: {type(source).__name__}")

        stages_data = data.get("stages")
        if not isinstance(stages_data, list) or not stages_data:
            raise ValueError("Stage schedule must contain a non-empty 'stages' list")

        known = frozenset(known_types) if known_types is not None else None
        stages = tuple(cls._parse_stage(i, s, known) for i, s in enumerate(stages_data))

        DebugLogger.init_sub(
            f"Loaded {len(stages)} stage(s), {sum(len(s.phases) for s in stages)} phase(s)"
        )
        return stages

    @staticmethod
    def _parse_stage(index: int, raw: dict, known) -> Stage:
        duration = float(raw.get("duration", 0))
        if duration <= 0:
            raise ValueError(f"Stage {index}: duration must be positive, got {duration}")

        phases_raw = raw.get("phases") or []
        if not phases_raw:
            raise ValueError(f"Stage {index}: has no phases")

        phases = []
        for j, p in enumerate(phases_raw):
            try:
                phase = Phase(
                    start_time=float(p["startTime"]),
                    end_time=float(p["endTime"]),
                    spawn_rate=float(p["spawnRate"]),
                    max_enemies=int(p["maxEnemies"]),
                    allowed_types=tuple(p["allowedTypes"]),
                    enemy_speed_multiplier=float(p.get("enemySpeedMultiplier", 1.0)),
                    bullet_speed=float(p.get("bulletSpeed", 150.0)),
                )
            except KeyError as e:
                raise ValueError(f"Stage {index} phase {j}: missing field {e}") from e

            if phase.end_time <= phase.start_time:
                raise ValueError(
                    f"Stage {index} phase {j}: endTime {phase.end_time} <= startTime {phase.start_time}"
                )
            if phase.spawn_rate < 0 or phase.max_enemies < 0:
                raise ValueError(f"Stage {index} phase {j}: negative spawnRate or maxEnemies")
            if not phase.allowed_types:
                raise ValueError(f"Stage {index} phase {j}: allowedTypes is empty")
            if known is not None:
                unknown = [t for t in phase.allowed_types if t not in known]
                if unknown:
                    raise ValueError(f"Stage {index} phase {j}: unknown enemy types {unknown}")

            phases.append(phase)

        return Stage(duration=duration, phases=tuple(phases))
