"""
enemy_definitions.py
--------------------
Single source of truth for enemy variants.

Each variant is one entry in enemies.json keyed by its type tag:

"zigzag": {
  "motion": "zigzag", "attack": null,
  "speed_y": 70, "radius": 10, "amp_x": 30, "freq": 2,
  "hp": 1, "score": 15, "color": [255, 90, 242]
}

"motion" and "attack" name entries in the strategy tables of
enemy_motion.py and enemy_attacks.py; every parameter those strategies
read must be present. Bad tables raise ValueError at load time.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from src.core.debug.debug_logger import DebugLogger
from src.core.services.config_manager import load_config
from .enemy_motion import MOTION_PARAMS
from .enemy_attacks import ATTACK_PARAMS


class UnknownEnemyTypeError(KeyError):
    """Raised when an enemy is requested with a type tag not in the table."""


@dataclass(frozen=True)
class EnemyDefinition:
    type_tag: str
    motion: str
    attack: Optional[str]
    radius: float
    hp: int
    score: int
    color: Tuple[int, int, int]
    params: Dict[str, float] = field(default_factory=dict)


_BASE_FIELDS = ("radius", "hp", "score", "color")


def parse_definitions(raw: dict) -> Dict[str, EnemyDefinition]:
    """
    Validate a raw enemy table and build immutable definitions.

    Raises:
        ValueError: Unknown motion/attack name, missing parameter,
            non-positive hp or radius, or an empty table.
    """
    definitions = {}
    for tag, data in raw.items():
        if tag.startswith("_"):
            continue
        if not isinstance(data, dict):
            raise ValueError(f"Enemy '{tag}': definition must be an object")

        motion = data.get("motion")
        attack = data.get("attack")
        if motion not in MOTION_PARAMS:
            raise ValueError(f"Enemy '{tag}': unknown motion '{motion}'")
        if attack is not None and attack not in ATTACK_PARAMS:
            raise ValueError(f"Enemy '{tag}': unknown attack '{attack}'")

        needed = _BASE_FIELDS + MOTION_PARAMS[motion] + (ATTACK_PARAMS[attack] if attack else ())
        missing = [k for k in needed if k not in data]
        if missing:
            raise ValueError(f"Enemy '{tag}': missing fields {missing}")

        hp = int(data["hp"])
        if hp <= 0:
            raise ValueError(f"Enemy '{tag}': hp must be positive, got {hp}")
        radius = float(data["radius"])
        if radius <= 0:
            raise ValueError(f"Enemy '{tag}': radius must be positive, got {radius}")

        params = {k: data[k] for k in MOTION_PARAMS[motion]}
        if attack:
            params.update({k: data[k] for k in ATTACK_PARAMS[attack]})

        definitions[tag] = EnemyDefinition(
            type_tag=tag,
            motion=motion,
            attack=attack,
            radius=radius,
            hp=hp,
            score=int(data["score"]),
            color=tuple(data["color"]),
            params=params,
        )

    if not definitions:
        raise ValueError("Enemy table is empty")
    return definitions


def load_enemy_definitions(source="enemies.json") -> Dict[str, EnemyDefinition]:
    """Load the enemy table from a config filename or an in-memory dict."""
    raw = load_config(source, {}, strict=True) if isinstance(source, str) else source
    definitions = parse_definitions(raw)
    DebugLogger.init_sub(f"Loaded {len(definitions)} enemy type(s)")
    return definitions


def get_definition(definitions: Dict[str, EnemyDefinition], type_tag: str) -> EnemyDefinition:
    try:
        return definitions[type_tag]
    except KeyError:
        raise UnknownEnemyTypeError(type_tag) from None
