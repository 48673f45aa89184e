"""Entity types."""


class EntityCategory:
    """High-level logical grouping for entities."""
    PLAYER = "player"
    ENEMY = "enemy"
    PROJECTILE = "projectile"
    PARTICLE = "particle"
    BACKGROUND = "background"


# ===========================================================
# Bullet Owner Constants
# ===========================================================
class BulletOwner:
    """
    Side a bullet belongs to.
    Player bullets only damage enemies; enemy bullets only damage the player.
    """
    PLAYER = "player"
    ENEMY = "enemy"

    ALL = frozenset({PLAYER, ENEMY})
