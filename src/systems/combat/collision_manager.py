"""
collision_manager.py
--------------------
Circle-overlap collision passes over the world's entity lists.

Responsibilities
----------------
- Player bullets vs enemies: remove the bullet, damage the enemy once,
  remove the enemy when destroyed.
- Enemy bullets vs player (hit radius): remove the bullet, hit the player.
- Enemies vs player: at most one hit per frame, skipped while invincible.

Runs after every entity update in the frame, on post-update positions.
Entity counts are in the tens, so each pass is a plain O(n*m) scan.
"""

from src.core.debug.debug_logger import DebugLogger
from src.entities.entity_types import BulletOwner


class CollisionManager:
    """Detects collisions and applies the hit contracts of the entities involved."""

    def __init__(self, state):
        self.state = state
        DebugLogger.init_entry("CollisionManager Initialized")

    # ===========================================================
    # Detection Passes
    # ===========================================================
    def detect(self):
        """Run all three passes for the current frame."""
        self._player_bullets_vs_enemies()
        if self.state.player is None:
            return
        self._enemy_bullets_vs_player()
        self._enemies_vs_player()

    def _player_bullets_vs_enemies(self):
        bullets = self.state.bullets
        enemies = self.state.enemies

        for i in range(len(bullets) - 1, -1, -1):
            bullet = bullets[i]
            if bullet.owner != BulletOwner.PLAYER:
                continue
            for j in range(len(enemies) - 1, -1, -1):
                enemy = enemies[j]
                if not bullet.overlaps(enemy):
                    continue
                del bullets[i]
                if enemy.hit(1):
                    del enemies[j]
                DebugLogger.trace(f"Bullet hit {enemy.type_tag}", category="collision")
                break

    def _enemy_bullets_vs_player(self):
        player = self.state.player
        bullets = self.state.bullets

        for i in range(len(bullets) - 1, -1, -1):
            bullet = bullets[i]
            if bullet.owner != BulletOwner.ENEMY:
                continue
            if bullet.overlaps(player, other_radius=player.hit_radius):
                del bullets[i]
                player.hit()

    def _enemies_vs_player(self):
        player = self.state.player
        if player.is_invincible():
            return

        for enemy in self.state.enemies:
            if enemy.overlaps(player, other_radius=player.hit_radius):
                player.hit()
                DebugLogger.trace(f"Player touched {enemy.type_tag}", category="collision")
                break
