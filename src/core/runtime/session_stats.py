"""
session_stats.py
----------------
Tracks statistics for the current game session/run.
Separated from entity management and the world state's own score field.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when starting a new game."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.enemies_killed = 0
        self.hits_taken = 0
        self.dashes = 0
        self.stages_cleared = 0
        self.max_power_level = 0
        self.run_time = 0.0

    def add_score(self, amount: int):
        """Add to current score and update high score."""
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    def add_kill(self):
        self.enemies_killed += 1

    def add_hit(self):
        self.hits_taken += 1

    def add_dash(self):
        self.dashes += 1

    def add_stage_clear(self):
        self.stages_cleared += 1

    def add_time(self, dt: float):
        """Add elapsed time to run timer."""
        self.run_time += dt

    def set_power_level(self, level: int):
        """Update max power level if higher."""
        if level > self.max_power_level:
            self.max_power_level = level

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for new run. Preserves high score."""
        self.score = 0
        self.enemies_killed = 0
        self.hits_taken = 0
        self.dashes = 0
        self.stages_cleared = 0
        self.max_power_level = 0
        self.run_time = 0.0

    def full_reset(self):
        """Reset everything including high score."""
        self.reset()
        self.high_score = 0

    def summary(self) -> dict:
        return {
            "score": self.score,
            "high_score": self.high_score,
            "enemies_killed": self.enemies_killed,
            "hits_taken": self.hits_taken,
            "dashes": self.dashes,
            "stages_cleared": self.stages_cleared,
            "max_power_level": self.max_power_level,
            "run_time": round(self.run_time, 2),
        }
