"""
Particle system exports.

Provides particle emitters and effects for visual feedback.
"""

from src.graphics.particles.particle_manager import (
    ParticleEmitter,
    Particle,
)

__all__ = [
    'ParticleEmitter',
    'Particle',
]
