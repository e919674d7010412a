"""
Services Module

Randomness services for the toolkit.
"""

from safeguard.services.random_source import RandomSource
from safeguard.services.randomizer import Randomizer

__all__ = [
    "RandomSource",
    "Randomizer",
]
