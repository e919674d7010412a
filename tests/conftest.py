"""Test configuration for Safeguard package."""

import random

import pytest

from safeguard.config import Settings
from safeguard.core.intrusion import RecordingIntrusionDetector, set_intrusion_detector


@pytest.fixture(autouse=True)
def detector():
    """Install a fresh recording intrusion detector for every test."""
    recording = RecordingIntrusionDetector()
    set_intrusion_detector(recording)
    yield recording
    set_intrusion_detector(None)


@pytest.fixture
def settings():
    """Provide settings independent of the environment."""
    return Settings(
        RANDOM_ALGORITHM="SystemRandom",
        HASH_ALGORITHM="SHA-512",
        HASH_ITERATIONS=2,
        GUID_HASH_SALT="salt",
        ENABLE_METRICS=True,
    )


@pytest.fixture
def seeded_generator():
    """Provide a deterministic generator for reproducible draws."""
    return random.Random(1234)


class FixedGenerator:
    """Generator returning scripted values."""

    def __init__(self, int_offset=0, real=0.0, bit=0):
        self.int_offset = int_offset
        self.real = real
        self.bit = bit

    def randrange(self, bound):
        # int_offset counts down from the top when negative
        return self.int_offset % bound

    def random(self):
        return self.real

    def getrandbits(self, k):
        return self.bit


@pytest.fixture
def fixed_generator_factory():
    """Build generators with scripted draws."""
    return FixedGenerator
