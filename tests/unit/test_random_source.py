"""Unit tests for safeguard.services.random_source module."""

import logging
import random
import threading

import pytest
from prometheus_client import REGISTRY

from safeguard.config import Settings
from safeguard.core.exceptions import EncryptionException, IntrusionException
from safeguard.core.intrusion import set_intrusion_detector
from safeguard.services.random_source import FALLBACK_ALGORITHM, RandomSource


class TestConstruction:
    """Test algorithm resolution."""

    @pytest.mark.parametrize("algorithm", ["SystemRandom", "NativePRNG", "urandom"])
    def test_supported_algorithms(self, algorithm, detector):
        """Test known algorithms are not degraded."""
        source = RandomSource(algorithm)
        assert source.algorithm == algorithm
        assert source.requested_algorithm == algorithm
        assert source.degraded is False
        assert detector.recorded == ()

    def test_algorithm_from_settings(self):
        """Test the algorithm is read from configuration."""
        source = RandomSource(settings=Settings(RANDOM_ALGORITHM="NativePRNG"))
        assert source.requested_algorithm == "NativePRNG"
        assert not source.degraded

    def test_unknown_algorithm_degrades(self, caplog, detector):
        """Test unknown algorithms fall back instead of raising."""
        with caplog.at_level(logging.CRITICAL, logger="safeguard.security"):
            source = RandomSource("SHA1PRNG")
        assert source.degraded is True
        assert source.requested_algorithm == "SHA1PRNG"
        assert source.algorithm == FALLBACK_ALGORITHM
        assert any(
            "SHA1PRNG" in r.getMessage() and r.levelno == logging.CRITICAL
            for r in caplog.records
        )
        assert len(detector.recorded) == 1
        assert isinstance(detector.recorded[0], EncryptionException)
        assert "SHA1PRNG" in detector.recorded[0].get_log_message()

    def test_degraded_report_has_cause(self, detector):
        """Test the reported failure chains the missing algorithm lookup."""
        RandomSource("Bogus")
        report = detector.recorded[0]
        assert isinstance(report.cause, KeyError)
        assert report.__cause__ is report.cause
        assert report.cause.args == ("Bogus",)

    def test_lockout_during_degraded_init(self, caplog):
        """Test a lockout verdict from the detector does not escape construction."""

        class LockoutDetector:
            def add_exception(self, exc):
                raise IntrusionException("Locked out", "Lockout after EncryptionException")

        set_intrusion_detector(LockoutDetector())
        with caplog.at_level(logging.CRITICAL, logger="safeguard.security"):
            source = RandomSource("Bogus")
        assert source.degraded is True
        assert 0 <= source.draw_int(10) < 10
        assert any(
            rec.levelno == logging.CRITICAL
            and rec.getMessage() == "Lockout after EncryptionException"
            for rec in caplog.records
        )

    def test_degraded_source_still_draws(self):
        """Test a degraded source stays usable."""
        source = RandomSource("Nope")
        assert 0 <= source.draw_int(10) < 10
        assert 0.0 <= source.draw_float() < 1.0

    def test_degraded_gauge(self):
        """Test the degraded gauge follows initialization."""
        RandomSource("Nope")
        assert REGISTRY.get_sample_value("safeguard_random_source_degraded") == 1.0
        RandomSource("SystemRandom")
        assert REGISTRY.get_sample_value("safeguard_random_source_degraded") == 0.0

    def test_injected_generator(self, seeded_generator):
        """Test injected generators are used as-is."""
        source = RandomSource(generator=seeded_generator)
        expected = random.Random(1234).randrange(100)
        assert source.draw_int(100) == expected
        assert source.degraded is False


class TestDraws:
    """Test draw primitives."""

    @pytest.fixture
    def source(self):
        return RandomSource("SystemRandom")

    def test_draw_int_range(self, source):
        """Test draws stay in [0, bound)."""
        values = {source.draw_int(4) for _ in range(2000)}
        assert values == {0, 1, 2, 3}

    def test_draw_int_bound_one(self, source):
        assert source.draw_int(1) == 0

    @pytest.mark.parametrize("bound", [0, -5])
    def test_draw_int_invalid_bound(self, source, bound):
        """Test non-positive bounds are rejected."""
        with pytest.raises(ValueError):
            source.draw_int(bound)

    def test_draw_float_range(self, source):
        for _ in range(1000):
            assert 0.0 <= source.draw_float() < 1.0

    def test_draw_bool(self, source):
        values = {source.draw_bool() for _ in range(200)}
        assert values == {True, False}

    def test_concurrent_draws(self, source):
        """Test concurrent callers get independent values."""
        results = []
        lock = threading.Lock()

        def worker():
            drawn = [source.draw_int(2 ** 62) for _ in range(200)]
            with lock:
                results.extend(drawn)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 1600
        assert len(set(results)) == 1600
