"""
Prometheus Metrics

Defines security core metrics for monitoring:
- Security exception counters
- Random source health
- GUID generation counters
"""

from prometheus_client import Counter, Gauge, Info

from safeguard import __version__
from safeguard.config import get_settings


# ===================================
# Security Exception Metrics
# ===================================

security_exceptions_total = Counter(
    "safeguard_security_exceptions_total",
    "Total number of security exceptions recorded by intrusion detection",
    ["exception"],
)


# ===================================
# Randomness Metrics
# ===================================

random_source_degraded = Gauge(
    "safeguard_random_source_degraded",
    "1 when the random source runs on a fallback algorithm",
)

random_source_init_failures_total = Counter(
    "safeguard_random_source_init_failures_total",
    "Total number of random source initialization failures",
    ["algorithm"],
)

guids_generated_total = Counter(
    "safeguard_guids_generated_total",
    "Total number of GUIDs generated",
)

guid_derivation_failures_total = Counter(
    "safeguard_guid_derivation_failures_total",
    "Total number of failed GUID derivations",
    ["reason"],  # decode, short_digest
)


# ===================================
# Application Info
# ===================================

app_info = Info(
    "safeguard_app",
    "Application information",
)

# Set application info
app_info.info({
    "version": __version__,
    "name": get_settings().APP_NAME,
})


# ===================================
# Helper Functions
# ===================================

def _enabled() -> bool:
    return get_settings().ENABLE_METRICS


def record_security_exception(exception_name: str):
    """
    Record a security exception.

    Args:
        exception_name: Exception class name
    """
    if _enabled():
        security_exceptions_total.labels(exception=exception_name).inc()


def record_random_source_init(algorithm: str, degraded: bool):
    """
    Record random source initialization.

    Args:
        algorithm: Requested algorithm name
        degraded: Whether the source fell back
    """
    if not _enabled():
        return
    random_source_degraded.set(1 if degraded else 0)
    if degraded:
        random_source_init_failures_total.labels(algorithm=algorithm).inc()


def record_guid_generated():
    """Record GUID generation."""
    if _enabled():
        guids_generated_total.inc()


def record_guid_failure(reason: str):
    """
    Record GUID derivation failure.

    Args:
        reason: Failure reason (decode, short_digest)
    """
    if _enabled():
        guid_derivation_failures_total.labels(reason=reason).inc()
