"""
Intrusion Detection Hook

Every security exception is handed to the intrusion detector when it is
constructed. Scoring and quota enforcement belong to the detector
implementation wired in by the application; the default detector here
records and logs.
"""

import threading
from collections import deque
from typing import TYPE_CHECKING, Deque, Optional, Protocol, Tuple

from safeguard.core.logging import EventType, SecurityLogger, get_security_logger
from safeguard.core.metrics import record_security_exception

if TYPE_CHECKING:
    from safeguard.core.exceptions import EnterpriseSecurityException


class IntrusionDetector(Protocol):
    """Collaborator notified of every security exception."""

    def add_exception(self, exc: "EnterpriseSecurityException") -> None:
        ...


class RecordingIntrusionDetector:
    """
    Default intrusion detector.

    Writes the log message of every exception to the security log,
    counts it, and keeps the most recent ones for inspection.
    """

    def __init__(self, max_records: int = 1000, logger: Optional[SecurityLogger] = None):
        self._lock = threading.Lock()
        self._records: Deque["EnterpriseSecurityException"] = deque(maxlen=max_records)
        self.logger = logger or get_security_logger("IntrusionDetector")

    def add_exception(self, exc: "EnterpriseSecurityException") -> None:
        """
        Record a security exception.

        Args:
            exc: Freshly constructed security exception
        """
        name = type(exc).__name__
        with self._lock:
            self._records.append(exc)
        self.logger.warning(
            EventType.SECURITY,
            f"{name}: {exc.get_log_message()}",
            extra={"exception": name},
            exc_info=exc.cause,
        )
        record_security_exception(name)

    @property
    def recorded(self) -> Tuple["EnterpriseSecurityException", ...]:
        """Snapshot of recorded exceptions, oldest first."""
        with self._lock:
            return tuple(self._records)

    def clear(self):
        """Forget all recorded exceptions."""
        with self._lock:
            self._records.clear()


_detector_lock = threading.Lock()
_detector: Optional[IntrusionDetector] = None


def get_intrusion_detector() -> IntrusionDetector:
    """
    Get the process intrusion detector.

    Returns:
        IntrusionDetector: Installed detector, created on first use
    """
    global _detector
    with _detector_lock:
        if _detector is None:
            _detector = RecordingIntrusionDetector()
        return _detector


def set_intrusion_detector(detector: Optional[IntrusionDetector]):
    """
    Install the process intrusion detector.

    Args:
        detector: Detector to use, or None to fall back to the default
    """
    global _detector
    with _detector_lock:
        _detector = detector
