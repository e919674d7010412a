"""
Security Exceptions

Every security exception carries two messages: one that is safe to show
to an end user and one with the detail needed in the security log.
Constructing an exception reports it to the intrusion detector before the
constructor returns, so simply raising one of these produces a security
log record and feeds anomaly detection.
"""

from typing import Optional

from safeguard.core.intrusion import get_intrusion_detector
from safeguard.core.logging import EventType, get_security_logger


logger = get_security_logger("EnterpriseSecurityException")


class IntrusionException(Exception):
    """
    Raised by intrusion detection when an attack is suspected.

    Not an EnterpriseSecurityException: it is the detector's own verdict
    and is never reported back to the detector.
    """

    def __init__(self, user_message: str, log_message: str):
        super().__init__(user_message)
        self._user_message = user_message
        self._log_message = log_message

    def get_user_message(self) -> str:
        return self._user_message

    def get_log_message(self) -> str:
        return self._log_message


def _report(exc: "EnterpriseSecurityException"):
    """Hand a new exception to the intrusion detector."""
    try:
        get_intrusion_detector().add_exception(exc)
    except IntrusionException:
        raise
    except Exception as e:
        logger.critical(
            EventType.SECURITY,
            f"Intrusion detector failed to record {type(exc).__name__}: {exc.get_log_message()}",
            exc_info=e,
        )


class EnterpriseSecurityException(Exception):
    """
    Base exception for all security faults.

    Pass the root cause where possible. Subclasses must call this
    constructor so that logging and intrusion detection happen.
    """

    error_code = "security_error"

    def __init__(
        self,
        user_message: str,
        log_message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(user_message)
        self._user_message = user_message
        self._log_message = log_message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause
        _report(self)

    @classmethod
    def _bare(cls):
        """
        Create an instance without messages.

        For subclasses that build their messages later. Nothing is
        reported to intrusion detection.
        """
        exc = cls.__new__(cls)
        Exception.__init__(exc)
        exc._user_message = None
        exc._log_message = None
        exc._cause = None
        return exc

    @property
    def user_message(self) -> Optional[str]:
        return self._user_message

    @property
    def log_message(self) -> Optional[str]:
        return self._log_message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def get_user_message(self) -> Optional[str]:
        """Message safe to display to an end user."""
        return self._user_message

    def get_log_message(self) -> Optional[str]:
        """Detailed message for the security log."""
        return self._log_message

    def __str__(self) -> str:
        return self._user_message or ""


class AccessControlException(EnterpriseSecurityException):
    """
    Raised when access to a resource or function is denied.
    """

    error_code = "access_denied"


class AuthenticationException(EnterpriseSecurityException):
    """
    Raised when authentication fails.
    """

    error_code = "authentication_failed"


class AvailabilityException(EnterpriseSecurityException):
    """
    Raised when a resource needed to stay available is exhausted.
    """

    error_code = "unavailable"


class EncodingException(EnterpriseSecurityException):
    """
    Raised when encoding or decoding fails.
    """

    error_code = "encoding_error"


class EncryptionException(EnterpriseSecurityException):
    """
    Raised when a cryptographic operation fails.
    """

    error_code = "encryption_error"


class IntegrityException(EnterpriseSecurityException):
    """
    Raised when data fails an integrity check.
    """

    error_code = "integrity_error"


class ValidationException(EnterpriseSecurityException):
    """
    Raised when input validation fails.
    """

    error_code = "validation_error"

    def __init__(
        self,
        user_message: str,
        log_message: str,
        cause: Optional[BaseException] = None,
        context: Optional[str] = None,
    ):
        self._context = context
        super().__init__(user_message, log_message, cause)

    @classmethod
    def _bare(cls):
        exc = super()._bare()
        exc._context = None
        return exc

    @property
    def context(self) -> Optional[str]:
        """Name of the input that failed validation."""
        return self._context
