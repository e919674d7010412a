"""
Core Module

Core functionality including:
- Character sets and encoding
- Hashing
- Logging (structured logging)
- Metrics (Prometheus)
- Exceptions (security exceptions)
- Intrusion detection hook
"""

__all__ = [
    "charsets",
    "encoding",
    "security",
    "logging",
    "metrics",
    "exceptions",
    "intrusion",
]
