"""
Safeguard - Application Security Core

Foundational security primitives shared by the rest of the toolkit:
a cryptographically strong randomizer and the security exception base
that reports every fault to intrusion detection.

License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Safeguard Team"
__license__ = "MIT"

# Package metadata
__all__ = [
    "__version__",
    "__author__",
    "__license__",
]
