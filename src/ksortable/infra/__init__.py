"""Infrastructure layer — system services behind the core protocols.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must satisfy the protocols in :mod:`ksortable.core.protocols`.
"""

from ksortable.infra.system import SecureEntropySource, SystemClock

__all__: list[str] = [
    "SecureEntropySource",
    "SystemClock",
]
