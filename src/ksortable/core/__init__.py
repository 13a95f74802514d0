"""Core layer — pure KSUID encoding, validation and arithmetic.

Rules
-----
* No ``print()`` calls.
* No clock or entropy access except through injected protocols.
* No imports from ``cli`` or ``infra``.  :meth:`Ksuid.create` reaches the
  system providers only through :func:`ksortable.api.default_generator`,
  and only when no generator is injected.
* All functions must be fully typed and deterministic.
"""

from ksortable.core.generator import KsuidGenerator
from ksortable.core.models import Ksuid
from ksortable.core.protocols import Clock, EntropySource

__all__: list[str] = [
    "Clock",
    "EntropySource",
    "Ksuid",
    "KsuidGenerator",
]
