"""Infrastructure: system clock and operating-system entropy.

Rules
-----
* Entropy comes from :mod:`secrets` only, never from :mod:`random`.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import secrets
import time


class SystemClock:
    """Wall-clock time from :func:`time.time`."""

    def now(self) -> float:
        return time.time()


class SecureEntropySource:
    """Random bytes from the operating system CSPRNG.

    Reads may block on systems where the kernel entropy pool has not
    been initialised yet.
    """

    def read(self, size: int) -> bytes:
        return secrets.token_bytes(size)
