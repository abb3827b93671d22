"""Process-unique class-name tokens."""

from __future__ import annotations

import threading


class Namer:
    """Mints class names of the form ``Base_base<N>``.

    Each instance owns its own counter, so independent namers never
    interfere.  The counter only ever grows.
    """

    def __init__(self, start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next = start

    def mint(self, base: str) -> str:
        """Return a fresh class name derived from *base*."""
        with self._lock:
            discriminator = self._next
            self._next += 1
        return f"{base[:1].upper()}{base[1:]}_{base}{discriminator}"

    def peek(self) -> int:
        """Return the discriminator the next ``mint`` call will use."""
        with self._lock:
            return self._next


# Shared by the default compiler.
default_namer = Namer()
