"""Explicit random source for evolution runs.

Every operation that needs randomness receives an RNGManager and draws from a
named context stream ("init", "mutation", "crossover", "reproduction"). Each
stream is a `random.Random` seeded from the manager seed and the context name,
so two managers built with the same seed replay the same run.
"""

from __future__ import annotations

import hashlib
import random


class RNGManager:
    """Hands out per-context `random.Random` instances derived from one seed."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.seed = int(seed)
        self._contexts: dict[str, random.Random] = {}

    def _derive_seed(self, context: str) -> int:
        digest = hashlib.sha256(f"{self.seed}:{context}".encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")

    def get_context_rng(self, context: str) -> random.Random:
        rng = self._contexts.get(context)
        if rng is None:
            rng = random.Random(self._derive_seed(context))
            self._contexts[context] = rng
        return rng

    def get_state(self) -> dict[str, tuple]:
        """Snapshot of every context stream created so far."""
        return {name: rng.getstate() for name, rng in self._contexts.items()}

    def set_state(self, state: dict[str, tuple]) -> None:
        self._contexts = {}
        for name, rng_state in state.items():
            rng = random.Random()
            rng.setstate(rng_state)
            self._contexts[name] = rng

    def __repr__(self) -> str:
        return f"RNGManager(seed={self.seed})"


__all__ = ["RNGManager"]
