import time
from dataclasses import dataclass
from typing import List, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def time_seed() -> int:
    """Seed derived from the wall clock, for runs without an explicit seed."""
    return time.time_ns() & 0x7FFFFFFF


@dataclass
class PMRandom:
    """
    Park–Miller minimal-standard generator.

    Every random decision of the dungeon pipeline is drawn from one instance,
    so a seed fully determines the layout.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        # Valid states are 1..M-1; 0 would lock the generator at zero.
        return cls((seed % (M - 1)) + 1)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """Uniform integer in [0, n), rejection-sampled so there is no modulo bias."""
        if n <= 0:
            raise ValueError(f"below() needs n > 0, got {n}")
        span = M - 1
        limit = span - (span % n)
        while True:
            v = self.next32() - 1  # 0..M-2
            if v < limit:
                return v % n

    def bounded(self, n: int) -> int:
        # 1..n inclusive
        return self.below(n) + 1

    def randint(self, lo: int, hi: int) -> int:
        if lo > hi:
            raise ValueError(f"empty range {lo}..{hi}")
        return lo + self.below(hi - lo + 1)

    def coin(self) -> bool:
        return self.below(2) == 1

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("choice() from an empty sequence")
        return seq[self.below(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        # Fisher–Yates, in place.
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]

    def shuffled(self, items: Sequence[T]) -> List[T]:
        out = list(items)
        self.shuffle(out)
        return out
