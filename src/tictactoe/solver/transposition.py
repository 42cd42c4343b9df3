from dataclasses import dataclass

TABLE_SIZE = 131072


@dataclass(slots=True)
class TTEntry:
    key: int
    value: int  # normalized, 1..255
    depth: int  # plies played when the position was searched


class TranspositionTable:
    """Direct-mapped cache of search results.

    Each key maps to exactly one slot (``key % size``) and a store always
    overwrites whatever is there. Lookups compare the stored key, so a slot
    taken over by another key reads as a miss instead of a stale value.
    Zero is reserved as the empty value; stored values must be positive.
    """

    def __init__(self, size: int = TABLE_SIZE):
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self.table: list[TTEntry | None] = [None] * size

    def lookup(self, key: int) -> tuple[int, int] | None:
        """Return ``(value, depth)`` stored for ``key``, or None if absent."""
        entry = self.table[key % self.size]
        if entry is None or entry.key != key or entry.value == 0:
            return None
        return entry.value, entry.depth

    def store(self, key: int, value: int, depth: int) -> None:
        if not 0 < value < 256:
            raise ValueError(f"value must be in 1..255, got {value}")
        if not 0 <= depth < 256:
            raise ValueError(f"depth must be in 0..255, got {depth}")
        self.table[key % self.size] = TTEntry(key, value, depth)

    def clear(self) -> None:
        self.table = [None] * self.size

    def __len__(self) -> int:
        return sum(1 for entry in self.table if entry is not None)
