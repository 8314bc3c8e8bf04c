from dataclasses import dataclass
import math
from typing import Any, Callable, Generic, Iterator, TypeVar

from .fnv import fnv1a_32
from .keys import KeyEncoder, encode_key


K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Empty:
    pass


@dataclass
class Occupied(Generic[K, V]):
    key: K
    value: V
    hash: int


Slot = Empty | Occupied


@dataclass
class NotFound:
    pass


class TableInconsistencyError(RuntimeError):
    pass


@dataclass(frozen=True)
class ProbeEvent:
    key: Any
    home_index: int
    index: int


@dataclass(frozen=True)
class ResizeEvent:
    old_capacity: int
    new_capacity: int


TableEvent = ProbeEvent | ResizeEvent
EventSink = Callable[[TableEvent], None]


INITIAL_CAPACITY = 3
GROWTH_FACTOR = 2


@dataclass(frozen=True)
class TableConfig:
    initial_capacity: int = INITIAL_CAPACITY
    growth_factor: float = GROWTH_FACTOR

    def __post_init__(self) -> None:
        if (
            not isinstance(self.initial_capacity, int)
            or isinstance(self.initial_capacity, bool)
            or self.initial_capacity < 1
        ):
            raise ValueError("initial_capacity must be a positive int", self.initial_capacity)
        if (
            not isinstance(self.growth_factor, (int, float))
            or isinstance(self.growth_factor, bool)
            or not self.growth_factor > 1
            or not math.isfinite(self.growth_factor)
        ):
            raise ValueError("growth_factor must be a finite number greater than 1", self.growth_factor)

    def grow(self, capacity: int) -> int:
        return max(capacity + 1, int(capacity * self.growth_factor))


class HashTable(Generic[K, V]):
    """Open addressing hash table with linear probing.

    Slots are hashed with 32-bit FNV-1a over `key_encoder(key)`. The table
    grows before an insertion whenever every slot is taken, so the insertion
    probe always has an empty slot to land on. There is no delete.
    """

    def __init__(
        self,
        config: TableConfig | None = None,
        key_encoder: KeyEncoder = encode_key,
        on_event: EventSink | None = None,
    ) -> None:
        self.config = config if config is not None else TableConfig()
        self.key_encoder = key_encoder
        self.on_event = on_event
        self.count = 0
        self.entries: list[Slot] = [Empty() for _ in range(self.config.initial_capacity)]

    @property
    def capacity(self) -> int:
        return len(self.entries)

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(self.entries)

    def size(self) -> int:
        return self.count

    def set(self, key: K, value: V) -> None:
        hash = self._hash(key)
        self._grow_if_needed()
        if self._insert(self.entries, key, value, hash):
            self.count += 1

    def get(self, key: K) -> V | NotFound:
        hash = self._hash(key)
        index = self._index_for(self.entries, hash)

        entry = self.entries[index]
        if isinstance(entry, Empty):
            return NotFound()
        if entry.key == key:
            return entry.value

        found = self._probe(self.entries, key, index, for_set=False)
        if found is None:
            return NotFound()

        entry = self.entries[found]
        if not isinstance(entry, Occupied) or entry.key != key:
            raise TableInconsistencyError("lookup probe returned a foreign slot", key, found)
        return entry.value

    def add_all(self, from_t: "HashTable[K, V]") -> None:
        for key, value in from_t.items():
            self.set(key, value)

    def items(self) -> Iterator[tuple[K, V]]:
        for entry in self.entries:
            if isinstance(entry, Occupied):
                yield entry.key, entry.value

    def _hash(self, key: K) -> int:
        return fnv1a_32(self.key_encoder(key))

    def _index_for(self, entries: list[Slot], hash: int) -> int:
        return hash % len(entries)

    def _insert(self, entries: list[Slot], key: K, value: V, hash: int) -> bool:
        index = self._index_for(entries, hash)

        entry = entries[index]
        if isinstance(entry, Occupied) and entry.key != key:
            found = self._probe(entries, key, index, for_set=True)
            if found is None:
                raise TableInconsistencyError("no free slot for insert", key, len(entries))
            index = found

        entry = entries[index]
        if isinstance(entry, Empty):
            entries[index] = Occupied(key, value, hash)
            return True
        if entry.key == key:
            entry.value = value
            return False
        raise TableInconsistencyError("insert probe returned a foreign slot", key, index)

    def _probe(self, entries: list[Slot], key: K, start: int, for_set: bool) -> int | None:
        capacity = len(entries)
        for i in range(1, capacity):
            index = (start + i) % capacity
            self._emit(ProbeEvent(key, start, index))

            entry = entries[index]
            if isinstance(entry, Empty):
                if for_set:
                    return index
            elif entry.key == key:
                return index

        return None

    def _grow_if_needed(self) -> None:
        if self.count < len(self.entries):
            return

        new_capacity = self.config.grow(len(self.entries))
        self._emit(ResizeEvent(len(self.entries), new_capacity))

        # the table only switches over once every entry is placed
        new_entries: list[Slot] = [Empty() for _ in range(new_capacity)]
        count = 0
        for entry in self.entries:
            if isinstance(entry, Occupied):
                if self._insert(new_entries, entry.key, entry.value, entry.hash):
                    count += 1

        self.entries = new_entries
        self.count = count

    def _emit(self, event: TableEvent) -> None:
        if self.on_event is not None:
            self.on_event(event)
