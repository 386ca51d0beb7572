# instance_describer/core/domain/cache.py
import threading
from typing import Callable, Dict, Generic, Iterator, TypeVar

T = TypeVar("T")


class DescriberCache(Generic[T]):
    """
    Write-once map from class name to a previously built describer.

    Entries are never evicted or replaced. Two threads racing to build the
    same key both get whichever describer was stored first, which is safe
    because identity describers depend on the class name alone.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, T] = {}
        self._lock = threading.Lock()

    def get_or_create(self, key: str, build: Callable[[str], T]) -> T:
        existing = self._entries.get(key)
        if existing is not None:
            return existing

        candidate = build(key)
        with self._lock:
            return self._entries.setdefault(key, candidate)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
