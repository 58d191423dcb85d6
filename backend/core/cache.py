# core/cache.py
import time
from typing import Any, Callable, Awaitable, Dict, Optional, Tuple


class BoundedCache:
    """Insertion-ordered key/value store; evicts the oldest entry when full."""

    def __init__(self, maxsize: int = 100, ttl_seconds: Optional[float] = None):
        self.maxsize = maxsize
        self.ttl = ttl_seconds
        self._store: Dict[str, Tuple[Optional[float], Any]] = {}

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str):
        rec = self._store.get(key)
        if not rec:
            return None
        exp, val = rec
        if exp is not None and exp < time.time():
            self._store.pop(key, None)
            return None
        return val

    def set(self, key: str, val: Any):
        if key not in self._store and len(self._store) >= self.maxsize:
            old_key = next(iter(self._store))
            self._store.pop(old_key, None)
        exp = time.time() + self.ttl if self.ttl is not None else None
        self._store[key] = (exp, val)

    async def aget_or_set(
        self,
        key: str,
        creator: Callable[[], Awaitable[Any]],
        store_if: Optional[Callable[[Any], bool]] = None,
    ):
        hit = self.get(key)
        if hit is not None:
            return hit
        val = await creator()
        if store_if is None or store_if(val):
            self.set(key, val)
        return val
