import abc
import hashlib
import threading

__all__ = ["VerdictCache", "InMemoryVerdictCache", "NullVerdictCache", "make_cache_key"]


def make_cache_key(user_agent: str) -> str:
    return hashlib.sha256(user_agent.encode("utf-8", "surrogateescape")).hexdigest()


class VerdictCache(abc.ABC):  # pragma: no cover
    @abc.abstractmethod
    def get(self, key: str) -> bool | None:
        pass

    @abc.abstractmethod
    def put(self, key: str, verdict: bool) -> None:
        pass


class InMemoryVerdictCache(VerdictCache):
    """Process-wide verdict storage.

    Entries are never evicted and never overwritten: the first verdict stored for a key wins.
    Safe to share between threads."""

    def __init__(self) -> None:
        self.verdicts: dict[str, bool] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bool | None:
        with self._lock:
            return self.verdicts.get(key)

    def put(self, key: str, verdict: bool) -> None:
        with self._lock:
            self.verdicts.setdefault(key, verdict)

    def __len__(self) -> int:
        return len(self.verdicts)


class NullVerdictCache(VerdictCache):
    def get(self, key: str) -> bool | None:
        return None

    def put(self, key: str, verdict: bool) -> None:
        pass
