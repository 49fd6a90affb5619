from typing import Iterable, Iterator


class SelectionSet:
    """Insertion-ordered set of cell keys."""

    def __init__(self, keys: Iterable[str] = ()):
        self._keys: dict[str, None] = dict.fromkeys(keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def add(self, key: str) -> None:
        self._keys.setdefault(key, None)

    def discard(self, key: str) -> None:
        self._keys.pop(key, None)

    def replace(self, key: str) -> None:
        self._keys = {key: None}

    def clear(self) -> None:
        self._keys.clear()

    def keys(self) -> tuple[str, ...]:
        return tuple(self._keys)
