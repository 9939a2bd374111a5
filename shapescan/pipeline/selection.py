from typing import Iterable, List, Set


class SelectionSet:
    """
    Images picked for an evaluation run, kept in gallery order.
    """

    def __init__(self, available: Iterable[str]):
        self.available: List[str] = list(available)
        self._selected: Set[str] = set()

    def toggle(self, name: str) -> bool:
        """Flip selection for ``name``; returns the new state."""
        if name not in self.available:
            raise KeyError(f"Unknown image: {name!r}")
        if name in self._selected:
            self._selected.discard(name)
            return False
        self._selected.add(name)
        return True

    def select_all(self) -> None:
        self._selected = set(self.available)

    def clear(self) -> None:
        self._selected.clear()

    def is_selected(self, name: str) -> bool:
        return name in self._selected

    @property
    def selected(self) -> List[str]:
        return [name for name in self.available if name in self._selected]

    def summary(self) -> str:
        n = len(self._selected)
        return f"{n} image{'' if n == 1 else 's'} selected"
