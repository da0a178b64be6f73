from .errors import ConcurrentModificationError


class Snapshot:
    """Version token handed to an iterator when it is created."""

    __slots__ = ("_state", "version")

    def __init__(self, state, version):
        self._state = state
        self.version = version

    def is_current(self) -> bool:
        return not self._state.dirty_since(self.version)

    def check(self):
        """Raise ``ConcurrentModificationError`` if the graph moved on."""
        if self._state.version != self.version:
            raise ConcurrentModificationError(self.version, self._state.version)

    def __repr__(self):
        return f"Snapshot(version={self.version})"


class _State:
    def __init__(self):
        self.version = 0

    def bump(self) -> int:
        self.version += 1
        return self.version

    def snapshot(self) -> Snapshot:
        return Snapshot(self, self.version)

    def dirty_since(self, version: int) -> bool:
        return self.version > version
