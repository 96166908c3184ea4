class DiffConfig:
    """Set of options for a diff call to pass around"""

    def __init__(self, *, atomic_paths=None):
        if atomic_paths is None:
            atomic_paths = {}
        elif not isinstance(atomic_paths, dict):
            atomic_paths = {path: True for path in atomic_paths}
        self._atomic_paths = atomic_paths

    @property
    def atomic_paths(self):
        return sorted(p for p, atomic in self._atomic_paths.items() if atomic)

    def is_atomic(self, path=None):
        "Return True for paths whose values diff should compare as a single atomic value."
        return self._atomic_paths.get(path or '/', False)
