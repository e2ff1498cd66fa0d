from ...constants import Defaults


class IdGenerator:
    """Issues the ``ID<n>`` identifiers shared by every element of one document.

    A single counter serves places, transitions, arcs, color sets, instances,
    fusion sets and annotations, so ids never collide across kinds.
    """

    def __init__(
        self, prefix: str = Defaults.ID_PREFIX, seed: int = Defaults.ID_SEED
    ) -> None:
        super().__init__()
        self.prefix = prefix
        self._counter = seed
        self._issued = 0

    def next(self) -> str:
        self._counter += 1
        self._issued += 1
        return f"{self.prefix}{self._counter}"

    @property
    def issued(self) -> int:
        return self._issued
