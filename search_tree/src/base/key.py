from typing import Any, Protocol


class Comparable(Protocol):
    # every key type has to give us a total order through `<`
    def __lt__(self, other: Any, /) -> bool: ...
