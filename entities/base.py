# entities/base.py
from typing import List, Protocol, TypeVar


class Simulated(Protocol):
    """Anything the Session advances once per tick. Drawing lives in ui/render.py."""

    alive: bool

    def update(self) -> None:
        ...


T = TypeVar("T", bound=Simulated)


def compact(items: List[T]) -> List[T]:
    # removal happens here, after a pass, never while iterating
    return [e for e in items if e.alive]
