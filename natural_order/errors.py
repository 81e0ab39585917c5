from __future__ import annotations


class UnorderablePairError(TypeError):
    """
    Raised by the sort entry points when two inputs have no natural order
    (a number faces letters at the first differing position, e.g. "1" vs "a").
    Subclasses TypeError, which is what list.sort() raises for unorderable values.
    """

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"unorderable input pair: {left!r} vs {right!r}")
