"""Hierarchical section numbering."""

from __future__ import annotations

from .constants import MAX_SECTION_DEPTH


class SectionNumberer:
    """Produce dotted section numbers (``1``, ``1.2``, ``1.2.3``) in document order.

    One counter is kept per depth. Advancing a depth resets every deeper
    counter, so a new chapter restarts its sections at 1. Create one instance
    per rendered document.

    Examples:
        numberer = SectionNumberer()
        numberer.number_for(1)  # "1"
        numberer.number_for(2)  # "1.1"
        numberer.number_for(1)  # "2"
        numberer.number_for(2)  # "2.1"
    """

    def __init__(self) -> None:
        self._counters = [0] * MAX_SECTION_DEPTH

    def number_for(self, depth: int) -> str:
        """Advance the counter at `depth` and return the section number.

        Args:
            depth: Position of the heading in the current hierarchy, from 1 to 4.

        Returns:
            str: Dot-separated number with exactly `depth` components.

        Raises:
            ValueError: If `depth` is outside 1..4.
        """
        if not 1 <= depth <= MAX_SECTION_DEPTH:
            raise ValueError(f"Section depth must be between 1 and {MAX_SECTION_DEPTH}, got {depth}")

        for deeper in range(depth, MAX_SECTION_DEPTH):
            self._counters[deeper] = 0
        self._counters[depth - 1] += 1

        return ".".join(str(counter) for counter in self._counters[:depth])

    @property
    def counters(self) -> tuple[int, ...]:
        return tuple(self._counters)
