"""Wrap-around page cursor shared by the facade and its navigation session."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class NavigationCursor:
    """Track the 1-based current page and the total page count.

    Stepping wraps around at either end. The cursor always satisfies
    ``1 <= current <= max(page_count, 1)``.
    """

    page_count: int
    current: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.current <= max(self.page_count, 1):
            self.current = 1

    def wrap_next(self) -> int:
        """Advance one page, wrapping from the last page to the first."""
        if self.current >= self.page_count:
            self.current = 1
        else:
            self.current += 1
        return self.current

    def wrap_prev(self) -> int:
        """Step back one page, wrapping from the first page to the last."""
        if self.current == 1:
            self.current = max(self.page_count, 1)
        else:
            self.current -= 1
        return self.current

    def clamp_to_count(self, page_count: int) -> int:
        """Adopt a regenerated page count, resetting when out of range."""
        if self.current > page_count:
            self.current = 1
        self.page_count = page_count
        return self.current

    def reset(self) -> int:
        self.current = 1
        return self.current

    @property
    def label(self) -> tuple[int, int]:
        """Return ``(current, total)`` as shown in the page footer."""
        return self.current, max(self.page_count, 1)


__all__ = ["NavigationCursor"]
