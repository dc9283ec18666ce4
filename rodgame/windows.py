"""The game window and its split into rectangular sub-screens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .settings import SCREEN_HEIGHT, SCREEN_WIDTH

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Partition:
    """A sub-screen given by its centre and size."""

    center: tuple[float, float]
    size: tuple[float, float]

    @property
    def left(self) -> float:
        return self.center[0] - self.size[0] / 2

    @property
    def top(self) -> float:
        return self.center[1] - self.size[1] / 2

    def contains(self, point: tuple[float, float]) -> bool:
        """True if ``point`` lies inside; the right and bottom edges are excluded."""
        x, y = point
        x0, x1 = sorted((self.left, self.left + self.size[0]))
        y0, y1 = sorted((self.top, self.top + self.size[1]))
        return x0 <= x < x1 and y0 <= y < y1


class WindowManager:
    """Holds the render window and the sub-screens it can show."""

    def __init__(self, window: Optional[Any] = None) -> None:
        self.window = window
        self._partitions: list[Partition] = []

    @property
    def partitions(self) -> list[Partition]:
        return list(self._partitions)

    def _require_window(self) -> Any:
        if self.window is None:
            raise RuntimeError("no window has been set")
        return self.window

    def switch_subscreen(self, index: int) -> None:
        """Show sub-screen ``index``; raise IndexError for an invalid index."""
        if not 0 <= index < len(self._partitions):
            raise IndexError(f"invalid sub-screen index {index}")
        self._require_window().set_view(self._partitions[index])

    def mouse_over_subscreen(self, position: tuple[float, float]) -> bool:
        """Show the first sub-screen under ``position``; False if there is none."""
        for partition in self._partitions:
            if partition.contains(position):
                self._require_window().set_view(partition)
                return True
        return False

    def generate_partitions(self, columns: int, rows: int) -> None:
        """Replace the sub-screens with an even grid over the screen."""
        self._require_window()
        width = SCREEN_WIDTH // rows
        height = SCREEN_HEIGHT // columns
        self._partitions = [
            Partition(
                center=(width * i + width / 2, height * j + height / 2),
                size=(width, height),
            )
            for i in range(rows)
            for j in range(columns)
        ]