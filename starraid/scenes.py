"""The title and closing screens."""

from __future__ import annotations

from .objects import Canvas, GameObject

WHITE = (255, 255, 255)


class StartScene(GameObject):
    """The screen shown before play starts."""

    def __init__(self) -> None:
        super().__init__(None)

    def update(self) -> None:
        """Nothing moves on this screen."""

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_text(100, 100, "PlayScene", WHITE)
        canvas.draw_text(500, 500, "Push K", WHITE)


class EndScene(GameObject):
    """The screen shown after play ends."""

    def __init__(self) -> None:
        super().__init__(None)

    def update(self) -> None:
        """Nothing moves on this screen."""

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_text(100, 100, "EndScene", WHITE)
        canvas.draw_text(500, 500, "Push K", WHITE)