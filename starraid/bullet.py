"""The player's shot."""

from __future__ import annotations

from .geometry import Rect
from .objects import Canvas, GameObject, World


class Bullet(GameObject):
    """A shot that flies upwards while fired and stands ready otherwise."""

    WIDTH = 13
    HEIGHT = 33
    SPEED = 200.0
    IMAGE_PATH = "Assets/laserBlue03.png"

    def __init__(self, world: World | None = None, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(world)
        self.x = x
        self.y = y
        self.speed = self.SPEED
        self.fired = False

    def update(self) -> None:
        self.y -= self.speed * self.delta_time
        if self.y < 0:
            self.fired = False

    def draw(self, canvas: Canvas) -> None:
        if self.fired:
            canvas.draw_image(canvas.load_image(self.IMAGE_PATH),
                              self.x, self.y, self.WIDTH, self.HEIGHT)

    def set_pos(self, x: float, y: float) -> None:
        """Move the bullet to ``(x, y)``."""
        self.x = x
        self.y = y

    def rect(self) -> Rect:
        """The bullet's hit box."""
        return Rect(self.x, self.y, 13.0, 33.0)