"""The enemies' beam shot."""

from __future__ import annotations

from .geometry import WIN_HEIGHT, Point, Rect
from .objects import Canvas, GameObject, World


class EnemyBeam(GameObject):
    """A beam that falls down the screen until it passes the bottom."""

    WIDTH = 16
    HEIGHT = 48
    SPEED = 200.0
    IMAGE_PATH = "Assets/ebeams.png"

    def __init__(self, world: World | None = None, x: float = -10.0, y: float = -10.0) -> None:
        super().__init__(world)
        self.pos = Point(x, y)
        self.speed = self.SPEED
        self.size = Point(self.WIDTH, self.HEIGHT)
        self.fired = True

    def update(self) -> None:
        self.pos.y += self.speed * self.delta_time
        if self.pos.y >= WIN_HEIGHT:
            self.fired = False

    def draw(self, canvas: Canvas) -> None:
        if self.fired:
            x, y = int(self.pos.x), int(self.pos.y)
            canvas.draw_image(canvas.load_image(self.IMAGE_PATH),
                              x, y, int(self.size.x), int(self.size.y))

    def is_out_of_screen(self) -> bool:
        """True once the beam has reached the bottom of the screen."""
        return self.pos.y >= WIN_HEIGHT

    def set_pos(self, x: float, y: float) -> None:
        """Move the beam to ``(x, y)``."""
        self.pos = Point(x, y)

    def rect(self) -> Rect:
        """The beam's hit box."""
        return Rect(self.pos.x, self.pos.y, self.size.x, self.size.y)