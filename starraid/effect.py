"""The explosion left behind by a destroyed enemy."""

from __future__ import annotations

from .geometry import Point
from .objects import Canvas, GameObject, World


class Effect(GameObject):
    """An explosion animation that removes itself after half a second."""

    FRAME_COUNT = 9
    GRID = 3
    IMAGE_PATH = "Assets/explosion.png"
    LIFETIME = 0.5
    SIZE = 48
    FRAME_TIME = LIFETIME / FRAME_COUNT

    def __init__(self, world: World | None, pos: Point) -> None:
        super().__init__(world)
        self.x = pos.x
        self.y = pos.y
        self.anim_timer = self.LIFETIME
        self.frame_timer = self.FRAME_TIME
        self.frame = 0

    def update(self) -> None:
        dt = self.delta_time
        self.anim_timer -= dt
        if self.anim_timer < 0:
            self.alive = False
        self.frame_timer -= dt
        if self.frame_timer < 0:
            self.frame += 1
            self.frame_timer = self.FRAME_TIME - self.frame_timer

    def draw(self, canvas: Canvas) -> None:
        if not self.alive:
            return
        frames = canvas.load_frames(self.IMAGE_PATH, self.FRAME_COUNT,
                                    self.GRID, self.GRID, self.SIZE)
        image = frames[min(self.frame, len(frames) - 1)]
        x, y = int(self.x), int(self.y)
        canvas.draw_image(image, x, y, self.SIZE, self.SIZE)

    def set_pos(self, x: float, y: float) -> None:
        """Move the explosion to ``(x, y)``."""
        self.x = x
        self.y = y