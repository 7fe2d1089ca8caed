"""The invading ships."""

from __future__ import annotations

from enum import IntEnum

from .effect import Effect
from .geometry import WIN_WIDTH, Point, Rect
from .objects import Canvas, GameObject, World


class EnemyType(IntEnum):
    """The kinds of enemy ship, weakest first."""

    ZAKO = 0
    MID = 1
    KNIGHT = 2
    BOSS = 3

    @property
    def image_path(self) -> str:
        """Where the ship's picture is stored."""
        return _IMAGE_PATHS[self]


_IMAGE_PATHS = {
    EnemyType.ZAKO: "Assets/tiny_ship10.png",
    EnemyType.MID: "Assets/tiny_ship18.png",
    EnemyType.KNIGHT: "Assets/tiny_ship16.png",
    EnemyType.BOSS: "Assets/tiny_ship9.png",
}


class Enemy(GameObject):
    """A ship that sways sideways, turning round every few seconds.

    Ships with ``move_id`` 0 start to the right, those with 1 to the left.
    """

    WIDTH = 48
    HEIGHT = 48
    INIT_X = 100.0
    INIT_Y = 100.0
    SPEED = 1.5
    CENTER_X = WIN_WIDTH / 2 - 120
    SWAY = 200.0
    TURN_TIME = 3.0

    def __init__(self, world: World | None = None, enemy_id: int = 0,
                 type: EnemyType = EnemyType.ZAKO, move_id: int = 0) -> None:
        super().__init__(world)
        self.enemy_id = enemy_id
        self.type = EnemyType(type)
        self.move_id = move_id
        self.x = self.INIT_X
        self.y = self.INIT_Y
        self.odd_speed = self.SPEED
        self.even_speed = -self.SPEED
        self.center_x = self.CENTER_X
        self.timer = self.TURN_TIME

    def update(self) -> None:
        if self.move_id == 0:
            self.x += self.odd_speed
        elif self.move_id == 1:
            self.x += self.even_speed

        self.timer -= self.delta_time
        if self.timer <= 0:
            if self.move_id == 0:
                self.odd_speed = -self.odd_speed
            elif self.move_id == 1:
                self.even_speed = -self.even_speed
            self.timer = self.TURN_TIME

    def draw(self, canvas: Canvas) -> None:
        if self.alive:
            canvas.draw_image(canvas.load_image(self.type.image_path),
                              self.x, self.y, self.WIDTH, self.HEIGHT)

    def set_pos(self, x: float, y: float) -> None:
        """Move the ship to ``(x, y)``."""
        self.x = x
        self.y = y

    def rect(self) -> Rect:
        """The ship's hit box."""
        return Rect(self.x, self.y, self.WIDTH, self.HEIGHT)

    def on_removed(self) -> None:
        """Leave an explosion where the ship was."""
        Effect(self.world, Point(self.x, self.y))