"""The player's ship."""

from __future__ import annotations

from .bullet import Bullet
from .geometry import WIN_HEIGHT, WIN_WIDTH, Rect
from .input import KEY_LEFT, KEY_RIGHT, KEY_SPACE
from .objects import Canvas, GameObject, World


class Player(GameObject):
    """A ship at the bottom of the screen that moves sideways and fires bullets."""

    SPEED = 200.0
    WIDTH = 48
    HEIGHT = 48
    BASE_MARGIN = 32
    INIT_X = WIN_WIDTH // 2 - WIDTH // 2
    INIT_Y = WIN_HEIGHT - HEIGHT - BASE_MARGIN
    BULLET_MARGIN = 17
    BULLET_INTERVAL = 0.4
    BULLET_COUNT = 5
    IMAGE_PATH = "Assets/tiny_ship5.png"

    def __init__(self, world: World | None = None) -> None:
        # The bullets join the world ahead of the ship itself.
        self.bullets = [Bullet(world) for _ in range(self.BULLET_COUNT)]
        super().__init__(world)
        self.x = float(self.INIT_X)
        self.y = float(self.INIT_Y)
        self.speed = self.SPEED
        self.bullet_timer = 0.0

    def update(self) -> None:
        keyboard = self.world.keyboard if self.world is not None else None
        dt = self.delta_time
        next_x = self.x
        if keyboard is not None and keyboard.held_frames(KEY_LEFT):
            next_x = self.x - self.speed * dt
        if keyboard is not None and keyboard.held_frames(KEY_RIGHT):
            next_x = self.x + self.speed * dt
        if 0 <= next_x <= WIN_WIDTH - self.WIDTH:
            self.x = next_x

        if self.bullet_timer > 0.0:
            self.bullet_timer -= dt
        if keyboard is not None and keyboard.is_key_down(KEY_SPACE) and self.bullet_timer <= 0.0:
            self.shoot()
            self.bullet_timer = self.BULLET_INTERVAL

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(canvas.load_image(self.IMAGE_PATH),
                          self.x, self.y, self.WIDTH, self.HEIGHT)

    def shoot(self) -> None:
        """Fire the first bullet that is not already in flight, if any."""
        bullet = next((b for b in self.bullets if not b.fired), None)
        if bullet is not None:
            bullet.set_pos(self.x + self.BULLET_MARGIN, self.y)
            bullet.fired = True

    def rect(self) -> Rect:
        """The ship's hit box."""
        return Rect(self.x, self.y, self.WIDTH, self.HEIGHT)