"""The play field: the player, the enemy formation and their beams."""

from __future__ import annotations

from .enemy import Enemy, EnemyType
from .enemy_beam import EnemyBeam
from .objects import Canvas, GameObject, World
from .player import Player

ENEMY_COLUMNS = 10
ENEMY_ROWS = 7
ENEMY_X_OFFSET = 270
ENEMY_BEAM_COUNT = 10
BACKGROUND_PATH = "Assets/sbg.png"
BACKGROUND_ALPHA = 200

_ROW_TYPES = (
    EnemyType.BOSS, EnemyType.KNIGHT, EnemyType.MID,
    EnemyType.ZAKO, EnemyType.ZAKO, EnemyType.ZAKO, EnemyType.ZAKO,
)


class Stage(GameObject):
    """Sets up the battle and settles hits between bullets and enemies."""

    def __init__(self, world: World | None = None) -> None:
        super().__init__(world)
        self.player = Player(world)
        self.enemies: list[Enemy] = []
        for index in range(ENEMY_COLUMNS * ENEMY_ROWS):
            row, col = divmod(index, ENEMY_COLUMNS)
            enemy = Enemy(world, index, _ROW_TYPES[row], index % 2)
            enemy.set_pos(col * 55.0 + ENEMY_X_OFFSET, row * 50.0)
            self.enemies.append(enemy)
        self.beams = [EnemyBeam(world, int(enemy.x), int(enemy.y))
                      for enemy in self.enemies[:ENEMY_BEAM_COUNT]]

    def update(self) -> None:
        for enemy in self.enemies:
            for bullet in self.player.bullets:
                if bullet.fired and enemy.alive and enemy.rect().intersects(bullet.rect()):
                    bullet.fired = False
                    enemy.alive = False

        shooter = next((enemy for enemy in self.enemies if enemy.alive), None)
        if shooter is None:
            return
        for beam in self.beams:
            if beam.is_out_of_screen():
                beam.set_pos(int(shooter.x), int(shooter.y))
                beam.fired = True

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_background(canvas.load_image(BACKGROUND_PATH), BACKGROUND_ALPHA)