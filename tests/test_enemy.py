import pytest

from starraid.effect import Effect
from starraid.enemy import Enemy, EnemyType
from starraid.geometry import Rect
from starraid.objects import Canvas, World


@pytest.fixture
def world():
    return World()


@pytest.mark.parametrize(
    "enemy_type, path",
    [
        (EnemyType.ZAKO, "Assets/tiny_ship10.png"),
        (EnemyType.MID, "Assets/tiny_ship18.png"),
        (EnemyType.KNIGHT, "Assets/tiny_ship16.png"),
        (EnemyType.BOSS, "Assets/tiny_ship9.png"),
    ],
)
def test_drawn_image_follows_type(world, enemy_type, path):
    enemy = Enemy(world, 0, enemy_type, 0)
    canvas = Canvas()
    enemy.draw(canvas)
    assert canvas.commands[0][1] == path


def test_enemy_joins_world(world):
    enemy = Enemy(world, 3, EnemyType.BOSS, 1)
    assert world.pending == [enemy]
    assert enemy.type is EnemyType.BOSS
    assert enemy.enemy_id == 3


def test_starts_at_initial_position(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO, 0)
    assert (enemy.x, enemy.y) == (Enemy.INIT_X, Enemy.INIT_Y)


def test_even_row_moves_right_odd_row_left(world):
    right = Enemy(world, 0, EnemyType.ZAKO, 0)
    left = Enemy(world, 1, EnemyType.ZAKO, 1)
    right.update()
    left.update()
    assert right.x == Enemy.INIT_X + Enemy.SPEED
    assert left.x == Enemy.INIT_X - Enemy.SPEED


def test_turns_round_when_timer_runs_out(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO, 0)
    world.delta_time = Enemy.TURN_TIME
    enemy.update()
    assert enemy.odd_speed == -Enemy.SPEED
    assert enemy.timer == Enemy.TURN_TIME
    before = enemy.x
    world.delta_time = 0.0
    enemy.update()
    assert enemy.x == before - Enemy.SPEED


def test_does_not_turn_before_timer(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO, 1)
    world.delta_time = 1.0
    enemy.update()
    assert enemy.even_speed == -Enemy.SPEED
    assert enemy.timer == Enemy.TURN_TIME - 1.0


def test_rect_matches_position(world):
    enemy = Enemy(world, 0, EnemyType.MID, 0)
    enemy.set_pos(20.0, 30.0)
    assert enemy.rect() == Rect(20.0, 30.0, Enemy.WIDTH, Enemy.HEIGHT)


def test_draw_only_when_alive(world):
    enemy = Enemy(world, 0, EnemyType.KNIGHT, 0)
    canvas = Canvas()
    enemy.draw(canvas)
    assert canvas.commands == [("image", "Assets/tiny_ship16.png", enemy.x, enemy.y,
                                Enemy.WIDTH, Enemy.HEIGHT)]
    enemy.alive = False
    enemy.draw(canvas)
    assert len(canvas.commands) == 1


def test_removal_leaves_explosion(world):
    enemy = Enemy(world, 0, EnemyType.ZAKO, 0)
    enemy.set_pos(40.0, 50.0)
    world.step(Canvas())
    enemy.alive = False
    world.sweep()
    assert enemy not in world.objects
    effects = [obj for obj in world.pending if isinstance(obj, Effect)]
    assert len(effects) == 1
    assert (effects[0].x, effects[0].y) == (40.0, 50.0)