# starraid

A small arcade shooter. Seventy enemy ships fill the top of the screen in
seven rows of ten. The first row holds bosses, the second knights and the
third mid-size ships. The other four rows hold small ships. Neighbouring
columns sway in opposite directions, and every ship turns round every three
seconds. Your ship sits at the bottom. Enemy beams fall from the first ship
still standing, and a shot that hits an enemy ship destroys it. An explosion
then plays where the ship was.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
starraid
```

This opens a 1024 × 768 window titled "TITLE". The game loads its images from
an `Assets` directory relative to the directory you start it in. An image that
cannot be loaded is not drawn.

- `tiny_ship5.png`: the player
- `tiny_ship10.png`, `tiny_ship18.png`, `tiny_ship16.png`, `tiny_ship9.png`: the small, mid-size, knight and boss ships
- `laserBlue03.png`: the player's shots
- `ebeams.png`: the enemy beams
- `explosion.png`: the explosion, a 3 × 3 sheet of 48-pixel frames
- `sbg.png`: the background, drawn partly transparent

### Controls

| Key   | Action |
|-------|--------|
| K     | Moves on from the title screen to play, from play to the end screen, and from the end screen back to the title screen |
| ← / → | Move your ship. Movement starts once the key has been held for more than one frame. |
| Space | Fire. Each press fires one shot. At most five shots are in flight at once, and shots are at least 0.4 s apart. |
| Esc   | Quit (closing the window also quits) |

### What the game does not do

Enemy beams fall, but they never hit your ship. The game has no score, no
lives and no game-over condition. Going back through the title screen does not
reset the battle: play picks up where it was left.

## Using the pieces

The game logic does not depend on a window:

- `starraid.objects.World` holds the game objects, the time since the last frame and a
  `starraid.input.Keyboard`.
- `starraid.objects.Canvas` is a drawing target that only records what is drawn on it.
- `starraid.app.Game.frame(pressed, delta_time, canvas)` advances one frame. It takes the
  set of pressed key codes (the `KEY_*` constants in `starraid.input`) and the seconds since
  the previous frame. It returns `False` once Esc is pressed.

The pieces can be driven headless, as in this example:

```python
from starraid.app import Game
from starraid.input import KEY_K
from starraid.objects import Canvas

game = Game()
canvas = Canvas()
game.frame({KEY_K}, 0.016, canvas)   # title screen -> play
game.frame(set(), 0.016, canvas)
print(canvas.commands[-1])
```

`starraid.app.PygameCanvas` is the canvas that the `starraid` command draws with.

## Running the tests

```
pip install .[test]
pytest
```