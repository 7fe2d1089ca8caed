"""The object world: drawable game objects, the drawing target and the frame loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .input import Keyboard


class Canvas:
    """A drawing target that keeps a record of everything drawn on it.

    It needs no display, which makes it the target for headless runs;
    a real window implements the same methods.
    """

    def __init__(self) -> None:
        self.loaded: list[str] = []
        self.commands: list[tuple[Any, ...]] = []

    def load_image(self, path: str) -> Any:
        """Return a handle for the image stored at ``path``."""
        if path not in self.loaded:
            self.loaded.append(path)
        return path

    def load_frames(self, path: str, count: int, columns: int, rows: int, size: int) -> list[Any]:
        """Split the sheet at ``path`` into ``count`` square frames, row by row."""
        if count <= 0 or columns <= 0 or rows <= 0 or size <= 0:
            raise ValueError("frame count, grid and size must be positive")
        if count > columns * rows:
            raise ValueError(f"{count} frames do not fit a {columns}x{rows} grid")
        if path not in self.loaded:
            self.loaded.append(path)
        return [(path, index) for index in range(count)]

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None:
        """Draw ``image`` stretched over the given rectangle."""
        self.commands.append(("image", image, x, y, width, height))

    def draw_text(self, x: float, y: float, text: str, color: tuple[int, int, int]) -> None:
        """Draw ``text`` with its top-left corner at ``(x, y)``."""
        self.commands.append(("text", x, y, text, color))

    def draw_background(self, image: Any, alpha: int) -> None:
        """Draw ``image`` over the whole screen with the given opacity (0-255)."""
        self.commands.append(("background", image, alpha))


class GameObject(ABC):
    """Something that lives in the world, is updated and drawn every frame."""

    def __init__(self, world: World | None = None) -> None:
        self.world = world
        self.alive = True
        if world is not None:
            world.add(self)

    @property
    def delta_time(self) -> float:
        """Seconds since the previous frame, as known to the world."""
        return self.world.delta_time if self.world is not None else 0.0

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw the object on ``canvas``."""

    def on_removed(self) -> None:
        """Called once the world has dropped the object."""


class World:
    """Holds the live objects, the frame time and the keyboard state."""

    def __init__(self, keyboard: Keyboard | None = None) -> None:
        self.objects: list[GameObject] = []
        self.pending: list[GameObject] = []
        self.delta_time = 0.0
        self.keyboard = keyboard if keyboard is not None else Keyboard()

    def add(self, obj: GameObject) -> None:
        """Queue ``obj``; it joins the world at the start of the next step."""
        self.pending.append(obj)

    def step(self, canvas: Canvas) -> None:
        """Take in queued objects, then update every object and draw every object."""
        if self.pending:
            self.objects.extend(self.pending)
            self.pending.clear()
        for obj in self.objects:
            obj.update()
        for obj in self.objects:
            obj.draw(canvas)

    def sweep(self) -> None:
        """Drop the objects that are no longer alive."""
        dead = [obj for obj in self.objects if not obj.alive]
        if not dead:
            return
        self.objects = [obj for obj in self.objects if obj.alive]
        for obj in dead:
            obj.on_removed()