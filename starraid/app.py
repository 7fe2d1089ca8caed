"""The game loop, its scenes and the window it draws into."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from enum import Enum
from typing import Any

import pygame

from .geometry import WIN_HEIGHT, WIN_WIDTH
from .input import KEY_ESCAPE, KEY_K, KEY_LEFT, KEY_RIGHT, KEY_SPACE
from .objects import Canvas, World
from .scenes import EndScene, StartScene
from .stage import Stage

BACKGROUND_COLOR = (0, 0, 0)
WINDOW_TITLE = "TITLE"
FRAME_WAIT_MS = 16


class Scene(Enum):
    """Which screen the game is showing."""

    START = "start"
    PLAY = "play"
    END = "end"


class Game:
    """Runs one frame at a time and switches screens on the K key."""

    def __init__(self, world: World | None = None) -> None:
        self.world = world if world is not None else World()
        self.stage = Stage(self.world)
        self.start_scene = StartScene()
        self.end_scene = EndScene()
        self.scene = Scene.START

    def frame(self, pressed: Iterable[int], delta_time: float, canvas: Canvas) -> bool:
        """Advance by one frame; return False once the game should stop."""
        pressed = frozenset(pressed)
        keyboard = self.world.keyboard
        keyboard.update(pressed)
        self.world.delta_time = delta_time

        if self.scene is Scene.START:
            self.start_scene.update()
            self.start_scene.draw(canvas)
            if keyboard.is_key_down(KEY_K):
                self.scene = Scene.PLAY
        elif self.scene is Scene.PLAY:
            self.world.step(canvas)
            self.world.sweep()
            if keyboard.is_key_down(KEY_K):
                self.scene = Scene.END
        else:
            self.end_scene.update()
            self.end_scene.draw(canvas)
            if keyboard.is_key_down(KEY_K):
                self.scene = Scene.START

        return KEY_ESCAPE not in pressed


class PygameCanvas(Canvas):
    """Draws onto a pygame surface; images that cannot be loaded draw nothing."""

    FONT_SIZE = 16

    def __init__(self, surface: pygame.Surface) -> None:
        super().__init__()
        self.surface = surface
        self._images: dict[str, Any] = {}
        self._frames: dict[tuple[str, int, int, int, int], list[Any]] = {}
        self._font: pygame.font.Font | None = None

    def _load(self, path: str) -> pygame.Surface | None:
        try:
            image = pygame.image.load(path)
        except (pygame.error, FileNotFoundError):
            return None
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def load_image(self, path: str) -> Any:
        if path not in self._images:
            self._images[path] = self._load(path)
            self.loaded.append(path)
        return self._images[path]

    def load_frames(self, path: str, count: int, columns: int, rows: int, size: int) -> list[Any]:
        if count <= 0 or columns <= 0 or rows <= 0 or size <= 0:
            raise ValueError("frame count, grid and size must be positive")
        if count > columns * rows:
            raise ValueError(f"{count} frames do not fit a {columns}x{rows} grid")
        key = (path, count, columns, rows, size)
        if key not in self._frames:
            sheet = self.load_image(path)
            frames: list[Any] = []
            for index in range(count):
                row, col = divmod(index, columns)
                area = pygame.Rect(col * size, row * size, size, size)
                if sheet is None or not sheet.get_rect().contains(area):
                    frames.append(None)
                else:
                    frames.append(sheet.subsurface(area))
            self._frames[key] = frames
        return self._frames[key]

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None:
        if image is None:
            return
        scaled = pygame.transform.scale(image, (max(int(width), 0), max(int(height), 0)))
        self.surface.blit(scaled, (int(x), int(y)))

    def draw_text(self, x: float, y: float, text: str, color: tuple[int, int, int]) -> None:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, self.FONT_SIZE)
        self.surface.blit(self._font.render(text, True, color), (int(x), int(y)))

    def draw_background(self, image: Any, alpha: int) -> None:
        if image is None:
            return
        scaled = pygame.transform.scale(image, self.surface.get_size())
        scaled.set_alpha(alpha)
        self.surface.blit(scaled, (0, 0))


_KEY_MAP = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_k: KEY_K,
    pygame.K_SPACE: KEY_SPACE,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


def _pressed_keys() -> set[int]:
    state = pygame.key.get_pressed()
    return {code for key, code in _KEY_MAP.items() if state[key]}


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="starraid", description="A small space shooter.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = PygameCanvas(screen)
        game = Game()
        prev_time = pygame.time.get_ticks()
        running = True
        while running:
            screen.fill(BACKGROUND_COLOR)
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            now = pygame.time.get_ticks()
            delta_time = (now - prev_time) / 1000.0
            running = game.frame(_pressed_keys(), delta_time, canvas)
            pygame.display.flip()
            pygame.time.wait(FRAME_WAIT_MS)
            prev_time = now
    finally:
        pygame.quit()
    return 0