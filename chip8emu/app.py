"""Command-line entry point and the pygame front end."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from chip8emu.cpu import CPU, CPU_SPEED  # noqa: E402
from chip8emu.keyboard import Keyboard, map_key  # noqa: E402
from chip8emu.screen import (  # noqa: E402
    PIXEL_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Screen,
)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
FRAME_DELAY_MS = 16


@dataclass(frozen=True)
class Config:
    """Settings taken from the command line."""

    rom_path: str
    speed: int = CPU_SPEED
    debug: bool = False


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments into a Config."""
    parser = argparse.ArgumentParser(prog="chip8emu", description="CHIP-8 emulator")
    parser.add_argument("rom_path", help="path of the program to run")
    parser.add_argument(
        "-s",
        "--speed",
        type=int,
        default=CPU_SPEED,
        help="instructions executed per frame",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="trace every instruction"
    )
    args = parser.parse_args(argv)
    return Config(rom_path=args.rom_path, speed=args.speed, debug=args.debug)


def render(surface: pygame.Surface, screen: Screen) -> None:
    """Paint the frame buffer onto a surface, one square per pixel."""
    surface.fill(BLACK)
    for x, y in screen.lit_pixels():
        surface.fill(
            WHITE, pygame.Rect(x * PIXEL_SIZE, y * PIXEL_SIZE, PIXEL_SIZE, PIXEL_SIZE)
        )


def _handle_events(keyboard: Keyboard) -> bool:
    """Apply pending input events; return False once the user asks to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = map_key(pygame.key.name(event.key))
            if key is not None:
                keyboard.set_key(key, event.type == pygame.KEYDOWN)
    return True


def run(config: Config) -> int:
    """Load the program and run it in a window until the user quits."""
    cpu = CPU(debug=config.debug)
    try:
        cpu.load_rom(config.rom_path)
    except (OSError, ValueError) as exc:
        print(f"An error has occurred during loading game : {exc}")
        return 0
    print("Game was loaded successfully !")
    cpu.load_font()

    screen = Screen()
    keyboard = Keyboard()
    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Chip8")
        while _handle_events(keyboard):
            for _ in range(config.speed):
                cpu.step(screen, keyboard)
            render(window, screen)
            pygame.display.flip()
            cpu.countdown()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the emulator from the command line."""
    return run(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())