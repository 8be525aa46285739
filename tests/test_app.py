import pygame
import pytest

from chip8emu.app import Config, main, parse_args, render, run
from chip8emu.cpu import CPU_SPEED
from chip8emu.screen import PIXEL_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH, Screen


def test_parse_args_defaults():
    config = parse_args(["game.ch8"])
    assert config == Config(rom_path="game.ch8", speed=CPU_SPEED, debug=False)


def test_parse_args_options():
    config = parse_args(["game.ch8", "-s", "20", "--debug"])
    assert config.speed == 20
    assert config.debug is True
    assert config.rom_path == "game.ch8"


def test_parse_args_requires_rom():
    with pytest.raises(SystemExit):
        parse_args([])


def test_parse_args_rejects_bad_speed():
    with pytest.raises(SystemExit):
        parse_args(["game.ch8", "--speed", "fast"])


def test_render_paints_lit_pixels():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((255, 255, 255))
    screen = Screen()
    screen.draw_sprite(bytes([0x80]), 0, 3, 4, 1)
    render(surface, screen)
    left, top = 3 * PIXEL_SIZE, 4 * PIXEL_SIZE
    assert tuple(surface.get_at((left, top)))[:3] == (255, 255, 255)
    corner = (left + PIXEL_SIZE - 1, top + PIXEL_SIZE - 1)
    assert tuple(surface.get_at(corner))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((left + PIXEL_SIZE, top)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_render_blank_screen_is_black():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((255, 255, 255))
    render(surface, Screen())
    assert tuple(surface.get_at((WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1)))[:3] == (0, 0, 0)


def test_run_reports_missing_rom(tmp_path, capsys):
    result = run(Config(rom_path=str(tmp_path / "missing.ch8")))
    assert result == 0
    assert "An error has occurred during loading game" in capsys.readouterr().out


def test_main_with_missing_rom(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ch8")]) == 0
    assert "loading game" in capsys.readouterr().out