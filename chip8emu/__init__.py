"""A CHIP-8 emulator: processor, frame buffer, keypad and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["app", "cpu", "keyboard", "opcodes", "screen"]