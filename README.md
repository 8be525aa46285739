# chip8emu

A CHIP-8 emulator. It loads a ROM at address `0x200`, runs its instructions
at a configurable rate and draws the 64×32 monochrome display in a pygame
window, each CHIP-8 pixel scaled to an 8×8 square.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a game

```
chip8emu path/to/game.ch8
```

Options:

- `-s`, `--speed N` — instructions executed per frame (default 10). Frames run
  roughly every 16 ms, and the delay and sound timers count down once per frame.
- `-d`, `--debug` — before each instruction, print the program counter, index
  register, opcode, registers, stack, the decoded instruction name and the X
  and Y fields of the opcode.

Press `Escape` or close the window to quit.

If the ROM cannot be read, or is too large to fit in memory, a message is
printed and the program exits.

## Keys

The 16-key CHIP-8 keypad is mapped onto the left side of a QWERTY keyboard:

```
Keyboard        CHIP-8
1 2 3 4         1 2 3 C
Q W E R         4 5 6 D
A S D F         7 8 9 E
Z X C V         A 0 B F
```

## Using it as a library

The pieces that make up the emulator can be used on their own:

- `chip8emu.cpu.CPU` — memory, registers (`v`, `i`, `pc`), call stack and the
  `delay_timer` / `sound_timer`; `load_font()`, `load_rom(path)`,
  `load_bytes(data)`, `fetch()`, `execute(opcode, screen, keyboard)`,
  `step(screen, keyboard)` and `countdown()`. `load_bytes` raises `ValueError`
  for a program that does not fit above `0x200`. Returning with an empty stack
  raises `StackUnderflowError`; calling with sixteen return addresses already
  on the stack raises `StackOverflowError`. `CPU(rng=...)` accepts a
  `random.Random` for reproducible `CXKK` results.
- `chip8emu.screen.Screen` — the 64×32 frame buffer, with `clear()`,
  `is_lit(x, y)` (raises `IndexError` off screen),
  `draw_sprite(memory, address, x, y, height)` (XOR drawing with wrap-around;
  returns whether any lit pixel was switched off) and `lit_pixels()`.
- `chip8emu.keyboard.Keyboard` — the keypad state, with `set_key`,
  `is_pressed` and `first_pressed`; `map_key(name)` turns a key name
  (case-insensitive) into a keypad value, or `None`.
- `chip8emu.opcodes.decode(opcode)` — returns the `Instruction` a 16-bit opcode
  is, or `None` if it is not recognised.
- `chip8emu.app` — `parse_args(argv)`, `render(surface, screen)`,
  `run(config)` and `main(argv)` behind the `chip8emu` command.

```python
from chip8emu.cpu import CPU
from chip8emu.keyboard import Keyboard
from chip8emu.screen import Screen

cpu = CPU()
cpu.load_font()
cpu.load_bytes(bytes([0x60, 0x05, 0x70, 0x03]))  # V0 = 5; V0 += 3
screen, keyboard = Screen(), Keyboard()
cpu.step(screen, keyboard)
cpu.step(screen, keyboard)
assert cpu.v[0] == 8
```

## Behaviour to be aware of

- `BNNN` sets the program counter to `NNN + V0`, and the counter then still
  advances by two, as after any other instruction.
- `FX0A` holds the program counter in place until a key is held, then stores
  the lowest held key in `VX`.

## What it does not do

- The sound timer counts down, but no sound is ever played.
- `0NNN` machine-code routines and any other unrecognised opcode are not run;
  a warning is logged and execution moves on to the next instruction.