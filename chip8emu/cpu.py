"""The CHIP-8 processor: memory, registers, timers and instruction execution."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from chip8emu.keyboard import Keyboard
from chip8emu.opcodes import Instruction, decode
from chip8emu.screen import Screen

MEMORY_SIZE = 4096
START_ADDRESS = 0x200
STACK_DEPTH = 16
REGISTER_COUNT = 16
CPU_SPEED = 10
GLYPH_SIZE = 5

FONTSET = bytes(
    [
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    ]
)

log = logging.getLogger(__name__)


class StackUnderflowError(RuntimeError):
    """A return was executed with no subroutine call to return from."""


class StackOverflowError(RuntimeError):
    """Subroutine calls were nested deeper than the stack allows."""


class CPU:
    """Memory, registers, call stack and timers of the machine."""

    def __init__(self, debug: bool = False, rng: random.Random | None = None) -> None:
        self.memory = bytearray(MEMORY_SIZE)
        self.v = bytearray(REGISTER_COUNT)
        self.i = 0
        self.stack: list[int] = []
        self.pc = START_ADDRESS
        self.delay_timer = 0
        self.sound_timer = 0
        self.debug = debug
        self._rng = rng if rng is not None else random.Random()

    @property
    def sp(self) -> int:
        """Number of return addresses on the stack."""
        return len(self.stack)

    def load_font(self) -> None:
        """Copy the built-in hexadecimal font to the start of memory."""
        self.memory[: len(FONTSET)] = FONTSET

    def load_rom(self, path: str | Path) -> None:
        """Load a program file into memory at the start address."""
        self.load_bytes(Path(path).read_bytes())

    def load_bytes(self, data: bytes) -> None:
        """Load a program image into memory at the start address."""
        if len(data) > MEMORY_SIZE - START_ADDRESS:
            raise ValueError(
                f"program of {len(data)} bytes does not fit in "
                f"{MEMORY_SIZE - START_ADDRESS} bytes of memory"
            )
        self.memory[START_ADDRESS : START_ADDRESS + len(data)] = data

    def countdown(self) -> None:
        """Tick the delay and sound timers down by one, stopping at zero."""
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    def fetch(self) -> int:
        """Read the big-endian opcode at the program counter."""
        return (self.memory[self.pc] << 8) | self.memory[self.pc + 1]

    def step(self, screen: Screen, keyboard: Keyboard) -> None:
        """Fetch and execute one instruction."""
        self.execute(self.fetch(), screen, keyboard)

    def _check_span(self, count: int) -> None:
        if self.i + count > MEMORY_SIZE:
            raise IndexError(f"memory access past end at I={self.i:#05x}")

    def _skip_if(self, condition: bool) -> None:
        if condition:
            self.pc = (self.pc + 2) & 0xFFFF

    def execute(self, opcode: int, screen: Screen, keyboard: Keyboard) -> None:
        """Execute one opcode against the given screen and keypad."""
        x = (opcode >> 8) & 0xF
        y = (opcode >> 4) & 0xF
        n = opcode & 0xF
        nnn = opcode & 0xFFF
        kk = opcode & 0xFF
        v = self.v
        instruction = decode(opcode)
        advance = True

        if self.debug:
            name = instruction.name if instruction is not None else "UNKNOWN"
            print(
                f"PC={self.pc:03X} I={self.i:03X} Opcode={opcode:04X} V={list(v)} "
                f"SP={self.sp} Stack={self.stack} Action={name} | X = {x} | Y = {y}"
            )

        match instruction:
            case None:
                log.warning("unexpected instruction %04X", opcode)
            case Instruction.CLS:
                screen.clear()
            case Instruction.RET:
                if not self.stack:
                    raise StackUnderflowError("return without a subroutine call")
                self.pc = self.stack.pop()
            case Instruction.JP:
                self.pc = nnn
                advance = False
            case Instruction.CALL:
                if len(self.stack) >= STACK_DEPTH:
                    raise StackOverflowError("too many nested subroutine calls")
                self.stack.append(self.pc)
                self.pc = nnn
                advance = False
            case Instruction.SE_VX_BYTE:
                self._skip_if(v[x] == kk)
            case Instruction.SNE_VX_BYTE:
                self._skip_if(v[x] != kk)
            case Instruction.SE_VX_VY:
                self._skip_if(v[x] == v[y])
            case Instruction.LD_VX_BYTE:
                v[x] = kk
            case Instruction.ADD_VX_BYTE:
                v[x] = (v[x] + kk) & 0xFF
            case Instruction.LD_VX_VY:
                v[x] = v[y]
            case Instruction.OR:
                v[x] |= v[y]
            case Instruction.AND:
                v[x] &= v[y]
            case Instruction.XOR:
                v[x] ^= v[y]
            case Instruction.ADD_VX_VY:
                total = v[x] + v[y]
                v[x] = total & 0xFF
                v[0xF] = 1 if total > 0xFF else 0
            case Instruction.SUB:
                borrow = v[x] < v[y]
                v[x] = (v[x] - v[y]) & 0xFF
                v[0xF] = 0 if borrow else 1
            case Instruction.SHR:
                v[0xF] = v[x] & 0x1
                v[x] = v[x] >> 1
            case Instruction.SUBN:
                borrow = v[y] < v[x]
                v[x] = (v[y] - v[x]) & 0xFF
                v[0xF] = 0 if borrow else 1
            case Instruction.SHL:
                v[0xF] = (v[x] >> 7) & 0x1
                v[x] = (v[x] << 1) & 0xFF
            case Instruction.SNE_VX_VY:
                self._skip_if(v[x] != v[y])
            case Instruction.LD_I:
                self.i = nnn
            case Instruction.JP_V0:
                # The program counter still advances past the jump target afterwards.
                self.pc = v[0] + nnn
            case Instruction.RND:
                v[x] = self._rng.randrange(256) & kk
            case Instruction.DRW:
                v[0xF] = 0
                collision = screen.draw_sprite(self.memory, self.i, v[x], v[y], n)
                if collision:
                    v[0xF] = 1
            case Instruction.SKP:
                self._skip_if(keyboard.is_pressed(v[x]))
            case Instruction.SKNP:
                self._skip_if(not keyboard.is_pressed(v[x]))
            case Instruction.LD_VX_DT:
                v[x] = self.delay_timer
            case Instruction.LD_VX_K:
                advance = False
                if keyboard.awaiting_key is not None:
                    key = keyboard.first_pressed()
                    if key is not None:
                        v[keyboard.awaiting_key] = key
                        keyboard.awaiting_key = None
                        advance = True
                else:
                    keyboard.awaiting_key = x
            case Instruction.LD_DT_VX:
                self.delay_timer = v[x]
            case Instruction.LD_ST_VX:
                self.sound_timer = v[x]
            case Instruction.ADD_I_VX:
                result = self.i + v[x]
                v[0xF] = 1 if result > 0x0FFF else 0
                self.i = result & 0xFFFF
            case Instruction.LD_F_VX:
                self.i = v[x] * GLYPH_SIZE
            case Instruction.LD_B_VX:
                self._check_span(3)
                value = v[x]
                self.memory[self.i] = value // 100
                self.memory[self.i + 1] = (value // 10) % 10
                self.memory[self.i + 2] = value % 10
            case Instruction.STORE:
                self._check_span(x + 1)
                self.memory[self.i : self.i + x + 1] = v[: x + 1]
            case Instruction.LOAD:
                self._check_span(x + 1)
                v[: x + 1] = self.memory[self.i : self.i + x + 1]

        if advance:
            self.pc = (self.pc + 2) & 0xFFFF