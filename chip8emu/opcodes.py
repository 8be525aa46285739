"""Instruction set and opcode decoding."""

from __future__ import annotations

from enum import Enum


class Instruction(Enum):
    """Every recognised instruction, as a (mask, pattern) pair in match order."""

    CLS = (0xFFFF, 0x00E0)  # 00E0
    RET = (0xFFFF, 0x00EE)  # 00EE
    JP = (0xF000, 0x1000)  # 1NNN
    CALL = (0xF000, 0x2000)  # 2NNN
    SE_VX_BYTE = (0xF000, 0x3000)  # 3XKK
    SNE_VX_BYTE = (0xF000, 0x4000)  # 4XKK
    SE_VX_VY = (0xF00F, 0x5000)  # 5XY0
    LD_VX_BYTE = (0xF000, 0x6000)  # 6XKK
    ADD_VX_BYTE = (0xF000, 0x7000)  # 7XKK
    LD_VX_VY = (0xF00F, 0x8000)  # 8XY0
    OR = (0xF00F, 0x8001)  # 8XY1
    AND = (0xF00F, 0x8002)  # 8XY2
    XOR = (0xF00F, 0x8003)  # 8XY3
    ADD_VX_VY = (0xF00F, 0x8004)  # 8XY4
    SUB = (0xF00F, 0x8005)  # 8XY5
    SHR = (0xF00F, 0x8006)  # 8XY6
    SUBN = (0xF00F, 0x8007)  # 8XY7
    SHL = (0xF00F, 0x800E)  # 8XYE
    SNE_VX_VY = (0xF00F, 0x9000)  # 9XY0
    LD_I = (0xF000, 0xA000)  # ANNN
    JP_V0 = (0xF000, 0xB000)  # BNNN
    RND = (0xF000, 0xC000)  # CXKK
    DRW = (0xF000, 0xD000)  # DXYN
    SKP = (0xF0FF, 0xE09E)  # EX9E
    SKNP = (0xF0FF, 0xE0A1)  # EXA1
    LD_VX_DT = (0xF0FF, 0xF007)  # FX07
    LD_VX_K = (0xF0FF, 0xF00A)  # FX0A
    LD_DT_VX = (0xF0FF, 0xF015)  # FX15
    LD_ST_VX = (0xF0FF, 0xF018)  # FX18
    ADD_I_VX = (0xF0FF, 0xF01E)  # FX1E
    LD_F_VX = (0xF0FF, 0xF029)  # FX29
    LD_B_VX = (0xF0FF, 0xF033)  # FX33
    STORE = (0xF0FF, 0xF055)  # FX55
    LOAD = (0xF0FF, 0xF065)  # FX65

    def __init__(self, mask: int, pattern: int) -> None:
        self.mask = mask
        self.pattern = pattern


def decode(opcode: int) -> Instruction | None:
    """Return the first instruction whose pattern matches, or None if unrecognised."""
    return next(
        (ins for ins in Instruction if opcode & ins.mask == ins.pattern),
        None,
    )