import pytest

from chip8emu.opcodes import Instruction, decode


@pytest.mark.parametrize(
    "opcode, expected",
    [
        (0x00E0, Instruction.CLS),
        (0x00EE, Instruction.RET),
        (0x1234, Instruction.JP),
        (0x2ABC, Instruction.CALL),
        (0x3A12, Instruction.SE_VX_BYTE),
        (0x5AB0, Instruction.SE_VX_VY),
        (0x8AB4, Instruction.ADD_VX_VY),
        (0x8ABE, Instruction.SHL),
        (0xD125, Instruction.DRW),
        (0xE59E, Instruction.SKP),
        (0xE5A1, Instruction.SKNP),
        (0xF30A, Instruction.LD_VX_K),
        (0xF255, Instruction.STORE),
        (0xF265, Instruction.LOAD),
    ],
)
def test_decode_known_opcodes(opcode, expected):
    assert decode(opcode) is expected


@pytest.mark.parametrize("opcode", [0x0123, 0x0000, 0x5AB1, 0x8AB8, 0x9AB1, 0xE000, 0xF0FF])
def test_decode_unknown_opcodes(opcode):
    assert decode(opcode) is None


@pytest.mark.parametrize("instruction", list(Instruction))
def test_every_pattern_decodes_to_itself(instruction):
    assert decode(instruction.pattern) is instruction


@pytest.mark.parametrize("instruction", list(Instruction))
def test_operand_bits_do_not_change_decoding(instruction):
    operands = 0xFFFF & ~instruction.mask
    assert decode(instruction.pattern | operands) is instruction


def test_all_opcodes_decode_to_the_34_instructions():
    decoded = {decode(opcode) for opcode in range(0x10000)}
    decoded.discard(None)
    assert len(decoded) == 34
    assert decoded == set(Instruction)