import pytest

from evmkit.opcodes import (
    Opcode,
    is_large_push,
    is_push,
    is_small_push,
    push_size,
)

PUSHES = [op for op in Opcode if op.name.startswith("PUSH")]


def test_push32_is_int8_max():
    assert Opcode.PUSH32 == 0x7F
    assert is_push(Opcode.PUSH32)
    assert push_size(Opcode.PUSH32) == 32
    assert not is_push(0x80)


def test_push_opcodes_are_contiguous():
    assert [op for op in range(256) if is_push(op)] == list(range(0x60, 0x80))
    assert [int(op) for op in PUSHES] == list(range(Opcode.PUSH1, Opcode.PUSH32 + 1))


def test_push_sizes_match_names():
    assert [push_size(op) for op in PUSHES] == [int(op.name[4:]) for op in PUSHES]


@pytest.mark.parametrize(
    "op", [Opcode.STOP, Opcode.JUMPDEST, Opcode.DUP1, Opcode.SELFDESTRUCT, 0x5F, 0x80]
)
def test_non_push_has_no_data(op):
    assert not is_push(op)
    assert push_size(op) == 0


def test_small_and_large_partition_pushes():
    for op in range(256):
        assert is_push(op) == (is_small_push(op) or is_large_push(op))
        assert not (is_small_push(op) and is_large_push(op))


def test_small_push_boundaries():
    assert is_small_push(Opcode.PUSH8)
    assert not is_small_push(Opcode.PUSH9)
    assert is_large_push(Opcode.PUSH9)
    assert not is_large_push(Opcode.PUSH8)


def test_small_push_data_fits_64_bits():
    small = [op for op in PUSHES if is_small_push(op)]
    assert max(push_size(op) for op in small) * 8 == 64
    assert [op.name for op in small][-1] == "PUSH8"


def test_opcode_lookup_by_value():
    assert Opcode(0x5B) is Opcode.JUMPDEST
    assert Opcode(0xFE) is Opcode.INVALID
    with pytest.raises(ValueError):
        Opcode(0x0C)