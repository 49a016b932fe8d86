"""EVM opcode numbering, push-instruction helpers and protocol limits."""

from enum import IntEnum

MAX_CODE_SIZE = 0x6000
"""The maximum EVM bytecode size allowed by the Ethereum spec."""

MAX_INSTRUCTION_BASE_COST = 32000
"""The maximum base cost of any instruction (the cost of CREATE)."""

MAX_INSTRUCTION_STACK_INCREASE = 1
"""The maximum stack growth a single instruction can cause."""

_NAMED_OPCODES = [
    ("STOP", 0x00),
    ("ADD", 0x01),
    ("MUL", 0x02),
    ("SUB", 0x03),
    ("DIV", 0x04),
    ("SDIV", 0x05),
    ("MOD", 0x06),
    ("SMOD", 0x07),
    ("ADDMOD", 0x08),
    ("MULMOD", 0x09),
    ("EXP", 0x0A),
    ("SIGNEXTEND", 0x0B),
    ("LT", 0x10),
    ("GT", 0x11),
    ("SLT", 0x12),
    ("SGT", 0x13),
    ("EQ", 0x14),
    ("ISZERO", 0x15),
    ("AND", 0x16),
    ("OR", 0x17),
    ("XOR", 0x18),
    ("NOT", 0x19),
    ("BYTE", 0x1A),
    ("SHL", 0x1B),
    ("SHR", 0x1C),
    ("SAR", 0x1D),
    ("KECCAK256", 0x20),
    ("ADDRESS", 0x30),
    ("BALANCE", 0x31),
    ("ORIGIN", 0x32),
    ("CALLER", 0x33),
    ("CALLVALUE", 0x34),
    ("CALLDATALOAD", 0x35),
    ("CALLDATASIZE", 0x36),
    ("CALLDATACOPY", 0x37),
    ("CODESIZE", 0x38),
    ("CODECOPY", 0x39),
    ("GASPRICE", 0x3A),
    ("EXTCODESIZE", 0x3B),
    ("EXTCODECOPY", 0x3C),
    ("RETURNDATASIZE", 0x3D),
    ("RETURNDATACOPY", 0x3E),
    ("EXTCODEHASH", 0x3F),
    ("BLOCKHASH", 0x40),
    ("COINBASE", 0x41),
    ("TIMESTAMP", 0x42),
    ("NUMBER", 0x43),
    ("DIFFICULTY", 0x44),
    ("GASLIMIT", 0x45),
    ("CHAINID", 0x46),
    ("SELFBALANCE", 0x47),
    ("BASEFEE", 0x48),
    ("POP", 0x50),
    ("MLOAD", 0x51),
    ("MSTORE", 0x52),
    ("MSTORE8", 0x53),
    ("SLOAD", 0x54),
    ("SSTORE", 0x55),
    ("JUMP", 0x56),
    ("JUMPI", 0x57),
    ("PC", 0x58),
    ("MSIZE", 0x59),
    ("GAS", 0x5A),
    ("JUMPDEST", 0x5B),
]

_TAIL_OPCODES = [
    ("CREATE", 0xF0),
    ("CALL", 0xF1),
    ("CALLCODE", 0xF2),
    ("RETURN", 0xF3),
    ("DELEGATECALL", 0xF4),
    ("CREATE2", 0xF5),
    ("STATICCALL", 0xFA),
    ("REVERT", 0xFD),
    ("INVALID", 0xFE),
    ("SELFDESTRUCT", 0xFF),
]

Opcode = IntEnum(
    "Opcode",
    _NAMED_OPCODES
    + [(f"PUSH{n}", 0x5F + n) for n in range(1, 33)]
    + [(f"DUP{n}", 0x7F + n) for n in range(1, 17)]
    + [(f"SWAP{n}", 0x8F + n) for n in range(1, 17)]
    + [(f"LOG{n}", 0xA0 + n) for n in range(5)]
    + _TAIL_OPCODES,
    module=__name__,
)
Opcode.__doc__ = "EVM instruction opcodes."


def is_push(op: int) -> bool:
    """Return True if op is any of PUSH1..PUSH32."""
    return Opcode.PUSH1 <= op <= Opcode.PUSH32


def push_size(op: int) -> int:
    """Return the number of immediate data bytes following op (0 for non-push)."""
    return op - Opcode.PUSH1 + 1 if is_push(op) else 0


def is_small_push(op: int) -> bool:
    """Return True for PUSH1..PUSH8, whose value fits in 64 bits."""
    return Opcode.PUSH1 <= op <= Opcode.PUSH8


def is_large_push(op: int) -> bool:
    """Return True for PUSH9..PUSH32."""
    return Opcode.PUSH9 <= op <= Opcode.PUSH32