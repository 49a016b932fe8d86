"""Code analysis and the shared building blocks of the baseline interpreter."""

from __future__ import annotations

from dataclasses import dataclass

from .opcodes import Opcode, is_push, push_size
from .state import ExecutionState, Stack, StatusCode

UNDEFINED_GAS_COST = -1
"""The gas cost marking an instruction that is not defined in a revision."""


@dataclass(frozen=True)
class CodeAnalysis:
    """The result of analysing bytecode before execution.

    ``padded_code`` is the original code followed by zero bytes covering any
    truncated push data and a final STOP, so execution always terminates.
    ``jumpdest_map`` has one flag per byte of the original code.
    """

    padded_code: bytes
    jumpdest_map: tuple[bool, ...]

    def is_jumpdest(self, offset: int) -> bool:
        """Return True if offset is a valid JUMPDEST location."""
        return 0 <= offset < len(self.jumpdest_map) and self.jumpdest_map[offset]


@dataclass(frozen=True)
class InstructionMetrics:
    """Static requirements of an instruction checked before it runs."""

    gas_cost: int
    stack_height_required: int = 0
    can_overflow_stack: bool = False

    @property
    def is_undefined(self) -> bool:
        """True if the instruction is not defined."""
        return self.gas_cost == UNDEFINED_GAS_COST


def analyze(code: bytes) -> CodeAnalysis:
    """Find valid JUMPDEST locations and build the padded code."""
    code = bytes(code)
    code_size = len(code)
    jumpdests = [False] * code_size
    i = 0
    while i < code_size:
        op = code[i]
        if is_push(op):
            i += push_size(op)  # Skip push data.
        elif op == Opcode.JUMPDEST:
            jumpdests[i] = True
        i += 1

    # i may exceed code_size when the last push data is truncated.
    padded_code = code + bytes(i - code_size) + bytes([Opcode.STOP])
    return CodeAnalysis(padded_code=padded_code, jumpdest_map=tuple(jumpdests))


def jump_target(state: ExecutionState, analysis: CodeAnalysis) -> int:
    """Pop a jump destination and return the new program counter.

    On an invalid destination the state's status becomes BAD_JUMP_DESTINATION
    and the returned position is the end of the code, where a STOP follows.
    """
    dst = state.stack.pop()
    if not analysis.is_jumpdest(dst):
        state.status = StatusCode.BAD_JUMP_DESTINATION
        return len(state.code)
    return dst


def load_push(state: ExecutionState, pc: int, length: int) -> int:
    """Push the big-endian value of length bytes of code starting at pc.

    Bytes past the end of the code read as zero. Returns the position after
    the push data.
    """
    data = state.code[pc : pc + length].ljust(length, b"\x00")
    state.stack.push(int.from_bytes(data, "big"))
    return pc + length


def check_requirements(metrics: InstructionMetrics, state: ExecutionState) -> StatusCode:
    """Charge the base gas cost and validate the stack for an instruction."""
    if metrics.is_undefined:
        return StatusCode.UNDEFINED_INSTRUCTION

    state.gas_left -= metrics.gas_cost
    if state.gas_left < 0:
        return StatusCode.OUT_OF_GAS

    stack_size = len(state.stack)
    if stack_size == Stack.LIMIT:
        if metrics.can_overflow_stack:
            return StatusCode.STACK_OVERFLOW
    elif stack_size < metrics.stack_height_required:
        return StatusCode.STACK_UNDERFLOW

    return StatusCode.SUCCESS