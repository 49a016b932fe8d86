"""Execution state of the EVM interpreter: stack, memory and call context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

_UINT256_MASK = (1 << 256) - 1


class StatusCode(IntEnum):
    """Outcome of an execution."""

    SUCCESS = 0
    FAILURE = 1
    REVERT = 2
    OUT_OF_GAS = 3
    INVALID_INSTRUCTION = 4
    UNDEFINED_INSTRUCTION = 5
    STACK_OVERFLOW = 6
    STACK_UNDERFLOW = 7
    BAD_JUMP_DESTINATION = 8
    INVALID_MEMORY_ACCESS = 9
    CALL_DEPTH_EXCEEDED = 10
    STATIC_MODE_VIOLATION = 11
    PRECOMPILE_FAILURE = 12
    CONTRACT_VALIDATION_FAILURE = 13
    ARGUMENT_OUT_OF_RANGE = 14
    INSUFFICIENT_BALANCE = 17
    INTERNAL_ERROR = -1
    REJECTED = -2
    OUT_OF_MEMORY = -3


class Revision(IntEnum):
    """Ethereum protocol revisions."""

    FRONTIER = 0
    HOMESTEAD = 1
    TANGERINE_WHISTLE = 2
    SPURIOUS_DRAGON = 3
    BYZANTIUM = 4
    CONSTANTINOPLE = 5
    PETERSBURG = 6
    ISTANBUL = 7
    BERLIN = 8
    LONDON = 9
    LATEST = 9


@dataclass
class Message:
    """The parameters of a call being executed."""

    gas: int = 0
    depth: int = 0
    flags: int = 0
    destination: bytes = bytes(20)
    sender: bytes = bytes(20)
    input_data: bytes = b""
    value: int = 0
    create2_salt: int = 0


class Stack:
    """The stack of 256-bit EVM words; index 0 is the top item.

    The stack limit is not enforced by push; callers check it beforehand.
    """

    LIMIT = 1024

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, item: int) -> None:
        """Push an item, reduced to a 256-bit unsigned word."""
        self._items.append(item & _UINT256_MASK)

    def pop(self) -> int:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top item."""
        return self[0]

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def _position(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"stack index {index} out of range")
        return len(self._items) - 1 - index

    def __getitem__(self, index: int) -> int:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._items[self._position(index)] = value & _UINT256_MASK


class Memory:
    """The byte-addressable EVM memory."""

    def __init__(self) -> None:
        self._memory = bytearray()

    def resize(self, new_size: int) -> None:
        """Grow with zero bytes or truncate to new_size."""
        if new_size < 0:
            raise ValueError("memory size cannot be negative")
        current = len(self._memory)
        if new_size > current:
            self._memory.extend(bytes(new_size - current))
        else:
            del self._memory[new_size:]

    def clear(self) -> None:
        """Drop all contents."""
        self._memory.clear()

    def data(self) -> bytes:
        """Return a copy of the whole memory."""
        return bytes(self._memory)

    def __len__(self) -> int:
        return len(self._memory)

    def __getitem__(self, index: int | slice) -> int | bytes:
        if isinstance(index, slice):
            return bytes(self._memory[index])
        return self._memory[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            value = bytes(value)
            if len(range(*index.indices(len(self._memory)))) != len(value):
                raise ValueError("slice assignment cannot change memory size")
        self._memory[index] = value


class ExecutionState:
    """Everything an instruction implementation needs during execution."""

    def __init__(
        self,
        message: Message | None = None,
        revision: Revision = Revision.FRONTIER,
        code: bytes = b"",
        host: Any = None,
    ) -> None:
        self.stack = Stack()
        self.memory = Memory()
        self.host = host
        self._assign(message, revision, code)

    def _assign(self, message: Message | None, revision: Revision, code: bytes) -> None:
        self.gas_left = message.gas if message is not None else 0
        self.msg = message
        self.rev = Revision(revision)
        self.return_data = b""
        self.code = bytes(code)
        self.status = StatusCode.SUCCESS
        self.output_offset = 0
        self.output_size = 0

    def reset(self, message: Message, revision: Revision, code: bytes) -> None:
        """Reinitialise the state for a new execution, reusing its containers."""
        self.stack.clear()
        self.memory.clear()
        self._assign(message, revision, code)