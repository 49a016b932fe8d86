# evmkit

Building blocks for an Ethereum Virtual Machine interpreter, written in
plain Python with no third-party dependencies.

## Modules

### `evmkit.opcodes`

- `Opcode`: an `IntEnum` of the instruction opcodes, from `STOP` through
  `PUSH1`..`PUSH32`, `DUP1`..`DUP16`, `SWAP1`..`SWAP16`, `LOG0`..`LOG4` up to
  `SELFDESTRUCT`.
- `is_push(op)`, `push_size(op)`, `is_small_push(op)` (PUSH1..PUSH8) and
  `is_large_push(op)` (PUSH9..PUSH32). `push_size` returns the number of
  immediate data bytes, and 0 for any instruction that is not a push.
- Limits: `MAX_CODE_SIZE` (0x6000), `MAX_INSTRUCTION_BASE_COST` (32000) and
  `MAX_INSTRUCTION_STACK_INCREASE` (1).

### `evmkit.state`

- `StatusCode`: the possible outcomes of an execution (`SUCCESS`, `REVERT`,
  `OUT_OF_GAS`, `STACK_UNDERFLOW`, `BAD_JUMP_DESTINATION`, ...).
- `Revision`: protocol revisions from `FRONTIER` to `LONDON`; `LATEST` is an
  alias of `LONDON`.
- `Message`: a dataclass describing a call (`gas`, `depth`, `flags`,
  `destination`, `sender`, `input_data`, `value`, `create2_salt`).
- `Stack`: a stack of 256-bit words. Index 0 is the top item; values pushed
  or assigned are reduced modulo 2**256. `Stack.LIMIT` is 1024, but `push`
  does not enforce it: callers check the limit beforehand.
  `pop` on an empty stack and out-of-range indexes raise `IndexError`.
- `Memory`: byte-addressed memory. It grows (with zero bytes) or shrinks
  only through `resize`; `data()` returns a copy. Slice assignment must not
  change its size.
- `ExecutionState`: gas left, stack, memory, message, revision, code, return
  data, status and output range of one execution. `reset(message, revision,
  code)` prepares it for another run, reusing its stack and memory.

### `evmkit.analysis`

- `analyze(code)` scans bytecode and returns a `CodeAnalysis` with
  `jumpdest_map` (one flag per byte of code) and `padded_code` (the code
  followed by zero bytes covering truncated PUSH data and a final STOP).
  `CodeAnalysis.is_jumpdest(offset)` tells whether a jump may land there.
- `jump_target(state, analysis)` pops a destination; for an invalid one it
  sets `state.status` to `BAD_JUMP_DESTINATION` and returns the end of the
  code.
- `load_push(state, pc, length)` pushes the big-endian value of `length`
  code bytes starting at `pc` (bytes past the end read as zero) and returns
  the position after them.
- `check_requirements(metrics, state)` charges the base gas cost given by an
  `InstructionMetrics` and checks the stack height, returning a
  `StatusCode`. A cost of `UNDEFINED_GAS_COST` marks an undefined
  instruction.

## Example

```python
from evmkit.analysis import analyze
from evmkit.opcodes import Opcode

code = bytes([Opcode.PUSH1, 0x04, Opcode.JUMP, Opcode.STOP, Opcode.JUMPDEST])
analysis = analyze(code)

assert analysis.is_jumpdest(4)
assert not analysis.is_jumpdest(1)   # a byte of PUSH data, not an instruction
```

```python
from evmkit.state import Stack

stack = Stack()
stack.push(1)
stack.push(2)
assert stack[0] == 2 and stack[1] == 1
assert stack.pop() == 2
assert len(stack) == 1
```

## What it does not do

evmkit does not run bytecode on its own. It has no instruction dispatch loop,
no implementations of arithmetic, memory, storage, call or log instructions,
no per-revision gas cost tables and no host interface for accounts and
storage. It provides the state, the code analysis and the per-instruction
checks that such an interpreter is built on.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```