"""A two-register virtual machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class Register(Enum):
    A = "a"
    B = "b"


class Op(Enum):
    HLF = "hlf"
    TPL = "tpl"
    INC = "inc"
    JMP = "jmp"
    JIE = "jie"
    JIO = "jio"


@dataclass(frozen=True)
class Instruction:
    op: Op
    register: Optional[Register] = None
    offset: int = 0


class VM:
    """Registers a and b plus a program counter."""

    def __init__(self) -> None:
        self.registers = {Register.A: 0, Register.B: 0}
        self.pc = 0

    def execute(self, program: Sequence[Instruction]) -> None:
        """Run until the program counter leaves the program."""
        regs = self.registers
        while 0 <= self.pc < len(program):
            inst = program[self.pc]
            step = 1
            if inst.op is Op.HLF:
                regs[inst.register] //= 2
            elif inst.op is Op.TPL:
                regs[inst.register] *= 3
            elif inst.op is Op.INC:
                regs[inst.register] += 1
            elif inst.op is Op.JMP:
                step = inst.offset
            elif inst.op is Op.JIE:
                if regs[inst.register] % 2 == 0:
                    step = inst.offset
            elif regs[inst.register] == 1:
                step = inst.offset
            self.pc += step


def _parse_line(line: str) -> Instruction:
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"bad instruction: {line!r}")
    try:
        op = Op(parts[0])
    except ValueError:
        raise ValueError(f"Unknown instruction: {parts[0]}") from None
    arg = parts[1]
    if op is Op.JMP:
        return Instruction(op, offset=int(arg))
    if op in (Op.JIE, Op.JIO):
        if len(parts) < 3:
            raise ValueError(f"missing offset: {line!r}")
        return Instruction(op, Register(arg[:1]), int(parts[2]))
    return Instruction(op, Register(arg))


def parse_input(text: str) -> list[Instruction]:
    return [_parse_line(line) for line in text.splitlines()]


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.program = parse_input(text)

    def _run(self, a: int) -> int:
        vm = VM()
        vm.registers[Register.A] = a
        vm.execute(self.program)
        return vm.registers[Register.B]

    def part1(self) -> str:
        return str(self._run(0))

    def part2(self) -> str:
        return str(self._run(1))