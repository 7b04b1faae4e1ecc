import pytest

from aocpuzzles.y2015.day23 import VM, Instruction, Op, Register, Solver, parse_input


def test_example():
    vm = VM()
    assert vm.registers[Register.A] == 0
    vm.execute(parse_input("inc a\njio a, +2\ntpl a\ninc a\n"))
    assert vm.registers[Register.A] == 2


def test_parse_jumps():
    program = parse_input("jmp -3\njie b, +4\n")
    assert program == [
        Instruction(Op.JMP, offset=-3),
        Instruction(Op.JIE, Register.B, 4),
    ]


def test_unknown_instruction():
    with pytest.raises(ValueError):
        parse_input("nop a\n")


def test_unknown_register():
    with pytest.raises(ValueError):
        parse_input("inc c\n")


def test_half_and_triple():
    vm = VM()
    vm.registers[Register.B] = 5
    vm.execute(parse_input("tpl b\nhlf b\n"))
    assert vm.registers[Register.B] == 7