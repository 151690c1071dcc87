import pytest

from swapvm.exception import DecodeError, UnknownOpcodeError, ValidationError
from swapvm.instructions.balances import BalancesArgs
from swapvm.instructions.controls import DeadlineArgs, JumpArgs, SaltArgs
from swapvm.instructions.dutch_auction import DutchAuctionArgs
from swapvm.instructions.invalidators import EmptyArgs
from swapvm.instructions.opcode import DecodedInstruction, OpcodeId
from swapvm.instructions.opcode_sets import OpcodeSet
from swapvm.program import ProgramBuilder, decode_program, format_program
from swapvm.registry import build_registry
from swapvm_tests.utils import T0, TOKEN_A, TOKEN_B


@pytest.fixture
def registry():
    return build_registry(OpcodeSet.SWAP_VM)


def build_limit_order(registry) -> ProgramBuilder:
    builder = ProgramBuilder(registry)
    builder.add(OpcodeId.STATIC_BALANCES_XD, BalancesArgs(tokens=(TOKEN_A, TOKEN_B), balances=(1000, 500)))
    builder.add(OpcodeId.DEADLINE, DeadlineArgs(deadline=T0 + 3600))
    builder.add(OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D, DutchAuctionArgs(1000, 500, T0, 100))
    builder.add(OpcodeId.XYC_SWAP_XD, EmptyArgs())
    return builder


def test_build_and_decode(registry) -> None:
    builder = build_limit_order(registry)
    assert len(builder) == 4
    program = builder.build()
    assert builder.pc == len(program)
    instructions = decode_program(program, registry)
    assert instructions == builder.instructions()
    assert [instruction.opcode for instruction in instructions] == [
        OpcodeId.STATIC_BALANCES_XD,
        OpcodeId.DEADLINE,
        OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D,
        OpcodeId.XYC_SWAP_XD,
    ]


def test_rebuild_is_identical(registry) -> None:
    program = build_limit_order(registry).build()
    rebuilt = ProgramBuilder(registry).extend(decode_program(program, registry)).build()
    assert rebuilt == program


def test_empty_program(registry) -> None:
    assert ProgramBuilder(registry).build() == b''
    assert decode_program(b'', registry) == []


def test_add_fails_early(registry) -> None:
    builder = ProgramBuilder(registry)
    with pytest.raises(ValidationError):
        builder.add(OpcodeId.JUMP, SaltArgs(salt=1))
    assert len(builder) == 0
    assert builder.build() == b''


def test_jump_targets_use_pc(registry) -> None:
    builder = ProgramBuilder(registry)
    builder.add(OpcodeId.SALT, SaltArgs(salt=1))
    target = builder.pc
    assert target == 2 + 8
    builder.add(OpcodeId.JUMP, JumpArgs(next_pc=target))
    assert decode_program(builder.build(), registry)[1].args == JumpArgs(next_pc=10)


def test_truncated_program(registry) -> None:
    program = build_limit_order(registry).build()
    with pytest.raises(DecodeError, match='pc='):
        decode_program(program[:-1], registry)
    with pytest.raises(DecodeError):
        decode_program(program + b'\x00', registry)


def test_unknown_discriminator(registry) -> None:
    with pytest.raises(UnknownOpcodeError):
        decode_program(bytes([0xff, 0x00]), registry)


def test_max_length(registry) -> None:
    program = build_limit_order(registry).build()
    with pytest.raises(DecodeError, match='max is 10'):
        decode_program(program, registry, max_length=10)
    assert len(decode_program(program, registry, max_length=len(program))) == 4


def test_max_length_from_settings(registry) -> None:
    # unittests.yml limits programs to 4096 bytes
    salt = ProgramBuilder(registry).add(OpcodeId.SALT, SaltArgs(salt=0)).build()
    with pytest.raises(DecodeError):
        decode_program(salt * (4096 // len(salt) + 1), registry)


def test_build_checks_max_length(registry) -> None:
    builder = build_limit_order(registry)
    with pytest.raises(ValidationError, match='max is 10'):
        builder.build(max_length=10)
    assert len(builder.build(max_length=builder.pc)) == builder.pc

    # unittests.yml limits programs to 4096 bytes
    builder = ProgramBuilder(registry)
    while builder.pc <= 4096:
        builder.add(OpcodeId.SALT, SaltArgs(salt=0))
    with pytest.raises(ValidationError):
        builder.build()


def test_format_program(registry) -> None:
    instructions = [
        DecodedInstruction(OpcodeId.DEADLINE, DeadlineArgs(deadline=T0)),
        DecodedInstruction(OpcodeId.SALT, SaltArgs(salt=7)),
    ]
    lines = format_program(instructions, registry).splitlines()
    assert lines == [
        '    0 Controls.deadline {"deadline": 1700000000}',
        '    7 Controls.salt {"salt": 7}',
    ]
