import pytest

from swapvm.decay import DecayDirection, current_amount, instruction_amount
from swapvm.exception import DecodeError, ValidationError
from swapvm.instructions.dutch_auction import DUTCH_AUCTION_ARGS_CODER, DutchAuctionArgs
from swapvm.instructions.opcode import OpcodeId
from swapvm.instructions.opcode_sets import OpcodeSet
from swapvm.registry import build_registry
from swapvm_tests.utils import T0


def test_end_to_end_auction() -> None:
    registry = build_registry(OpcodeSet.SWAP_VM)
    args = DutchAuctionArgs(start_amount=1000, end_amount=500, start_time=T0, duration=100)

    data = registry.encode_instruction(OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D, args)
    assert data[0] == registry.discriminator_of(OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D)
    assert data[1] == 73
    assert len(data) == 2 + 73

    decoded = registry.decode_instruction(data)
    assert decoded.opcode is OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D
    assert decoded.args == args
    assert registry.encode_instruction(decoded.opcode, decoded.args) == data

    assert current_amount(decoded.args, T0 + 50, DecayDirection.INPUT) == 750
    assert instruction_amount(decoded, T0) == 1000
    assert instruction_amount(decoded, T0 + 50) == 750
    assert instruction_amount(decoded, T0 + 100) == 500


def test_payload_layout() -> None:
    args = DutchAuctionArgs(start_amount=1, end_amount=2, start_time=T0, duration=100)
    payload = DUTCH_AUCTION_ARGS_CODER.encode(args)
    assert payload[:32] == (1).to_bytes(32, 'big')
    assert payload[32:64] == (2).to_bytes(32, 'big')
    assert payload[64:69].hex() == '006553f100'
    assert payload[69:73].hex() == '00000064'


def test_both_opcodes_share_the_coder() -> None:
    registry = build_registry(OpcodeSet.SWAP_VM)
    coder_in = registry.resolve(OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D)
    coder_out = registry.resolve(OpcodeId.DUTCH_AUCTION_BALANCE_OUT_1D)
    assert coder_in is coder_out is DUTCH_AUCTION_ARGS_CODER


def test_zero_duration_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DUTCH_AUCTION_ARGS_CODER.encode(DutchAuctionArgs(start_amount=1, end_amount=1, start_time=T0, duration=0))
    payload = bytes(32) + bytes(32) + bytes(5) + bytes(4)
    with pytest.raises(DecodeError):
        DUTCH_AUCTION_ARGS_CODER.decode(payload)


def test_truncated_payload() -> None:
    payload = DUTCH_AUCTION_ARGS_CODER.encode(
        DutchAuctionArgs(start_amount=1, end_amount=1, start_time=T0, duration=1)
    )
    with pytest.raises(DecodeError):
        DUTCH_AUCTION_ARGS_CODER.decode(payload[:-1])


def test_instruction_amount_needs_auction_opcode() -> None:
    from swapvm.instructions.controls import SaltArgs
    from swapvm.instructions.opcode import DecodedInstruction
    with pytest.raises(ValidationError):
        instruction_amount(DecodedInstruction(OpcodeId.SALT, SaltArgs(salt=1)), T0)
