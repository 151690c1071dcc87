from typing import Any

from hypothesis import given, strategies as st

from swapvm.coders import ArgsCoder
from swapvm.exception import DecodeError
from swapvm.instructions.balances import BALANCES_ARGS_CODER, BalancesArgs
from swapvm.instructions.controls import JUMP_IF_TOKEN_ARGS_CODER, JumpIfTokenArgs
from swapvm.instructions.dutch_auction import DUTCH_AUCTION_ARGS_CODER, DutchAuctionArgs
from swapvm.instructions.opcode import DecodedInstruction, OpcodeId
from swapvm.instructions.opcode_sets import OpcodeSet
from swapvm.instructions.traits import MAKER_TRAITS_ARGS_CODER, TAKER_TRAITS_ARGS_CODER, MakerTraitsArgs, TakerTraitsArgs
from swapvm.instructions.transfer import TRANSFER_ARGS_CODER, TransferArgs
from swapvm.registry import build_registry
from swapvm.traits import MAKER_TRAITS_LAYOUT, TAKER_TRAITS_LAYOUT, MakerTraits, TakerTraits, TraitLayout
from swapvm.types import Address

SWAP_VM_REGISTRY = build_registry(OpcodeSet.SWAP_VM)

addresses = st.binary(min_size=20, max_size=20).map(Address)
uint256 = st.integers(min_value=0, max_value=2**256 - 1)


def trait_fields(layout: TraitLayout) -> st.SearchStrategy[dict]:
    return st.fixed_dictionaries({
        field.name: st.booleans() if field.is_flag else st.integers(min_value=0, max_value=(1 << field.width) - 1)
        for field in layout
    })


def balances_from_pairs(pairs: list[tuple[Address, int]]) -> BalancesArgs:
    return BalancesArgs(tokens=tuple(token for token, _ in pairs), balances=tuple(amount for _, amount in pairs))


dutch_auction_args = st.builds(
    DutchAuctionArgs,
    start_amount=uint256,
    end_amount=uint256,
    start_time=st.integers(min_value=0, max_value=2**40 - 1),
    duration=st.integers(min_value=1, max_value=2**32 - 1),
)
# 4 pairs keep the payload under the 255 bytes an instruction can carry
balances_args = st.lists(st.tuples(addresses, uint256), max_size=4).map(balances_from_pairs)
transfer_args = st.builds(TransferArgs, token=addresses, recipient=addresses, amount=uint256)
jump_if_token_args = st.builds(JumpIfTokenArgs, token=addresses, next_pc=st.integers(min_value=0, max_value=2**16 - 1))
maker_traits_args = trait_fields(MAKER_TRAITS_LAYOUT).map(lambda fields: MakerTraitsArgs(MakerTraits(**fields)))
taker_traits_args = trait_fields(TAKER_TRAITS_LAYOUT).map(lambda fields: TakerTraitsArgs(TakerTraits(**fields)))

coder_and_args = st.one_of(
    dutch_auction_args.map(lambda args: (DUTCH_AUCTION_ARGS_CODER, args)),
    balances_args.map(lambda args: (BALANCES_ARGS_CODER, args)),
    transfer_args.map(lambda args: (TRANSFER_ARGS_CODER, args)),
    maker_traits_args.map(lambda args: (MAKER_TRAITS_ARGS_CODER, args)),
    taker_traits_args.map(lambda args: (TAKER_TRAITS_ARGS_CODER, args)),
)

opcode_and_args = st.one_of(
    st.tuples(st.sampled_from([OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D, OpcodeId.DUTCH_AUCTION_BALANCE_OUT_1D]),
              dutch_auction_args),
    st.tuples(st.sampled_from([OpcodeId.STATIC_BALANCES_XD, OpcodeId.DYNAMIC_BALANCES_XD]), balances_args),
    st.tuples(st.sampled_from([OpcodeId.TRANSFER_IN, OpcodeId.TRANSFER_OUT]), transfer_args),
    st.tuples(st.sampled_from([OpcodeId.JUMP_IF_TOKEN_IN, OpcodeId.JUMP_IF_TOKEN_OUT]), jump_if_token_args),
    st.tuples(st.just(OpcodeId.CHECK_MAKER_TRAITS), maker_traits_args),
    st.tuples(st.just(OpcodeId.CHECK_TAKER_TRAITS), taker_traits_args),
)

fixed_length_coders = st.sampled_from([
    DUTCH_AUCTION_ARGS_CODER,
    TRANSFER_ARGS_CODER,
    MAKER_TRAITS_ARGS_CODER,
    TAKER_TRAITS_ARGS_CODER,
])


@given(item=coder_and_args)
def test_decode_inverts_encode(item: tuple[ArgsCoder[Any], Any]) -> None:
    coder, args = item
    data = coder.encode(args)
    if coder.fixed_length is not None:
        assert len(data) == coder.fixed_length
    assert coder.decode(data) == args


@given(item=coder_and_args)
def test_encode_inverts_decode(item: tuple[ArgsCoder[Any], Any]) -> None:
    coder, args = item
    data = coder.encode(args)
    assert coder.encode(coder.decode(data)) == data


@given(coder=fixed_length_coders, data=st.data())
def test_arbitrary_payload_is_rejected_or_reproduced(coder: ArgsCoder[Any], data: st.DataObject) -> None:
    assert coder.fixed_length is not None
    payload = data.draw(st.binary(min_size=coder.fixed_length, max_size=coder.fixed_length))
    try:
        args = coder.decode(payload)
    except DecodeError:
        return
    assert coder.encode(args) == payload


@given(item=opcode_and_args)
def test_instruction_round_trip(item: tuple[OpcodeId, Any]) -> None:
    identity, args = item
    data = SWAP_VM_REGISTRY.encode_instruction(identity, args)
    assert data[0] == SWAP_VM_REGISTRY.discriminator_of(identity)
    assert data[1] == len(data) - 2
    decoded = SWAP_VM_REGISTRY.decode_instruction(data)
    assert decoded == DecodedInstruction(identity, args)
    assert SWAP_VM_REGISTRY.encode_instruction(decoded.opcode, decoded.args) == data
