import pytest
from hypothesis import assume, given, strategies as st

from swapvm.decay import DUTCH_AUCTION_DIRECTIONS, DecayDirection, check_auction, current_amount
from swapvm.exception import InvalidRangeError
from swapvm.instructions.dutch_auction import DutchAuctionArgs
from swapvm.instructions.opcode import OpcodeId
from swapvm_tests.utils import T0

amounts = st.integers(min_value=0, max_value=2**256 - 1)
timestamps = st.integers(min_value=0, max_value=2**40 - 1)
durations = st.integers(min_value=1, max_value=2**32 - 1)


def test_boundaries() -> None:
    args = DutchAuctionArgs(start_amount=1000, end_amount=500, start_time=T0, duration=100)
    assert current_amount(args, T0 - 1, DecayDirection.INPUT) == 1000
    assert current_amount(args, T0, DecayDirection.INPUT) == 1000
    assert current_amount(args, T0 + 50, DecayDirection.INPUT) == 750
    assert current_amount(args, T0 + 100, DecayDirection.INPUT) == 500
    assert current_amount(args, T0 + 10_000, DecayDirection.INPUT) == 500


def test_rounding_favors_the_maker() -> None:
    falling = DutchAuctionArgs(start_amount=10, end_amount=0, start_time=0, duration=3)
    assert current_amount(falling, 1, DecayDirection.INPUT) == 7
    assert current_amount(falling, 2, DecayDirection.INPUT) == 4
    rising = DutchAuctionArgs(start_amount=0, end_amount=10, start_time=0, duration=3)
    assert current_amount(rising, 1, DecayDirection.OUTPUT) == 3
    assert current_amount(rising, 2, DecayDirection.OUTPUT) == 6


def test_zero_duration() -> None:
    args = DutchAuctionArgs(start_amount=1, end_amount=1, start_time=T0, duration=0)
    with pytest.raises(InvalidRangeError):
        current_amount(args, T0, DecayDirection.INPUT)
    with pytest.raises(InvalidRangeError):
        current_amount(args, T0, DecayDirection.OUTPUT, strict=False)


def test_monotonicity() -> None:
    rising = DutchAuctionArgs(start_amount=500, end_amount=1000, start_time=T0, duration=100)
    with pytest.raises(InvalidRangeError, match='must not increase'):
        current_amount(rising, T0, DecayDirection.INPUT)
    assert current_amount(rising, T0 + 50, DecayDirection.INPUT, strict=False) == 750
    falling = DutchAuctionArgs(start_amount=1000, end_amount=500, start_time=T0, duration=100)
    with pytest.raises(InvalidRangeError, match='must not decrease'):
        check_auction(falling, DecayDirection.OUTPUT)


def test_directions() -> None:
    assert DUTCH_AUCTION_DIRECTIONS[OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D] is DecayDirection.INPUT
    assert DUTCH_AUCTION_DIRECTIONS[OpcodeId.DUTCH_AUCTION_BALANCE_OUT_1D] is DecayDirection.OUTPUT


@given(start=amounts, end=amounts, start_time=timestamps, duration=durations, offset=st.integers(0, 2**32))
def test_amount_stays_between_ends(start: int, end: int, start_time: int, duration: int, offset: int) -> None:
    args = DutchAuctionArgs(start_amount=start, end_amount=end, start_time=start_time, duration=duration)
    for direction in DecayDirection:
        amount = current_amount(args, start_time + offset, direction, strict=False)
        assert min(start, end) <= amount <= max(start, end)


@given(start=amounts, end=amounts, start_time=timestamps, duration=durations,
       t1=st.integers(0, 2**32), t2=st.integers(0, 2**32))
def test_input_never_increases(start: int, end: int, start_time: int, duration: int, t1: int, t2: int) -> None:
    assume(start >= end)
    args = DutchAuctionArgs(start_amount=start, end_amount=end, start_time=start_time, duration=duration)
    earlier, later = sorted((t1, t2))
    assert (current_amount(args, start_time + earlier, DecayDirection.INPUT)
            >= current_amount(args, start_time + later, DecayDirection.INPUT))


@given(start=amounts, end=amounts, start_time=timestamps, duration=durations,
       t1=st.integers(0, 2**32), t2=st.integers(0, 2**32))
def test_output_never_decreases(start: int, end: int, start_time: int, duration: int, t1: int, t2: int) -> None:
    assume(start <= end)
    args = DutchAuctionArgs(start_amount=start, end_amount=end, start_time=start_time, duration=duration)
    earlier, later = sorted((t1, t2))
    assert (current_amount(args, start_time + earlier, DecayDirection.OUTPUT)
            <= current_amount(args, start_time + later, DecayDirection.OUTPUT))


@given(amount=amounts, start_time=timestamps, duration=durations, offset=st.integers(0, 2**32))
def test_flat_auction(amount: int, start_time: int, duration: int, offset: int) -> None:
    args = DutchAuctionArgs(start_amount=amount, end_amount=amount, start_time=start_time, duration=duration)
    assert current_amount(args, start_time + offset, DecayDirection.INPUT) == amount
    assert current_amount(args, start_time + offset, DecayDirection.OUTPUT) == amount
