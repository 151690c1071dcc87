import pytest

from swapvm.coders import ADDRESS, BOOL, UINT16, UINT40, UINT256, ArrayArgType, IntArgType, TraitWordArgType
from swapvm.exception import DecodeError, RangeError, ValidationError
from swapvm.traits import MakerTraits
from swapvm_tests.utils import TOKEN_A, TOKEN_B


def test_fixed_sizes() -> None:
    assert UINT16.fixed_size == 2
    assert UINT40.fixed_size == 5
    assert UINT256.fixed_size == 32
    assert ADDRESS.fixed_size == 20
    assert BOOL.fixed_size == 1
    assert ArrayArgType(ADDRESS).fixed_size is None
    assert TraitWordArgType(MakerTraits).fixed_size == 32


def test_uint_bytes() -> None:
    assert UINT40.to_bytes(1700000000).hex() == '006553f100'
    assert UINT40.from_bytes(bytes.fromhex('006553f100')) == 1700000000
    with pytest.raises(RangeError):
        UINT16.to_bytes(1 << 16)


def test_from_bytes_errors_are_decode_errors() -> None:
    with pytest.raises(DecodeError):
        UINT40.from_bytes(b'\x00' * 4)
    with pytest.raises(DecodeError):
        UINT16.from_bytes(b'\x00' * 3)


def test_signed_int() -> None:
    int16 = IntArgType(16)
    assert int16.to_bytes(-1234).hex() == 'fb2e'
    assert int16.json_to_value('-1234') == -1234


def test_uint_json() -> None:
    assert UINT256.json_to_value(10) == 10
    assert UINT256.json_to_value('1000000000000000000000') == 10**21
    assert UINT256.json_to_value('0xff') == 255
    assert UINT256.value_to_json(10**21) == 10**21
    with pytest.raises(ValidationError):
        UINT256.json_to_value('ten')
    with pytest.raises(ValidationError):
        UINT256.json_to_value(True)
    with pytest.raises(RangeError):
        UINT16.json_to_value(70000)


def test_address() -> None:
    assert ADDRESS.to_bytes(TOKEN_A) == TOKEN_A
    assert ADDRESS.value_to_json(TOKEN_A) == '0x' + TOKEN_A.hex()
    assert ADDRESS.json_to_value('0x' + TOKEN_A.hex()) == TOKEN_A
    with pytest.raises(ValidationError):
        ADDRESS.check_value(b'\x00' * 19)
    with pytest.raises(ValidationError):
        ADDRESS.json_to_value('0xzz')


def test_bool() -> None:
    assert BOOL.to_bytes(True) == b'\x01'
    assert BOOL.from_bytes(b'\x00') is False
    with pytest.raises(DecodeError):
        BOOL.from_bytes(b'\x02')


def test_address_array() -> None:
    array = ArrayArgType(ADDRESS)
    data = array.to_bytes((TOKEN_A, TOKEN_B))
    assert data[:2] == b'\x00\x02'
    assert len(data) == 2 + 2 * 20
    assert array.from_bytes(data) == (TOKEN_A, TOKEN_B)
    assert array.value_to_json((TOKEN_A,)) == ['0x' + TOKEN_A.hex()]
    with pytest.raises(ValidationError):
        array.check_value([TOKEN_A])


def test_array_count_disagrees_with_data() -> None:
    array = ArrayArgType(UINT16)
    with pytest.raises(DecodeError):
        array.from_bytes(bytes.fromhex('0003' + '0001' * 2))
    with pytest.raises(DecodeError):
        array.from_bytes(bytes.fromhex('0001' + '0001' * 2))


def test_trait_word() -> None:
    arg_type = TraitWordArgType(MakerTraits)
    traits = MakerTraits(expiration=5, no_partial_fills=True)
    data = arg_type.to_bytes(traits)
    assert int.from_bytes(data, 'big') == traits.to_int()
    assert arg_type.from_bytes(data) == traits
    assert arg_type.json_to_value({'expiration': 5, 'no_partial_fills': True}) == traits
    assert arg_type.value_to_json(traits)['expiration'] == 5
    with pytest.raises(ValidationError):
        arg_type.json_to_value({'unknown': 1})
    with pytest.raises(ValidationError):
        arg_type.check_value(traits.to_int())
