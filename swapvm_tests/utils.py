from swapvm.types import Address

TOKEN_A = Address(bytes.fromhex('a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48'))
TOKEN_B = Address(bytes.fromhex('c02aaa39b223fe8d0a0e5c4f27ead9083c756cc2'))
MAKER = Address(bytes.fromhex('1111111111111111111111111111111111111111'))
TAKER = Address(bytes.fromhex('2222222222222222222222222222222222222222'))

# 2023-11-14 22:13:20 UTC
T0 = 1700000000
