import unittest

from swapvm.exception import RangeError, ValidationError
from swapvm.traits import MakerTraits, TakerTraits
from swapvm_tests.utils import MAKER, T0, TAKER


class MakerTraitsTestCase(unittest.TestCase):
    def test_default(self) -> None:
        traits = MakerTraits.default()
        self.assertTrue(traits.allow_multiple_fills)
        self.assertTrue(traits.allow_partial_fills)
        self.assertEqual(traits.to_int(), 1 << 254)

    def test_int_round_trip(self) -> None:
        traits = MakerTraits(
            allowed_sender=MakerTraits.allowed_sender_from_address(TAKER),
            expiration=T0,
            nonce_or_epoch=7,
            series=2,
            has_extension=True,
            no_partial_fills=True,
        )
        self.assertEqual(MakerTraits.from_int(traits.to_int()), traits)

    def test_strict_from_int(self) -> None:
        word = (1 << 253) | (1 << 255)
        self.assertEqual(MakerTraits.from_int(word), MakerTraits(no_partial_fills=True))
        with self.assertRaises(RangeError):
            MakerTraits.from_int(word, strict=True)

    def test_bytes_round_trip(self) -> None:
        traits = MakerTraits(expiration=T0, use_permit2=True)
        data = traits.to_bytes()
        self.assertEqual(len(data), 32)
        self.assertEqual(data[0], 0x01)  # bit 248
        self.assertEqual(data[-15:-10].hex(), '006553f100')  # expiration at bits 80..119
        self.assertEqual(MakerTraits.from_bytes(data), traits)

    def test_from_bytes_requires_32_bytes(self) -> None:
        with self.assertRaises(RangeError):
            MakerTraits.from_bytes(b'\x00' * 31)

    def test_out_of_range_field(self) -> None:
        with self.assertRaises(RangeError):
            MakerTraits(expiration=1 << 40)
        with self.assertRaises(RangeError):
            MakerTraits(allowed_sender=1 << 80)

    def test_expiration(self) -> None:
        self.assertFalse(MakerTraits().is_expired(T0))
        traits = MakerTraits(expiration=T0)
        self.assertFalse(traits.is_expired(T0))
        self.assertTrue(traits.is_expired(T0 + 1))

    def test_allowed_sender(self) -> None:
        self.assertTrue(MakerTraits().is_allowed_sender(MAKER))
        traits = MakerTraits(allowed_sender=MakerTraits.allowed_sender_from_address(TAKER))
        self.assertTrue(traits.is_allowed_sender(TAKER))
        self.assertFalse(traits.is_allowed_sender(MAKER))
        with self.assertRaises(ValidationError):
            traits.is_allowed_sender(b'\x00' * 19)


class TakerTraitsTestCase(unittest.TestCase):
    def test_int_round_trip(self) -> None:
        traits = TakerTraits(
            threshold=(1 << 185) - 1,
            args_interaction_length=10,
            args_extension_length=(1 << 24) - 1,
            args_has_target=True,
            is_making_amount=True,
        )
        self.assertEqual(TakerTraits.from_int(traits.to_int()), traits)
        self.assertEqual(TakerTraits.from_bytes(traits.to_bytes()), traits)

    def test_default_is_zero(self) -> None:
        self.assertEqual(TakerTraits.default().to_int(), 0)

    def test_threshold_overflow(self) -> None:
        with self.assertRaises(RangeError):
            TakerTraits(threshold=1 << 185)
