import threading
import unittest

from swapvm.exception import (
    DecodeError,
    DuplicateOpcodeError,
    RegistryFrozenError,
    UnknownOpcodeError,
    ValidationError,
)
from swapvm.instructions.balances import BalancesArgs
from swapvm.instructions.controls import JUMP_ARGS_CODER, SALT_ARGS_CODER, JumpArgs, SaltArgs
from swapvm.instructions.opcode import OpcodeId
from swapvm.instructions.opcode_sets import AQUA_OPCODES, SWAP_VM_OPCODES, OpcodeSet
from swapvm.registry import MAX_OPCODES, OpcodeRegistry, build_registry, get_default_registry
from swapvm_tests.utils import TOKEN_A


class OpcodeRegistryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = OpcodeRegistry('test')
        self.registry.register(OpcodeId.SALT, SALT_ARGS_CODER)
        self.registry.register(OpcodeId.JUMP, JUMP_ARGS_CODER)

    def test_discriminators_follow_registration_order(self) -> None:
        self.assertEqual(self.registry.discriminator_of(OpcodeId.SALT), 0)
        self.assertEqual(self.registry.discriminator_of(OpcodeId.JUMP), 1)
        self.assertIs(self.registry.resolve(OpcodeId.JUMP), JUMP_ARGS_CODER)
        self.assertEqual(len(self.registry), 2)
        self.assertIn(OpcodeId.JUMP, self.registry)

    def test_encode_instruction(self) -> None:
        data = self.registry.encode_instruction(OpcodeId.JUMP, JumpArgs(next_pc=12))
        self.assertEqual(data.hex(), '0102000c')
        decoded = self.registry.decode_instruction(data)
        self.assertIs(decoded.opcode, OpcodeId.JUMP)
        self.assertEqual(decoded.args, JumpArgs(next_pc=12))

    def test_duplicate_keeps_first(self) -> None:
        with self.assertRaises(DuplicateOpcodeError):
            self.registry.register(OpcodeId.SALT, JUMP_ARGS_CODER)
        self.assertIs(self.registry.resolve(OpcodeId.SALT), SALT_ARGS_CODER)
        self.assertEqual(len(self.registry), 2)

    def test_frozen(self) -> None:
        self.registry.freeze()
        self.assertTrue(self.registry.is_frozen)
        with self.assertRaises(RegistryFrozenError):
            self.registry.register(OpcodeId.DEADLINE, SALT_ARGS_CODER)

    def test_unknown_identity(self) -> None:
        with self.assertRaises(UnknownOpcodeError):
            self.registry.resolve(OpcodeId.DEADLINE)
        with self.assertRaises(UnknownOpcodeError):
            self.registry.encode_instruction(OpcodeId.DEADLINE, SaltArgs(salt=1))
        with self.assertRaises(LookupError):
            self.registry.discriminator_of(OpcodeId.DEADLINE)

    def test_register_requires_identity(self) -> None:
        with self.assertRaises(ValidationError):
            self.registry.register('Controls.deadline', SALT_ARGS_CODER)  # type: ignore[arg-type]

    def test_wrong_args(self) -> None:
        with self.assertRaises(ValidationError):
            self.registry.encode_instruction(OpcodeId.JUMP, SaltArgs(salt=1))

    def test_decode_short_header(self) -> None:
        with self.assertRaises(DecodeError):
            self.registry.decode_instruction(b'')
        with self.assertRaises(DecodeError):
            self.registry.decode_instruction(b'\x01')

    def test_decode_unknown_discriminator(self) -> None:
        with self.assertRaises(UnknownOpcodeError):
            self.registry.decode_instruction(bytes.fromhex('0702000c'))

    def test_decode_length_mismatch(self) -> None:
        # length says 3 bytes, 2 remain
        with self.assertRaises(DecodeError):
            self.registry.decode_instruction(bytes.fromhex('0103000c'))
        # length says 2 bytes, 3 remain
        with self.assertRaises(DecodeError):
            self.registry.decode_instruction(bytes.fromhex('0102000c00'))
        # length says 1 byte, jump needs 2
        with self.assertRaises(DecodeError):
            self.registry.decode_instruction(bytes.fromhex('01010c'))

    def test_payload_too_long(self) -> None:
        registry = build_registry(OpcodeSet.SWAP_VM)
        tokens = tuple(TOKEN_A for _ in range(5))
        with self.assertRaises(ValidationError):
            registry.encode_instruction(
                OpcodeId.STATIC_BALANCES_XD,
                BalancesArgs(tokens=tokens, balances=tuple(range(5))),
            )

    def test_registry_capacity(self) -> None:
        registry = OpcodeRegistry('full')
        # only the table size matters for the limit
        registry._opcodes = (SWAP_VM_OPCODES[0],) * MAX_OPCODES
        with self.assertRaises(ValidationError):
            registry.register(OpcodeId.JUMP, JUMP_ARGS_CODER)

    def test_concurrent_registration(self) -> None:
        registry = OpcodeRegistry('concurrent')
        identities = list(OpcodeId)
        errors: list[Exception] = []

        def register(identity: OpcodeId) -> None:
            try:
                registry.register(identity, SALT_ARGS_CODER)
            except DuplicateOpcodeError as e:
                errors.append(e)

        threads = [threading.Thread(target=register, args=(identity,)) for identity in identities * 2]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(registry), len(identities))
        self.assertEqual(len(errors), len(identities))
        discriminators = sorted(registry.discriminator_of(identity) for identity in identities)
        self.assertEqual(discriminators, list(range(len(identities))))


class OpcodeSetTestCase(unittest.TestCase):
    def test_swap_vm_table(self) -> None:
        registry = build_registry(OpcodeSet.SWAP_VM)
        self.assertTrue(registry.is_frozen)
        self.assertEqual(len(registry), len(SWAP_VM_OPCODES))
        self.assertEqual({opcode.id for opcode in registry}, set(OpcodeId))
        self.assertEqual(registry.discriminator_of(OpcodeId.JUMP), 0)

    def test_aqua_table(self) -> None:
        registry = build_registry('aqua')
        self.assertEqual(len(registry), len(AQUA_OPCODES))
        for identity in (OpcodeId.STATIC_BALANCES_XD, OpcodeId.INVALIDATE_BIT_1D):
            self.assertNotIn(identity, registry)
        self.assertIn(OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D, registry)

    def test_tables_disagree_on_discriminators(self) -> None:
        swap_vm = build_registry(OpcodeSet.SWAP_VM)
        aqua = build_registry(OpcodeSet.AQUA)
        identity = OpcodeId.XYC_SWAP_XD
        self.assertNotEqual(swap_vm.discriminator_of(identity), aqua.discriminator_of(identity))

    def test_unknown_set(self) -> None:
        with self.assertRaises(ValidationError):
            build_registry('nope')

    def test_default_registry(self) -> None:
        registry = get_default_registry()
        self.assertIs(registry, get_default_registry())
        self.assertEqual(registry.name, OpcodeSet.SWAP_VM.value)
