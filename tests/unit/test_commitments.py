"""
Module 01 - Commitment Scheme Unit Tests
Tests for core/crypto/commitments.py

Required behaviour:
1. Determinism - same (nullifier, secret) -> same (commitment, nullifier_hash)
2. Pinned regression vector for the hashing scheme
3. Distinct inputs give distinct commitments
4. Byte layout: nullifier first, secret second
5. Wrong-length inputs raise InvalidInputLength
"""
import pytest

from core.crypto.commitments import NoteSecrets, create_user_commitment, derive_commitment
from core.crypto.hashing import keccak256
from core.schemas.errors import InvalidInputLength

from fixtures.common import ONE32, ZERO32, DeterministicRandomness, filled


# Regression vector: nullifier = 0x00 * 32, secret = 0x01 * 32
PINNED_COMMITMENT = bytes.fromhex(
    "d5f4f7e1d989848480236fb0a5f808d5877abf778364ae50845234dd6c1e80fc"
)
PINNED_NULLIFIER_HASH = bytes.fromhex(
    "290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563"
)
# Same bytes with nullifier and secret swapped
SWAPPED_COMMITMENT = bytes.fromhex(
    "c9c2b9c48fb9c3ca9e71817fb01e907be3e0eda4d950bbdcb6dcc4c1a73a6537"
)


class TestPinnedVector:
    """The hashing scheme must not drift."""

    def test_commitment_vector(self):
        commitment, _ = derive_commitment(ZERO32, ONE32)
        assert commitment == PINNED_COMMITMENT

    def test_nullifier_hash_vector(self):
        _, nullifier_hash = derive_commitment(ZERO32, ONE32)
        assert nullifier_hash == PINNED_NULLIFIER_HASH

    def test_argument_order_matters(self):
        """Nullifier occupies the first 32 bytes, secret the last 32."""
        commitment, _ = derive_commitment(ONE32, ZERO32)
        assert commitment == SWAPPED_COMMITMENT
        assert commitment != PINNED_COMMITMENT


class TestDerivation:
    """Structural properties of derive_commitment."""

    def test_deterministic(self):
        results = [derive_commitment(filled(7), filled(9)) for _ in range(5)]
        assert all(r == results[0] for r in results)

    def test_commitment_is_hash_of_concatenation(self):
        nullifier, secret = filled(0xAA), filled(0xBB)
        commitment, nullifier_hash = derive_commitment(nullifier, secret)

        assert commitment == keccak256(nullifier + secret)
        assert nullifier_hash == keccak256(nullifier)

    def test_different_secret_different_commitment(self):
        c1, h1 = derive_commitment(ZERO32, filled(1))
        c2, h2 = derive_commitment(ZERO32, filled(2))

        assert c1 != c2
        assert h1 == h2  # nullifier hash depends on the nullifier only

    def test_different_nullifier_different_commitment(self):
        c1, h1 = derive_commitment(filled(1), ONE32)
        c2, h2 = derive_commitment(filled(2), ONE32)

        assert c1 != c2
        assert h1 != h2

    def test_outputs_are_32_bytes(self):
        commitment, nullifier_hash = derive_commitment(filled(3), filled(4))
        assert len(commitment) == 32
        assert len(nullifier_hash) == 32

    def test_create_user_commitment_matches(self):
        assert create_user_commitment(ZERO32, ONE32) == PINNED_COMMITMENT


class TestPreconditions:
    """Inputs must be exactly 32 bytes."""

    @pytest.mark.parametrize("nullifier", [b"", b"\x00" * 31, b"\x00" * 33])
    def test_bad_nullifier(self, nullifier):
        with pytest.raises(InvalidInputLength) as exc_info:
            derive_commitment(nullifier, ONE32)
        assert exc_info.value.details["field"] == "nullifier"

    @pytest.mark.parametrize("secret", [b"", b"\x01" * 16, b"\x01" * 64])
    def test_bad_secret(self, secret):
        with pytest.raises(InvalidInputLength) as exc_info:
            derive_commitment(ZERO32, secret)
        assert exc_info.value.details["field"] == "secret"


class TestNoteSecrets:
    """Tests for the NoteSecrets value type."""

    def test_generate_uses_injected_source(self):
        source = DeterministicRandomness()
        note = NoteSecrets.generate(source)

        assert source.calls == ["nullifier", "secret"]
        assert len(note.nullifier) == 32
        assert len(note.secret) == 32
        assert note.nullifier != note.secret

    def test_properties_match_derivation(self):
        note = NoteSecrets(nullifier=ZERO32, secret=ONE32)
        assert note.commitment == PINNED_COMMITMENT
        assert note.nullifier_hash == PINNED_NULLIFIER_HASH

    def test_repr_redacts_values(self):
        note = NoteSecrets(nullifier=filled(0xAB), secret=filled(0xCD))
        text = repr(note)

        assert "redacted" in text
        assert "ab" * 4 not in text
        assert "cd" * 4 not in text

    def test_rejects_short_values(self):
        with pytest.raises(InvalidInputLength):
            NoteSecrets(nullifier=b"\x00", secret=ONE32)
