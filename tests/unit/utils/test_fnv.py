"""Tests for FNV-1a digest helpers."""

import pytest

from taskboard.utils.fnv import FNV_OFFSET_BASIS, fnv1a_32, fnv1a_hex


class TestFnv1a:
    """Tests for the 32-bit FNV-1a digest."""

    def test_empty_string_is_offset_basis(self) -> None:
        """Empty input leaves the offset basis untouched."""
        assert fnv1a_32("") == FNV_OFFSET_BASIS
        assert fnv1a_hex("") == "811c9dc5"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a", "e40c292c"),
            ("foobar", "bf9cf968"),
        ],
    )
    def test_known_vectors(self, text: str, expected: str) -> None:
        """ASCII input matches the published FNV-1a test vectors."""
        assert fnv1a_hex(text) == expected

    def test_hex_is_fixed_width_lowercase(self) -> None:
        """Digests are always 8 lowercase hex characters."""
        for text in ["", "x", "Patrol Perimeter", "ñandú", "🚀"]:
            digest = fnv1a_hex(text)
            assert len(digest) == 8
            assert digest == digest.lower()
            int(digest, 16)

    def test_order_sensitive(self) -> None:
        """Permuted input gives a different digest."""
        assert fnv1a_hex("ab") != fnv1a_hex("ba")
