"""
Tests for the bit-flag helpers.
"""

import pytest

from tablekit.exceptions import FlagValueError
from tablekit.flags import (
    DrawFlags,
    bit_or,
    flag_clear,
    flag_isset,
    flag_set,
    flag_toggle,
    has_bit,
)


class TestFlagHelpers:
    """Test flag_isset, flag_set, flag_clear and flag_toggle."""

    def test_isset(self):
        """Only the requested bit is inspected."""
        assert flag_isset(5, 4)
        assert flag_isset(5, 1)
        assert not flag_isset(5, 2)
        assert not flag_isset(0, 8)

    def test_set_is_idempotent(self):
        """Setting an already-set flag changes nothing."""
        assert flag_set(1, 4) == 5
        assert flag_set(5, 4) == 5

    def test_clear_is_idempotent(self):
        """Clearing an already-clear flag changes nothing."""
        assert flag_clear(5, 4) == 1
        assert flag_clear(1, 4) == 1

    def test_toggle(self):
        """Toggling flips the flag."""
        assert flag_toggle(5, 4) == 1
        assert flag_toggle(1, 4) == 5

    def test_invalid_flags(self):
        """Flags must be a single positive power of two."""
        for flag in [0, 3, 6, -2, True, 1.5, "4"]:
            with pytest.raises(FlagValueError):
                flag_isset(7, flag)

    def test_flag_error_is_value_error(self):
        """FlagValueError can be caught as ValueError."""
        with pytest.raises(ValueError) as exc_info:
            flag_set(0, 3)

        assert exc_info.value.flag == 3

    def test_invalid_flags_values(self):
        """The flags value must be a non-negative int."""
        for flags in [-1, -5, True, 2.0, "5", None]:
            with pytest.raises(FlagValueError) as exc_info:
                flag_isset(flags, 4)
            assert exc_info.value.flag is flags

        with pytest.raises(FlagValueError):
            flag_set(-1, 4)
        with pytest.raises(FlagValueError):
            flag_clear(-8, 4)
        with pytest.raises(FlagValueError):
            has_bit(-1, 2)


class TestBitHelpers:
    """Test bit_or and has_bit."""

    def test_bit_or(self):
        """bit_or adds a missing bit and keeps a present one."""
        assert bit_or(1, 4) == 5
        assert bit_or(5, 4) == 5

    def test_has_bit(self):
        """has_bit uses 0-based bit indices."""
        assert has_bit(5, 0)
        assert not has_bit(5, 1)
        assert has_bit(5, 2)
        assert has_bit(1 << 40, 40)

    def test_negative_bit_rejected(self):
        """Bit indices must be non-negative ints."""
        with pytest.raises(FlagValueError):
            has_bit(5, -1)


class TestDrawFlags:
    """Test the DrawFlags constants."""

    def test_values(self):
        """Each draw flag occupies its documented bit."""
        assert DrawFlags.FLIP_HORIZONTAL == 1
        assert DrawFlags.FLIP_VERTICAL == 2
        assert DrawFlags.ALPHA_50 == 4
        assert DrawFlags.ALPHA_75 == 8
        assert DrawFlags.ALT_PALETTE == 16
        assert DrawFlags.EARLY_LIST == 1024
        assert DrawFlags.LIST_BOTTOM == 2048
        assert DrawFlags.BOUND_BOX_HIT_TEST == 4096
        assert DrawFlags.CROP == 8192

    def test_member_names(self):
        """Members use upper snake case names, in bit order."""
        assert [member.name for member in DrawFlags] == [
            "FLIP_HORIZONTAL",
            "FLIP_VERTICAL",
            "ALPHA_50",
            "ALPHA_75",
            "ALT_PALETTE",
            "EARLY_LIST",
            "LIST_BOTTOM",
            "BOUND_BOX_HIT_TEST",
            "CROP",
        ]

    def test_combine_with_helpers(self):
        """Draw flags work with the generic helpers."""
        flags = flag_set(DrawFlags.FLIP_VERTICAL, DrawFlags.CROP)

        assert flag_isset(flags, DrawFlags.CROP)
        assert not flag_isset(flags, DrawFlags.ALPHA_50)
        assert flag_clear(flags, DrawFlags.FLIP_VERTICAL) == DrawFlags.CROP
