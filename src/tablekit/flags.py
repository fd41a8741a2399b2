"""
Helpers for single-bit flags packed into an int.

Every ``flag`` argument must be a single power of two (1, 2, 4, 8, ...).
"""

from enum import IntFlag

from tablekit.core.types import FlagValue
from tablekit.exceptions import FlagValueError


class DrawFlags(IntFlag):
    """Flags accepted by sprite and animation draw calls."""

    FLIP_HORIZONTAL = 1 << 0
    FLIP_VERTICAL = 1 << 1
    ALPHA_50 = 1 << 2
    ALPHA_75 = 1 << 3
    ALT_PALETTE = 1 << 4
    EARLY_LIST = 1 << 10
    LIST_BOTTOM = 1 << 11
    BOUND_BOX_HIT_TEST = 1 << 12
    CROP = 1 << 13


def _check_flag(flag: FlagValue) -> None:
    if isinstance(flag, bool) or not isinstance(flag, int):
        raise FlagValueError(flag, "must be an int")
    if flag <= 0 or flag & (flag - 1):
        raise FlagValueError(flag)


def _check_flags(flags: FlagValue) -> None:
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise FlagValueError(flags, "is not an int")
    if flags < 0:
        raise FlagValueError(flags, "is negative")


def flag_isset(flags: FlagValue, flag: FlagValue) -> bool:
    """Check if flag is set in flags."""
    _check_flags(flags)
    _check_flag(flag)
    return bool(flags & flag)


def flag_set(flags: FlagValue, flag: FlagValue) -> FlagValue:
    """Set flag in flags and return the new flags (unchanged if already set)."""
    if not flag_isset(flags, flag):
        flags = flags + flag
    return flags


def flag_clear(flags: FlagValue, flag: FlagValue) -> FlagValue:
    """Clear flag in flags and return the new flags (unchanged if already clear)."""
    if flag_isset(flags, flag):
        flags = flags - flag
    return flags


def flag_toggle(flags: FlagValue, flag: FlagValue) -> FlagValue:
    """Toggle flag in flags: set it if currently clear, clear it if currently set."""
    if flag_isset(flags, flag):
        return flag_clear(flags, flag)
    return flag_set(flags, flag)


def bit_or(value: FlagValue, bit_value: FlagValue) -> FlagValue:
    """
    OR a power-of-two value into value.

    Params:
        value: Value to combine
        bit_value: Power of two to add if its bit is not already set

    Returns:
        value with the bit of bit_value set
    """
    return flag_set(value, bit_value)


def has_bit(value: FlagValue, bit: int) -> bool:
    """
    Check whether a bit is set.

    Params:
        value: Value to inspect
        bit: 0-based index of the bit

    Returns:
        True if the bit is set
    """
    if isinstance(bit, bool) or not isinstance(bit, int) or bit < 0:
        raise FlagValueError(bit, "must be a non-negative bit index")
    return flag_isset(value, 1 << bit)
