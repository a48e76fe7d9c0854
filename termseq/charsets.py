"""
Character set designation (SCS).

A charset is designated into one of the four registers G0-G3 with
``ESC <intermediate> <final>``. The intermediate selects the register,
the final byte selects the charset.
"""

from .codes import ESC
from .records import CHARSET_NAMES, CHARSET_TYPES, CHARSET_TYPES_G2G3


REGISTERS = {
    "G0": "(",
    "G1": ")",
    "G2": "*",
    "G3": "+",
}

CHARSETS = {
    "USASCII": "B",
    "UK": "A",
    "DECSpecial": "0",
    "DECSupplemental": "<",
}


def designate(register, charset):
    """Get the sequence that designates the charset into the register."""
    if register not in CHARSET_NAMES:
        raise ValueError(f"Invalid charset register: {register!r}")
    if charset not in CHARSET_TYPES:
        raise ValueError(f"Invalid charset: {charset!r}")
    if register in ("G2", "G3") and charset not in CHARSET_TYPES_G2G3:
        raise ValueError(f"Charset {charset!r} is not available for {register}")
    return ESC + REGISTERS[register] + CHARSETS[charset]


# %% Selection (DEC special graphics into a register)


def select_g0():
    return designate("G0", "DECSpecial")


def select_g1():
    return designate("G1", "DECSpecial")


def select_g2():
    return designate("G2", "DECSpecial")


def select_g3():
    return designate("G3", "DECSpecial")


def select_character_set(name):
    """Get the selection sequence for "G0", "G1", "G2" or "G3"."""
    if name not in CHARSET_NAMES:
        raise ValueError(f"Invalid charset register: {name!r}")
    return designate(name, "DECSpecial")


# %% Per register and charset


def set_g0_usascii():
    return designate("G0", "USASCII")


def set_g0_uk():
    return designate("G0", "UK")


def set_g0_dec_special():
    return designate("G0", "DECSpecial")


def set_g0_dec_supplemental():
    return designate("G0", "DECSupplemental")


def set_g1_usascii():
    return designate("G1", "USASCII")


def set_g1_uk():
    return designate("G1", "UK")


def set_g1_dec_special():
    return designate("G1", "DECSpecial")


def set_g1_dec_supplemental():
    return designate("G1", "DECSupplemental")


def set_g2_usascii():
    return designate("G2", "USASCII")


def set_g2_dec_special():
    return designate("G2", "DECSpecial")


def set_g3_usascii():
    return designate("G3", "USASCII")


def set_g3_dec_special():
    return designate("G3", "DECSpecial")


# %% Apply to text


def apply_g0(text, charset):
    """Prefix the text with the G0 designation of the given charset."""
    return designate("G0", charset) + text


def apply_g1(text, charset):
    return designate("G1", charset) + text


def apply_g2(text, charset):
    return designate("G2", charset) + text


def apply_g3(text, charset):
    return designate("G3", charset) + text
