"""
VT100/VT220 line attributes and soft fonts.

The line attributes (DECDWL, DECDHL, DECSWL) apply to the whole line the
cursor is on.
"""

from .codes import ESC, decset, decrst
from .records import VT100_FEATURES


def enable_double_width():
    return f"{ESC}#3"


def enable_double_height():
    return f"{ESC}#4"


def enable_double_width_height():
    return f"{ESC}#6"


def disable_double_width():
    # Back to a single-width line (DECSWL)
    return f"{ESC}#5"


def disable_double_height():
    return f"{ESC}#5"


def disable_double_width_height():
    return f"{ESC}#5"


def enable_soft_fonts():
    return decset(50)


def disable_soft_fonts():
    return decrst(50)


_ENABLE = {
    "double-width": enable_double_width,
    "double-height": enable_double_height,
    "double-width-height": enable_double_width_height,
    "soft-fonts": enable_soft_fonts,
}

_DISABLE = {
    "double-width": disable_double_width,
    "double-height": disable_double_height,
    "double-width-height": disable_double_width_height,
    "soft-fonts": disable_soft_fonts,
}


def enable_feature(feature):
    if feature not in VT100_FEATURES:
        raise ValueError(f"Invalid VT100 feature: {feature!r}")
    return _ENABLE[feature]()


def disable_feature(feature):
    if feature not in VT100_FEATURES:
        raise ValueError(f"Invalid VT100 feature: {feature!r}")
    return _DISABLE[feature]()
