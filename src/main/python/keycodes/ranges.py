# SPDX-License-Identifier: GPL-2.0-or-later
"""Classification of raw 16-bit keycodes into wrapper kinds.

The legacy firmware numbering has overlapping ranges (the layer-mod block sits
inside the mod-tap block), so classification walks ``CLASSIFIERS`` in order
and the first matching range wins.
"""
from enum import Enum
from typing import NamedTuple, Tuple


KEYCODE_MAX = 0xFFFF
BASIC_MAX = 0x00FF


class WrapperKind(Enum):
    BASIC = "basic"
    MOD_MASK = "mod_mask"
    MOD_TAP = "mod_tap"
    LAYER_TAP = "layer_tap"
    HOLD_TAP = "hold_tap"
    LAYER_MOD = "layer_mod"
    UNKNOWN = "unknown"


class KeycodeRange(NamedTuple):
    """Half-open range [start, end) of raw keycodes."""
    start: int
    end: int

    def __contains__(self, code) -> bool:
        return self.start <= code < self.end


QK_MODS = KeycodeRange(0x0100, 0x2000)
QK_LAYER_TAP = KeycodeRange(0x4000, 0x5000)
QK_SWAP_HANDS_TAP = KeycodeRange(0x5600, 0x56F0)
QK_MOD_TAP = KeycodeRange(0x6000, 0x8000)
QK_LAYER_MOD = KeycodeRange(0x7000, 0x7200)

# Priority order matters: QK_LAYER_MOD lies entirely inside QK_MOD_TAP.
CLASSIFIERS: Tuple[Tuple[WrapperKind, KeycodeRange], ...] = (
    (WrapperKind.LAYER_TAP, QK_LAYER_TAP),
    (WrapperKind.HOLD_TAP, QK_SWAP_HANDS_TAP),
    (WrapperKind.LAYER_MOD, QK_LAYER_MOD),
    (WrapperKind.MOD_TAP, QK_MOD_TAP),
    (WrapperKind.MOD_MASK, QK_MODS),
)


def classify(code: int) -> WrapperKind:
    """Return the wrapper kind of a raw keycode. Defined for every int."""
    code &= KEYCODE_MAX
    for kind, keycode_range in CLASSIFIERS:
        if code in keycode_range:
            return kind
    if code <= BASIC_MAX:
        return WrapperKind.BASIC
    return WrapperKind.UNKNOWN


def is_basic_keycode(code: int) -> bool:
    return classify(code) is WrapperKind.BASIC


def is_mod_mask_keycode(code: int) -> bool:
    return classify(code) is WrapperKind.MOD_MASK


def is_mod_tap_keycode(code: int) -> bool:
    return classify(code) is WrapperKind.MOD_TAP


def is_lt_keycode(code: int) -> bool:
    return classify(code) is WrapperKind.LAYER_TAP


def is_sht_keycode(code: int) -> bool:
    return classify(code) is WrapperKind.HOLD_TAP


def is_lm_keycode(code: int) -> bool:
    return classify(code) is WrapperKind.LAYER_MOD
