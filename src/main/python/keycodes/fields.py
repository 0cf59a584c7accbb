# SPDX-License-Identifier: GPL-2.0-or-later
"""Packing and unpacking of the fields carried by wrapper keycodes.

Inputs are always truncated to their field width, never rejected.
"""
from keycodes.ranges import QK_LAYER_MOD, QK_LAYER_TAP, QK_MOD_TAP, QK_SWAP_HANDS_TAP, KEYCODE_MAX

BASIC_KEY_MASK = 0xFF
MOD_MASK = 0x1F
LAYER_MASK = 0x0F

MOD_SHIFT = 8
LT_LAYER_SHIFT = 8
# firmware packs the layer-mod layer into bits 5-8, above the 5-bit modifier in bits 0-4
LM_LAYER_SHIFT = 5

# Modifier bits: CTL=0x01, SFT=0x02, ALT=0x04, GUI=0x08, right-hand flag=0x10
MOD_BIT_LCTL = 0x01
MOD_BIT_LSFT = 0x02
MOD_BIT_LALT = 0x04
MOD_BIT_LGUI = 0x08
MOD_BIT_RIGHT = 0x10
MOD_BITS_MASK = 0x0F


def extract_basic_key(code: int) -> int:
    return code & BASIC_KEY_MASK


def extract_mod_mask(code: int) -> int:
    return (code >> MOD_SHIFT) & MOD_MASK


def extract_lt_layer(code: int) -> int:
    return (code >> LT_LAYER_SHIFT) & LAYER_MASK


def extract_lm_layer(code: int) -> int:
    return (code >> LM_LAYER_SHIFT) & LAYER_MASK


def extract_lm_mod(code: int) -> int:
    return code & MOD_MASK


def build_mod_mask_keycode(mask: int, basic_key: int) -> int:
    """ Modifier mask + basic key, e.g. LSFT(KC_A). A zero mask yields the basic key alone. """
    mask &= MOD_MASK
    if mask == 0:
        return basic_key & BASIC_KEY_MASK
    return (mask << MOD_SHIFT) | (basic_key & BASIC_KEY_MASK)


def build_mod_tap_keycode(mask: int, basic_key: int) -> int:
    """ Mod-tap, e.g. LSFT_T(KC_A). A zero mask yields the basic key alone. """
    mask &= MOD_MASK
    if mask == 0:
        return basic_key & BASIC_KEY_MASK
    return QK_MOD_TAP.start | (mask << MOD_SHIFT) | (basic_key & BASIC_KEY_MASK)


def build_lt_keycode(layer: int, basic_key: int) -> int:
    return QK_LAYER_TAP.start | ((layer & LAYER_MASK) << LT_LAYER_SHIFT) | (basic_key & BASIC_KEY_MASK)


def build_sht_keycode(basic_key: int) -> int:
    return QK_SWAP_HANDS_TAP.start | (basic_key & BASIC_KEY_MASK)


def build_lm_keycode(layer: int, mod: int) -> int:
    """ Layer-mod. Layer 0 with no modifier is still a distinct LM value (0x7000). """
    return QK_LAYER_MOD.start | ((layer & LAYER_MASK) << LM_LAYER_SHIFT) | (mod & MOD_MASK)


def extract_inner_byte(code: int) -> int:
    return code & BASIC_KEY_MASK


def replace_inner_byte(code: int, inner: int) -> int:
    """ Swap the low byte of a masked keycode, keeping the outer byte untouched """
    return (code & KEYCODE_MAX & ~BASIC_KEY_MASK) | (inner & BASIC_KEY_MASK)
