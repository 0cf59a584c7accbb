# coding: utf-8

# SPDX-License-Identifier: GPL-2.0-or-later

"""Firmware integer values for every catalog qmk_id (legacy numbering).

Masked entries are keyed with their "(kc)" placeholder and map to the outer
value with an empty inner key, e.g. "LT2(kc)" -> 0x4200.
"""

from keycodes.fields import build_lm_keycode, build_lt_keycode, build_mod_mask_keycode, \
    build_mod_tap_keycode, build_sht_keycode, MOD_MASK
from keycodes.modifiers import mod_mask_prefix, mod_tap_prefix, mod_value_to_string
from keycodes.ranges import classify, WrapperKind

MAX_LAYERS = 16
MAX_MACROS = 128
MAX_TAP_DANCE = 256

QK_TO = 0x5000
QK_MOMENTARY = 0x5100
QK_DEF_LAYER = 0x5200
QK_TOGGLE_LAYER = 0x5300
QK_ONE_SHOT_LAYER = 0x5400
QK_ONE_SHOT_MOD = 0x5500
QK_TAP_DANCE = 0x5700
QK_LAYER_TAP_TOGGLE = 0x5800
QK_QUANTUM = 0x5C00
QK_MACRO = 0x5F12

ON_PRESS = 1

kc = {
    "KC_NO": 0x00,
    "KC_TRNS": 0x01,

    "KC_ENTER": 0x28,
    "KC_ESCAPE": 0x29,
    "KC_BSPACE": 0x2A,
    "KC_TAB": 0x2B,
    "KC_SPACE": 0x2C,
    "KC_MINUS": 0x2D,
    "KC_EQUAL": 0x2E,
    "KC_LBRACKET": 0x2F,
    "KC_RBRACKET": 0x30,
    "KC_BSLASH": 0x31,
    "KC_NONUS_HASH": 0x32,
    "KC_SCOLON": 0x33,
    "KC_QUOTE": 0x34,
    "KC_GRAVE": 0x35,
    "KC_COMMA": 0x36,
    "KC_DOT": 0x37,
    "KC_SLASH": 0x38,
    "KC_CAPSLOCK": 0x39,

    "KC_PSCREEN": 0x46,
    "KC_SCROLLLOCK": 0x47,
    "KC_PAUSE": 0x48,
    "KC_INSERT": 0x49,
    "KC_HOME": 0x4A,
    "KC_PGUP": 0x4B,
    "KC_DELETE": 0x4C,
    "KC_END": 0x4D,
    "KC_PGDOWN": 0x4E,
    "KC_RIGHT": 0x4F,
    "KC_LEFT": 0x50,
    "KC_DOWN": 0x51,
    "KC_UP": 0x52,

    "KC_NUMLOCK": 0x53,
    "KC_KP_SLASH": 0x54,
    "KC_KP_ASTERISK": 0x55,
    "KC_KP_MINUS": 0x56,
    "KC_KP_PLUS": 0x57,
    "KC_KP_ENTER": 0x58,
    "KC_KP_0": 0x62,
    "KC_KP_DOT": 0x63,
    "KC_NONUS_BSLASH": 0x64,
    "KC_APPLICATION": 0x65,
    "KC_KP_EQUAL": 0x67,

    "KC_EXEC": 0x74,
    "KC_HELP": 0x75,
    "KC_SLCT": 0x77,
    "KC_STOP": 0x78,
    "KC_AGIN": 0x79,
    "KC_UNDO": 0x7A,
    "KC_CUT": 0x7B,
    "KC_COPY": 0x7C,
    "KC_PSTE": 0x7D,
    "KC_FIND": 0x7E,
    "KC__VOLUP": 0x80,
    "KC__VOLDOWN": 0x81,
    "KC_LCAP": 0x82,
    "KC_LNUM": 0x83,
    "KC_LSCR": 0x84,
    "KC_KP_COMMA": 0x85,
    "KC_RO": 0x87,
    "KC_KANA": 0x88,
    "KC_JYEN": 0x89,
    "KC_HENK": 0x8A,
    "KC_MHEN": 0x8B,
    "KC_LANG1": 0x90,
    "KC_LANG2": 0x91,

    "KC_PWR": 0xA5,
    "KC_SLEP": 0xA6,
    "KC_WAKE": 0xA7,
    "KC_MUTE": 0xA8,
    "KC_VOLU": 0xA9,
    "KC_VOLD": 0xAA,
    "KC_MNXT": 0xAB,
    "KC_MPRV": 0xAC,
    "KC_MSTP": 0xAD,
    "KC_MPLY": 0xAE,
    "KC_MSEL": 0xAF,
    "KC_EJCT": 0xB0,
    "KC_MAIL": 0xB1,
    "KC_CALC": 0xB2,
    "KC_MYCM": 0xB3,
    "KC_WSCH": 0xB4,
    "KC_WHOM": 0xB5,
    "KC_WBAK": 0xB6,
    "KC_WFWD": 0xB7,
    "KC_WSTP": 0xB8,
    "KC_WREF": 0xB9,
    "KC_WFAV": 0xBA,
    "KC_MFFD": 0xBB,
    "KC_MRWD": 0xBC,
    "KC_BRIU": 0xBD,
    "KC_BRID": 0xBE,

    "KC_LCTRL": 0xE0,
    "KC_LSHIFT": 0xE1,
    "KC_LALT": 0xE2,
    "KC_LGUI": 0xE3,
    "KC_RCTRL": 0xE4,
    "KC_RSHIFT": 0xE5,
    "KC_RALT": 0xE6,
    "KC_RGUI": 0xE7,

    "KC_MS_U": 0xF0,
    "KC_MS_D": 0xF1,
    "KC_MS_L": 0xF2,
    "KC_MS_R": 0xF3,
    "KC_BTN1": 0xF4,
    "KC_BTN2": 0xF5,
    "KC_BTN3": 0xF6,
    "KC_BTN4": 0xF7,
    "KC_BTN5": 0xF8,
    "KC_WH_U": 0xF9,
    "KC_WH_D": 0xFA,
    "KC_WH_L": 0xFB,
    "KC_WH_R": 0xFC,
    "KC_ACL0": 0xFD,
    "KC_ACL1": 0xFE,
    "KC_ACL2": 0xFF,

    "QK_BOOT": QK_QUANTUM,
    "KC_GESC": QK_QUANTUM + 0x16,
    "KC_LSPO": QK_QUANTUM + 0xD7,
    "KC_RSPC": QK_QUANTUM + 0xD8,
    "KC_SFTENT": QK_QUANTUM + 0xD9,
    "KC_LCPO": QK_QUANTUM + 0xF3,
    "KC_RCPC": QK_QUANTUM + 0xF4,
    "KC_LAPO": QK_QUANTUM + 0xF5,
    "KC_RAPC": QK_QUANTUM + 0xF6,
    "QK_CAPS_WORD_TOGGLE": QK_QUANTUM + 0xF7,
    "QK_REPEAT_KEY": QK_QUANTUM + 0xF8,
    "QK_ALT_REPEAT_KEY": QK_QUANTUM + 0xF9,
    "QK_LAYER_LOCK": QK_QUANTUM + 0xFA,

    "SH_T(kc)": build_sht_keycode(0),
    "SH_TOGG": 0x56F0,
    "SH_TT": 0x56F1,
    "SH_MON": 0x56F2,
    "SH_MOFF": 0x56F3,
    "SH_OFF": 0x56F4,
    "SH_ON": 0x56F5,
    "SH_OS": 0x56F6,
}

for x, letter in enumerate("ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
    kc["KC_{}".format(letter)] = 0x04 + x

for x, digit in enumerate("1234567890"):
    kc["KC_{}".format(digit)] = 0x1E + x

for x in range(12):
    kc["KC_F{}".format(x + 1)] = 0x3A + x
    kc["KC_F{}".format(x + 13)] = 0x68 + x

for x in range(9):
    kc["KC_KP_{}".format(x + 1)] = 0x59 + x

SHIFTED = {
    "KC_TILD": "KC_GRAVE",
    "KC_EXLM": "KC_1",
    "KC_AT": "KC_2",
    "KC_HASH": "KC_3",
    "KC_DLR": "KC_4",
    "KC_PERC": "KC_5",
    "KC_CIRC": "KC_6",
    "KC_AMPR": "KC_7",
    "KC_ASTR": "KC_8",
    "KC_LPRN": "KC_9",
    "KC_RPRN": "KC_0",
    "KC_UNDS": "KC_MINUS",
    "KC_PLUS": "KC_EQUAL",
    "KC_LCBR": "KC_LBRACKET",
    "KC_RCBR": "KC_RBRACKET",
    "KC_LT": "KC_COMMA",
    "KC_GT": "KC_DOT",
    "KC_COLN": "KC_SCOLON",
    "KC_PIPE": "KC_BSLASH",
    "KC_QUES": "KC_SLASH",
    "KC_DQUO": "KC_QUOTE",
}

for shifted, base in SHIFTED.items():
    kc[shifted] = build_mod_mask_keycode(0x02, kc[base])

for mask in range(1, MOD_MASK + 1):
    prefix = mod_mask_prefix(mask)
    if prefix is None:
        continue
    kc["{}(kc)".format(prefix)] = build_mod_mask_keycode(mask, 0)
    kc["OSM({})".format(mod_value_to_string(mask))] = QK_ONE_SHOT_MOD | mask
    kc[mod_value_to_string(mask)] = mask

    # right-hand mod-taps with no modifier besides Control collide with the layer-mod block
    outer = build_mod_tap_keycode(mask, 0)
    if classify(outer) is WrapperKind.MOD_TAP:
        kc["{}(kc)".format(mod_tap_prefix(mask))] = outer

for layer in range(MAX_LAYERS):
    kc["TO({})".format(layer)] = QK_TO | (ON_PRESS << 4) | layer
    kc["MO({})".format(layer)] = QK_MOMENTARY | layer
    kc["DF({})".format(layer)] = QK_DEF_LAYER | layer
    kc["TG({})".format(layer)] = QK_TOGGLE_LAYER | layer
    kc["OSL({})".format(layer)] = QK_ONE_SHOT_LAYER | layer
    kc["TT({})".format(layer)] = QK_LAYER_TAP_TOGGLE | layer
    kc["LT{}(kc)".format(layer)] = build_lt_keycode(layer, 0)
    kc["LM{}(kc)".format(layer)] = build_lm_keycode(layer, 0)

for x in range(MAX_MACROS):
    kc["M{}".format(x)] = QK_MACRO + x

for x in range(MAX_TAP_DANCE):
    kc["TD({})".format(x)] = QK_TAP_DANCE | x
