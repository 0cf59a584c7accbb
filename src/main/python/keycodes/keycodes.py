# coding: utf-8

# SPDX-License-Identifier: GPL-2.0-or-later

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Optional, Tuple

from keycodes import rawcodes
from keycodes.fields import MOD_MASK
from keycodes.modifiers import mod_description, mod_mask_aliases, mod_mask_prefix, mod_tap_aliases, \
    mod_tap_prefix, mod_to_short, mod_value_to_string, MOD_STRING_ALIASES


@dataclass(frozen=True)
class Keycode:
    """ One catalog entry. Masked entries stand for a wrapper and carry a (kc) placeholder. """

    qmk_id: str
    label: str
    tooltip: Optional[str] = None
    # whether this keycode requires another sub-keycode
    masked: bool = False
    # if this is printable keycode, what character does it normally output (i.e. non-shifted state)
    printable: Optional[str] = None
    alias: Tuple[str, ...] = ()
    hidden: bool = False
    requires_feature: Optional[str] = None

    def __post_init__(self):
        if self.masked:
            assert self.qmk_id.endswith("(kc)")
        if self.alias[:1] != (self.qmk_id,):
            object.__setattr__(self, "alias", (self.qmk_id,) + tuple(self.alias))

    @property
    def outer_id(self):
        """ LT2(kc) -> LT2, leaf ids are returned unchanged """
        return self.qmk_id.replace("(kc)", "")

    def is_supported_by(self, supported_features):
        """ Whether the keycode is supported by a keyboard with these features. """
        if self.requires_feature is None or supported_features is None:
            return True
        return self.requires_feature in supported_features


def K(qmk_id, label, tooltip=None, masked=False, printable=None, alias=None, requires_feature=None):
    return Keycode(qmk_id, label, tooltip, masked=masked, printable=printable, alias=tuple(alias or ()),
                   requires_feature=requires_feature)


KEYCODES_SPECIAL = [
    K("KC_NO", ""),
    K("KC_TRNS", "▽", alias=["KC_TRANSPARENT"]),
]

KEYCODES_BASIC_NUMPAD = [
    K("KC_NUMLOCK", "Num\nLock", alias=["KC_NLCK"]),
    K("KC_KP_SLASH", "/", alias=["KC_PSLS"]),
    K("KC_KP_ASTERISK", "*", alias=["KC_PAST"]),
    K("KC_KP_MINUS", "-", alias=["KC_PMNS"]),
    K("KC_KP_PLUS", "+", alias=["KC_PPLS"]),
    K("KC_KP_ENTER", "Num\nEnter", alias=["KC_PENT"]),
    K("KC_KP_1", "1", alias=["KC_P1"]),
    K("KC_KP_2", "2", alias=["KC_P2"]),
    K("KC_KP_3", "3", alias=["KC_P3"]),
    K("KC_KP_4", "4", alias=["KC_P4"]),
    K("KC_KP_5", "5", alias=["KC_P5"]),
    K("KC_KP_6", "6", alias=["KC_P6"]),
    K("KC_KP_7", "7", alias=["KC_P7"]),
    K("KC_KP_8", "8", alias=["KC_P8"]),
    K("KC_KP_9", "9", alias=["KC_P9"]),
    K("KC_KP_0", "0", alias=["KC_P0"]),
    K("KC_KP_DOT", ".", alias=["KC_PDOT"]),
    K("KC_KP_EQUAL", "=", alias=["KC_PEQL"]),
    K("KC_KP_COMMA", ",", alias=["KC_PCMM"]),
]

KEYCODES_BASIC_NAV = [
    K("KC_PSCREEN", "Print\nScreen", alias=["KC_PSCR"]),
    K("KC_SCROLLLOCK", "Scroll\nLock", alias=["KC_SLCK", "KC_BRMD"]),
    K("KC_PAUSE", "Pause", alias=["KC_PAUS", "KC_BRK", "KC_BRMU"]),
    K("KC_INSERT", "Insert", alias=["KC_INS"]),
    K("KC_HOME", "Home"),
    K("KC_PGUP", "Page\nUp"),
    K("KC_DELETE", "Del", alias=["KC_DEL"]),
    K("KC_END", "End"),
    K("KC_PGDOWN", "Page\nDown", alias=["KC_PGDN"]),
    K("KC_RIGHT", "Right", alias=["KC_RGHT"]),
    K("KC_LEFT", "Left"),
    K("KC_DOWN", "Down"),
    K("KC_UP", "Up"),
]

KEYCODES_BASIC = [K("KC_{}".format(c), c, printable=c.lower()) for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"]

KEYCODES_BASIC += [
    K("KC_1", "!\n1", printable="1"),
    K("KC_2", "@\n2", printable="2"),
    K("KC_3", "#\n3", printable="3"),
    K("KC_4", "$\n4", printable="4"),
    K("KC_5", "%\n5", printable="5"),
    K("KC_6", "^\n6", printable="6"),
    K("KC_7", "&\n7", printable="7"),
    K("KC_8", "*\n8", printable="8"),
    K("KC_9", "(\n9", printable="9"),
    K("KC_0", ")\n0", printable="0"),
    K("KC_ENTER", "Enter", alias=["KC_ENT"]),
    K("KC_ESCAPE", "Esc", alias=["KC_ESC"]),
    K("KC_BSPACE", "Bksp", alias=["KC_BSPC"]),
    K("KC_TAB", "Tab"),
    K("KC_SPACE", "Space", alias=["KC_SPC"]),
    K("KC_MINUS", "_\n-", printable="-", alias=["KC_MINS"]),
    K("KC_EQUAL", "+\n=", printable="=", alias=["KC_EQL"]),
    K("KC_LBRACKET", "{\n[", printable="[", alias=["KC_LBRC"]),
    K("KC_RBRACKET", "}\n]", printable="]", alias=["KC_RBRC"]),
    K("KC_BSLASH", "|\n\\", printable="\\", alias=["KC_BSLS"]),
    K("KC_SCOLON", ":\n;", printable=";", alias=["KC_SCLN"]),
    K("KC_QUOTE", "\"\n'", printable="'", alias=["KC_QUOT"]),
    K("KC_GRAVE", "~\n`", printable="`", alias=["KC_GRV", "KC_ZKHK"]),
    K("KC_COMMA", "<\n,", printable=",", alias=["KC_COMM"]),
    K("KC_DOT", ">\n.", printable="."),
    K("KC_SLASH", "?\n/", printable="/", alias=["KC_SLSH"]),
    K("KC_CAPSLOCK", "Caps\nLock", alias=["KC_CLCK", "KC_CAPS"]),
]

KEYCODES_BASIC += [K("KC_F{}".format(x), "F{}".format(x)) for x in range(1, 13)]

KEYCODES_BASIC += [
    K("KC_APPLICATION", "Menu", alias=["KC_APP"]),
    K("KC_LCTRL", "LCtrl", alias=["KC_LCTL"]),
    K("KC_LSHIFT", "LShift", alias=["KC_LSFT"]),
    K("KC_LALT", "LAlt", alias=["KC_LOPT"]),
    K("KC_LGUI", "LGui", alias=["KC_LCMD", "KC_LWIN"]),
    K("KC_RCTRL", "RCtrl", alias=["KC_RCTL"]),
    K("KC_RSHIFT", "RShift", alias=["KC_RSFT"]),
    K("KC_RALT", "RAlt", alias=["KC_ALGR", "KC_ROPT"]),
    K("KC_RGUI", "RGui", alias=["KC_RCMD", "KC_RWIN"]),
]

KEYCODES_BASIC.extend(KEYCODES_BASIC_NUMPAD)
KEYCODES_BASIC.extend(KEYCODES_BASIC_NAV)

KEYCODES_SHIFTED = [
    K("KC_TILD", "~"),
    K("KC_EXLM", "!"),
    K("KC_AT", "@"),
    K("KC_HASH", "#"),
    K("KC_DLR", "$"),
    K("KC_PERC", "%"),
    K("KC_CIRC", "^"),
    K("KC_AMPR", "&"),
    K("KC_ASTR", "*"),
    K("KC_LPRN", "("),
    K("KC_RPRN", ")"),
    K("KC_UNDS", "_"),
    K("KC_PLUS", "+"),
    K("KC_LCBR", "{"),
    K("KC_RCBR", "}"),
    K("KC_LT", "<"),
    K("KC_GT", ">"),
    K("KC_COLN", ":"),
    K("KC_PIPE", "|"),
    K("KC_QUES", "?"),
    K("KC_DQUO", '"'),
]

KEYCODES_ISO = [
    K("KC_NONUS_HASH", "~\n#", "Non-US # and ~", alias=["KC_NUHS"]),
    K("KC_NONUS_BSLASH", "|\n\\", "Non-US \\ and |", alias=["KC_NUBS"]),
    K("KC_RO", "_\n\\", "JIS \\ and _", alias=["KC_INT1"]),
    K("KC_KANA", "カタカナ\nひらがな", "JIS Katakana/Hiragana", alias=["KC_INT2"]),
    K("KC_JYEN", "|\n¥", alias=["KC_INT3"]),
    K("KC_HENK", "変換", "JIS Henkan", alias=["KC_INT4"]),
    K("KC_MHEN", "無変換", "JIS Muhenkan", alias=["KC_INT5"]),
    K("KC_LANG1", "한영\nかな", "Korean Han/Yeong / JP Mac Kana", alias=["KC_HAEN"]),
    K("KC_LANG2", "漢字\n英数", "Korean Hanja / JP Mac Eisu", alias=["KC_HANJ"]),
]

RESET_KEYCODE = "QK_BOOT"

KEYCODES_BOOT = [
    K("QK_BOOT", "Boot-\nloader", "Put the keyboard into bootloader mode for flashing", alias=["RESET"]),
]

KEYCODES_MODIFIERS = []
KEYCODES_LM_MODS = []

for mask in range(1, MOD_MASK + 1):
    mod_string = mod_value_to_string(mask)
    if mod_string is None:
        continue
    alias = [MOD_STRING_ALIASES[mask]] if mask in MOD_STRING_ALIASES else []
    KEYCODES_MODIFIERS.append(K("OSM({})".format(mod_string), "OSM\n" + mod_to_short(mask),
                                "Enable {} for one keypress".format(mod_description(mask)),
                                alias=["OSM({})".format(a) for a in alias]))
    KEYCODES_LM_MODS.append(K(mod_string, mod_to_short(mask), mod_description(mask), alias=alias))

for mask in range(1, MOD_MASK + 1):
    prefix = mod_mask_prefix(mask)
    if prefix is None:
        continue
    label = {"MEH": "Meh", "HYPR": "Hyper"}.get(prefix, mod_to_short(mask))
    KEYCODES_MODIFIERS.append(K("{}(kc)".format(prefix), "{}\n(kc)".format(label), mod_description(mask), masked=True,
                                alias=["{}(kc)".format(a) for a in mod_mask_aliases(mask)]))

for mask in range(1, MOD_MASK + 1):
    prefix = mod_tap_prefix(mask)
    if prefix is None or "{}(kc)".format(prefix) not in rawcodes.kc:
        continue
    label = {"MEH_T": "Meh_T", "ALL_T": "All_T"}.get(prefix, mod_to_short(mask) + "_T")
    KEYCODES_MODIFIERS.append(K("{}(kc)".format(prefix), "{}\n(kc)".format(label),
                                "{} when held, kc when tapped".format(mod_description(mask)), masked=True,
                                alias=["{}(kc)".format(a) for a in mod_tap_aliases(mask)]))

KEYCODES_MODIFIERS += [
    K("KC_GESC", "~\nEsc", "Esc normally, but ~ when Shift or GUI is pressed"),
    K("KC_LSPO", "LS\n(", "Left Shift when held, ( when tapped"),
    K("KC_RSPC", "RS\n)", "Right Shift when held, ) when tapped"),
    K("KC_LCPO", "LC\n(", "Left Control when held, ( when tapped"),
    K("KC_RCPC", "RC\n)", "Right Control when held, ) when tapped"),
    K("KC_LAPO", "LA\n(", "Left Alt when held, ( when tapped"),
    K("KC_RAPC", "RA\n)", "Right Alt when held, ) when tapped"),
    K("KC_SFTENT", "RS\nEnter", "Right Shift when held, Enter when tapped"),
]

KEYCODES_QUANTUM = [
    K("QK_CAPS_WORD_TOGGLE", "Caps\nWord", "Capitalizes until end of current word", alias=["CW_TOGG"],
      requires_feature="caps_word"),
    K("QK_REPEAT_KEY", "Repeat", "Repeats the last pressed key", alias=["QK_REP"], requires_feature="repeat_key"),
    K("QK_ALT_REPEAT_KEY", "Alt\nRepeat", "Alt repeats the last pressed key", alias=["QK_AREP"],
      requires_feature="repeat_key"),

    K("SH_T(kc)", "SH_T\n(kc)", "Tap for keycode, hold for swap hands", masked=True),
    K("SH_TOGG", "Swap\nToggle", "Toggle swap hands on/off"),
    K("SH_TT", "Swap\nTT", "Tap-toggle swap hands"),
    K("SH_MON", "Swap\nMom On", "Momentary swap on"),
    K("SH_MOFF", "Swap\nMom Off", "Momentary swap off"),
    K("SH_ON", "Swap\nOn", "Turn swap hands on"),
    K("SH_OFF", "Swap\nOff", "Turn swap hands off"),
    K("SH_OS", "Swap\nOS", "One-shot swap hands"),
]

KEYCODES_MEDIA = [K("KC_F{}".format(x), "F{}".format(x)) for x in range(13, 25)]

KEYCODES_MEDIA += [
    K("KC_PWR", "Power", "System Power Down", alias=["KC_SYSTEM_POWER"]),
    K("KC_SLEP", "Sleep", "System Sleep", alias=["KC_SYSTEM_SLEEP"]),
    K("KC_WAKE", "Wake", "System Wake", alias=["KC_SYSTEM_WAKE"]),
    K("KC_EXEC", "Exec", "Execute", alias=["KC_EXECUTE"]),
    K("KC_HELP", "Help"),
    K("KC_SLCT", "Select", alias=["KC_SELECT"]),
    K("KC_STOP", "Stop"),
    K("KC_AGIN", "Again", alias=["KC_AGAIN"]),
    K("KC_UNDO", "Undo"),
    K("KC_CUT", "Cut"),
    K("KC_COPY", "Copy"),
    K("KC_PSTE", "Paste", alias=["KC_PASTE"]),
    K("KC_FIND", "Find"),

    K("KC_CALC", "Calc", "Launch Calculator (Windows)", alias=["KC_CALCULATOR"]),
    K("KC_MAIL", "Mail", "Launch Mail (Windows)"),
    K("KC_MSEL", "Media\nPlayer", "Launch Media Player (Windows)", alias=["KC_MEDIA_SELECT"]),
    K("KC_MYCM", "My\nPC", "Launch My Computer (Windows)", alias=["KC_MY_COMPUTER"]),
    K("KC_WSCH", "Browser\nSearch", "Browser Search (Windows)", alias=["KC_WWW_SEARCH"]),
    K("KC_WHOM", "Browser\nHome", "Browser Home (Windows)", alias=["KC_WWW_HOME"]),
    K("KC_WBAK", "Browser\nBack", "Browser Back (Windows)", alias=["KC_WWW_BACK"]),
    K("KC_WFWD", "Browser\nForward", "Browser Forward (Windows)", alias=["KC_WWW_FORWARD"]),
    K("KC_WSTP", "Browser\nStop", "Browser Stop (Windows)", alias=["KC_WWW_STOP"]),
    K("KC_WREF", "Browser\nRefresh", "Browser Refresh (Windows)", alias=["KC_WWW_REFRESH"]),
    K("KC_WFAV", "Browser\nFav.", "Browser Favorites (Windows)", alias=["KC_WWW_FAVORITES"]),
    K("KC_BRIU", "Bright.\nUp", "Increase the brightness of screen (Laptop)", alias=["KC_BRIGHTNESS_UP"]),
    K("KC_BRID", "Bright.\nDown", "Decrease the brightness of screen (Laptop)", alias=["KC_BRIGHTNESS_DOWN"]),

    K("KC_MPRV", "Media\nPrev", "Previous Track", alias=["KC_MEDIA_PREV_TRACK"]),
    K("KC_MNXT", "Media\nNext", "Next Track", alias=["KC_MEDIA_NEXT_TRACK"]),
    K("KC_MUTE", "Mute", "Mute Audio", alias=["KC_AUDIO_MUTE"]),
    K("KC_VOLD", "Vol -", "Volume Down", alias=["KC_AUDIO_VOL_DOWN"]),
    K("KC_VOLU", "Vol +", "Volume Up", alias=["KC_AUDIO_VOL_UP"]),
    K("KC__VOLDOWN", "Vol -\nAlt", "Volume Down Alternate"),
    K("KC__VOLUP", "Vol +\nAlt", "Volume Up Alternate"),
    K("KC_MSTP", "Media\nStop", alias=["KC_MEDIA_STOP"]),
    K("KC_MPLY", "Media\nPlay", "Play/Pause", alias=["KC_MEDIA_PLAY_PAUSE"]),
    K("KC_MRWD", "Prev\nTrack\n(macOS)", "Previous Track / Rewind (macOS)", alias=["KC_MEDIA_REWIND"]),
    K("KC_MFFD", "Next\nTrack\n(macOS)", "Next Track / Fast Forward (macOS)", alias=["KC_MEDIA_FAST_FORWARD"]),
    K("KC_EJCT", "Eject", "Eject (macOS)", alias=["KC_MEDIA_EJECT"]),

    K("KC_MS_U", "Mouse\nUp", "Mouse Cursor Up", alias=["KC_MS_UP"]),
    K("KC_MS_D", "Mouse\nDown", "Mouse Cursor Down", alias=["KC_MS_DOWN"]),
    K("KC_MS_L", "Mouse\nLeft", "Mouse Cursor Left", alias=["KC_MS_LEFT"]),
    K("KC_MS_R", "Mouse\nRight", "Mouse Cursor Right", alias=["KC_MS_RIGHT"]),
    K("KC_BTN1", "Mouse\n1", "Mouse Button 1", alias=["KC_MS_BTN1"]),
    K("KC_BTN2", "Mouse\n2", "Mouse Button 2", alias=["KC_MS_BTN2"]),
    K("KC_BTN3", "Mouse\n3", "Mouse Button 3", alias=["KC_MS_BTN3"]),
    K("KC_BTN4", "Mouse\n4", "Mouse Button 4", alias=["KC_MS_BTN4"]),
    K("KC_BTN5", "Mouse\n5", "Mouse Button 5", alias=["KC_MS_BTN5"]),
    K("KC_WH_U", "Mouse\nWheel\nUp", alias=["KC_MS_WH_UP"]),
    K("KC_WH_D", "Mouse\nWheel\nDown", alias=["KC_MS_WH_DOWN"]),
    K("KC_WH_L", "Mouse\nWheel\nLeft", alias=["KC_MS_WH_LEFT"]),
    K("KC_WH_R", "Mouse\nWheel\nRight", alias=["KC_MS_WH_RIGHT"]),
    K("KC_ACL0", "Mouse\nAccel\n0", "Set mouse acceleration to 0", alias=["KC_MS_ACCEL0"]),
    K("KC_ACL1", "Mouse\nAccel\n1", "Set mouse acceleration to 1", alias=["KC_MS_ACCEL1"]),
    K("KC_ACL2", "Mouse\nAccel\n2", "Set mouse acceleration to 2", alias=["KC_MS_ACCEL2"]),

    K("KC_LCAP", "Locking\nCaps", "Locking Caps Lock", alias=["KC_LOCKING_CAPS"]),
    K("KC_LNUM", "Locking\nNum", "Locking Num Lock", alias=["KC_LOCKING_NUM"]),
    K("KC_LSCR", "Locking\nScroll", "Locking Scroll Lock", alias=["KC_LOCKING_SCROLL"]),
]

K = None

CATEGORY_ORDER = ("special", "basic", "shifted", "iso", "layers", "boot", "modifiers", "lm_mods", "quantum",
                  "media", "tap_dance", "macro")


class Catalog:
    """Immutable table of known keycodes, grouped by category.

    Holds the qmk_id -> raw value table and the reverse maps used to name raw
    values. Layer-mod modifiers (MOD_*) get their own reverse map because
    their values overlap basic keys.
    """

    def __init__(self, categories, values):
        self._categories = MappingProxyType({name: tuple(keycodes) for name, keycodes in categories.items()})
        self.keycodes = tuple(kc for name in self._categories for kc in self._categories[name])

        owners = dict()
        codes = dict()
        rawcodes_map = dict()
        lm_mods_map = dict()
        lm_mods = set(kc.qmk_id for kc in self._categories.get("lm_mods", ()))
        for keycode in self.keycodes:
            for alias in keycode.alias:
                if alias in owners:
                    raise RuntimeError("Misconfigured: two keycodes claim the same alias {}".format(alias))
                owners[alias] = keycode
            if keycode.qmk_id not in values:
                raise RuntimeError("unable to resolve qmk_id={}".format(keycode.qmk_id))
            code = values[keycode.qmk_id]
            codes[keycode.qmk_id] = code
            if keycode.qmk_id in lm_mods:
                lm_mods_map.setdefault(code, keycode)
            else:
                rawcodes_map.setdefault(code, keycode)

        self._codes = MappingProxyType(codes)
        self._rawcodes_map = MappingProxyType(rawcodes_map)
        self._lm_mods_map = MappingProxyType(lm_mods_map)

    def __iter__(self):
        return iter(self.keycodes)

    def __len__(self):
        return len(self.keycodes)

    @property
    def categories(self):
        return self._categories

    def category(self, name):
        return self._categories.get(name, ())

    def visible(self):
        return [kc for kc in self.keycodes if not kc.hidden]

    def code(self, qmk_id) -> Optional[int]:
        return self._codes.get(qmk_id)

    def find_by_code(self, code) -> Optional[Keycode]:
        return self._rawcodes_map.get(code)

    def find_lm_mod(self, mod) -> Optional[Keycode]:
        return self._lm_mods_map.get(mod)


def generate_keycodes_for_mask(label, description, layers):
    return [Keycode("{}({})".format(label, layer), "{}({})".format(label, layer), description)
            for layer in range(layers)]


def build_catalog(layers=rawcodes.MAX_LAYERS, macro_count=16, tap_dance_count=0, supported_features=None):
    """ Generates the catalog for a keyboard's layer, macro and tap dance counts """

    layers = max(0, min(layers, rawcodes.MAX_LAYERS))
    macro_count = max(0, min(macro_count, rawcodes.MAX_MACROS))
    tap_dance_count = max(0, min(tap_dance_count, rawcodes.MAX_TAP_DANCE))

    keycodes_layers = [Keycode("QK_LAYER_LOCK", "Layer\nLock", "Locks the current layer", alias=("QK_LLCK",),
                               requires_feature="layer_lock")]
    keycodes_layers.extend(generate_keycodes_for_mask(
        "MO", "Momentarily turn on layer when pressed (requires KC_TRNS on destination layer)", layers))
    keycodes_layers.extend(generate_keycodes_for_mask("DF", "Set the base (default) layer", layers))
    keycodes_layers.extend(generate_keycodes_for_mask("TG", "Toggle layer on or off", layers))
    keycodes_layers.extend(generate_keycodes_for_mask(
        "TT", "Normally acts like MO unless it's tapped multiple times, which toggles layer on", layers))
    keycodes_layers.extend(generate_keycodes_for_mask(
        "OSL", "Momentarily activates layer until a key is pressed", layers))
    keycodes_layers.extend(generate_keycodes_for_mask(
        "TO", "Turns on layer and turns off all other layers, except the default layer", layers))

    for x in range(layers):
        keycodes_layers.append(Keycode("LT{}(kc)".format(x), "LT {}\n(kc)".format(x),
                                       "kc on tap, switch to layer {} while held".format(x), masked=True))
    for x in range(layers):
        keycodes_layers.append(Keycode("LM{}(kc)".format(x), "LM {}\n(kc)".format(x),
                                       "Turn on layer {} with modifiers while held".format(x), masked=True))

    keycodes_macro = [Keycode("M{}".format(x), "M{}".format(x)) for x in range(macro_count)]

    keycodes_tap_dance = []
    for x in range(rawcodes.MAX_TAP_DANCE):
        lbl = "TD({})".format(x)
        # slots beyond the keyboard's count only exist so that stored values still decode
        keycodes_tap_dance.append(Keycode(lbl, lbl, "Tap dance keycode", hidden=x >= tap_dance_count))

    categories = {
        "special": KEYCODES_SPECIAL,
        "basic": KEYCODES_BASIC,
        "shifted": KEYCODES_SHIFTED,
        "iso": KEYCODES_ISO,
        "layers": keycodes_layers,
        "boot": KEYCODES_BOOT,
        "modifiers": KEYCODES_MODIFIERS,
        "lm_mods": KEYCODES_LM_MODS,
        "quantum": KEYCODES_QUANTUM,
        "media": KEYCODES_MEDIA,
        "tap_dance": keycodes_tap_dance,
        "macro": keycodes_macro,
    }

    # Hide keycodes where .requires_feature isn't supported by the keyboard.
    for name, keycodes in categories.items():
        categories[name] = [kc if kc.is_supported_by(supported_features) else replace(kc, hidden=True)
                            for kc in keycodes]

    catalog = Catalog({name: categories[name] for name in CATEGORY_ORDER}, rawcodes.kc)
    logging.debug("build_catalog: %d keycodes for %d layers", len(catalog), layers)
    return catalog
