# SPDX-License-Identifier: GPL-2.0-or-later
"""Conversion between raw 16-bit keycodes and their textual names.

``serialize`` is total over 0..0xFFFF and ``resolve`` accepts everything
``serialize`` produces, so ``resolve(serialize(x)) == x`` for every keycode.
"""
import functools
import logging
import re

from keycodes.alias_index import AliasIndex
from keycodes.fields import build_lm_keycode, build_lt_keycode, build_mod_mask_keycode, build_mod_tap_keycode, \
    build_sht_keycode, extract_basic_key, extract_lm_layer, extract_lm_mod, extract_lt_layer, extract_mod_mask, \
    BASIC_KEY_MASK, MOD_MASK
from keycodes.keycodes import build_catalog
from keycodes.ranges import classify, WrapperKind, KEYCODE_MAX

HEX_LITERAL = re.compile(r"^0[xX][0-9a-fA-F]+$")
COMPOSITE = re.compile(r"^([A-Za-z0-9_]+)\((.*)\)$")
TWO_ARGUMENT = re.compile(r"^(LT|LM|MT)\(([^,]+),(.+)\)$")
UNSIGNED_NUMBER = re.compile(r"^(0[xX][0-9a-fA-F]+|[0-9]+)$")
# composite names nested deeper than this do not resolve
MAX_NESTING = 8


def hex_keycode(code):
    return "0x{:04x}".format(code)


class KeycodeResolver:

    def __init__(self, catalog):
        self.catalog = catalog
        self.index = AliasIndex(catalog)

    def find(self, qmk_id):
        return self.index.find(qmk_id)

    def find_outer_keycode(self, qmk_id):
        return self.index.find_outer_keycode(qmk_id)

    def find_inner_keycode(self, qmk_id):
        return self.index.find_inner_keycode(qmk_id)

    def is_mask(self, qmk_id):
        return self.index.is_mask(qmk_id)

    def is_basic(self, qmk_id):
        return classify(self.deserialize(qmk_id)) is WrapperKind.BASIC

    def label(self, qmk_id):
        keycode = self.find_outer_keycode(qmk_id)
        if keycode is None:
            return qmk_id
        if self.is_mask(qmk_id) and classify(self.catalog.code(keycode.qmk_id)) is WrapperKind.LAYER_MOD:
            # LM2(MOD_LSFT) -> "LM 2\nLSft"
            mod = self.find_inner_keycode(qmk_id)
            if mod is not None:
                return "{}\n{}".format(keycode.label.split("\n")[0], mod.label)
        return keycode.label

    def tooltip(self, qmk_id):
        keycode = self.find_outer_keycode(qmk_id)
        if keycode is None:
            return None
        tooltip = keycode.qmk_id
        if keycode.tooltip:
            tooltip = "{}: {}".format(tooltip, keycode.tooltip)
        return tooltip

    def _leaf_id(self, code):
        keycode = self.catalog.find_by_code(code)
        if keycode is None or keycode.masked:
            return None
        return keycode.qmk_id

    def serialize(self, code):
        """ Converts integer keycode to string """
        code &= KEYCODE_MAX
        kind = classify(code)

        if kind in (WrapperKind.BASIC, WrapperKind.UNKNOWN):
            return self._leaf_id(code) or hex_keycode(code)

        if kind is WrapperKind.LAYER_MOD:
            outer = self.index.lookup("LM{}".format(extract_lm_layer(code)))
            if outer is None or not outer.masked:
                return hex_keycode(code)
            mod = extract_lm_mod(code)
            mod_keycode = self.catalog.find_lm_mod(mod)
            mod_id = mod_keycode.qmk_id if mod_keycode is not None else hex(mod)
            return outer.qmk_id.replace("(kc)", "({})".format(mod_id))

        outer = self.catalog.find_by_code(code & 0xFF00)
        inner = self._leaf_id(extract_basic_key(code))
        if outer is None or not outer.masked or inner is None:
            return hex_keycode(code)
        return outer.qmk_id.replace("(kc)", "({})".format(inner))

    def deserialize(self, val):
        """ Converts string keycode to integer """
        if isinstance(val, int):
            return val & KEYCODE_MAX
        return self.resolve(val)

    def normalize(self, code):
        """ Changes e.g. KC_PERC to LSFT(KC_5) """
        return self.serialize(self.deserialize(code))

    def resolve(self, qmk_constant):
        """ Translates a name into its integer keycode, unknown names become KC_NO """
        code = self.try_resolve(qmk_constant)
        if code is None:
            logging.debug("resolve: unable to resolve qmk_id=%r", qmk_constant)
            return 0
        return code

    def try_resolve(self, qmk_constant):
        """ Like resolve, but None for names that are not understood """
        if not isinstance(qmk_constant, str):
            return None
        return self._resolve(qmk_constant.strip())

    def _resolve(self, name, depth=0):
        if depth > MAX_NESTING:
            return None

        keycode = self.find(name)
        if keycode is not None:
            return self.catalog.code(keycode.qmk_id)

        if HEX_LITERAL.match(name):
            value = int(name, 16)
            return value if value <= KEYCODE_MAX else None

        m = COMPOSITE.match(name)
        if m is not None and m.group(1) in self.index.masked_keycodes:
            return self._resolve_composite(m.group(1), m.group(2).strip(), depth + 1)

        m = TWO_ARGUMENT.match(name)
        if m is not None:
            return self._resolve_two_argument(m.group(1), m.group(2).strip(), m.group(3).strip(), depth + 1)

        return None

    def _resolve_composite(self, outer_id, inner_id, depth):
        outer = self.catalog.code(self.index.lookup(outer_id).qmk_id)
        kind = classify(outer)

        if kind is WrapperKind.LAYER_MOD:
            mod = self._resolve_mod(inner_id)
            if mod is None:
                return None
            return build_lm_keycode(extract_lm_layer(outer), mod)

        inner = self._resolve(inner_id, depth)
        if inner is None:
            return None

        if kind is WrapperKind.MOD_MASK:
            # nested modifiers combine, LCTL(LSFT(KC_A)) == LCS(KC_A)
            mask = extract_mod_mask(outer)
            if classify(inner) is WrapperKind.MOD_MASK:
                mask |= extract_mod_mask(inner)
            return build_mod_mask_keycode(mask, inner)
        if kind is WrapperKind.MOD_TAP:
            return build_mod_tap_keycode(extract_mod_mask(outer), inner)
        if kind is WrapperKind.LAYER_TAP:
            return build_lt_keycode(extract_lt_layer(outer), inner)
        if kind is WrapperKind.HOLD_TAP:
            return build_sht_keycode(inner)
        return (outer & ~BASIC_KEY_MASK) | extract_basic_key(inner)

    def _resolve_two_argument(self, form, first, second, depth):
        if form == "MT":
            mod = self._resolve_mod(first)
            inner = self._resolve(second, depth)
            if mod is None or inner is None:
                return None
            return build_mod_tap_keycode(mod, inner)

        if not UNSIGNED_NUMBER.match(first):
            return None
        try:
            layer = int(first, 0)
        except ValueError:
            return None
        if not 0 <= layer <= 0x0F:
            return None

        if form == "LM":
            mod = self._resolve_mod(second)
            return None if mod is None else build_lm_keycode(layer, mod)
        inner = self._resolve(second, depth)
        return None if inner is None else build_lt_keycode(layer, inner)

    def _resolve_mod(self, expression):
        """ MOD_LCTL|MOD_LSFT in any order, a hex literal or a plain integer """
        mod = 0
        for part in expression.split("|"):
            part = part.strip()
            if part == "kc":
                # bare placeholder, e.g. LM2(kc)
                continue
            keycode = self.index.lookup(part)
            if keycode is not None and keycode in self.catalog.category("lm_mods"):
                mod |= self.catalog.code(keycode.qmk_id)
                continue
            if not UNSIGNED_NUMBER.match(part):
                return None
            try:
                mod |= int(part, 0)
            except ValueError:
                return None
        if mod > MOD_MASK:
            return None
        return mod


@functools.lru_cache(maxsize=None)
def default_resolver():
    return KeycodeResolver(build_catalog())


def serialize(code):
    return default_resolver().serialize(code)


def deserialize(val):
    return default_resolver().deserialize(val)


def resolve(qmk_constant):
    return default_resolver().resolve(qmk_constant)


def normalize(code):
    return default_resolver().normalize(code)


def label(qmk_id):
    return default_resolver().label(qmk_id)


def tooltip(qmk_id):
    return default_resolver().tooltip(qmk_id)
