# SPDX-License-Identifier: GPL-2.0-or-later
import logging
from dataclasses import dataclass
from typing import ClassVar

from qtpy.QtCore import Signal, QObject

from keycodes.fields import build_lm_keycode, build_lt_keycode, build_mod_mask_keycode, build_mod_tap_keycode, \
    build_sht_keycode, extract_basic_key, extract_lm_layer, extract_lm_mod, extract_lt_layer, extract_mod_mask, \
    replace_inner_byte, LAYER_MASK, MOD_MASK
from keycodes.ranges import classify, is_lm_keycode, WrapperKind, KEYCODE_MAX
from keycodes.resolver import default_resolver


@dataclass(frozen=True)
class NoWrapper:
    kind: ClassVar[WrapperKind] = WrapperKind.BASIC


@dataclass(frozen=True)
class ModMaskMode:
    mask: int
    kind: ClassVar[WrapperKind] = WrapperKind.MOD_MASK


@dataclass(frozen=True)
class ModTapMode:
    mask: int
    kind: ClassVar[WrapperKind] = WrapperKind.MOD_TAP


@dataclass(frozen=True)
class LayerTapMode:
    layer: int
    kind: ClassVar[WrapperKind] = WrapperKind.LAYER_TAP


@dataclass(frozen=True)
class HoldTapMode:
    kind: ClassVar[WrapperKind] = WrapperKind.HOLD_TAP


@dataclass(frozen=True)
class LayerModMode:
    layer: int
    mod: int
    kind: ClassVar[WrapperKind] = WrapperKind.LAYER_MOD


MASK_MODES = (WrapperKind.MOD_MASK, WrapperKind.MOD_TAP)


def mode_from_keycode(code):
    kind = classify(code)
    if kind is WrapperKind.LAYER_MOD:
        return LayerModMode(extract_lm_layer(code), extract_lm_mod(code))
    if kind is WrapperKind.LAYER_TAP:
        return LayerTapMode(extract_lt_layer(code))
    if kind is WrapperKind.HOLD_TAP:
        return HoldTapMode()
    if kind is WrapperKind.MOD_TAP:
        return ModTapMode(extract_mod_mask(code))
    if kind is WrapperKind.MOD_MASK:
        return ModMaskMode(extract_mod_mask(code))
    return NoWrapper()


class KeyEditSession(QObject):
    """Editing state behind the key popover.

    The wrapper mode is held separately from the keycode: a mod-mask mode with
    no modifier selected yet still edits as mod-mask even though the keycode is
    a plain basic key. Every change is announced through ``keycode_changed``.
    """

    keycode_changed = Signal(int)
    mode_changed = Signal(object)

    def __init__(self, keycode, layers=16, mask_only=False, resolver=None):
        super().__init__()

        self.keycode = keycode & KEYCODE_MAX
        self.layers = max(1, min(layers, LAYER_MASK + 1))
        self.mask_only = mask_only
        self.resolver = resolver or default_resolver()

        self.mode = NoWrapper() if mask_only else mode_from_keycode(self.keycode)
        self.selected_layer = 0
        if isinstance(self.mode, (LayerTapMode, LayerModMode)):
            self.selected_layer = self.mode.layer

    @property
    def search_keycode(self):
        """ Keycode to preselect in the key picker; a layer-mod value has no basic key to show """
        return 0 if is_lm_keycode(self.keycode) else self.keycode

    @property
    def mod_mask(self):
        if isinstance(self.mode, LayerModMode):
            return self.mode.mod
        if isinstance(self.mode, (ModMaskMode, ModTapMode)):
            return self.mode.mask
        return 0

    def show_mode_buttons(self):
        return not self.mask_only

    def show_modifier_strip(self):
        return self.mode.kind in MASK_MODES + (WrapperKind.LAYER_MOD,)

    def show_layer_selector(self):
        return self.mode.kind in (WrapperKind.LAYER_TAP, WrapperKind.LAYER_MOD)

    def _set_keycode(self, code):
        self.keycode = code & KEYCODE_MAX
        self.keycode_changed.emit(self.keycode)

    def _set_mode(self, mode):
        if mode != self.mode:
            logging.debug("KeyEditSession: %s -> %s", self.mode, mode)
            self.mode = mode
            self.mode_changed.emit(mode)

    def switch_mode(self, kind):
        """ Switching modes converts the keycode format, preserving the basic key """
        if self.mask_only or kind is WrapperKind.UNKNOWN:
            return

        current = self.mode.kind
        # Toggle off if clicking the active mode
        target = WrapperKind.BASIC if kind is current else kind
        # layer-mod stores modifiers where the basic key normally lives
        basic_key = 0 if current is WrapperKind.LAYER_MOD else extract_basic_key(self.keycode)
        # only preserve mod mask when switching from another mod-based mode
        mask = self.mode.mask if current in MASK_MODES else 0

        if target is WrapperKind.BASIC:
            if basic_key != self.keycode:
                self._set_keycode(basic_key)
            self._set_mode(NoWrapper())
        elif target is WrapperKind.LAYER_TAP:
            self._set_keycode(build_lt_keycode(self.selected_layer, basic_key))
            self._set_mode(LayerTapMode(self.selected_layer))
        elif target is WrapperKind.HOLD_TAP:
            self._set_keycode(build_sht_keycode(basic_key))
            self._set_mode(HoldTapMode())
        elif target is WrapperKind.LAYER_MOD:
            self._set_keycode(build_lm_keycode(self.selected_layer, 0))
            self._set_mode(LayerModMode(self.selected_layer, 0))
        elif target is WrapperKind.MOD_TAP:
            self._set_keycode(build_mod_tap_keycode(mask, basic_key))
            self._set_mode(ModTapMode(mask))
        elif target is WrapperKind.MOD_MASK:
            self._set_keycode(build_mod_mask_keycode(mask, basic_key))
            self._set_mode(ModMaskMode(mask))

    def set_mod_mask(self, mask):
        """ Modifier strip changed, rebuild immediately """
        mask &= MOD_MASK
        basic_key = extract_basic_key(self.keycode)
        if isinstance(self.mode, LayerModMode):
            self._set_keycode(build_lm_keycode(self.selected_layer, mask))
            self._set_mode(LayerModMode(self.selected_layer, mask))
        elif isinstance(self.mode, ModTapMode):
            self._set_keycode(build_mod_tap_keycode(mask, basic_key))
            self._set_mode(ModTapMode(mask))
        elif isinstance(self.mode, ModMaskMode):
            self._set_keycode(build_mod_mask_keycode(mask, basic_key))
            self._set_mode(ModMaskMode(mask))

    def set_layer(self, layer):
        if not 0 <= layer < self.layers:
            return
        self.selected_layer = layer
        if isinstance(self.mode, LayerTapMode):
            self._set_keycode(build_lt_keycode(layer, extract_basic_key(self.keycode)))
            self._set_mode(LayerTapMode(layer))
        elif isinstance(self.mode, LayerModMode):
            self._set_keycode(build_lm_keycode(layer, self.mode.mod))
            self._set_mode(LayerModMode(layer, self.mode.mod))

    def select_keycode(self, qmk_id):
        """ A key was picked; wrap it according to the active mode """
        code = self.resolver.resolve(qmk_id)
        if self.mask_only:
            self.apply_inner_byte(code)
        elif isinstance(self.mode, LayerTapMode):
            self._set_keycode(build_lt_keycode(self.selected_layer, code))
        elif isinstance(self.mode, HoldTapMode):
            self._set_keycode(build_sht_keycode(code))
        elif isinstance(self.mode, LayerModMode):
            self._set_keycode(build_lm_keycode(self.selected_layer, code))
            self._set_mode(LayerModMode(self.selected_layer, extract_lm_mod(code)))
        elif isinstance(self.mode, ModTapMode):
            self._set_keycode(build_mod_tap_keycode(self.mode.mask, code))
        elif isinstance(self.mode, ModMaskMode):
            self._set_keycode(build_mod_mask_keycode(self.mode.mask, code))
        else:
            self._set_keycode(code)

    def apply_raw(self, code):
        """ Raw keycode entered directly; the mode is re-derived from its range """
        self._set_keycode(code)
        if self.mask_only:
            return
        mode = mode_from_keycode(self.keycode)
        if isinstance(mode, (LayerTapMode, LayerModMode)):
            self.selected_layer = mode.layer
        self._set_mode(mode)

    def apply_inner_byte(self, inner):
        """ Replaces only the inner byte, e.g. MO(4) picked with KC_SPACE gives 0x512C """
        self._set_keycode(replace_inner_byte(self.keycode, inner))

    def serialize(self):
        return self.resolver.serialize(self.keycode)
