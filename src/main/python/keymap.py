# SPDX-License-Identifier: GPL-2.0-or-later
import json
import logging
import struct

from keycodes.resolver import default_resolver


class Keymap:
    """Keymap of a keyboard: one serialized keycode per (layer, row, col) and per encoder direction.

    The binary form is the VIA dynamic keymap buffer, big-endian 16-bit
    keycodes laid out layer by layer, row by row.
    """

    def __init__(self, layers, rows, cols, encoder_count=0, resolver=None):
        self.layers = layers
        self.rows = rows
        self.cols = cols
        self.encoder_count = encoder_count
        self.resolver = resolver or default_resolver()

        self.layout = dict()
        self.encoder_layout = dict()

    def buffer_size(self):
        return self.layers * self.rows * self.cols * 2

    def _offset(self, layer, row, col):
        # determine where this (layer, row, col) will be located in keymap array
        return layer * self.rows * self.cols * 2 + row * self.cols * 2 + col * 2

    def _check_key(self, layer, row, col):
        if not (0 <= layer < self.layers and 0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError("key {},{},{} is outside of {} layers of {}x{}"
                             .format(layer, row, col, self.layers, self.rows, self.cols))

    def _check_encoder(self, layer, index, direction):
        if not (0 <= layer < self.layers and 0 <= index < self.encoder_count and direction in (0, 1)):
            raise IndexError("encoder {},{},{} is outside of {} layers with {} encoders"
                             .format(layer, index, direction, self.layers, self.encoder_count))

    def load_buffer(self, keymap):
        """ Load key mapping from the keyboard's keymap buffer """
        if len(keymap) != self.buffer_size():
            raise RuntimeError("keymap buffer is {} bytes, expected {} for {} layers of {}x{}"
                               .format(len(keymap), self.buffer_size(), self.layers, self.rows, self.cols))

        for layer in range(self.layers):
            for row in range(self.rows):
                for col in range(self.cols):
                    offset = self._offset(layer, row, col)
                    keycode = self.resolver.serialize(struct.unpack(">H", keymap[offset:offset+2])[0])
                    self.layout[(layer, row, col)] = keycode

    def to_buffer(self):
        keymap = bytearray(self.buffer_size())
        for (layer, row, col), keycode in self.layout.items():
            struct.pack_into(">H", keymap, self._offset(layer, row, col), self.resolver.deserialize(keycode))
        return bytes(keymap)

    def set_key(self, layer, row, col, code):
        self._check_key(layer, row, col)
        key = (layer, row, col)
        code = self.resolver.normalize(code)
        if self.layout.get(key) != code:
            logging.debug("set_key %s: %s -> %s", key, self.layout.get(key), code)
            self.layout[key] = code

    def set_encoder(self, layer, index, direction, code):
        self._check_encoder(layer, index, direction)
        key = (layer, index, direction)
        code = self.resolver.normalize(code)
        if self.encoder_layout.get(key) != code:
            logging.debug("set_encoder %s: %s -> %s", key, self.encoder_layout.get(key), code)
            self.encoder_layout[key] = code

    def key_code(self, layer, row, col):
        self._check_key(layer, row, col)
        return self.resolver.deserialize(self.layout.get((layer, row, col), "KC_NO"))

    def encoder_code(self, layer, index, direction):
        self._check_encoder(layer, index, direction)
        return self.resolver.deserialize(self.encoder_layout.get((layer, index, direction), "KC_NO"))

    def save_layout(self):
        """ Serializes current layout to a binary """

        data = {"version": 1}

        layout = []
        for l in range(self.layers):
            layer = []
            layout.append(layer)
            for r in range(self.rows):
                row = []
                layer.append(row)
                for c in range(self.cols):
                    val = self.layout.get((l, r, c), -1)
                    row.append(val)

        encoder_layout = []
        for l in range(self.layers):
            layer = []
            for e in range(self.encoder_count):
                cw = (l, e, 0)
                ccw = (l, e, 1)
                layer.append([self.encoder_layout.get(cw, -1),
                              self.encoder_layout.get(ccw, -1)])
            encoder_layout.append(layer)

        data["layout"] = layout
        data["encoder_layout"] = encoder_layout

        return json.dumps(data).encode("utf-8")

    def _translate_code(self, code):
        """ Saved keycodes are either names or integers; -1 marks a position that was never loaded """
        if isinstance(code, int):
            return None if code < 0 else self.resolver.serialize(code)
        resolved = self.resolver.try_resolve(code)
        if resolved is None:
            logging.warning("restore_layout: unknown keycode %r, using KC_NO", code)
            resolved = 0
        return self.resolver.serialize(resolved)

    def restore_layout(self, data):
        """ Restores saved layout """

        data = json.loads(data.decode("utf-8"))

        # restore keymap
        for l, layer in enumerate(data.get("layout", [])):
            for r, row in enumerate(layer):
                for c, code in enumerate(row):
                    if l >= self.layers or r >= self.rows or c >= self.cols:
                        continue
                    code = self._translate_code(code)
                    if code is not None:
                        self.set_key(l, r, c, code)

        # restore encoders
        for l, layer in enumerate(data.get("encoder_layout", [])):
            for e, encoder in enumerate(layer):
                if l >= self.layers or e >= self.encoder_count:
                    continue
                for direction, code in enumerate(encoder[:2]):
                    code = self._translate_code(code)
                    if code is not None:
                        self.set_encoder(l, e, direction, code)
