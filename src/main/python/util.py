# SPDX-License-Identifier: GPL-2.0-or-later
import logging
import os
import pathlib
from collections import namedtuple
from logging.handlers import RotatingFileHandler

from qtpy.QtCore import QStandardPaths

from keycodes.resolver import default_resolver

KeycodeText = namedtuple("KeycodeText", ["text", "mask_text", "tooltip", "masked", "overridden", "mask_overridden"])


def init_logger():
    logging.basicConfig(level=logging.INFO)
    directory = QStandardPaths.writableLocation(QStandardPaths.AppLocalDataLocation)
    pathlib.Path(directory).mkdir(parents=True, exist_ok=True)
    path = os.path.join(directory, "keycodes.log")
    handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"))
    logging.getLogger().addHandler(handler)


class KeycodeDisplay:
    """Rendering of a key's assignment for keymap views and printed exports.

    ``keymap_override`` maps qmk_id to a replacement label, e.g. for a
    country-specific layout where KC_Z prints as Y.
    """

    keymap_override = dict()
    resolver = None

    @classmethod
    def _resolver(cls):
        return cls.resolver or default_resolver()

    @classmethod
    def get_label(cls, code):
        """ Get label for a specific keycode """
        if cls.code_is_overriden(code):
            return cls.keymap_override[cls._resolver().find_outer_keycode(code).qmk_id]
        return cls._resolver().label(code)

    @classmethod
    def code_is_overriden(cls, code):
        """ Check whether a country-specific keymap overrides a code """
        key = cls._resolver().find_outer_keycode(code)
        return key is not None and key.qmk_id in cls.keymap_override

    @classmethod
    def describe(cls, code):
        """ Text for a key: single label, or outer label plus the inner key's label when masked """
        resolver = cls._resolver()
        if isinstance(code, int):
            code = resolver.serialize(code)

        text = cls.get_label(code)
        tooltip = resolver.tooltip(code)
        mask = resolver.is_mask(code)
        mask_text = ""
        inner = resolver.find_inner_keycode(code)
        if inner and mask:
            mask_text = cls.get_label(inner.qmk_id)
        if mask:
            text = text.split("\n")[0]
        return KeycodeText(text, mask_text, tooltip, mask, cls.code_is_overriden(code),
                           bool(inner and mask and cls.code_is_overriden(inner.qmk_id)))

    @classmethod
    def set_keymap_override(cls, override):
        cls.keymap_override = dict(override)
