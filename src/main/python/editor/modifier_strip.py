# SPDX-License-Identifier: GPL-2.0-or-later
from collections import namedtuple

from keycodes.fields import MOD_BIT_RIGHT, MOD_BITS_MASK, MOD_MASK
from keycodes.modifiers import MODS

ModifierButton = namedtuple("ModifierButton", ["label", "bit", "right", "active", "enabled"])


def toggle_modifier(mask, bit, right):
    """
    Flips one modifier bit. The right-hand flag follows the row that was clicked
    and is only kept while at least one modifier remains set.
    """
    toggled = mask ^ (1 << bit)
    if right and toggled & MOD_BITS_MASK:
        toggled |= MOD_BIT_RIGHT
    else:
        toggled &= ~MOD_BIT_RIGHT
    return toggled & MOD_MASK


def modifier_buttons(mask):
    """ Left row then right row; the row of the other side is disabled while any modifier is set """
    is_right = bool(mask & MOD_BIT_RIGHT)
    has_any_mod = bool(mask & MOD_BITS_MASK)

    buttons = []
    for right in (False, True):
        prefix = "R" if right else "L"
        enabled = not (has_any_mod and right != is_right)
        for bit, (value, _, short, _, _) in enumerate(MODS):
            active = right == is_right and bool(mask & value)
            buttons.append(ModifierButton(prefix + short, bit, right, active, enabled))
    return buttons
