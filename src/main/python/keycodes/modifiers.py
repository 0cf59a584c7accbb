# SPDX-License-Identifier: GPL-2.0-or-later
"""Names for 5-bit modifier masks (4 modifier bits plus the right-hand flag)."""
from keycodes.fields import MOD_BIT_LALT, MOD_BIT_LCTL, MOD_BIT_LGUI, MOD_BIT_LSFT, MOD_BIT_RIGHT, MOD_MASK

# (bit, firmware suffix, short label, combo letter, long name)
MODS = (
    (MOD_BIT_LCTL, "CTL", "Ctl", "C", "Control"),
    (MOD_BIT_LSFT, "SFT", "Sft", "S", "Shift"),
    (MOD_BIT_LALT, "ALT", "Alt", "A", "Alt"),
    (MOD_BIT_LGUI, "GUI", "Gui", "G", "GUI"),
)

# well-known spellings that replace the generated name, generated one stays as an alias
MASK_PREFIX_OVERRIDES = {
    0x03: "C_S",
    0x07: "MEH",
    0x0A: "SGUI",
    0x0F: "HYPR",
}

MOD_TAP_PREFIX_OVERRIDES = {
    0x03: "C_S_T",
    0x07: "MEH_T",
    0x0A: "SGUI_T",
    0x0F: "ALL_T",
}

MOD_TAP_EXTRA_ALIASES = {
    0x0B: ["LSCG_T"],
    0x0F: ["HYPR_T"],
    0x13: ["RSC_T"],
    0x17: ["RSCA_T"],
    0x1B: ["RSCG_T"],
    0x1F: ["RSCAG_T"],
}

MOD_STRING_ALIASES = {
    0x07: "MOD_MEH",
    0x0F: "MOD_HYPR",
}


def active_mods(mask):
    return [mod for mod in MODS if mask & mod[0]]


def side_letter(mask):
    return "R" if mask & MOD_BIT_RIGHT else "L"


def generic_prefix(mask):
    """ LCTL, RSFT, LCS, RCSAG... or None when no modifier bit is set """
    mods = active_mods(mask & MOD_MASK)
    if not mods:
        return None
    if len(mods) == 1:
        return side_letter(mask) + mods[0][1]
    return side_letter(mask) + "".join(mod[3] for mod in mods)


def mod_mask_prefix(mask):
    mask &= MOD_MASK
    return MASK_PREFIX_OVERRIDES.get(mask) or generic_prefix(mask)


def mod_mask_aliases(mask):
    mask &= MOD_MASK
    if mask in MASK_PREFIX_OVERRIDES:
        return [generic_prefix(mask)]
    return []


def mod_tap_prefix(mask):
    mask &= MOD_MASK
    if mask in MOD_TAP_PREFIX_OVERRIDES:
        return MOD_TAP_PREFIX_OVERRIDES[mask]
    prefix = generic_prefix(mask)
    if prefix is None:
        return None
    return prefix + "_T"


def mod_tap_aliases(mask):
    mask &= MOD_MASK
    aliases = []
    if mask in MOD_TAP_PREFIX_OVERRIDES:
        aliases.append(generic_prefix(mask) + "_T")
    aliases.extend(MOD_TAP_EXTRA_ALIASES.get(mask, []))
    return aliases


def mod_value_to_string(mask):
    """ Convert numeric mod value to MOD_xxx string, e.g. 0x03 -> MOD_LCTL|MOD_LSFT """
    prefix = "MOD_" + side_letter(mask)
    parts = [prefix + mod[1] for mod in active_mods(mask & MOD_MASK)]
    if not parts:
        return None
    return "|".join(parts)


def mod_to_short(mask):
    """ Short label like 'LSft' for one modifier or 'LCS' for several """
    mods = active_mods(mask & MOD_MASK)
    if len(mods) == 1:
        return side_letter(mask) + mods[0][2]
    return side_letter(mask) + "".join(mod[3] for mod in mods)


def mod_description(mask):
    side = "Right" if mask & MOD_BIT_RIGHT else "Left"
    mods = active_mods(mask & MOD_MASK)
    if len(mods) == 1:
        return "{} {}".format(side, mods[0][4])
    return " + ".join(side_letter(mask) + mod[1] for mod in mods)
