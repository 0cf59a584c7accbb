# SPDX-License-Identifier: GPL-2.0-or-later
STRIPPED_PREFIXES = ("KC_", "MOD_", "QK_")

EXACT_MATCH = 0
SUBSTRING_MATCH = 1


def strip_prefix(alias):
    """ KC_ENTER -> ENTER, LT2(kc) -> LT2; comparison is case-insensitive so the result is upper-cased """
    alias = alias.replace("(kc)", "").upper()
    for prefix in STRIPPED_PREFIXES:
        if alias.startswith(prefix):
            return alias[len(prefix):]
    return alias


def match_rank(query, keycode):
    rank = None
    for alias in keycode.alias:
        stripped = strip_prefix(alias)
        if stripped == query:
            return EXACT_MATCH
        if query in stripped:
            rank = SUBSTRING_MATCH
    return rank


def search_keycodes(query, keycodes, include_hidden=False):
    """
    Returns keycodes whose stripped aliases match the query, exact matches first,
    then substring matches, each group in catalog order
    """
    query = strip_prefix(query.strip())
    if not query:
        return []

    ranked = []
    for pos, keycode in enumerate(keycodes):
        if keycode.hidden and not include_hidden:
            continue
        rank = match_rank(query, keycode)
        if rank is not None:
            ranked.append((rank, pos, keycode))
    ranked.sort(key=lambda r: (r[0], r[1]))
    return [keycode for _, _, keycode in ranked]
