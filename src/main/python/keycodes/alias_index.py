# SPDX-License-Identifier: GPL-2.0-or-later
from types import MappingProxyType


class AliasIndex:
    """Maps every canonical id and alias of a catalog to its entry.

    Masked entries are keyed by their outer name, so "LT2(kc)" is found as "LT2".
    """

    def __init__(self, catalog):
        keycodes_map = dict()
        folded_map = dict()
        masked_keycodes = set()

        for keycode in catalog:
            for alias in keycode.alias:
                name = alias.replace("(kc)", "")
                keycodes_map[name] = keycode
                folded_map.setdefault(name.upper(), keycode)
                if keycode.masked:
                    masked_keycodes.add(name)

        self._keycodes_map = MappingProxyType(keycodes_map)
        self._folded_map = MappingProxyType(folded_map)
        self.masked_keycodes = frozenset(masked_keycodes)

    def __contains__(self, name):
        return name in self._keycodes_map

    def __len__(self):
        return len(self._keycodes_map)

    def lookup(self, name, ignore_case=False):
        if not isinstance(name, str):
            return None
        if ignore_case:
            return self._folded_map.get(name.upper())
        return self._keycodes_map.get(name)

    def find(self, qmk_id):
        # this is to handle cases of qmk_id LCTL(kc) propagated here from find_inner_keycode
        if qmk_id == "kc":
            qmk_id = "KC_NO"
        return self.lookup(qmk_id)

    def find_outer_keycode(self, qmk_id):
        """
        Finds outer keycode, i.e. if it is masked like LT2(KC_A), just return the LT2 portion
        """
        if self.is_mask(qmk_id):
            qmk_id = qmk_id[:qmk_id.find("(")]
        return self.find(qmk_id)

    def find_inner_keycode(self, qmk_id):
        """
        Finds inner keycode, i.e. if it is masked like LT2(KC_A), just return the KC_A portion
        """
        if self.is_mask(qmk_id):
            qmk_id = qmk_id[qmk_id.find("(")+1:-1]
        return self.find(qmk_id)

    def is_mask(self, qmk_id):
        return isinstance(qmk_id, str) and "(" in qmk_id and qmk_id.endswith(")") \
            and qmk_id[:qmk_id.find("(")] in self.masked_keycodes
