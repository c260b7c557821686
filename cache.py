# Antenna-Insyght — Wire Antenna Designer
# Copyright (C) 2026 Insyght B.V.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Keyed result cache shared by the physics calculators."""

from collections import OrderedDict

from loguru import logger


class ResultCache:
    """Map of parameter key -> computed result.

    Entries are never replaced once stored. With max_entries=None the cache
    only shrinks on clear(); otherwise the least recently used entry is
    dropped when the bound is exceeded.
    """

    def __init__(self, name, max_entries=None):
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be >= 1 or None, got {max_entries!r}")
        self.name = name
        self.max_entries = max_entries
        self._entries = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def get(self, key):
        """Return the cached value for key, or None on a miss."""
        if key in self._entries:
            self.hits += 1
            if self.max_entries is not None:
                self._entries.move_to_end(key)
            return self._entries[key]
        self.misses += 1
        return None

    def put(self, key, value):
        if key in self._entries:
            return self._entries[key]
        self._entries[key] = value
        if self.max_entries is not None and len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"{self.name} cache full, evicted {evicted}")
        return value

    def clear(self):
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self):
        return {
            'size': len(self._entries),
            'hits': self.hits,
            'misses': self.misses,
            'max_entries': self.max_entries,
        }
