"""In-memory stores keyed by normalized name.

Pure storage: uniqueness of keys is enforced here, business rules live in the
entities and the league controller.
"""

# Esports Scheduler
# Copyright (C) 2025  Esports Scheduler developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Callable, Dict, Generic, Optional, Tuple, Type, TypeVar

from esportscheduler.exceptions import DuplicateNameException, NotFoundException
from esportscheduler.utils import setup_logger
from esportscheduler.utils.validation import normalize_key, validate_name_strict

logger = setup_logger(__name__)

T = TypeVar("T")


class NameKeyedStore(Generic[T]):
    """Insertion-ordered store of entities keyed by normalized name.

    Args:
        kind: Entity label used in messages ("team", "game", ...)
        name_of: Returns the display name of a stored entity
        not_found: NotFoundException subclass raised by :meth:`require`
    """

    def __init__(
        self,
        kind: str,
        name_of: Callable[[T], str],
        not_found: Type[NotFoundException] = NotFoundException,
    ) -> None:
        self.kind = kind
        self._name_of = name_of
        self._not_found = not_found
        self._items: Dict[str, T] = {}

    # ── Read ──

    def contains(self, name: str) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        return normalize_key(name) in self._items

    def get(self, name: str) -> Optional[T]:
        if not isinstance(name, str) or not name.strip():
            return None
        return self._items.get(normalize_key(name))

    def require(self, name: str) -> T:
        """Resolve a name or raise the store's NotFound exception.

        Raises:
            InvalidNameException: If the name is blank
            NotFoundException: If nothing is stored under the name
        """
        validate_name_strict(name, f"{self.kind} name")
        item = self._items.get(normalize_key(name))
        if item is None:
            logger.debug(f"No {self.kind} named {name!r}")
            raise self._not_found(f"No {self.kind} named '{name.strip()}'")
        return item

    def values(self) -> Tuple[T, ...]:
        return tuple(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    # ── Write ──

    def add(self, item: T) -> T:
        """Store an entity under its normalized name.

        Raises:
            DuplicateNameException: If the name is already taken
        """
        name = self._name_of(item)
        key = normalize_key(name)
        if key in self._items:
            raise DuplicateNameException(f"A {self.kind} named '{name}' already exists")
        self._items[key] = item
        return item
