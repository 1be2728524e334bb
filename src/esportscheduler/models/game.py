"""A game that tournaments are played on (League of Legends, Chess, ...)."""

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

from dataclasses import dataclass

from esportscheduler.exceptions import InvalidArgumentException
from esportscheduler.models.category import Category
from esportscheduler.utils.validation import normalize_key, validate_name_strict


@dataclass(frozen=True)
class Game:
    """A registered game. Name and category never change after creation.

    Attributes:
        name: Game name, unique across the league (case-insensitive)
        category: Category the game belongs to
    """

    name: str
    category: Category

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", validate_name_strict(self.name, "game name"))
        if not isinstance(self.category, Category):
            raise InvalidArgumentException(f"Game '{self.name}' needs a category")

    @property
    def key(self) -> str:
        """Normalized name used for lookups."""
        return normalize_key(self.name)

    def __str__(self) -> str:
        return f"{self.name} [{self.category}]"
