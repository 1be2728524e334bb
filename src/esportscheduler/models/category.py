"""Game categories such as MOBA, FPS or Strategy."""

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
from typing import Optional

from esportscheduler.exceptions import InvalidArgumentException
from esportscheduler.utils.validation import validate_name, validate_name_strict


@dataclass(frozen=True)
class Category:
    """Category or genre of a game.

    Attributes:
        name: Category name, required
        description: Optional free-text description
    """

    name: str
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", validate_name_strict(self.name, "category name"))
        # Blank descriptions are stored as None
        description = validate_name(self.description, "description", required=False)
        if not description.is_valid:
            raise InvalidArgumentException(description.error_message)
        object.__setattr__(self, "description", description.sanitized_value)

    def __str__(self) -> str:
        if self.description:
            return f"{self.name} ({self.description})"
        return self.name
