"""League-wide configuration settings."""

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
from typing import Any, Dict

from esportscheduler.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RANKING_MAX,
    DEFAULT_RANKING_MIN,
    LOG_LEVELS,
)
from esportscheduler.exceptions import InvalidConfigurationException
from esportscheduler.utils.validation import check_ranking_bounds


@dataclass
class LeagueConfig:
    """Configuration settings for a league.

    Attributes
    ----------
    ranking_min : int
        Lowest ranking a player may hold (inclusive).
    ranking_max : int
        Highest ranking a player may hold (inclusive).
    date_format : str
        ``strftime`` pattern used when dates are rendered in summaries.
    log_level : str
        Level name applied when the controller configures logging.
    """

    ranking_min: int = DEFAULT_RANKING_MIN
    ranking_max: int = DEFAULT_RANKING_MAX
    date_format: str = DEFAULT_DATE_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        check_ranking_bounds(self.ranking_min, self.ranking_max)
        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise InvalidConfigurationException(f"Unknown log level: {self.log_level}")
        self.log_level = level

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "ranking_min": self.ranking_min,
            "ranking_max": self.ranking_max,
            "date_format": self.date_format,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeagueConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            ranking_min=data.get("ranking_min", DEFAULT_RANKING_MIN),
            ranking_max=data.get("ranking_max", DEFAULT_RANKING_MAX),
            date_format=data.get("date_format", DEFAULT_DATE_FORMAT),
            log_level=data.get("log_level", DEFAULT_LOG_LEVEL),
        )
