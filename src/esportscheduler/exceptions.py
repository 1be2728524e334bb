"""Exceptions for use in Esports Scheduler"""

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


# ========== Base Application Exception ==========


class EsportsSchedulerException(Exception):
    """Base exception for all Esports Scheduler errors.

    Every error raised by the core derives from this class, so a caller
    such as a console menu can report any rejected operation with a single
    except clause.
    """

    pass


# ========== Error Kinds ==========


class InvalidArgumentException(EsportsSchedulerException, ValueError):
    """Raised when input is malformed or missing (blank names, equal teams).

    The caller supplied bad input and may correct it and try again.
    """

    pass


class InvalidStateException(EsportsSchedulerException):
    """Raised when valid input violates a business rule given current data."""

    pass


class NotFoundException(EsportsSchedulerException, LookupError):
    """Raised when a name does not resolve to any known entity."""

    pass


# ========== Invalid Argument Exceptions ==========


class InvalidNameException(InvalidArgumentException):
    """Raised when a required name is missing or blank."""

    pass


class InvalidRankingException(InvalidArgumentException):
    """Raised when a player ranking is not an integer inside the allowed bounds."""

    pass


class InvalidDateException(InvalidArgumentException):
    """Raised when a date is missing or cannot be parsed."""

    pass


class DuplicateNameException(InvalidArgumentException):
    """Raised when a name is already used by another entity of the same kind."""

    pass


class SameTeamException(InvalidArgumentException):
    """Raised when a match is requested between a team and itself."""

    pass


class InvalidConfigurationException(InvalidArgumentException):
    """Raised when configuration data is invalid."""

    pass


# ========== Invalid State Exceptions ==========


class PlayerAlreadyOnTeamException(InvalidStateException):
    """Raised when adding a player that already belongs to another team."""

    pass


class TeamNotEnrolledException(InvalidStateException):
    """Raised when scheduling a match for a team not enrolled in the tournament."""

    pass


# ========== Not Found Exceptions ==========


class TeamNotFoundException(NotFoundException):
    """Raised when a requested team cannot be found."""

    pass


class TournamentNotFoundException(NotFoundException):
    """Raised when a requested tournament cannot be found."""

    pass


class GameNotFoundException(NotFoundException):
    """Raised when a requested game cannot be found."""

    pass


class PlayerNotFoundException(NotFoundException):
    """Raised when a requested player cannot be found on a roster."""

    pass


class MatchNotFoundException(NotFoundException):
    """Raised when a requested match is not scheduled in a tournament."""

    pass
