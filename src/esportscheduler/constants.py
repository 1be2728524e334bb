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

# --- Constants ---
PACKAGE_LOGGER_NAME = "esportscheduler"

# Player ranking bounds (inclusive)
DEFAULT_RANKING_MIN = 0
DEFAULT_RANKING_MAX = 4000
DEFAULT_RANKING = 0

# Dates are rendered as ISO yyyy-mm-dd unless configured otherwise
DEFAULT_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Prefix of generated match identifiers
MATCH_ID_PREFIX = "Match"
