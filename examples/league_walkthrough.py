"""Example script walking through a small league.

Shows the programmatic API a console front-end would call: creating games and
teams, running a tournament, and reacting to rejected operations.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from esportscheduler import EsportsSchedulerException, LeagueConfig, LeagueController


def example_league():
    """Example: a tournament with two teams and one match."""

    print("\n" + "=" * 70)
    print("EXAMPLE: Scheduling a match")
    print("=" * 70 + "\n")

    league = LeagueController(LeagueConfig(log_level="INFO"), configure_logs=True)

    moba = league.create_category("MOBA", "Multiplayer online battle arena")
    league.create_game("League of Legends", moba)
    league.create_tournament("SYSTECH Cup", "FIA", "2025-10-01", "League of Legends")

    league.create_team("Fox")
    league.create_team("Raptors")
    league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)
    league.add_player_to_team("Raptors", "Sofia Paz", "Sofi", 1820)

    league.enroll_team("SYSTECH Cup", "Fox")
    league.enroll_team("SYSTECH Cup", "Raptors")

    referee = league.create_referee("Carlos", "Mena")
    match = league.schedule_match("SYSTECH Cup", "2025-10-02", "Fox", "Raptors", referee)
    print(f"Scheduled: {match}")

    # Rejected operations leave the league unchanged
    for attempt in (
        lambda: league.create_team("fox "),
        lambda: league.schedule_match("SYSTECH Cup", "2025-10-03", "Fox", "Ghosts", referee),
    ):
        try:
            attempt()
        except EsportsSchedulerException as e:
            print(f"Rejected ({type(e).__name__}): {e}")

    print("\nSummary:")
    for section, rows in league.summary().items():
        print(f"  {section}:")
        for row in rows:
            print(f"    {row}")


if __name__ == "__main__":
    example_league()
