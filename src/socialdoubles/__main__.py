"""Command line interface: simulate a social doubles tournament.

Example:
    python -m socialdoubles --players 10 --matches 2 --rounds 5 --seed 1
"""

# Social Doubles
# Copyright (C) 2025  Social Doubles developers
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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from socialdoubles.constants import (
    DEFAULT_MATCHES_PER_ROUND,
    DEFAULT_POINTS_TO_WIN,
    DEFAULT_SOLVER_TIME_LIMIT,
)
from socialdoubles.exceptions import SocialDoublesException
from socialdoubles.reporting import calculate_balance
from socialdoubles.simulation import SimulationConfig, TournamentSimulator
from socialdoubles.tournament import Tournament
from socialdoubles.utils import PACKAGE_LOGGER_NAME, setup_logger

logger = setup_logger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an integer, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got {number}")
    return number


def _rate(value: str) -> float:
    try:
        rate = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a number, got '{value}'")
    if not 0.0 <= rate < 1.0:
        raise argparse.ArgumentTypeError(f"Rate must be in [0, 1), got {rate}")
    return rate


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="socialdoubles",
        description="Simulate a social doubles tournament with random results",
    )
    parser.add_argument(
        "--players", type=_non_negative_int, default=10, help="Number of players"
    )
    parser.add_argument(
        "--matches",
        type=_non_negative_int,
        default=DEFAULT_MATCHES_PER_ROUND,
        help="Matches (courts) per round",
    )
    parser.add_argument(
        "--rounds", type=_non_negative_int, default=5, help="Number of rounds"
    )
    parser.add_argument("--seed", type=int, help="Random seed for the scores")
    parser.add_argument(
        "--points",
        type=_non_negative_int,
        default=DEFAULT_POINTS_TO_WIN,
        help="Points needed to win a game",
    )
    parser.add_argument(
        "--absence-rate",
        type=_rate,
        default=0.0,
        help="Chance that a player skips a round",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=DEFAULT_SOLVER_TIME_LIMIT,
        help="Matching solver time limit in seconds",
    )
    parser.add_argument("--output", help="Write the tournament as JSON to this path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_tournament(tournament: Tournament) -> List[str]:
    """Render rounds, standings and balance as console lines."""
    names = {player.id: player.name for player in tournament.players}
    lines: List[str] = [tournament.name, "=" * len(tournament.name)]

    for round_data in tournament.rounds:
        lines.append(f"\nRound {round_data.index + 1}")
        scores = tournament.get_scores(round_data.index)
        for number, match in enumerate(round_data.matches):
            team_a = " & ".join(names[p] for p in match.team_a.players)
            team_b = " & ".join(names[p] for p in match.team_b.players)
            result = f"  {scores[number][0]}-{scores[number][1]}" if scores else ""
            lines.append(f"  {team_a}  vs  {team_b}{result}")
        if round_data.paused:
            lines.append(f"  Paused: {', '.join(names[p] for p in round_data.paused)}")
        if round_data.inactive:
            lines.append(
                f"  Inactive: {', '.join(names[p] for p in round_data.inactive)}"
            )

    lines.append("\nStandings")
    for standing in tournament.standings():
        stats = standing.stats
        lines.append(
            f"  {standing.rank:>3}. {standing.player.name:<12} "
            f"W{stats.wins} L{stats.losses} D{stats.draws} "
            f"ratio {stats.win_ratio:.2f}  +/- {stats.plus_minus:+d}"
        )

    lines.append("\nBalance")
    report = calculate_balance(tournament.all_stats())
    lines.extend(f"  {line}" for line in report.summary())
    return lines


def export_json(tournament: Tournament) -> str:
    """Serialize the tournament for the display collaborator."""
    data = {
        "config": tournament.config.to_dict(),
        "players": [player.to_dict() for player in tournament.players],
        "rounds": [
            {**round_data.to_dict(), "scores": tournament.get_scores(round_data.index)}
            for round_data in tournament.rounds
        ],
        "stats": [stats.to_dict() for stats in tournament.all_stats()],
        "balance": calculate_balance(tournament.all_stats()).to_dict(),
    }
    return json.dumps(data, indent=2)


def run_simulation(args: argparse.Namespace) -> int:
    config = SimulationConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        matches_per_round=args.matches,
        points_to_win=args.points,
        seed=args.seed,
        absence_rate=args.absence_rate,
        solver_time_limit=args.time_limit,
    )
    tournament = TournamentSimulator(config).run()

    print("\n".join(format_tournament(tournament)))

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(export_json(tournament), encoding="utf-8")
        print(f"\nTournament saved to: {output_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(logging.DEBUG)

    try:
        return run_simulation(args)
    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user")
        return 130
    except SocialDoublesException as e:
        logger.error(f"Simulation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
