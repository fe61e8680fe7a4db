"""Tournament bookkeeping: statistics ledger, result recording and standings."""

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

from socialdoubles.controllers.tournament.result_recorder import ResultRecorder
from socialdoubles.controllers.tournament.standings_calculator import (
    Standing,
    StandingsCalculator,
)
from socialdoubles.controllers.tournament.statistics_ledger import (
    LedgerView,
    StatisticsLedger,
)

__all__ = [
    "StatisticsLedger",
    "LedgerView",
    "ResultRecorder",
    "StandingsCalculator",
    "Standing",
]
