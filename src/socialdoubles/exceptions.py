"""Exceptions for use in Social Doubles"""

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


# ========== Base Application Exception ==========


class SocialDoublesException(Exception):
    """Base exception for all Social Doubles errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every scheduling error with a single except clause.
    """

    pass


# ========== Lookup Exceptions ==========


class NotFoundException(SocialDoublesException):
    """Base exception for references to things that do not exist."""

    pass


class RoundNotFoundException(NotFoundException):
    """Raised when a requested round index does not exist."""

    pass


class PlayerNotFoundException(NotFoundException):
    """Raised when a player identity does not refer to a roster entry."""

    pass


# ========== Input Exceptions ==========


class InvalidInputException(SocialDoublesException):
    """Base exception for caller input that fails validation."""

    pass


class InvalidMatchCountException(InvalidInputException):
    """Raised when the requested number of matches for a round is not positive."""

    pass


class InvalidScoreException(InvalidInputException):
    """Raised when submitted scores do not fit the round they are submitted for."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(SocialDoublesException):
    """Base exception for matching-related errors."""

    pass


class InvalidGraphException(PairingException):
    """Raised when an edge list violates the matching solver contract."""

    pass


class NoMatchingFoundException(PairingException):
    """Raised when no usable matching could be produced."""

    pass
