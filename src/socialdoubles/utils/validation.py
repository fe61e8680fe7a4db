"""Validation utilities for Social Doubles.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional, Sequence

from socialdoubles.constants import TEAMS_PER_MATCH
from socialdoubles.exceptions import InvalidMatchCountException, InvalidScoreException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
    """

    def __init__(self, is_valid: bool, error_message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful count
    return isinstance(value, int) and not isinstance(value, bool)


# ========== Match Count Validation ==========


def validate_match_count(match_count: Any) -> ValidationResult:
    """Validate the number of matches requested for a round.

    Args:
        match_count: Requested number of matches

    Returns:
        ValidationResult with validation status
    """
    if not _is_int(match_count):
        return ValidationResult(
            is_valid=False,
            error_message=f"Match count must be an integer, got {match_count!r}",
        )
    if match_count <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Match count must be positive, got {match_count}",
        )
    return ValidationResult(is_valid=True)


def validate_match_count_strict(match_count: Any) -> None:
    """Validate match count and raise exception if invalid.

    Raises:
        InvalidMatchCountException: If match count is invalid
    """
    result = validate_match_count(match_count)
    if not result.is_valid:
        raise InvalidMatchCountException(result.error_message)


# ========== Score Validation ==========


def validate_score(score: Any) -> ValidationResult:
    """Validate a single match score.

    A score is a pair of non-negative integers, one per team.

    Example:
        >>> bool(validate_score((11, 7)))
        True
        >>> bool(validate_score((11, -1)))
        False
    """
    if not isinstance(score, (tuple, list)) or len(score) != TEAMS_PER_MATCH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a pair of points, got {score!r}",
        )
    for points in score:
        if not _is_int(points) or points < 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"Points must be non-negative integers, got {score!r}",
            )
    return ValidationResult(is_valid=True)


def validate_round_scores(scores: Sequence[Any], match_count: int) -> ValidationResult:
    """Validate the score list submitted for a round with ``match_count`` matches."""
    if not isinstance(scores, (tuple, list)):
        return ValidationResult(
            is_valid=False,
            error_message=f"Scores must be a list, got {type(scores).__name__}",
        )
    if len(scores) != match_count:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Expected {match_count} scores for this round, got {len(scores)}"
            ),
        )
    for score in scores:
        result = validate_score(score)
        if not result:
            return result
    return ValidationResult(is_valid=True)


def validate_round_scores_strict(scores: Sequence[Any], match_count: int) -> None:
    """Validate round scores and raise exception if invalid.

    Raises:
        InvalidScoreException: If any score is invalid or the count mismatches
    """
    result = validate_round_scores(scores, match_count)
    if not result.is_valid:
        raise InvalidScoreException(result.error_message)
