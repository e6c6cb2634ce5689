"""Validation utilities for Chess Pairing.

This module provides reusable validation functions with consistent error handling.
"""

import math
import re
from fractions import Fraction
from typing import Any, Optional, Tuple

from chesspairing.constants import HALF_POINTS_PER_POINT, RESULT_SEPARATOR
from chesspairing.exceptions import InvalidResultException

# Plain decimals ("1", "0.5") or fractions ("1/2"); no signs or exponents
_RESULT_COMPONENT = re.compile(r"[0-9]+(\.[0-9]+)?|[0-9]+/[0-9]+")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player ID Validation ==========


def validate_player_id(player_id: Any) -> ValidationResult:
    """Validate a player identifier.

    Identifiers are trimmed of surrounding whitespace and must not be empty.

    Args:
        player_id: Raw identifier

    Returns:
        ValidationResult whose sanitized value is the trimmed identifier
    """
    if not isinstance(player_id, str):
        return ValidationResult(
            is_valid=False,
            error_message=f"Player id must be a string: {player_id!r}",
        )

    player_id = player_id.strip()
    if not player_id:
        return ValidationResult(is_valid=False, error_message="Player id is required")

    return ValidationResult(is_valid=True, sanitized_value=player_id)


# ========== Rating Validation ==========


def validate_rating(rating: Any) -> ValidationResult:
    """Validate a rating.

    A rating must be a real, finite, non-negative number. Strings are not
    coerced; parsing free text is the job of the input layer.

    Args:
        rating: Rating value to validate

    Returns:
        ValidationResult with validation status
    """
    if rating is None:
        return ValidationResult(is_valid=False, error_message="No rating given")

    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a number: {rating!r}",
        )

    if not math.isfinite(rating) or rating < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a non-negative number: {rating}",
        )

    return ValidationResult(is_valid=True, sanitized_value=rating)


# ========== Result Validation ==========


def _parse_component(component: str) -> int:
    """Convert one side of a result string to half-points."""
    component = component.strip()
    if not _RESULT_COMPONENT.fullmatch(component):
        raise ValueError(f"not a decimal or fraction: {component!r}")
    value = Fraction(component)
    half_points = value * HALF_POINTS_PER_POINT
    if value < 0 or half_points.denominator != 1:
        raise ValueError(f"not a non-negative multiple of 0.5: {component}")
    return int(half_points)


def validate_result(result: Any) -> ValidationResult:
    """Validate a game result string such as "1-0", "0-1" or "0.5-0.5".

    Both components must be non-negative multiples of one half.
    Fractions ("1/2-1/2") are accepted as well as decimals.

    Args:
        result: Result string to validate

    Returns:
        ValidationResult whose sanitized value is a (player1, player2) tuple of
        half-points, e.g. "0.5-0.5" -> (1, 1)
    """
    if not isinstance(result, str) or not result.strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"Result must be a non-empty string: {result!r}",
        )

    parts = result.strip().split(RESULT_SEPARATOR)
    if len(parts) != 2:
        return ValidationResult(
            is_valid=False,
            error_message=f"Result must look like '1-0': {result!r}",
        )

    try:
        half_points: Tuple[int, int] = (
            _parse_component(parts[0]),
            _parse_component(parts[1]),
        )
    except (ValueError, ZeroDivisionError) as e:
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid result {result!r}: {e}",
        )

    return ValidationResult(is_valid=True, sanitized_value=half_points)


def validate_result_strict(result: str) -> Tuple[int, int]:
    """Validate a result string and return its half-points or raise.

    Args:
        result: Result string to validate

    Returns:
        (player1, player2) half-points

    Raises:
        InvalidResultException: If the result is malformed
    """
    validation = validate_result(result)
    if not validation.is_valid:
        raise InvalidResultException(validation.error_message)
    return validation.sanitized_value
