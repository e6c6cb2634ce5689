"""Factory for creating Player objects from registration candidates.

Callers hand the registry either a bare identifier or an identifier with a
rating. Both forms are modelled as an explicit tagged variant
(:class:`BareCandidate` / :class:`RatedCandidate`) and resolved to a canonical
``(id, rating)`` record by :func:`normalize_candidate`.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from chesspairing.constants import DEFAULT_RATING
from chesspairing.exceptions import InvalidPlayerDataException
from chesspairing.models.player.base_player import Player
from chesspairing.type_hints import Candidate, RawCandidate
from chesspairing.utils import setup_logger
from chesspairing.utils.validation import validate_player_id, validate_rating

logger = setup_logger(__name__)


@dataclass(frozen=True)
class BareCandidate:
    """A candidate given only by identifier; the rating defaults."""

    id: str


@dataclass(frozen=True)
class RatedCandidate:
    """A candidate given by identifier and a (not yet validated) rating."""

    id: str
    rating: Any


def _is_pair(raw: Any) -> bool:
    if isinstance(raw, (str, bytes, bytearray)):
        return False
    return isinstance(raw, Sequence) and len(raw) == 2


def to_candidate(raw: RawCandidate) -> Candidate:
    """Convert loosely-typed input into a tagged candidate.

    Accepts a string, an ``(id, rating)`` pair given as any two-item
    sequence, a mapping with ``id`` and an optional ``rating`` key, or an
    existing candidate.

    Raises:
        InvalidPlayerDataException: If the input has none of those shapes
    """
    if isinstance(raw, (BareCandidate, RatedCandidate)):
        return raw
    if isinstance(raw, str):
        return BareCandidate(raw)
    if _is_pair(raw):
        return RatedCandidate(raw[0], raw[1])
    if isinstance(raw, Mapping):
        if "rating" in raw:
            return RatedCandidate(raw.get("id") or "", raw["rating"])
        return BareCandidate(raw.get("id") or "")
    raise InvalidPlayerDataException(f"Unsupported player candidate: {raw!r}")


def normalize_candidate(candidate: Candidate) -> Optional[Tuple[str, Union[int, float]]]:
    """Resolve a candidate to a canonical ``(id, rating)`` record.

    The id is trimmed; a blank id yields ``None``. A rating that is not a
    non-negative number is replaced by the default rating.
    """
    id_check = validate_player_id(candidate.id)
    if not id_check:
        logger.debug("Dropping candidate: %s", id_check.error_message)
        return None

    rating = DEFAULT_RATING
    if isinstance(candidate, RatedCandidate):
        rating_check = validate_rating(candidate.rating)
        if rating_check:
            rating = rating_check.sanitized_value
        else:
            logger.debug(
                "Using default rating for %s: %s",
                id_check.sanitized_value,
                rating_check.error_message,
            )

    return id_check.sanitized_value, rating


class PlayerFactory:
    """Factory for creating Player instances from candidates.

    Example:
        >>> factory = PlayerFactory()
        >>> factory.create_player(("Magnus", 2830))
        Player(id='Magnus', rating=2830, score=0.0)
    """

    def create_player(self, raw: RawCandidate) -> Optional[Player]:
        """Create a Player, or return None when the identifier is blank."""
        record = normalize_candidate(to_candidate(raw))
        if record is None:
            return None
        player_id, rating = record
        return Player(player_id, rating)


def create_player(raw: RawCandidate) -> Optional[Player]:
    """Convenience function to create a player with the default factory."""
    return PlayerFactory().create_player(raw)
