import logging
from typing import List, Sequence

from models.models import Location, MatchResult
from utils.constants import MIN_KEYWORD_LENGTH

logger = logging.getLogger(__name__)

TAG_WEIGHT = 3
NAME_WEIGHT = 2
DESCRIPTION_WEIGHT = 1


def tokenize(query: str) -> List[str]:
    words = query.lower().strip().split()
    return [w for w in words if len(w) >= MIN_KEYWORD_LENGTH]


def score_location(location: Location, keywords: Sequence[str]) -> int:
    name = location.name.lower()
    description = location.description.lower()
    score = 0
    for keyword in keywords:
        for tag in location.tags:
            if keyword in tag or tag in keyword:
                score += TAG_WEIGHT
        if keyword in name:
            score += NAME_WEIGHT
        if keyword in description:
            score += DESCRIPTION_WEIGHT
    return score


def best_match(locations: Sequence[Location], query: str) -> MatchResult:
    """
    Pick the location that best matches a free-text query.

    Ties keep registry order. A top score of zero means nothing matched and
    an empty ``MatchResult`` is returned.
    """
    keywords = tokenize(query)
    scored = [(location, score_location(location, keywords)) for location in locations]
    scored.sort(key=lambda item: item[1], reverse=True)

    if not scored or scored[0][1] == 0:
        logger.info("No location matched query %r", query)
        return MatchResult()

    location, score = scored[0]
    logger.info("Matched query %r to %s (score %d)", query, location.name, score)
    return MatchResult(location=location, score=score)
