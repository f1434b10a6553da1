"""
Request boundary around the comparison engine.

Validates comparison ids and resolves heroes before compare() is ever called:
  - missing / blank id           -> InvalidRequestError (400, "invalid_request")
  - non-numeric / non-integral   -> InvalidRequestError (400, "invalid_request")
  - id not in the store          -> HeroNotFoundError   (404, "not_found")
Response helpers return (status_code, payload) pairs that a transport layer can send as-is.
No HTTP or MCP router is wired in this package; the CLI and Streamlit app call compare_by_ids directly.
"""

import logging
from typing import Any, Dict, Tuple

from superheroengine.core.compare import ComparisonResult, compare
from superheroengine.data.errors import HeroNotFoundError, InvalidRequestError
from superheroengine.data.models import coerce_hero_id
from superheroengine.data.store import HeroStore

logger = logging.getLogger(__name__)

MSG_IDS_REQUIRED = "Both id1 and id2 query parameters are required"
MSG_IDS_NOT_NUMBERS = "id1 and id2 must be valid numbers"
MSG_NOT_FOUND = "One or both superheroes not found"
MSG_HERO_NOT_FOUND = "Superhero not found"

Response = Tuple[int, Any]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_hero_id(value: Any, field: str = "id") -> int:
    """Positive integer-like id -> int. Raises InvalidRequestError otherwise."""
    if _is_blank(value):
        raise InvalidRequestError(MSG_IDS_REQUIRED, field=field, value=value)
    hero_id = coerce_hero_id(value)
    if hero_id is None or hero_id <= 0:
        raise InvalidRequestError(MSG_IDS_NOT_NUMBERS, field=field, value=value)
    return hero_id


def compare_by_ids(store: HeroStore, id1: Any, id2: Any) -> ComparisonResult:
    """
    Validate both ids, resolve both heroes, then compare.

    Presence of both ids is checked before either is parsed, so a missing id2 wins over a
    junk id1. Same id twice is allowed (all-tie result).
    """
    for field, value in (("id1", id1), ("id2", id2)):
        if _is_blank(value):
            raise InvalidRequestError(MSG_IDS_REQUIRED, field=field, value=value)
    n1 = parse_hero_id(id1, "id1")
    n2 = parse_hero_id(id2, "id2")

    hero1 = store.get(n1)
    hero2 = store.get(n2)
    if hero1 is None or hero2 is None:
        missing = [n for n, h in ((n1, hero1), (n2, hero2)) if h is None]
        logger.info("Compare id1=%s id2=%s: not found %s", n1, n2, missing)
        raise HeroNotFoundError(MSG_NOT_FOUND, missing_ids=missing)
    return compare(hero1, hero2)


def error_payload(err: InvalidRequestError | HeroNotFoundError) -> Dict[str, str]:
    return {"error": str(err), "status": err.status}


def comparison_response(store: HeroStore, id1: Any, id2: Any) -> Response:
    """(200, ComparisonResult dict) or (400|404, {"error", "status"})."""
    try:
        result = compare_by_ids(store, id1, id2)
    except InvalidRequestError as e:
        logger.info("Rejected compare request id1=%r id2=%r: %s", id1, id2, e)
        return 400, error_payload(e)
    except HeroNotFoundError as e:
        return 404, error_payload(e)
    return 200, result.to_dict()


def hero_response(store: HeroStore, hero_id: Any, *, powerstats_only: bool = False) -> Response:
    """(200, hero record or its powerstats) or (404, "Superhero not found")."""
    hero = store.get(hero_id)
    if hero is None:
        return 404, MSG_HERO_NOT_FOUND
    if powerstats_only:
        return 200, dict(hero.powerstats)
    return 200, hero.to_record()
