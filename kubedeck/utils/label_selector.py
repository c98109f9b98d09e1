"""Label selector parsing.

Turns the jsonpath output of a selector fetch into ``key=value`` terms
usable as a ``--selector`` filter:

- JSON object: ``'{"app":"web","tier":"frontend"}'``
- Go map rendering (older kubectl): ``'map[app:web tier:frontend]'``

The raw output is wrapped in the quotes of the jsonpath template, so one
leading and one trailing character are stripped before parsing.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

_GO_MAP_PREFIX = "map["
_GO_MAP_SUFFIX = "]"


def _terms_from_pairs(pairs: Iterable[tuple[object, object]]) -> frozenset[str]:
    return frozenset(
        f"{key}={value}" for key, value in pairs if str(key) and value is not None
    )


def _parse_json_object(body: str) -> frozenset[str] | None:
    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, ValueError):
        return None
    if not isinstance(parsed, dict):
        return None
    return _terms_from_pairs(parsed.items())


def _parse_go_map(body: str) -> frozenset[str] | None:
    if not (body.startswith(_GO_MAP_PREFIX) and body.endswith(_GO_MAP_SUFFIX)):
        return None
    inner = body[len(_GO_MAP_PREFIX):-len(_GO_MAP_SUFFIX)]
    pairs: list[tuple[str, str]] = []
    for token in inner.split():
        key, sep, value = token.partition(":")
        if not sep:
            return None
        pairs.append((key, value))
    return _terms_from_pairs(pairs)


def extract_label_terms(raw: str) -> frozenset[str]:
    """Parse a quoted selector expression into ``key=value`` terms.

    Args:
        raw: Selector fetch output, e.g. ``'{"app":"x"}'``.

    Returns:
        Set of ``key=value`` strings. Empty when the selector has no pairs
        or cannot be parsed.
    """
    text = (raw or "").strip()
    if len(text) < 2:
        return frozenset()
    body = text[1:-1].strip()
    if not body:
        return frozenset()

    for parser in (_parse_json_object, _parse_go_map):
        terms = parser(body)
        if terms is not None:
            return terms

    logger.debug("extract_label_terms - unparseable selector %r", raw)
    return frozenset()


def join_label_terms(terms: Iterable[str]) -> str:
    """Join label terms into a ``--selector`` value in stable order."""
    return ",".join(sorted(terms))


__all__ = ["extract_label_terms", "join_label_terms"]
