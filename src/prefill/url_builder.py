"""
URL Builder (core): FormSpec entries → prefilled form URL.

Rewrites the query string of a Google Form link:
    - usp=sf_link (the "share" marker) is dropped
    - usp=pp_url (the "prefilled" marker) is set
    - every entry becomes entry.<question_id>=<answer>

Output is a pair of strings:
    - encoded: canonical form-encoded URL, safe to distribute
    - decoded: same URL with the query unescaped, for humans only

Encoding convention:
    application/x-www-form-urlencoded (urlencode + quote_plus).
    Space → "+", everything outside A-Z a-z 0-9 - _ . ~ is percent-encoded
    as UTF-8. Parameters are emitted sorted by name, so identical input
    always yields byte-identical output.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence
from urllib.parse import SplitResult, parse_qsl, unquote_plus, urlencode, urlsplit, urlunsplit

from prefill.exceptions import DecodeError, UrlParseError, ValidationError
from prefill.model import Entry, FormSpec

logger = logging.getLogger(__name__)

TODAY_TOKEN = "{today}"
DATE_FORMAT = "%Y-%m-%d"

USP_PARAM = "usp"
SHARE_LINK_VALUE = "sf_link"
PREFILL_VALUE = "pp_url"
ENTRY_PREFIX = "entry."

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass
class PrefilledURL:
    """The two renderings of a prefilled form link."""
    encoded: str
    decoded: str


def _split_url(base_url: str) -> SplitResult:
    """Parse base_url, rejecting strings urlsplit would silently accept."""
    if not base_url:
        raise UrlParseError(base_url, "empty URL")
    for ch in base_url:
        if ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F:
            raise UrlParseError(base_url, "contains whitespace or control characters")

    try:
        parts = urlsplit(base_url)
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise UrlParseError(base_url, str(e)) from e

    if not _SCHEME_RE.match(parts.scheme):
        raise UrlParseError(base_url, "missing scheme")
    return parts


def resolve_answer(answer: str, today: date) -> str:
    """Substitute the {today} token; any other answer is returned verbatim."""
    if answer == TODAY_TOKEN:
        return today.strftime(DATE_FORMAT)
    return answer


def parse_query(base_url: str, query: str) -> Dict[str, List[str]]:
    """
    Group the base URL's query into name -> values, keeping repeats in order.

    Raises:
        UrlParseError: On a malformed escape or bytes that are not valid UTF-8,
            which could not be re-encoded unchanged
    """
    match = _BAD_ESCAPE_RE.search(query)
    if match:
        raise UrlParseError(base_url, f"invalid escape in query at position {match.start()}")

    params: Dict[str, List[str]] = {}
    try:
        pairs = parse_qsl(query, keep_blank_values=True, errors="strict")
    except UnicodeDecodeError as e:
        raise UrlParseError(base_url, f"query is not valid UTF-8: {e}") from e
    for name, value in pairs:
        params.setdefault(name, []).append(value)
    return params


def encode_query(params: Dict[str, List[str]]) -> str:
    """Serialize parameters sorted by name; repeated values keep their order."""
    return urlencode(sorted(params.items()), doseq=True)


def unescape_query(query: str) -> str:
    """
    Undo query-string escaping (%XX and "+").

    Unlike urllib's unquote_plus, malformed input is an error rather than
    being passed through or replaced.

    Raises:
        DecodeError: On a bare "%" or bytes that are not valid UTF-8
    """
    match = _BAD_ESCAPE_RE.search(query)
    if match:
        raise DecodeError(query, f"invalid escape at position {match.start()}")
    try:
        return unquote_plus(query, errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError(query, str(e)) from e


def build_prefill_url(base_url: str, entries: Sequence[Entry], today: date) -> PrefilledURL:
    """
    Build the prefilled URL for a form.

    Args:
        base_url: Form URL, usually ending in ?usp=sf_link
        entries: Ordered entries; later duplicates overwrite earlier ones
        today: Date substituted for "{today}" answers

    Returns:
        PrefilledURL with encoded and decoded renderings

    Raises:
        UrlParseError: If base_url is not a valid absolute URL, or its query
            has malformed escapes or invalid UTF-8
        ValidationError: If an entry has an empty question_id
        DecodeError: If the encoded query cannot be unescaped
    """
    parts = _split_url(base_url)

    params = parse_query(base_url, parts.query)

    if SHARE_LINK_VALUE in params.get(USP_PARAM, []):
        del params[USP_PARAM]
    params[USP_PARAM] = [PREFILL_VALUE]

    for index, entry in enumerate(entries):
        if not entry.question_id:
            raise ValidationError(index, "question_id must not be empty")
        params[ENTRY_PREFIX + entry.question_id] = [resolve_answer(entry.answer, today)]

    logger.debug("Query parameters: %s", sorted(params.items()))

    query = encode_query(params)
    encoded = urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
    decoded = urlunsplit((parts.scheme, parts.netloc, parts.path, unescape_query(query), parts.fragment))

    return PrefilledURL(encoded=encoded, decoded=decoded)


def build_from_spec(spec: FormSpec, today: date) -> PrefilledURL:
    """Build the prefilled URL for a whole FormSpec."""
    return build_prefill_url(spec.base_url, spec.entries, today)


__all__ = [
    "PrefilledURL",
    "build_prefill_url",
    "build_from_spec",
    "resolve_answer",
    "parse_query",
    "encode_query",
    "unescape_query",
    "TODAY_TOKEN",
    "UrlParseError",
    "ValidationError",
    "DecodeError",
]
