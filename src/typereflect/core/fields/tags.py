"""Field tag parsing.

A tag is a string of space-separated ``key:"value"`` pairs, e.g.
``json:"name" orm:"name"``. Values are double-quoted and may contain
backslash escapes. Parsing stops at the first malformed fragment; pairs parsed
before it are kept.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Mapping
from types import MappingProxyType

_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}


class TagWarning(UserWarning):
    """Base class for recoverable tag problems."""

    pass


class MalformedTagWarning(TagWarning):
    """Issued when a tag string does not follow the key:"value" convention."""

    pass


class DuplicateTagKeyWarning(TagWarning):
    """Issued when a key appears twice in one tag; the first value wins."""

    pass


def _unquote(body: str) -> str:
    return _ESCAPE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def _is_key_char(ch: str) -> bool:
    return ch > " " and ch not in ':"\x7f'


def parse_tag(raw: str, *, owner: str = "") -> Mapping[str, str]:
    """Parse a tag string into a read-only key to value mapping.

    Args:
        raw: Tag string, e.g. ``json:"name" orm:"name"``.
        owner: Field label used in warning messages.

    Returns:
        Mapping of tag keys to values. Keys absent from the tag have no entry;
        a key tagged with ``""`` maps to the empty string.
    """
    tags: dict[str, str] = {}
    rest = raw
    where = f" on {owner}" if owner else ""

    while True:
        rest = rest.lstrip(" ")
        if not rest:
            break

        i = 0
        while i < len(rest) and _is_key_char(rest[i]):
            i += 1
        if i == 0 or i + 1 >= len(rest) or rest[i] != ":" or rest[i + 1] != '"':
            warnings.warn(
                f"Malformed tag{where}: cannot parse {rest!r} in {raw!r}",
                MalformedTagWarning,
                stacklevel=3,
            )
            break
        key = rest[:i]
        rest = rest[i + 1 :]

        # rest starts at the opening quote
        j = 1
        while j < len(rest) and rest[j] != '"':
            if rest[j] == "\\":
                j += 1
            j += 1
        if j >= len(rest):
            warnings.warn(
                f"Malformed tag{where}: unterminated value for key {key!r} in {raw!r}",
                MalformedTagWarning,
                stacklevel=3,
            )
            break
        value = _unquote(rest[1:j])
        rest = rest[j + 1 :]

        if key in tags:
            warnings.warn(
                f"Duplicate tag key {key!r}{where}; keeping {tags[key]!r}",
                DuplicateTagKeyWarning,
                stacklevel=3,
            )
            continue
        tags[key] = value

    return MappingProxyType(tags)
