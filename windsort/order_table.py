"""
Canonical order table.

Entries are written in a small string notation so the built-in table and
user supplied ``sortOrder`` lists read the same way:

  flex              exact literal
  p-*               prefix (matches ``p-4``, ``p-[3px]``; never bare ``p-``)
  re:text-(xs|sm)   full-match regular expression

A token's rank is the index of the entry it matches. Lookup goes exact ->
patterns (table order) -> prefixes (longest first), first on the token as
written, then with an important marker or negative sign removed. A token
with variant prefixes (``md:``, ``hover:``) matches as written only through
an exact entry; otherwise it takes the rank of its base utility.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import ConfigurationError

EXACT = 'exact'
PREFIX = 'prefix'
PATTERN = 'pattern'

VARIANT_SEPARATOR = ':'
PATTERN_MARKER = 're:'
PREFIX_MARKER = '*'


@dataclass(frozen=True)
class CanonicalEntry:
    index: int
    kind: str
    value: str
    regex: Optional[re.Pattern] = field(default=None, compare=False, repr=False)

    @property
    def notation(self) -> str:
        if self.kind == PATTERN:
            return PATTERN_MARKER + self.value
        if self.kind == PREFIX:
            return self.value + PREFIX_MARKER
        return self.value

    def matches(self, name: str) -> bool:
        if self.kind == EXACT:
            return name == self.value
        if self.kind == PREFIX:
            return len(name) > len(self.value) and name.startswith(self.value)
        return self.regex.fullmatch(name) is not None


def parse_entry(index: int, spec: str) -> CanonicalEntry:
    if not isinstance(spec, str):
        raise ConfigurationError(f"sort order entry #{index} must be a string, got {type(spec).__name__}")
    text = spec.strip()
    if not text:
        raise ConfigurationError(f"sort order entry #{index} is empty")
    if text.startswith(PATTERN_MARKER):
        source = text[len(PATTERN_MARKER):]
        try:
            regex = re.compile(source)
        except re.error as e:
            raise ConfigurationError(f"sort order entry #{index} {text!r} is not a valid regex: {e}") from e
        return CanonicalEntry(index, PATTERN, source, regex)
    if any(ch.isspace() for ch in text):
        raise ConfigurationError(f"sort order entry #{index} {text!r} contains whitespace")
    if text.endswith(PREFIX_MARKER) and len(text) > 1:
        return CanonicalEntry(index, PREFIX, text[:-1])
    return CanonicalEntry(index, EXACT, text)


def split_variants(token: str) -> Tuple[List[str], str]:
    """Split ``md:hover:p-4`` into (['md', 'hover'], 'p-4').

    Separators inside ``[...]`` or ``(...)`` belong to arbitrary values and
    are not split on.
    """
    parts: List[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(token):
        if ch in '[(':
            depth += 1
        elif ch in '])':
            depth = max(0, depth - 1)
        elif ch == VARIANT_SEPARATOR and depth == 0:
            parts.append(token[start:i])
            start = i + 1
    parts.append(token[start:])
    return parts[:-1], parts[-1]


def _lookup_candidates(name: str) -> Iterable[str]:
    yield name
    bare = name
    if bare.startswith('!'):
        bare = bare[1:]
    elif bare.endswith('!'):
        bare = bare[:-1]
    if bare != name and bare:
        yield bare
    if bare.startswith('-') and len(bare) > 1:
        yield bare[1:]


class OrderTable:
    """Immutable ranking of utility classes, built once and shared by reference."""

    def __init__(self, entries: Sequence[str]):
        parsed = [parse_entry(i, spec) for i, spec in enumerate(entries)]
        if not parsed:
            raise ConfigurationError('sort order must contain at least one entry')
        seen: Dict[str, int] = {}
        for entry in parsed:
            key = entry.notation
            if key in seen:
                raise ConfigurationError(
                    f"duplicate sort order entry {key!r} at #{entry.index} (first at #{seen[key]})"
                )
            seen[key] = entry.index
        self._entries: Tuple[CanonicalEntry, ...] = tuple(parsed)
        self._exact = {e.value: e.index for e in parsed if e.kind == EXACT}
        self._patterns = tuple(e for e in parsed if e.kind == PATTERN)
        self._prefixes = tuple(sorted((e for e in parsed if e.kind == PREFIX), key=lambda e: (-len(e.value), e.index)))

    @property
    def entries(self) -> Tuple[CanonicalEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, name: str) -> Optional[int]:
        """Rank of ``name`` taken literally (no variant splitting)."""
        for candidate in _lookup_candidates(name):
            rank = self._exact.get(candidate)
            if rank is not None:
                return rank
            for entry in self._patterns:
                if entry.regex.fullmatch(candidate):
                    return entry.index
            for entry in self._prefixes:
                if entry.matches(candidate):
                    return entry.index
        return None

    def exact_rank(self, name: str) -> Optional[int]:
        for candidate in _lookup_candidates(name):
            rank = self._exact.get(candidate)
            if rank is not None:
                return rank
        return None

    def rank_of(self, token: str) -> Optional[int]:
        variants, base = split_variants(token)
        if not variants:
            return self.lookup(token)
        # a prefixed token only matches as written when listed literally (CSS-derived tables)
        rank = self.exact_rank(token)
        if rank is not None or not base:
            return rank
        return self.lookup(base)
