from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List

from .classify import classify
from .errors import ConfigurationError
from .order_table import OrderTable

NO_WRAPPING = 'no-wrapping'
COMMA_SINGLE_QUOTES = 'comma-single-quotes'
COMMA_DOUBLE_QUOTES = 'comma-double-quotes'
CLASS_WRAPPINGS = (NO_WRAPPING, COMMA_SINGLE_QUOTES, COMMA_DOUBLE_QUOTES)

_QUOTES = {COMMA_SINGLE_QUOTES: "'", COMMA_DOUBLE_QUOTES: '"'}


@dataclass(frozen=True)
class SortOptions:
    allowlist: FrozenSet[str] = frozenset()
    dedupe: bool = True
    class_wrapping: str = NO_WRAPPING

    def __post_init__(self):
        if self.class_wrapping not in CLASS_WRAPPINGS:
            raise ConfigurationError(
                f"unknown class wrapping {self.class_wrapping!r} (expected one of {', '.join(CLASS_WRAPPINGS)})"
            )


@dataclass(frozen=True)
class SortedResult:
    original: str
    text: str

    @property
    def changed(self) -> bool:
        return self.text != self.original


def split_tokens(body: str, wrapping: str = NO_WRAPPING) -> List[str]:
    if wrapping == NO_WRAPPING:
        return body.split()
    quote = _QUOTES[wrapping]
    tokens: List[str] = []
    for piece in body.split(','):
        tokens.extend(piece.strip().strip(quote).split())
    return tokens


def join_tokens(tokens: List[str], wrapping: str = NO_WRAPPING) -> str:
    if wrapping == NO_WRAPPING:
        return ' '.join(tokens)
    quote = _QUOTES[wrapping]
    return ', '.join(f"{quote}{t}{quote}" for t in tokens)


def order_tokens(tokens: List[str], table: OrderTable, allowlist: FrozenSet[str] = frozenset(),
                 dedupe: bool = True) -> List[str]:
    """Allowlisted tokens first (as written), then ranked tokens by rank, then custom tokens (as written).

    Allowlisted tokens are never deduplicated.
    """
    kept: List[str] = []
    ranked = []
    custom: List[str] = []
    seen = set()
    for pos, t in enumerate(tokens):
        if t in allowlist:
            kept.append(t)
            continue
        if dedupe:
            if t in seen:
                continue
            seen.add(t)
        rt = classify(t, table, pos)
        if rt.is_custom:
            custom.append(t)
        else:
            ranked.append(rt)
    # list.sort is stable: equal keys keep input order
    ranked.sort(key=lambda rt: rt.sort_key())
    return kept + [rt.token for rt in ranked] + custom


def sort_class_list(raw: str, table: OrderTable, options: SortOptions = SortOptions()) -> SortedResult:
    body = raw.strip()
    if not body:
        return SortedResult(raw, raw)
    lead = raw[:len(raw) - len(raw.lstrip())]
    trail = raw[len(raw.rstrip()):]
    tokens = split_tokens(body, options.class_wrapping)
    ordered = order_tokens(tokens, table, options.allowlist, options.dedupe)
    return SortedResult(raw, lead + join_tokens(ordered, options.class_wrapping) + trail)
