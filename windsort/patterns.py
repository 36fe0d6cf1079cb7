"""
Locate class-list occurrences in arbitrary text.

Every pattern must define exactly one capture group: the class list itself.
Patterns are applied one after another over the whole text; a match is kept
only if its full extent does not overlap a region already claimed by an
earlier pattern (first match wins by pattern priority, then leftmost start).

Known limits of the default set:
 - template literals containing ``${...}`` and JSX expressions mixing string
   fragments with code are left alone (``$``/``{`` are not class characters)
 - only the first string argument of a ``clsx(...)``-style call is matched
 - Vue ``:class`` bindings are matched only when the whole binding is a single
   quoted string
Anything else belongs in an additional pattern.
"""
from __future__ import annotations

import bisect
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .errors import ConfigurationError, MatchInvariantViolation

logger = logging.getLogger(__name__)

# characters allowed in a class list (arbitrary values and variants included)
_CHARS = r"\w.,:\-\[\]()/#%!@&>*+=~\s"
_NOT_ATTR_PREFIX = r"(?<![\w:.@-])"

DEFAULT_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ('vue-bound-class', r"(?<![\w-])(?::|v-bind:)class\s*=\s*\"\s*'([" + _CHARS + r"]+)'\s*\""),
    ('class-double-quoted', _NOT_ATTR_PREFIX + r"class(?:Name)?\s*=\s*\"([" + _CHARS + r"']+)\""),
    ('class-single-quoted', _NOT_ATTR_PREFIX + r"class(?:Name)?\s*=\s*'([" + _CHARS + r"\"]+)'"),
    ('class-expression', _NOT_ATTR_PREFIX + r"class(?:Name)?\s*=\s*\{\s*[\"'`]([" + _CHARS + r"]+)[\"'`]\s*\}"),
    ('class-function', r"\b(?:clsx|classnames|classNames|cn|cx|cva|twMerge|twJoin)\(\s*[\"'`]([" + _CHARS + r"]+)[\"'`]"),
    ('tagged-template', r"\btw`([" + _CHARS + r"]+)`"),
    ('css-apply', r"@apply[ \t]+([^;{}\n]+?)(?=[ \t]*(?:!important[ \t]*)?;)"),
)


@dataclass(frozen=True)
class MatchSpan:
    start: int
    end: int
    text: str
    match_start: int = -1
    match_end: int = -1
    pattern: int = 0

    def __post_init__(self):
        # plain spans built by hand cover just the captured region
        if self.match_start < 0:
            object.__setattr__(self, 'match_start', self.start)
        if self.match_end < 0:
            object.__setattr__(self, 'match_end', self.end)


@dataclass(frozen=True)
class PatternSet:
    names: Tuple[str, ...]
    regexes: Tuple[re.Pattern, ...]

    def __len__(self) -> int:
        return len(self.regexes)

    def __iter__(self):
        return iter(zip(self.names, self.regexes))


PatternSpec = Union[str, Tuple[str, str]]


def _compile_one(name: str, source: str) -> re.Pattern:
    if not isinstance(source, str) or not source:
        raise ConfigurationError(f"pattern {name!r} must be a non-empty string")
    try:
        regex = re.compile(source)
    except re.error as e:
        raise ConfigurationError(f"pattern {name!r} is not a valid regular expression: {e}") from e
    if regex.groups != 1:
        raise ConfigurationError(
            f"pattern {name!r} must define exactly one capture group for the class list, found {regex.groups}"
        )
    return regex


def compile_patterns(additional: Iterable[PatternSpec] = (), replace_default: bool = False) -> PatternSet:
    """Compile the default patterns followed by ``additional`` ones, or ``additional`` alone."""
    specs: List[Tuple[str, str]] = [] if replace_default else list(DEFAULT_PATTERNS)
    for i, spec in enumerate(additional):
        if isinstance(spec, tuple):
            specs.append(spec)
        else:
            specs.append((f"custom-{i + 1}", spec))
    if not specs:
        raise ConfigurationError('no class patterns configured')
    names = tuple(name for name, _ in specs)
    regexes = tuple(_compile_one(name, source) for name, source in specs)
    return PatternSet(names, regexes)


def _overlaps(claimed: List[MatchSpan], pos: int, start: int, end: int) -> bool:
    if pos > 0 and claimed[pos - 1].match_end > start:
        return True
    if pos < len(claimed) and claimed[pos].match_start < end:
        return True
    return False


def find_spans(text: str, patterns: PatternSet) -> List[MatchSpan]:
    claimed: List[MatchSpan] = []
    starts: List[int] = []
    for index, (name, regex) in enumerate(patterns):
        found = 0
        for m in regex.finditer(text):
            start, end = m.span(1)
            match_start, match_end = m.span()
            if start < 0 or match_end == match_start:
                continue
            pos = bisect.bisect_left(starts, match_start)
            if _overlaps(claimed, pos, match_start, match_end):
                continue
            starts.insert(pos, match_start)
            claimed.insert(pos, MatchSpan(start, end, m.group(1), match_start, match_end, index))
            found += 1
        if found:
            logger.debug("pattern %s matched %d span(s)", name, found)
    validate_spans(text, claimed)
    return claimed


def validate_spans(text: str, spans: Sequence[MatchSpan]) -> None:
    prev_end: Optional[int] = None
    for span in spans:
        if not 0 <= span.start <= span.end <= len(text):
            raise MatchInvariantViolation(f"span {span.start}:{span.end} lies outside the text", span.start)
        if text[span.start:span.end] != span.text:
            raise MatchInvariantViolation(f"span {span.start}:{span.end} does not match its captured text", span.start)
        if prev_end is not None and span.start < prev_end:
            raise MatchInvariantViolation(
                f"span {span.start}:{span.end} overlaps or precedes the previous span ending at {prev_end}", span.start
            )
        prev_end = span.end
