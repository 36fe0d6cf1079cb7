from __future__ import annotations

from typing import List, Sequence, Tuple

from .patterns import MatchSpan, validate_spans


def apply(text: str, replacements: Sequence[Tuple[MatchSpan, str]]) -> Tuple[str, bool]:
    """Replace each span's captured region; every byte outside the spans is copied as is.

    Returns (new_text, changed). ``changed`` is true only when at least one
    replacement differs from what it replaces.
    """
    if not replacements:
        return text, False
    validate_spans(text, [span for span, _ in replacements])

    out: List[str] = []
    cursor = 0
    changed = False
    for span, new in replacements:
        out.append(text[cursor:span.start])
        out.append(new)
        if new != span.text:
            changed = True
        cursor = span.end
    out.append(text[cursor:])
    if not changed:
        return text, False
    return ''.join(out), True
