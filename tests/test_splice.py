import random

import pytest

from windsort.errors import MatchInvariantViolation
from windsort.patterns import MatchSpan
from windsort.splice import apply


def test_no_spans_returns_input():
    text = '<p>nothing here</p>'
    new, changed = apply(text, [])
    assert new is text
    assert changed is False


def test_replaces_spans_at_both_ends():
    text = 'abcdef'
    new, changed = apply(text, [(MatchSpan(0, 2, 'ab'), 'XY'), (MatchSpan(4, 6, 'ef'), 'Z')])
    assert new == 'XYcdZ'
    assert changed is True


def test_identical_replacements_are_not_a_change():
    text = 'x class="a b" y'
    new, changed = apply(text, [(MatchSpan(9, 12, 'a b'), 'a b')])
    assert new == text
    assert changed is False


def test_overlapping_spans_fail_closed():
    with pytest.raises(MatchInvariantViolation):
        apply('abcdef', [(MatchSpan(0, 3, 'abc'), 'x'), (MatchSpan(2, 4, 'cd'), 'y')])


def test_text_outside_spans_is_preserved():
    rng = random.Random(7)
    alphabet = 'ab \n\r\t"<>=é'
    for _ in range(200):
        text = ''.join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
        cuts = sorted(rng.sample(range(len(text) + 1), k=min(len(text) + 1, 2 * rng.randint(0, 3))))
        spans = [MatchSpan(a, b, text[a:b]) for a, b in zip(cuts[::2], cuts[1::2])]
        replacements = [(s, s.text[::-1].upper()) for s in spans]
        new, _ = apply(text, replacements)

        outside_before = []
        outside_after = []
        cursor_old = cursor_new = 0
        for span, rep in replacements:
            outside_before.append(text[cursor_old:span.start])
            gap = span.start - cursor_old
            outside_after.append(new[cursor_new:cursor_new + gap])
            cursor_new += gap + len(rep)
            cursor_old = span.end
        outside_before.append(text[cursor_old:])
        outside_after.append(new[cursor_new:])
        assert outside_after == outside_before
