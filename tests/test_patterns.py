import pytest

from windsort.errors import ConfigurationError, MatchInvariantViolation
from windsort.patterns import MatchSpan, compile_patterns, find_spans, validate_spans

DEFAULTS = compile_patterns()


def captured(text, patterns=DEFAULTS):
    return [s.text for s in find_spans(text, patterns)]


def test_html_attributes():
    assert captured('<div class="p-4 flex"></div>') == ['p-4 flex']
    assert captured("<div class='p-4 flex'></div>") == ['p-4 flex']
    assert captured('<a class = "a b">') == ['a b']


def test_jsx_forms():
    assert captured('<div className="p-4 flex" />') == ['p-4 flex']
    assert captured('<div className={"p-4 flex"} />') == ['p-4 flex']
    assert captured("<div className={'p-4 flex'} />") == ['p-4 flex']
    assert captured('<div className={`p-4 flex`} />') == ['p-4 flex']


def test_template_literal_with_interpolation_is_left_alone():
    assert captured('<div className={`p-4 ${active} flex`} />') == []


def test_vue_bindings():
    assert captured('<div :class="\'p-4 flex\'"></div>') == ['p-4 flex']
    assert captured('<div v-bind:class="\'p-4 flex\'"></div>') == ['p-4 flex']
    assert captured('<div :class="{ \'p-4\': active }"></div>') == []


def test_call_style_and_apply():
    assert captured('const c = clsx("p-4 flex", on && "x")') == ['p-4 flex']
    assert captured("cn('p-4 flex')") == ['p-4 flex']
    assert captured('tw`p-4 flex`') == ['p-4 flex']
    assert captured('.btn { @apply p-4 flex; }') == ['p-4 flex']
    assert captured('.btn { @apply p-4 flex !important; }') == ['p-4 flex']


def test_other_attributes_are_not_class_lists():
    assert captured('<div data-class="p-4 flex" subclass="x y"></div>') == []


def test_multiple_occurrences_sorted_by_start():
    text = '<a class="one"></a><b className={"two"}></b><i class="three"></i>'
    spans = find_spans(text, DEFAULTS)
    assert [s.text for s in spans] == ['one', 'two', 'three']
    assert [s.start for s in spans] == sorted(s.start for s in spans)
    for s in spans:
        assert text[s.start:s.end] == s.text


def test_earlier_pattern_wins_overlaps():
    patterns = compile_patterns([r'b(c)d', r'a(b)'], replace_default=True)
    spans = find_spans('abcd', patterns)
    assert len(spans) == 1
    assert (spans[0].start, spans[0].end, spans[0].pattern) == (2, 3, 0)


def test_later_pattern_fills_unclaimed_regions():
    patterns = compile_patterns([r'<div class="([^"]*)">', r'class="([^"]*)"'], replace_default=True)
    spans = find_spans('<div class="a"><span class="b">', patterns)
    assert [(s.text, s.pattern) for s in spans] == [('a', 0), ('b', 1)]


def test_additional_patterns_follow_defaults():
    patterns = compile_patterns([r'classes:\s*"([^"]*)"'])
    assert patterns.names[-1] == 'custom-1'
    assert captured('<x classes: "p-4 flex">', patterns) == ['p-4 flex']


def test_invalid_patterns_fail_at_compile_time():
    with pytest.raises(ConfigurationError):
        compile_patterns(['class="(unclosed'])
    with pytest.raises(ConfigurationError):
        compile_patterns(['class="[^"]*"'])
    with pytest.raises(ConfigurationError):
        compile_patterns([r'(class)="([^"]*)"'])
    with pytest.raises(ConfigurationError):
        compile_patterns([], replace_default=True)


def test_validate_spans_rejects_overlap_and_mismatch():
    text = 'abcdef'
    validate_spans(text, [MatchSpan(0, 2, 'ab'), MatchSpan(2, 4, 'cd')])
    with pytest.raises(MatchInvariantViolation):
        validate_spans(text, [MatchSpan(0, 3, 'abc'), MatchSpan(2, 4, 'cd')])
    with pytest.raises(MatchInvariantViolation):
        validate_spans(text, [MatchSpan(2, 4, 'cd'), MatchSpan(0, 2, 'ab')])
    with pytest.raises(MatchInvariantViolation):
        validate_spans(text, [MatchSpan(0, 2, 'xx')])
    with pytest.raises(MatchInvariantViolation):
        validate_spans(text, [MatchSpan(4, 9, 'ef')])
