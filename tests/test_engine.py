import pytest

from windsort.config import SortConfig
from windsort.engine import SortEngine
from windsort.errors import ConfigurationError, MatchInvariantViolation
from windsort.patterns import MatchSpan


def test_two_class_lists_sorted_independently(engine):
    text = '<a class="p-4 flex"></a>\n<b class="custom-b mt-2 block"></b>\n'
    result = engine.process_text(text)
    assert result.text == '<a class="flex p-4"></a>\n<b class="mt-2 block custom-b"></b>\n'
    assert result.changed
    assert result.spans == 2


def test_file_without_matches_is_untouched(engine):
    text = 'plain text\r\nwith "quotes" and no class lists\r\n'
    result = engine.process_text(text)
    assert result.text == text
    assert not result.changed
    assert result.spans == 0


def test_sorted_file_reports_no_change(engine):
    text = '<div class="flex items-center p-4"></div>'
    result = engine.process_text(text)
    assert result.text == text
    assert not result.changed


def test_jsx_file(engine):
    text = (
        'export const Card = () => (\n'
        '  <div className="shadow p-6 rounded-xl bg-white">\n'
        '    <h2 className={`font-bold text-xl`}>Title</h2>\n'
        '  </div>\n'
        ')\n'
    )
    result = engine.process_text(text)
    assert '<div className="rounded-xl bg-white p-6 shadow">' in result.text
    assert '<h2 className={`text-xl font-bold`}>' in result.text


def test_from_config_options():
    engine = SortEngine.from_config(SortConfig(
        allowlist=frozenset({'js-hook'}),
        dedupe=False,
        sort_order_override=('flex', 'p-*'),
    ))
    assert engine.sort_classes('p-4 js-hook flex flex').text == 'js-hook flex flex p-4'


def test_from_config_custom_pattern_only():
    engine = SortEngine.from_config(SortConfig(
        custom_patterns=(r'classes=\[([^\]]*)\]',),
        replace_default_patterns=True,
    ))
    result = engine.process_text('<x classes=[p-4 flex] class="p-4 flex">')
    assert result.text == '<x classes=[flex p-4] class="p-4 flex">'


def test_from_config_errors_surface_at_startup():
    with pytest.raises(ConfigurationError):
        SortEngine.from_config(SortConfig(custom_patterns=('class="(',)))
    with pytest.raises(ConfigurationError):
        SortEngine.from_config(SortConfig(sort_order_override=()))
    with pytest.raises(ConfigurationError):
        SortEngine.from_config(SortConfig(sort_order_override=('flex', 'flex')))


def test_invariant_violation_propagates(engine, monkeypatch):
    text = '<a class="p-4 flex">'

    def broken(text, patterns):
        return [MatchSpan(10, 17, 'p-4 fle'), MatchSpan(12, 18, '4 flex')]

    monkeypatch.setattr('windsort.engine.find_spans', broken)
    with pytest.raises(MatchInvariantViolation):
        engine.process_text(text)
