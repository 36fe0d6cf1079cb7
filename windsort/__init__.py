"""
windsort: put utility classes in markup/template files into a canonical order.

    engine = SortEngine.from_config(load_config())
    result = engine.process_text('<div class="p-4 flex">')
    result.text     # '<div class="flex p-4">'
    result.changed  # True

    setup_logging()
    report = run(engine, ['index.html'], mode='check')
    report.exit_code  # 1 when index.html needs sorting
"""
from .classify import RankedToken, classify
from .config import SortConfig, config_from_env, load_config, load_config_file
from .driver import FileOutcome, RunReport, process_file, process_stream, run
from .engine import FileResult, SortEngine
from .errors import ConfigurationError, MatchInvariantViolation, WindsortError
from .log import setup_logging
from .order_table import CanonicalEntry, OrderTable
from .patterns import MatchSpan, PatternSet, compile_patterns, find_spans
from .sorter import SortedResult, SortOptions, sort_class_list
from .splice import apply

__version__ = '0.1.0'

__all__ = [
    'CanonicalEntry',
    'ConfigurationError',
    'FileOutcome',
    'FileResult',
    'MatchInvariantViolation',
    'MatchSpan',
    'OrderTable',
    'PatternSet',
    'RankedToken',
    'RunReport',
    'SortConfig',
    'SortEngine',
    'SortOptions',
    'SortedResult',
    'WindsortError',
    'apply',
    'classify',
    'compile_patterns',
    'config_from_env',
    'find_spans',
    'load_config',
    'load_config_file',
    'process_file',
    'process_stream',
    'run',
    'setup_logging',
    'sort_class_list',
]
