from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from . import splice
from .config import SortConfig, resolve_sort_order
from .order_table import OrderTable
from .patterns import PatternSet, compile_patterns, find_spans
from .sorter import SortedResult, SortOptions, sort_class_list
from .tailwind_order import DEFAULT_SORT_ORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileResult:
    text: str
    changed: bool
    spans: int = 0


class SortEngine:
    """Order table, compiled patterns and sort options, built once and shared read-only.

    Nothing here mutates after construction, so one engine can serve any
    number of worker threads.
    """

    __slots__ = ('_table', '_patterns', '_options')

    def __init__(self, table: OrderTable, patterns: PatternSet, options: Optional[SortOptions] = None):
        self._table = table
        self._patterns = patterns
        self._options = options or SortOptions()

    @classmethod
    def from_config(cls, config: Optional[SortConfig] = None) -> 'SortEngine':
        """Build an engine; every ConfigurationError surfaces here, before any file is touched."""
        config = config or SortConfig()
        table = OrderTable(resolve_sort_order(config))
        patterns = compile_patterns(config.custom_patterns, config.replace_default_patterns)
        options = SortOptions(frozenset(config.allowlist), config.dedupe, config.class_wrapping)
        logger.debug("engine ready: %d order entries, %d patterns", len(table), len(patterns))
        return cls(table, patterns, options)

    @classmethod
    def default(cls) -> 'SortEngine':
        return cls(OrderTable(DEFAULT_SORT_ORDER), compile_patterns())

    @property
    def table(self) -> OrderTable:
        return self._table

    @property
    def patterns(self) -> PatternSet:
        return self._patterns

    @property
    def options(self) -> SortOptions:
        return self._options

    def sort_classes(self, raw: str) -> SortedResult:
        return sort_class_list(raw, self._table, self._options)

    def process_text(self, text: str) -> FileResult:
        """Sort every class list in ``text``. Raises MatchInvariantViolation instead of emitting bad output."""
        spans = find_spans(text, self._patterns)
        replacements = [(span, self.sort_classes(span.text).text) for span in spans]
        new_text, changed = splice.apply(text, replacements)
        return FileResult(new_text, changed, len(spans))
