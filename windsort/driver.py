"""
File / stdin driver around SortEngine.

Paths are taken as given (no globbing). Modes:

  write    rewrite files whose class lists changed (atomic replace)
  dry-run  print the sorted text of every file, write nothing
  check    report files that would change, write nothing
  diff     print a unified diff for files that would change

Exit codes

  0   success (check mode: nothing to change)
  1   check mode found files that need sorting
  2   at least one file could not be processed
"""
from __future__ import annotations

import difflib
import logging
import os
import shutil
import sys
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .engine import FileResult, SortEngine
from .errors import MatchInvariantViolation

logger = logging.getLogger(__name__)

WRITE = 'write'
DRY_RUN = 'dry-run'
CHECK = 'check'
DIFF = 'diff'
MODES = (WRITE, DRY_RUN, CHECK, DIFF)

EXIT_OK = 0
EXIT_NEEDS_SORTING = 1
EXIT_ERROR = 2


@dataclass
class FileOutcome:
    path: str
    changed: bool = False
    spans: int = 0
    error: Optional[str] = None
    output: Optional[str] = None


@dataclass
class RunReport:
    mode: str
    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def changed(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.changed and o.error is None]

    @property
    def errored(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.error is not None]

    @property
    def exit_code(self) -> int:
        if self.errored:
            return EXIT_ERROR
        if self.mode == CHECK and self.changed:
            return EXIT_NEEDS_SORTING
        return EXIT_OK


def read_text(path) -> str:
    # newline='' keeps \r\n as is so untouched bytes stay untouched
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def write_text_atomic(path, text: str) -> None:
    p = Path(path)
    fd, tmp = tempfile.mkstemp(dir=str(p.parent), prefix=f".{p.name}.", suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        shutil.copymode(str(p), tmp)
        os.replace(tmp, str(p))
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def render_diff(path: str, before: str, after: str) -> str:
    lines = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    return ''.join(lines)


def process_file(engine: SortEngine, path, mode: str = WRITE) -> FileOutcome:
    """Process one file. Any failure leaves the file untouched and is returned, not raised."""
    name = str(path)
    try:
        src = read_text(path)
        result = engine.process_text(src)
        outcome = FileOutcome(name, result.changed, result.spans)
        if mode == WRITE and result.changed:
            write_text_atomic(path, result.text)
        elif mode == DRY_RUN:
            outcome.output = result.text
        elif mode == DIFF and result.changed:
            outcome.output = render_diff(name, src, result.text)
        return outcome
    except MatchInvariantViolation as e:
        logger.error("%s: internal span error, file left untouched: %s", name, e)
        return FileOutcome(name, error=f"internal span error: {e}")
    except UnicodeDecodeError as e:
        return FileOutcome(name, error=f"not valid UTF-8: {e.reason} at byte {e.start}")
    except OSError as e:
        return FileOutcome(name, error=e.strerror or str(e))


def _report(outcome: FileOutcome, mode: str, out: TextIO, err: TextIO, quiet: bool) -> None:
    if outcome.error is not None:
        print(f"[ERROR] {outcome.path}: {outcome.error}", file=err)
        return
    if mode == DRY_RUN:
        if not quiet:
            print(f"[DRY-RUN] {outcome.path}", file=out)
        out.write(outcome.output or '')
        return
    if mode == DIFF:
        if outcome.output:
            out.write(outcome.output)
        return
    if quiet:
        return
    if mode == CHECK:
        if outcome.changed:
            print(f"[CHECK] {outcome.path}: needs sorting", file=out)
    elif outcome.changed:
        print(f"[SORT] {outcome.path}: sorted {outcome.spans} class list(s)", file=out)


def run(engine: SortEngine, paths: Iterable, mode: str = WRITE, workers: Optional[int] = None,
        quiet: bool = False, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> RunReport:
    """Process ``paths`` on a thread pool, one task per file; report in input order."""
    if mode not in MODES:
        raise ValueError(f"unknown mode {mode!r} (expected one of {', '.join(MODES)})")
    out = out or sys.stdout
    err = err or sys.stderr
    paths = list(paths)
    report = RunReport(mode)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for outcome in pool.map(lambda p: process_file(engine, p, mode), paths):
            report.outcomes.append(outcome)
            _report(outcome, mode, out, err, quiet)
    if not quiet:
        tag = 'CHECK' if mode in (CHECK, DIFF) else 'SORT'
        print(
            f"[{tag}] files={len(report.outcomes)} changed={len(report.changed)} errors={len(report.errored)}",
            file=err,
        )
    return report


def process_stream(engine: SortEngine, src: Optional[TextIO] = None, dst: Optional[TextIO] = None) -> FileResult:
    """Read all of ``src`` (stdin), write the sorted text to ``dst`` (stdout)."""
    src = src or sys.stdin
    dst = dst or sys.stdout
    result = engine.process_text(src.read())
    dst.write(result.text)
    return result
