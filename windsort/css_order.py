"""
Derive a sort order from compiled CSS (a build output file or a dev server URL).

Class selectors are collected in order of first appearance. This is a
selector scan, not a CSS parser: comments are dropped, @-rule preludes are
skipped, and escaped characters are unescaped (``.md\\:flex`` -> ``md:flex``).
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import List

import requests

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_SELECTOR_RE = re.compile(r"([^{};]+)\{")
_CLASS_RE = re.compile(r"\.(-?(?:[_a-zA-Z]|\\.)(?:\\[0-9a-fA-F]{1,6}\s?|\\.|[\w-])*)")
_HEX_ESCAPE_RE = re.compile(r"\\([0-9a-fA-F]{1,6})\s?")
_CHAR_ESCAPE_RE = re.compile(r"\\(.)", re.S)
# dev servers serve CSS imported from JS as a module wrapping the stylesheet in a string
_VITE_CSS_RE = re.compile(r"__vite__css\s*=\s*(\"(?:\\.|[^\"\\])*\")", re.S)


def strip_comments(css: str) -> str:
    return re.sub(r"/\*.*?\*/", "", css, flags=re.S)


def unescape_class(name: str) -> str:
    name = _HEX_ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), name)
    return _CHAR_ESCAPE_RE.sub(r"\1", name)


def class_order_from_css(css_text: str) -> List[str]:
    order: List[str] = []
    seen = set()
    for m in _SELECTOR_RE.finditer(strip_comments(css_text)):
        prelude = m.group(1).strip()
        if not prelude or prelude.startswith('@'):
            continue
        for cm in _CLASS_RE.finditer(prelude):
            name = unescape_class(cm.group(1))
            if name in seen:
                continue
            seen.add(name)
            order.append(name)
    return order


def unwrap_vite_module(text: str) -> str:
    m = _VITE_CSS_RE.search(text)
    if not m:
        return text
    return json.loads(m.group(1))


def read_css_file(path) -> str:
    p = Path(path)
    try:
        return p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"could not read CSS file {p}: {e}") from e


def fetch_css(url: str, verify: bool = True, timeout: float = 30.0) -> str:
    logger.info("GET %s", url)
    try:
        resp = requests.get(url, timeout=timeout, verify=verify)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ConfigurationError(f"could not fetch CSS from {url}: {e}") from e
    return unwrap_vite_module(resp.text)


def sort_order_from_css(css_text: str, source: str = '<css>') -> List[str]:
    order = class_order_from_css(css_text)
    if not order:
        raise ConfigurationError(f"no class selectors found in {source}")
    logger.info("loaded %d classes from %s", len(order), source)
    return order
