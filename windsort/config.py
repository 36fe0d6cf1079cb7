"""
Configuration: a JSON config file, environment variables (``.env`` supported)
and explicit keyword overrides, applied in that order.

JSON keys (all optional):

  sortOrder            list of order entries (``flex``, ``p-*``, ``re:...``)
  customRegex          one pattern or a list of patterns
  replaceDefaultRegex  true to use only customRegex
  allowlist            tokens that are never reordered
  allowDuplicates      true to keep repeated tokens
  classWrapping        no-wrapping | comma-single-quotes | comma-double-quotes

Environment:

  WINDSORT_CONFIG_FILE, WINDSORT_CUSTOM_REGEX, WINDSORT_REPLACE_DEFAULT_REGEX,
  WINDSORT_ALLOWLIST (comma separated), WINDSORT_ALLOW_DUPLICATES,
  WINDSORT_CLASS_WRAPPING, WINDSORT_OUTPUT_CSS_FILE, WINDSORT_VITE_CSS,
  WINDSORT_SKIP_SSL_VERIFICATION, WINDSORT_LOG_LEVEL
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from . import css_order
from .errors import ConfigurationError
from .sorter import CLASS_WRAPPINGS, NO_WRAPPING
from .tailwind_order import DEFAULT_SORT_ORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortConfig:
    custom_patterns: Tuple[str, ...] = ()
    replace_default_patterns: bool = False
    allowlist: FrozenSet[str] = frozenset()
    dedupe: bool = True
    sort_order_override: Optional[Tuple[str, ...]] = None
    class_wrapping: str = NO_WRAPPING
    css_file: Optional[str] = None
    css_url: Optional[str] = None
    skip_ssl_verification: bool = False


def _str_list(key: str, value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"config key {key!r} must be a string or a list of strings")
    return list(value)


def _bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"config key {key!r} must be true or false")
    return value


def _wrapping(key: str, value: Any) -> str:
    if value not in CLASS_WRAPPINGS:
        raise ConfigurationError(f"config key {key!r} must be one of {', '.join(CLASS_WRAPPINGS)}")
    return value


def _file_changes(data: Dict[str, Any], source: str) -> Dict[str, Any]:
    changes: Dict[str, Any] = {}
    for key, value in data.items():
        if key == 'sortOrder':
            if not isinstance(value, list):
                raise ConfigurationError(f"config key 'sortOrder' must be a list in {source}")
            changes['sort_order_override'] = tuple(_str_list(key, value))
        elif key == 'customRegex':
            changes['custom_patterns'] = tuple(_str_list(key, value))
        elif key == 'replaceDefaultRegex':
            changes['replace_default_patterns'] = _bool(key, value)
        elif key == 'allowlist':
            changes['allowlist'] = frozenset(_str_list(key, value))
        elif key == 'allowDuplicates':
            changes['dedupe'] = not _bool(key, value)
        elif key == 'classWrapping':
            changes['class_wrapping'] = _wrapping(key, value)
        else:
            logger.warning("ignoring unknown config key %r in %s", key, source)
    return changes


def load_config_file(path, base: Optional[SortConfig] = None) -> SortConfig:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding='utf-8'))
    except OSError as e:
        raise ConfigurationError(f"could not read config file {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"config file {p} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {p} must contain a JSON object")
    return replace(base or SortConfig(), **_file_changes(data, str(p)))


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() == 'true'


def config_from_env(env_file=None, base: Optional[SortConfig] = None) -> SortConfig:
    load_dotenv(env_file or find_dotenv(usecwd=True))

    config = base or SortConfig()
    config_file = os.getenv('WINDSORT_CONFIG_FILE')
    if config_file:
        config = load_config_file(config_file, config)

    changes: Dict[str, Any] = {}
    regex = os.getenv('WINDSORT_CUSTOM_REGEX')
    if regex:
        changes['custom_patterns'] = (regex,)
    replace_default = _env_flag('WINDSORT_REPLACE_DEFAULT_REGEX')
    if replace_default is not None:
        changes['replace_default_patterns'] = replace_default
    allowlist = os.getenv('WINDSORT_ALLOWLIST')
    if allowlist:
        changes['allowlist'] = frozenset(s.strip() for s in allowlist.split(',') if s.strip())
    allow_duplicates = _env_flag('WINDSORT_ALLOW_DUPLICATES')
    if allow_duplicates is not None:
        changes['dedupe'] = not allow_duplicates
    wrapping = os.getenv('WINDSORT_CLASS_WRAPPING')
    if wrapping:
        changes['class_wrapping'] = _wrapping('WINDSORT_CLASS_WRAPPING', wrapping.strip())
    css_file = os.getenv('WINDSORT_OUTPUT_CSS_FILE')
    if css_file:
        changes['css_file'] = css_file
    css_url = os.getenv('WINDSORT_VITE_CSS')
    if css_url:
        changes['css_url'] = css_url
    skip_ssl = _env_flag('WINDSORT_SKIP_SSL_VERIFICATION')
    if skip_ssl is not None:
        changes['skip_ssl_verification'] = skip_ssl
    return replace(config, **changes)


def load_config(config_file=None, env_file=None, **overrides) -> SortConfig:
    """Config file, then environment, then keyword overrides."""
    config = load_config_file(config_file) if config_file else SortConfig()
    config = config_from_env(env_file, config)
    return replace(config, **overrides) if overrides else config


def resolve_sort_order(config: SortConfig) -> Tuple[str, ...]:
    """Pick the order table source: sortOrder, then a CSS file, then a CSS URL, then the built-in table."""
    sources = [s for s in (config.sort_order_override, config.css_file, config.css_url) if s]
    if len(sources) > 1:
        logger.warning("several sort order sources configured; using the first of sortOrder, CSS file, CSS URL")
    if config.sort_order_override is not None:
        if not config.sort_order_override:
            raise ConfigurationError('sortOrder must not be empty')
        return tuple(config.sort_order_override)
    if config.css_file:
        text = css_order.read_css_file(config.css_file)
        return tuple(css_order.sort_order_from_css(text, config.css_file))
    if config.css_url:
        text = css_order.fetch_css(config.css_url, verify=not config.skip_ssl_verification)
        return tuple(css_order.sort_order_from_css(text, config.css_url))
    return DEFAULT_SORT_ORDER
