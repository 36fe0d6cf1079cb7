import os

import pytest

from windsort.engine import SortEngine
from windsort.order_table import OrderTable


@pytest.fixture
def small_table():
    return OrderTable(['flex', 'items-center', 'bg-red-500', 'p-4'])


@pytest.fixture(scope='session')
def engine():
    return SortEngine.default()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Drop WINDSORT_* variables and put back whatever load_dotenv added."""
    saved = dict(os.environ)
    for key in list(os.environ):
        if key.startswith('WINDSORT_'):
            del os.environ[key]
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    os.environ.clear()
    os.environ.update(saved)
