from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / 'examples'


@pytest.fixture
def example_source():
    """Return the source text of an example program by file name."""
    def load(name: str) -> str:
        with open(EXAMPLES_DIR / name, 'r', encoding='utf-8') as f:
            return f.read()
    return load


@pytest.fixture
def example_path():
    def resolve(name: str) -> str:
        return str(EXAMPLES_DIR / name)
    return resolve
