import itertools
import json
import sys
import types
from pathlib import Path

import pytest

TEST_DATA_DIR = Path(__file__).parent / "test_data"

_module_ids = itertools.count()


@pytest.fixture
def sample_document():
    """The LSP meta model subset used across the tests."""
    with open(TEST_DATA_DIR / "metamodel_sample.json") as f:
        return json.load(f)


@pytest.fixture
def load_generated():
    """Execute generated source as a real module and clean up afterwards.

    Generated dataclasses look their module up in sys.modules, so the
    module is registered there before its code runs.
    """
    loaded = []

    def load(code, name=None):
        name = name or f"generated_lsp_types_{next(_module_ids)}"
        module = types.ModuleType(name)
        sys.modules[name] = module
        loaded.append(name)
        exec(compile(code, f"<{name}>", "exec"), module.__dict__)
        return module

    yield load

    for name in loaded:
        sys.modules.pop(name, None)
