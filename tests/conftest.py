"""Pytest configuration and shared fixtures."""

import json

import pytest

from quickdict.config import QuickDictConfig
from quickdict.exceptions import ResourceFetchError
from quickdict.orchestration import AppContext
from quickdict.presenters import NullPresenter

SAMPLE_ENTRIES = {
    "run": '<h2>run</h2><span class="pos">verb</span> to move fast on foot. '
    '<img src="images/run.png"><a href="sounds\\uk\\run.mp3">play</a>',
    "running": "@@@LINK=run",
    "runner": "<h2>runner</h2>a person who runs; an athlete",
    "ran": "@@@LINK=run",
    "gone": "@@@LINK=go",
    "ice cream": "<h2>ice cream</h2>a frozen dessert",
    "icecream": "@@@LINK=ice cream",
    "cafe": "<h2>cafe</h2>a small restaurant",
    "case": "<h2>case</h2>a container",
    "cage": "<h2>cage</h2>a structure of bars",
}


class FakeIndex:
    """A DictionaryIndex implementation that records every call."""

    def __init__(self, entries=None, suggestions=None, fail_load=False, fail_suggest=False):
        self.entries = dict(entries if entries is not None else SAMPLE_ENTRIES)
        self.suggestions = list(suggestions or [])
        self.fail_load = fail_load
        self.fail_suggest = fail_suggest
        self.loaded = False
        self.load_calls = 0
        self.lookups = []
        self.closed = False

    @property
    def name(self) -> str:
        return "fake"

    def is_loaded(self) -> bool:
        return self.loaded

    def load(self) -> bool:
        self.load_calls += 1
        if self.fail_load:
            from quickdict.exceptions import SetupError

            raise SetupError("cannot open fake dictionary")
        self.loaded = True
        return True

    def lookup(self, word):
        self.lookups.append(word)
        return self.entries.get(word)

    def prefix(self, text):
        return sorted(w for w in self.entries if w.lower().startswith(text.lower()))

    def suggest(self, word, max_distance):
        if self.fail_suggest:
            raise RuntimeError("suggest exploded")
        return list(self.suggestions)

    def close(self):
        self.closed = True
        self.loaded = False


class FakeStore:
    """A ResourceStore implementation with scripted contents and failures."""

    def __init__(self, resources=None, broken=()):
        self.resources = dict(resources or {})
        self.broken = set(broken)
        self.calls = []
        self.loaded = False
        self.closed = False

    def load(self):
        self.loaded = True
        return True

    def locate(self, name):
        self.calls.append(name)
        if name in self.broken:
            raise ResourceFetchError(name, f"corrupt resource {name}")
        return self.resources.get(name)

    def close(self):
        self.closed = True


@pytest.fixture
def sample_dictionary(tmp_path):
    """Write the sample entries to a JSON dictionary file."""
    path = tmp_path / "dictionary.json"
    path.write_text(json.dumps(SAMPLE_ENTRIES, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def resource_dir(tmp_path):
    """Create an extracted resource directory with an image and a sound."""
    root = tmp_path / "resources"
    (root / "images").mkdir(parents=True)
    (root / "sounds" / "uk").mkdir(parents=True)
    (root / "images" / "run.png").write_bytes(b"\x89PNGfake-png")
    (root / "sounds" / "uk" / "run.mp3").write_bytes(b"\xff\xfbfake-mp3")
    return root


@pytest.fixture
def test_config(sample_dictionary, resource_dir):
    """Provide a test configuration with temporary paths and no network."""
    return QuickDictConfig(
        dictionary_path=sample_dictionary,
        resource_dir=resource_dir,
        resource_cache_capacity=4,
        use_online_fallback=False,
    )


@pytest.fixture
def fake_index():
    """Provide a recording fake dictionary index."""
    return FakeIndex()


@pytest.fixture
def fake_store():
    """Provide a fake resource store holding two assets."""
    return FakeStore({"run.png": b"png-bytes", "run.mp3": b"mp3-bytes"})


@pytest.fixture
def make_context(test_config):
    """Factory fixture for AppContext instances over fakes."""

    def _make(index=None, store=None, remote=None, config=None):
        return AppContext(
            config or test_config,
            index=index if index is not None else FakeIndex(),
            store=store if store is not None else FakeStore(),
            remote=remote,
        )

    return _make


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_index():
    """Factory fixture for recording fake indexes."""
    return FakeIndex


@pytest.fixture
def make_store():
    """Factory fixture for scripted fake resource stores."""
    return FakeStore
