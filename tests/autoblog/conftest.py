import sys
from pathlib import Path

import pytest

# This repo uses a src/ layout; make it importable without an editable install.
_SRC = str(Path(__file__).resolve().parents[2] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


class DummyLogger:
    """Very small logger stub used by tests."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def _log(self, level: str, msg: str):
        self.records.append((level, str(msg)))

    def info(self, msg: str):
        self._log("info", msg)

    def warning(self, msg: str):
        self._log("warning", msg)

    def error(self, msg: str):
        self._log("error", msg)

    def debug(self, msg: str):
        self._log("debug", msg)

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


class FakeProvider:
    """Scripted TextProvider: each call pops the next outcome.

    An outcome is either a string (returned) or an exception (raised).
    """

    def __init__(self, name: str, outcomes):
        self.name = name
        self._outcomes = list(outcomes)
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_provider():
    """Fixture: factory for scripted providers."""

    def _factory(name: str, *outcomes):
        return FakeProvider(name, outcomes)

    return _factory


@pytest.fixture
def sleeps(monkeypatch):
    """Record backoff sleeps instead of waiting."""

    recorded: list[float] = []
    monkeypatch.setattr("autoblog.llm.fallback.time.sleep", recorded.append)
    return recorded


@pytest.fixture
def dummy_logger():
    return DummyLogger()
