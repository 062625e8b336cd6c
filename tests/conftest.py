import os

import pytest


@pytest.fixture(autouse=True)
def _clear_action_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep inputs and runner variables of the surrounding shell (or CI job) out of tests."""
    for name in list(os.environ):
        if name.startswith(("INPUT_", "GITHUB_")) or name == "RUNNER_DEBUG":
            monkeypatch.delenv(name, raising=False)
