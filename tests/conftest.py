import io
from pathlib import Path
from typing import Dict, List

import pytest
from rich.console import Console

from rkl.cli.formatter import PodFormatter
from rkl.core.errors import ExecutionFailure
from rkl.kube.lister import FilePodLister

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeExecutor:
    """Records every command; pods listed in `failing` raise ExecutionFailure."""

    def __init__(self, failing: List[str] = None, outputs: Dict[str, str] = None):
        self.failing = failing or []
        self.outputs = outputs or {}
        self.commands = []
        self.interactive_flags = []

    def run(self, command: str, interactive: bool = False) -> str:
        self.commands.append(command)
        self.interactive_flags.append(interactive)
        if any(pod in command for pod in self.failing):
            raise ExecutionFailure(command, returncode=1, stderr="boom")
        return self.outputs.get(command, f"ok: {command}")


class ScriptedInput:
    """Input provider answering with a fixed line and remembering the prompt."""

    def __init__(self, answer: str):
        self.answer = answer
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def fixture_listing() -> Path:
    return FIXTURES_DIR / "sophon_pods.txt"


@pytest.fixture
def sophon_pods(fixture_listing):
    return FilePodLister(fixture_listing).list_pods()


@pytest.fixture
def menu_output():
    return io.StringIO()


@pytest.fixture
def quiet_formatter(menu_output):
    return PodFormatter(Console(file=menu_output, width=200, color_system=None))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the operator's real config file and candidate size out of every test."""
    monkeypatch.delenv("RKL_CANDIDATE_SIZE", raising=False)
    monkeypatch.setenv("RKL_CONFIG", str(tmp_path / "absent-config.yaml"))
