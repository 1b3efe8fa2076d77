"""Shared pytest fixtures for pkgreport tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pkgreport.models import ProbeResult

LEFT_PAD_INFO = json.dumps(
    {"version": "1.3.0", "homepage": "https://x", "description": "pad left"}
)


class FakeRunner:
    """Stands in for ``run_command``; answers from canned probe results.

    ``installed`` / ``info`` map package names to :class:`ProbeResult`.
    Unknown packages get a failing probe.
    """

    def __init__(
        self,
        installed: dict[str, ProbeResult] | None = None,
        info: dict[str, ProbeResult] | None = None,
    ) -> None:
        self.installed = installed or {}
        self.info = info or {}
        self.calls: list[list[str]] = []

    async def __call__(self, cmd: list[str]) -> ProbeResult:
        self.calls.append(cmd)
        name = cmd[-1]
        if cmd[1] == "list":
            return self.installed.get(name, ProbeResult(ok=False, error="(empty)"))
        if cmd[1] == "info":
            return self.info.get(name, ProbeResult(ok=False, error="E404"))
        raise AssertionError(f"unexpected command: {cmd}")


@pytest.fixture
def left_pad_runner():
    return FakeRunner(
        installed={"left-pad": ProbeResult(ok=True, output="left-pad@1.3.0")},
        info={"left-pad": ProbeResult(ok=True, output=LEFT_PAD_INFO)},
    )


@pytest.fixture
def write_manifest(tmp_path):
    def _write(data) -> Path:
        path = tmp_path / "package.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    return _write


@pytest.fixture
def make_runner():
    return FakeRunner
