"""Run configuration for the report pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MANIFEST = "package.json"
DEFAULT_OUTPUT = "packages.md"
DEFAULT_NPM = "npm"
DEFAULT_CONCURRENCY = 8


@dataclass
class ReportConfig:
    """Where to read, where to write, and how to probe.

    Relative paths resolve against the current working directory.
    """

    manifest_path: Path = Path(DEFAULT_MANIFEST)
    output_path: Path = Path(DEFAULT_OUTPUT)
    npm: str = DEFAULT_NPM
    concurrency: int = DEFAULT_CONCURRENCY

    def __post_init__(self) -> None:
        self.manifest_path = Path(self.manifest_path)
        self.output_path = Path(self.output_path)
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {self.concurrency}")
