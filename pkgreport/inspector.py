"""PackageInspector — query the package manager for each declared package."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable

import structlog

from pkgreport.config import DEFAULT_CONCURRENCY, DEFAULT_NPM
from pkgreport.models import Manifest, MetadataStatus, PackageMetadata, PackageRecord, ProbeResult

log = structlog.get_logger("pkgreport.inspector")

CommandRunner = Callable[[list[str]], Awaitable[ProbeResult]]


async def run_command(cmd: list[str]) -> ProbeResult:
    """Run *cmd* and capture its trimmed output.

    Never raises for a failing command: a non-zero exit keeps stdout (or
    stderr when stdout is empty) as the error text, and a command that
    cannot be started (missing executable, NUL byte in an argument) keeps
    the exception message.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as exc:
        return ProbeResult(ok=False, error=str(exc))

    stdout, stderr = await proc.communicate()
    out = stdout.decode("utf-8", errors="replace").strip()
    if proc.returncode == 0:
        return ProbeResult(ok=True, output=out)
    err = stderr.decode("utf-8", errors="replace").strip()
    return ProbeResult(ok=False, error=out or err)


def parse_metadata(result: ProbeResult) -> tuple[PackageMetadata | None, MetadataStatus]:
    """Turn an ``npm info --json`` probe into metadata, or ``None`` and why."""
    if not result.ok:
        return None, "probe_failed"
    try:
        data = json.loads(result.output)
    except json.JSONDecodeError:
        return None, "unparsable"
    if not isinstance(data, dict):
        return None, "unparsable"
    return PackageMetadata.from_json(data), "ok"


class PackageInspector:
    """Runs the installed-version and registry-metadata probes.

    Commands are passed as argument lists, so package names never reach a
    shell.
    """

    def __init__(
        self,
        npm: str = DEFAULT_NPM,
        concurrency: int = DEFAULT_CONCURRENCY,
        runner: CommandRunner = run_command,
    ) -> None:
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self._npm = npm
        self._concurrency = concurrency
        self._runner = runner

    async def installed_version(self, name: str) -> ProbeResult:
        return await self._probe(name, "list")

    async def registry_metadata(self, name: str) -> ProbeResult:
        return await self._probe(name, "info", "--json")

    async def _probe(self, name: str, *args: str) -> ProbeResult:
        # npm would parse a leading "-" as an option, not a package name
        if name.startswith("-"):
            return ProbeResult(ok=False, error=f"invalid package name: {name!r}")
        return await self._runner([self._npm, *args, name])

    async def inspect(self, name: str, declared_version: str) -> PackageRecord:
        """Run both probes for one package concurrently."""
        log.info("inspector.package", package=name)
        installed, info = await asyncio.gather(
            self.installed_version(name),
            self.registry_metadata(name),
        )

        if not installed.ok:
            log.warning("inspector.probe_failed", package=name, error=installed.error)

        metadata, status = parse_metadata(info)
        if metadata is None:
            log.warning("inspector.metadata_missing", package=name, status=status)

        return PackageRecord(
            name=name,
            declared_version=declared_version,
            installed=installed,
            metadata=metadata,
            metadata_status=status,
        )

    async def inspect_all(self, manifest: Manifest) -> dict[str, PackageRecord]:
        """Inspect every declared package with bounded concurrency.

        A name declared in both groups is inspected once, with its first
        declared range. The result is keyed by name in declaration order.
        """
        declared: dict[str, str] = {}
        for name, version in manifest.declared():
            declared.setdefault(name, version)

        sem = asyncio.Semaphore(self._concurrency)

        async def _inspect_one(name: str, version: str) -> PackageRecord:
            async with sem:
                return await self.inspect(name, version)

        tasks = [_inspect_one(name, version) for name, version in declared.items()]
        records = await asyncio.gather(*tasks)
        return {record.name: record for record in records}
