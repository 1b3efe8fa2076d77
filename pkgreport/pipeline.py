"""Report pipeline: manifest -> probes -> markdown -> file."""

from __future__ import annotations

import structlog

from pkgreport.config import ReportConfig
from pkgreport.inspector import CommandRunner, PackageInspector, run_command
from pkgreport.manifest import load_manifest
from pkgreport.models import ReportResult
from pkgreport.renderer import render_report
from pkgreport.writer import write_report

log = structlog.get_logger("pkgreport.pipeline")


async def generate_report(
    config: ReportConfig,
    runner: CommandRunner = run_command,
) -> ReportResult:
    """Full pipeline: load manifest -> inspect packages -> render -> write.

    Manifest and write failures propagate. Probe failures are recorded in
    the report and in the returned :class:`ReportResult`.
    """
    manifest = load_manifest(config.manifest_path)

    inspector = PackageInspector(npm=config.npm, concurrency=config.concurrency, runner=runner)
    records = await inspector.inspect_all(manifest)

    document = render_report(manifest, records)
    log.info("report.rendered", packages=len(records), output=str(config.output_path))
    output_path = write_report(config.output_path, document)

    return ReportResult(
        output_path=output_path,
        dependency_count=len(manifest.dependencies),
        dev_dependency_count=len(manifest.dev_dependencies),
        failed=[r.name for r in records.values() if r.installed_failed],
        missing_metadata=[r.name for r in records.values() if r.metadata is None],
    )
