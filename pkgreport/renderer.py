"""Markdown rendering for the package report."""

from __future__ import annotations

from collections.abc import Mapping

from pkgreport.models import DependencyGroup, Manifest, PackageRecord

FAILURE_MARKER = "❌"
NPM_PACKAGE_URL = "https://www.npmjs.com/package/{name}"

_TABLE_HEADER = """\
| # | Package |  Package version | Links | Description |
| --- | --- | --- | --- | --- |"""


def render_report(manifest: Manifest, records: Mapping[str, PackageRecord]) -> str:
    """Return the full markdown document for *manifest*.

    Every declared package must have a record in *records*.
    """
    deps = manifest.dependencies
    dev_deps = manifest.dev_dependencies
    found = f"Found {len(deps)} dependencies and {len(dev_deps)} dev dependencies."

    return f"""
# Packages

{found}

**{deps.title}:** ({len(deps)}) packages

{render_table(deps, records)}

**{dev_deps.title}:** ({len(dev_deps)}) packages

{render_table(dev_deps, records)}

## {deps.title}
{_render_details(deps, records)}

## {dev_deps.title}

{_render_details(dev_deps, records)}
"""


def render_table(group: DependencyGroup, records: Mapping[str, PackageRecord]) -> str:
    """Summary table for one group; a header only when the group is empty."""
    rows = [
        render_row(index, records[name], version)
        for index, (name, version) in enumerate(group.packages.items(), start=1)
    ]
    body = "\n".join(rows)
    return f"\n{_TABLE_HEADER}\n{body}\n"


def render_row(index: int, record: PackageRecord, declared_version: str) -> str:
    marker = FAILURE_MARKER if record.installed_failed else ""
    meta = record.metadata
    links = [f"[NPM 🔗]({npm_url(record.name)})"]
    if meta is not None and meta.homepage:
        links.append(f"[Homepage 🔗]({meta.homepage})")
    return md_table_row(
        [
            index,
            f"[`{record.name}`](#{record.name}) {marker}",
            f"`{declared_version}`",
            " ".join(links),
            (meta.description if meta is not None else None) or "",
        ]
    )


def render_detail(record: PackageRecord, declared_version: str | None = None) -> str:
    """Detail block for one package.

    *declared_version* overrides the record's range, for a package whose
    groups declare it differently.
    """
    meta = record.metadata
    homepage = (meta.homepage if meta else None) or ""
    description = (meta.description if meta else None) or ""
    latest = (meta.version if meta else None) or ""
    configured = declared_version if declared_version is not None else record.declared_version
    quote = f"> {description}" if description else ""
    marker = FAILURE_MARKER if record.installed_failed else ""
    installed = record.installed.output or record.installed.error or "No info"

    return f"""
### {record.name}

[NPM 🔗]({npm_url(record.name)}) [Homepage 🔗]({homepage})

{quote}

**Configured version:** `{configured}`
**Latest version:** `{latest}`

<details>
<summary>Installed version {marker}</summary>

```
{installed}
```

</details>
"""


def md_table_row(items: list[object]) -> str:
    return "| " + " | ".join(str(item).strip() for item in items) + " |"


def npm_url(name: str) -> str:
    return NPM_PACKAGE_URL.format(name=name)


def _render_details(group: DependencyGroup, records: Mapping[str, PackageRecord]) -> str:
    return "\n".join(
        render_detail(records[name], version) for name, version in group.packages.items()
    )
