"""Loader for ``package.json`` dependency groups."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from pkgreport.exceptions import ManifestError
from pkgreport.models import DependencyGroup, Manifest

log = structlog.get_logger("pkgreport.manifest")

# (manifest key, report title)
GROUPS: tuple[tuple[str, str], ...] = (
    ("dependencies", "Dependencies"),
    ("devDependencies", "Dev Dependencies"),
)


def load_manifest(path: Path) -> Manifest:
    """Read *path* and extract its dependency groups.

    A missing group is an empty group. Anything else that prevents reading
    the two groups raises :class:`ManifestError`.
    """
    path = Path(path).resolve()
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(str(path), getattr(exc, "strerror", None) or str(exc)) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(str(path), f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(str(path), "top-level value is not an object")

    deps, dev_deps = (_parse_group(path, data, key, title) for key, title in GROUPS)
    manifest = Manifest(path=path, dependencies=deps, dev_dependencies=dev_deps)

    log.info(
        "manifest.loaded",
        path=str(path),
        dependencies=len(deps),
        dev_dependencies=len(dev_deps),
    )
    return manifest


def _parse_group(path: Path, data: dict[str, Any], key: str, title: str) -> DependencyGroup:
    raw = data.get(key)
    if raw is None:
        return DependencyGroup(name=key, title=title)
    if not isinstance(raw, dict):
        raise ManifestError(str(path), f"{key!r} is not an object")
    # json.loads keeps object key order, which is the declaration order
    packages = {name: _range_text(version) for name, version in raw.items()}
    return DependencyGroup(name=key, title=title, packages=packages)


def _range_text(version: Any) -> str:
    """Version range as text; ``null`` becomes empty, other scalars keep JSON spelling."""
    if isinstance(version, str):
        return version
    if version is None:
        return ""
    return json.dumps(version)
