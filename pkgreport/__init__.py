"""pkgreport — inventory npm dependencies into a markdown report."""

from pkgreport.models import (
    DependencyGroup,
    Manifest,
    MetadataStatus,
    PackageMetadata,
    PackageRecord,
    ProbeResult,
)

__all__ = [
    "DependencyGroup",
    "Manifest",
    "MetadataStatus",
    "PackageMetadata",
    "PackageRecord",
    "ProbeResult",
]
