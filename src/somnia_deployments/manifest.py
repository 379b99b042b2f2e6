"""Deployment manifest persistence for somnia-deployments."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .types import DeploymentManifest


def deployment_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a deployment time as ISO-8601 UTC with millisecond precision.

    Args:
        now: Time to format (defaults to the current time)

    Returns:
        String like "2025-01-31T12:00:00.000Z"
    """
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def save_manifest(manifest: DeploymentManifest, manifest_path: Path) -> None:
    """
    Write manifest to disk, replacing any previous file.

    Creates parent directories if they don't exist.
    """
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    with open(manifest_path, "w") as f:
        json.dump(manifest.to_dict(), f, indent=2)


def load_manifest(manifest_path: Path) -> DeploymentManifest:
    """
    Load a previously written manifest.

    Raises:
        FileNotFoundError: If no manifest exists at manifest_path
        json.JSONDecodeError: If the file is corrupted
    """
    with open(manifest_path) as f:
        return DeploymentManifest.from_dict(json.load(f))
