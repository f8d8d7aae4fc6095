"""Export utilities for resolution results."""

import json
from datetime import datetime
from pathlib import Path

from socialprobe.models.platform import Platform
from socialprobe.models.result import ProfileResult


def to_json(result: ProfileResult, indent: int = 2) -> str:
    """
    Convert ProfileResult to JSON string.

    Args:
        result: ProfileResult to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return result.model_dump_json(indent=indent)


def to_dict(result: ProfileResult) -> dict:
    """
    Convert ProfileResult to the JSON-ready dict sent to API callers.

    Args:
        result: ProfileResult to convert

    Returns:
        Dictionary representation
    """
    return result.model_dump(mode="json")


def save_json(
    result: ProfileResult,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save ProfileResult to JSON file.

    Args:
        result: ProfileResult to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.model_dump_json(indent=indent), encoding="utf-8")
    return path


def merge_results(username: str, results: dict[Platform, ProfileResult]) -> dict:
    """
    Merge per-platform results for one username into a single report.

    Args:
        username: Username that was looked up
        results: Mapping of platform to ProfileResult

    Returns:
        Dict with per-platform results plus summary counts
    """
    found = [platform.value for platform, result in results.items() if result.exists]
    simulated = [
        platform.value
        for platform, result in results.items()
        if result.profile is not None and result.profile.simulated
    ]
    return {
        "username": username,
        "exported_at": datetime.now().isoformat(),
        "platforms_count": len(results),
        "found_count": len(found),
        "found": found,
        "simulated": simulated,
        "results": {platform.value: to_dict(result) for platform, result in results.items()},
    }


def save_report(report: dict, filepath: str | Path, indent: int = 2) -> Path:
    """Write a merged report produced by ``merge_results``."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=indent, ensure_ascii=False), encoding="utf-8")
    return path
