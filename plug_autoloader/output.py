"""JSON serialisation of resolution reports."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from plug_autoloader.resolver import Resolver


def build_report(resolver: Resolver, name: str) -> dict[str, Any]:
    """Record every candidate probed for a name.

    Each path is probed once; the result is the first probe that exists.
    """
    probes = []
    hit = None
    for candidate in resolver.candidates(name):
        entry = asdict(candidate)
        entry["exists"] = resolver.require_file(candidate.path)
        if entry["exists"] and hit is None:
            hit = entry
        probes.append(entry)

    return {
        "name": name,
        "found": hit is not None,
        "path": hit["path"] if hit else None,
        "prefix": hit["prefix"] if hit else None,
        "extension": resolver.config.extension,
        "candidates": probes,
        "namespaces": resolver.registry.as_dict(),
    }


def write_output(report: dict[str, Any], output_path: str) -> None:
    """Write a report to a JSON file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2, default=str)
