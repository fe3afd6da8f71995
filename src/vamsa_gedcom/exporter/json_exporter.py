"""
json_exporter.py
Structured JSON exporter for MappingResult objects.

This exporter:
- Converts dataclasses and objects to dictionaries (NOT strings)
- Preserves full structure for downstream processing
- Is deterministic: the same result always serializes to the same text
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Dict

from vamsa_gedcom.logging import get_logger
from vamsa_gedcom.mapping.diagnostics import MappingResult

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses -> dict (recursively, slots dataclasses included)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Path -> str
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    if isinstance(obj, set):
        return sorted(_to_json_compatible(v) for v in obj)

    if isinstance(obj, Path):
        return str(obj)

    return str(obj)


def result_to_dict(result: MappingResult) -> Dict[str, Any]:
    """Convert a MappingResult into a JSON-safe dict."""
    return {
        "people": _to_json_compatible(result.people),
        "relationships": _to_json_compatible(result.relationships),
        "sources": _to_json_compatible(result.sources),
        "objects": _to_json_compatible(result.objects),
        "source_links": _to_json_compatible(result.source_links),
        "media_links": _to_json_compatible(result.media_links),
        "errors": _to_json_compatible(result.errors),
        "warnings": _to_json_compatible(result.warnings),
        "counts": result.counts(),
    }


def serialize_result_to_json_string(result: MappingResult, indent: int | None = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent, ensure_ascii=False)


def export_result_to_json(result: MappingResult, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting mapping JSON to: %s (people=%d, relationships=%d, sources=%d, objects=%d, errors=%d)",
        output_path,
        len(result.people),
        len(result.relationships),
        len(result.sources),
        len(result.objects),
        len(result.errors),
    )

    json_str = serialize_result_to_json_string(result, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
