# src/vamsa_gedcom/mapping/options.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from vamsa_gedcom.validation.objects import ExistsCheck


@dataclass(frozen=True)
class MapOptions:
    """
    Caller policy for ``map_gedcom_file``.

    Attributes:
        skip_validation: Skip structural, object and value-format checks.
        ignore_missing_references: Do not report unresolved pointers.
        absolute_path_is_error: Reject objects with absolute file paths
            instead of warning.
        media_base_dir: Directory media paths are resolved against; enables
            the file-existence check.
        file_exists: Replacement for the filesystem check.
    """
    skip_validation: bool = False
    ignore_missing_references: bool = False
    absolute_path_is_error: bool = False
    media_base_dir: Optional[Union[str, Path]] = None
    file_exists: Optional[ExistsCheck] = None

    @classmethod
    def from_config(cls, cfg, **overrides) -> "MapOptions":
        """Build options from the ``pipeline`` and ``validation`` config sections."""
        values = {
            "skip_validation": bool(cfg.pipeline.get("skip_validation", False)),
            "ignore_missing_references": bool(cfg.pipeline.get("ignore_missing_references", False)),
            "absolute_path_is_error": bool(cfg.validation.get("absolute_path_is_error", False)),
            "media_base_dir": cfg.validation.get("media_base_dir"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["MapOptions"]
