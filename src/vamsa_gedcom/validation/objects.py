"""
Media object validation.

Errors block mapping of the object; warnings are advisory. The only
filesystem access in the import core happens here, through the
injectable ``exists`` callable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from vamsa_gedcom.models import ParsedObject

ExistsCheck = Callable[[Path], bool]

_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:[\\/]")


@dataclass(slots=True)
class ObjectValidation:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def is_absolute_path(path: str) -> bool:
    """POSIX root, Windows drive ("C:\\...") or UNC ("\\\\server\\share")."""
    return path.startswith(("/", "\\")) or bool(_WINDOWS_DRIVE.match(path))


def _default_exists(path: Path) -> bool:
    return path.is_file()


def validate_object(
    obj: ParsedObject,
    base_dir: Optional[Union[str, Path]] = None,
    *,
    exists: Optional[ExistsCheck] = None,
    absolute_path_is_error: bool = False,
) -> ObjectValidation:
    """
    Check a parsed object's file reference.

    - empty or whitespace-only path: error
    - absolute path: warning, or error when ``absolute_path_is_error``
    - file missing under ``base_dir``: warning (only checked when a
      base directory is given)
    """
    result = ObjectValidation()
    path = obj.file_path or ""

    if not path.strip():
        result.errors.append(f"Object {obj.id or '?'}: file path is empty")
        result.is_valid = False
        return result

    if is_absolute_path(path):
        message = f"Absolute path for object {obj.id or '?'}: {path} (relative paths are portable)"
        if absolute_path_is_error:
            result.errors.append(message)
            result.is_valid = False
        else:
            result.warnings.append(message)

    if base_dir is not None:
        check = exists or _default_exists
        candidate = Path(base_dir) / path
        if not check(candidate):
            result.warnings.append(f"File not found for object {obj.id or '?'}: {candidate}")

    return result


__all__ = ["ObjectValidation", "ExistsCheck", "is_absolute_path", "validate_object"]
