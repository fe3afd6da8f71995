"""
Media format normalization.

Lookup is case-insensitive and ignores surrounding whitespace and a
leading dot (".jpg"). Tokens without a known alias pass through
upper-cased.
"""

from __future__ import annotations

from typing import Dict, Optional

FORMAT_ALIASES: Dict[str, str] = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "jpe": "JPEG",
    "image/jpeg": "JPEG",
    "tif": "TIFF",
    "tiff": "TIFF",
    "image/tiff": "TIFF",
    "png": "PNG",
    "image/png": "PNG",
    "gif": "GIF",
    "image/gif": "GIF",
    "bmp": "BMP",
    "image/bmp": "BMP",
    "webp": "WEBP",
    "svg": "SVG",
    "pdf": "PDF",
    "application/pdf": "PDF",
    "txt": "TXT",
    "text": "TXT",
    "doc": "DOC",
    "docx": "DOCX",
    "mp3": "MP3",
    "wav": "WAV",
    "mp4": "MP4",
    "mpeg": "MPEG",
    "mpg": "MPEG",
    "avi": "AVI",
    "mov": "MOV",
    "ole": "OLE",
}


def normalize_format(token: Optional[str]) -> Optional[str]:
    """
    Canonical format code for a FORM value.

        normalize_format("jpg")     -> "JPEG"
        normalize_format("  PDF  ") -> "PDF"
        normalize_format("xyz")     -> "XYZ"
        normalize_format(".xyz")    -> "XYZ"

    None, a blank token or a bare dot gives None.
    """
    if token is None:
        return None

    key = token.strip().lower().lstrip(".")
    if not key:
        return None

    return FORMAT_ALIASES.get(key, key.upper())


__all__ = ["FORMAT_ALIASES", "normalize_format"]
