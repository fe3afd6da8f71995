# src/vamsa_gedcom/identity/uuid_factory.py
from __future__ import annotations

import hashlib
from typing import Optional


# -----------------------------
# Core deterministic hashing
# -----------------------------

def _stable_hash(key: str) -> str:
    # Identity/fingerprint only, not security.
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


def _uuid_from_key(key: str) -> str:
    """
    Convert an arbitrary key string into a canonical UUID-like value (8-4-4-4-12)
    based on SHA1. Deterministic for the same key.
    """
    h = _stable_hash(key)
    h32 = h[:32]
    return f"{h32[0:8]}-{h32[8:12]}-{h32[12:16]}-{h32[16:20]}-{h32[20:32]}"


def deterministic_uuid(*parts: object) -> str:
    key = "|".join("" if p is None else str(p) for p in parts)
    return _uuid_from_key(key)


# -----------------------------
# Pointer normalization
# -----------------------------

def normalize_pointer(pointer: Optional[str]) -> Optional[str]:
    """
    Normalize GEDCOM pointer:
      - strip whitespace
      - ensure wrapped in @...@

    Case is kept: the loader treats "@i1@" and "@I1@" as different records.
    """
    if pointer is None:
        return None

    p = pointer.strip()
    if not p:
        return None

    if not p.startswith("@"):
        p = "@" + p
    if not p.endswith("@") or len(p) == 1:
        p = p + "@"

    return p


def uuid_for_pointer(pointer: str, kind: Optional[str] = None) -> str:
    """
    Deterministic id for a record pointer.

    ``kind`` (e.g. "INDI", "SOUR") namespaces the id: GEDCOM only requires
    xrefs to be unique within a record kind, so "@X1@" as an individual
    and "@X1@" as a source must not collide.
    """
    p = normalize_pointer(pointer)
    if p is None:
        raise ValueError(f"Invalid pointer: {pointer!r}")
    if kind:
        return _uuid_from_key(f"PTR|{kind.upper()}|{p}")
    return _uuid_from_key(f"PTR|{p}")


# -----------------------------
# Derived identities
# -----------------------------

def uuid_for_relationship(rel_type: str, from_id: str, to_id: str) -> str:
    """Deterministic identity for a directed relationship edge."""
    return _uuid_from_key(f"REL|{(rel_type or '').strip().upper()}|{from_id}|{to_id}")


__all__ = [
    "deterministic_uuid",
    "normalize_pointer",
    "uuid_for_pointer",
    "uuid_for_relationship",
]
