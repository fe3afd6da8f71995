from .uuid_factory import (
    deterministic_uuid,
    normalize_pointer,
    uuid_for_pointer,
    uuid_for_relationship,
)

__all__ = [
    "deterministic_uuid",
    "normalize_pointer",
    "uuid_for_pointer",
    "uuid_for_relationship",
]
