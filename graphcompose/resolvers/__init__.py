from .remove_by_id import build_payload_type, remove_by_id


__all__ = [
    "build_payload_type",
    "remove_by_id",
]
