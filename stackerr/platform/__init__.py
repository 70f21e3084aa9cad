"""Platform-specific failure predicates."""

from .oserrors import exists, not_found, permission_denied

__all__ = [
    "exists",
    "not_found",
    "permission_denied",
]
