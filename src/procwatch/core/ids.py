"""Task group ID utilities

Task groups are tracked by an explicit string handle rather than by object
identity. IDs are namespaced so they stay readable in logs:

- group:<hex>   - generated group ID
- any string    - caller-assigned ID, used as-is
"""

import uuid

GROUP_ID_PREFIX = "group:"


def new_group_id() -> str:
    """Create a fresh, process-unique group ID.

    Returns:
        Namespaced ID like "group:3eb79f6740c34583a9e4ad8224807f34"
    """
    return f"{GROUP_ID_PREFIX}{uuid.uuid4().hex}"


def is_generated_id(group_id: str) -> bool:
    """Check if a group ID was produced by new_group_id()."""
    return group_id.startswith(GROUP_ID_PREFIX)


def short_id(group_id: str, length: int = 8) -> str:
    """Get a short display version of a group ID for logging.

    Strips the "group:" namespace (if present) and truncates to length.

    Args:
        group_id: The group ID to shorten
        length: Maximum length (default 8)

    Returns:
        Shortened ID for display in logs
    """
    pure_id = group_id[len(GROUP_ID_PREFIX):] if is_generated_id(group_id) else group_id
    return pure_id[:length]
