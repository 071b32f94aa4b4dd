"""Core utilities shared across procwatch modules."""

from .ids import is_generated_id, new_group_id, short_id

__all__ = ["new_group_id", "is_generated_id", "short_id"]
