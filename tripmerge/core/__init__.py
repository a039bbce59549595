"""Core record types shared by the matching and import layers."""

from .record import EntityKind, SupportsSnapshot, to_snapshot

__all__ = ['EntityKind', 'SupportsSnapshot', 'to_snapshot']
