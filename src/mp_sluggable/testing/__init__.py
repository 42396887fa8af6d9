"""Testing support – in-memory doubles for the slugging ports."""

from mp_sluggable.testing.fakes import InMemoryRecordAccessor

__all__ = ["InMemoryRecordAccessor"]
