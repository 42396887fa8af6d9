"""Testing fakes – in-memory doubles for slugging ports."""
from mp_sluggable.testing.fakes.records import InMemoryRecordAccessor

__all__ = ["InMemoryRecordAccessor"]
