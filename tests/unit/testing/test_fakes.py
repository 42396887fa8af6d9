"""Unit tests for testing fakes."""

from __future__ import annotations

from mp_sluggable.application.slugging import RecordAccessor
from mp_sluggable.testing import InMemoryRecordAccessor


class TestInMemoryRecordAccessor:
    def test_is_a_record_accessor(self) -> None:
        assert isinstance(InMemoryRecordAccessor(), RecordAccessor)

    def test_fetch_returns_copy(self) -> None:
        accessor = InMemoryRecordAccessor({1: {"title": "A", "slug": "a"}})
        row = accessor.fetch_by_identity(1)
        assert row == {"title": "A", "slug": "a"}
        row["slug"] = "changed"  # type: ignore[index]
        assert accessor.fetch_by_identity(1) == {"title": "A", "slug": "a"}

    def test_fetch_missing(self) -> None:
        assert InMemoryRecordAccessor().fetch_by_identity(1) is None

    def test_add_and_count(self) -> None:
        accessor = InMemoryRecordAccessor()
        accessor.add(1, slug="post")
        accessor.add(2, slug="post")
        accessor.add(3, slug="other")
        assert accessor.count_conflicts("slug", "post", None) == 2
        assert accessor.count_conflicts("slug", "post", 1) == 1
        assert accessor.queries == [("slug", "post", None), ("slug", "post", 1)]
