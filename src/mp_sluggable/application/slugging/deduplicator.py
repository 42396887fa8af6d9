"""Deduplicator – rewrite a candidate slug until no other record holds it.

Each collision bumps ``suffix_counter`` and places ``separator + counter``
on the candidate.  The first suffix is appended when it fits; afterwards,
or whenever appending would overflow ``max_slug_length``, the trailing
``len(str(previous_counter)) + 1`` characters are replaced instead.

On the first collision ``previous_counter`` is 0, so an overflowing candidate
loses its last two characters even though no suffix occupies them yet.
"""

from __future__ import annotations

import dataclasses
from typing import Hashable

from mp_sluggable.application.slugging.ports import RecordAccessor
from mp_sluggable.config.settings import SluggableSettings
from mp_sluggable.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class GenerationState:
    """Per-attempt state; never shared between records."""

    candidate: str = ""
    suffix_counter: int = 0


class Deduplicator:
    """Collision resolution against a :class:`RecordAccessor`."""

    def __init__(self, settings: SluggableSettings, accessor: RecordAccessor) -> None:
        self._settings = settings
        self._accessor = accessor

    def resolve(
        self,
        candidate: str,
        exclude_identity: Hashable | None = None,
        state: GenerationState | None = None,
    ) -> str:
        """Return the first collision-free mutation of *candidate*.

        There is no iteration cap: the loop ends as soon as the accessor
        reports zero conflicts.
        """
        state = state if state is not None else GenerationState()
        state.candidate = candidate
        while self._accessor.count_conflicts(
            self._settings.slug_field, state.candidate, exclude_identity
        ):
            state.candidate = self._next_candidate(state)
            _log.debug(
                "slug.collision",
                candidate=state.candidate,
                suffix_counter=state.suffix_counter,
            )
        return state.candidate

    def _next_candidate(self, state: GenerationState) -> str:
        previous = state.suffix_counter
        state.suffix_counter += 1
        suffix = f"{self._settings.separator}{state.suffix_counter}"
        max_length = self._settings.max_slug_length

        if previous > 0 or len(suffix) + len(state.candidate) > max_length:
            replace_at = len(str(previous)) + 1
            candidate = state.candidate[:-replace_at] + suffix
        else:
            candidate = state.candidate + suffix

        if len(candidate) > max_length:
            _log.warning(
                "slug.exceeds_max_length",
                candidate=candidate,
                max_slug_length=max_length,
            )
        return candidate


__all__ = ["Deduplicator", "GenerationState"]
