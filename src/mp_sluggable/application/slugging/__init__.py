"""Slugging – decide, normalise, truncate and de-duplicate record slugs.

Modules:
  record.py       — Record (identity + in-flight field data)
  ports.py        — RecordAccessor, Normalizer
  decision.py     — SlugDecisionEngine
  generator.py    — SlugGenerator
  deduplicator.py — Deduplicator, GenerationState
  behavior.py     — SluggableBehavior (trigger hook)
"""

from mp_sluggable.application.slugging.behavior import SluggableBehavior
from mp_sluggable.application.slugging.decision import SlugDecisionEngine
from mp_sluggable.application.slugging.deduplicator import Deduplicator, GenerationState
from mp_sluggable.application.slugging.generator import SlugGenerator
from mp_sluggable.application.slugging.ports import Normalizer, RecordAccessor
from mp_sluggable.application.slugging.record import Record

__all__ = [
    "Deduplicator",
    "GenerationState",
    "Normalizer",
    "Record",
    "RecordAccessor",
    "SlugDecisionEngine",
    "SlugGenerator",
    "SluggableBehavior",
]
