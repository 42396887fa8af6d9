"""SQLAlchemy adapter – record accessor, schema metadata and flush hook."""
from mp_sluggable.adapters.sqlalchemy.accessor import SqlAlchemyRecordAccessor
from mp_sluggable.adapters.sqlalchemy.listener import SluggableRegistration, make_sluggable
from mp_sluggable.adapters.sqlalchemy.schema import (
    column_max_length,
    display_field,
    settings_for_model,
)

__all__ = [
    "SluggableRegistration",
    "SqlAlchemyRecordAccessor",
    "column_max_length",
    "display_field",
    "make_sluggable",
    "settings_for_model",
]
