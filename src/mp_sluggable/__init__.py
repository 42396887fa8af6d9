"""
mp_sluggable – unique, URL-safe slugs generated from a record's title.

Import path convention::

    from mp_sluggable.application.slugging import SluggableBehavior, Record
    from mp_sluggable.config import SluggableSettings
    from mp_sluggable.adapters.sqlalchemy import make_sluggable
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
