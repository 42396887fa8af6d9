"""python-slugify adapter – default Normalizer."""
from mp_sluggable.adapters.slugify.normalizer import SlugifyNormalizer

__all__ = ["SlugifyNormalizer"]
