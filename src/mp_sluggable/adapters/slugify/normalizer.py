"""python-slugify adapter – SlugifyNormalizer."""
from __future__ import annotations

from slugify import slugify


class SlugifyNormalizer:
    """Transliterate to ASCII, lowercase and join alphanumeric runs with *separator*.

    ``"Crème Brûlée, 2nd ed."`` becomes ``"creme-brulee-2nd-ed"``.
    """

    def slugify(self, text: str, separator: str) -> str:
        return slugify(text, separator=separator, lowercase=True)


__all__ = ["SlugifyNormalizer"]
