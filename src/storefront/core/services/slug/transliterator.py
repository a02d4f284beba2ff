"""Transliteration of display names into Latin tokens."""

from typing import Protocol

from pypinyin import Style, lazy_pinyin


class Transliterator(Protocol):
    """Turns a lower-cased display name into Latin tokens in reading order."""

    def transliterate(self, text: str) -> list[str]: ...


class PinyinTransliterator:
    """Romanize CJK characters with their tone-less pinyin reading.

    Each Han character becomes one token ("微软" -> ["wei", "ruan"]). Runs of
    anything else are passed through unchanged as a single token, so
    "office 365" stays ["office 365"] and is split later by the normalizer.
    """

    def __init__(self, style: Style = Style.NORMAL) -> None:
        self._style = style

    def transliterate(self, text: str) -> list[str]:
        return lazy_pinyin(text, style=self._style)
