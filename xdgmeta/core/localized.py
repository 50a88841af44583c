"""Locale-aware lookup of ``Key[locale]`` values in a config file group."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

LOCALE_RE = re.compile(
    r"^(?P<lang>.+?)(?P<country>_.+?)?(?P<encoding>\..+?)?(?P<modifier>@.+?)?$"
)


@dataclass(frozen=True)
class Locale:
    """A POSIX locale split into parts. Country keeps its "_", modifier its "@"."""
    lang: str
    country: str = ""
    encoding: str = ""
    modifier: str = ""

    @classmethod
    def parse(cls, value: str) -> "Locale | None":
        """Split ``lang[_COUNTRY][.ENCODING][@MODIFIER]``; None if it doesn't match."""
        match = LOCALE_RE.match(value)
        if match is None:
            return None
        return cls(
            lang=match.group("lang"),
            country=match.group("country") or "",
            encoding=match.group("encoding") or "",
            modifier=match.group("modifier") or "",
        )

    def candidates(self) -> list[str]:
        """Locale suffixes to try, most specific first. Encoding is never used."""
        tags = []
        if self.country and self.modifier:
            tags.append(self.lang + self.country + self.modifier)
        if self.country:
            tags.append(self.lang + self.country)
        if self.modifier:
            tags.append(self.lang + self.modifier)
        tags.append(self.lang)
        return tags


def get_localized_value(group: Mapping[str, str], prop: str, locale: str) -> str:
    """Return the best value of ``prop`` for ``locale``, or "" if there is none.

    An empty or unparsable locale yields "" even when the unsuffixed key is
    set.
    """
    parsed = Locale.parse(locale)
    if parsed is None or not parsed.lang:
        return ""

    for tag in parsed.candidates():
        key = f"{prop}[{tag}]"
        if key in group:
            return group[key]

    return group.get(prop, "")


def get_localized_keys(group: Mapping[str, str], prop: str) -> dict[str, str]:
    """Return every variant of ``prop`` keyed by locale tag ("" for the default)."""
    regex = re.compile(re.escape(prop) + r"\[(.+)\]")
    results: dict[str, str] = {}
    for key, value in group.items():
        if key == prop:
            results[""] = value
            continue
        match = regex.fullmatch(key)
        if match:
            results[match.group(1)] = value
    return results
