"""Parsing of free-form ``"Key: Value"`` product attribute strings.

Parsing is total: any string, however malformed, yields exactly one
``Attribute``. Strings without a usable colon become "unkeyed" attributes
whose key is the lower-cased string and whose value is the string itself.
"""

from typing import Dict, Iterable, Iterator, NamedTuple, Optional, Tuple


class Attribute(NamedTuple):
    """One fact about a product."""

    key: str
    value: str
    original: str
    keyed: bool = True


def as_text(raw) -> str:
    """Coerce a JSON attribute item to text; ``None`` becomes empty."""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return str(raw)


def parse_attribute(raw) -> Attribute:
    """Split one attribute string on its first colon."""
    raw = as_text(raw)

    colon_index = raw.find(":")
    if colon_index > 0:
        key = raw[:colon_index].strip().lower()
        value = raw[colon_index + 1:].strip()
        return Attribute(key=key, value=value, original=raw)

    return Attribute(key=raw.lower(), value=raw, original=raw, keyed=False)


class AttributeSet:
    """Ordered attributes plus a case-insensitive key lookup.

    The lookup is derived from the keyed attributes only; when a key
    repeats, the later value wins there while both stay in the list.
    """

    def __init__(self, attributes: Iterable[Attribute] = ()):
        self._attributes: Tuple[Attribute, ...] = tuple(attributes)
        self._lookup: Dict[str, str] = {}
        for attribute in self._attributes:
            if attribute.keyed:
                self._lookup[attribute.key.lower()] = attribute.value

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __getitem__(self, index: int) -> Attribute:
        return self._attributes[index]

    def __contains__(self, key: str) -> bool:
        return key.lower() in self._lookup

    def __repr__(self) -> str:
        return f"AttributeSet({list(self._attributes)!r})"

    @property
    def lookup(self) -> Dict[str, str]:
        return dict(self._lookup)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._lookup.get(key.lower(), default)

    def has_any(self, *keys: str) -> bool:
        return any(key in self for key in keys)

    @property
    def originals(self) -> Tuple[str, ...]:
        return tuple(attribute.original for attribute in self._attributes)


def parse(raw_attributes: Optional[Iterable]) -> AttributeSet:
    """Parse raw attribute strings into an ``AttributeSet``. Never raises."""
    if raw_attributes is None:
        return AttributeSet()
    return AttributeSet(parse_attribute(raw) for raw in raw_attributes)
