"""Tag-keyed unions that fall back to a default variant.

Pydantic's built-in discriminated unions reject unknown tags. Node responses
gain new variants over time, so every polymorphic field here reads the tag
through a callable discriminator and routes anything it does not recognize to
a designated default variant instead of failing.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import Discriminator


def default_tag_discriminator(
    tag_field: str,
    known_tags: frozenset[str] | set[str],
    default_tag: str,
) -> Callable[[Any], str]:
    """Build a discriminator callable reading ``tag_field`` from dicts or model instances."""
    known = frozenset(known_tags)
    if default_tag not in known:
        raise ValueError(f"default tag {default_tag!r} must be one of the known tags")

    def _discriminate(value: Any) -> str:
        if isinstance(value, dict):
            tag = value.get(tag_field)
        else:
            tag = getattr(value, tag_field, None)
        if isinstance(tag, str) and tag in known:
            return tag
        return default_tag

    return _discriminate


def tagged_with_default(
    known_tags: frozenset[str] | set[str],
    default_tag: str,
    tag_field: str = "type",
) -> Discriminator:
    """Discriminator for ``Annotated[Union[Annotated[A, Tag(..)], ...], tagged_with_default(...)]``."""
    return Discriminator(default_tag_discriminator(tag_field, known_tags, default_tag))
