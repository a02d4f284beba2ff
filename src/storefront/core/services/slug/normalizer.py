"""Reduce transliterated tokens to URL-safe slug candidates."""

import hashlib
import re
from collections.abc import Sequence

SEPARATOR = "-"

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def normalize(value: str | Sequence[str]) -> str:
    """Join tokens with hyphens and collapse everything outside [a-z0-9].

    Every maximal run of other characters becomes a single hyphen and
    leading/trailing hyphens are stripped. The result may be empty.

    >>> normalize(["wei", "ruan", "365"])
    'wei-ruan-365'
    >>> normalize("My Cool Slug!!")
    'my-cool-slug'
    >>> normalize("!!!")
    ''
    """
    text = value if isinstance(value, str) else SEPARATOR.join(value)
    return _NON_SLUG_CHARS.sub(SEPARATOR, text.lower()).strip(SEPARATOR)


def fallback_candidate(
    product_id: str | None, name: str = "", prefix: str = "product", length: int = 6
) -> str:
    """Build `<prefix>-<suffix>` for names that normalize to nothing.

    The suffix is the tail of the product id (uuid4 ids are random in their
    last characters). Without a usable id it is the head of a sha1 digest of
    the stripped, lower-cased name, so the same name always yields the same
    candidate.
    """
    suffix = normalize(product_id or "").replace(SEPARATOR, "")[-length:]
    if not suffix:
        digest = hashlib.sha1(name.strip().lower().encode("utf-8")).hexdigest()
        suffix = digest[:length]
    return normalize(f"{prefix}{SEPARATOR}{suffix}")


def is_valid_slug(slug: str) -> bool:
    return bool(SLUG_PATTERN.match(slug))
