"""Current location snapshot and active-path matching.

The location is passed in explicitly so a whole tree walk compares every
node against one consistent value.
"""

from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from docnav.core.types import Address


@dataclass(frozen=True)
class Location:
    """Pathname and hash of the page being viewed."""

    pathname: str = "/"
    hash: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Location":
        """Split a URL (absolute or path-only) into pathname and hash.

        Args:
            url: URL such as "/docs/#/Components/Button" or "https://host/#button"

        Returns:
            Location with "/" for an empty pathname and hash including "#".
            The query string is not part of the location.
        """
        parts = urlsplit(url)
        hash_ = f"#{parts.fragment}" if parts.fragment else ""
        return cls(pathname=parts.path or "/", hash=hash_)

    def effective(self, use_router_links: bool) -> str:
        """Location string that node addresses are compared against.

        Router links are built percent-encoded, so the raw hash is kept.
        Anchor links use the plain slug, so the hash is normalized.
        """
        fragment = self.hash if use_router_links else get_hash(self.hash)
        return self.pathname + fragment


def get_hash(hash_: str) -> str:
    """Normalize an anchor hash: drop the query suffix and percent-decode.

    Args:
        hash_: Raw hash including the leading "#", or empty

    Returns:
        Decoded hash without "?..." suffix
    """
    value, _, _ = hash_.partition("?")
    return unquote(value)


def matches(effective_location: str, address: Address | str | None) -> bool:
    """Check whether the location is at the address or nested below it."""
    return address is not None and effective_location.startswith(address)
