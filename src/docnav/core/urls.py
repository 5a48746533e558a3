"""Link address builder.

Builds the hrefs of table of contents entries. The same strings are
compared by prefix against the current location to find the active path.
"""

from urllib.parse import quote

from docnav.core.types import Address


def encode_component(value: str) -> str:
    """Percent-encode a single URL component like encodeURIComponent."""
    return quote(value, safe="!~*'()")


def get_url(
    name: str | None = None,
    slug: str | None = None,
    *,
    anchor: bool = False,
    hash_path: list[str] | tuple[str, ...] | None = None,
    id: bool = False,
    example: int | None = None,
    isolated: bool = False,
    nochrome: bool = False,
    absolute: bool = False,
    takes_hash: bool = False,
    pathname: str = "/",
    hash: str = "",
    origin: str = "",
) -> Address | None:
    """Build the address of a section or component.

    Args:
        name: Display name, used for router-style and isolated links
        slug: Stable identifier, used for anchors and id links
        anchor: Link to "#slug" on the current page
        hash_path: Ancestor names for router-style "#/A/B" links, or None
        id: With hash_path, end the link with "?id=slug" instead of the name
        example: Example index appended as "/<example>"
        isolated: Link to the isolated view "#!/name"
        nochrome: Link to the chrome-less view "?nochrome#!/name"
        absolute: Prefix the link with origin
        takes_hash: Keep the current hash (without its query) after pathname
        pathname: Current location pathname
        hash: Current location hash
        origin: Scheme and host for absolute links

    Returns:
        Address, or None if the identifier the link needs is missing
    """
    url = pathname

    if takes_hash:
        current_hash, _, _ = hash.partition("?")
        url += current_hash

    if nochrome:
        url += "?nochrome"

    if anchor:
        if slug is None:
            return None
        url += f"#{slug}"
    elif isolated or nochrome:
        if name is None:
            return None
        url += f"#!/{encode_component(name)}"

    if hash_path is not None:
        segments = [encode_component(segment) for segment in hash_path]
        if id:
            if slug is None:
                return None
            url += "#/" + "/".join(segments) + f"?id={slug}"
        else:
            if name is None:
                return None
            segments.append(encode_component(name))
            url += "#/" + "/".join(segments)

    if example is not None:
        url += f"/{example}"

    if absolute:
        url = origin + url

    return Address(url)
