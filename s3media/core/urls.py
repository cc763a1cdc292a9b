"""
Key and URL construction.

Object keys and public URLs are built the same way: a prefix, the media
id and the encoded filename joined with exactly one slash at each joint.
Naive concatenation gives "cdn.example.com//abc" when the prefix already
ends in a slash, which S3 treats as a different key.
"""

from urllib.parse import quote

# RFC 3986 sub-delimiters plus the path characters that are legal unescaped
_PATH_SAFE = "/:@!$&'()*+,;="


def url_combine(*parts: str) -> str:
    """
    Join path segments with single slashes.

    Empty segments are skipped. Trailing slashes on the left side and
    leading slashes on the right side collapse into one separator.

    >>> url_combine("http://x/", "/y")
    'http://x/y'
    """
    result = ""
    for part in parts:
        if not part:
            continue
        if not result:
            result = part
            continue
        result = f"{result.rstrip('/')}/{part.lstrip('/')}"
    return result


def url_path_encode(filename: str) -> str:
    """Percent-encode a filename for use as a URL path segment."""
    return quote(filename, safe=_PATH_SAFE)
