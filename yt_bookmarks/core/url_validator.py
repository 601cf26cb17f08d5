"""
YouTube watch URL validation.

Parses raw strings into YouTube video ids and renders ids back into the
canonical watch URL. Only ``www.youtube.com`` watch URLs carrying a ``v``
query parameter are accepted; short links and mobile hosts are not.

Usage:
    from yt_bookmarks.core.url_validator import extract_video_id

    video_id = extract_video_id("https://www.youtube.com/watch?v=5gGha71avA5")
"""

import re
from typing import Tuple
from urllib.parse import SplitResult, parse_qsl, quote, unquote, urlsplit

from yt_bookmarks.utils.error_handler import MalformedURLError, NotAYouTubeURLError

YOUTUBE_HOST = "www.youtube.com"
VIDEO_ID_PARAM = "v"
CANONICAL_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

# Schemes that must carry a non-empty host to be well-formed
SPECIAL_SCHEMES = {"http", "https", "ws", "wss", "ftp"}

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):(.*)$", re.DOTALL)
_C0_CONTROL_OR_SPACE = "".join(chr(c) for c in range(0x21))
_FORBIDDEN_HOST_CHARS = frozenset(
    " <>^|\\\x7f" + "".join(chr(c) for c in range(0x20))
)
# Special-scheme hosts are checked after percent-decoding
_FORBIDDEN_DOMAIN_CHARS = _FORBIDDEN_HOST_CHARS | frozenset("%#/:?@[]")


def split_url(raw: str) -> SplitResult:
    """
    Split a raw string into URL components, rejecting malformed syntax.

    Args:
        raw: Arbitrary input string

    Returns:
        The split URL

    Raises:
        MalformedURLError: If the string is not a syntactically valid
            absolute URL. The parser's ValueError is wrapped unchanged.
    """
    if not isinstance(raw, str):
        raise TypeError(f"URL must be a string, not {type(raw).__name__}")

    try:
        parts = urlsplit(_normalize_special(raw.strip(_C0_CONTROL_OR_SPACE)))
        _check_syntax(parts)
    except ValueError as e:
        raise MalformedURLError(e) from e

    return parts


def _normalize_special(url: str) -> str:
    """
    Rewrite a special-scheme URL so its authority always follows ``//``.

    Before the query, backslashes count as slashes and any number of
    slashes (including none) may follow the scheme.
    """
    match = _SCHEME_RE.match(url)
    if not match or match.group(1).lower() not in SPECIAL_SCHEMES:
        return url

    scheme, rest = match.groups()
    ends = [i for i in (rest.find("?"), rest.find("#")) if i != -1]
    cut = min(ends) if ends else len(rest)
    authority_and_path = rest[:cut].replace("\\", "/").lstrip("/")

    return f"{scheme}://{authority_and_path}{rest[cut:]}"


def _check_syntax(parts: SplitResult) -> None:
    """Raise ValueError for components no URL parser would accept."""
    if not parts.scheme:
        raise ValueError("relative URL without a base")

    host = _host(parts)
    special = parts.scheme in SPECIAL_SCHEMES

    if not host and special:
        raise ValueError("empty host")

    if special and not host.startswith("["):
        forbidden = _FORBIDDEN_DOMAIN_CHARS
    else:
        forbidden = _FORBIDDEN_HOST_CHARS
    if any(ch in forbidden for ch in host):
        raise ValueError("invalid domain character")

    # .port raises ValueError for a non-numeric or out of range port
    _ = parts.port


def _split_host(netloc: str) -> Tuple[str, str]:
    """
    Split the host out of a netloc without normalising its case.

    Returns:
        Tuple of (host, port string)
    """
    hostinfo = netloc.rpartition("@")[2]

    if hostinfo.startswith("["):
        end = hostinfo.find("]")
        return hostinfo[: end + 1], hostinfo[end + 1 :].lstrip(":")

    host, _, port = hostinfo.partition(":")
    return host, port


def _host(parts: SplitResult) -> str:
    """Host of a split URL, percent-decoded for special-scheme domains."""
    host, _ = _split_host(parts.netloc)
    if parts.scheme in SPECIAL_SCHEMES and not host.startswith("["):
        return unquote(host)
    return host


def extract_video_id(raw: str) -> str:
    """
    Extract the video id from a YouTube watch URL.

    The host must be exactly ``www.youtube.com`` (case-sensitive, after
    percent-decoding) and the query must contain ``v``. If ``v`` repeats,
    the last value wins. The value is returned after standard URL decoding,
    without any charset or length check. Scheme, path and other query
    parameters are ignored.

    Args:
        raw: URL string to validate

    Returns:
        The video id

    Raises:
        MalformedURLError: If the string is not a valid URL
        NotAYouTubeURLError: If the host is missing or wrong, or ``v`` is
            missing
    """
    parts = split_url(raw)

    host = _host(parts)
    if not host or host != YOUTUBE_HOST:
        raise NotAYouTubeURLError()

    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    if VIDEO_ID_PARAM not in query:
        raise NotAYouTubeURLError()

    return query[VIDEO_ID_PARAM]


def format_watch_url(video_id: str) -> str:
    """
    Render a video id as the canonical watch URL.

    Ids made of letters, digits and ``_.-~`` are rendered verbatim; any
    other character is percent-encoded so the URL parses back to the same id.
    """
    return CANONICAL_WATCH_URL.format(video_id=quote(video_id, safe=""))


def is_youtube_watch_url(raw: str) -> bool:
    """Check whether a string is an acceptable YouTube watch URL."""
    try:
        extract_video_id(raw)
    except (MalformedURLError, NotAYouTubeURLError):
        return False
    return True


__all__ = [
    "YOUTUBE_HOST",
    "VIDEO_ID_PARAM",
    "CANONICAL_WATCH_URL",
    "split_url",
    "extract_video_id",
    "format_watch_url",
    "is_youtube_watch_url",
]
