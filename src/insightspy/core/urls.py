"""URL validation for URL-typed telemetry fields."""

from urllib.parse import urlsplit, urlunsplit

from insightspy.core.errors import InvalidUrlError


def parse_url(value: str) -> str:
    """Validate an absolute URL and return its normalized string form.

    Scheme and host are lowercased; a missing path on an http(s) URL
    becomes ``/``. Everything else is returned untouched.

    Args:
        value: The URL to validate.

    Returns:
        Normalized URL string.

    Raises:
        InvalidUrlError: If ``value`` is not a string, or has no scheme or host.
    """
    if not isinstance(value, str):
        raise InvalidUrlError(f"url must be a string, got {type(value).__name__}")
    try:
        parts = urlsplit(value.strip())
        # Accessing port validates it
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"invalid url {value!r}: {exc}") from exc
    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise InvalidUrlError(f"url must be absolute, got {value!r}")

    path = parts.path
    if not path and parts.scheme.lower() in ("http", "https"):
        path = "/"
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc.lower(),
            path,
            parts.query,
            parts.fragment,
        )
    )


def url_path(value: str) -> str:
    """Return the path component of an already validated URL."""
    return urlsplit(value).path or "/"
