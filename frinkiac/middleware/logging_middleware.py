"""Credential redaction for URLs written to the logs."""

from urllib.parse import urlsplit, urlunsplit

REDACTED = "***REDACTED***"


def redact_sensitive_data(url: str) -> str:
    """Replace the userinfo part (``user:password@``) of a URL.

    Frinkiac query parameters (``q``, ``e``, ``t``, ``lines``) carry no
    secrets. Credentials only show up as userinfo, either in a proxy URL
    from HTTP_PROXY / HTTPS_PROXY or in a FRINKIAC_HOST that points at a
    mirror behind basic auth.

    Args:
        url: URL to sanitize

    Returns:
        The URL with userinfo replaced by a marker, otherwise unchanged
    """
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rpartition("@")[2]
    return urlunsplit(parts._replace(netloc=f"{REDACTED}@{host}"))
