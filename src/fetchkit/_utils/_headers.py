from typing import Mapping, Optional

from .constants import DEFAULT_CONTENT_TYPE, HEADER_AUTHORIZATION, HEADER_CONTENT_TYPE


def auth_header(token: Optional[str]) -> dict[str, str]:
    if not token:
        return {}
    return {HEADER_AUTHORIZATION: f"Bearer {token}"}


def build_headers(
    token: Optional[str],
    headers: Optional[Mapping[str, str]] = None,
    *,
    multipart: bool = False,
) -> dict[str, str]:
    """Merge the default headers with the caller's headers.

    Caller headers win on a key collision (compared case-insensitively). For
    multipart bodies no default Content-Type is set so that the transport can
    add the boundary parameter.

    Args:
        token: Bearer token read from the token source, if any.
        headers: Caller-supplied headers.
        multipart: Whether the body is a multi-part form payload.

    Returns:
        dict[str, str]: The merged headers.
    """
    defaults: dict[str, str] = {}
    if not multipart:
        defaults[HEADER_CONTENT_TYPE] = DEFAULT_CONTENT_TYPE
    defaults.update(auth_header(token))

    caller = dict(headers or {})
    overridden = {key.lower() for key in caller}

    merged = {
        key: value for key, value in defaults.items() if key.lower() not in overridden
    }
    merged.update(caller)
    return merged
