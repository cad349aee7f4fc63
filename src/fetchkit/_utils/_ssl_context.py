import os
import ssl
from typing import Any

import certifi


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    # Expand environment variables like $HOME
    path = os.path.expandvars(path)
    # Expand user home directory ~
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
    requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
    ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

    return ssl.create_default_context(
        cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
        capath=ssl_cert_dir,
    )


def get_httpx_client_kwargs(
    verify_ssl: bool = True, follow_redirects: bool = True
) -> dict[str, Any]:
    """Keyword arguments shared by every httpx client the executor creates.

    The httpx timeout is disabled: request deadlines are enforced by the
    executor's cancellation token instead.
    """
    return {
        "verify": create_ssl_context() if verify_ssl else False,
        "follow_redirects": follow_redirects,
        "timeout": None,
        "trust_env": True,
    }
