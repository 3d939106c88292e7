"""Guard for job-posting URLs fetched without the relay.

Only http(s) URLs are accepted. For direct fetches the hostname must not
resolve to a private, loopback, link-local or metadata address.

NOTE: resolution happens here and again inside httpx, so a DNS rebinding
attacker could still swap addresses between the two lookups.
"""

from __future__ import annotations

import ipaddress
import socket
from urllib.parse import urlparse

from hiresight.errors import UnsafeURLError

_BLOCKED_HOSTNAMES = {"localhost", "localhost.localdomain"}

_BLOCKED_IPS = {
    ipaddress.ip_address("169.254.169.254"),  # cloud metadata
    ipaddress.ip_address("0.0.0.0"),
}


def _is_blocked(addr: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    return (
        addr in _BLOCKED_IPS
        or addr.is_private
        or addr.is_loopback
        or addr.is_reserved
        or addr.is_link_local
    )


def check_scheme(url: str) -> str:
    """Return the stripped URL if it is an absolute http(s) URL."""
    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise UnsafeURLError(f"Unsupported URL scheme: {parsed.scheme!r}")
    if not parsed.hostname:
        raise UnsafeURLError(f"No hostname in URL: {url!r}")
    return url


def validate_url(url: str) -> str:
    """Validate that a URL does not point to an internal/private network."""
    url = check_scheme(url)
    hostname = urlparse(url).hostname

    if hostname.lower() in _BLOCKED_HOSTNAMES:
        raise UnsafeURLError(f"Blocked internal hostname: {hostname!r}")

    try:
        addr = ipaddress.ip_address(hostname)
    except ValueError:
        addr = None  # not an IP literal, resolve below
    if addr is not None:
        if _is_blocked(addr):
            raise UnsafeURLError(f"Blocked private/internal IP: {addr}")
        return url

    try:
        results = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise UnsafeURLError(f"Cannot resolve hostname {hostname!r}: {exc}") from exc

    for _family, _type, _proto, _canonname, sockaddr in results:
        addr = ipaddress.ip_address(sockaddr[0])
        if _is_blocked(addr):
            raise UnsafeURLError(f"Hostname {hostname!r} resolves to blocked address: {addr}")

    return url
