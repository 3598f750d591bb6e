"""Host name resolution and IPv4 socket address helpers."""

import logging
import socket

logger = logging.getLogger(__name__)

_BROADCAST = b"\xff\xff\xff\xff"


class HostResolutionError(LookupError):
    """Raised when a host name cannot be resolved."""


def _numeric_ipv4(address):
    """Return the packed address if ``address`` is a usable numeric IPv4 form."""
    try:
        packed = socket.inet_aton(address)
    except (OSError, ValueError):
        return None
    # 255.255.255.255 is indistinguishable from failure for the classic parser.
    return None if packed == _BROADCAST else packed


def hostname_to_ip(hostname):
    """Resolve ``hostname`` to a name that can be connected to.

    A numeric IPv4 address is returned unchanged; anything else is looked up
    and the resolver's canonical host name is returned.
    """
    if _numeric_ipv4(hostname) is not None:
        return hostname
    try:
        canonical, _aliases, _addresses = socket.gethostbyname_ex(hostname)
    except (OSError, UnicodeError) as exc:
        logger.warning("Unknown host %s", hostname)
        raise HostResolutionError(f"unknown host {hostname}") from exc
    return canonical


def make_sockaddr(address, port):
    """Return an ``(address, port)`` pair for an IPv4 socket."""
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    try:
        packed = socket.inet_aton(address)
    except (OSError, ValueError) as exc:
        raise ValueError(f"invalid IPv4 address: {address!r}") from exc
    return socket.inet_ntoa(packed), port