"""Resolving the host to trace: its IPv4 address and its full name."""

from __future__ import annotations

import socket
from dataclasses import dataclass


class ResolutionError(Exception):
    """A host name or address could not be resolved."""


@dataclass(frozen=True)
class Target:
    """The host as given, its IPv4 address and its fully qualified name."""

    host: str
    ip: str
    fqdn: str


def reverse_lookup(ip: str) -> str:
    """Return the name registered for ``ip``, or the address itself if none."""
    try:
        name, _ = socket.getnameinfo((ip, 0), 0)
    except (OSError, ValueError) as exc:
        raise ResolutionError(f'Could not get full hostname for IP "{ip}"') from exc
    return name


def resolve_target(host: str) -> Target:
    """Resolve ``host`` to its first IPv4 address and its full name."""
    try:
        infos = socket.getaddrinfo(host, None, family=socket.AF_INET)
    except (OSError, UnicodeError) as exc:
        raise ResolutionError("unknown host") from exc
    if not infos:
        raise ResolutionError("unknown host")
    ip = infos[0][4][0]
    return Target(host=host, ip=ip, fqdn=reverse_lookup(ip))