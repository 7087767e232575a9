"""ICMP echo probes: building requests and recognising the replies to them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

ICMP_ECHO_REPLY = 0
ICMP_ECHO = 8
ICMP_TIME_EXCEEDED = 11

DEFAULT_PACKET_SIZE = 60

_HEADER = struct.Struct("!BBHHH")
_FILL_BYTE = 0x42


class ReplyKind(IntEnum):
    """The ICMP message types that answer a probe."""

    ECHO_REPLY = ICMP_ECHO_REPLY
    TIME_EXCEEDED = ICMP_TIME_EXCEEDED


@dataclass(frozen=True)
class Reply:
    """A reply to one of our probes and the address it came from."""

    kind: ReplyKind
    source: str


def checksum(data: bytes) -> int:
    """Return the Internet checksum (ones' complement sum) of ``data``."""
    raw = bytes(data)
    if len(raw) % 2:
        raw += b"\0"
    total = sum(struct.unpack(f"!{len(raw) // 2}H", raw))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def build_echo_request(ident: int, seq: int, size: int = DEFAULT_PACKET_SIZE) -> bytes:
    """Build an ICMP echo request of ``size`` bytes.

    Identifier and sequence number are truncated to 16 bits. The payload is
    zero-filled except for a 0x42 marker in its first byte.
    """
    if size < _HEADER.size:
        raise ValueError(f"packet size must be at least {_HEADER.size}, got {size}")
    ident &= 0xFFFF
    seq &= 0xFFFF
    payload = bytearray(size - _HEADER.size)
    if payload:
        payload[0] = _FILL_BYTE
    unsigned = _HEADER.pack(ICMP_ECHO, 0, 0, ident, seq) + payload
    return _HEADER.pack(ICMP_ECHO, 0, checksum(unsigned), ident, seq) + bytes(payload)


def _ip_header_length(data: bytes, offset: int) -> int:
    return (data[offset] & 0x0F) * 4


def parse_reply(data: bytes, source: str, ident: int) -> Optional[Reply]:
    """Interpret a raw IPv4 packet read from an ICMP socket.

    Returns a Reply when the packet is an echo reply or a time-exceeded
    message that answers a probe carrying ``ident``; None otherwise.
    """
    ident &= 0xFFFF
    if not data:
        return None
    icmp = _ip_header_length(data, 0)
    if len(data) < icmp + _HEADER.size:
        return None
    kind = data[icmp]
    if kind == ICMP_TIME_EXCEEDED:
        inner_ip = icmp + _HEADER.size
        if len(data) <= inner_ip:
            return None
        inner_icmp = inner_ip + _ip_header_length(data, inner_ip)
        if len(data) < inner_icmp + _HEADER.size:
            return None
        (reply_id,) = struct.unpack_from("!H", data, inner_icmp + 4)
        result = ReplyKind.TIME_EXCEEDED
    elif kind == ICMP_ECHO_REPLY:
        (reply_id,) = struct.unpack_from("!H", data, icmp + 4)
        result = ReplyKind.ECHO_REPLY
    else:
        return None
    return Reply(result, source) if reply_id == ident else None