"""Sending probes with increasing TTL and reporting each hop."""

from __future__ import annotations

import os
import socket
import sys
from typing import Optional, TextIO

from hoptrace.packet import DEFAULT_PACKET_SIZE, Reply, ReplyKind, build_echo_request, parse_reply
from hoptrace.target import Target

DEFAULT_TIMEOUT = 5.0
DEFAULT_MAX_HOPS = 64
DEFAULT_TRIES = 3
_RECV_SIZE = 512


class ProbeError(Exception):
    """The probe socket could not be opened or used."""


class ProbeSocket:
    """A raw ICMP socket aimed at one IPv4 address."""

    def __init__(
        self,
        address: str,
        ident: Optional[int] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        try:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
        except OSError as exc:
            raise ProbeError(f"Socket creation failed: {exc.strerror}") from exc
        self.address = address
        self.ident = (os.getpid() if ident is None else ident) & 0xFFFF
        self.timeout = timeout
        try:
            socket.inet_pton(socket.AF_INET, address)
        except (OSError, ValueError) as exc:
            self.close()
            raise ProbeError(f"Invalid IP address: {address}") from exc
        try:
            self.set_ttl(1)
            self._sock.settimeout(timeout)
        except (OSError, ProbeError):
            self.close()
            raise

    def set_ttl(self, ttl: int) -> None:
        """Set the time-to-live of the probes sent next."""
        try:
            self._sock.setsockopt(socket.IPPROTO_IP, socket.IP_TTL, ttl)
        except OSError as exc:
            raise ProbeError(f"Error setting socket options: {exc.strerror}") from exc

    def send_probe(self, seq: int, size: int = DEFAULT_PACKET_SIZE) -> None:
        """Send one echo request with sequence number ``seq``."""
        packet = build_echo_request(self.ident, seq, size)
        try:
            self._sock.sendto(packet, (self.address, 0))
        except OSError as exc:
            raise ProbeError(f"sendto: {exc.strerror}") from exc

    def receive(self) -> Optional[Reply]:
        """Wait for one packet and return it if it answers our probes.

        Raises TimeoutError when nothing arrives in time; returns None for a
        packet that is not a reply to us.
        """
        self._sock.settimeout(self.timeout)
        try:
            data, (source, *_) = self._sock.recvfrom(_RECV_SIZE)
        except (TimeoutError, BlockingIOError) as exc:
            raise TimeoutError("no reply") from exc
        except OSError as exc:
            raise ProbeError(f"recvfrom: {exc.strerror}") from exc
        return parse_reply(data, source, self.ident)

    def close(self) -> None:
        """Close the socket; closing twice is harmless."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "ProbeSocket":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class Tracer:
    """Probe each hop towards a target and print what answers."""

    def __init__(
        self,
        target: Target,
        sock: ProbeSocket,
        out: Optional[TextIO] = None,
        max_hops: int = DEFAULT_MAX_HOPS,
        tries: int = DEFAULT_TRIES,
        packet_size: int = DEFAULT_PACKET_SIZE,
    ) -> None:
        self.target = target
        self.sock = sock
        self.out = out
        self.max_hops = max_hops
        self.tries = tries
        self.packet_size = packet_size
        self._stopped = False
        self._seq = 0

    def stop(self) -> None:
        """Ask a running trace to finish before its next probe."""
        self._stopped = True

    def _write(self, out: TextIO, text: str) -> None:
        out.write(text)
        out.flush()

    def _probe(self, out: TextIO, hop: int) -> bool:
        self.sock.set_ttl(hop)
        self.sock.send_probe(self._seq, self.packet_size)
        self._seq = (self._seq + 1) & 0xFFFF
        try:
            reply = self.sock.receive()
        except TimeoutError:
            self._write(out, " *")
            return False
        if reply is None:
            return False
        self._write(out, f" {reply.source}")
        return reply.kind is ReplyKind.ECHO_REPLY

    def run(self) -> bool:
        """Trace the route; return True once the target itself has answered."""
        out = sys.stdout if self.out is None else self.out
        out.write(
            f"traceroute to {self.target.host} ({self.target.ip}), "
            f"{self.max_hops} hops max\n"
        )
        reached = False
        hop = 1
        while hop <= self.max_hops and not self._stopped:
            self._write(out, f"{hop:2d}  ")
            for _ in range(self.tries):
                if self._stopped:
                    break
                if self._probe(out, hop):
                    reached = True
                    self.stop()
            hop += 1
            out.write("\n")
        out.flush()
        return reached