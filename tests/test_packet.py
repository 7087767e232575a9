import struct

import pytest

from hoptrace.packet import (
    ICMP_ECHO,
    Reply,
    ReplyKind,
    build_echo_request,
    checksum,
    parse_reply,
)

IP_HEADER = bytes([0x45]) + bytes(19)


def echo_reply(ident, seq=0):
    return IP_HEADER + struct.pack("!BBHHH", 0, 0, 0, ident, seq) + bytes(8)


def time_exceeded(ident):
    inner = struct.pack("!BBHHH", ICMP_ECHO, 0, 0, ident, 1)
    return IP_HEADER + struct.pack("!BBHI", 11, 0, 0, 0) + IP_HEADER + inner


def test_checksum_worked_example():
    assert checksum(bytes([0x00, 0x01, 0xF2, 0x03, 0xF4, 0xF5, 0xF6, 0xF7])) == 0x220D


def test_checksum_of_empty_data():
    assert checksum(b"") == 0xFFFF


def test_checksum_odd_length_pads_with_zero():
    assert checksum(b"\x12\x34\x56") == checksum(b"\x12\x34\x56\x00")


def test_request_layout():
    packet = build_echo_request(0x1234, 1, 60)
    assert len(packet) == 60
    assert packet[0] == ICMP_ECHO
    assert packet[1] == 0
    assert packet[4:8] == b"\x12\x34\x00\x01"
    assert packet[8] == 0x42
    assert packet[9:] == bytes(51)


def test_request_checksum_verifies():
    packet = build_echo_request(4321, 77, 60)
    assert checksum(packet) == 0


def test_request_truncates_ident_and_seq():
    assert build_echo_request(0x11234, 0x10005, 16) == build_echo_request(0x1234, 5, 16)


def test_request_too_small_raises():
    with pytest.raises(ValueError):
        build_echo_request(1, 1, 7)


def test_header_only_request_has_no_payload():
    packet = build_echo_request(1, 2, 8)
    assert len(packet) == 8
    assert checksum(packet) == 0


def test_parse_echo_reply_matching():
    assert parse_reply(echo_reply(99), "192.0.2.1", 99) == Reply(
        ReplyKind.ECHO_REPLY, "192.0.2.1"
    )


def test_parse_echo_reply_other_ident():
    assert parse_reply(echo_reply(99), "192.0.2.1", 98) is None


def test_parse_time_exceeded_matching():
    reply = parse_reply(time_exceeded(500), "10.0.0.1", 500)
    assert reply == Reply(ReplyKind.TIME_EXCEEDED, "10.0.0.1")


def test_parse_time_exceeded_other_ident():
    assert parse_reply(time_exceeded(500), "10.0.0.1", 501) is None


def test_parse_unrelated_type():
    packet = IP_HEADER + struct.pack("!BBHHH", 3, 1, 0, 7, 0)
    assert parse_reply(packet, "10.0.0.1", 7) is None


@pytest.mark.parametrize("data", [b"", IP_HEADER, IP_HEADER + b"\x0b\x00"])
def test_parse_short_packets(data):
    assert parse_reply(data, "10.0.0.1", 1) is None