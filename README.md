# hoptrace

`hoptrace` shows the path that packets take to reach a network host. It
sends ICMP echo requests with a time-to-live that grows by one at each hop,
and prints the address of every router that answers, until the target host
itself replies or the hop limit is reached.

## Installing

```
pip install .
```

## Running

Raw ICMP sockets need privileges, so the command must be run as root:

```
sudo hoptrace example.com
```

Output looks like this:

```
traceroute to example.com (192.0.2.10), 64 hops max
 1   192.168.1.1 192.168.1.1 192.168.1.1
 2   10.0.0.1 10.0.0.1 *
 ...
```

The host is resolved to its first IPv4 address. Each line holds the hop
number followed by one entry per probe (three per hop). An address is
printed for each answer to one of our probes; `*` marks a probe that got no
reply within five seconds. Tracing stops as soon as the target answers with
an echo reply (the remaining probes of that hop are not sent), after 64
hops, or on Ctrl-C.

Exactly one argument is expected. Besides a host name or address, two
arguments are recognised:

```
sudo hoptrace --help     # print the option list
sudo hoptrace --usage    # print a short usage message
```

The root check comes first, so these too must be run as root.

Exit statuses:

- `0` when the trace ran to its end (whether or not the target answered),
  and after `--help` or `--usage`;
- `1` when the host cannot be resolved or the socket cannot be opened or
  used;
- `64` when there is not exactly one argument;
- `77` when not run as root.

## What it does not do

The help text lists options such as `-m`, `-q`, `-w`, `-p`, `-M` and `-I`,
but none of them is understood: any argument other than `--help` and
`--usage` is taken as the host. The hop limit (64), probes per hop (3),
timeout (5 seconds) and probe size (60 bytes) are fixed on the command line.
Probes are always ICMP echo requests over IPv4; there are no UDP probes, no
IPv6, no round-trip times and no reverse lookup of the routers along the
way.

## Using it as a library

The pieces are available on their own, and there the limits above can be
chosen freely:

- `hoptrace.target.resolve_target(host)` resolves a name to a `Target`
  holding the host, its IPv4 address and its full name, raising
  `ResolutionError` on failure; `reverse_lookup(ip)` returns the name for an
  address.
- `hoptrace.packet.checksum(data)` computes the Internet checksum,
  `build_echo_request(ident, seq, size)` builds an ICMP echo request with a
  valid checksum, and `parse_reply(data, source, ident)` turns a received
  IPv4 datagram into a `Reply` (with a `ReplyKind` of `ECHO_REPLY` or
  `TIME_EXCEEDED`) when it answers a probe carrying `ident`, or `None`.
- `hoptrace.probe.ProbeSocket` wraps the raw socket as a context manager
  with `set_ttl`, `send_probe` and `receive`; it raises `ProbeError` when the
  socket cannot be opened or used, and `receive` raises `TimeoutError` when
  nothing arrives. `hoptrace.probe.Tracer` runs the hop-by-hop trace, writes
  its report to any text stream, returns `True` from `run()` once the target
  has answered, and can be halted with `stop()`.

```python
import sys

from hoptrace.probe import ProbeSocket, Tracer
from hoptrace.target import resolve_target

target = resolve_target("example.com")
with ProbeSocket(target.ip, ident=1234, timeout=5.0) as sock:
    Tracer(target, sock, sys.stdout, max_hops=30, tries=3, packet_size=60).run()
```

The `hoptrace.toolkit` sub-package holds standalone helpers:

- `chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`);
- `numbers`: lenient parsing with `atoi` and `atoi_base`, and `itoa`;
- `output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, `debug_mark` and
  `print_array` writing to a stream;
- `memory`: byte-buffer helpers `mem_set`, `bzero`, `mem_copy`, `mem_move`,
  `mem_chr`, `mem_cmp` and `calloc`;
- `search`: `str_len`, `str_chr`, `str_rchr`, `str_nstr`, `str_cmp`,
  `str_ncmp` and `str_dup`;
- `transform`: `substr`, `str_join`, `str_trim`, `split`, `str_mapi`,
  `str_iteri`, `strlcpy` and `strlcat`;
- `formatting`: a printf-style formatter supporting `%c %s %p %d %i %u %x
  %X %%` (`format_string`, `print_formatted` and the single-value
  formatters);
- `linked`: a singly linked `LinkedList` of `Node`s;
- `lines`: `LineReader`, which reads a text or binary stream one line at a
  time through a fixed-size buffer.

## Tests

```
pip install .[test]
pytest
```