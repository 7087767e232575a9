"""Command-line entry point: trace the route to one host."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence

from hoptrace.probe import ProbeError, ProbeSocket, Tracer
from hoptrace.target import ResolutionError, resolve_target

EXIT_USAGE = 64
EXIT_NOROOT = 77

PROG = "hoptrace"

HELP_MSG = f"""Usage: {PROG} [OPTION...] HOST
Print the route packets trace to network host.

  -f, --first-hop=NUM        set initial hop distance, i.e., time-to-live
  -g, --gateways=GATES       list of gateways for loose source routing
  -I, --icmp                 use ICMP ECHO as probe
  -m, --max-hop=NUM          set maximal hop count (default: 64)
  -M, --type=METHOD          use METHOD (`icmp' or `udp') for traceroute
                             operations, defaulting to `udp'
  -p, --port=PORT            use destination PORT port (default: 33434)
  -q, --tries=NUM            send NUM probe packets per hop (default: 3)
      --resolve-hostnames    resolve hostnames
  -t, --tos=NUM              set type of service (TOS) to NUM
  -w, --wait=NUM             wait NUM seconds for response (default: 3)
  -?, --help                 give this help list
      --usage                give a short usage message
  -V, --version              print program version
"""

USAGE_MSG = f"""Usage: {PROG} [-I?V] [-f NUM] [-g GATES] [-m NUM] [-M METHOD] [-p PORT]
            [-q NUM] [-t NUM] [-w NUM] [--first-hop=NUM] [--gateways=GATES]
            [--icmp] [--max-hop=NUM] [--type=METHOD] [--port=PORT]
            [--tries=NUM] [--resolve-hostnames] [--tos=NUM] [--wait=NUM]
            [--help] [--usage] [--version] HOST
"""

MISSING_HOST_MSG = (
    f"{PROG}: missing host operand\n"
    f"Try '{PROG} --help' or '{PROG} --usage' for more information.\n"
)
NOT_ROOT_MSG = f"{PROG}: must be run as root\n"


def parse_arg(arg: str) -> Optional[str]:
    """Return the text to print for ``--help`` or ``--usage``, else None."""
    if arg == "--help":
        return HELP_MSG
    if arg == "--usage":
        return USAGE_MSG
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(MISSING_HOST_MSG)
        return EXIT_USAGE
    if os.getuid() != 0:
        sys.stderr.write(NOT_ROOT_MSG)
        return EXIT_NOROOT

    message = parse_arg(args[0])
    if message is not None:
        sys.stdout.write(message)
        return 0

    try:
        target = resolve_target(args[0])
    except ResolutionError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    try:
        with ProbeSocket(target.ip) as sock:
            tracer = Tracer(target, sock)
            previous = signal.signal(signal.SIGINT, lambda signum, frame: tracer.stop())
            try:
                tracer.run()
            finally:
                signal.signal(signal.SIGINT, previous)
    except ProbeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())