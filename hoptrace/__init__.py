"""Trace the route of ICMP echo probes to a network host."""

__version__ = "0.1.0"