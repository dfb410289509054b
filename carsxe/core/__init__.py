"""
Core helpers for the CarsXE client.

Settings, the endpoint table, parameter validation, request building
and response parsing live here.  Nothing in this package performs
network I/O; the transports in :mod:`carsxe.clients` do.
"""

__all__ = []
