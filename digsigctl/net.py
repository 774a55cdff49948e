"""Discovery of the local address to listen on."""

from __future__ import annotations

import ipaddress
import socket
import sys
from typing import Optional, Union

import psutil

IpNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _local_addresses():
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        return
    for addresses in interfaces.values():
        for address in addresses:
            if address.family not in _FAMILIES:
                continue
            try:
                yield ipaddress.ip_address(address.address.split("%", 1)[0])
            except ValueError:
                continue


def discover_address(network: Union[str, IpNetwork]) -> Optional[IpAddress]:
    """Return a local address inside ``network``, or ``None`` if there is none.

    Raises ``ValueError`` if ``network`` is a string that is not an IP network.
    """
    if isinstance(network, str):
        network = ipaddress.ip_network(network, strict=False)
    return next((ip for ip in _local_addresses() if ip in network), None)


def discover_address_or_exit(network: str) -> IpAddress:
    """Return a local address inside ``network`` or exit the program."""
    try:
        parsed = ipaddress.ip_network(network, strict=False)
    except ValueError as error:
        print(error, file=sys.stderr)
        sys.exit(1)

    address = discover_address(parsed)
    if address is None:
        print("No address found", file=sys.stderr)
        sys.exit(2)
    return address