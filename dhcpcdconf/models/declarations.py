"""Typed declarations recognised in dhcpcd.conf.

`Declaration` is a closed union of frozen dataclasses, one per directive.
Payload-free directives compare equal to any other instance of the same
class, so parse results can be compared structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union, get_args


class AddressFamily(str, Enum):
    """Address family of a ``static`` address, named after its keyword."""

    IPV4 = "ip_address"
    IPV6 = "ip6_address"

    @property
    def short_name(self) -> str:
        return "v4" if self is AddressFamily.IPV4 else "v6"


# =============================================================================
# Option flags
# =============================================================================


@dataclass(frozen=True)
class ExtendedDnsServerOption:
    """``option domain_name_servers, domain_name, domain_search``"""


@dataclass(frozen=True)
class DomainNameDnsServerOption:
    """``option domain_name_servers, domain_name``"""


@dataclass(frozen=True)
class DnsServerOption:
    """``option domain_name_servers``"""


@dataclass(frozen=True)
class ClasslessStaticRouteOption:
    """``option classless_static_routes``"""


@dataclass(frozen=True)
class InterfaceMtuOption:
    """``option interface_mtu``"""


@dataclass(frozen=True)
class HostNameOption:
    """``option host_name``"""


@dataclass(frozen=True)
class NtpServersOption:
    """``option ntp_servers``"""


@dataclass(frozen=True)
class RapidCommitOption:
    """``option rapid_commit``"""


# =============================================================================
# Other flags
# =============================================================================


@dataclass(frozen=True)
class DhcpServerIdentifierRequire:
    """``require dhcp_server_identifier``"""


@dataclass(frozen=True)
class SlaacHwaddr:
    """``slaac hwaddr``"""


@dataclass(frozen=True)
class SlaacPrivate:
    """``slaac private``"""


@dataclass(frozen=True)
class Hostname:
    """``hostname``"""


@dataclass(frozen=True)
class ClientId:
    """``clientid``"""


@dataclass(frozen=True)
class Duid:
    """``duid``"""


@dataclass(frozen=True)
class Persistent:
    """``persistent``"""


@dataclass(frozen=True)
class VendorClassId:
    """``vendorclassid``"""


# =============================================================================
# Argument-bearing declarations
# =============================================================================


@dataclass(frozen=True)
class Interface:
    """``interface <name>``; starts an interface block for the consumer."""

    name: str


@dataclass(frozen=True)
class StaticIpAddress:
    """``static ip_address <addr>`` or ``static ip6_address <addr>``.

    Attributes:
        family: Which keyword introduced the address.
        address: Address text, usually in CIDR form. Not validated.
    """

    family: AddressFamily
    address: str


@dataclass(frozen=True)
class StaticRouters:
    """``static routers <addr> [<addr> ...]``"""

    addresses: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.addresses:
            raise ValueError("StaticRouters requires at least one address")


@dataclass(frozen=True)
class StaticDomainNameServers:
    """``static domain_name_servers <addr> [<addr> ...]``"""

    addresses: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.addresses:
            raise ValueError("StaticDomainNameServers requires at least one address")


Declaration = Union[
    ExtendedDnsServerOption,
    DomainNameDnsServerOption,
    DnsServerOption,
    ClasslessStaticRouteOption,
    InterfaceMtuOption,
    HostNameOption,
    NtpServersOption,
    RapidCommitOption,
    DhcpServerIdentifierRequire,
    SlaacHwaddr,
    SlaacPrivate,
    Hostname,
    ClientId,
    Duid,
    Persistent,
    VendorClassId,
    Interface,
    StaticIpAddress,
    StaticRouters,
    StaticDomainNameServers,
]

DECLARATION_TYPES = get_args(Declaration)
