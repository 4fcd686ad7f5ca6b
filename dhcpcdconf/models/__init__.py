"""Parsed dhcpcd.conf data model."""

from .declarations import (
    DECLARATION_TYPES,
    AddressFamily,
    ClasslessStaticRouteOption,
    ClientId,
    Declaration,
    DhcpServerIdentifierRequire,
    DnsServerOption,
    DomainNameDnsServerOption,
    Duid,
    ExtendedDnsServerOption,
    HostNameOption,
    Hostname,
    Interface,
    InterfaceMtuOption,
    NtpServersOption,
    Persistent,
    RapidCommitOption,
    SlaacHwaddr,
    SlaacPrivate,
    StaticDomainNameServers,
    StaticIpAddress,
    StaticRouters,
    VendorClassId,
)
from .document import ConfigFile, Line

__all__ = [
    "DECLARATION_TYPES",
    "AddressFamily",
    "ClasslessStaticRouteOption",
    "ClientId",
    "ConfigFile",
    "Declaration",
    "DhcpServerIdentifierRequire",
    "DnsServerOption",
    "DomainNameDnsServerOption",
    "Duid",
    "ExtendedDnsServerOption",
    "HostNameOption",
    "Hostname",
    "Interface",
    "InterfaceMtuOption",
    "Line",
    "NtpServersOption",
    "Persistent",
    "RapidCommitOption",
    "SlaacHwaddr",
    "SlaacPrivate",
    "StaticDomainNameServers",
    "StaticIpAddress",
    "StaticRouters",
    "VendorClassId",
]
