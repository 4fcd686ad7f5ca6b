"""Render parsed declarations back to dhcpcd.conf text.

Output is canonical: single spaces between tokens, one declaration run per
line, comments dropped. Parsing the rendered text yields an equal
ConfigFile.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Type

from dhcpcdconf.models import (
    ClasslessStaticRouteOption,
    ClientId,
    ConfigFile,
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
    Line,
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

logger = logging.getLogger("dhcpcdconf.export.text")

_FLAG_TEXT: Dict[Type, str] = {
    ExtendedDnsServerOption: "option domain_name_servers, domain_name, domain_search",
    DomainNameDnsServerOption: "option domain_name_servers, domain_name",
    DnsServerOption: "option domain_name_servers",
    ClasslessStaticRouteOption: "option classless_static_routes",
    InterfaceMtuOption: "option interface_mtu",
    HostNameOption: "option host_name",
    NtpServersOption: "option ntp_servers",
    RapidCommitOption: "option rapid_commit",
    DhcpServerIdentifierRequire: "require dhcp_server_identifier",
    SlaacHwaddr: "slaac hwaddr",
    SlaacPrivate: "slaac private",
    Hostname: "hostname",
    ClientId: "clientid",
    Duid: "duid",
    Persistent: "persistent",
    VendorClassId: "vendorclassid",
}

_ARGUMENT_TEXT: Dict[Type, Callable[[Declaration], str]] = {
    Interface: lambda d: f"interface {d.name}",
    StaticIpAddress: lambda d: f"static {d.family.value} {d.address}",
    StaticRouters: lambda d: "static routers " + " ".join(d.addresses),
    StaticDomainNameServers: lambda d: "static domain_name_servers " + " ".join(d.addresses),
}


def render_declaration(declaration: Declaration) -> str:
    """Return the canonical text of one declaration."""
    kind = type(declaration)
    if kind in _FLAG_TEXT:
        return _FLAG_TEXT[kind]
    if kind in _ARGUMENT_TEXT:
        return _ARGUMENT_TEXT[kind](declaration)
    raise TypeError(f"Not a dhcpcd.conf declaration: {declaration!r}")


def render_line(line: Line) -> str:
    """Render one line without its newline.

    Raises:
        ValueError: If an address list is followed by another declaration;
            the list would absorb the following keywords when read back.
    """
    for declaration in line.declarations[:-1]:
        if isinstance(declaration, (StaticRouters, StaticDomainNameServers)):
            raise ValueError(
                f"line {line.number}: {type(declaration).__name__} must be the "
                "last declaration on its line"
            )
    return " ".join(render_declaration(d) for d in line.declarations)


def render_file(config_file: ConfigFile) -> str:
    """Render a whole file, every line newline terminated."""
    return "".join(render_line(line) + "\n" for line in config_file.lines)


def export_text(config_file: ConfigFile, output_path: Path) -> None:
    """Write canonical dhcpcd.conf text to ``output_path``."""
    logger.info("Writing dhcpcd.conf text: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(render_file(config_file))
