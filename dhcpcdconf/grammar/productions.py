"""Ordered-choice declaration grammar.

    declaration  := extended_dns | domain_name_dns | dns
                  | flag
                  | interface | static_ip | static_routers | static_dns

    extended_dns    := 'option' 'domain_name_servers' ',' 'domain_name' ',' 'domain_search'
    domain_name_dns := 'option' 'domain_name_servers' ',' 'domain_name'
    dns             := 'option' 'domain_name_servers'
    interface       := 'interface' TOKEN
    static_ip       := 'static' ('ip_address' | 'ip6_address') TOKEN
    static_routers  := 'static' 'routers' TOKEN+
    static_dns      := 'static' 'domain_name_servers' TOKEN+

Alternatives are tried in the order of `PRODUCTIONS` and the first full
match wins. The three DNS options share the ``option domain_name_servers``
prefix, so the longest one must come first: trying the plain form first
would leave ``,domain_name`` behind on the line. Every production either
matches completely or leaves the cursor untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from dhcpcdconf.grammar.charset import COMMA, is_whitespace
from dhcpcdconf.grammar.cursor import Cursor
from dhcpcdconf.grammar.tokens import read_keyword, read_punct, read_token
from dhcpcdconf.models.declarations import (
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

logger = logging.getLogger("dhcpcdconf.grammar.productions")

Production = Callable[[Cursor], Optional[Declaration]]


def match_sequence(cursor: Cursor, parts: Sequence[str]) -> bool:
    """Match keywords and commas in order, all or nothing."""
    mark = cursor.mark()
    for part in parts:
        if part == COMMA:
            matched = read_punct(cursor, COMMA)
        else:
            matched = read_keyword(cursor, part)
        if not matched:
            cursor.reset(mark)
            return False
    return True


def _flag(parts: Tuple[str, ...], factory: Callable[[], Declaration]) -> Production:
    def production(cursor: Cursor) -> Optional[Declaration]:
        if match_sequence(cursor, parts):
            return factory()
        return None

    production.__name__ = "match_" + "_".join(p for p in parts if p != COMMA)
    production.__qualname__ = production.__name__
    return production


def _argument_offset(cursor: Cursor) -> int:
    """Offset after spaces and tabs; a trailing comment is not skipped."""
    text = cursor.text
    offset = cursor.offset
    while offset < len(text) and is_whitespace(text[offset]):
        offset += 1
    return offset


def _read_arguments(
    cursor: Cursor, keywords: Tuple[str, ...], what: str, many: bool
) -> Optional[List[str]]:
    """Match ``keywords`` followed by one (or, if ``many``, one or more) tokens.

    When the keywords match but no argument follows, an expectation is
    recorded on the cursor and nothing is consumed.
    """
    mark = cursor.mark()
    if not match_sequence(cursor, keywords):
        return None

    values = []
    while True:
        token = read_token(cursor)
        if token is None:
            break
        values.append(token.text)
        if not many:
            break

    if not values:
        offset = _argument_offset(cursor)
        cursor.expect(offset, f"expected {what} after `{' '.join(keywords)}`")
        cursor.reset(mark)
        return None

    return values


def match_interface(cursor: Cursor) -> Optional[Declaration]:
    values = _read_arguments(cursor, ("interface",), "interface name", many=False)
    if values is None:
        return None
    return Interface(values[0])


def match_static_ip_address(cursor: Cursor) -> Optional[Declaration]:
    for family in AddressFamily:
        values = _read_arguments(cursor, ("static", family.value), "address", many=False)
        if values is not None:
            return StaticIpAddress(family, values[0])
    return None


def match_static_routers(cursor: Cursor) -> Optional[Declaration]:
    values = _read_arguments(cursor, ("static", "routers"), "address", many=True)
    if values is None:
        return None
    return StaticRouters(tuple(values))


def match_static_domain_name_servers(cursor: Cursor) -> Optional[Declaration]:
    values = _read_arguments(
        cursor, ("static", "domain_name_servers"), "address", many=True
    )
    if values is None:
        return None
    return StaticDomainNameServers(tuple(values))


# Priority order matters only for the DNS options; see module docstring.
PRODUCTIONS: Tuple[Production, ...] = (
    _flag(
        ("option", "domain_name_servers", COMMA, "domain_name", COMMA, "domain_search"),
        ExtendedDnsServerOption,
    ),
    _flag(("option", "domain_name_servers", COMMA, "domain_name"), DomainNameDnsServerOption),
    _flag(("option", "domain_name_servers"), DnsServerOption),
    _flag(("option", "classless_static_routes"), ClasslessStaticRouteOption),
    _flag(("option", "interface_mtu"), InterfaceMtuOption),
    _flag(("option", "host_name"), HostNameOption),
    _flag(("option", "ntp_servers"), NtpServersOption),
    _flag(("option", "rapid_commit"), RapidCommitOption),
    _flag(("require", "dhcp_server_identifier"), DhcpServerIdentifierRequire),
    _flag(("slaac", "hwaddr"), SlaacHwaddr),
    _flag(("slaac", "private"), SlaacPrivate),
    _flag(("hostname",), Hostname),
    _flag(("clientid",), ClientId),
    _flag(("duid",), Duid),
    _flag(("persistent",), Persistent),
    _flag(("vendorclassid",), VendorClassId),
    match_interface,
    match_static_ip_address,
    match_static_routers,
    match_static_domain_name_servers,
)


def match_declaration(cursor: Cursor) -> Optional[Declaration]:
    """Try every production in priority order; return the first match.

    Returns:
        The matched declaration, or None. On None the cursor is unchanged
        and ``cursor.expected`` tells whether a keyword matched without
        its argument.
    """
    cursor.clear_expectation()
    for production in PRODUCTIONS:
        declaration = production(cursor)
        if declaration is not None:
            logger.debug(
                "line %d: %s matched %r", cursor.line, production.__name__, declaration
            )
            return declaration
    return None
