"""Text rendering and JSON export tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dhcpcdconf import parse_file
from dhcpcdconf.export import (
    declaration_to_dict,
    export_json,
    export_text,
    file_to_dict,
    render_declaration,
    render_file,
    render_line,
)
from dhcpcdconf.models import (
    AddressFamily,
    Hostname,
    Interface,
    Line,
    StaticDomainNameServers,
    StaticIpAddress,
    StaticRouters,
)

CONFIG = """\
# A sample configuration
hostname
clientid
persistent
option rapid_commit
option domain_name_servers, domain_name, domain_search
option host_name
option classless_static_routes
option interface_mtu
require dhcp_server_identifier
slaac private

interface eth0   # wired
static ip_address 192.168.1.10/24
static ip6_address fd51:42f8:caae:d92e::ff/64
static routers 192.168.1.1
static domain_name_servers 192.168.1.1 fd51:42f8:caae:d92e::1
"""


def test_rendered_text_parses_back_to_same_file() -> None:
    parsed = parse_file(CONFIG)

    rendered = render_file(parsed)

    assert parse_file(rendered) == parsed
    assert "# A sample configuration" not in rendered
    assert rendered.splitlines()[12] == "interface eth0"


def test_render_declaration() -> None:
    assert render_declaration(StaticIpAddress(AddressFamily.IPV6, "fd00::1/64")) == (
        "static ip6_address fd00::1/64"
    )
    assert render_declaration(StaticRouters(("10.0.0.1", "10.0.0.2"))) == (
        "static routers 10.0.0.1 10.0.0.2"
    )


def test_render_rejects_foreign_objects() -> None:
    with pytest.raises(TypeError):
        render_declaration("hostname")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "addresses",
    [StaticRouters(("1.1.1.1",)), StaticDomainNameServers(("1.1.1.1",))],
)
def test_render_line_rejects_declaration_after_address_list(addresses) -> None:
    with pytest.raises(ValueError):
        render_line(Line(4, (addresses, Hostname())))

    assert render_line(Line(4, (Hostname(), addresses))).startswith("hostname static ")


def test_declaration_to_dict() -> None:
    assert declaration_to_dict(Interface("eth0")) == {"kind": "Interface", "name": "eth0"}
    assert declaration_to_dict(StaticIpAddress(AddressFamily.IPV4, "10.0.0.2/8")) == {
        "kind": "StaticIpAddress",
        "family": "v4",
        "address": "10.0.0.2/8",
    }
    assert declaration_to_dict(StaticRouters(("10.0.0.1",))) == {
        "kind": "StaticRouters",
        "addresses": ["10.0.0.1"],
    }


def test_export_json_writes_lines_in_order(tmp_path: Path) -> None:
    parsed = parse_file("interface wlan0\n\nhostname duid\n")
    output = tmp_path / "out" / "dhcpcd.json"

    export_json(parsed, output)

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data == file_to_dict(parsed)
    assert data["lines"] == [
        {"line": 1, "declarations": [{"kind": "Interface", "name": "wlan0"}]},
        {"line": 2, "declarations": []},
        {"line": 3, "declarations": [{"kind": "Hostname"}, {"kind": "Duid"}]},
    ]


def test_export_text(tmp_path: Path) -> None:
    parsed = parse_file("interface  eth0\nstatic routers 10.0.0.1\t10.0.0.2")
    output = tmp_path / "dhcpcd.conf"

    export_text(parsed, output)

    assert output.read_text(encoding="utf-8") == (
        "interface eth0\nstatic routers 10.0.0.1 10.0.0.2\n"
    )
