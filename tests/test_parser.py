"""Line and file assembly tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from dhcpcdconf import (
    ConfigFile,
    ConfigParseError,
    ErrorKind,
    Line,
    LineParseError,
    ParserConfig,
    parse_file,
    parse_line,
    parse_path,
)
from dhcpcdconf.grammar.cursor import Cursor
from dhcpcdconf.models import (
    AddressFamily,
    DnsServerOption,
    ExtendedDnsServerOption,
    Hostname,
    Interface,
    Persistent,
    StaticIpAddress,
    StaticRouters,
)

SAMPLE = (
    "interface eth0\n"
    "static ip_address 192.168.1.10/24\n"
    "static routers 192.168.1.1 192.168.1.254\n"
    "option domain_name_servers,domain_name,domain_search\n"
    "hostname\n"
)


def test_sample_file_parses_to_five_lines() -> None:
    parsed = parse_file(SAMPLE)

    assert [line.declarations for line in parsed] == [
        (Interface("eth0"),),
        (StaticIpAddress(AddressFamily.IPV4, "192.168.1.10/24"),),
        (StaticRouters(("192.168.1.1", "192.168.1.254")),),
        (ExtendedDnsServerOption(),),
        (Hostname(),),
    ]
    assert [line.number for line in parsed] == [1, 2, 3, 4, 5]


def test_parsing_is_deterministic() -> None:
    assert parse_file(SAMPLE) == parse_file(SAMPLE)


def test_comments_and_whitespace_are_transparent() -> None:
    noisy = parse_file("interface   eth0   # primary link\n")
    plain = parse_file("interface eth0\n")

    assert noisy == plain


def test_blank_and_comment_lines_yield_empty_lines() -> None:
    parsed = parse_file("# dhcpcd.conf\n\n   \t\nhostname\n")

    assert len(parsed) == 4
    assert [line.is_blank() for line in parsed] == [True, True, True, False]


def test_empty_input_has_no_lines() -> None:
    assert parse_file("") == ConfigFile(())


def test_final_line_without_newline_is_accepted_by_default() -> None:
    parsed = parse_file("interface eth0\npersistent")

    assert list(parsed.declarations()) == [Interface("eth0"), Persistent()]


def test_final_line_without_newline_rejected_when_required() -> None:
    config = ParserConfig(require_trailing_newline=True)

    with pytest.raises(ConfigParseError) as excinfo:
        parse_file("interface eth0\npersistent", config)

    (diagnostic,) = excinfo.value.diagnostics
    assert diagnostic.kind is ErrorKind.UNTERMINATED_LINE
    assert (diagnostic.line, diagnostic.column) == (2, 11)


def test_routers_without_addresses_is_missing_argument() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_file("static routers\n")

    (diagnostic,) = excinfo.value.diagnostics
    assert diagnostic.kind is ErrorKind.MISSING_ARGUMENT
    assert diagnostic.line == 1
    assert diagnostic.column == 15
    assert "static routers" in diagnostic.message


@pytest.mark.parametrize(
    "text, column, message",
    [
        ("static ip_address\n", 18, "expected address after `static ip_address`"),
        ("static ip6_address  \n", 21, "expected address after `static ip6_address`"),
        (
            "static domain_name_servers\n",
            27,
            "expected address after `static domain_name_servers`",
        ),
        ("static routers   # none\n", 18, "expected address after `static routers`"),
    ],
)
def test_static_declarations_require_arguments(text: str, column: int, message: str) -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_file(text)

    (diagnostic,) = excinfo.value.diagnostics
    assert diagnostic.kind is ErrorKind.MISSING_ARGUMENT
    assert (diagnostic.line, diagnostic.column) == (1, column)
    assert diagnostic.message == message


def test_unrecognized_token_reports_first_unmatched_column() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_file("interface eth0 bogus stuff\n")

    (diagnostic,) = excinfo.value.diagnostics
    assert diagnostic.kind is ErrorKind.UNRECOGNIZED_TOKEN
    assert diagnostic.column == 16
    assert "`bogus`" in diagnostic.message


def test_stranded_dns_suffix_fails_the_line() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_file("option domain_name_servers,ntp_servers\n")

    (diagnostic,) = excinfo.value.diagnostics
    assert diagnostic.kind is ErrorKind.UNRECOGNIZED_TOKEN
    assert diagnostic.column == 27


def test_malformed_line_is_isolated_when_collecting() -> None:
    lines = SAMPLE.splitlines(keepends=True)
    lines[2] = "static routers\n"
    text = "".join(lines)

    with pytest.raises(ConfigParseError) as excinfo:
        parse_file(text)

    error = excinfo.value
    assert [d.line for d in error.diagnostics] == [3]
    assert [line.number for line in error.lines] == [1, 2, 4, 5]
    assert error.lines[3].declarations == (Hostname(),)


def test_all_failing_lines_are_collected() -> None:
    text = "what\nhostname\nstatic\ninterface\n"

    with pytest.raises(ConfigParseError) as excinfo:
        parse_file(text)

    kinds = [(d.line, d.kind) for d in excinfo.value.diagnostics]
    assert kinds == [
        (1, ErrorKind.UNRECOGNIZED_TOKEN),
        (3, ErrorKind.UNRECOGNIZED_TOKEN),
        (4, ErrorKind.MISSING_ARGUMENT),
    ]


def test_fail_fast_stops_at_first_error() -> None:
    text = "what\nhostname\nstatic\n"

    with pytest.raises(ConfigParseError) as excinfo:
        parse_file(text, {"fail_fast": True})

    assert [d.line for d in excinfo.value.diagnostics] == [1]


def test_max_errors_caps_collection() -> None:
    text = "a\nb\nc\nd\n"

    with pytest.raises(ConfigParseError) as excinfo:
        parse_file(text, ParserConfig(max_errors=2))

    assert len(excinfo.value.diagnostics) == 2


def test_error_message_lists_source_positions() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_file("hostname\nstatic routers\n", source="dhcpcd.conf")

    assert "dhcpcd.conf:2:15: expected address after `static routers`" in str(excinfo.value)


def test_parse_line_consumes_newline() -> None:
    cursor = Cursor("hostname persistent\noption domain_name_servers\n")

    first = parse_line(cursor)
    second = parse_line(cursor)

    assert first == Line(1, (Hostname(), Persistent()))
    assert second == Line(2, (DnsServerOption(),))
    assert cursor.at_end()


def test_parse_line_raises_line_error() -> None:
    cursor = Cursor("interface eth0 ,\n")

    with pytest.raises(LineParseError) as excinfo:
        parse_line(cursor)

    assert excinfo.value.diagnostic.column == 16


def test_parse_path_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "dhcpcd.conf"
    path.write_text(SAMPLE, encoding="utf-8")

    parsed = parse_path(path)

    assert len(parsed) == 5
    assert list(parsed.find(Interface)) == [Interface("eth0")]


def test_parse_path_labels_errors_with_path(tmp_path: Path) -> None:
    path = tmp_path / "dhcpcd.conf"
    path.write_text("interface\n", encoding="utf-8")

    with pytest.raises(ConfigParseError) as excinfo:
        parse_path(path)

    assert excinfo.value.source == str(path)
