import re

import pytest

from littleengine.log import hresult_to_string, log_error, log_info, log_warning

LINE = re.compile(r"\[\d{2}:\d{2}:\d{2}\]\[(?P<tag>[^\]]*)\]: (?P<msg>.*)")


@pytest.mark.parametrize("func", [log_info, log_warning, log_error])
def test_line_layout(func, capsys):
    func("Tag", "value {} and {name}", 5, name="x")
    out = capsys.readouterr().out
    match = LINE.fullmatch(out.rstrip("\n"))
    assert match is not None
    assert match.group("tag") == "Tag"
    assert match.group("msg") == "value 5 and x"


def test_plain_message_with_braces_is_kept(capsys):
    log_info("App", "literal {braces}")
    out = capsys.readouterr().out
    assert out.rstrip("\n").endswith("[App]: literal {braces}")


def test_no_colour_codes_when_not_a_terminal(capsys):
    log_error("E", "boom")
    assert "\x1b" not in capsys.readouterr().out


def test_one_line_per_call(capsys):
    log_info("A", "one")
    log_warning("B", "two")
    lines = capsys.readouterr().out.splitlines()
    assert [LINE.fullmatch(line).group("msg") for line in lines] == ["one", "two"]


def test_success_code():
    assert hresult_to_string(0) == "The operation completed successfully."


def test_signed_and_unsigned_forms_agree():
    assert hresult_to_string(0x80004005) == hresult_to_string(0x80004005 - 2**32)
    assert hresult_to_string(0x80004005) == "Unspecified error"


def test_unknown_code_fallback():
    assert hresult_to_string(0x12345678) == f"Unknown message code: {0x12345678}"


def test_unknown_failure_code_is_reported_signed():
    text = hresult_to_string(0x8FFFFFF0)
    assert text.startswith("Unknown message code: -")