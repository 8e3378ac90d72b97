import logging
import math

import pytest

from seonpy import (
    ParseMode,
    ParserOptions,
    SeonDecodeError,
    SeonSyntaxError,
    loads,
    parse,
    parse_all,
    parse_result,
)
from seonpy.value import IntValue, ObjectValue, StringValue, to_python
from tests._shared_cases import DOCUMENT_CASES, ERROR_CASES, SeonCase, SeonErrorCase, case_id


@pytest.mark.parametrize("case", DOCUMENT_CASES, ids=case_id)
def test_parse_document_cases(case: SeonCase) -> None:
    assert to_python(parse(case.source)) == case.expected


@pytest.mark.parametrize("case", ERROR_CASES, ids=case_id)
def test_parse_error_cases(case: SeonErrorCase) -> None:
    with pytest.raises(SeonDecodeError) as excinfo:
        parse(case.source)

    diagnostic = excinfo.value.diagnostic
    assert diagnostic.code == case.code
    assert (diagnostic.line, diagnostic.column) == (case.line, case.column)
    assert diagnostic.category == case.code.split("_", 1)[0].lower()


@pytest.mark.parametrize("case", ERROR_CASES, ids=case_id)
def test_lenient_parse_still_raises_first_error(case: SeonErrorCase) -> None:
    with pytest.raises(SeonDecodeError) as excinfo:
        parse(case.source, mode=ParseMode.LENIENT)

    assert excinfo.value.code == case.code


def test_end_to_end_scenarios() -> None:
    assert loads("{(tags a b c)}") == {"tags": ["a", "b", "c"]}
    assert loads("{(empty-list ())}") == {"empty-list": []}
    assert loads("{(theme-color \\#facccc)}") == {"theme-color": "#facccc"}
    assert loads("{(id u-1)(age #nil)}") == {"id": "u-1", "age": None}
    assert loads("{(reading-time #15.5)(views #2.4e3)}") == {"reading-time": 15.5, "views": 2400.0}


def test_parse_all_reads_a_stream_of_forms() -> None:
    values = parse_all("{(a #1)}\n{(a #2)}\nplain")

    assert values == (
        ObjectValue((("a", IntValue(1)),)),
        ObjectValue((("a", IntValue(2)),)),
        StringValue("plain"),
    )
    assert parse_all("  ; nothing\n") == ()


def test_parse_all_raises_first_error_in_source_order() -> None:
    with pytest.raises(SeonSyntaxError) as excinfo:
        parse_all("(a) (b} {(c)}", mode=ParseMode.LENIENT)

    assert excinfo.value.code == "SYNTAX_MISMATCHED_BRACKET"


def test_multiple_forms_fails_before_resolving_the_rest() -> None:
    with pytest.raises(SeonSyntaxError) as excinfo:
        parse("a #bogus")

    assert excinfo.value.code == "SYNTAX_MULTIPLE_FORMS"


def test_parse_logs_duplicate_key_warnings(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="seonpy"):
        value = parse("{(a #1) (a #2)}")

    assert value == ObjectValue((("a", IntValue(2)),))
    assert "Duplicate object key" in caplog.text


def test_parse_logs_decode_lifecycle_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="seonpy"):
        parse("(a)")

    assert "decoding 3 characters" in caplog.text


def test_big_integers_opt_in() -> None:
    source = "#99999999999999999999"

    with pytest.raises(SeonDecodeError):
        parse(source)
    assert parse(source, ParserOptions(allow_big_integers=True)) == IntValue(99999999999999999999)


def test_loads_maps_infinity_to_float() -> None:
    assert loads("(#inf #-inf)") == [math.inf, -math.inf]


def test_parse_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError):
        parse("a", ParserOptions(), mode=ParseMode.LENIENT)


def test_strict_parse_reports_unbalanced_brackets_before_bad_atoms() -> None:
    with pytest.raises(SeonSyntaxError) as excinfo:
        parse("{(a #bad) (b c)")

    assert excinfo.value.code == "SYNTAX_UNTERMINATED_FORM"

    result = parse_result("{(a #bad) (b c)", mode=ParseMode.LENIENT)
    assert [d.code for d in result.diagnostics] == ["SYNTAX_UNTERMINATED_FORM"]
