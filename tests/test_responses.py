"""Unit tests for interpreting decoded service responses."""

from __future__ import annotations

import warnings

import pytest

from webplotly.errors import PlotlyServerError, PlotlyWarning
from webplotly.responses import interpret_response


def test_error_raises_with_value_verbatim() -> None:
    with pytest.raises(PlotlyServerError) as excinfo:
        interpret_response({"error": "bad input"})
    assert excinfo.value.error == "bad input"
    assert str(excinfo.value) == "bad input"


def test_empty_error_is_not_a_failure() -> None:
    content = {"error": "", "url": "http://x/1"}
    assert interpret_response(content) is content


def test_warning_is_emitted_even_when_quiet() -> None:
    with pytest.warns(PlotlyWarning, match="careful"):
        interpret_response({"warning": "careful"}, verbose=False)


def test_message_printed_only_when_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    interpret_response({"message": "hello"}, verbose=True)
    assert capsys.readouterr().out == "hello\n"

    interpret_response({"message": "hello"}, verbose=False)
    assert capsys.readouterr().out == ""


def test_plain_success_emits_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    content = {"url": "http://x/1", "filename": "plot-1"}
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert interpret_response(content) == content
    assert capsys.readouterr().out == ""


def test_direct_call_warning_points_at_caller() -> None:
    with pytest.warns(PlotlyWarning) as record:
        interpret_response({"warning": "careful"})
    assert record[0].filename == __file__
