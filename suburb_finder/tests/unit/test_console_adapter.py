"""
tests/unit/test_console_adapter.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for ConsoleQuerySource / ConsoleResultSink using monkeypatched
stdin and captured stdout.
"""
from __future__ import annotations

import io
from decimal import Decimal

from suburb_finder.adapters.console import ConsoleQuerySource, ConsoleResultSink
from suburb_finder.domain.models import SearchResults, SuburbResult
from suburb_finder.ports.console_port import QuerySource, ResultSink


class TestConsoleQuerySource:
    def test_satisfies_port(self):
        assert isinstance(ConsoleQuerySource(), QuerySource)

    def test_reads_name_then_postcode(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("Sydney\n2000\n"))
        assert ConsoleQuerySource().read_query() == ("Sydney", "2000")
        out = capsys.readouterr().out
        assert out == "Please enter a suburb name: Please enter the postcode: "

    def test_closed_stdin_reads_as_empty(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert ConsoleQuerySource().read_query() == ("", "")
        assert capsys.readouterr().out == (
            "Please enter a suburb name: Please enter the postcode: "
        )


class TestConsoleResultSink:
    def test_satisfies_port(self):
        assert isinstance(ConsoleResultSink(), ResultSink)

    def test_notice(self, capsys):
        ConsoleResultSink().notice("Nothing found for SYDNEY, 2000!!\n")
        assert capsys.readouterr().out == "Nothing found for SYDNEY, 2000!!\n\n"

    def test_results_layout(self, capsys):
        results = SearchResults(
            suburb="SYDNEY",
            postcode="2000",
            near=[
                SuburbResult(suburb="SURRY HILLS", postcode=2010, distance=Decimal("1.69")),
                SuburbResult(suburb="DULWICH HILL", postcode=2203, distance=Decimal("7.67")),
            ],
            fringe=[
                SuburbResult(suburb="BURWOOD HEIGHTS", postcode=2136, distance=Decimal("10.03")),
            ],
        )
        ConsoleResultSink().results(results)
        assert capsys.readouterr().out == (
            "\nNearby Suburbs:\n"
            "\tSURRY HILLS  2010\n"
            "\tDULWICH HILL  2203\n"
            "\nFringe Suburbs:\n"
            "\tBURWOOD HEIGHTS  2136\n"
            "\n\n"
        )

    def test_empty_section_still_has_heading(self, capsys):
        results = SearchResults(
            suburb="SYDNEY",
            postcode="2000",
            fringe=[SuburbResult(suburb="BURWOOD HEIGHTS", postcode=2136, distance=Decimal("10.03"))],
        )
        ConsoleResultSink().results(results)
        assert "\nNearby Suburbs:\n\nFringe Suburbs:\n\tBURWOOD HEIGHTS  2136\n" in capsys.readouterr().out
