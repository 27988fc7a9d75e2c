import io
import logging

import pytest

from search_server.cli import main, parse_document_line, read_line, read_line_with_number

INPUT = """and in with
3
fluffy cat fluffy tail | 7 2 7
white cat and fashionable collar | 8 -3
big do\tg
fluffy well-groomed cat
--fluffy

parrot
"""


def test_read_line():
    stream = io.StringIO("and in with\r\n 3 \n")
    assert read_line(stream) == "and in with"
    assert read_line_with_number(stream) == 3
    assert read_line(stream) == ""


@pytest.mark.parametrize(
    "line, expected",
    [
        ("fluffy cat | 7 2 7", ("fluffy cat", [7, 2, 7])),
        ("fluffy cat", ("fluffy cat", [])),
        ("a | b | -1", ("a | b", [-1])),
        ("cat | ", ("cat", [])),
    ],
)
def test_parse_document_line(line, expected):
    assert parse_document_line(line) == expected


def test_main(monkeypatch, capsys, caplog):
    monkeypatch.setattr("sys.stdin", io.StringIO(INPUT))

    with caplog.at_level(logging.WARNING):
        assert main([]) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "Results for query: fluffy well-groomed cat",
        "{ document_id = 0, relevance = 0.346574, rating = 5 }",
        "{ document_id = 1, relevance = 0, rating = 2 }",
        "Results for query: parrot",
        "Requests without results: 1",
    ]
    assert "Error in query '--fluffy'" in captured.err
    assert "Document 2 skipped" in caplog.text


def test_main_with_pages(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(INPUT))

    assert main(["--page-size", "1"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == [
        "Results for query: fluffy well-groomed cat",
        "{ document_id = 0, relevance = 0.346574, rating = 5 }",
        "Page break",
        "{ document_id = 1, relevance = 0, rating = 2 }",
        "Page break",
    ]


def test_main_malformed_stop_words(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("and wi\tth\n0\n"))

    assert main([]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_malformed_document_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("and in with\nthree\n"))

    assert main([]) == 1
    assert "Error:" in capsys.readouterr().err
