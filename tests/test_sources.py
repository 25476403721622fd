# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from pathlib import Path
from spellit.sources import is_url, iter_record_words, read_dictionary, read_lines, RetrySpec, SourceError
from unittest import mock

import datetime
import pytest
import requests

NO_SLEEP = RetrySpec(attempts=2, sleep=datetime.timedelta(0))


def make_session(*responses: object) -> mock.MagicMock:
    session = mock.MagicMock()
    session.get.side_effect = list(responses)
    return session


def make_response(
    text: str,
    status_code: int = 200,
    content_type: str = "text/plain; charset=utf-8",
    encoding: str = "utf-8",
    body_encoding: str = "utf-8",
) -> mock.MagicMock:
    response = mock.MagicMock()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Not Found"
    response.headers = {"content-type": content_type}
    response.encoding = encoding
    response.content = text.encode(body_encoding)
    return response


def test_is_url() -> None:
    assert is_url("https://example.com/words.txt")
    assert is_url("http://example.com/words.txt")
    assert not is_url("/usr/share/dict/words")
    assert not is_url("ftp.txt")


def test_read_lines_from_file(tmp_path: Path) -> None:
    path = tmp_path / "corpus.txt"
    path.write_text("first line\r\nsecond line\n\nпочему\n", encoding="utf-8")
    assert list(read_lines(str(path))) == ["first line", "second line", "", "почему"]


def test_read_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceError, match="No such file"):
        list(read_lines(str(tmp_path / "missing.txt")))


def test_read_dictionary_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("correct\n\n  water \nкашель\n", encoding="utf-8")
    assert list(read_dictionary(str(path))) == ["correct", "water", "кашель"]


def test_read_lines_from_url() -> None:
    session = make_session(make_response("correct\nwater\n"))
    assert list(read_lines("https://example.com/words.txt", session=session)) == ["correct", "water"]
    session.get.assert_called_once_with("https://example.com/words.txt")


def test_read_lines_from_url_without_charset_is_utf8() -> None:
    # requests reports ISO-8859-1 for text/* replies that name no charset
    response = make_response("кашель\nнасморк", content_type="text/plain", encoding="ISO-8859-1")
    session = make_session(response)
    assert list(read_lines("https://example.com/words.txt", session=session)) == ["кашель", "насморк"]


def test_read_lines_from_url_honours_explicit_charset() -> None:
    response = make_response(
        "кашель", content_type="text/plain; charset=windows-1251", encoding="windows-1251", body_encoding="cp1251"
    )
    session = make_session(response)
    assert list(read_lines("https://example.com/words.txt", session=session)) == ["кашель"]


def test_read_lines_from_url_undecodable_body() -> None:
    response = make_response("кашель", content_type="text/plain", encoding="ISO-8859-1", body_encoding="cp1251")
    session = make_session(response)
    with pytest.raises(SourceError, match="not valid utf-8"):
        list(read_lines("https://example.com/words.txt", session=session))


def test_read_lines_from_file_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "corpus.csv"
    path.write_bytes("кашель\n".encode("cp1251"))
    with pytest.raises(SourceError, match="not valid UTF-8"):
        list(read_lines(str(path)))


def test_read_lines_from_url_error_status() -> None:
    session = make_session(make_response("gone", status_code=404))
    with pytest.raises(SourceError, match="status 404"):
        list(read_lines("https://example.com/words.txt", session=session))


def test_read_lines_from_url_retries_connection_errors() -> None:
    session = make_session(requests.exceptions.ConnectionError("reset"), make_response("water"))
    assert list(read_lines("https://example.com/words.txt", session=session, retry=NO_SLEEP)) == ["water"]
    assert session.get.call_count == 2


def test_read_lines_from_url_gives_up() -> None:
    error = requests.exceptions.ConnectionError("reset")
    session = make_session(error, error)
    with pytest.raises(requests.exceptions.ConnectionError):
        list(read_lines("https://example.com/words.txt", session=session, retry=NO_SLEEP))
    assert session.get.call_count == 2


def test_iter_record_words_whole_lines() -> None:
    assert list(iter_record_words(["Hello, world", "again"])) == ["Hello", "world", "again"]


def test_iter_record_words_field(caplog: LogCaptureFixture) -> None:
    lines = ["1;first text;x", "2", "3;<b>second</b> text"]
    assert list(iter_record_words(lines, field=1, strip_markup=True)) == ["first", "text", "second", "text"]
    assert "line 2 has 1 fields, expected at least 2; skipped" in caplog.text


def test_iter_record_words_keeps_markup_by_default() -> None:
    assert list(iter_record_words(["<b>bold</b>"])) == ["b", "bold", "b"]


def test_iter_record_words_custom_delimiter() -> None:
    assert list(iter_record_words(["a|word here"], field=1, delimiter="|")) == ["word", "here"]
