# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Read corpus records and dictionary words from files or HTTP(S) URLs"""
from __future__ import annotations

from .session import get_requests_session
from .text import strip_html, tokenize
from requests import Response, Session
from typing import Iterable, Iterator, NamedTuple

import datetime
import errno
import logging
import requests
import time

log = logging.getLogger("spellit.sources")
http_log = logging.getLogger("spellit_http")


class RetrySpec(NamedTuple):
    attempts: int = 3
    sleep: datetime.timedelta = datetime.timedelta(milliseconds=200)


class SourceError(Exception):
    """Corpus or dictionary could not be read"""


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def _fetch(session: Session, url: str, retry: RetrySpec) -> Response:
    attempts = retry.attempts
    while True:
        attempts -= 1
        try:
            http_log.debug("GET %s", url)
            response = session.get(url)
            break
        except requests.exceptions.ConnectionError as ex:
            if attempts <= 0:
                raise
            log.warning(
                "GET %s failed: %s: %s; retrying in %s seconds, %s attempts left",
                url,
                ex.__class__.__name__,
                ex,
                retry.sleep.total_seconds(),
                attempts,
            )
            time.sleep(retry.sleep.total_seconds())

    http_log.debug("%s %s", response.status_code, response.reason)
    if not str(response.status_code).startswith("2"):
        raise SourceError("GET {} failed with status {}".format(url, response.status_code))
    return response


def _decode(response: Response, url: str) -> str:
    # an explicit charset wins; otherwise the body is UTF-8, not requests' ISO-8859-1 default
    content_type = response.headers.get("content-type", "")
    encoding = response.encoding if response.encoding and "charset=" in content_type.lower() else "utf-8"
    try:
        return response.content.decode(encoding)
    except (LookupError, UnicodeDecodeError) as ex:
        raise SourceError("Body of {} is not valid {}: {}".format(url, encoding, ex)) from ex


def read_lines(
    location: str,
    session: Session | None = None,
    timeout: int | None = None,
    retry: RetrySpec = RetrySpec(),
) -> Iterator[str]:
    """Yield the lines of a local file or of the body of an HTTP(S) resource"""
    if is_url(location):
        session = session or get_requests_session(timeout=timeout)
        response = _fetch(session, location, retry)
        yield from _decode(response, location).splitlines()
        return

    try:
        with open(location, encoding="utf-8") as fp:
            for line in fp:
                yield line.rstrip("\r\n")
    except UnicodeDecodeError as ex:
        raise SourceError("{!r} is not valid UTF-8: {}".format(location, ex)) from ex
    except OSError as ex:
        if ex.errno == errno.ENOENT:
            raise SourceError("No such file: {!r}".format(location)) from ex
        raise SourceError("Failed to read {!r}: {}: {}".format(location, ex.__class__.__name__, ex)) from ex


def read_dictionary(location: str, session: Session | None = None, timeout: int | None = None) -> Iterator[str]:
    """One word per line; blank lines are skipped"""
    for line in read_lines(location, session=session, timeout=timeout):
        word = line.strip()
        if word:
            yield word


def iter_record_words(
    lines: Iterable[str],
    field: int | None = None,
    delimiter: str = ";",
    strip_markup: bool = False,
) -> Iterator[str]:
    """Tokenize whole lines, or only field number `field` of delimited records"""
    for line_number, line in enumerate(lines, start=1):
        if field is None:
            text = line
        else:
            fields = line.split(delimiter)
            if field >= len(fields):
                log.warning("line %d has %d fields, expected at least %d; skipped", line_number, len(fields), field + 1)
                continue
            text = fields[field]
        if strip_markup:
            text = strip_html(text)
        yield from tokenize(text)
