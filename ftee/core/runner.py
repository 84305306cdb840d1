"""Run driver — feeds every input file through the classifier and router.

Input files are processed in order, each read line by line. The router's
destinations and active targets carry over from one input file to the
next, so a file may continue writing to targets a previous file selected.
Any error aborts the whole run and rolls back every output file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import IO

from ftee.config import check_delimiter, config
from ftee.core.classifier import classify
from ftee.core.errors import FteeError, InputOpenError, ReadError
from ftee.core.router import Opener, StreamRouter, file_opener
from ftee.models.summary import RunSummary

logger = logging.getLogger(__name__)


def split_files(
    inputs: Iterable[str | PathLike[str]],
    delimiter: str | None = None,
    *,
    encoding: str | None = None,
    opener: Opener | None = None,
) -> RunSummary:
    """Split *inputs* into the output files named by their directive lines.

    Parameters
    ----------
    inputs:
        Input file paths, processed in order.
    delimiter:
        Directive marker. Defaults to ``config.delimiter``.
    encoding:
        Text encoding for inputs and outputs. Defaults to ``config.encoding``.
    opener:
        Destination opener handed to the :class:`StreamRouter`.

    Raises
    ------
    FteeError
        Any run-fatal condition. All output files are removed first.
    ValueError
        If *delimiter* is empty or contains whitespace.
    """
    delimiter = check_delimiter(config.delimiter if delimiter is None else delimiter)
    encoding = encoding or config.encoding
    counts = {"lines_read": 0, "directives": 0, "payload_lines": 0, "discarded_lines": 0}
    sources: list[str] = []

    router = StreamRouter(opener=opener or file_opener(encoding))
    with router:
        for path in inputs:
            source = str(path)
            sources.append(source)
            _process_input(router, source, delimiter, encoding, counts)

    logger.info(
        "Split %d input file(s) into %d destination(s)",
        len(sources),
        len(router.destinations),
    )
    return RunSummary(inputs=sources, destinations=router.destinations, **counts)


def _process_input(
    router: StreamRouter,
    source: str,
    delimiter: str,
    encoding: str,
    counts: dict[str, int],
) -> None:
    """Route every line of one input file."""
    try:
        handle = open(source, encoding=encoding, newline="\n")
    except OSError as exc:
        raise InputOpenError(source, exc.strerror or str(exc)).locate(source) from exc

    logger.debug("Processing %s", source)
    with handle:
        line_number = 0
        try:
            for line_number, line in _read_lines(handle, source):
                counts["lines_read"] += 1
                result = classify(delimiter, line)
                if result.is_directive:
                    counts["directives"] += 1
                    router.ensure_open(result.names)
                    continue
                counts["payload_lines"] += 1
                if not router.route(line):
                    counts["discarded_lines"] += 1
        except FteeError as exc:
            exc.locate(source, line_number or None)
            raise


def _read_lines(handle: IO[str], source: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, turning I/O failures into ReadError.

    Lines end only at a line feed and keep their terminators, so CRLF
    endings and a bare carriage return stay part of the line. A final
    unterminated line is yielded as is.
    """
    line_number = 0
    while True:
        try:
            line = handle.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Couldn't read input: {exc}").locate(
                source, line_number + 1
            ) from exc
        if not line:
            return
        line_number += 1
        yield line_number, line
