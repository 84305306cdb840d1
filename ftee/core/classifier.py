"""Line classifier — tells directive lines from payload lines.

A directive is a line in which the delimiter appears as exactly one
whitespace-separated field, followed by at least one destination name.
Anything before the delimiter field is commentary and is ignored, so all of
these are directives naming ``somefile``::

    FTEE somefile
    // FTEE somefile
    # FTEE somefile

A line that does not contain the delimiter text at all is payload. A line
that contains it but is not a well-formed directive is an error.
"""

from __future__ import annotations

from ftee.core.errors import (
    MissingTargetsError,
    MultipleDelimitersError,
    UnboundedDelimiterError,
)
from ftee.models.classification import LineClassification


def classify(delimiter: str, line: str) -> LineClassification:
    """Classify *line* against *delimiter*.

    Returns a payload classification for lines without the delimiter text,
    or a directive classification carrying the destination names.

    Raises
    ------
    UnboundedDelimiterError
        The delimiter text is glued to other characters (``//FTEE x``).
    MultipleDelimitersError
        The delimiter appears as a standalone field more than once.
    MissingTargetsError
        Nothing follows the delimiter field.
    """
    if delimiter not in line:
        return LineClassification()

    names: list[str] = []
    found = False
    for field in line.split():
        if not found:
            found = field == delimiter
            continue
        if field == delimiter:
            raise MultipleDelimitersError(delimiter)
        names.append(field)

    if not found:
        raise UnboundedDelimiterError(delimiter)
    if not names:
        raise MissingTargetsError(delimiter)
    return LineClassification(names=names, is_directive=True)
