"""Enumerations for bomdetect."""

import enum


class BOMKind(enum.IntEnum):
    """The closed set of classification outcomes.

    ``UNKNOWN`` means no signature matched or there were not enough bytes to
    decide.  It is an ordinary result, not an error.
    """

    UNKNOWN = 0
    UTF8 = 1
    UTF16LE = 2
    UTF16BE = 3
    UTF32LE = 4
    UTF32BE = 5


class ReaderState(enum.IntEnum):
    """States of a :class:`~bomdetect.reader.BOMReader`."""

    NOT_STARTED = 0
    DETECTING_AND_BUFFERING = 1
    DRAINING = 2
    DELEGATING = 3
    FAULTED = 4
