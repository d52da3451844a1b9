import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

DEL = b"\x7f"
BS = b"\x08"

ERASE_SEQUENCES = {"DEL": DEL, "BS": BS}

# erase: number of display units to remove, text: what to append afterwards
Correction = namedtuple("Correction", ["erase", "text"])


def display_units(text):
    # Composed syllables are single code points, so one unit per character.
    return len(text)


def diff(previous, current):
    if previous == current:
        return None
    return Correction(display_units(previous), current)


class OutputEmitter:
    """Plays corrections onto a sink exposing erase_one() and append_text()."""

    def __init__(self, sink):
        self.sink = sink

    def emit(self, corrections):
        for correction in corrections:
            logger.debug("emit erase=%d text=%r", correction.erase, correction.text)
            for _ in range(correction.erase):
                self.sink.erase_one()
            if correction.text:
                self.sink.append_text(correction.text)


class ByteStreamSink:
    """Sink over a byte-oriented transport such as a terminal websocket."""

    def __init__(self, write, erase=DEL, encoding="utf-8"):
        self.write = write
        self.erase = erase
        self.encoding = encoding

    def erase_one(self):
        self.write(self.erase)

    def append_text(self, s):
        self.write(s.encode(self.encoding))


class RecordingSink:
    """Keeps a model of what the receiving surface shows.

    `screen` is the list of display units currently visible and `ops` the
    raw sequence of ("erase", None) / ("append", text) calls.
    """

    def __init__(self):
        self.screen = []
        self.ops = []

    def erase_one(self):
        self.ops.append(("erase", None))
        if self.screen:
            self.screen.pop()

    def append_text(self, s):
        self.ops.append(("append", s))
        self.screen.extend(s)

    @property
    def text(self):
        return "".join(self.screen)

    def clear(self):
        self.screen = []
        self.ops = []
