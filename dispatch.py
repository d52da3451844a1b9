import logging

from emitter import ERASE_SEQUENCES, ByteStreamSink, OutputEmitter
from hangul import HangulComposer
from keymap import JAMO, LAYOUTS, map_key, shifted

logger = logging.getLogger(__name__)

BACKSPACE_KEYS = ("\x7f", "\b")


class KeyDispatcher:
    """Routes key values to the composer or straight to the sink.

    All paths that leave composition (non-jamo keys, layout switches, focus
    loss) go through flush() so no partial syllable survives them.
    """

    def __init__(self, composer, emitter, layout=JAMO):
        if layout not in LAYOUTS:
            raise ValueError("unknown layout: %r" % (layout,))
        self.composer = composer
        self.emitter = emitter
        self.layout = layout

    @property
    def sink(self):
        return self.emitter.sink

    def handle_key(self, value, shift=False):
        if not value:
            return

        if value in BACKSPACE_KEYS:
            consumed, corrections = self.composer.backspace()
            if consumed:
                self.emitter.emit(corrections)
            else:
                self.sink.erase_one()
            return

        jamo = map_key(value, self.layout)
        if jamo is not None:
            if shift and self.layout == JAMO:
                jamo = shifted(jamo)
            self.emitter.emit(self.composer.process(jamo))
            return

        logger.debug("pass through %r", value)
        self.flush()
        self.sink.append_text(value)

    def flush(self):
        text, corrections = self.composer.flush()
        self.emitter.emit(corrections)
        if text:
            logger.debug("committed %r", text)
        return text

    def switch_layout(self, layout):
        if layout not in LAYOUTS:
            raise ValueError("unknown layout: %r" % (layout,))
        self.flush()
        self.layout = layout

    def blur(self):
        self.flush()


def create_dispatcher(sink, settings):
    composer = HangulComposer(vowel_policy=settings["VowelPolicy"],
                              moa_jjiki=settings["EnableMoaJjiki"],
                              backspace_mode=settings["BackspaceMode"])
    return KeyDispatcher(composer, OutputEmitter(sink), layout=settings["Layout"])


def byte_stream_sink(write, settings):
    return ByteStreamSink(write, erase=ERASE_SEQUENCES[settings["EraseSequence"]],
                          encoding=settings["Encoding"])
