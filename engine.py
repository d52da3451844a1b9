import logging
import os

import gi
gi.require_version('IBus', '1.0')
from gi.repository import IBus, GLib

from config import CONFIG_DIR, load_config, setup_logging
from dispatch import create_dispatcher
from keymap import DUBEOLSIK, LATIN, map_key

logger = logging.getLogger(__name__)

BUS_NAME = "org.deuseda.hangul"
ENGINE_NAME = "deuseda-hangul"

# evdev keycode for BackSpace
BACKSPACE_KEYCODE = 14

PASS_THROUGH_KEYS = (
    IBus.KEY_space, IBus.KEY_Return, IBus.KEY_KP_Enter, IBus.KEY_Tab, IBus.KEY_Escape,
)


class IBusSink:
    """Applies corrections as committed text and forwarded BackSpace events.

    Terminals cannot show preedit text, so the open syllable is committed as
    soon as it changes and erased again on the next correction.
    """

    def __init__(self, engine):
        self.engine = engine

    def erase_one(self):
        self.engine.forward_key_event(IBus.KEY_BackSpace, BACKSPACE_KEYCODE, 0)

    def append_text(self, s):
        self.engine.commit_text(IBus.Text.new_from_string(s))


class HangulEngine(IBus.Engine):
    def __init__(self):
        super().__init__()
        self.config = load_config()
        settings = dict(self.config, Layout=DUBEOLSIK)
        self.dispatcher = create_dispatcher(IBusSink(self), settings)

    def do_process_key_event(self, keyval, keycode, state):
        # Ignore key releases
        if state & IBus.ModifierType.RELEASE_MASK:
            return False

        # Ctrl, Alt, Super combinations are shortcuts, never Hangul
        if state & (IBus.ModifierType.CONTROL_MASK | IBus.ModifierType.MOD1_MASK | IBus.ModifierType.SUPER_MASK):
            self.dispatcher.flush()
            return False

        if keyval == IBus.KEY_Hangul:
            layout = LATIN if self.dispatcher.layout == DUBEOLSIK else DUBEOLSIK
            self.dispatcher.switch_layout(layout)
            return True

        if keyval == IBus.KEY_BackSpace:
            # Let the application delete committed text
            if self.dispatcher.composer.state.is_empty():
                return False
            self.dispatcher.handle_key("\x7f")
            return True

        if keyval in PASS_THROUGH_KEYS:
            self.dispatcher.flush()
            return False

        if 32 < keyval <= 126:
            char = chr(keyval)
            if map_key(char, self.dispatcher.layout) is not None:
                self.dispatcher.handle_key(char)
                return True

        self.dispatcher.flush()
        return False

    def do_focus_out(self):
        self.dispatcher.blur()

    def do_reset(self):
        self.dispatcher.flush()

    def do_disable(self):
        self.dispatcher.flush()


def main():
    config = load_config()
    if not os.path.exists(CONFIG_DIR):
        os.makedirs(CONFIG_DIR)
    setup_logging(config["LogLevel"], os.path.join(CONFIG_DIR, "deuseda-hangul.log"))

    bus = IBus.Bus()
    bus.request_name(BUS_NAME, 0)

    factory = IBus.Factory.new(bus.get_connection())
    factory.add_engine(ENGINE_NAME, HangulEngine)
    logger.info("engine %s registered on %s", ENGINE_NAME, BUS_NAME)

    main_loop = GLib.MainLoop()
    main_loop.run()


if __name__ == "__main__":
    main()
