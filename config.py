import codecs
import configparser
import logging
import os

from emitter import ERASE_SEQUENCES
from hangul import CHAR, JASO, LITERAL, STANDALONE
from keymap import LAYOUTS

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.expanduser("~/.config/deuseda-hangul")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.ini")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULTS = {
    "VowelPolicy": STANDALONE,
    "EnableMoaJjiki": False,
    "BackspaceMode": JASO,
    "EraseSequence": "DEL",
    "Encoding": "utf-8",
    "Layout": "JAMO",
    "LogLevel": "WARNING",
}

_CHOICES = {
    "VowelPolicy": (STANDALONE, LITERAL),
    "BackspaceMode": (JASO, CHAR),
    "EraseSequence": tuple(ERASE_SEQUENCES),
    "Layout": LAYOUTS,
    "LogLevel": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
}


def load_config(path=CONFIG_FILE):
    settings = dict(DEFAULTS)
    if not os.path.exists(path):
        return settings

    config = configparser.ConfigParser()
    config.optionxform = str # Preserve case for keys
    try:
        config.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning("Error loading config %s: %s", path, e)
        return settings
    if "Settings" not in config:
        return settings

    section = config["Settings"]
    try:
        settings["EnableMoaJjiki"] = section.getboolean("EnableMoaJjiki", fallback=False)
    except ValueError as e:
        logger.warning("Invalid EnableMoaJjiki in %s: %s", path, e)

    for key, choices in _CHOICES.items():
        value = section.get(key, fallback=DEFAULTS[key]).strip().upper()
        if value in choices:
            settings[key] = value
        else:
            logger.warning("Invalid %s=%r in %s, using %s", key, value, path, DEFAULTS[key])

    encoding = section.get("Encoding", fallback=DEFAULTS["Encoding"]).strip()
    try:
        codecs.lookup(encoding)
        # The sink has to carry Hangul syllables and compatibility jamo
        "가ㄱ".encode(encoding)
        settings["Encoding"] = encoding
    except LookupError:
        logger.warning("Unknown encoding %r in %s, using %s", encoding, path, DEFAULTS["Encoding"])
    except UnicodeEncodeError:
        logger.warning("Encoding %r in %s cannot encode Hangul, using %s", encoding, path, DEFAULTS["Encoding"])

    return settings


def save_config(settings, path=CONFIG_FILE):
    config = configparser.ConfigParser()
    config.optionxform = str
    config["Settings"] = {}
    for key in DEFAULTS:
        value = settings.get(key, DEFAULTS[key])
        # Use lowercase strings for GLib compatibility
        if isinstance(value, bool):
            value = "true" if value else "false"
        config["Settings"][key] = str(value)

    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
    with open(path, "w", encoding="utf-8") as f:
        config.write(f)


def setup_logging(level="WARNING", filename=None):
    logging.basicConfig(filename=filename, level=getattr(logging, level, logging.WARNING),
                        format=LOG_FORMAT, datefmt=LOG_DATEFMT)
