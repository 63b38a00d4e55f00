"""Runtime settings for treetest, read from the environment (and `.env`)."""
import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


PASS_GLYPH = os.getenv("TREETEST_PASS_GLYPH", "✅")
FAIL_GLYPH = os.getenv("TREETEST_FAIL_GLYPH", "❌")
PATH_SEP = os.getenv("TREETEST_PATH_SEP", " > ")
SHOW_TRACEBACKS = _flag("TREETEST_TRACEBACKS", True)
LOG_LEVEL = os.getenv("TREETEST_LOG_LEVEL", "WARNING").upper()

ROOT_NAME = "<root>"
