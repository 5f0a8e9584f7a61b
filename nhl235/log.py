# nhl235/log.py
import sys

# When True, diagnostics are written to stderr. Set by the --debug flag.
DEBUG = False


def debug(tag, message):
    """Write a tagged diagnostic line like ``[API] ...`` to stderr."""
    if not DEBUG:
        return
    sys.stderr.write(f"[{tag}] {message}\n")
    sys.stderr.flush()
