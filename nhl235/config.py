# nhl235/config.py
"""
Settings for the 235 command.

The only user-editable configuration is the highlight file, a plain text
file with one player per line:

    Laine
    Barkov
    Rantanen

Names are matched against the displayed scorer name (first name dropped).
"""

from pathlib import Path

from .log import debug

API_URL = 'https://nhl-score-api.herokuapp.com/api/scores/latest'
REQUEST_TIMEOUT = 10  # seconds
CONFIG_FILE_NAME = '.235.config'


def default_config_path():
    return Path.home() / CONFIG_FILE_NAME


def read_highlights(path=None):
    """Return the player names listed in the highlight file.

    A missing or unreadable file is not an error: highlighting is optional,
    so we fall back to an empty list.
    """
    path = Path(path) if path is not None else default_config_path()
    try:
        contents = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        debug('CONFIG', f"No highlight file at {path}")
        return []
    except (OSError, UnicodeDecodeError) as e:
        debug('CONFIG', f"Failed to read {path}: {e}")
        return []

    names = [line.strip() for line in contents.splitlines()]
    names = [name for name in names if name]
    debug('CONFIG', f"Loaded {len(names)} highlighted players from {path}")
    return names
