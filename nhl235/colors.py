# nhl235/colors.py
"""
Writes formatted lines to the terminal, colored like teletext when the
output is a tty and colors haven't been turned off.
"""

import sys

CODES = {
    'reset': '\u001b[0m',
    'green': '\u001b[32m',
    'yellow': '\u001b[33m',
    'magenta': '\u001b[35m',
    'cyan': '\u001b[36m',
    'white': '\u001b[37m',
}

# formatter style name -> color
STYLE_COLORS = {
    'header': 'white',
    'live': 'white',
    'postponed': 'white',
    'preview': 'white',
    'final': 'green',
    'goal': 'cyan',
    'special': 'magenta',
    'highlight': 'yellow',
    'series': 'yellow',
    'stats': 'yellow',
}


def is_tty(stream=None):
    """True when `stream` (stdout by default) is an interactive terminal."""
    stream = stream if stream is not None else sys.stdout
    return bool(stream and hasattr(stream, 'isatty') and stream.isatty())


def color_text(text, color_name):
    """Wrap text in the ANSI code for color_name. Unknown colors and empty
    text are returned as is."""
    code = CODES.get(color_name, '')
    if not code or not text:
        return text
    return f"{code}{text}{CODES['reset']}"


def render_line(line, use_colors):
    if not use_colors:
        return ''.join(segment.text for segment in line)
    return ''.join(color_text(segment.text, STYLE_COLORS.get(segment.style)) for segment in line)


def render(lines, use_colors, stream=None):
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        stream.write(render_line(line, use_colors) + '\n')
    stream.flush()
