# nhl235/formatting.py
"""
Turns parsed games into the page 235 layout.

Each game is printed as

    Toronto          - Pittsburgh         ot 1-2
    Marner           4 Crosby          44
                       Crosby          63

home goals on the left, away goals on the right, minutes counted from
the start of the game. The formatter only produces text plus a style name
per segment; turning styles into terminal colors is colors.render's job.
"""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional

from .models import FINAL, LIVE, POSTPONED

NO_GAMES = 'No games.'
POSTPONED_LABEL = 'POSTP.'


@dataclass(frozen=True)
class Segment:
    text: str
    style: Optional[str] = None


BLANK = ()


def _status_column(game):
    if game.state == LIVE:
        return game.score, 'live'
    if game.state == FINAL:
        return f"{game.special} {game.score}", 'final'
    if game.state == POSTPONED:
        return POSTPONED_LABEL, 'postponed'
    # Not started yet: show the puck drop in local time when we know it
    if game.start_time is not None:
        return game.start_time.astimezone().strftime('%H:%M'), 'preview'
    return '', 'preview'


def format_header(game):
    teams = f"{game.home.name:<15} {'-':>2} {game.away.name:<15} {'':<2} "
    status, style = _status_column(game)
    return (Segment(teams, 'header'), Segment(f"{status:>6}", style))


def goal_style(goal, highlights=None):
    if goal.special:
        return 'special'
    if highlights and goal.scorer in highlights:
        return 'highlight'
    return 'goal'


def decisive_shootout_goal(game):
    """The shootout goal that decided the game, None if there was no shootout.

    The API may list every successful attempt; only the winning team's last
    one matters. If the winner can't be told from the score, fall back to
    the last attempt overall.
    """
    shootout = [goal for goal in game.goals if goal.is_shootout]
    if not shootout:
        return None
    winner = game.winner
    winning = [goal for goal in shootout if goal.team == winner]
    return (winning or shootout)[-1]


def _home_line(goal, highlights):
    return (Segment(f"{goal.scorer:<15} {goal.minute:>2}", goal_style(goal, highlights)),)


def _away_line(goal, highlights):
    return (Segment(f"{'':<15} {'':>2} {goal.scorer:<15} {goal.minute:>2}", goal_style(goal, highlights)),)


def format_goals(game, highlights=None):
    """Goal rows for a game, shootout attempts left out except the decisive one."""
    regular = [goal for goal in game.goals if not goal.is_shootout]
    home_goals = [goal for goal in regular if goal.team == game.home.abbreviation]
    away_goals = [goal for goal in regular if goal.team == game.away.abbreviation]

    lines = []
    for home, away in zip_longest(home_goals, away_goals):
        if home is not None and away is not None:
            lines.append((
                Segment(f"{home.scorer:<15} {home.minute:>2} ", goal_style(home, highlights)),
                Segment(f"{away.scorer:<15} {away.minute:>2}", goal_style(away, highlights)),
            ))
        elif home is not None:
            lines.append(_home_line(home, highlights))
        else:
            lines.append(_away_line(away, highlights))

    # The game is tied before the shootout, so the winner always
    # goes on its own row after everything else
    shootout_goal = decisive_shootout_goal(game)
    if shootout_goal is not None:
        if shootout_goal.team == game.home.abbreviation:
            lines.append(_home_line(shootout_goal, highlights))
        else:
            lines.append(_away_line(shootout_goal, highlights))
    return lines


def count_stats(goals, highlights):
    """Goals and assists per highlighted player, in order of first appearance.
    Shootout attempts are not goals and don't count."""
    stats = {}
    for goal in goals:
        if goal.is_shootout:
            continue
        if goal.scorer in highlights:
            g, a = stats.get(goal.scorer, (0, 0))
            stats[goal.scorer] = (g + 1, a)
        for assist in goal.assists:
            if assist in highlights:
                g, a = stats.get(assist, (0, 0))
                stats[assist] = (g, a + 1)
    return stats


def format_stats(game, highlights, show_highlights=False):
    stats = count_stats(game.goals, highlights)
    if not stats:
        return []
    message = ', '.join(f"{name} {g}+{a}" for name, (g, a) in stats.items())
    style = 'stats' if show_highlights else None
    return [(Segment(f"({message})", style),), BLANK]


def format_series(game):
    if game.series is None:
        return []
    series = game.series
    return [(Segment(f"Series {series.home_wins}-{series.away_wins}", 'series'),), BLANK]


def format_game(game, highlights=None, show_highlights=False, show_stats=False):
    marked = highlights if show_highlights else None
    lines = [format_header(game)]
    lines.extend(format_goals(game, marked))
    lines.append(BLANK)
    if show_stats and highlights:
        lines.extend(format_stats(game, highlights, show_highlights))
    lines.extend(format_series(game))
    return lines


def format_scoreboard(scoreboard, highlights=None, show_highlights=False, show_stats=False):
    """All lines for one run. A day without games is a single line."""
    if not scoreboard.games:
        return [(Segment(NO_GAMES),)]
    lines = []
    for game in scoreboard.games:
        lines.extend(format_game(game, highlights, show_highlights, show_stats))
    return lines