# nhl235/models.py
"""
Immutable records for one scores document and the parser that builds them.

The API payload looks roughly like:

    {"date": {"raw": "2021-01-23", "pretty": "Sat Jan 23"},
     "games": [{"status": {"state": "FINAL"},
                "startTime": "2021-01-23T19:00:00Z",
                "goals": [{"team": "PIT", "period": "OT", "min": 3, "sec": 0,
                           "scorer": {"player": "Sidney Crosby", "seasonTotal": 4},
                           "assists": [...]}],
                "scores": {"PIT": 2, "TOR": 1, "overtime": true},
                "teams": {"away": {"abbreviation": "PIT", ...},
                          "home": {"abbreviation": "TOR", ...}},
                "currentStats": {"playoffSeries": {"wins": {"PIT": 2, "TOR": 1}}, ...}}]}

Only the fields we display are kept.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .errors import MalformedDataError
from .log import debug

PREVIEW = 'PREVIEW'
LIVE = 'LIVE'
FINAL = 'FINAL'
POSTPONED = 'POSTPONED'

# Shootout goals have no game clock, they are shown at the 65th minute
SHOOTOUT_MINUTE = 65

# Names as they are printed on page 235. Both New York teams keep the
# nickname so they can be told apart.
TEAM_NAMES = {
    'ANA': 'Anaheim',
    'ARI': 'Arizona',
    'BOS': 'Boston',
    'BUF': 'Buffalo',
    'CAR': 'Carolina',
    'CBJ': 'Columbus',
    'CGY': 'Calgary',
    'CHI': 'Chicago',
    'COL': 'Colorado',
    'DAL': 'Dallas',
    'DET': 'Detroit',
    'EDM': 'Edmonton',
    'FLA': 'Florida',
    'LAK': 'Los Angeles',
    'MIN': 'Minnesota',
    'MTL': 'Montreal',
    'NJD': 'New Jersey',
    'NSH': 'Nashville',
    'NYI': 'NY Islanders',
    'NYR': 'NY Rangers',
    'OTT': 'Ottawa',
    'PHI': 'Philadelphia',
    'PIT': 'Pittsburgh',
    'SEA': 'Seattle',
    'SJS': 'San Jose',
    'STL': 'St. Louis',
    'TBL': 'Tampa Bay',
    'TOR': 'Toronto',
    'UTA': 'Utah',
    'VAN': 'Vancouver',
    'VGK': 'Vegas',
    'WPG': 'Winnipeg',
    'WSH': 'Washington',
}
UNKNOWN_TEAM = '[unknown]'


@dataclass(frozen=True)
class Team:
    abbreviation: str
    name: str


@dataclass(frozen=True)
class GoalEvent:
    """A single goal. `scorer` and `assists` hold display names (surnames)."""
    team: str
    scorer: str
    period: str
    minute: int
    assists: Tuple[str, ...] = ()

    @property
    def is_shootout(self):
        return self.period == 'SO'

    @property
    def special(self):
        """True for overtime and shootout goals."""
        return is_special_period(self.period)


@dataclass(frozen=True)
class SeriesStatus:
    home_wins: int
    away_wins: int


@dataclass(frozen=True)
class Game:
    home: Team
    away: Team
    home_score: int
    away_score: int
    state: str
    special: str  # '', 'ot' or 'so'
    goals: Tuple[GoalEvent, ...] = ()
    series: Optional[SeriesStatus] = None
    start_time: Optional[datetime] = None

    @property
    def score(self):
        return f"{self.home_score}-{self.away_score}"

    @property
    def winner(self):
        """Abbreviation of the team ahead, None when tied."""
        if self.home_score > self.away_score:
            return self.home.abbreviation
        if self.away_score > self.home_score:
            return self.away.abbreviation
        return None


@dataclass(frozen=True)
class Scoreboard:
    date: Optional[str]
    games: Tuple[Game, ...] = ()


@dataclass(frozen=True)
class HighlightConfig:
    players: frozenset = frozenset()

    @classmethod
    def from_names(cls, names):
        return cls(frozenset(names))

    def __contains__(self, name):
        return name in self.players

    def __bool__(self):
        return bool(self.players)


def format_minute(minute, period):
    """Turn a (minute within period, period) pair into a game minute,
    given 20 minute periods. Regular season overtime is "OT", playoff
    overtimes continue numbering from "4".
    """
    if period == 'SO':
        return SHOOTOUT_MINUTE
    if period == 'OT':
        return 60 + minute
    try:
        period_num = int(period)
    except ValueError:
        # Unknown extra period marker, place it after regulation
        return 60 + minute
    return 20 * (period_num - 1) + minute


def is_special_period(period):
    """True if a goal in this period was scored in overtime or a shootout.
    Unknown markers count as special rather than crashing."""
    try:
        return int(period) >= 4
    except ValueError:
        return True


def extract_scorer_name(name):
    """Return the player's name without the first given name.

    Not always right since players can have several first names, but we
    have no data on that and full names would not fit in the column.
    """
    parts = name.split()
    if len(parts) < 2:
        return name.strip()
    return ' '.join(parts[1:])


def _require(obj, key, context):
    if not isinstance(obj, dict) or key not in obj or obj[key] is None:
        raise MalformedDataError(
            "API returned malformed data. Try again later.",
            details=f"missing '{key}' in {context}",
        )
    return obj[key]


def _malformed(details):
    return MalformedDataError("API returned malformed data. Try again later.", details=details)


def _is_count(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def parse_team(team_json):
    abbreviation = _require(team_json, 'abbreviation', 'team')
    if not isinstance(abbreviation, str):
        raise _malformed(f"invalid team abbreviation {abbreviation!r}")
    name = (TEAM_NAMES.get(abbreviation)
            or team_json.get('shortName')
            or team_json.get('locationName')
            or UNKNOWN_TEAM)
    return Team(abbreviation=abbreviation, name=name)


def parse_goal(goal_json):
    period = str(_require(goal_json, 'period', 'goal'))
    scorer = _require(goal_json, 'scorer', 'goal')
    player = _require(scorer, 'player', 'goal scorer')
    if not isinstance(player, str):
        raise _malformed(f"invalid scorer {player!r}")
    team = str(_require(goal_json, 'team', 'goal')).replace('"', '')

    if period == 'SO':
        minute = SHOOTOUT_MINUTE
    else:
        minute = goal_json.get('min')
        if not _is_count(minute):
            raise _malformed(f"goal by {player} has no valid 'min'")
        minute = format_minute(minute, period)

    assists = []
    for a in goal_json.get('assists') or []:
        if not isinstance(a, dict) or not a.get('player'):
            continue
        if not isinstance(a['player'], str):
            raise _malformed(f"invalid assist {a['player']!r}")
        assists.append(extract_scorer_name(a['player']))
    return GoalEvent(
        team=team,
        scorer=extract_scorer_name(player),
        period=period,
        minute=minute,
        assists=tuple(assists),
    )


def _finish_suffix(scores, goals):
    """'so', 'ot' or '' depending on how the game ended (or is going)."""
    if scores.get('shootout'):
        return 'so'
    if scores.get('overtime'):
        return 'ot'
    if not goals:
        return ''
    period = goals[-1].period
    if period in ('1', '2', '3'):
        return ''
    if period == 'SO':
        return 'so'
    # OT, and playoff overtimes numbered 4 and up
    return 'ot'


def _parse_series(game_json, home, away):
    """Series wins from currentStats, None outside the playoffs."""
    current_stats = game_json.get('currentStats') or {}
    if not isinstance(current_stats, dict):
        return None
    series = current_stats.get('playoffSeries') or {}
    wins = series.get('wins') if isinstance(series, dict) else None
    if not isinstance(wins, dict):
        return None
    home_wins, away_wins = wins.get(home), wins.get(away)
    if not (_is_count(home_wins) and _is_count(away_wins)):
        return None
    return SeriesStatus(home_wins=home_wins, away_wins=away_wins)


def _parse_start_time(value):
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None


def parse_game(game_json):
    """Transform the JSON structure of a single game into a Game."""
    teams = _require(game_json, 'teams', 'game')
    home = parse_team(_require(teams, 'home', 'teams'))
    away = parse_team(_require(teams, 'away', 'teams'))
    status = _require(game_json, 'status', 'game')
    state = _require(status, 'state', 'status')

    scores = _require(game_json, 'scores', 'game')
    if not isinstance(scores, dict):
        raise _malformed("'scores' is not an object")
    # Games that have not started may come without scores
    home_score = scores.get(home.abbreviation, 0)
    away_score = scores.get(away.abbreviation, 0)
    if not (_is_count(home_score) and _is_count(away_score)):
        raise _malformed(f"invalid score {home_score!r}-{away_score!r}")

    goals_json = game_json.get('goals') or []
    if not isinstance(goals_json, list):
        raise _malformed("'goals' is not a list")
    # Stable sort, so goals within the same minute keep the API order
    goals = tuple(sorted((parse_goal(g) for g in goals_json), key=lambda g: g.minute))

    return Game(
        home=home,
        away=away,
        home_score=home_score,
        away_score=away_score,
        state=state,
        special=_finish_suffix(scores, goals),
        goals=goals,
        series=_parse_series(game_json, home.abbreviation, away.abbreviation),
        start_time=_parse_start_time(game_json.get('startTime')),
    )


def parse_scoreboard(document):
    """Transform the whole API response into a Scoreboard."""
    if not isinstance(document, dict):
        raise _malformed("response is not an object")
    games_json = document.get('games')
    if not isinstance(games_json, list):
        raise _malformed("response has no 'games' list")

    date = document.get('date')
    pretty_date = date.get('pretty') if isinstance(date, dict) else None

    games = tuple(parse_game(g) for g in games_json)
    debug('PARSE', f"Parsed {len(games)} games for {pretty_date or 'unknown date'}")
    return Scoreboard(date=pretty_date, games=games)
