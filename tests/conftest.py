import copy
import json
from pathlib import Path

import pytest

from nhl235 import log

FIXTURES = Path(__file__).parent / 'fixtures'


def load_fixture(name):
    return json.loads((FIXTURES / name).read_text(encoding='utf-8'))


def read_expected(name):
    return (FIXTURES / name).read_text(encoding='utf-8')


def make_team(abbreviation, location='Somewhere'):
    return {
        'abbreviation': abbreviation,
        'id': 1,
        'locationName': location,
        'shortName': location,
        'teamName': 'Team',
    }


def make_goal(team, player, period='1', minute=1, assists=()):
    goal = {
        'team': team,
        'period': period,
        'scorer': {'player': player, 'seasonTotal': 1},
        'assists': [{'player': a, 'seasonTotal': 1} for a in assists],
    }
    if period != 'SO':
        goal['min'] = minute
        goal['sec'] = 0
    return goal


def make_game(home='TOR', away='PIT', home_score=0, away_score=0, state='FINAL',
              goals=None, series=None, **scores_extra):
    scores = {home: home_score, away: away_score}
    scores.update(scores_extra)
    current_stats = {'records': {}, 'streaks': {}, 'standings': {}}
    if series is not None:
        current_stats['playoffSeries'] = {'round': 1, 'wins': {home: series[0], away: series[1]}}
    game = {
        'status': {'state': state},
        'startTime': '2021-01-23T19:00:00Z',
        'scores': scores,
        'teams': {'home': make_team(home), 'away': make_team(away)},
        'preGameStats': {'records': {}},
        'currentStats': current_stats,
    }
    if goals is not None:
        game['goals'] = goals
    return game


@pytest.fixture(autouse=True)
def _quiet_debug(monkeypatch):
    monkeypatch.setattr(log, 'DEBUG', False)


@pytest.fixture
def latest_document():
    return load_fixture('latest.json')


@pytest.fixture
def document_factory():
    def _build(*games, date=None):
        return {'date': copy.deepcopy(date), 'games': list(games), 'errors': None}
    return _build
