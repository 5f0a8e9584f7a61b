"""
NHL-235 - latest NHL results on the command line, laid out like
YLE Teksti-TV page 235.

Score data comes from https://github.com/peruukki/nhl-score-api
"""

__version__ = "1.4.0"
