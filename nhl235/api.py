# nhl235/api.py
"""
Fetches the latest scores document from nhl-score-api.

One request per run, no retries and no caching: if the API is down we
would rather show nothing than stale results.
"""

import time

import requests

from .config import API_URL, REQUEST_TIMEOUT
from .errors import FetchError, MalformedDataError
from .log import debug


def fetch_scores(url=API_URL, timeout=REQUEST_TIMEOUT):
    """GET the scores endpoint and return the decoded JSON document.

    Raises FetchError for connectivity problems and non-2xx responses,
    MalformedDataError when the body is not valid JSON.
    """
    debug('API', f"GET {url}")
    api_start = time.time()
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    # ConnectTimeout is both a Timeout and a ConnectionError, report it as a timeout
    except requests.exceptions.Timeout as e:
        raise FetchError("API timed out. Try again later.", details=str(e)) from e
    except requests.exceptions.ConnectionError as e:
        raise FetchError(
            "Can't connect to the API. It might be because your Internet connection is down.",
            details=str(e),
        ) from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else '?'
        raise FetchError(f"API responded with HTTP {status}. Try again later.", details=str(e)) from e
    except requests.exceptions.RequestException as e:
        raise FetchError("Unknown error.", details=repr(e)) from e

    api_time = (time.time() - api_start) * 1000
    debug('API', f"Scores API call: {api_time:.0f}ms, status {r.status_code}")

    try:
        return r.json()
    except ValueError as e:
        raise MalformedDataError("API returned malformed data. Try again later.", details=str(e)) from e
