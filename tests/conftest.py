import logging
import os
import tempfile

# Les logs de get_logger() partent dans un dossier jetable, avant tout import du package
os.environ["LOG_FILE_PATH"] = tempfile.mkdtemp(prefix="traktboxd-logs-")

import pytest
import pytz

from traktboxd.utils.logger import TraktboxdLogger


@pytest.fixture
def test_logger():
    base = logging.getLogger("tests")
    base.setLevel(logging.DEBUG)
    return TraktboxdLogger(base)


@pytest.fixture
def utc():
    return pytz.UTC


def watched_entry(trakt_id, title="", year=None, last_watched_at=None, plays=1, **ids):
    movie = {"ids": {"trakt": trakt_id, **ids}}
    if title:
        movie["title"] = title
    if year is not None:
        movie["year"] = year
    entry = {"movie": movie, "plays": plays}
    if last_watched_at is not None:
        entry["last_watched_at"] = last_watched_at
    return entry


def rating_entry(trakt_id, rating=None, rated_at=None, type_="movie", title="", year=None, **ids):
    movie = {"ids": {"trakt": trakt_id, **ids}}
    if title:
        movie["title"] = title
    if year is not None:
        movie["year"] = year
    entry = {"type": type_, "movie": movie}
    if rating is not None:
        entry["rating"] = rating
    if rated_at is not None:
        entry["rated_at"] = rated_at
    return entry
