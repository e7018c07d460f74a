from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

# Ordre des colonnes attendu par l'import Letterboxd (imdbID/tmdbID servent au matching)
LETTERBOXD_COLUMNS: tuple[str, ...] = (
    "imdbID",
    "tmdbID",
    "Title",
    "Year",
    "Rating10",
    "WatchedDate",
    "Rewatch",
)


@dataclass(frozen=True)
class MovieRecord:
    """
    Film unifié (watched + ratings), identifié par son trakt id.

    `trakt_id`, `imdb_id`, `tmdb_id`, `title` et `year` sont figés à la création ;
    une fusion ultérieure ne touche qu'à `rating` et `watched_date`.
    """

    trakt_id: int | str
    imdb_id: str = ""
    tmdb_id: str = ""
    title: str = ""
    year: int | str = ""
    rating: int | str = ""
    watched_date: str = ""  # "YYYY-MM-DD" ou ""
    is_rewatch: bool = False
    last_watched_timestamp: str | None = None  # brut, sert uniquement à départager les dates


class LetterboxdRow(TypedDict):
    imdbID: str
    tmdbID: str
    Title: str
    Year: int | str
    Rating10: int | str
    WatchedDate: str
    Rewatch: str  # "Yes" | "No"


@dataclass
class MergeStats:
    watched_read: int = 0
    ratings_read: int = 0
    watched_skipped: int = 0
    unique_watched: int = 0
    ratings_merged: int = 0
    ratings_added: int = 0
    ratings_skipped: int = 0
    total: int = 0
