from __future__ import annotations

from typing import Any, TypedDict

# --- Trakt raw payloads (subset utile) ---------------------------------------


class Ids(TypedDict, total=False):
    trakt: int | None
    slug: str | None
    imdb: str | None
    tmdb: int | None


class Movie(TypedDict, total=False):
    title: str | None
    year: int | None
    ids: Ids


class WatchedMovieEntry(TypedDict, total=False):
    """Élément de /users/me/watched/movies."""

    plays: int | None
    last_watched_at: str | None
    last_updated_at: str | None
    movie: Movie


class RatingMovieEntry(TypedDict, total=False):
    """Élément de /users/me/ratings/movies."""

    rated_at: str | None
    rating: int | None
    type: str  # "movie" | "show" | "season" | "episode"
    movie: Movie


JsonObj = dict[str, Any]
