"""
Fusion de l'historique Trakt (watched + ratings) en lignes d'import Letterboxd.

Deux passes indépendantes :
  1. seed_from_watched : watched -> {trakt_id: MovieRecord}
  2. merge_ratings     : {trakt_id: MovieRecord} x ratings -> nouveau mapping
puis project_records transforme le mapping en lignes CSV, dans l'ordre d'insertion.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import tzinfo
from typing import Any

from traktboxd.letterboxd.models import LetterboxdRow, MergeStats, MovieRecord
from traktboxd.trakt.dates import format_trakt_date, parse_trakt_date
from traktboxd.trakt.models import JsonObj, Movie
from traktboxd.utils.logger import LoggerProtocol, ensure_logger

MovieIndex = dict[Any, MovieRecord]


class MergeInputError(ValueError):
    """Une des deux collections d'entrée est absente ou n'est pas une liste."""


@dataclass(frozen=True)
class ConversionResult:
    rows: list[LetterboxdRow]
    stats: MergeStats


def _identified_movie(entry: object) -> Movie | None:
    """Retourne le bloc `movie` s'il porte un trakt id exploitable, sinon None."""
    if not isinstance(entry, dict):
        return None
    movie = entry.get("movie")
    if not isinstance(movie, dict):
        return None
    ids = movie.get("ids")
    if not isinstance(ids, dict):
        return None
    trakt_id = ids.get("trakt")
    if not trakt_id or not isinstance(trakt_id, (int, str)):
        return None
    return movie  # type: ignore[return-value]


def _new_record(movie: Movie, **fields: Any) -> MovieRecord:
    ids = movie.get("ids") or {}
    return MovieRecord(
        trakt_id=ids["trakt"],  # type: ignore[typeddict-item]
        imdb_id=str(ids.get("imdb") or ""),
        tmdb_id=str(ids.get("tmdb") or ""),
        title=movie.get("title") or "",
        year=movie.get("year") or "",
        **fields,
    )


def _is_rewatch(plays: object) -> bool:
    if isinstance(plays, str):
        try:
            plays = float(plays)
        except ValueError:
            return False
    return isinstance(plays, (int, float)) and plays > 1


def _rating_date_is_later(rated_at: object, last_watched_at: str | None) -> bool:
    rated = parse_trakt_date(rated_at)
    if rated is None:
        return False
    if not last_watched_at:
        return True
    watched = parse_trakt_date(last_watched_at)
    return watched is not None and rated > watched


def seed_from_watched(
    watched: Sequence[JsonObj],
    tz: tzinfo | None = None,
    stats: MergeStats | None = None,
    logger: LoggerProtocol | None = None,
) -> MovieIndex:
    """
    Construit l'index des films à partir de /users/me/watched/movies.

    Un trakt id en double écrase l'entrée précédente (sans changer sa position).
    """
    logger = ensure_logger(logger, __name__)
    stats = stats if stats is not None else MergeStats()
    movies: MovieIndex = {}

    logger.info("🎬 Traitement des films vus…")
    for entry in watched:
        movie = _identified_movie(entry)
        if movie is None:
            stats.watched_skipped += 1
            logger.warning("⚠️ Film vu ignoré (movie/ids/trakt manquant) : %r", entry)
            continue

        last_watched_at = entry.get("last_watched_at")
        record = _new_record(
            movie,
            watched_date=format_trakt_date(last_watched_at, tz=tz, logger=logger),
            is_rewatch=_is_rewatch(entry.get("plays") or 0),
            last_watched_timestamp=last_watched_at or None,
        )
        movies[record.trakt_id] = record

    stats.unique_watched = len(movies)
    logger.info("🎬 %s films uniques issus de l'historique", len(movies))
    return movies


def merge_ratings(
    movies: Mapping[Any, MovieRecord],
    ratings: Sequence[JsonObj],
    tz: tzinfo | None = None,
    stats: MergeStats | None = None,
    logger: LoggerProtocol | None = None,
) -> MovieIndex:
    """
    Fusionne /users/me/ratings/movies dans une copie de `movies`.

    Film déjà connu : la note est (ré)écrite et la date retenue est la plus récente
    entre le dernier visionnage et la notation. Film inconnu : ajouté tel quel,
    sans rewatch.
    """
    logger = ensure_logger(logger, __name__)
    stats = stats if stats is not None else MergeStats()
    merged: MovieIndex = dict(movies)

    logger.info("⭐ Traitement des notes et fusion…")
    for entry in ratings:
        movie = _identified_movie(entry)
        if movie is None or entry.get("type") != "movie":
            stats.ratings_skipped += 1
            logger.warning("⚠️ Note ignorée (pas un film ou données manquantes) : %r", entry)
            continue

        trakt_id = movie["ids"]["trakt"]  # type: ignore[typeddict-item]
        rating = entry.get("rating") or ""
        rated_at = entry.get("rated_at")
        rated_date = format_trakt_date(rated_at, tz=tz, logger=logger)

        existing = merged.get(trakt_id)
        if existing is None:
            merged[trakt_id] = _new_record(movie, rating=rating, watched_date=rated_date)
            stats.ratings_added += 1
            continue

        watched_date = existing.watched_date
        if _rating_date_is_later(rated_at, existing.last_watched_timestamp):
            watched_date = rated_date
        elif not watched_date and rated_date:
            watched_date = rated_date
        merged[trakt_id] = replace(existing, rating=rating, watched_date=watched_date)
        stats.ratings_merged += 1

    logger.info("⭐ Notes fusionnées pour %s films existants", stats.ratings_merged)
    logger.info("➕ %s films ajoutés depuis les notes", stats.ratings_added)
    return merged


def project_records(movies: Mapping[Any, MovieRecord]) -> list[LetterboxdRow]:
    return [
        LetterboxdRow(
            imdbID=record.imdb_id,
            tmdbID=record.tmdb_id,
            Title=record.title,
            Year=record.year,
            Rating10=record.rating,
            WatchedDate=record.watched_date,
            Rewatch="Yes" if record.is_rewatch else "No",
        )
        for record in movies.values()
    ]


def convert_history(
    watched: Sequence[JsonObj] | None,
    ratings: Sequence[JsonObj] | None,
    tz: tzinfo | None = None,
    logger: LoggerProtocol | None = None,
) -> ConversionResult:
    """
    Enchaîne seed -> merge -> projection.

    Lève MergeInputError si une des collections est absente ou n'est pas une liste ;
    les entrées mal formées sont seulement ignorées et loguées.
    """
    log = ensure_logger(logger, __name__)
    if not isinstance(watched, list):
        raise MergeInputError(f"Historique watched invalide : {type(watched).__name__}")
    if not isinstance(ratings, list):
        raise MergeInputError(f"Historique ratings invalide : {type(ratings).__name__}")

    stats = MergeStats(watched_read=len(watched), ratings_read=len(ratings))
    log.info("📥 %s films vus et %s notes lus", stats.watched_read, stats.ratings_read)

    movies = seed_from_watched(watched, tz=tz, stats=stats, logger=logger)
    movies = merge_ratings(movies, ratings, tz=tz, stats=stats, logger=logger)
    rows = project_records(movies)

    stats.total = len(rows)
    if stats.watched_skipped or stats.ratings_skipped:
        log.info(
            "🚫 Entrées ignorées : %s films vus / %s notes", stats.watched_skipped, stats.ratings_skipped
        )
    log.info("📊 Total de films uniques à écrire : %s", stats.total)
    return ConversionResult(rows=rows, stats=stats)
