from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pytz
import requests

from traktboxd.letterboxd.csv_writer import write_letterboxd_csv
from traktboxd.letterboxd.merge import MergeInputError, convert_history
from traktboxd.trakt.dates import resolve_timezone
from traktboxd.trakt.trakt_client import TraktClient
from traktboxd.utils.config import OUTPUT_CSV_PATH, RATINGS_JSON_PATH, TIMEZONE, WATCHED_JSON_PATH
from traktboxd.utils.json_io import read_json_file
from traktboxd.utils.logger import get_logger
from traktboxd.utils.safe_runner import safe_main

logger = get_logger("traktboxd")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convertir l'historique Trakt (watched + ratings) en CSV d'import Letterboxd")
    parser.add_argument("--watched", type=Path, default=WATCHED_JSON_PATH, help="JSON /users/me/watched/movies")
    parser.add_argument("--ratings", type=Path, default=RATINGS_JSON_PATH, help="JSON /users/me/ratings/movies")
    parser.add_argument("--output", type=Path, default=OUTPUT_CSV_PATH, help="CSV Letterboxd à produire")
    parser.add_argument("--timezone", default=TIMEZONE, help="Fuseau IANA pour les dates (défaut : fuseau local)")
    parser.add_argument("--fetch", action="store_true", help="Télécharger d'abord les JSON depuis l'API Trakt")
    parser.add_argument("--dry-run", action="store_true", help="Fusionner sans écrire le CSV")
    parser.add_argument("--debug", action="store_true", help="Logs détaillés")
    return parser


@safe_main
def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        logger.set_level(logging.DEBUG)

    try:
        tz = resolve_timezone(args.timezone)
    except pytz.UnknownTimeZoneError:
        logger.error("❌ Fuseau horaire inconnu : %s", args.timezone)
        return 1

    if args.fetch:
        try:
            TraktClient(logger=logger).export_history(args.watched, args.ratings)
        except requests.RequestException as exc:
            logger.error("❌ Export Trakt impossible : %s", exc)
            return 1

    logger.info("📖 Lecture des données Trakt…")
    watched = read_json_file(args.watched, logger=logger)
    ratings = read_json_file(args.ratings, logger=logger)
    if watched is None or ratings is None:
        logger.error("❌ Échec de lecture d'un ou des deux fichiers JSON, arrêt.")
        return 1

    try:
        result = convert_history(watched, ratings, tz=tz, logger=logger)
    except MergeInputError as exc:
        logger.error("❌ %s", exc)
        return 1

    if args.dry_run:
        logger.info("🧪 Dry-run : %s lignes non écrites", len(result.rows))
        return 0

    try:
        write_letterboxd_csv(result.rows, args.output, logger=logger)
    except OSError as exc:
        logger.exception("❌ Écriture du CSV impossible : %s", exc)
        return 1

    logger.info("✅ Conversion terminée → %s", args.output)
    return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
