from __future__ import annotations

from datetime import UTC, datetime, tzinfo

import pytz

from traktboxd.utils.logger import LoggerProtocol, ensure_logger


def resolve_timezone(name: str | None) -> tzinfo | None:
    """
    Convertit un nom IANA ("UTC", "Europe/Paris"...) en fuseau pytz.

    Un nom vide renvoie None, c'est-à-dire le fuseau local de la machine.
    Lève pytz.UnknownTimeZoneError si le nom est inconnu.
    """
    if not name:
        return None
    return pytz.timezone(name)


def parse_trakt_date(date_str: object) -> datetime | None:
    """
    Parse un timestamp Trakt en datetime aware.

    Formats fréquents : "YYYY-mm-ddTHH:MM:SS.000Z" ou "YYYY-mm-ddTHH:MM:SSZ".
    Un timestamp sans fuseau est considéré en UTC (c'est ce que renvoie Trakt).
    """
    if not date_str or not isinstance(date_str, str):
        return None
    try:
        dt = datetime.fromisoformat(date_str.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def format_trakt_date(
    date_str: object,
    tz: tzinfo | None = None,
    logger: LoggerProtocol | None = None,
) -> str:
    """
    Formate un timestamp Trakt en "YYYY-MM-DD" dans le fuseau `tz` (local si None).

    Retourne "" si la valeur est absente ou invalide ; une valeur invalide est loguée en warning.
    """
    if not date_str:
        return ""
    dt = parse_trakt_date(date_str)
    if dt is None:
        logger = ensure_logger(logger, __name__)
        logger.warning("⚠️ Date invalide ignorée : %r", date_str)
        return ""
    local = dt.astimezone(tz) if tz is not None else dt.astimezone()
    return local.strftime("%Y-%m-%d")
