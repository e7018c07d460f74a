from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from traktboxd.utils.logger import LoggerProtocol, ensure_logger


def read_json_file(path: Path | str, logger: LoggerProtocol | None = None) -> Any | None:
    """
    Lit et parse un fichier JSON.

    Retourne None (et logue l'erreur) si le fichier est absent, illisible ou mal formé.
    """
    logger = ensure_logger(logger, __name__)
    file_path = Path(path)
    if not file_path.exists():
        logger.error("❌ Fichier introuvable : %s", file_path)
        return None
    try:
        with file_path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("❌ Lecture/parsing JSON impossible pour %s : %s", file_path, exc)
        return None
