from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from traktboxd.letterboxd.models import LETTERBOXD_COLUMNS, LetterboxdRow
from traktboxd.utils.logger import LoggerProtocol, ensure_logger


def write_letterboxd_csv(
    rows: Iterable[LetterboxdRow],
    csv_path: Path | str,
    logger: LoggerProtocol | None = None,
) -> int:
    """
    Écrit les lignes au format d'import Letterboxd (en-tête inclus).

    Retourne le nombre de lignes écrites ; une erreur d'écriture (OSError) remonte à l'appelant.
    """
    logger = ensure_logger(logger, __name__)
    out_file = Path(csv_path)
    logger.info("📝 Écriture du CSV → %s", out_file)

    count = 0
    with out_file.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(LETTERBOXD_COLUMNS))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
            count += 1

    logger.info("✅ %s lignes écrites dans %s", count, out_file)
    return count
