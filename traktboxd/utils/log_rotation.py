from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path


def rotate_logs(log_dir: str | Path, days: int, logf: str | Path | None = None) -> list[Path]:
    """
    Supprime les fichiers *.log plus vieux que `days` jours.

    Le fichier `logf` (log du script en cours) n'est jamais supprimé.
    Retourne la liste des fichiers supprimés.
    """
    directory = Path(log_dir)
    if days <= 0 or not directory.is_dir():
        return []

    limit = datetime.now() - timedelta(days=days)
    keep = Path(logf).resolve() if logf else None
    removed: list[Path] = []

    for log_file in directory.glob("*.log"):
        if keep is not None and log_file.resolve() == keep:
            continue
        if datetime.fromtimestamp(log_file.stat().st_mtime) < limit:
            log_file.unlink()
            removed.append(log_file)
    return removed
