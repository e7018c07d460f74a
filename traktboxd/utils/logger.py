"""Logger du projet traktboxd."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from traktboxd.utils.config import LOG_FILE_PATH, LOG_ROTATION_DAYS
from traktboxd.utils.log_rotation import rotate_logs


# ---------- Protocole (contrat) ----------
class LoggerProtocol(Protocol):
    """
    Interface minimale attendue par les fonctions du projet.

    Les méthodes `debug`, `info`, `warning`, `error` et `exception` loguent aux niveaux correspondants,
    `get_child` crée un logger enfant.
    """

    def debug(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def exception(self, msg: str, *args: object, **kwargs: Any) -> None: ...

    def get_child(self, suffix: str) -> LoggerProtocol: ...


# ---------- Classe concrète (instanciable) ----------


@dataclass(frozen=True)
class TraktboxdLogger:
    """
    Enveloppe autour d'un `logging.Logger` qui expose l'API de `LoggerProtocol`.

    Attributes:
        _base: The base logger instance.
    """

    _base: logging.Logger

    def debug(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args: object, **kwargs: Any) -> None:
        self._base.exception(msg, *args, **kwargs)

    def set_level(self, level: int) -> None:
        self._base.setLevel(level)

    def get_child(self, suffix: str) -> LoggerProtocol:
        """
        Creates a child logger with the specified suffix.

        Args:
        - suffix (str): The suffix to append to the original logger name.

        Returns:
        A new TraktboxdLogger instance that is a child of this logger.
        """
        return TraktboxdLogger(self._base.getChild(suffix))


def _ensure_handlers(base: logging.Logger, global_log_file: str, script_log_file: str) -> None:
    if getattr(base, "_traktboxd_configured", False):
        return

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - [%(name)s] %(message)s")

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    base.addHandler(stream)

    fh_global = logging.FileHandler(global_log_file, encoding="utf-8")
    fh_global.setFormatter(formatter)
    base.addHandler(fh_global)

    fh_script = logging.FileHandler(script_log_file, encoding="utf-8")
    fh_script.setFormatter(formatter)
    base.addHandler(fh_script)

    setattr(base, "_traktboxd_configured", True)


def get_logger(script_name: str) -> TraktboxdLogger:
    """
    Constructeur de logger.

    Crée le dossier de logs si besoin, lance la rotation des anciens fichiers puis
    branche la sortie console, le fichier global du jour et le fichier du script.

    :param script_name: Nom du script.
    :return: Instanciation de logger.
    """
    os.makedirs(LOG_FILE_PATH, exist_ok=True)
    date_str = datetime.now().strftime("%Y-%m-%d")
    global_log_file = os.path.join(LOG_FILE_PATH, f"{date_str}_traktboxd.log")
    script_log_file = os.path.join(LOG_FILE_PATH, f"{date_str}_{script_name}.log")

    base = logging.getLogger(script_name)
    base.setLevel(logging.INFO)
    _ensure_handlers(base, global_log_file, script_log_file)

    try:
        rotate_logs(LOG_FILE_PATH, LOG_ROTATION_DAYS, logf=script_log_file)
    except OSError as exc:
        TraktboxdLogger(base).warning("Rotation des logs échouée: %s", exc)

    return TraktboxdLogger(base)


# ---------- Utilities ----------
def ensure_logger(logger: LoggerProtocol | None, module: str) -> LoggerProtocol:
    """
    Retourne un logger enfant pour `module`, ou un nouveau logger si aucun n'est fourni.
    """
    if logger is None:
        return get_logger(module)
    return logger.get_child(module)

