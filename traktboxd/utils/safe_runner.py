from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from traktboxd.utils.logger import get_logger

P = ParamSpec("P")
R = TypeVar("R")


def safe_main(func: Callable[P, R]) -> Callable[P, R]:
    """
    Protège un point d'entrée : toute exception imprévue est loguée avec sa trace
    puis le process sort avec le code 1 (130 sur Ctrl+C).
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            get_logger("safe_runner").warning("⛔ Interrompu par l'utilisateur")
            sys.exit(130)
        except Exception as exc:  # pylint: disable=broad-except
            get_logger("safe_runner").exception("💥 Erreur fatale dans %s : %s", func.__name__, exc)
            sys.exit(1)

    return wrapper
