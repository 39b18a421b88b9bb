# flappy/log.py
# -------------------------------------------------------------
# Journalisation: terminal lisible + fichier NDJSON optionnel
# Licence: MIT
# -------------------------------------------------------------

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER = "flappy"

# La simulation n'émet que DEBUG (spawns, événements) et INFO (transitions)
DIM, CYAN, RED, RESET = "\033[90m", "\033[36m", "\033[31m", "\033[0m"


def _short_name(record: logging.LogRecord) -> str:
    return record.name.replace(f"{ROOT_LOGGER}.", "")


def _data(record: logging.LogRecord):
    return getattr(record, "data", None)


class NdjsonFormatter(logging.Formatter):
    """Un objet JSON par ligne, horodaté à l'émission de l'enregistrement."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname.lower(),
            "logger": _short_name(record),
            "msg": record.getMessage(),
        }
        if _data(record):
            entry["data"] = _data(record)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Une ligne par message, préfixée du temps écoulé depuis le lancement."""

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            color = RED
        elif record.levelno >= logging.INFO:
            color = CYAN
        else:
            color = DIM
        line = f"{record.relativeCreated / 1000:8.3f}s {_short_name(record)}: {record.getMessage()}"
        if _data(record):
            line += f"  {json.dumps(_data(record), default=str)}"
        return f"{color}{line}{RESET}"


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> logging.Logger:
    """Configurer le logger racine 'flappy' et le retourner."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(NdjsonFormatter())
        root.addHandler(fh)
    return root
