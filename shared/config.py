# shared/config.py
from __future__ import annotations
import os, json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Raíz del proyecto (donde están .env, config.json, etc.)
BASE_DIR = Path(__file__).resolve().parents[1]

# Cargar variables del .env en la raíz (y fallback al cwd por si acaso)
load_dotenv(BASE_DIR / ".env")
load_dotenv()

DEFAULT_WSDL_URL = "https://www3.bcb.gov.br/sgspub/JSP/sgsgeral/FachadaWSSGS.wsdl"
DEFAULT_INDEX_ID = 189
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "Indices-BCB/1.0 (+zeep)"


def _load_cfg() -> Dict[str, Any]:
    """
    Carga (opcional) config.json desde la raíz del proyecto (o cwd). Si no existe, {}.
    """
    candidates = [BASE_DIR / "config.json", Path.cwd() / "config.json"]
    for p in candidates:
        try:
            if p.exists():
                data = json.loads(p.read_text(encoding="utf-8"))
                return data if isinstance(data, dict) else {}
        except (OSError, json.JSONDecodeError) as e:
            logger.exception("No se pudo cargar configuración %s: %s", p, e)
    return {}


class Settings:
    def __init__(self) -> None:
        cfg = _load_cfg()

        # --- Identidad / headers ---
        self.USER_AGENT: str = os.getenv("USER_AGENT", cfg.get("USER_AGENT", DEFAULT_USER_AGENT))

        # --- Webservice SGS del BCB ---
        self.BCB_WSDL_URL: str = str(
            os.getenv("BCB_WSDL_URL", cfg.get("BCB_WSDL_URL", DEFAULT_WSDL_URL)) or DEFAULT_WSDL_URL
        ).strip()
        self.BCB_DEFAULT_INDEX: int = self._coerce_positive_int(
            os.getenv("BCB_DEFAULT_INDEX", cfg.get("BCB_DEFAULT_INDEX", DEFAULT_INDEX_ID)),
            key="BCB_DEFAULT_INDEX",
            default=DEFAULT_INDEX_ID,
        )
        self.BCB_TIMEOUT: float = self._coerce_positive_float(
            os.getenv("BCB_TIMEOUT", cfg.get("BCB_TIMEOUT", DEFAULT_TIMEOUT)),
            key="BCB_TIMEOUT",
            default=DEFAULT_TIMEOUT,
        )

        # --- Logging ---
        self.LOG_LEVEL: str = str(os.getenv("LOG_LEVEL", cfg.get("LOG_LEVEL", "INFO")) or "INFO").upper()
        self.LOG_FORMAT: str = str(os.getenv("LOG_FORMAT", cfg.get("LOG_FORMAT", "plain")) or "plain").lower()

    @staticmethod
    def _coerce_positive_int(candidate: Any, *, key: str, default: int) -> int:
        try:
            value = int(candidate)
        except (TypeError, ValueError):
            logger.warning("Valor inválido para %s: %s", key, candidate)
            return default
        if value <= 0:
            logger.warning("Valor inválido para %s: %s", key, candidate)
            return default
        return value

    @staticmethod
    def _coerce_positive_float(candidate: Any, *, key: str, default: float) -> float:
        try:
            value = float(candidate)
        except (TypeError, ValueError):
            logger.warning("Valor inválido para %s: %s", key, candidate)
            return default
        if value <= 0:
            logger.warning("Valor inválido para %s: %s", key, candidate)
            return default
        return value


settings = Settings()


class JsonFormatter(logging.Formatter):
    """Formato JSON simple para registros de log."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """Configura el logging global.

    Por defecto usa nivel ``INFO`` y formato ``"plain"``. Los valores
    configurados se normalizan y, si son inválidos, se revierte a estos
    predeterminados. Los parámetros permiten sobrescribir el nivel y el
    formato configurados mediante variables de entorno.
    """

    level_name = (level or getattr(settings, "LOG_LEVEL", "INFO")).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_name = "INFO"
        level_value = logging.INFO

    if json_format is None:
        fmt = str(getattr(settings, "LOG_FORMAT", "plain")).lower()
        if fmt not in {"json", "plain"}:
            fmt = "plain"
        json_format = fmt == "json"

    if json_format:
        formatter: logging.Formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root = logging.getLogger()
    root.setLevel(level_value)
    root.handlers = []

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    # zeep vuelca el XML completo en DEBUG
    noisy_levels: Mapping[str, int] = {
        "zeep": logging.WARNING,
        "zeep.transports": logging.WARNING,
        "zeep.wsdl": logging.WARNING,
        "urllib3": logging.WARNING,
    }
    for logger_name, forced_level in noisy_levels.items():
        logging.getLogger(logger_name).setLevel(forced_level)


__all__ = [
    "BASE_DIR",
    "DEFAULT_WSDL_URL",
    "DEFAULT_INDEX_ID",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "Settings",
    "settings",
    "JsonFormatter",
    "configure_logging",
]
