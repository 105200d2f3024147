"""
Environment configuration for the stoichiometry handler.

Values are read from the process environment (optionally populated from a
.env file):

- STOICHIOMETRY_ELEMENT_TABLE: path to an atom.json-style element table.
  When unset, atomic masses come from mendeleev.
- STOICHIOMETRY_LOCALE: default label language for derivations ("en" or "ko").
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_log = logging.getLogger(__name__)

SUPPORTED_LOCALES = ("en", "ko")
DEFAULT_LOCALE = "en"

load_dotenv()


def get_element_table_path() -> Optional[Path]:
    """Configured element table file, or None to use mendeleev."""
    raw = os.getenv("STOICHIOMETRY_ELEMENT_TABLE", "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def resolve_locale(locale: Optional[str] = None) -> str:
    """
    Pick the label locale: the explicit argument, else STOICHIOMETRY_LOCALE,
    else English. Unsupported values fall back to English.
    """
    value = (locale or os.getenv("STOICHIOMETRY_LOCALE") or DEFAULT_LOCALE).strip().lower()
    if value not in SUPPORTED_LOCALES:
        _log.warning(f"Unsupported locale {value!r}; using {DEFAULT_LOCALE!r}")
        return DEFAULT_LOCALE
    return value
