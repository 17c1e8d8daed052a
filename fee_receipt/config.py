"""Configuration utilities for environment-based settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .styles import DEFAULT_STYLE, Letterhead, ReceiptStyle

DEFAULT_OUTPUT_DIR = 'pdfs'
_DEFAULT_LETTERHEAD = Letterhead()


def load_env(dotenv_path: Optional[str] = None) -> None:
    """Load environment variables from a .env file without overriding existing values."""
    path = Path(dotenv_path or '.env')
    if path.exists():
        load_dotenv(dotenv_path=str(path), override=False)


def _flag(value: str) -> bool:
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    """Structured configuration for rendering and storing receipts."""

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    school_name: str = _DEFAULT_LETTERHEAD.name
    school_address: str = _DEFAULT_LETTERHEAD.address
    school_phone: str = _DEFAULT_LETTERHEAD.phone
    footer: str = _DEFAULT_LETTERHEAD.footer
    compress: bool = False
    log_level: str = 'INFO'

    def style(self, base: ReceiptStyle = DEFAULT_STYLE) -> ReceiptStyle:
        letterhead = Letterhead(
            name=self.school_name,
            address=self.school_address,
            phone=self.school_phone,
            footer=self.footer,
        )
        return replace(base, letterhead=letterhead, compress=self.compress)


def settings_from_env() -> Settings:
    return Settings(
        output_dir=Path(os.getenv('RECEIPT_OUTPUT_DIR', DEFAULT_OUTPUT_DIR)),
        school_name=os.getenv('RECEIPT_SCHOOL_NAME', _DEFAULT_LETTERHEAD.name),
        school_address=os.getenv('RECEIPT_SCHOOL_ADDRESS', _DEFAULT_LETTERHEAD.address),
        school_phone=os.getenv('RECEIPT_SCHOOL_PHONE', _DEFAULT_LETTERHEAD.phone),
        footer=os.getenv('RECEIPT_FOOTER', _DEFAULT_LETTERHEAD.footer),
        compress=_flag(os.getenv('RECEIPT_COMPRESS', '0')),
        log_level=os.getenv('RECEIPT_LOG_LEVEL', 'INFO').upper(),
    )


@lru_cache(maxsize=1)
def get_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Return cached settings, ensuring environment variables are loaded once."""
    load_env(dotenv_path)
    return settings_from_env()
