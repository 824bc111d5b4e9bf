"""CompanyInfo: the single record printed on receipts and reports."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_THANKS_MESSAGE = "Thank you for shopping with us!"


@dataclass
class CompanyInfo:
    name: str = ""
    address: str = ""
    telephone: str = ""
    email: str = ""
    logo: str | None = None
    facebook: str = ""
    instagram: str = ""
    tiktok: str = ""
    thanks_message: str = DEFAULT_THANKS_MESSAGE
