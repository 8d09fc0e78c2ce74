import os
import re
from typing import Iterable, List

HEADER_TOKENS = {"brand", "name", "brand_name", "brand name", "company", "company name"}

_SEPARATORS = re.compile(r"[\r\n,]+")
_EDGE_QUOTES = re.compile(r"^[\"']|[\"']$")


def parse_brand_names(text: str) -> List[str]:
    """Split pasted text or CSV content into brand names, dropping blanks and header cells."""
    names = []
    for cell in _SEPARATORS.split(text or ""):
        if cell.strip().replace('"', "").replace("'", "").lower() in HEADER_TOKENS:
            continue
        name = _EDGE_QUOTES.sub("", cell.strip()).strip()
        if name:
            names.append(name)
    return names


def has_allowed_extension(filename: str, allowed: Iterable[str]) -> bool:
    extension = os.path.splitext(filename or "")[1].lower()
    return extension in {ext.lower() for ext in allowed}


def decode_upload(content: bytes) -> str:
    return content.decode("utf-8-sig", errors="replace")
