"""
Input validators.
"""
import re
from typing import Optional
from urllib.parse import urlparse

FILE_KEY_PATTERN = re.compile(r'^[a-zA-Z0-9_-]{8,64}$')
FIGMA_HOSTS = ("www.figma.com", "figma.com")
FILE_PATH_PREFIXES = ("file", "design", "proto", "board")


def validate_figma_file_key(file_key: str) -> bool:
    """Checks that a Figma file key looks well-formed."""
    if not file_key or not isinstance(file_key, str):
        return False
    return bool(FILE_KEY_PATTERN.match(file_key))


def file_key_from_url(url: str) -> Optional[str]:
    """Extracts the file key from a Figma URL."""
    parsed = urlparse(url)
    if parsed.netloc not in FIGMA_HOSTS:
        return None

    path_parts = parsed.path.strip('/').split('/')
    if len(path_parts) >= 2 and path_parts[0] in FILE_PATH_PREFIXES:
        file_key = path_parts[1]
        if validate_figma_file_key(file_key):
            return file_key
    return None


def extract_file_key(value: str) -> str:
    """
    Accepts a bare file key or a Figma URL and returns the file key.

    Raises:
        ValueError: If no valid file key can be found.
    """
    value = (value or "").strip()
    if validate_figma_file_key(value):
        return value

    file_key = file_key_from_url(value) if value.startswith(("http://", "https://")) else None
    if file_key is None:
        raise ValueError(f"Invalid Figma file key: {value!r}")
    return file_key
