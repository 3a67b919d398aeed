# utils.py
import os

# "\" is split on everywhere so full Windows client paths reduce to their basename.
_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def sanitize_filename(name: str) -> str:
    """Reduce a client-supplied name to a flat basename; "" means rejected."""
    name = (name or "").strip()
    for sep in _SEPARATORS:
        name = name.replace(sep, "/")
    base = name.rstrip("/").rsplit("/", 1)[-1].strip()
    if base in ("", ".", ".."):
        return ""
    return base.replace("\x00", "_")


def is_safe_basename(name: str) -> bool:
    return bool(name) and sanitize_filename(name) == name
