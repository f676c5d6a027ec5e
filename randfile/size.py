import re

from randfile.constants import UNIT_MULTIPLIERS


_SIZE_RE = re.compile(r"\A(\d+(?:\.\d+)?)(?:([A-Za-z])[Bb]?)?\Z")


class SizeError(ValueError):
    pass


class InvalidSizeFormat(SizeError):
    def __init__(self, text: str):
        self.text = text
        super().__init__("Invalid size, please specify num or num[KMGT]")


class UnknownSizeSuffix(SizeError):
    def __init__(self, suffix: str):
        self.suffix = suffix
        super().__init__(f"Unknown number suffix '{suffix}'")


def split_size(text: str):
    """Split a size expression into its numeric text and unit letter (or None)."""
    match = _SIZE_RE.match(text or "")
    if match is None:
        raise InvalidSizeFormat(text)
    num, suffix = match.group(1), match.group(2)
    if suffix is not None and suffix.lower() not in UNIT_MULTIPLIERS:
        raise UnknownSizeSuffix(suffix)
    return num, suffix


def parse_size(text: str) -> int:
    """
    Convert a size such as ``10``, ``3.5K`` or ``22.5MB`` into a byte count.

    Units are binary (K = 1024). Fractional sizes are truncated toward zero
    after scaling, so ``3.5K`` is 3584 and ``0.5`` is 0.
    """
    num, suffix = split_size(text)
    multiplier = UNIT_MULTIPLIERS[suffix.lower()] if suffix else 1
    if "." in num:
        return int(float(num) * multiplier)
    return int(num) * multiplier
