import math
import re

# только ASCII-цифры, без экспоненты
NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

def extract_number(text: str) -> int | float | None:
    """Первое число из текста ответа, либо None."""
    match = NUMBER_RE.search(text)
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    # 42 отдаём как 42, а не 42.0
    return int(value) if value.is_integer() else value
