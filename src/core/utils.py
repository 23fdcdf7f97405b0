def fmt_time(seconds: float) -> str:
    """
    Format seconds as mm:ss (both zero padded). Negative and NaN become 00:00.
    """
    try:
        total = int(seconds)
    except (TypeError, ValueError, OverflowError):
        total = 0
    total = max(0, total)
    return f"{total // 60:02d}:{total % 60:02d}"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def fold(s: str) -> str:
    # case-insensitive comparison key
    return (s or "").casefold()
