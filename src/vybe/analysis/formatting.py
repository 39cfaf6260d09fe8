"""Display formatting for durations and large counts."""


def format_duration(minutes: int) -> str:
    """
    Format minutes as "1h 5m" or "45m".
    """
    hours, mins = divmod(int(minutes), 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def format_number(num: float) -> str:
    """12345 -> "12.3K"; below 10000 uses thousands separators ("9,876", "1,234.5")."""
    if num >= 10000:
        return f"{num / 1000:.1f}K"
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    return f"{num:,}"
