"""Human-readable duration formatting."""


def format_duration(seconds: float) -> str:
    """Format seconds like "1h 2m 3s", dropping zero parts and fractional seconds."""
    total = int(seconds)
    if total <= 0:
        return "0s"

    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")
    return " ".join(parts)
