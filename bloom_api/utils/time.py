from datetime import date, datetime, timezone

def parse_date(s: str) -> date:
    """Calendar day of an ISO date or datetime string. Raises ValueError when unparseable."""
    dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.date()

def epoch_ms(d: date) -> int:
    """Milliseconds since the epoch at UTC midnight of `d`."""
    midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000

def date_from_epoch_ms(ms: int) -> date:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).date()
