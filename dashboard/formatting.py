#Display helpers for the route panel.

from routing.fare_service import round_half_up


def format_duration(seconds: float) -> str:
    """
    Minutes under an hour, hours + minutes above.
        540  -> "9 min"
        4500 -> "1h 15m"
    """
    minutes = round_half_up(seconds / 60)
    if minutes < 60:
        return f"{minutes} min"
    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m"


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{round_half_up(meters)} m"
    return f"{meters / 1000:.1f} km"


def format_fare(cost: int, currency: str = "₹") -> str:
    return f"{currency}{cost}"
