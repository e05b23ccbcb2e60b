"""
Oslo summer helpers: sunset approximation, golden hour and seasonal tips.

Times come from a fixed month table, not an astronomical calculation.
All functions take an optional timezone-aware `now` for testing and
default to the current Oslo local time.
"""

import random
from datetime import datetime, time, timedelta
from typing import Dict, Optional

from django.utils import timezone

# Month -> approximate Oslo sunset used for golden hour
GOLDEN_HOUR_SUNSET = {
    5: time(21, 30),
    6: time(22, 45),
    7: time(22, 30),
    8: time(21, 15),
    9: time(19, 30),
}
DEFAULT_GOLDEN_HOUR_SUNSET = time(18, 0)

SUMMER_SUNSET = time(22, 0)
WINTER_SUNSET = time(16, 0)

SEASONAL_TIPS = [
    {"tip": "Bring a guitar - Norwegians love beach singalongs!", "type": "tradition"},
    {"tip": "Ice swimming season starts in October! Brave locals swim year-round.", "type": "seasonal"},
    {"tip": "Midsummer (Sankthansaften) on June 23rd has beach bonfires across Oslo.", "type": "midsummer"},
    {"tip": "Norwegians often bring engangsgrill (disposable BBQs) to beaches.", "type": "tradition"},
    {"tip": "Bring a thermos of coffee - Norwegians drink coffee anytime, anywhere!", "type": "tradition"},
    {"tip": "August has the warmest water temperatures in Oslo fjord.", "type": "seasonal"},
    {"tip": "Locals often take a morning swim before work in summer.", "type": "tradition"},
    {"tip": "Hovedøya island hosts special midsummer celebrations.", "type": "midsummer"},
    {"tip": "September offers peaceful beaches with fewer tourists.", "type": "seasonal"},
    {"tip": "Bring 'matpakke' (packed lunch) - a Norwegian tradition!", "type": "tradition"},
]


def _local_now(now: Optional[datetime] = None) -> datetime:
    return timezone.localtime(now) if now else timezone.localtime()


def golden_hour(now: Optional[datetime] = None) -> Dict[str, str]:
    """Golden hour window for today: one hour before the table sunset."""
    local = _local_now(now)
    sunset = GOLDEN_HOUR_SUNSET.get(local.month, DEFAULT_GOLDEN_HOUR_SUNSET)
    end = local.replace(hour=sunset.hour, minute=sunset.minute, second=0, microsecond=0)
    start = end - timedelta(hours=1)
    return {
        "start_time": start.strftime("%H:%M"),
        "end_time": end.strftime("%H:%M"),
    }


def sunset_time(now: Optional[datetime] = None) -> datetime:
    """Approximate sunset: 22:00 April through September, 16:00 otherwise."""
    local = _local_now(now)
    sunset = SUMMER_SUNSET if 4 <= local.month <= 9 else WINTER_SUNSET
    return local.replace(hour=sunset.hour, minute=sunset.minute, second=0, microsecond=0)


def time_to_sunset(now: Optional[datetime] = None) -> str:
    local = _local_now(now)
    remaining = sunset_time(local) - local
    if remaining <= timedelta(0):
        return "Sunset passed"

    minutes = int(remaining.total_seconds() // 60)
    return f"{minutes // 60}h {minutes % 60}m"


def seasonal_tip(rng: Optional[random.Random] = None) -> Dict[str, str]:
    chooser = rng or random
    return dict(chooser.choice(SEASONAL_TIPS))


def is_midsummer_season(now: Optional[datetime] = None) -> bool:
    """Sankthansaften falls on June 23; the season runs June 15 to 30."""
    local = _local_now(now)
    return local.month == 6 and 15 <= local.day <= 30


def sunset_summary(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> Dict:
    local = _local_now(now)
    return {
        "sunset": sunset_time(local).strftime("%H:%M"),
        "time_to_sunset": time_to_sunset(local),
        "golden_hour": golden_hour(local),
        "is_midsummer": is_midsummer_season(local),
        "tip": seasonal_tip(rng),
    }
