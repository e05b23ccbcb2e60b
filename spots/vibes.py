"""
Beach-day suggestions for a spot page: a vibes summary, drink ideas and a
short beach quote.

Each piece is generated by an LLM provider when one is passed in and falls
back to built-in text when there is none or generation fails, so callers
always get all three.

Usage:
    from spots.vibes import beach_day_suggestions

    suggestions = beach_day_suggestions(22.0, "clear sky", "Huk Beach")
    suggestions["drinks"]
"""

import asyncio
import logging
import random
from typing import Dict, Optional

from asgiref.sync import async_to_sync
from django.conf import settings

logger = logging.getLogger(__name__)

WARM_THRESHOLD = 20
SUNNY_WORDS = ("sunny", "clear")

BEACH_QUOTES = [
    "Life's a beach, enjoy the waves! 🌊☀️",
    "Sunshine is the best medicine! ☀️🏖️",
    "Salt in the air, sand in my hair! 🏝️",
    "Beach more, worry less! 🌴",
    "Happiness comes in waves! 🌊",
    "Good times and tan lines! ☀️",
    "Beach days are the best days! 🏖️",
    "Sky above, sand below, peace within! ✨",
    "Mermaid kisses and starfish wishes! 🧜‍♀️",
    "Keep calm and beach on! 🌞",
]

SYSTEM_PROMPT = (
    "You are a relaxed local from Oslo giving a friend advice about a day at "
    "the beach. Be casual and fun, and use a few emojis."
)

VIBES_PROMPT = """Generate a fun, relaxed beach day suggestion for {spot_name} in Oslo.
Current weather: {weather}, temperature: {temperature}°C.

Include suggestions for:
- What drinks to bring (beer, cava, cocktails)
- Snacks and food
- Activities and games
- What to pack
- Vibe/mood for the day

Keep it Norwegian summer-friendly. Max 150 words."""

DRINKS_PROMPT = """Suggest the perfect drinks for a beach day in Oslo.
Temperature: {temperature}°C, Weather: {weather}

Recommend:
- 2-3 alcoholic drinks (beer, cava, cocktails)
- 1-2 non-alcoholic options
- Any special Norwegian/Scandinavian drinks

Keep it short and practical. Max 100 words."""

QUOTE_PROMPT = """Generate a fun, inspirational quote about beach life, summer vibes, or relaxing by the water.
Make it feel Norwegian/Scandinavian in spirit: nature, hygge and good times.
Keep it under 20 words."""


def _is_warm(temperature: float) -> bool:
    return temperature > WARM_THRESHOLD


def _is_sunny(weather: str) -> bool:
    weather = (weather or "").lower()
    return any(word in weather for word in SUNNY_WORDS)


def fallback_beach_vibes(temperature: float, weather: str, spot_name: str) -> str:
    warm = _is_warm(temperature)
    sunny = _is_sunny(weather)

    drinks = (
        "Cold beers, white wine spritzers, and frozen margaritas" if warm
        else "Warm cider, red wine, or a thermos of hot toddy"
    )
    activities = (
        "Swimming, beach volleyball, and sunbathing" if sunny
        else "Beach walks, photography, and card games"
    )
    vibe = (
        "Lazy summer day with friends" if warm and sunny
        else "Cozy beach hangout with your closest buddies"
    )
    return "\n".join([
        f"🌞 Perfect day for {spot_name}!",
        "",
        f"Drinks: {drinks}",
        "Snacks: Chips, sandwiches, and fresh fruit",
        f"Activities: {activities}",
        "What to pack: Sunscreen, bluetooth speaker, and a good book",
        f"Vibe: {vibe}",
        "",
        "Enjoy your day at the beach! 🏖️",
    ])


def fallback_drink_recommendation(temperature: float, weather: str) -> str:
    warm = _is_warm(temperature)
    if warm and _is_sunny(weather):
        return (
            "🍺 Cold Ringnes beer\n🥂 Chilled cava with fresh berries\n🍹 Aperol Spritz\n"
            "🧃 Non-alcoholic: Sparkling water with cucumber and mint"
        )
    if warm:
        return "🍺 Craft IPA\n🍷 Rosé wine\n🥤 Non-alcoholic: Iced tea with lemon"
    return (
        "🍷 Red wine in a thermos\n🥃 Hot toddy or mulled wine\n"
        "☕ Non-alcoholic: Hot chocolate with marshmallows"
    )


def fallback_beach_quote(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(BEACH_QUOTES)


async def _generate(provider, prompt: str, fallback: str) -> str:
    """Ask the primary model, then the backup; fall back to built-in text."""
    if provider is None:
        return fallback

    timeout = getattr(settings, "LLM_TIMEOUT", 20)
    for model in filter(None, (provider.primary_model, provider.backup_model)):
        result = await provider.generate_response(
            model,
            prompt,
            system_prompt=SYSTEM_PROMPT,
            timeout_seconds=timeout,
        )
        if result.success and result.response:
            return result.response
        logger.warning(f"Suggestion generation with {model} failed: {result.error}")
    return fallback


async def generate_beach_day_suggestions(
    temperature: float,
    weather: str,
    spot_name: str,
    provider=None,
    rng: Optional[random.Random] = None,
) -> Dict[str, object]:
    fallbacks = {
        "vibes": fallback_beach_vibes(temperature, weather, spot_name),
        "drinks": fallback_drink_recommendation(temperature, weather),
        "quote": fallback_beach_quote(rng),
    }
    prompts = {
        "vibes": VIBES_PROMPT.format(spot_name=spot_name, weather=weather, temperature=temperature),
        "drinks": DRINKS_PROMPT.format(weather=weather, temperature=temperature),
        "quote": QUOTE_PROMPT,
    }

    keys = list(fallbacks)
    results = await asyncio.gather(
        *(_generate(provider, prompts[key], fallbacks[key]) for key in keys),
        return_exceptions=True,
    )

    suggestions: Dict[str, object] = {}
    for key, result in zip(keys, results):
        if isinstance(result, Exception):
            logger.error(f"Error generating {key} suggestion: {result}")
            result = fallbacks[key]
        suggestions[key] = result
    suggestions["generated"] = provider is not None and any(
        suggestions[key] != fallbacks[key] for key in keys
    )
    return suggestions


def beach_day_suggestions(
    temperature: float,
    weather: str,
    spot_name: str,
    provider=None,
    rng: Optional[random.Random] = None,
) -> Dict[str, object]:
    """Vibes, drinks and quote for a spot. Never raises for provider errors."""
    return async_to_sync(generate_beach_day_suggestions)(temperature, weather, spot_name, provider, rng)
