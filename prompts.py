from datetime import datetime

import pytz

import config

# start hour inclusive, end hour exclusive
MEAL_RANGES = {
    "Breakfast": (3, 11),   # 03:00–10:59
    "Lunch":     (11, 16),  # 11:00–15:59
    "Snacks":    (16, 17),  # 16:00–16:59
    "Dinner":    (17, 3),   # 17:00–02:59 (overnight)
}


def get_selected_meal(tz_name=None, now=None):
    """
    Return the current meal name in the user's local time.
    Unknown or missing zones fall back to DEFAULT_TZ_NAME.
    """
    try:
        tz = pytz.timezone(tz_name or config.DEFAULT_TZ_NAME)
    except pytz.UnknownTimeZoneError:
        tz = pytz.timezone(config.DEFAULT_TZ_NAME)

    if now is None:
        now_local = datetime.now(tz)
    elif now.tzinfo is None:
        now_local = tz.localize(now)
    else:
        now_local = now.astimezone(tz)

    current_hour = now_local.hour
    for meal, (start, end) in MEAL_RANGES.items():
        if start < end:
            if start <= current_hour < end:
                return meal
        elif current_hour >= start or current_hour < end:
            return meal
    return None


def build_mood_prompt(mood, context="", meal=None):
    context = (context or "").strip()
    return config.MOOD_PROMPT_TEMPLATE.format(
        mood=mood.strip().lower(),
        context=f" {context}" if context else "",
        meal=f"\nIt is {meal.lower()} time for me." if meal else "",
    )
