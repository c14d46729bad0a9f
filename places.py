import logging

import httpx

import config

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to fetch nearby restaurants."


def _to_restaurant(place, latitude, longitude):
    photo_url = None
    photos = place.get("photos") or []
    if photos:
        photo_url = config.PLACES_MEDIA_URL.format(
            photo_name=photos[0].get("name"),
            width=config.PLACES_PHOTO_MAX_WIDTH,
            key=config.GOOGLE_API_KEY,
        )

    location = place.get("location") or {}
    directions_url = config.DIRECTIONS_URL.format(
        origin_lat=latitude,
        origin_lng=longitude,
        dest_lat=location.get("latitude"),
        dest_lng=location.get("longitude"),
    )

    opening_hours = place.get("currentOpeningHours") or place.get("openingHours") or {}
    return {
        "name": (place.get("displayName") or {}).get("text") or "Unknown",
        "rating": place.get("rating"),
        "price_level": place.get("priceLevel"),
        "photoUrl": photo_url,
        "address": place.get("formattedAddress"),
        "directionsUrl": directions_url,
        "is_open": opening_hours.get("openNow"),
    }


def _search(client, body):
    return client.post(
        config.PLACES_SEARCH_URL,
        params={"key": config.GOOGLE_API_KEY},
        headers={"X-Goog-FieldMask": config.PLACES_FIELD_MASK},
        json=body,
    )


def get_nearby_restaurants(latitude, longitude, food_item, client=None):
    """
    Find restaurants near the user that serve food_item.

    Returns {"data": [...]} on success and {"status": code, "error": message}
    on failure; nothing is raised and nothing is retried.
    """
    if latitude in (None, "") or longitude in (None, ""):
        return {"status": 400, "error": "Latitude and Longitude are required."}
    try:
        latitude = float(latitude)
        longitude = float(longitude)
    except (TypeError, ValueError):
        return {"status": 400, "error": "Latitude and Longitude must be numbers."}

    if not config.GOOGLE_API_KEY:
        logger.error("GOOGLE_API_KEY is not configured")
        return {"status": 500, "error": "Places search is not configured."}

    body = {
        "textQuery": f"{food_item} restaurant",
        "locationBias": {
            "circle": {
                "center": {"latitude": latitude, "longitude": longitude},
                "radius": config.PLACES_RADIUS_METERS,
            },
        },
        "maxResultCount": config.PLACES_MAX_RESULTS,
    }

    try:
        if client is None:
            with httpx.Client(timeout=config.PLACES_TIMEOUT_SECONDS) as http:
                response = _search(http, body)
        else:
            response = _search(client, body)
    except httpx.TimeoutException:
        logger.error("Google Places API Error: timed out after %ss", config.PLACES_TIMEOUT_SECONDS)
        return {"status": 504, "error": "Nearby restaurant search timed out."}
    except httpx.HTTPError as exc:
        logger.error("Google Places API Error: %s", exc)
        return {"status": 500, "error": GENERIC_ERROR}

    try:
        data = response.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}

    if not response.is_success:
        error = data.get("error")
        message = error.get("message") if isinstance(error, dict) else None
        logger.error("Google Places API Error: %s", message or response.reason_phrase)
        return {"status": response.status_code, "error": message or GENERIC_ERROR}

    if not data.get("places"):
        logger.error("Google Places API Error: No data or places found.")
        return {"status": 500, "error": "No data or places found."}

    return {"data": [_to_restaurant(place, latitude, longitude) for place in data["places"]]}
