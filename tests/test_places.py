import json

import httpx
import pytest

import config
from places import get_nearby_restaurants

PLACE = {
    "displayName": {"text": "Biryani House"},
    "rating": 4.4,
    "priceLevel": "PRICE_LEVEL_MODERATE",
    "photos": [{"name": "places/abc/photos/xyz"}],
    "formattedAddress": "12 MG Road",
    "location": {"latitude": 12.98, "longitude": 77.6},
    "currentOpeningHours": {"openNow": True},
}


@pytest.fixture(autouse=True)
def places_key(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_API_KEY", "places-key")


def client_for(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_returns_restaurants_for_dish():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"places": [PLACE, {"location": {"latitude": 1, "longitude": 2}}]})

    result = get_nearby_restaurants("12.97", "77.59", "Chicken Biryani", client=client_for(handler))

    request = seen["request"]
    body = json.loads(request.content)
    assert request.method == "POST"
    assert request.url.params["key"] == "places-key"
    assert body["textQuery"] == "Chicken Biryani restaurant"
    assert body["locationBias"]["circle"] == {
        "center": {"latitude": 12.97, "longitude": 77.59},
        "radius": 1000.0,
    }
    assert body["maxResultCount"] == 5

    first, second = result["data"]
    assert first == {
        "name": "Biryani House",
        "rating": 4.4,
        "price_level": "PRICE_LEVEL_MODERATE",
        "photoUrl": "https://places.googleapis.com/v1/places/abc/photos/xyz/media?maxWidthPx=400&key=places-key",
        "address": "12 MG Road",
        "directionsUrl": "https://www.google.com/maps/dir/?api=1&origin=12.97,77.59&destination=12.98,77.6",
        "is_open": True,
    }
    assert second["name"] == "Unknown"
    assert second["photoUrl"] is None
    assert second["is_open"] is None


@pytest.mark.parametrize("latitude, longitude", [(None, 77.5), (12.9, ""), ("north", "east")])
def test_rejects_missing_or_bad_coordinates(latitude, longitude):
    def handler(request):
        raise AssertionError("no request expected")

    result = get_nearby_restaurants(latitude, longitude, "Dal Makhani", client=client_for(handler))
    assert result["status"] == 400


def test_requires_api_key(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_API_KEY", None)
    assert get_nearby_restaurants(12.9, 77.5, "Dal Makhani")["status"] == 500


def test_reports_provider_error_message():
    def handler(request):
        return httpx.Response(403, json={"error": {"message": "API key not valid"}})

    result = get_nearby_restaurants(12.9, 77.5, "Dal Makhani", client=client_for(handler))
    assert result == {"status": 403, "error": "API key not valid"}


def test_reports_generic_error_without_provider_message():
    def handler(request):
        return httpx.Response(502, text="bad gateway")

    result = get_nearby_restaurants(12.9, 77.5, "Dal Makhani", client=client_for(handler))
    assert result == {"status": 502, "error": "Failed to fetch nearby restaurants."}


def test_reports_empty_results():
    def handler(request):
        return httpx.Response(200, json={})

    result = get_nearby_restaurants(12.9, 77.5, "Dal Makhani", client=client_for(handler))
    assert result == {"status": 500, "error": "No data or places found."}


def test_reports_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    result = get_nearby_restaurants(12.9, 77.5, "Dal Makhani", client=client_for(handler))
    assert result["status"] == 504


def test_reports_connection_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    result = get_nearby_restaurants(12.9, 77.5, "Dal Makhani", client=client_for(handler))
    assert result == {"status": 500, "error": "Failed to fetch nearby restaurants."}
