import asyncio

import httpx
import pytest

from routeplanner.schemas.geocoding import GeocodeRequestItem
from routeplanner.services.geocoding import service as geocoding_service
from routeplanner.services.maps.errors import PermanentProviderError, TransientProviderError
from routeplanner.services.maps.google_client import GoogleMapsClient


class DummyMapsClient:
    def __init__(self, geocodes=None, predictions=None, details=None, fail_for=()):
        self.geocodes = geocodes or {}
        self.predictions = predictions or []
        self.details = details
        self.fail_for = set(fail_for)
        self.calls = []

    async def geocode(self, address):
        self.calls.append(("geocode", address))
        if address in self.fail_for:
            raise TransientProviderError("UNKNOWN_ERROR")
        return self.geocodes.get(address)

    async def autocomplete(self, query, session_token=None):
        self.calls.append(("autocomplete", query, session_token))
        if query in self.fail_for:
            raise TransientProviderError("UNKNOWN_ERROR")
        return self.predictions

    async def place_details(self, place_id, session_token=None):
        self.calls.append(("details", place_id, session_token))
        return self.details


def _match(lat, lng, formatted):
    return {"geometry": {"location": {"lat": lat, "lng": lng}}, "formatted_address": formatted}


def test_geocode_batch_keeps_going_after_misses():
    client = DummyMapsClient(
        geocodes={"18 de Julio 1234": _match(-34.905, -56.185, "Av. 18 de Julio 1234, Montevideo")},
        fail_for={"Broken"},
    )
    items = [
        GeocodeRequestItem(address="18 de Julio 1234"),
        GeocodeRequestItem(address="Nowhere"),
        GeocodeRequestItem(address="Broken"),
        GeocodeRequestItem(address="   "),
    ]

    results = asyncio.run(geocoding_service.geocode_addresses(items, client))

    assert [result.address for result in results] == ["18 de Julio 1234", "Nowhere", "Broken", "   "]
    assert results[0].lat == -34.905
    assert results[0].normalized == "Av. 18 de Julio 1234, Montevideo"
    for miss in results[1:]:
        assert miss.lat is None and miss.lng is None and miss.normalized is None
    assert ("geocode", "   ") not in client.calls


def test_autocomplete_requires_three_characters():
    client = DummyMapsClient(predictions=[{"description": "Av. Italia", "place_id": "p1"}])

    assert asyncio.run(geocoding_service.autocomplete_places("Av", client)) == []
    assert client.calls == []


def test_autocomplete_threads_session_token():
    client = DummyMapsClient(
        predictions=[
            {"description": "Av. Italia, Montevideo", "place_id": "p1"},
            {"description": "", "place_id": "p2"},
        ]
    )

    results = asyncio.run(geocoding_service.autocomplete_places(" Av. Ita ", client, session_token="tok-1"))

    assert [(r.description, r.place_id) for r in results] == [("Av. Italia, Montevideo", "p1")]
    assert client.calls == [("autocomplete", "Av. Ita", "tok-1")]


def test_autocomplete_provider_error_returns_empty_list():
    client = DummyMapsClient(fail_for={"Bulevar"})

    assert asyncio.run(geocoding_service.autocomplete_places("Bulevar", client)) == []


def test_place_details_without_geometry_is_none():
    client = DummyMapsClient(details={"formatted_address": "Somewhere"})

    assert asyncio.run(geocoding_service.place_details("p1", client)) is None


def test_place_details_returns_location():
    client = DummyMapsClient(details=_match(-34.9, -56.1, "Plaza Independencia"))

    result = asyncio.run(geocoding_service.place_details("p1", client, session_token="tok-1"))

    assert (result.lat, result.lng, result.normalized) == (-34.9, -56.1, "Plaza Independencia")
    assert client.calls == [("details", "p1", "tok-1")]


def test_google_client_geocode_zero_results_is_a_miss():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["address"] == "Nowhere"
        assert request.url.params["region"] == "UY"
        return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})

    client = GoogleMapsClient(api_key="k", region="UY", transport=httpx.MockTransport(handler))

    assert asyncio.run(client.geocode("Nowhere")) is None


def test_google_client_sends_details_fields_and_session():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(dict(request.url.params))
        return httpx.Response(200, json={"status": "OK", "result": _match(1.0, 2.0, "X")})

    client = GoogleMapsClient(api_key="k", transport=httpx.MockTransport(handler))
    result = asyncio.run(client.place_details("abc", session_token="tok"))

    assert result["formatted_address"] == "X"
    assert seen["place_id"] == "abc"
    assert seen["sessiontoken"] == "tok"
    assert "geometry" in seen["fields"]


def test_google_client_autocomplete_without_predictions():
    client = GoogleMapsClient(
        api_key="k",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"status": "OK"})),
    )

    assert asyncio.run(client.autocomplete("abc")) == []


def test_google_client_rejects_non_object_payload():
    client = GoogleMapsClient(
        api_key="k",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])),
    )

    with pytest.raises(PermanentProviderError):
        asyncio.run(client.autocomplete("abc"))
