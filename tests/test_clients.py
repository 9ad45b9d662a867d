# =============================================================================
# tests/test_clients.py - Upstream API Client Tests
# =============================================================================
# RapidAPIClient and MobileAPIClient over httpx.MockTransport, plus the
# source registry.
# =============================================================================

import httpx
import pytest

from app.exceptions import ImportSourceError, ImportSourceNotConfiguredError
from importers import get_source
from importers.mobileapi_client import MobileAPIClient, extract_devices
from importers.rapidapi_client import RapidAPIClient
from importers.sources import LATEST_BRANDS, RapidAPISource


def transport(handler):
    """Record every request and answer through handler."""
    seen = []

    def respond(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.MockTransport(respond), seen


# =============================================================================
# RapidAPI
# =============================================================================

class TestRapidAPIClient:

    def test_requires_key(self):
        with pytest.raises(ImportSourceNotConfiguredError) as exc:
            RapidAPIClient()
        assert exc.value.status_code == 503

    def test_sends_rapidapi_headers(self):
        mock, seen = transport(lambda r: httpx.Response(200, json=["Apple", "Samsung"]))

        with RapidAPIClient(api_key="k", host="parser.test", transport=mock) as client:
            assert client.get_all_brands() == ["Apple", "Samsung"]

        request = seen[0]
        assert request.url == "https://parser.test/api/values/availablebrands"
        assert request.headers["X-RapidAPI-Key"] == "k"
        assert request.headers["X-RapidAPI-Host"] == "parser.test"

    def test_brand_is_path_encoded(self):
        mock, seen = transport(lambda r: httpx.Response(200, json=[]))

        RapidAPIClient(api_key="k", host="parser.test", transport=mock).get_phones_by_brand("Sony Ericsson")

        assert seen[0].url.raw_path == b"/api/values/getdevices/Sony%20Ericsson"

    def test_phone_details_path(self):
        details = {"manufacturer": "Apple", "model": "iPhone 15 Pro", "battery": "3274 mAh"}
        mock, seen = transport(lambda r: httpx.Response(200, json=details))

        client = RapidAPIClient(api_key="k", host="parser.test", transport=mock)

        assert client.get_phone_details("Apple", "iPhone 15 Pro") == details
        assert seen[0].url.raw_path == b"/api/values/getspecs/Apple/iPhone%2015%20Pro"

    def test_all_device_specs(self):
        devices = [{"manufacturer": "Nokia", "model": "105"}]
        mock, seen = transport(lambda r: httpx.Response(200, json=devices))

        client = RapidAPIClient(api_key="k", host="parser.test", transport=mock)

        assert client.get_all_device_specs() == devices
        assert seen[0].url.path == "/api/values/getalldevicespecs"

    def test_all_device_specs_non_list_is_empty(self):
        mock, _ = transport(lambda r: httpx.Response(200, json={"error": "quota"}))

        assert RapidAPIClient(api_key="k", transport=mock).get_all_device_specs() == []

    def test_non_list_payload_is_empty(self):
        mock, _ = transport(lambda r: httpx.Response(200, json={"message": "nope"}))

        client = RapidAPIClient(api_key="k", transport=mock)

        assert client.get_phones_by_brand("Apple") == []

    def test_http_error_maps_to_import_source_error(self):
        mock, _ = transport(lambda r: httpx.Response(429))

        with pytest.raises(ImportSourceError) as exc:
            RapidAPIClient(api_key="k", transport=mock).get_all_brands()

        assert exc.value.status_code == 502
        assert "429" in exc.value.message

    def test_network_error_maps_to_import_source_error(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ImportSourceError):
            RapidAPIClient(api_key="k", transport=httpx.MockTransport(fail)).get_all_brands()


class TestRapidAPISource:

    def test_latest_spreads_over_brands_and_skips_failures(self):
        def handler(request):
            brand = request.url.path.rsplit("/", 1)[-1]
            if brand == "Apple":
                return httpx.Response(500)
            return httpx.Response(200, json=[{"manufacturer": brand, "model": f"M{i}"} for i in range(5)])

        mock, _ = transport(handler)
        source = RapidAPISource(client=RapidAPIClient(api_key="k", transport=mock))

        phones = source.latest(10)

        # two per brand, Apple skipped
        assert len(phones) == 8
        assert "Apple" not in {p["manufacturer"] for p in phones}
        assert {p["manufacturer"] for p in phones} <= set(LATEST_BRANDS)

    def test_search_filters_on_model(self):
        def handler(request):
            if request.url.path.endswith("availablebrands"):
                return httpx.Response(200, json=["Google", "Apple"])
            brand = request.url.path.rsplit("/", 1)[-1]
            models = {"Google": ["Pixel 8", "Pixel Fold"], "Apple": ["iPhone 15"]}[brand]
            return httpx.Response(200, json=[{"manufacturer": brand, "model": m} for m in models])

        mock, _ = transport(handler)
        source = RapidAPISource(client=RapidAPIClient(api_key="k", transport=mock))

        assert [p["model"] for p in source.search("pixel", 5)] == ["Pixel 8", "Pixel Fold"]
        assert source.search("pixel", 1) == [{"manufacturer": "Google", "model": "Pixel 8"}]


# =============================================================================
# MobileAPI
# =============================================================================

class TestMobileAPIClient:

    def test_requires_key(self):
        with pytest.raises(ImportSourceNotConfiguredError):
            MobileAPIClient()

    @pytest.mark.parametrize("payload", [
        [{"id": 1}],
        {"devices": [{"id": 1}]},
        {"data": [{"id": 1}]},
        {"results": [{"id": 1}]},
    ])
    def test_extract_devices_shapes(self, payload):
        assert extract_devices(payload) == [{"id": 1}]

    def test_extract_devices_unknown_shape(self):
        assert extract_devices({"message": "x"}) == []

    def test_key_sent_as_header_and_query(self):
        mock, seen = transport(lambda r: httpx.Response(200, json={"devices": []}))

        MobileAPIClient(api_key="secret", base_url="https://api.test/v1/", transport=mock).list_latest(5)

        request = seen[0]
        assert request.url.path == "/v1/devices/latest"
        assert request.url.params["key"] == "secret"
        assert request.url.params["limit"] == "5"
        assert request.headers["Authorization"] == "Bearer secret"

    def test_blank_search_makes_no_request(self):
        mock, seen = transport(lambda r: httpx.Response(200, json=[]))

        assert MobileAPIClient(api_key="k", transport=mock).search_devices("  ") == []
        assert seen == []

    def test_error_status_raises(self):
        mock, _ = transport(lambda r: httpx.Response(401, text="bad key"))

        with pytest.raises(ImportSourceError) as exc:
            MobileAPIClient(api_key="k", transport=mock).search_devices("pixel")

        assert "search failed (401)" in exc.value.message

    def test_brand_falls_back_to_search(self):
        def handler(request):
            if request.url.path.endswith("/devices/search"):
                return httpx.Response(200, json=[{"name": "Nothing Phone (2)"}])
            return httpx.Response(404)

        mock, seen = transport(handler)

        devices = MobileAPIClient(api_key="k", base_url="https://api.test", transport=mock).list_devices_by_brand("Nothing", 3)

        assert devices == [{"name": "Nothing Phone (2)"}]
        assert [r.url.path for r in seen] == ["/brands/Nothing/devices", "/devices/search"]

    def test_brand_endpoint_result_is_limited(self):
        mock, seen = transport(lambda r: httpx.Response(200, json={"data": [{"id": i} for i in range(10)]}))

        devices = MobileAPIClient(api_key="k", transport=mock).list_devices_by_brand("Apple", 3)

        assert len(devices) == 3
        assert len(seen) == 1


# =============================================================================
# Source Registry
# =============================================================================

class TestGetSource:

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            get_source("gsmarena")

    @pytest.mark.parametrize("name", ["rapidapi", "mobileapi"])
    def test_unconfigured_sources_raise(self, name):
        with pytest.raises(ImportSourceNotConfiguredError):
            get_source(name)
