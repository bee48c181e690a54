# tests/test_room_design_api.py
import asyncio
import json

import httpx
import pytest

from room_design_ai.models.schemas import Action
from room_design_ai.services.dispatcher import DesignAIDispatcher, get_dispatcher

from .conftest import GATEWAY_URL, FakeGateway, completion

ENDPOINT = "/api/room-design-ai"
ALL_ACTIONS = [a.value for a in Action]


def assert_single_envelope(data):
    assert isinstance(data, dict)
    assert ("result" in data) != ("error" in data)


def assert_cors(response):
    assert response.headers["access-control-allow-origin"] == "*"
    allow_headers = response.headers["access-control-allow-headers"]
    for header in ("authorization", "x-client-info", "apikey", "content-type"):
        assert header in allow_headers


@pytest.mark.parametrize("action", ALL_ACTIONS)
def test_success_returns_parsed_result(client, use_gateway, action):
    fake = use_gateway(FakeGateway(body=completion('```json\n{"designScore": "88"}\n```')))

    response = client.post(ENDPOINT, json={"action": action, "data": {}})

    assert response.status_code == 200
    assert response.json() == {"result": {"designScore": "88"}}
    assert len(fake.requests) == 1
    assert_cors(response)


def test_gateway_request_shape(client, use_gateway):
    fake = use_gateway()

    client.post(ENDPOINT, json={"action": "color-suggestions", "data": {"mood": "Energetic"}})

    request = fake.requests[0]
    assert str(request.url) == GATEWAY_URL
    assert request.method == "POST"
    assert request.headers["authorization"] == "Bearer test-key"

    payload = fake.last_payload
    assert payload["model"] == "google/gemini-3-flash-preview"
    assert payload["temperature"] == 0.3
    assert [m["role"] for m in payload["messages"]] == ["system", "user"]
    assert "Mood: Energetic" in payload["messages"][1]["content"]


def test_unparseable_reply_is_still_a_result(client, use_gateway):
    use_gateway(FakeGateway(body=completion("not json at all")))

    response = client.post(ENDPOINT, json={"action": "analyze-room", "data": {}})

    assert response.status_code == 200
    assert response.json() == {"result": {"rawResponse": "not json at all"}}


def test_empty_choices_gives_raw_empty_text(client, use_gateway):
    use_gateway(FakeGateway(body={"choices": []}))

    response = client.post(ENDPOINT, json={"action": "analyze-room", "data": {}})

    assert response.status_code == 200
    assert response.json() == {"result": {"rawResponse": ""}}


def test_unknown_action(client, use_gateway):
    fake = use_gateway()

    response = client.post(ENDPOINT, json={"action": "bogus", "data": {}})

    assert response.status_code == 400
    assert response.json() == {"error": "Unknown action"}
    assert fake.requests == []
    assert_cors(response)


def test_missing_action(client, use_gateway):
    use_gateway()

    response = client.post(ENDPOINT, json={"data": {}})

    assert response.status_code == 400
    assert response.json() == {"error": "Unknown action"}


def test_unknown_action_is_rejected_before_credential_check(client, use_gateway):
    use_gateway(api_key=None)

    response = client.post(ENDPOINT, json={"action": "bogus", "data": {}})

    assert response.status_code == 400


def test_missing_data_uses_defaults(client, use_gateway):
    fake = use_gateway()

    response = client.post(ENDPOINT, json={"action": "budget-optimize"})

    assert response.status_code == 200
    assert "Total Budget: ₹150000" in fake.last_payload["messages"][1]["content"]


@pytest.mark.parametrize("body", [b"{not json", b"[1, 2, 3]", b""])
def test_invalid_body(client, use_gateway, body):
    use_gateway()

    response = client.post(ENDPOINT, content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_invalid_field_types(client, use_gateway):
    fake = use_gateway()

    response = client.post(ENDPOINT, json={"action": "analyze-room", "data": {"roomType": ["Bedroom"]}})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid data for action 'analyze-room'"}
    assert fake.requests == []


def test_missing_credential(client, use_gateway):
    fake = use_gateway(api_key=None)

    response = client.post(ENDPOINT, json={"action": "analyze-room", "data": {}})

    assert response.status_code == 500
    assert response.json() == {"error": "AI gateway API key is not configured"}
    assert fake.requests == []


@pytest.mark.parametrize("action", ALL_ACTIONS)
def test_rate_limit_passthrough(client, use_gateway, action):
    use_gateway(FakeGateway(status_code=429, body={"error": "too many"}))

    response = client.post(ENDPOINT, json={"action": action, "data": {}})

    assert response.status_code == 429
    assert response.json() == {"error": "Rate limit exceeded. Please try again in a moment."}
    assert_cors(response)


def test_payment_required_passthrough(client, use_gateway):
    use_gateway(FakeGateway(status_code=402, body={"error": "no credits"}))

    response = client.post(ENDPOINT, json={"action": "theme-recommendations", "data": {}})

    assert response.status_code == 402
    assert response.json() == {"error": "AI credits exhausted. Please add credits in workspace settings."}


@pytest.mark.parametrize("status_code", [400, 401, 500, 503])
def test_other_upstream_errors_are_opaque(client, use_gateway, status_code):
    use_gateway(FakeGateway(status_code=status_code, body="upstream secret detail"))

    response = client.post(ENDPOINT, json={"action": "color-suggestions", "data": {}})

    assert response.status_code == 500
    assert response.json() == {"error": "AI service temporarily unavailable"}
    assert "secret" not in response.text


def test_transport_error(client, use_gateway):
    use_gateway(FakeGateway(error=httpx.ConnectError("Connection refused")))

    response = client.post(ENDPOINT, json={"action": "analyze-room", "data": {}})

    assert response.status_code == 500
    assert response.json() == {"error": "Connection refused"}
    assert_cors(response)


@pytest.mark.parametrize("fake", [
    FakeGateway(),
    FakeGateway(body=completion("plain words")),
    FakeGateway(status_code=429),
    FakeGateway(status_code=402),
    FakeGateway(status_code=502, body="bad gateway"),
    FakeGateway(error=httpx.ConnectError("down")),
])
def test_every_response_has_exactly_one_of_result_or_error(client, use_gateway, fake):
    use_gateway(fake)

    for action in ALL_ACTIONS + ["bogus"]:
        response = client.post(ENDPOINT, json={"action": action, "data": {}})
        assert_single_envelope(response.json())


def test_preflight_skips_dispatch(client):
    def fail():
        raise AssertionError("dispatcher must not be created for OPTIONS")

    from room_design_ai.main import app
    app.dependency_overrides[get_dispatcher] = fail

    response = client.options(ENDPOINT)

    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "ai_gateway_api_key_configured" in data
    assert_cors(response)


def test_out_of_range_number_falls_back_to_raw_text(client, use_gateway):
    use_gateway(FakeGateway(body=completion('{"designScore": 1e400}')))

    response = client.post(ENDPOINT, json={"action": "analyze-room", "data": {}})

    assert response.status_code == 200
    assert response.json() == {"result": {"rawResponse": '{"designScore": 1e400}'}}
    assert_cors(response)


def test_unrenderable_result_becomes_error_envelope():
    class InfiniteDispatcher(DesignAIDispatcher):
        async def handle(self, body):
            return {"designScore": float("inf")}

    outcome = asyncio.run(InfiniteDispatcher(gateway=None).dispatch(b'{"action": "analyze-room"}'))

    assert outcome.status_code == 500
    assert list(outcome.envelope) == ["error"]
    assert json.loads(outcome.content) == outcome.envelope
