"""Gateway-level tests, called directly without the HTTP layer."""

from __future__ import annotations

import pytest

from app.core.errors import (
    ConfigurationError,
    MissingParameterError,
    UpstreamContractViolation,
    UpstreamError,
    ValidationError,
)
from app.services.facebook import FacebookGateway
from app.services.live_video import LiveVideoGateway


@pytest.mark.asyncio
async def test_exchange_token_requires_token(fake_transport, test_settings) -> None:
    gateway = FacebookGateway(test_settings, fake_transport)

    with pytest.raises(ValidationError) as exc_info:
        await gateway.exchange_token("")

    assert exc_info.value.details[0]["field"] == "accessToken"
    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_exchange_token_checks_credentials_before_calling(fake_transport, settings_factory) -> None:
    gateway = FacebookGateway(settings_factory(FACEBOOK_APP_ID=None), fake_transport)

    with pytest.raises(ConfigurationError):
        await gateway.exchange_token("short-lived")

    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_list_pages_without_data_key(fake_transport, test_settings) -> None:
    fake_transport.respond({})

    pages = await FacebookGateway(test_settings, fake_transport).list_pages("user-token")

    assert pages == []


@pytest.mark.asyncio
async def test_create_live_video_rejects_missing_fields(fake_transport) -> None:
    gateway = LiveVideoGateway(fake_transport)

    with pytest.raises(ValidationError) as exc_info:
        await gateway.create_live_video("", "", "", "page-token")

    assert [d["field"] for d in exc_info.value.details] == ["pageId", "title"]
    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_create_live_video_rejects_url_without_key(fake_transport) -> None:
    fake_transport.respond({"id": "9876", "secure_stream_url": "rtmps://live-api.example.com/rtmp/"})

    with pytest.raises(UpstreamContractViolation) as exc_info:
        await LiveVideoGateway(fake_transport).create_live_video("1234", "Show", None, "page-token")

    assert exc_info.value.status_code == 500
    assert exc_info.value.error == "Failed to create live video"


@pytest.mark.asyncio
async def test_create_live_video_key_recurring_in_host(fake_transport) -> None:
    fake_transport.respond({"id": "9876", "secure_stream_url": "rtmps://key1.example.com/key1/key1"})

    result = await LiveVideoGateway(fake_transport).create_live_video("1234", "Show", "", "page-token")

    assert result["streamUrl"] == "rtmps://key1.example.com/key1/"
    assert result["streamKey"] == "key1"


@pytest.mark.asyncio
async def test_status_and_end_require_page_token(fake_transport) -> None:
    gateway = LiveVideoGateway(fake_transport)

    with pytest.raises(MissingParameterError):
        await gateway.get_live_video_status("9876", None)
    with pytest.raises(MissingParameterError):
        await gateway.end_live_video("9876", "")

    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_end_live_video_translates_upstream_error(fake_transport) -> None:
    fake_transport.fail({"error": {"code": 404, "message": "Object does not exist"}}, status_code=404)

    with pytest.raises(UpstreamError) as exc_info:
        await LiveVideoGateway(fake_transport).end_live_video("0", "page-token")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Object does not exist"
