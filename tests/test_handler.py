"""Tests for the serverless entry point."""

import base64
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from speechstitch.handler import TEXTS_ERROR, handle_payload, handler
from speechstitch.models import StitchResult


@pytest.fixture
def mock_stitcher():
    """Stitcher double that reports what it was asked to do."""

    async def _stitch(request):
        return StitchResult(
            bucket="audio-bucket",
            key=request.output_key or "tts-output/generated.mp3",
            clip_count=len(request.texts),
            gap_seconds=request.gap_seconds,
        )

    stitcher = MagicMock()
    stitcher.stitch = AsyncMock(side_effect=_stitch)
    with patch("speechstitch.handler.get_stitcher", return_value=stitcher):
        yield stitcher


def _body(response):
    return json.loads(response["body"])


def test_missing_texts_is_rejected(mock_stitcher):
    response = handler({})
    assert response["statusCode"] == 400
    assert _body(response) == {"error": TEXTS_ERROR}
    mock_stitcher.stitch.assert_not_called()


@pytest.mark.parametrize(
    "event",
    [
        {"texts": []},
        {"texts": None},
        {"texts": "hello"},
        {"texts": ["ok", 3]},
        ["not", "an", "object"],
    ],
)
def test_malformed_texts_are_rejected(mock_stitcher, event):
    response = handler(event)
    assert response["statusCode"] == 400
    assert _body(response) == {"error": TEXTS_ERROR}
    mock_stitcher.stitch.assert_not_called()


def test_stitcher_not_built_for_invalid_request():
    with patch("speechstitch.handler.get_stitcher") as mock_get_stitcher:
        response = handler({"texts": []})
    assert response["statusCode"] == 400
    mock_get_stitcher.assert_not_called()


def test_clip_count_matches_number_of_texts(mock_stitcher):
    response = handler({"texts": ["one", "two", "three"]})
    assert response["statusCode"] == 200
    body = _body(response)
    assert body["clipCount"] == 3
    assert body["bucket"] == "audio-bucket"
    assert body["key"] == "tts-output/generated.mp3"


def test_gap_defaults_to_one_and_is_echoed(mock_stitcher):
    body = _body(handler({"texts": ["one", "two"]}))
    assert body["gapSeconds"] == 1
    request = mock_stitcher.stitch.call_args.args[0]
    assert request.gap_seconds == 1


def test_explicit_options_are_passed_through(mock_stitcher):
    body = _body(
        handler(
            {
                "texts": ["one", "two"],
                "gapSeconds": 2.5,
                "voiceId": "voice-1",
                "outputKey": "episodes/1.mp3",
            }
        )
    )
    assert body["gapSeconds"] == 2.5
    assert body["key"] == "episodes/1.mp3"
    request = mock_stitcher.stitch.call_args.args[0]
    assert request.voice_id == "voice-1"


def test_invalid_gap_is_rejected(mock_stitcher):
    response = handler({"texts": ["one"], "gapSeconds": "long"})
    assert response["statusCode"] == 400
    assert _body(response)["error"].startswith("Invalid request: gapSeconds")
    mock_stitcher.stitch.assert_not_called()


def test_api_gateway_proxy_event(mock_stitcher):
    event = {"body": json.dumps({"texts": ["a", "b"]}), "isBase64Encoded": False}
    response = handler(event)
    assert response["statusCode"] == 200
    assert _body(response)["clipCount"] == 2


def test_base64_encoded_proxy_event(mock_stitcher):
    raw = json.dumps({"texts": ["a", "b", "c", "d"]}).encode("utf-8")
    event = {"body": base64.b64encode(raw).decode("ascii"), "isBase64Encoded": True}
    response = handler(event)
    assert response["statusCode"] == 200
    assert _body(response)["clipCount"] == 4


def test_unparseable_proxy_body(mock_stitcher):
    response = handler({"body": "{not json"})
    assert response["statusCode"] == 400
    assert _body(response) == {"error": "Invalid request: body is not valid JSON"}


def test_stitcher_failures_propagate(mock_stitcher):
    mock_stitcher.stitch.side_effect = RuntimeError("ElevenLabs API error (500)")
    with pytest.raises(RuntimeError, match="ElevenLabs"):
        handler({"texts": ["one"]})


@pytest.mark.asyncio
async def test_handle_payload_returns_status_and_body(mock_stitcher):
    status, body = await handle_payload({"texts": ["only"]})
    assert status == 200
    assert body["clipCount"] == 1


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_gap_is_rejected(mock_stitcher, literal):
    event = {"body": '{"texts": ["a", "b"], "gapSeconds": %s}' % literal}
    response = handler(event)
    assert response["statusCode"] == 400
    body = _body(response)
    assert body["error"].startswith("Invalid request: gapSeconds")
    mock_stitcher.stitch.assert_not_called()


def test_non_finite_gap_from_direct_invocation(mock_stitcher):
    response = handler({"texts": ["a", "b"], "gapSeconds": float("inf")})
    assert response["statusCode"] == 400
    assert "Infinity" not in response["body"]
    mock_stitcher.stitch.assert_not_called()
