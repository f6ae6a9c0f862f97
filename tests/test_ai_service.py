"""AI Service 테스트"""
import json

import httpx
import pytest
from unittest.mock import MagicMock, patch

from quizcert.exceptions import GeminiAPIKeyError, GenerationFailedError
from quizcert.schemas.ai import AIQuizGenerationRequest
from quizcert.services import ai_service


def _gemini_payload(question_count=5, **overrides):
    payload = {
        "derivedTopic": "Photosynthesis basics",
        "channelName": "Science Channel",
        "questions": [
            {
                "question": f"Question {i + 1}",
                "options": ["A", "B", "C", "D"],
                "correctAnswerIndex": i % 4,
            }
            for i in range(question_count)
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def mock_client():
    """모킹된 Gemini 클라이언트"""
    client = MagicMock()
    with patch.object(ai_service, "get_gemini_client", return_value=client):
        yield client


def test_parse_quiz_response_accepts_camel_case():
    result = ai_service.parse_quiz_response(json.dumps(_gemini_payload()))

    assert result.derived_topic == "Photosynthesis basics"
    assert result.channel_name == "Science Channel"
    assert len(result.questions) == 5
    assert result.questions[1].correct_answer_index == 1


def test_parse_quiz_response_strips_code_fence():
    text = "```json\n" + json.dumps(_gemini_payload()) + "\n```"

    assert len(ai_service.parse_quiz_response(text).questions) == 5


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "not json",
        json.dumps(_gemini_payload(question_count=4)),
        json.dumps(_gemini_payload(questions=[{"question": "Q", "options": ["A", "B"], "correctAnswerIndex": 0}] * 5)),
        json.dumps(_gemini_payload(questions=[{"question": "Q", "options": ["A", "B", "C", "D"], "correctAnswerIndex": 4}] * 5)),
    ],
)
def test_parse_quiz_response_rejects_malformed(text):
    with pytest.raises(GenerationFailedError):
        ai_service.parse_quiz_response(text)


def test_build_prompt_uses_given_topic():
    prompt = ai_service.build_prompt(
        AIQuizGenerationRequest(video_url="https://youtu.be/abc", topic="Black holes")
    )

    assert '"Black holes"' in prompt
    assert "exactly 5 questions" in prompt


def test_build_prompt_asks_for_topic_when_missing():
    prompt = ai_service.build_prompt(
        AIQuizGenerationRequest(video_url="https://youtu.be/abc", transcript="hello world")
    )

    assert "derivedTopic" in prompt
    assert "hello world" in prompt


@pytest.mark.asyncio
async def test_generate_quiz_success(mock_client):
    mock_client.models.generate_content.return_value = MagicMock(text=json.dumps(_gemini_payload()))

    result = await ai_service.generate_quiz(AIQuizGenerationRequest(video_url="https://youtu.be/abc"))

    assert result.derived_topic == "Photosynthesis basics"
    mock_client.models.generate_content.assert_called_once()


@pytest.mark.asyncio
async def test_generate_quiz_keeps_given_topic(mock_client):
    mock_client.models.generate_content.return_value = MagicMock(text=json.dumps(_gemini_payload()))

    result = await ai_service.generate_quiz(
        AIQuizGenerationRequest(video_url="https://youtu.be/abc", topic="Black holes")
    )

    assert result.derived_topic == "Black holes"


@pytest.mark.asyncio
async def test_generate_quiz_empty_response(mock_client):
    mock_client.models.generate_content.return_value = MagicMock(text=None)

    with pytest.raises(GenerationFailedError):
        await ai_service.generate_quiz(AIQuizGenerationRequest(video_url="https://youtu.be/abc"))


@pytest.mark.asyncio
async def test_generate_quiz_server_error_is_not_retried(mock_client):
    from google.genai.errors import ServerError

    mock_client.models.generate_content.side_effect = ServerError(
        503, {"error": {"code": 503, "message": "The model is overloaded", "status": "UNAVAILABLE"}}
    )

    with pytest.raises(GenerationFailedError):
        await ai_service.generate_quiz(AIQuizGenerationRequest(video_url="https://youtu.be/abc"))
    assert mock_client.models.generate_content.call_count == 1


@pytest.mark.asyncio
async def test_generate_quiz_permission_denied(mock_client):
    from google.genai.errors import ClientError

    mock_client.models.generate_content.side_effect = ClientError(
        403, {"error": {"code": 403, "message": "Permission denied", "status": "PERMISSION_DENIED"}}
    )

    with pytest.raises(GeminiAPIKeyError):
        await ai_service.generate_quiz(AIQuizGenerationRequest(video_url="https://youtu.be/abc"))


def test_get_gemini_client_without_key():
    with patch.object(ai_service, "_gemini_client", None):
        with patch.object(ai_service.settings, "gemini_api_key", None):
            with pytest.raises(GeminiAPIKeyError):
                ai_service.get_gemini_client()


def test_get_gemini_client_sets_request_timeout():
    with patch.object(ai_service, "_gemini_client", None):
        with patch.object(ai_service.settings, "gemini_api_key", "test-key"):
            with patch.object(ai_service.settings, "gemini_timeout_seconds", 30):
                with patch.object(ai_service.genai, "Client") as mock_client_cls:
                    ai_service.get_gemini_client()

    http_options = mock_client_cls.call_args.kwargs["http_options"]
    assert http_options.timeout == 30_000


@pytest.mark.asyncio
async def test_generate_quiz_timeout_releases_semaphore(mock_client):
    mock_client.models.generate_content.side_effect = httpx.ReadTimeout("timed out")

    with pytest.raises(GenerationFailedError):
        await ai_service.generate_quiz(AIQuizGenerationRequest(video_url="https://youtu.be/abc"))

    assert not ai_service.get_gemini_semaphore().locked()
