import asyncio
import json
import logging

import httpx
from google import genai
from google.genai import types
from google.genai.errors import APIError, ClientError
from pydantic import ValidationError

from quizcert.core.config import settings
from quizcert.exceptions import GeminiAPIKeyError, GenerationFailedError
from quizcert.schemas.ai import AIQuizGenerationRequest, AIQuizGenerationResponse

logger = logging.getLogger(__name__)

QUESTION_COUNT = 5

_gemini_client: genai.Client | None = None
# 동시 Gemini API 요청 수 제한 (과부하 방지)
_gemini_semaphore: asyncio.Semaphore | None = None

# Gemini Structured Output 스키마
QUIZ_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "derivedTopic": types.Schema(type=types.Type.STRING),
        "channelName": types.Schema(type=types.Type.STRING),
        "questions": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "question": types.Schema(type=types.Type.STRING),
                    "options": types.Schema(
                        type=types.Type.ARRAY,
                        items=types.Schema(type=types.Type.STRING),
                    ),
                    "correctAnswerIndex": types.Schema(type=types.Type.INTEGER),
                },
                required=["question", "options", "correctAnswerIndex"],
            ),
        ),
    },
    required=["derivedTopic", "questions"],
)


def get_gemini_client() -> genai.Client:
    """Gemini 클라이언트 싱글톤"""
    global _gemini_client
    if _gemini_client is None:
        if not settings.gemini_api_key:
            logger.error("GEMINI_API_KEY가 설정되지 않았습니다")
            raise GeminiAPIKeyError()
        # HttpOptions.timeout 단위는 밀리초
        _gemini_client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=settings.gemini_timeout_seconds * 1000),
        )
    return _gemini_client


def get_gemini_semaphore() -> asyncio.Semaphore:
    """Gemini API 동시 요청 제한 Semaphore 싱글톤"""
    global _gemini_semaphore
    if _gemini_semaphore is None:
        _gemini_semaphore = asyncio.Semaphore(settings.gemini_max_concurrent)
        logger.info(f"Gemini API 동시 요청 제한 설정: 최대 {settings.gemini_max_concurrent}개")
    return _gemini_semaphore


def build_prompt(request: AIQuizGenerationRequest) -> str:
    if request.topic:
        topic_line = f'Video Topic/Description: "{request.topic}"\nUse this topic as derivedTopic.'
    else:
        topic_line = (
            "Work out the topic of the video from its URL and any transcript below, "
            "and return it as derivedTopic (a short title). "
            "Return the YouTube channel name as channelName if you know it."
        )

    transcript_block = ""
    if request.transcript:
        transcript_block = f'\nVideo transcript (may be partial):\n"""{request.transcript}"""\n'

    return f"""You are an educational expert. Create a multiple-choice quiz about the following video.
{topic_line}
Video URL context: "{request.video_url}"
{transcript_block}
Generate exactly {QUESTION_COUNT} questions.
For each question, provide 4 options and the index of the correct answer (0-3).
The difficulty should be moderate, testing understanding of the topic."""


def parse_quiz_response(text: str | None) -> AIQuizGenerationResponse:
    """Gemini 응답 텍스트를 검증된 스키마로 변환 (형식 오류는 GenerationFailedError)"""
    if not text:
        raise GenerationFailedError("No data returned from the quiz generator. Please try again.")

    # 마크다운 코드 블록 제거
    result = text.strip()
    if result.startswith("```json"):
        result = result[7:]
    if result.startswith("```"):
        result = result[3:]
    if result.endswith("```"):
        result = result[:-3]
    result = result.strip()

    try:
        data = json.loads(result)
        return AIQuizGenerationResponse.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Gemini 응답 형식 오류: error_type={type(e).__name__}, error_message={str(e)[:200]}")
        raise GenerationFailedError("The quiz generator returned an unusable quiz. Please try again.") from e


async def generate_quiz_with_gemini(request: AIQuizGenerationRequest) -> AIQuizGenerationResponse:
    """Gemini를 사용하여 문제 5개 생성 (재시도 없음, 동시 요청 제한)"""
    client = get_gemini_client()
    semaphore = get_gemini_semaphore()
    prompt = build_prompt(request)

    async with semaphore:
        logger.debug(f"Gemini API 요청 시작: video_url={request.video_url}")
        try:
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(
                None,
                lambda: client.models.generate_content(
                    model=settings.gemini_model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0.7,
                        response_mime_type="application/json",
                        response_schema=QUIZ_RESPONSE_SCHEMA,
                    ),
                ),
            )
        except ClientError as e:
            error_message = str(e).lower()
            if "403" in error_message or "permission_denied" in error_message or "api key" in error_message:
                logger.error(f"Gemini API 키 문제 감지: error_type={type(e).__name__}")
                raise GeminiAPIKeyError() from e
            logger.error(
                f"Gemini API ClientError: status_code={getattr(e, 'code', 'unknown')}, "
                f"error_type={type(e).__name__}"
            )
            raise GenerationFailedError() from e
        except APIError as e:
            logger.error(f"Gemini API 오류: status_code={getattr(e, 'code', 'unknown')}, error_message={str(e)[:200]}")
            raise GenerationFailedError() from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini API 연결 실패: error_type={type(e).__name__}")
            raise GenerationFailedError() from e

    quiz = parse_quiz_response(response.text)
    if request.topic:
        quiz = quiz.model_copy(update={"derived_topic": request.topic})
    return quiz


async def generate_quiz(request: AIQuizGenerationRequest) -> AIQuizGenerationResponse:
    """AI를 사용하여 퀴즈 생성 (Gemini 사용)"""
    return await generate_quiz_with_gemini(request)
