import asyncio
import logging
from urllib.parse import parse_qs, urlparse

import requests
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api._errors import CouldNotRetrieveTranscript

from quizcert.exceptions import InvalidQuizRequestError

logger = logging.getLogger(__name__)

# 프롬프트 크기 제한
MAX_TRANSCRIPT_CHARS = 12000

_YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com"}


def is_youtube_short(url: str) -> bool:
    return "youtube.com/shorts/" in url


def extract_video_id(url: str) -> str:
    """YouTube URL에서 video_id 추출 (Shorts는 지원하지 않음)"""
    url = url.strip()
    if is_youtube_short(url):
        raise InvalidQuizRequestError(
            "YouTube Shorts are not supported. Please use a full-length YouTube video."
        )

    parsed = urlparse(url if "://" in url else f"https://{url}")
    host = (parsed.hostname or "").lower()

    video_id = None
    if host in _YOUTUBE_HOSTS:
        if parsed.path == "/watch":
            video_id = parse_qs(parsed.query).get("v", [None])[0]
        elif parsed.path.startswith("/embed/"):
            video_id = parsed.path.split("/embed/")[1].split("/")[0]
    elif host == "youtu.be":
        video_id = parsed.path.lstrip("/").split("/")[0]

    if not video_id:
        raise InvalidQuizRequestError("Please provide a valid YouTube video URL.")
    return video_id


def _fetch_transcript(video_id: str) -> str:
    api = YouTubeTranscriptApi()
    transcript_list = api.list(video_id)
    transcript = transcript_list.find_transcript(["en", "ko"])
    raw_data = transcript.fetch().to_raw_data()
    return " ".join(item["text"] for item in raw_data)


async def extract_transcript(video_id: str) -> str | None:
    """YouTube 자막 추출 (실패 시 None, 프롬프트 보조 정보로만 사용)"""
    loop = asyncio.get_running_loop()
    try:
        text = await loop.run_in_executor(None, _fetch_transcript, video_id)
    except CouldNotRetrieveTranscript as e:
        logger.info(f"자막 없음: video_id={video_id}, reason={e.__class__.__name__}")
        return None
    except requests.exceptions.RequestException as e:
        logger.warning(f"자막 요청 실패: video_id={video_id}, error={e.__class__.__name__}: {e}")
        return None
    return text[:MAX_TRANSCRIPT_CHARS] if text else None
