"""공용 테스트 픽스처"""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quizcert.api.deps import get_certificate_store
from quizcert.core.config import settings
from quizcert.main import app
from quizcert.models import Base
from quizcert.schemas.ai import AIQuizGenerationResponse, AIQuizQuestion
from quizcert.schemas.auth import Identity
from quizcert.schemas.quiz import Question, Quiz
from quizcert.services.certificate_store import InMemoryCertificateStore
from quizcert.services.quiz_service import QuizSessionRegistry, get_session_registry

# 문제별 정답 인덱스
CORRECT_ANSWERS = [0, 1, 2, 3, 0]


def make_token(identity: Identity) -> str:
    """외부 인증 서비스 형식의 테스트 토큰"""
    payload = {
        "sub": identity.user_id,
        "email": identity.email,
        "aud": settings.auth_jwt_audience,
        "user_metadata": {"username": identity.user_name},
    }
    return jwt.encode(payload, settings.auth_jwt_secret, algorithm=settings.auth_jwt_algorithm)


def wrong_answer(correct: int) -> int:
    return (correct + 1) % 4


@pytest.fixture
def identity():
    return Identity(user_id="user-1", email="ada@example.com", user_name="ada")


@pytest.fixture
def other_identity():
    return Identity(user_id="user-2", email="bob@example.com", user_name="bob")


@pytest.fixture
def auth_headers(identity):
    return {"Authorization": f"Bearer {make_token(identity)}"}


@pytest.fixture
def other_auth_headers(other_identity):
    return {"Authorization": f"Bearer {make_token(other_identity)}"}


@pytest.fixture
def sample_quiz():
    """5문제 퀴즈"""
    return Quiz(
        id="quiz-1",
        source_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        topic="Photosynthesis basics",
        channel_name="Science Channel",
        questions=tuple(
            Question(
                text=f"Question {i + 1}",
                options=("A", "B", "C", "D"),
                correct_answer_index=correct,
            )
            for i, correct in enumerate(CORRECT_ANSWERS)
        ),
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def ai_response():
    """모킹된 Gemini 응답"""
    return AIQuizGenerationResponse(
        derived_topic="Photosynthesis basics",
        channel_name="Science Channel",
        questions=[
            AIQuizQuestion(
                question=f"Question {i + 1}",
                options=["A", "B", "C", "D"],
                correct_answer_index=correct,
            )
            for i, correct in enumerate(CORRECT_ANSWERS)
        ],
    )


@pytest.fixture
def memory_store():
    return InMemoryCertificateStore()


@pytest.fixture
def registry():
    return QuizSessionRegistry()


@pytest_asyncio.fixture
async def client(memory_store, registry):
    """API 테스트 클라이언트 (메모리 저장소 사용)"""
    app.dependency_overrides[get_certificate_store] = lambda: memory_store
    app.dependency_overrides[get_session_registry] = lambda: registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_db_session():
    """메모리 SQLite 기반 DB 세션"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
