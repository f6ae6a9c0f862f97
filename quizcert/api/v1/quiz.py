from fastapi import APIRouter, Depends, status

from quizcert.api.deps import get_certificate_store
from quizcert.core.security import get_current_identity
from quizcert.schemas import quiz as quiz_schema
from quizcert.schemas.auth import Identity
from quizcert.services import quiz_service
from quizcert.services.certificate_store import CertificateStore
from quizcert.services.quiz_service import QuizSessionRegistry, get_session_registry

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.post("/generate", response_model=quiz_schema.QuizSessionResponse, status_code=status.HTTP_201_CREATED)
async def generate_quiz(
    request: quiz_schema.QuizCreateRequest,
    identity: Identity = Depends(get_current_identity),
    registry: QuizSessionRegistry = Depends(get_session_registry),
):
    """퀴즈 생성 및 세션 시작 API"""
    return await quiz_service.start_quiz(registry, request, identity)


@router.get("/sessions/{session_id}", response_model=quiz_schema.QuizSessionResponse)
async def get_session(
    session_id: str,
    identity: Identity = Depends(get_current_identity),
    registry: QuizSessionRegistry = Depends(get_session_registry),
):
    """퀴즈 세션 상태 조회 API"""
    session = registry.get(session_id, identity)
    return quiz_service.build_session_response(session_id, session)


@router.post("/sessions/{session_id}/answer", response_model=quiz_schema.QuizSessionResponse)
async def select_answer(
    session_id: str,
    request: quiz_schema.AnswerSelectRequest,
    identity: Identity = Depends(get_current_identity),
    registry: QuizSessionRegistry = Depends(get_session_registry),
):
    """답안 선택 API"""
    return quiz_service.select_answer(registry, session_id, identity, request)


@router.post("/sessions/{session_id}/next", response_model=quiz_schema.QuizSessionResponse)
async def next_question(
    session_id: str,
    identity: Identity = Depends(get_current_identity),
    registry: QuizSessionRegistry = Depends(get_session_registry),
):
    """다음 문제 이동 API"""
    return quiz_service.next_question(registry, session_id, identity)


@router.post("/sessions/{session_id}/previous", response_model=quiz_schema.QuizSessionResponse)
async def previous_question(
    session_id: str,
    identity: Identity = Depends(get_current_identity),
    registry: QuizSessionRegistry = Depends(get_session_registry),
):
    """이전 문제 이동 API"""
    return quiz_service.previous_question(registry, session_id, identity)


@router.post("/sessions/{session_id}/finish", response_model=quiz_schema.QuizResultResponse)
async def finish_quiz(
    session_id: str,
    identity: Identity = Depends(get_current_identity),
    registry: QuizSessionRegistry = Depends(get_session_registry),
    store: CertificateStore = Depends(get_certificate_store),
):
    """채점 및 인증서 발급 API"""
    return await quiz_service.finish_quiz(registry, session_id, identity, store)
