import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from quizcert.exceptions import InvalidQuizRequestError, QuizSessionNotFoundError, StoreUnavailableError
from quizcert.schemas import ai, quiz as quiz_schema
from quizcert.schemas.auth import Identity
from quizcert.schemas.certificate import CertificateSummaryResponse
from quizcert.services import ai_service, youtube_service
from quizcert.services.certificate_store import CertificateStore
from quizcert.services.certification import PASSING_SCORE, finalize_session
from quizcert.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


@dataclass
class _RegisteredSession:
    owner_id: str
    session: QuizSession


class QuizSessionRegistry:
    """진행 중인 퀴즈 세션 보관소 (프로세스 메모리, 사용자별 단일 조작자 가정)"""

    def __init__(self):
        self._sessions: dict[str, _RegisteredSession] = {}

    def start(self, quiz: quiz_schema.Quiz, identity: Identity) -> str:
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = _RegisteredSession(owner_id=identity.user_id, session=QuizSession(quiz))
        return session_id

    def get(self, session_id: str, identity: Identity) -> QuizSession:
        """세션 조회 (다른 사용자의 세션은 존재하지 않는 것으로 취급)"""
        registered = self._sessions.get(session_id)
        if registered is None or registered.owner_id != identity.user_id:
            raise QuizSessionNotFoundError(session_id)
        return registered.session

    def claim(self, session_id: str, identity: Identity) -> QuizSession:
        """세션을 보관소에서 꺼냄 (동시 요청 중 하나만 성공)"""
        session = self.get(session_id, identity)
        del self._sessions[session_id]
        return session

    def restore(self, session_id: str, identity: Identity, session: QuizSession) -> None:
        self._sessions[session_id] = _RegisteredSession(owner_id=identity.user_id, session=session)

    def __len__(self) -> int:
        return len(self._sessions)


session_registry = QuizSessionRegistry()


def get_session_registry() -> QuizSessionRegistry:
    return session_registry


def build_session_response(session_id: str, session: QuizSession) -> quiz_schema.QuizSessionResponse:
    """정답을 제외한 세션 상태 응답 생성"""
    quiz = session.quiz
    return quiz_schema.QuizSessionResponse(
        session_id=session_id,
        quiz_id=quiz.id,
        topic=quiz.topic,
        channel_name=quiz.channel_name,
        source_url=quiz.source_url,
        questions=[
            quiz_schema.PublicQuestion(position=i, text=q.text, options=list(q.options))
            for i, q in enumerate(quiz.questions)
        ],
        answers=list(session.answers),
        current_index=session.current_index,
        can_advance=session.can_advance(),
        is_complete=session.is_complete(),
    )


async def generate_quiz(request: quiz_schema.QuizCreateRequest) -> quiz_schema.Quiz:
    """YouTube URL로 퀴즈 생성"""
    video_id = youtube_service.extract_video_id(request.video_url)
    transcript = await youtube_service.extract_transcript(video_id)

    topic = request.topic.strip() if request.topic else None
    ai_request = ai.AIQuizGenerationRequest(
        video_url=request.video_url,
        topic=topic or None,
        transcript=transcript,
    )
    ai_response = await ai_service.generate_quiz(ai_request)

    quiz = quiz_schema.Quiz(
        id=str(uuid.uuid4()),
        source_url=request.video_url,
        topic=ai_response.derived_topic,
        channel_name=ai_response.channel_name,
        questions=tuple(
            quiz_schema.Question(
                text=q.question,
                options=tuple(q.options),
                correct_answer_index=q.correct_answer_index,
            )
            for q in ai_response.questions
        ),
        created_at=datetime.now(timezone.utc),
    )
    logger.info(f"퀴즈 생성 성공: quiz_id={quiz.id}, video_id={video_id}, question_count={len(quiz.questions)}")
    return quiz


async def start_quiz(
    registry: QuizSessionRegistry,
    request: quiz_schema.QuizCreateRequest,
    identity: Identity,
) -> quiz_schema.QuizSessionResponse:
    """퀴즈 생성 후 세션 시작"""
    quiz = await generate_quiz(request)
    session_id = registry.start(quiz, identity)
    logger.info(f"퀴즈 세션 시작: session_id={session_id}, user_id={identity.user_id}")
    return build_session_response(session_id, registry.get(session_id, identity))


def select_answer(
    registry: QuizSessionRegistry,
    session_id: str,
    identity: Identity,
    request: quiz_schema.AnswerSelectRequest,
) -> quiz_schema.QuizSessionResponse:
    """답안 선택 (위치 미지정 시 현재 문제)"""
    session = registry.get(session_id, identity)
    position = session.current_index if request.position is None else request.position

    # 외부 입력은 여기서 검증하고, QuizSession에는 유효한 값만 전달
    if position >= session.total:
        raise InvalidQuizRequestError(f"Question position out of range: {position}")
    option_count = len(session.quiz.questions[position].options)
    if request.option_index >= option_count:
        raise InvalidQuizRequestError(f"Option index out of range: {request.option_index}")

    session.select_answer(position, request.option_index)
    return build_session_response(session_id, session)


def next_question(
    registry: QuizSessionRegistry,
    session_id: str,
    identity: Identity,
) -> quiz_schema.QuizSessionResponse:
    """다음 문제로 이동 (현재 문제 미응답 시 거부, 마지막 문제에서는 변화 없음)"""
    session = registry.get(session_id, identity)
    if not session.is_answered(session.current_index):
        raise InvalidQuizRequestError("Answer the current question before moving on.")
    session.advance()
    return build_session_response(session_id, session)


def previous_question(
    registry: QuizSessionRegistry,
    session_id: str,
    identity: Identity,
) -> quiz_schema.QuizSessionResponse:
    """이전 문제로 이동 (첫 문제에서는 변화 없음)"""
    session = registry.get(session_id, identity)
    session.retreat()
    return build_session_response(session_id, session)


async def finish_quiz(
    registry: QuizSessionRegistry,
    session_id: str,
    identity: Identity,
    store: CertificateStore,
) -> quiz_schema.QuizResultResponse:
    """채점 및 인증서 발급

    발급 전에 세션을 꺼내 두어 같은 세션으로 인증서가 두 번 발급되지 않는다.
    저장소 오류로 발급이 실패하면 세션을 되돌려 사용자가 다시 시도할 수 있게 한다.
    """
    if not registry.get(session_id, identity).is_complete():
        raise InvalidQuizRequestError("Answer every question before finishing the quiz.")

    session = registry.claim(session_id, identity)
    try:
        result = await finalize_session(session, identity, store)
    except StoreUnavailableError:
        registry.restore(session_id, identity, session)
        raise

    return quiz_schema.QuizResultResponse(
        correct=result.score.correct,
        total=result.score.total,
        percentage=result.score.percentage,
        passing_score=PASSING_SCORE,
        passed=result.passed,
        certificate=(
            CertificateSummaryResponse.from_certificate(result.certificate)
            if result.certificate is not None
            else None
        ),
    )
