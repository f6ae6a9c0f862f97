import enum
import logging
from dataclasses import dataclass

from quizcert.schemas.auth import Identity
from quizcert.schemas.certificate import AnswerKeyQuestion, CertificateDraft, CertificateResponse
from quizcert.services.certificate_store import CertificateStore
from quizcert.services.quiz_session import QuizSession, ScoreResult

logger = logging.getLogger(__name__)

# 합격 기준 점수 (이상이면 합격)
PASSING_SCORE = 80


class CertificationOutcome(str, enum.Enum):
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class CertificationResult:
    score: ScoreResult
    outcome: CertificationOutcome
    certificate: CertificateResponse | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is CertificationOutcome.PASSED


def decide(percentage: int) -> CertificationOutcome:
    if percentage >= PASSING_SCORE:
        return CertificationOutcome.PASSED
    return CertificationOutcome.FAILED


def build_certificate_draft(
    session: QuizSession,
    identity: Identity,
    score: ScoreResult,
) -> CertificateDraft:
    """퀴즈 내용과 답안을 복사한 인증서 초안 생성"""
    quiz = session.quiz
    return CertificateDraft(
        user_id=identity.user_id,
        user_name=identity.user_name,
        topic=quiz.topic,
        channel_name=quiz.channel_name,
        video_url=quiz.source_url,
        score=score.percentage,
        questions=[
            AnswerKeyQuestion(
                text=q.text,
                options=list(q.options),
                correct_answer_index=q.correct_answer_index,
            )
            for q in quiz.questions
        ],
        user_answers=list(session.answers),
    )


async def finalize_session(
    session: QuizSession,
    identity: Identity,
    store: CertificateStore,
) -> CertificationResult:
    """채점 후 합격이면 인증서 발급

    저장소 실패(StoreUnavailableError)는 그대로 전파하며 재시도하지 않는다.
    """
    score = session.score()
    outcome = decide(score.percentage)
    logger.info(
        f"퀴즈 채점: quiz_id={session.quiz.id}, user_id={identity.user_id}, "
        f"correct={score.correct}/{score.total}, percentage={score.percentage}, outcome={outcome.value}"
    )

    if outcome is CertificationOutcome.FAILED:
        return CertificationResult(score=score, outcome=outcome)

    draft = build_certificate_draft(session, identity, score)
    certificate = await store.issue(draft)
    return CertificationResult(score=score, outcome=outcome, certificate=certificate)
