"""인증 판정 및 발급 테스트"""
import pytest
from unittest.mock import AsyncMock

from conftest import CORRECT_ANSWERS, wrong_answer
from quizcert.exceptions import StoreUnavailableError
from quizcert.services.certificate_store import CertificateStore
from quizcert.services.certification import (
    PASSING_SCORE,
    CertificationOutcome,
    decide,
    finalize_session,
)
from quizcert.services.quiz_session import QuizSession


def _answered_session(quiz, answers):
    session = QuizSession(quiz)
    for position, answer in enumerate(answers):
        session.select_answer(position, answer)
    return session


def test_passing_score_is_80():
    assert PASSING_SCORE == 80


@pytest.mark.parametrize(
    "percentage, expected",
    [
        (0, CertificationOutcome.FAILED),
        (79, CertificationOutcome.FAILED),
        (80, CertificationOutcome.PASSED),
        (100, CertificationOutcome.PASSED),
    ],
)
def test_decide_boundaries(percentage, expected):
    assert decide(percentage) is expected


@pytest.mark.asyncio
async def test_finalize_passing_session_issues_certificate(sample_quiz, identity, memory_store):
    """4/5 정답 → 80점 → 인증서 발급"""
    answers = CORRECT_ANSWERS[:4] + [wrong_answer(CORRECT_ANSWERS[4])]
    session = _answered_session(sample_quiz, answers)

    result = await finalize_session(session, identity, memory_store)

    assert result.passed
    assert result.score.percentage == 80
    certificate = result.certificate
    assert certificate is not None
    assert certificate.score == 80
    assert certificate.user_id == identity.user_id
    assert certificate.user_name == identity.user_name
    assert certificate.topic == sample_quiz.topic
    assert certificate.channel_name == sample_quiz.channel_name
    assert certificate.video_url == sample_quiz.source_url
    assert certificate.user_answers == answers
    assert [q.correct_answer_index for q in certificate.questions] == CORRECT_ANSWERS
    assert await memory_store.get_by_id(certificate.id) == certificate


@pytest.mark.asyncio
async def test_finalize_failing_session_never_calls_issue(sample_quiz, identity):
    """1/5 정답 → 20점 → 발급 없음"""
    answers = [CORRECT_ANSWERS[0]] + [wrong_answer(c) for c in CORRECT_ANSWERS[1:]]
    session = _answered_session(sample_quiz, answers)
    store = AsyncMock(spec=CertificateStore)

    result = await finalize_session(session, identity, store)

    assert result.outcome is CertificationOutcome.FAILED
    assert result.score.percentage == 20
    assert result.certificate is None
    store.issue.assert_not_called()


@pytest.mark.asyncio
async def test_finalize_propagates_store_failure(sample_quiz, identity):
    session = _answered_session(sample_quiz, CORRECT_ANSWERS)
    store = AsyncMock(spec=CertificateStore)
    store.issue.side_effect = StoreUnavailableError()

    with pytest.raises(StoreUnavailableError):
        await finalize_session(session, identity, store)
    store.issue.assert_awaited_once()
