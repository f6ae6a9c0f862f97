from quizcert.services.ai_service import generate_quiz as generate_quiz_with_ai
from quizcert.services.certificate_service import (
    get_answer_key,
    list_answer_keys,
    list_certificates,
    verify_certificate,
)
from quizcert.services.certificate_store import (
    CertificateStore,
    InMemoryCertificateStore,
    SQLCertificateStore,
)
from quizcert.services.certification import (
    PASSING_SCORE,
    CertificationOutcome,
    decide,
    finalize_session,
)
from quizcert.services.quiz_service import (
    QuizSessionRegistry,
    finish_quiz,
    generate_quiz,
    next_question,
    previous_question,
    select_answer,
    start_quiz,
)
from quizcert.services.quiz_session import QuizSession, ScoreResult
from quizcert.services.youtube_service import (
    extract_transcript,
    extract_video_id,
)

__all__ = [
    "generate_quiz_with_ai",
    "get_answer_key",
    "list_answer_keys",
    "list_certificates",
    "verify_certificate",
    "CertificateStore",
    "InMemoryCertificateStore",
    "SQLCertificateStore",
    "PASSING_SCORE",
    "CertificationOutcome",
    "decide",
    "finalize_session",
    "QuizSessionRegistry",
    "finish_quiz",
    "generate_quiz",
    "next_question",
    "previous_question",
    "select_answer",
    "start_quiz",
    "QuizSession",
    "ScoreResult",
    "extract_transcript",
    "extract_video_id",
]
