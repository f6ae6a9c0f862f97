from quizcert.schemas.ai import (
    AIQuizGenerationRequest,
    AIQuizGenerationResponse,
    AIQuizQuestion,
)
from quizcert.schemas.auth import Identity
from quizcert.schemas.certificate import (
    AnswerKeyItem,
    AnswerKeyQuestion,
    AnswerKeyResponse,
    CertificateDraft,
    CertificateListResponse,
    CertificateResponse,
    CertificateSummaryResponse,
)
from quizcert.schemas.quiz import (
    AnswerSelectRequest,
    PublicQuestion,
    Question,
    Quiz,
    QuizCreateRequest,
    QuizResultResponse,
    QuizSessionResponse,
)

__all__ = [
    "AIQuizGenerationRequest",
    "AIQuizGenerationResponse",
    "AIQuizQuestion",
    "Identity",
    "AnswerKeyItem",
    "AnswerKeyQuestion",
    "AnswerKeyResponse",
    "CertificateDraft",
    "CertificateListResponse",
    "CertificateResponse",
    "CertificateSummaryResponse",
    "AnswerSelectRequest",
    "PublicQuestion",
    "Question",
    "Quiz",
    "QuizCreateRequest",
    "QuizResultResponse",
    "QuizSessionResponse",
]
