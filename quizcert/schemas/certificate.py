from datetime import datetime

from pydantic import BaseModel, Field


class AnswerKeyQuestion(BaseModel):
    """인증서에 스냅샷으로 저장되는 문제"""
    text: str
    options: list[str]
    correct_answer_index: int


class CertificateDraft(BaseModel):
    """발급 전 인증서 (id, issued_at은 저장소가 할당)"""
    user_id: str
    user_name: str
    topic: str
    channel_name: str | None = None
    video_url: str
    score: int = Field(..., ge=0, le=100)
    questions: list[AnswerKeyQuestion] | None = None
    user_answers: list[int] | None = None


class CertificateResponse(BaseModel):
    """발급된 인증서 스키마 (불변)"""
    id: str
    user_id: str
    user_name: str
    topic: str
    channel_name: str | None = None
    video_url: str
    score: int
    questions: list[AnswerKeyQuestion] | None = None
    user_answers: list[int] | None = None
    issued_at: datetime

    model_config = {"from_attributes": True, "frozen": True}

    @property
    def has_answer_key(self) -> bool:
        return bool(self.questions)


class CertificateSummaryResponse(BaseModel):
    """공개용 인증서 요약 (답안지 제외, 검증·대시보드 목록)"""
    id: str
    user_name: str
    topic: str
    channel_name: str | None
    video_url: str
    score: int
    issued_at: datetime
    has_answer_key: bool

    @classmethod
    def from_certificate(cls, certificate: CertificateResponse) -> "CertificateSummaryResponse":
        return cls(
            id=certificate.id,
            user_name=certificate.user_name,
            topic=certificate.topic,
            channel_name=certificate.channel_name,
            video_url=certificate.video_url,
            score=certificate.score,
            issued_at=certificate.issued_at,
            has_answer_key=certificate.has_answer_key,
        )


class CertificateListResponse(BaseModel):
    """인증서 목록 응답 스키마"""
    certificates: list[CertificateSummaryResponse]
    total: int


class AnswerKeyItem(BaseModel):
    """답안지 항목"""
    position: int
    question: str
    options: list[str]
    correct_answer_index: int
    user_answer: int | None
    is_correct: bool | None


class AnswerKeyResponse(BaseModel):
    """답안지 응답 스키마 (과거 인증서는 available=False)"""
    certificate_id: str
    topic: str
    score: int
    available: bool
    items: list[AnswerKeyItem]
