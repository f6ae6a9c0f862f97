from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from quizcert.schemas.certificate import CertificateSummaryResponse


class Question(BaseModel):
    """객관식 문제 (생성 후 변경 불가)"""
    text: str = Field(..., description="문제 내용")
    options: tuple[str, ...] = Field(..., min_length=2, description="선택지 (보통 4개)")
    correct_answer_index: int = Field(..., ge=0, description="정답 인덱스")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_answer_index(self) -> "Question":
        if self.correct_answer_index >= len(self.options):
            raise ValueError(
                f"correct_answer_index({self.correct_answer_index})가 선택지 범위를 벗어났습니다"
            )
        return self


class Quiz(BaseModel):
    """생성된 퀴즈 (세션에 전달된 뒤에는 변경되지 않음)"""
    id: str
    source_url: str
    topic: str
    channel_name: str | None = None
    questions: tuple[Question, ...] = Field(..., min_length=1)
    created_at: datetime

    model_config = {"frozen": True}


class QuizCreateRequest(BaseModel):
    """퀴즈 생성 요청 스키마"""
    video_url: str = Field(..., min_length=1, description="YouTube 동영상 URL")
    topic: str | None = Field(None, description="주제 (없으면 동영상에서 추론)")


class PublicQuestion(BaseModel):
    """세션 진행 중 노출되는 문제 (정답 제외)"""
    position: int
    text: str
    options: list[str]


class QuizSessionResponse(BaseModel):
    """퀴즈 세션 상태 응답 스키마"""
    session_id: str
    quiz_id: str
    topic: str
    channel_name: str | None
    source_url: str
    questions: list[PublicQuestion]
    answers: list[int] = Field(..., description="위치별 선택 인덱스 (미응답: -1)")
    current_index: int
    can_advance: bool
    is_complete: bool


class AnswerSelectRequest(BaseModel):
    """답안 선택 요청 스키마"""
    option_index: int = Field(..., ge=0, description="선택지 인덱스")
    position: int | None = Field(None, ge=0, description="문제 위치 (없으면 현재 문제)")


class QuizResultResponse(BaseModel):
    """퀴즈 결과 응답 스키마"""
    correct: int
    total: int
    percentage: int
    passing_score: int
    passed: bool
    certificate: CertificateSummaryResponse | None = Field(None, description="합격 시 발급된 인증서 (답안지 제외)")
