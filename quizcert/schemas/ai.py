from pydantic import BaseModel, Field


class AIQuizQuestion(BaseModel):
    """AI 생성 문제 스키마 (Gemini 응답의 camelCase 필드 허용)"""
    question: str = Field(..., min_length=1, description="문제 내용")
    options: list[str] = Field(..., min_length=4, max_length=4, description="선택지 (4개 필수)")
    correct_answer_index: int = Field(..., ge=0, le=3, alias="correctAnswerIndex", description="정답 인덱스 (0-3)")

    model_config = {"populate_by_name": True}


class AIQuizGenerationRequest(BaseModel):
    """AI 문제 생성 요청 스키마 (내부 사용)"""
    video_url: str = Field(..., description="YouTube 동영상 URL")
    topic: str | None = Field(None, description="주제 (없으면 AI가 동영상에서 추론)")
    transcript: str | None = Field(None, description="자막 텍스트 (가능한 경우)")


class AIQuizGenerationResponse(BaseModel):
    """AI 문제 생성 응답 스키마 (Structured Output)"""
    derived_topic: str = Field(..., min_length=1, alias="derivedTopic", description="동영상 주제")
    channel_name: str | None = Field(None, alias="channelName", description="채널명")
    questions: list[AIQuizQuestion] = Field(..., min_length=5, max_length=5, description="문제 (5개 필수)")

    model_config = {"populate_by_name": True}
