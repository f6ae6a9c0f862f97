from pydantic import BaseModel


class Identity(BaseModel):
    """현재 요청의 사용자 (외부 인증 서비스 토큰에서 추출)"""
    user_id: str
    email: str = ""
    user_name: str = "User"

    model_config = {"frozen": True}
