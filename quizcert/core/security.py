"""외부 인증 서비스(Supabase)가 발급한 JWT 검증"""
import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from quizcert.core.config import settings
from quizcert.exceptions import AuthenticationError
from quizcert.schemas.auth import Identity

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_identity(token: str) -> Identity:
    """토큰을 검증하고 Identity로 변환"""
    try:
        payload = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
        )
    except JWTError as e:
        logger.warning(f"토큰 검증 실패: {e.__class__.__name__}")
        raise AuthenticationError("Invalid or expired session. Please log in again.") from e

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid or expired session. Please log in again.")

    metadata = payload.get("user_metadata") or {}
    return Identity(
        user_id=user_id,
        email=payload.get("email") or "",
        user_name=metadata.get("username") or "User",
    )


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """현재 사용자 의존성"""
    if credentials is None:
        raise AuthenticationError()
    return decode_identity(credentials.credentials)
