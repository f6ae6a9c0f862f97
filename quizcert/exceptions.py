"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class GenerationFailedError(BaseAppError):
    """퀴즈 생성 실패 (Gemini 응답 불가 또는 잘못된 응답) (502)"""

    def __init__(self, message: str = "Failed to generate quiz. Please try again."):
        super().__init__(message, status_code=502)


class GeminiAPIKeyError(BaseAppError):
    """Gemini API 키 관련 에러 (403)"""

    def __init__(self, message: str = "Quiz generation is not configured correctly. Please contact the administrator."):
        super().__init__(message, status_code=403)


class StoreUnavailableError(BaseAppError):
    """인증서 저장소 접근 불가 (503)"""

    def __init__(self, message: str = "Certificate storage is temporarily unavailable. Please try again later."):
        super().__init__(message, status_code=503)


class CertificateNotFoundError(BaseAppError):
    """인증서를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, certificate_id: str):
        super().__init__(f"Certificate not found: {certificate_id}", status_code=404)


class QuizSessionNotFoundError(BaseAppError):
    """퀴즈 세션을 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, session_id: str):
        super().__init__(f"Quiz session not found: {session_id}", status_code=404)


class InvalidQuizRequestError(BaseAppError):
    """잘못된 퀴즈 요청일 때 발생하는 예외 (400)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class AuthenticationError(BaseAppError):
    """인증 토큰이 없거나 유효하지 않을 때 (401)"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status_code=401)


class PermissionDeniedError(BaseAppError):
    """다른 사용자의 리소스에 접근할 때 (403)"""

    def __init__(self, message: str = "You do not have access to this resource"):
        super().__init__(message, status_code=403)
