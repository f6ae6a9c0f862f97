import abc
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quizcert.crud import certificate as certificate_crud
from quizcert.exceptions import StoreUnavailableError
from quizcert.models.certificate import Certificate
from quizcert.schemas.certificate import CertificateDraft, CertificateResponse

logger = logging.getLogger(__name__)


def _new_certificate_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CertificateStore(abc.ABC):
    """인증서 저장소 계약

    - issue: id와 issued_at을 할당해 저장하고, 완전한 인증서를 반환하거나 실패한다.
    - get_by_id: 없는 ID는 None (에러 아님).
    - list_by_user: 최신 발급순.
    """

    @abc.abstractmethod
    async def issue(self, draft: CertificateDraft) -> CertificateResponse:
        ...

    @abc.abstractmethod
    async def get_by_id(self, certificate_id: str) -> CertificateResponse | None:
        ...

    @abc.abstractmethod
    async def list_by_user(self, user_id: str) -> list[CertificateResponse]:
        ...


class SQLCertificateStore(CertificateStore):
    """SQLAlchemy 기반 인증서 저장소"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_response(certificate: Certificate) -> CertificateResponse:
        response = CertificateResponse.model_validate(certificate)
        # SQLite는 timezone 정보를 저장하지 않음
        if response.issued_at.tzinfo is None:
            response = response.model_copy(
                update={"issued_at": response.issued_at.replace(tzinfo=timezone.utc)}
            )
        return response

    async def issue(self, draft: CertificateDraft) -> CertificateResponse:
        certificate_id = _new_certificate_id()
        try:
            certificate = await certificate_crud.create_certificate(
                self.session,
                certificate_id=certificate_id,
                draft=draft,
                issued_at=_utcnow(),
            )
        except SQLAlchemyError as e:
            logger.error(
                f"인증서 저장 실패: {e.__class__.__name__}, user_id={draft.user_id}",
                exc_info=True,
            )
            await self.session.rollback()
            raise StoreUnavailableError() from e

        logger.info(f"인증서 발급: certificate_id={certificate.id}, user_id={draft.user_id}, score={draft.score}")
        return self._to_response(certificate)

    async def get_by_id(self, certificate_id: str) -> CertificateResponse | None:
        try:
            certificate = await certificate_crud.get_certificate_by_id(self.session, certificate_id)
        except SQLAlchemyError as e:
            logger.error(f"인증서 조회 실패: certificate_id={certificate_id}", exc_info=True)
            raise StoreUnavailableError() from e
        if certificate is None:
            return None
        return self._to_response(certificate)

    async def list_by_user(self, user_id: str) -> list[CertificateResponse]:
        try:
            certificates = await certificate_crud.get_certificates_by_user_id(self.session, user_id)
        except SQLAlchemyError as e:
            logger.error(f"인증서 목록 조회 실패: user_id={user_id}", exc_info=True)
            raise StoreUnavailableError() from e
        return [self._to_response(c) for c in certificates]


class InMemoryCertificateStore(CertificateStore):
    """메모리 기반 인증서 저장소 (테스트/로컬 개발용)"""

    def __init__(self):
        self._certificates: dict[str, CertificateResponse] = {}

    async def issue(self, draft: CertificateDraft) -> CertificateResponse:
        certificate = CertificateResponse(
            id=_new_certificate_id(),
            issued_at=_utcnow(),
            **draft.model_dump(),
        )
        self._certificates[certificate.id] = certificate
        return certificate

    async def get_by_id(self, certificate_id: str) -> CertificateResponse | None:
        return self._certificates.get(certificate_id)

    async def list_by_user(self, user_id: str) -> list[CertificateResponse]:
        owned = [c for c in self._certificates.values() if c.user_id == user_id]
        return sorted(owned, key=lambda c: (c.issued_at, c.id), reverse=True)
