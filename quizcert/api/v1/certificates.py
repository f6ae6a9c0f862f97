from fastapi import APIRouter, Depends

from quizcert.api.deps import get_certificate_store
from quizcert.core.security import get_current_identity
from quizcert.schemas import certificate as certificate_schema
from quizcert.schemas.auth import Identity
from quizcert.services import certificate_service
from quizcert.services.certificate_store import CertificateStore

router = APIRouter(prefix="/certificates", tags=["certificates"])


@router.get("", response_model=certificate_schema.CertificateListResponse)
async def list_certificates(
    identity: Identity = Depends(get_current_identity),
    store: CertificateStore = Depends(get_certificate_store),
):
    """내 인증서 목록 API"""
    return await certificate_service.list_certificates(store, identity)


@router.get("/answer-keys", response_model=certificate_schema.CertificateListResponse)
async def list_answer_keys(
    identity: Identity = Depends(get_current_identity),
    store: CertificateStore = Depends(get_certificate_store),
):
    """답안지가 있는 인증서 목록 API"""
    return await certificate_service.list_answer_keys(store, identity)


@router.get("/{certificate_id}", response_model=certificate_schema.CertificateSummaryResponse)
async def verify_certificate(
    certificate_id: str,
    store: CertificateStore = Depends(get_certificate_store),
):
    """인증서 공개 검증 API (인증 불필요)"""
    return await certificate_service.verify_certificate(store, certificate_id)


@router.get("/{certificate_id}/answer-key", response_model=certificate_schema.AnswerKeyResponse)
async def get_answer_key(
    certificate_id: str,
    identity: Identity = Depends(get_current_identity),
    store: CertificateStore = Depends(get_certificate_store),
):
    """답안지 조회 API (소유자 전용)"""
    return await certificate_service.get_answer_key(store, certificate_id, identity)
