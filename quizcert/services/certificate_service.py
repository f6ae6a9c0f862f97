import logging

from quizcert.exceptions import CertificateNotFoundError, PermissionDeniedError
from quizcert.schemas import certificate as certificate_schema
from quizcert.schemas.auth import Identity
from quizcert.services.certificate_store import CertificateStore

logger = logging.getLogger(__name__)


async def verify_certificate(
    store: CertificateStore,
    certificate_id: str,
) -> certificate_schema.CertificateSummaryResponse:
    """공개 인증서 검증 (ID 정확히 일치, 답안지는 노출하지 않음)"""
    certificate = await store.get_by_id(certificate_id.strip())
    if certificate is None:
        logger.info(f"인증서 검증 실패 (없음): certificate_id={certificate_id}")
        raise CertificateNotFoundError(certificate_id)
    return certificate_schema.CertificateSummaryResponse.from_certificate(certificate)


async def list_certificates(
    store: CertificateStore,
    identity: Identity,
) -> certificate_schema.CertificateListResponse:
    """사용자의 인증서 목록 (대시보드)"""
    certificates = await store.list_by_user(identity.user_id)
    summaries = [certificate_schema.CertificateSummaryResponse.from_certificate(c) for c in certificates]
    return certificate_schema.CertificateListResponse(certificates=summaries, total=len(summaries))


async def list_answer_keys(
    store: CertificateStore,
    identity: Identity,
) -> certificate_schema.CertificateListResponse:
    """답안지가 있는 인증서만 조회"""
    certificates = await store.list_by_user(identity.user_id)
    summaries = [
        certificate_schema.CertificateSummaryResponse.from_certificate(c)
        for c in certificates
        if c.has_answer_key
    ]
    return certificate_schema.CertificateListResponse(certificates=summaries, total=len(summaries))


def build_answer_key(
    certificate: certificate_schema.CertificateResponse,
) -> certificate_schema.AnswerKeyResponse:
    """인증서 스냅샷으로 답안지 생성 (답안지 기능 이전 인증서는 빈 목록)"""
    if not certificate.has_answer_key:
        return certificate_schema.AnswerKeyResponse(
            certificate_id=certificate.id,
            topic=certificate.topic,
            score=certificate.score,
            available=False,
            items=[],
        )

    user_answers = certificate.user_answers or []
    items = []
    for position, question in enumerate(certificate.questions):
        user_answer = user_answers[position] if position < len(user_answers) else None
        # -1(미응답)은 답안 없음으로 표시
        if user_answer is not None and user_answer < 0:
            user_answer = None
        items.append(
            certificate_schema.AnswerKeyItem(
                position=position,
                question=question.text,
                options=question.options,
                correct_answer_index=question.correct_answer_index,
                user_answer=user_answer,
                is_correct=None if user_answer is None else user_answer == question.correct_answer_index,
            )
        )

    return certificate_schema.AnswerKeyResponse(
        certificate_id=certificate.id,
        topic=certificate.topic,
        score=certificate.score,
        available=True,
        items=items,
    )


async def get_answer_key(
    store: CertificateStore,
    certificate_id: str,
    identity: Identity,
) -> certificate_schema.AnswerKeyResponse:
    """답안지 조회 (소유자만)"""
    certificate = await store.get_by_id(certificate_id)
    if certificate is None:
        raise CertificateNotFoundError(certificate_id)
    if certificate.user_id != identity.user_id:
        raise PermissionDeniedError()
    return build_answer_key(certificate)
