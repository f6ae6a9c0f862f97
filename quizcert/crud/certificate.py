from datetime import datetime
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizcert.models.certificate import Certificate
from quizcert.schemas.certificate import CertificateDraft


async def create_certificate(
    session: AsyncSession,
    certificate_id: str,
    draft: CertificateDraft,
    issued_at: datetime,
) -> Certificate:
    """인증서 생성 (단일 커밋)

    커밋이 마지막 작업이므로, 예외가 발생했다면 레코드는 저장되지 않은 것이다.
    """
    questions = None
    if draft.questions is not None:
        questions = [q.model_dump() for q in draft.questions]

    certificate = Certificate(
        id=certificate_id,
        user_id=draft.user_id,
        user_name=draft.user_name,
        topic=draft.topic,
        channel_name=draft.channel_name,
        video_url=draft.video_url,
        score=draft.score,
        questions=questions,
        user_answers=list(draft.user_answers) if draft.user_answers is not None else None,
        issued_at=issued_at,
    )
    session.add(certificate)
    await session.flush()
    await session.commit()
    return certificate


async def get_certificate_by_id(session: AsyncSession, certificate_id: str) -> Certificate | None:
    """ID로 인증서 조회 (정확히 일치하는 ID만)"""
    result = await session.execute(select(Certificate).where(Certificate.id == certificate_id))
    return result.scalar_one_or_none()


async def get_certificates_by_user_id(
    session: AsyncSession,
    user_id: str,
) -> Sequence[Certificate]:
    """사용자별 인증서 목록 (최신 발급순, 동일 시각은 ID순)"""
    stmt = (
        select(Certificate)
        .where(Certificate.user_id == user_id)
        .order_by(Certificate.issued_at.desc(), Certificate.id.desc())
    )
    result = await session.execute(stmt)
    return result.scalars().all()
