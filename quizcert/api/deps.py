from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quizcert.models.base import get_db
from quizcert.services.certificate_store import CertificateStore, SQLCertificateStore


async def get_certificate_store(db: AsyncSession = Depends(get_db)) -> CertificateStore:
    """요청 단위 인증서 저장소"""
    return SQLCertificateStore(db)
