from fastapi import APIRouter, Depends

from quizcert.core.security import get_current_identity
from quizcert.schemas.auth import Identity

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=Identity)
async def get_me(identity: Identity = Depends(get_current_identity)):
    """현재 사용자 조회 API"""
    return identity
