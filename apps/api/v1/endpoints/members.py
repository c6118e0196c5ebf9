"""Member registration and login endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from core.application.dtos.member_dto import LoginRequest, RegisterMemberRequest
from core.application.services import MemberService
from core.domain.exceptions import DuplicateEmail, InvalidCredentials

from apps.api.deps import get_member_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/members", tags=["members"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterMemberRequest,
    service: MemberService = Depends(get_member_service),
):
    """Register a new member.

    Raises:
        HTTPException: 400 on missing fields, 409 on duplicate email
    """
    try:
        member_id = await service.register(request)
    except DuplicateEmail as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "Registration successful", "member_id": member_id}


@router.post("/login")
async def login(
    request: LoginRequest,
    service: MemberService = Depends(get_member_service),
):
    """Check credentials and return member information.

    Raises:
        HTTPException: 400 on missing fields, 401 on bad credentials
    """
    try:
        member = await service.login(request)
    except InvalidCredentials as e:
        logger.info(f"Login rejected: {e}")
        raise HTTPException(status_code=401, detail="Invalid email or password")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "Login successful", "member": member}
