"""Application service for member registration and login."""

import asyncio
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError

from core.application.dtos.member_dto import LoginRequest, MemberDTO, RegisterMemberRequest
from core.data.uow import create_uow
from core.domain.exceptions import DuplicateEmail, InvalidCredentials
from core.infrastructure.database.pool import ConnectionPool
from core.infrastructure.security import hash_password, verify_password
from core.settings.sections.security import SecuritySettings


logger = logging.getLogger(__name__)


class MemberService:
    """Registers members and checks their credentials."""

    def __init__(self, pool: ConnectionPool, settings: Optional[SecuritySettings] = None) -> None:
        self._pool = pool
        self._settings = settings or SecuritySettings()

    async def register(self, request: RegisterMemberRequest) -> int:
        """Register a new member.

        Args:
            request: RegisterMemberRequest DTO

        Returns:
            New member_id

        Raises:
            ValueError: email, password or name missing
            DuplicateEmail: Email already registered
        """
        if not request.email or not request.password or not request.name:
            raise ValueError("email, password and name are required")

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(
            hash_password, request.password, self._settings.bcrypt_rounds
        )

        async with create_uow(self._pool) as uow:
            if await uow.members.find_by_email(request.email) is not None:
                raise DuplicateEmail(request.email)

            try:
                member_id = await uow.members.add(
                    email=request.email,
                    password_hash=password_hash,
                    name=request.name,
                    phone=request.phone,
                    address=request.address,
                )
                await uow.commit()
            except IntegrityError as e:
                # Concurrent registration won the unique email constraint
                raise DuplicateEmail(request.email) from e

        logger.info(f"✅ Registered member {member_id}")
        return member_id

    async def login(self, request: LoginRequest) -> MemberDTO:
        """Check credentials.

        Args:
            request: LoginRequest DTO

        Returns:
            MemberDTO without the password hash

        Raises:
            ValueError: email or password missing
            InvalidCredentials: Unknown email or wrong password
        """
        if not request.email or not request.password:
            raise ValueError("email and password are required")

        async with create_uow(self._pool) as uow:
            member = await uow.members.find_by_email(request.email)

        if member is None:
            raise InvalidCredentials("Unknown email")

        if not await asyncio.to_thread(verify_password, request.password, member.password):
            raise InvalidCredentials("Wrong password")

        return MemberDTO(
            member_id=member.member_id,
            email=member.email,
            name=member.name,
            role=member.role,
        )
