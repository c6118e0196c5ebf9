"""SQLAlchemy persistence for members."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.member_model import MemberModel


class SqlAlchemyMemberRepository:
    """Member lookups and registration inserts."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[MemberModel]:
        result = await self._session.execute(
            select(MemberModel).where(MemberModel.email == email)
        )
        return result.scalar_one_or_none()

    async def add(
        self,
        email: str,
        password_hash: str,
        name: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> int:
        member = MemberModel(
            email=email,
            password=password_hash,
            name=name,
            phone=phone,
            address=address,
        )
        self._session.add(member)
        await self._session.flush()
        return member.member_id
