"""Admin repository - data access layer."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from finance_survey.domains.admin.models import Admin, RefreshToken


class AdminRepositoryInterface(ABC):
    """Admin repository interface (Port)."""

    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        """Create a new admin."""
        pass

    @abstractmethod
    async def get_by_id(self, admin_id: UUID) -> Admin | None:
        """Get admin by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Admin | None:
        """Get admin by email."""
        pass

    @abstractmethod
    async def record_login(self, admin: Admin) -> None:
        """Stamp the last successful sign-in."""
        pass

    @abstractmethod
    async def add_refresh_token(self, token: RefreshToken) -> None:
        """Persist an issued refresh token."""
        pass

    @abstractmethod
    async def get_refresh_token(self, token_hash: str) -> RefreshToken | None:
        """Find a refresh token by digest."""
        pass

    @abstractmethod
    async def revoke_refresh_tokens(self, admin_id: UUID) -> int:
        """Revoke every live refresh token of an admin."""
        pass


class AdminRepository(AdminRepositoryInterface):
    """SQLAlchemy implementation of admin repository (Adapter)."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, admin: Admin) -> Admin:
        self._db.add(admin)
        await self._db.commit()
        await self._db.refresh(admin)
        return admin

    async def get_by_id(self, admin_id: UUID) -> Admin | None:
        result = await self._db.execute(select(Admin).where(Admin.id == admin_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Admin | None:
        result = await self._db.execute(select(Admin).where(Admin.email == email))
        return result.scalar_one_or_none()

    async def record_login(self, admin: Admin) -> None:
        admin.last_login_at = datetime.now(timezone.utc)
        await self._db.commit()

    async def add_refresh_token(self, token: RefreshToken) -> None:
        self._db.add(token)
        await self._db.commit()

    async def get_refresh_token(self, token_hash: str) -> RefreshToken | None:
        result = await self._db.execute(
            select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        )
        return result.scalar_one_or_none()

    async def revoke_refresh_tokens(self, admin_id: UUID) -> int:
        result = await self._db.execute(
            update(RefreshToken)
            .where(RefreshToken.admin_id == admin_id, RefreshToken.revoked_at.is_(None))
            .values(revoked_at=datetime.now(timezone.utc))
        )
        await self._db.commit()
        return result.rowcount
