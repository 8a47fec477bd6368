"""
NoteKeeper Backend: Account Repository (Credential Store)
==========================================================

Durable mapping from account identity to profile fields and password hash.
Email uniqueness is enforced by the unique index on `accounts.email`; a
racing duplicate insert surfaces as `sqlalchemy.exc.IntegrityError` from
`create()`.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.account import Account

logger = logging.getLogger(__name__)


class AccountRepository:

    async def create(
        self,
        db: AsyncSession,
        username: str,
        email: str,
        password_hash: str,
    ) -> Account:
        account = Account(username=username, email=email, password_hash=password_hash)
        db.add(account)
        # Flush assigns defaults and surfaces unique violations now
        await db.flush()
        logger.info("Account created: %s", account.id)
        return account

    async def find_by_email(self, db: AsyncSession, email: str) -> Optional[Account]:
        result = await db.execute(select(Account).where(Account.email == email))
        return result.scalar_one_or_none()

    async def find_by_id(self, db: AsyncSession, account_id: UUID) -> Optional[Account]:
        result = await db.execute(select(Account).where(Account.id == account_id))
        return result.scalar_one_or_none()


account_repository = AccountRepository()
