from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


class SessionScopedRepo:
    """
    Session plumbing shared by the SQLAlchemy repositories.

    Inside a unit of work the repo is handed the UoW session and never
    commits; standalone (DI container) it opens a session per call.
    """

    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        *,
        session: AsyncSession | None = None,
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            # Session injected by UoW - use directly
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')
