import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from user_account_svc.config import Settings, get_settings
from user_account_svc.errors import register_exception_handlers
from user_account_svc.models.base import Base, create_session_factory, create_store_engine
from user_account_svc.routers.login import router as login_router
from user_account_svc.routers.register import router as register_router
from user_account_svc.routers.users import router as users_router
from user_account_svc.security.passwords import PasswordHasher
from user_account_svc.security.tokens import TokenService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and its long-lived collaborators.

    The engine, session factory, password hasher and token service are
    created once here and shared by every request through ``app.state``.
    """
    settings = settings or get_settings()
    engine = create_store_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            Base.metadata.create_all(bind=engine)
            logging.info("Connected to user store")
        except SQLAlchemyError as e:
            # Requests will fail with a store error until the database is reachable.
            logging.error("Error connecting to user store: %s", e, exc_info=True)
        yield
        engine.dispose()

    app = FastAPI(title="User Account API", version="1.0.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.session_factory = create_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.token_expire_minutes,
    )

    register_exception_handlers(app)

    app.include_router(register_router)
    app.include_router(login_router)
    app.include_router(users_router)

    return app
