# main.py
import logging
from datetime import timedelta

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import Settings, settings as default_settings
from app.core.database import build_engine, build_session_factory, init_db
from app.core.errors import register_error_handlers
from app.core.log_config import configure_logging
from app.core.security import PasswordHasher, TokenService
from app.api.endpoints import auth, customers, health, menus, orders, users

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Customer login, menus and ordering for the food order app",
        version="1.0"
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Built once here and handed to every request through app.state
    engine = build_engine(
        settings.database_url(),
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )
    if settings.AUTO_CREATE_TABLES:
        init_db(engine)

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.tokens = TokenService(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(minutes=settings.TOKEN_EXPIRE_MINUTES),
    )

    register_error_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, tags=["Auth"])
    app.include_router(customers.router, prefix="/customers", tags=["Customers"])
    app.include_router(menus.router, prefix="/menus", tags=["Menus"])
    app.include_router(orders.router, prefix="/orders", tags=["Orders"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    @app.get("/")
    def read_root():
        return {"status": "Food Order API online"}

    logger.info("App ready (database=%s)", engine.url.render_as_string(hide_password=True))
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=default_settings.PORT, reload=True)
