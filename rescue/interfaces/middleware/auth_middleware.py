from __future__ import annotations

import re
from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from rescue.application.errors import AuthError
from rescue.config.settings import Settings
from rescue.infrastructure.auth.context import AuthContext, fetch_user

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)

# Routes a caller without a token may use; they act as an anonymous Guest
ANONYMOUS_ROUTES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("GET", re.compile(r"^/api/v1/animals/?$")),
    ("GET", re.compile(r"^/api/v1/animals/types/?$")),
    ("GET", re.compile(r"^/api/v1/animals/[0-9a-fA-F-]{36}/?$")),
    ("GET", re.compile(r"^/api/v1/adoptions/graduates/?$")),
    ("POST", re.compile(r"^/api/v1/applications/?$")),
)


def _allows_anonymous(method: str, path: str) -> bool:
    return any(m == method and pattern.match(path) for m, pattern in ANONYMOUS_ROUTES)


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            authorization = request.headers.get("Authorization")
            if not authorization:
                if _allows_anonymous(request.method, request.url.path):
                    request.state.auth_context = AuthContext.anonymous()
                    return await call_next(request)
                raise AuthError("Missing Authorization header")
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                raise AuthError("Invalid Authorization header")
            jwt_service = getattr(request.app.state, "jwt_service", None)
            if jwt_service is None:
                raise RuntimeError("JWT service not configured")
            claims = jwt_service.decode(token)

            subject = claims.get("sub")
            if not subject:
                raise AuthError("Token missing subject")
            try:
                user_id = UUID(str(subject))
            except ValueError as exc:
                raise AuthError("Token subject is not a valid UUID") from exc
            session_factory = getattr(request.app.state, "session_factory", None)
            if session_factory is None:
                raise RuntimeError("Session factory not configured")
            async with session_factory() as session:
                user = await fetch_user(session, user_id)
            if not user or not user.is_active:
                raise AuthError("Inactive or missing user")
            request.state.auth_context = AuthContext(
                user_id=user_id,
                role=user.role,
                email=user.email,
                claims=claims,
            )
            return await call_next(request)
        except AuthError as exc:
            payload = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return JSONResponse(status_code=exc.status_code, content=payload)
