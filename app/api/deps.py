# app/api/deps.py
from fastapi import Depends, Request

from app.core.security import PasswordHasher, TokenService, TokenSubject


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_tokens(request: Request) -> TokenService:
    return request.app.state.tokens


def bearer_token(request: Request):
    """Whatever follows the first space of the Authorization header, or None.

    The scheme word is not checked, so `Token xyz` still reaches verification
    and fails there with a 403 instead of looking like a missing token.
    """
    header = request.headers.get("Authorization")
    if not header:
        return None
    parts = header.split(" ")
    return parts[1] if len(parts) > 1 else None


def get_current_customer(request: Request, tokens: TokenService = Depends(get_tokens)) -> TokenSubject:
    return tokens.verify(bearer_token(request))
