from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from todo_api.database import get_db
from todo_api.errors import Unauthenticated
from todo_api.store.sql import SqlRecordStore
from todo_api.utils.tokens import TokenClaims, TokenService


def _extract_token(authorization: Optional[str], token_query: Optional[str]) -> Optional[str]:
    """Return token from Authorization header (Bearer ...) or token query param (compat).
    Header has precedence.
    """
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return token_query


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_store(db: Session = Depends(get_db)) -> SqlRecordStore:
    return SqlRecordStore(db)


def get_current_user(
    authorization: Optional[str] = Header(None),
    token: Optional[str] = None,
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    tok = _extract_token(authorization, token)
    if not tok:
        raise Unauthenticated()
    # TokenMalformed / TokenSignatureInvalid / TokenExpired all share the
    # generic Unauthenticated message
    return tokens.validate(tok)
