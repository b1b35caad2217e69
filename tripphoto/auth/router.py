from fastapi import APIRouter, Depends

from ..schemas.auth import TokenRequest, TokenResponse
from .security import TokenService, get_token_service


router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/get-jwt", response_model=TokenResponse)
def get_jwt(req: TokenRequest, tokens: TokenService = Depends(get_token_service)):
    return TokenResponse(token=tokens.issue_token(req))
