"""
Login endpoint issuing bearer tokens.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ..auth import create_access_token, verify_password
from ..db import get_db
from ..models import User
from ..schemas import ErrorResponse, Token, UserLogin

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/login",
    response_model=Token,
    responses={
        400: {"description": "Invalid credentials", "model": ErrorResponse},
        500: {"description": "Internal server error", "model": ErrorResponse}
    },
    summary="User login",
    description="Login a user and return a JWT."
)
def login(credentials: UserLogin, request: Request, db: Session = Depends(get_db)):
    try:
        user = None
        if credentials.username is not None:
            user = db.query(User).filter(User.username == credentials.username).first()

        # Same response whether the user is unknown or the password is wrong
        if (
            not user
            or credentials.password is None
            or not verify_password(credentials.password, user.password_hash)
        ):
            logger.info("Login failed for username=%r", credentials.username)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

        token = create_access_token(user.id, request.app.state.settings)
        logger.info("Successful login: user_id=%s, username=%s", user.id, user.username)
        return Token(token=token)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login error for username=%r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error"
        ) from e
