# friendgraph/common/deps.py

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError

from friendgraph.db.session import get_db
from friendgraph.services.friend_service import FriendService
from friendgraph.core.security import decode_access_token

# Tokens are issued by the identity service; the URL only feeds the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")

def get_friend_service(db: Session = Depends(get_db)) -> FriendService:
    return FriendService(db=db)

def get_current_user_id(token: str = Depends(oauth2_scheme)) -> int:
    """
    The authenticated caller's user id, taken from the token's "sub" claim.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise credentials_exception

    subject = payload.get("sub")
    if subject is None:
        raise credentials_exception
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise credentials_exception
    if user_id <= 0:
        raise credentials_exception
    return user_id
