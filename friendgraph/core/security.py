# friendgraph/core/security.py

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union

from jose import jwt

from friendgraph.core.config import settings

# Tokens are issued by the identity service; here we only need to read them.
# create_access_token stays for service-to-service callers and for tests.

def create_access_token(data: dict, expires_delta: Union[timedelta, None] = None) -> str:
    """
    Sign a JWT carrying `data`. The caller's user id goes in "sub".
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Dict[str, Any]:
    # raises jose.JWTError (ExpiredSignatureError included) on a bad token
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
