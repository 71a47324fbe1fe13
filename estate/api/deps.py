"""
API dependency helpers.

Provides list parameters, proxy-resolved users and the object storage
gateway to routes.
"""
from typing import Optional, Dict, Any

from fastapi import Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from estate.api.auth import find_user_for_email, is_admin, resolve_identity_from_headers
from estate.db import models
from estate.db.database import get_db
from estate.services.object_storage import ObjectStorage, get_object_storage


def list_params(
    limit: int = Query(default=0, ge=0),
    offset: int = Query(default=0, ge=0),
    order: str = Query(default=""),
) -> Dict[str, Any]:
    return {"limit": limit, "offset": offset, "order": order}


def get_optional_user(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> Optional[models.User]:
    _name, email = resolve_identity_from_headers(
        x_auth_request_user=x_auth_request_user,
        x_auth_request_email=x_auth_request_email,
        x_forwarded_user=x_forwarded_user,
        x_forwarded_email=x_forwarded_email,
    )
    return find_user_for_email(db, email)


# Contract: returns the User matching the proxy email; raises 401 otherwise.
def get_current_user(user: Optional[models.User] = Depends(get_optional_user)) -> models.User:
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return user


def require_admin(user: models.User = Depends(get_current_user)) -> models.User:
    if not is_admin(user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user


def get_storage() -> ObjectStorage:
    return get_object_storage()
