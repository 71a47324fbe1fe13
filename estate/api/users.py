"""
User API endpoints.

Sign-up, credential checks and the caller's own profile under /me are open
to everyone; managing other accounts and assigning roles requires an admin.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from estate.api.auth import is_admin
from estate.api.deps import get_current_user, get_optional_user, list_params, require_admin
from estate.api.errors import http_errors
from estate.db import models, schemas
from estate.db.database import get_db
from estate.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])
me_router = APIRouter(prefix="/api/me", tags=["users"])


@router.post("", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(
    user: schemas.UserCreate,
    db: Session = Depends(get_db),
    current_user: Optional[models.User] = Depends(get_optional_user),
):
    if user.role not in (None, "user") and not is_admin(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required to assign roles")
    with http_errors("user"):
        return UserService(db).create(user)


@router.post("/login", response_model=schemas.User)
def login_endpoint(credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    user = UserService(db).verify_credentials(credentials.email, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user


@router.get("", response_model=List[schemas.User])
def list_users_endpoint(
    params: dict = Depends(list_params),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_admin),
):
    with http_errors("user"):
        return UserService(db).find_all(**params)


@router.get("/{user_id}", response_model=schemas.User)
def get_user_endpoint(user_id: int, db: Session = Depends(get_db), current_user: models.User = Depends(require_admin)):
    with http_errors("user"):
        return UserService(db).find_by_id(user_id)


@router.put("/{user_id}", response_model=schemas.User)
def update_user_endpoint(
    user_id: int,
    user: schemas.UserUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_admin),
):
    with http_errors("user"):
        return UserService(db).update(user_id, user)


@router.delete("/{user_id}")
def delete_user_endpoint(user_id: int, db: Session = Depends(get_db), current_user: models.User = Depends(require_admin)):
    with http_errors("user"):
        UserService(db).delete(user_id)
    return {"message": "User deleted successfully"}


@me_router.get("", response_model=schemas.User)
def get_me_endpoint(current_user: models.User = Depends(get_current_user)):
    return current_user


@me_router.put("", response_model=schemas.User)
def update_me_endpoint(
    user: schemas.UserUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    # Role changes are not self-service
    user = user.model_copy(update={"role": None})
    with http_errors("user"):
        return UserService(db).update(current_user.id, user)
