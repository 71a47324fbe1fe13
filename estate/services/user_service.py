"""
User service: DTO mapping and password hashing over the user repository.
"""
import logging
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import users as user_repo

logger = logging.getLogger(__name__)

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Return an Argon2id encoded hash for ``password``."""
    return _hasher.hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


class UserService:
    """Service class for user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return user_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, user_id: int) -> models.User:
        return user_repo.find_by_id(self.db, user_id)

    def find_by_email(self, email: str) -> models.User:
        return user_repo.find_by_email(self.db, email)

    def create(self, user: schemas.UserCreate) -> models.User:
        db_user = models.User(
            name=user.name,
            username=user.username,
            email=user.email,
            password=hash_password(user.password),
            role=user.role or "user",
        )
        return user_repo.create(self.db, db_user)

    def update(self, user_id: int, user: schemas.UserUpdate) -> models.User:
        patch = user.model_dump(exclude_unset=True, exclude={"password"})
        # Empty password means "unchanged"
        if user.password:
            patch["password"] = hash_password(user.password)
        return user_repo.update(self.db, user_id, patch)

    def delete(self, user_id: int) -> None:
        user_repo.delete(self.db, user_id)

    def verify_credentials(self, email: str, password: str) -> Optional[models.User]:
        """Return the user when ``password`` matches the stored hash, else None."""
        try:
            db_user = user_repo.find_by_email(self.db, email)
        except NoResultFound:
            return None
        if not verify_password(db_user.password, password):
            logger.info("Rejected credentials for user %s", db_user.id)
            return None
        return db_user
