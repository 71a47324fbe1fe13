"""
Identity resolution from reverse-proxy headers.

The service sits behind an authenticating proxy (oauth2-proxy style) that
forwards the signed-in user's name and email. Emails are normalised and
matched against existing user accounts; unknown emails are not created.
Admins are users with the "admin" role or an email listed in ADMIN_EMAILS.
"""
import os
from typing import Optional, Tuple

from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from estate.db import models
from estate.db.repositories import users as user_repo

ADMIN_ROLE = "admin"


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower()


def _normalize_list_env(var_name: str) -> set:
    raw = os.getenv(var_name, "")
    values = set()
    for entry in raw.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned.lower())
    return values


def _admin_emails() -> set:
    return _normalize_list_env("ADMIN_EMAILS")


def is_admin(user: Optional[models.User]) -> bool:
    if user is None:
        return False
    return user.role == ADMIN_ROLE or _normalize_email(user.email) in _admin_emails()


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def find_user_for_email(db: Session, email: Optional[str]) -> Optional[models.User]:
    if not email:
        return None
    try:
        return user_repo.find_by_email(db, email)
    except NoResultFound:
        return None
