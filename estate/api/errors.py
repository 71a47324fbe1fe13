"""
Translation of service-layer errors into HTTP responses.
"""
import logging
from contextlib import contextmanager

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, NoResultFound

from estate.db.repositories.base import InvalidOrderError, MissingLinkError, RepositoryError
from estate.services.object_storage import ObjectStorageError

logger = logging.getLogger(__name__)


@contextmanager
def http_errors(entity: str):
    """Map repository and storage failures raised inside the block onto HTTP errors."""
    try:
        yield
    except MissingLinkError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NoResultFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")
    except InvalidOrderError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except RepositoryError as e:
        if isinstance(e.__cause__, IntegrityError):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"{entity} conflicts with an existing record")
        logger.exception("Unexpected repository failure for %s", entity)
        raise
    except ObjectStorageError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
