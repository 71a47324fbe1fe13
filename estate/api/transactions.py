"""
Transaction API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.post("", response_model=schemas.Transaction, status_code=status.HTTP_201_CREATED)
def create_transaction_endpoint(transaction: schemas.TransactionCreate, db: Session = Depends(get_db)):
    with http_errors("transaction"):
        return TransactionService(db).create(transaction)


@router.get("", response_model=List[schemas.Transaction])
def list_transactions_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("transaction"):
        return TransactionService(db).find_all(**params)


@router.get("/{transaction_id}", response_model=schemas.Transaction)
def get_transaction_endpoint(transaction_id: int, db: Session = Depends(get_db)):
    with http_errors("transaction"):
        return TransactionService(db).find_by_id(transaction_id)


@router.put("/{transaction_id}", response_model=schemas.Transaction)
def update_transaction_endpoint(transaction_id: int, transaction: schemas.TransactionUpdate, db: Session = Depends(get_db)):
    with http_errors("transaction"):
        return TransactionService(db).update(transaction_id, transaction)


@router.delete("/{transaction_id}")
def delete_transaction_endpoint(transaction_id: int, db: Session = Depends(get_db)):
    with http_errors("transaction"):
        TransactionService(db).delete(transaction_id)
    return {"message": "Transaction deleted successfully"}
