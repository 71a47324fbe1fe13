from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import transactions as transaction_repo


class TransactionService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return transaction_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, transaction_id: int) -> models.Transaction:
        return transaction_repo.find_by_id(self.db, transaction_id)

    def create(self, transaction: schemas.TransactionCreate) -> models.Transaction:
        db_transaction = models.Transaction(**transaction.model_dump(exclude={"contact_ids"}))
        return transaction_repo.create(self.db, db_transaction, contact_ids=transaction.contact_ids)

    def update(self, transaction_id: int, transaction: schemas.TransactionUpdate) -> models.Transaction:
        patch = transaction.model_dump(exclude_unset=True, exclude={"contact_ids"})
        return transaction_repo.update(self.db, transaction_id, patch, contact_ids=transaction.contact_ids)

    def delete(self, transaction_id: int) -> None:
        transaction_repo.delete(self.db, transaction_id)
