from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import features as feature_repo


class FeatureService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return feature_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, feature_id: int) -> models.Feature:
        return feature_repo.find_by_id(self.db, feature_id)

    def create(self, feature: schemas.FeatureCreate) -> models.Feature:
        return feature_repo.create(self.db, models.Feature(feature_name=feature.feature_name))

    def update(self, feature_id: int, feature: schemas.FeatureUpdate) -> models.Feature:
        return feature_repo.update(self.db, feature_id, feature.model_dump(exclude_unset=True))

    def delete(self, feature_id: int) -> None:
        feature_repo.delete(self.db, feature_id)
