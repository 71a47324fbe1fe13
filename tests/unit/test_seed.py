from estate.db import models
from estate.db.repositories import work_types as work_type_repo
from estate.db.seed import DEFAULT_WORK_TYPES, seed_default_work_types


def test_seed_is_idempotent(db):
    assert seed_default_work_types(db) == len(DEFAULT_WORK_TYPES)
    assert seed_default_work_types(db) == 0

    names = [w.name for w in work_type_repo.find_all(db, order="name asc")]
    assert sorted(names) == sorted(DEFAULT_WORK_TYPES)
    assert len(names) == len(set(names))


def test_seed_skips_soft_deleted_names(db):
    seed_default_work_types(db)
    lighting = work_type_repo.find_by_name(db, "Lighting")
    work_type_repo.delete(db, lighting.id)

    assert seed_default_work_types(db) == 0
    assert work_type_repo.find_by_name(db, "Lighting") is None
    assert db.query(models.WorkType).execution_options(include_deleted=True).count() == len(DEFAULT_WORK_TYPES)
