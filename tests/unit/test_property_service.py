import pytest
from sqlalchemy.exc import NoResultFound

from estate.db import models, schemas
from estate.db.repositories import properties as property_repo
from estate.services.feature_service import FeatureService
from estate.services.property_service import PropertyService, describe_update
from estate.services.user_service import UserService


def _property(db, name="Villa Seminyak", **extra):
    return PropertyService(db).create(
        schemas.PropertyCreate(property_name=name, street_address_1="Jl. Kayu Aya 12", **extra)
    )


def _feature(db, name):
    return FeatureService(db).create(schemas.FeatureCreate(feature_name=name))


def test_create_property_with_features(db):
    pool = _feature(db, "Swimming pool")
    prop = _property(db, feature_ids=[pool.id], bedrooms=3)
    assert prop.id > 0
    assert [f.feature_name for f in prop.features] == ["Swimming pool"]
    assert prop.bedrooms == 3


def test_features_are_appended_when_none_exist(db):
    prop = _property(db)
    pool = _feature(db, "Swimming pool")

    updated = PropertyService(db).update(prop.id, schemas.PropertyUpdate(feature_ids=[pool.id]))
    assert [f.id for f in updated.features] == [pool.id]


def test_features_are_replaced_when_some_exist(db):
    pool, garage, garden = _feature(db, "Swimming pool"), _feature(db, "Garage"), _feature(db, "Garden")
    prop = _property(db, feature_ids=[pool.id])

    updated = PropertyService(db).update(prop.id, schemas.PropertyUpdate(feature_ids=[garage.id, garden.id]))
    assert sorted(f.id for f in updated.features) == sorted([garage.id, garden.id])


def test_empty_feature_list_clears_existing_features(db):
    pool, garage = _feature(db, "Swimming pool"), _feature(db, "Garage")
    prop = _property(db, feature_ids=[pool.id, garage.id])

    updated = PropertyService(db).update(prop.id, schemas.PropertyUpdate(feature_ids=[]))
    assert updated.features == []
    # The features themselves survive
    assert {f.id for f in FeatureService(db).find_all()} == {pool.id, garage.id}


def test_empty_feature_list_on_featureless_property_is_a_no_op(db):
    prop = _property(db)

    updated = PropertyService(db).update(prop.id, schemas.PropertyUpdate(feature_ids=[], notes="No extras"))
    assert updated.features == []
    assert updated.notes == "No extras"


def test_omitted_features_are_left_alone(db):
    pool = _feature(db, "Swimming pool")
    prop = _property(db, feature_ids=[pool.id])

    updated = PropertyService(db).update(prop.id, schemas.PropertyUpdate(city="Denpasar"))
    assert updated.city == "Denpasar"
    assert [f.id for f in updated.features] == [pool.id]


def test_unknown_feature_aborts_but_keeps_property(db):
    with pytest.raises(NoResultFound):
        _property(db, feature_ids=[9999])
    rows = property_repo.find_all(db)
    assert [r.property_name for r in rows] == ["Villa Seminyak"]
    assert rows[0].features == []


def test_update_records_generated_log_for_known_actor(db):
    actor = UserService(db).create(
        schemas.UserCreate(name="Agent Smith", username="agentsmith", email="agent@example.com", password="secret123")
    )
    prop = _property(db)

    updated = PropertyService(db).update(
        prop.id, schemas.PropertyUpdate(city="Denpasar", bedrooms=4), actor_id=actor.id
    )
    assert len(updated.property_logs) == 1
    log = updated.property_logs[0]
    assert log.type == "gen"
    assert log.user_id == actor.id
    assert log.log_message == "UPDATE: city (Denpa...), bedrooms"


def test_update_without_actor_writes_no_log(db):
    prop = _property(db)
    updated = PropertyService(db).update(prop.id, schemas.PropertyUpdate(city="Denpasar"))
    assert updated.property_logs == []


def test_describe_update():
    assert describe_update({}) == ""
    assert describe_update({"notes": None}) == ""
    assert describe_update({"description": "Sea view", "land_area": 250.0, "feature_ids": [1, 2]}) == (
        "UPDATE: description (Sea v...), land_area, []feature_ids"
    )


def test_describe_update_skips_zero_and_empty_values():
    assert describe_update({"bedrooms": 0, "land_area": 0.0, "suburb": ""}) == ""
    assert describe_update({"bedrooms": 0, "bathrooms": 1.5, "city": "Denpasar"}) == (
        "UPDATE: bathrooms, city (Denpa...)"
    )


def test_replace_contacts_only_when_list_given(db):
    from estate.services.contact_service import ContactService

    contacts = ContactService(db)
    owner = contacts.create(schemas.ContactCreate(first_name="Made", contact_type="owner"))
    tenant = contacts.create(schemas.ContactCreate(first_name="Ketut", contact_type="tenant"))
    prop = _property(db, contact_ids=[owner.id])

    service = PropertyService(db)
    assert [c.id for c in service.update(prop.id, schemas.PropertyUpdate(contact_ids=[])).contacts] == [owner.id]
    assert [c.id for c in service.update(prop.id, schemas.PropertyUpdate(contact_ids=[tenant.id])).contacts] == [tenant.id]


def test_deleted_property_not_found(db):
    prop = _property(db)
    PropertyService(db).delete(prop.id)
    with pytest.raises(NoResultFound):
        PropertyService(db).find_by_id(prop.id)
    with pytest.raises(NoResultFound):
        PropertyService(db).update(prop.id, schemas.PropertyUpdate(city="Denpasar"))


def test_property_logs_crud(db):
    from estate.services.property_log_service import PropertyLogService

    prop = _property(db)
    logs = PropertyLogService(db)
    log = logs.create(schemas.PropertyLogCreate(property_id=prop.id, log_message="Roof inspected"))
    assert log.type == "user"
    assert log.property.property_name == "Villa Seminyak"

    assert logs.update(log.id, schemas.PropertyLogUpdate(log_message="Roof repaired")).log_message == "Roof repaired"
    logs.delete(log.id)
    assert logs.find_all() == []

    with pytest.raises(NoResultFound):
        logs.create(schemas.PropertyLogCreate(property_id=9999, log_message="Orphan entry"))
    assert db.query(models.PropertyLog).execution_options(include_deleted=True).count() == 1
