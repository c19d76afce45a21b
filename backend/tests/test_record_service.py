"""Service-level checks of the record lifecycle, below the HTTP layer."""
from datetime import datetime, timezone

import pytest

from prodtrack import get_db
from prodtrack.errors import NotFound
from prodtrack.models.audit import AuditLog
from prodtrack.services.audit import AuditContext
from prodtrack.services.catalog import machines
from prodtrack.services.production import errors, losses

CTX = AuditContext(actor_id=1, ip_address='10.0.0.9', user_agent='pytest')


def _loss_data(**overrides):
    data = {
        'date': datetime(2024, 3, 10, tzinfo=timezone.utc), 'sector': 'SALGADO', 'product': 'Coxinha',
        'loss_type': 'MASSA', 'quantity': 10.0, 'unit': 'KG', 'unit_cost': 2.5, 'total_cost': 25.0,
    }
    data.update(overrides)
    return data


def _audit_count():
    return len(get_db().query(AuditLog).all())


def test_create_and_get(app_instance):
    with app_instance.app_context():
        obj = losses.create(_loss_data(), CTX)
        assert obj.id is not None
        assert obj.created_by == 1
        again = losses.get_by_id(obj.id)
        assert losses.to_json(again) == losses.to_json(losses.get_by_id(obj.id))
        entry = get_db().query(AuditLog).one()
        assert (entry.action, entry.ip_address, entry.user_agent) == ('CREATE_RECORD', '10.0.0.9', 'pytest')


def test_update_missing_raises_without_audit(app_instance):
    with app_instance.app_context():
        with pytest.raises(NotFound):
            losses.update(999, {'quantity': 3.0}, CTX)
        assert _audit_count() == 0


def test_remove_twice_raises(app_instance):
    with app_instance.app_context():
        obj = losses.create(_loss_data(), CTX)
        losses.remove(obj.id, CTX)
        with pytest.raises(NotFound):
            losses.remove(obj.id, CTX)
        with pytest.raises(NotFound):
            losses.get_by_id(obj.id)


def test_list_excludes_soft_deleted_and_orders_by_date_desc(app_instance):
    with app_instance.app_context():
        old = losses.create(_loss_data(date=datetime(2024, 1, 1, tzinfo=timezone.utc)), CTX)
        new = losses.create(_loss_data(date=datetime(2024, 2, 1, tzinfo=timezone.utc)), CTX)
        gone = losses.create(_loss_data(), CTX)
        losses.remove(gone.id, CTX)
        rows, total = losses.list(1, 20)
        assert total == 2
        assert [r.id for r in rows] == [new.id, old.id]


def test_ties_break_on_id(app_instance):
    with app_instance.app_context():
        ids = [losses.create(_loss_data(), CTX).id for _ in range(3)]
        rows, _ = losses.list(1, 20)
        assert [r.id for r in rows] == ids


def test_update_sets_updated_by(app_instance):
    with app_instance.app_context():
        obj = losses.create(_loss_data(), CTX)
        updated = losses.update(obj.id, {'quantity': 4.0}, AuditContext(actor_id=2))
        assert updated.quantity == 4.0
        assert updated.updated_by == 2
        assert updated.created_by == 1


def test_hard_delete_service(app_instance):
    with app_instance.app_context():
        obj = errors.create({
            'date': datetime(2024, 3, 11, tzinfo=timezone.utc), 'sector': 'CONFEITARIA', 'product': 'Torta',
            'description': 'Massa queimada', 'category': 'OPERACIONAL', 'cost': 40.0,
        }, CTX)
        errors.remove(obj.id, CTX)
        rows, total = errors.list(1, 20)
        assert rows == [] and total == 0
        with pytest.raises(NotFound):
            errors.remove(obj.id, CTX)


def test_update_hooks_run_only_for_existing_records(app_instance):
    with app_instance.app_context():
        machines.create({'name': 'Forno Turbo', 'code': 'MX01', 'sector': 'PAES'}, CTX)
        with pytest.raises(NotFound):
            machines.update(999, {'code': 'MX01'}, CTX)
        assert _audit_count() == 1


def test_empty_update_of_missing_record_raises(app_instance):
    with app_instance.app_context():
        with pytest.raises(NotFound):
            losses.update(999, {}, CTX)
