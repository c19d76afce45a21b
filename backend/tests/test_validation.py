import pytest

from prodtrack.schemas.records import AbsenteeismCreate, LossUpdate
from prodtrack.errors import ValidationFailed
from prodtrack.utils.validation import parse_id, validate_payload
from test_record_helpers import create_record, payload


def _fields(resp):
    body = resp.get_json()
    assert body['success'] is False
    assert body['error']['code'] == 'VALIDATION_ERROR'
    return {d['field']: d for d in body['error']['details']}


def test_absenteeism_missing_days_absent(client, admin_headers):
    body = payload('absenteeism')
    del body['daysAbsent']
    resp = client.post('/api/absenteeism', json=body, headers=admin_headers)
    assert resp.status_code == 400
    fields = _fields(resp)
    assert 'daysAbsent' in fields
    assert fields['daysAbsent']['code'] == 'REQUIRED'


def test_all_failures_are_reported_together(client, admin_headers):
    resp = client.post('/api/absenteeism', json={'sector': 'Padaria', 'extra': 1}, headers=admin_headers)
    fields = _fields(resp)
    assert fields['sector']['code'] == 'UNKNOWN_ENUM_VALUE'
    assert fields['extra']['code'] == 'UNEXPECTED_FIELD'
    assert {'employeeName', 'date', 'absenceType', 'daysAbsent'} <= set(fields)


@pytest.mark.parametrize('value', [1.5, 0, -2, True, '2'])
def test_days_absent_must_be_positive_integer(client, admin_headers, value):
    resp = client.post('/api/absenteeism', json=payload('absenteeism', daysAbsent=value), headers=admin_headers)
    assert resp.status_code == 400
    assert 'daysAbsent' in _fields(resp)


def test_numeric_strings_are_not_coerced(client, admin_headers):
    resp = client.post('/api/losses', json=payload('losses', quantity='10'), headers=admin_headers)
    assert 'quantity' in _fields(resp)


def test_loss_numbers_roundtrip_as_numbers(client, admin_headers):
    data = create_record(client, 'losses', admin_headers, quantity=10, unitCost=2.5)
    fetched = client.get(f"/api/losses/{data['id']}", headers=admin_headers).get_json()['data']
    assert fetched['quantity'] == 10
    assert fetched['unitCost'] == 2.5
    assert isinstance(fetched['quantity'], (int, float))
    assert isinstance(fetched['unitCost'], float)


def test_quantity_must_be_positive(client, admin_headers):
    resp = client.post('/api/losses', json=payload('losses', quantity=0), headers=admin_headers)
    assert 'quantity' in _fields(resp)
    resp = client.post('/api/losses', json=payload('losses', totalCost=-1), headers=admin_headers)
    assert 'totalCost' in _fields(resp)


def test_update_rejects_unknown_field_and_explicit_null(client, admin_headers):
    data = create_record(client, 'losses', admin_headers)
    resp = client.put(f"/api/losses/{data['id']}", json={'color': 'red'}, headers=admin_headers)
    assert _fields(resp)['color']['code'] == 'UNEXPECTED_FIELD'
    resp = client.put(f"/api/losses/{data['id']}", json={'quantity': None}, headers=admin_headers)
    assert 'quantity' in _fields(resp)


def test_update_validates_only_supplied_fields(client, admin_headers):
    data = create_record(client, 'losses', admin_headers)
    resp = client.put(f"/api/losses/{data['id']}", json={'lossType': 'insumo'}, headers=admin_headers)
    assert resp.status_code == 200, resp.get_json()
    assert resp.get_json()['data']['lossType'] == 'INSUMO'
    assert resp.get_json()['data']['quantity'] == 10


@pytest.mark.parametrize('raw,expected', [
    ('2024-03-10', '2024-03-10T00:00:00Z'),
    ('2024-03-10T15:30:00Z', '2024-03-10T15:30:00Z'),
    ('2024-03-10T12:30:00-03:00', '2024-03-10T15:30:00Z'),
    ('2024-03-10T15:30:00', '2024-03-10T15:30:00Z'),
])
def test_date_formats_normalize_to_utc(client, admin_headers, raw, expected):
    data = create_record(client, 'losses', admin_headers, date=raw)
    assert data['date'] == expected


@pytest.mark.parametrize('raw', ['10/03/2024', '2024-13-40', 'ontem', 20240310])
def test_invalid_dates_rejected(client, admin_headers, raw):
    resp = client.post('/api/losses', json=payload('losses', date=raw), headers=admin_headers)
    assert 'date' in _fields(resp)


def test_time_and_month_patterns(client, admin_headers):
    resp = client.post('/api/maintenance', json=payload('maintenance', startTime='25:00'), headers=admin_headers)
    assert 'startTime' in _fields(resp)
    resp = client.post('/api/production', json=payload('production', mesAno='2024-03'), headers=admin_headers)
    assert 'mesAno' in _fields(resp)


def test_nested_daily_production_errors_name_the_path(client, admin_headers):
    body = payload('production', dailyProduction=[{'programado': 1, 'realizado': -1}])
    resp = client.post('/api/production', json=body, headers=admin_headers)
    assert 'dailyProduction.0.realizado' in _fields(resp)


def test_blank_optional_text_is_dropped(client, admin_headers):
    data = create_record(client, 'maintenance', admin_headers, technician='   ', solution='')
    assert data['technician'] is None
    assert data['solution'] is None
    assert data['status'] == 'EM_ABERTO'
    assert data['sector'] == 'MANUTENCAO'


def test_string_bounds(client, admin_headers):
    resp = client.post('/api/employees', json=payload('employees', name='A'), headers=admin_headers)
    assert 'name' in _fields(resp)
    resp = client.post('/api/errors', json=payload('errors', description='curt'), headers=admin_headers)
    assert 'description' in _fields(resp)


def test_product_aliases_and_units(client, admin_headers):
    data = create_record(client, 'products', admin_headers, unit='UN')
    assert data['unit'] == 'UND'
    assert data['yield'] == 1.2
    assert data['unitCost'] == 3.5
    body = payload('products')
    body['unit_cost'] = body.pop('unitCost')
    resp = client.post('/api/products', json=body, headers=admin_headers)
    assert resp.status_code == 201, resp.get_json()
    assert resp.get_json()['data']['unitCost'] == 3.5
    resp = client.post('/api/products', json=payload('products', **{'yield': 0}), headers=admin_headers)
    assert 'yield' in _fields(resp)


def test_non_object_body_rejected(client, admin_headers):
    resp = client.post('/api/losses', data='not json', content_type='application/json', headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'VALIDATION_ERROR'
    resp = client.post('/api/losses', json=[1, 2], headers=admin_headers)
    assert resp.status_code == 400


def test_validate_payload_direct():
    with pytest.raises(ValidationFailed) as exc:
        validate_payload(AbsenteeismCreate, {'employeeName': 'Ana'})
    assert {d['field'] for d in exc.value.details} == {'sector', 'date', 'absenceType', 'daysAbsent'}
    assert validate_payload(LossUpdate, {}) == {}
    assert validate_payload(LossUpdate, {'sector': 'pão de queijo'}) == {'sector': 'PAO_DE_QUEIJO'}


def test_parse_id():
    assert parse_id('42') == 42
    for bad in ('', 'abc', '4 2', '-3', None):
        with pytest.raises(ValidationFailed):
            parse_id(bad)
