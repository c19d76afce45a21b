from test_record_helpers import create_record

OBSERVATION = {
    'date': '2024-03-14',
    'sector': 'Pães',
    'product': 'Pão Francês',
    'observationType': 'atraso',
    'description': 'linha parada por falta de insumo',
    'hadImpact': True,
}


def test_observation_requires_product_in_sector(client, admin_headers):
    resp = client.post('/api/production-observations', json=OBSERVATION, headers=admin_headers)
    assert resp.status_code == 404
    assert 'Pão Francês' in resp.get_json()['error']['message']


def test_observation_normalizes_text_and_date(client, admin_headers):
    create_record(client, 'products', admin_headers)
    resp = client.post('/api/production-observations', json=OBSERVATION, headers=admin_headers)
    assert resp.status_code == 201, resp.get_json()
    data = resp.get_json()['data']
    assert data['sector'] == 'PAES'
    assert data['observationType'] == 'ATRASO'
    assert data['description'] == 'LINHA PARADA POR FALTA DE INSUMO'
    assert data['date'] == '2024-03-14T12:00:00Z'
    assert data['hadImpact'] is True


def test_observation_product_from_other_sector_is_not_found(client, admin_headers):
    create_record(client, 'products', admin_headers, sector='Confeitaria')
    resp = client.post('/api/production-observations', json=OBSERVATION, headers=admin_headers)
    assert resp.status_code == 404


def test_observation_update_rechecks_product(client, admin_headers):
    create_record(client, 'products', admin_headers)
    obs = client.post('/api/production-observations', json=OBSERVATION, headers=admin_headers).get_json()['data']
    resp = client.put(f"/api/production-observations/{obs['id']}", json={'sector': 'Confeitaria'}, headers=admin_headers)
    assert resp.status_code == 404
    unchanged = client.get(f"/api/production-observations/{obs['id']}", headers=admin_headers).get_json()['data']
    assert unchanged['sector'] == 'PAES'
    resp = client.put(f"/api/production-observations/{obs['id']}",
                      json={'date': '2024-03-20T03:00:00Z', 'description': 'forno voltou a operar'},
                      headers=admin_headers)
    assert resp.status_code == 200
    assert resp.get_json()['data']['date'] == '2024-03-20T12:00:00Z'
    assert resp.get_json()['data']['description'] == 'FORNO VOLTOU A OPERAR'


def test_had_impact_is_strict_boolean(client, admin_headers):
    create_record(client, 'products', admin_headers)
    resp = client.post('/api/production-observations', json=dict(OBSERVATION, hadImpact='sim'), headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['details'][0]['field'] == 'hadImpact'


def test_observation_ignores_deleted_product(client, admin_headers):
    product = create_record(client, 'products', admin_headers)
    client.delete(f"/api/products/{product['id']}", headers=admin_headers)
    resp = client.post('/api/production-observations', json=OBSERVATION, headers=admin_headers)
    assert resp.status_code == 404
