from test_record_helpers import audit_entries, ensure_user


def _seed(app, email, role='ESPECTADOR', name=None):
    with app.app_context():
        return ensure_user(email, role, name=name)


def test_admin_lists_users_by_name(client, app_instance, admin_headers):
    _seed(app_instance, 'zelia@example.com', name='Zélia Ramos')
    _seed(app_instance, 'bruno@example.com', name='Bruno Reis')
    body = client.get('/api/users', headers=admin_headers).get_json()
    names = [u['name'] for u in body['data']]
    assert names == ['Bruno Reis', 'Zélia Ramos', 'admin']
    assert body['pagination']['total'] == 3
    assert all('passwordHash' not in u for u in body['data'])


def test_only_admin_manages_users(client, app_instance, headers_for):
    target = _seed(app_instance, 'bruno@example.com')
    assert client.get('/api/users', headers=headers_for('SUPERVISOR')).status_code == 403
    resp = client.delete(f'/api/users/{target.id}', headers=headers_for('SUPERVISOR'))
    assert resp.status_code == 403
    assert client.get('/api/users').status_code == 401


def test_admin_deletes_user_and_audits(client, app_instance, admin_headers):
    target = _seed(app_instance, 'bruno@example.com', role='LIDER_PRODUCAO')
    resp = client.delete(f'/api/users/{target.id}', headers=admin_headers)
    assert resp.status_code == 200
    emails = [u['email'] for u in client.get('/api/users', headers=admin_headers).get_json()['data']]
    assert 'bruno@example.com' not in emails
    entries = audit_entries(app_instance, action='DELETE_USER')
    assert len(entries) == 1
    assert entries[0].entity_id == target.id
    assert entries[0].details['role'] == 'LIDER_PRODUCAO'
    assert client.delete(f'/api/users/{target.id}', headers=admin_headers).status_code == 404


def test_admin_cannot_delete_own_account(client, app_instance, admin_headers):
    with app_instance.app_context():
        me = ensure_user('admin@example.com', 'ADMIN')
    resp = client.delete(f'/api/users/{me.id}', headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'SELF_DELETION'
    assert audit_entries(app_instance, action='DELETE_USER') == []


def test_user_id_must_be_numeric(client, admin_headers):
    resp = client.delete('/api/users/abc', headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'INVALID_IDENTIFIER'
