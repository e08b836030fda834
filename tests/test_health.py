def test_health(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    body = resp.json()
    assert body['status'] == 'pass'
    assert body['service'] == 'inventory-system'

def test_liveness(client):
    assert client.get('/health/live').json() == {'status': 'alive'}

def test_readiness_checks_database(client):
    resp = client.get('/health/ready')
    body = resp.json()
    assert resp.status_code == (200 if body['status'] == 'pass' else 503)
    assert body['checks']['database:connectivity']['status'] == 'pass'
    assert 'storage:disk_space' in body['checks']
    assert 'system:memory' in body['checks']

def test_startup_without_migrations_table_warns(client):
    resp = client.get('/health/startup')
    assert resp.status_code == 200
    body = resp.json()
    assert body['status'] == 'started'
    assert body['checks']['database:migrations']['status'] == 'warn'

def test_metrics_include_order_counts(client, customer, item):
    client.post('/orders', json={'customerId': customer['id'], 'itemId': item['id'], 'quantity': 1})
    client.post('/orders', json={'customerId': customer['id'], 'itemId': item['id'], 'quantity': 0})

    body = client.get('/metrics').json()
    assert body['service'] == 'inventory-system'
    assert body['business']['orders_by_status'] == {'PLACED': 1, 'REJECTED': 1}

def test_request_id_is_echoed(client):
    resp = client.get('/health', headers={'X-Request-ID': 'req-123'})
    assert resp.headers['X-Request-ID'] == 'req-123'

def test_request_id_is_generated(client):
    assert client.get('/health').headers['X-Request-ID']

def test_root_and_info(client):
    assert client.get('/').json()['status'] == 'running'
    info = client.get('/info').json()
    assert info['endpoints']['orders'] == '/orders'
