import pytest

def _order(client, customer_id, item_id, quantity):
    resp = client.post('/orders', json={'customerId': customer_id, 'itemId': item_id, 'quantity': quantity})
    assert resp.status_code == 200
    return resp.json()

def _stock_of(client, item_id):
    return client.get(f'/inventory/{item_id}').json()['quantity']

def test_place_order_with_enough_stock(client, customer, item):
    order = _order(client, customer['id'], item['id'], 3)

    assert order['status'] == 'PLACED'
    assert order['quantity'] == 3
    assert order['customer'] == customer
    assert order['item']['id'] == item['id']
    assert order['item']['quantity'] == 7
    assert _stock_of(client, item['id']) == 7

def test_place_order_exceeding_stock_is_rejected(client, customer, item):
    order = _order(client, customer['id'], item['id'], 100)

    assert order['status'] == 'REJECTED'
    assert order['quantity'] == 100
    assert _stock_of(client, item['id']) == 10

def test_unknown_customer_is_rejected(client, item):
    order = _order(client, 9999, item['id'], 2)

    assert order['status'] == 'REJECTED'
    assert order['customer'] is None
    assert order['customer_id'] is None
    assert order['item']['id'] == item['id']
    assert _stock_of(client, item['id']) == 10

def test_unknown_item_is_rejected(client, customer):
    order = _order(client, customer['id'], 99999, 2)

    assert order['status'] == 'REJECTED'
    assert order['item'] is None
    assert order['item_id'] is None
    assert order['customer'] == customer

@pytest.mark.parametrize('quantity', [0, -5])
def test_non_positive_quantity_is_rejected(client, customer, item, quantity):
    order = _order(client, customer['id'], item['id'], quantity)

    assert order['status'] == 'REJECTED'
    assert order['quantity'] == quantity
    assert _stock_of(client, item['id']) == 10

def test_snake_case_body_is_accepted(client, customer, item):
    resp = client.post('/orders', json={'customer_id': customer['id'], 'item_id': item['id'], 'quantity': 1})
    assert resp.status_code == 200
    assert resp.json()['status'] == 'PLACED'

def test_malformed_body_is_422(client):
    assert client.post('/orders', json={'customerId': 1, 'quantity': 1}).status_code == 422
    assert client.post('/orders', json={'customerId': 1, 'itemId': 1, 'quantity': 'many'}).status_code == 422

def test_orders_for_customer(client, customer, item):
    _order(client, customer['id'], item['id'], 2)
    _order(client, customer['id'], item['id'], 5)

    resp = client.get(f"/orders/{customer['id']}")
    assert resp.status_code == 200
    orders = resp.json()
    assert len(orders) == 2
    assert [o['quantity'] for o in orders] == [2, 5]
    assert all(o['quantity'] > 0 for o in orders)
    assert _stock_of(client, item['id']) == 3

def test_orders_for_customer_is_repeatable(client, customer, item):
    _order(client, customer['id'], item['id'], 1)
    _order(client, customer['id'], item['id'], 50)

    first = client.get(f"/orders/{customer['id']}").json()
    second = client.get(f"/orders/{customer['id']}").json()
    assert first == second

def test_orders_for_unknown_customer_is_empty(client):
    resp = client.get('/orders/9999')
    assert resp.status_code == 200
    assert resp.json() == []

def test_orders_for_customer_excludes_other_customers(client, customer, item):
    other = client.post('/customers', json={'name': 'Someone Else'}).json()
    _order(client, customer['id'], item['id'], 1)
    _order(client, other['id'], item['id'], 1)

    orders = client.get(f"/orders/{other['id']}").json()
    assert [o['customer_id'] for o in orders] == [other['id']]

def test_list_all_orders(client, customer, item):
    _order(client, customer['id'], item['id'], 1)
    _order(client, 9999, item['id'], 1)
    orders = client.get('/orders').json()
    assert [o['status'] for o in orders] == ['PLACED', 'REJECTED']

def test_order_survives_item_deletion(client, customer, item):
    order = _order(client, customer['id'], item['id'], 4)
    client.delete(f"/inventory/{item['id']}")

    [stored] = client.get(f"/orders/{customer['id']}").json()
    assert stored['id'] == order['id']
    assert stored['status'] == 'PLACED'
    assert stored['item'] is None
    assert stored['item_id'] == item['id']
    assert stored['item_name_snapshot'] == 'Widget'

def test_order_shows_current_customer_and_snapshot(client, customer, item):
    _order(client, customer['id'], item['id'], 1)
    client.put(f"/customers/{customer['id']}", json={'name': 'Renamed'})

    [stored] = client.get(f"/orders/{customer['id']}").json()
    assert stored['customer']['name'] == 'Renamed'
    assert stored['customer_name_snapshot'] == 'Ada Lovelace'

def test_stock_is_never_oversold(client, customer, item):
    statuses = [_order(client, customer['id'], item['id'], 4)['status'] for _ in range(3)]
    assert statuses == ['PLACED', 'PLACED', 'REJECTED']
    assert _stock_of(client, item['id']) == 2

@pytest.mark.parametrize('body', [
    {'customerId': 1, 'itemId': 1, 'quantity': 2**63},
    {'customerId': 1, 'itemId': 1, 'quantity': -(2**63) - 1},
    {'customerId': 1, 'itemId': 1, 'quantity': 3_000_000_000},
    {'customerId': 2**63, 'itemId': 1, 'quantity': 1},
    {'customerId': 1, 'itemId': 2**63, 'quantity': 1},
])
def test_out_of_range_integers_are_422(client, body):
    resp = client.post('/orders', json=body)
    assert resp.status_code == 422
    assert client.get('/orders').json() == []

def test_largest_quantity_is_recorded_as_rejected(client, customer, item):
    order = _order(client, customer['id'], item['id'], 2**31 - 1)
    assert order['status'] == 'REJECTED'
    assert order['quantity'] == 2**31 - 1

def test_out_of_range_customer_path_is_422(client):
    assert client.get(f'/orders/{2**63}').status_code == 422
