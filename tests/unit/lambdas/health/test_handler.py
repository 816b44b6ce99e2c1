import json

from freezegun import freeze_time

from boltshortener.lambdas.health import app


@freeze_time('2025-10-15T12:30:00Z')
def test_health(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'dev')

    response = app.lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert body['status'] == 'operational'
    assert body['environment'] == 'dev'
    assert body['timestamp'] == 1760531400000
    assert isinstance(body['uptime'], float)
