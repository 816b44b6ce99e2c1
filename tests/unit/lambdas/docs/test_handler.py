import json

from boltshortener.lambdas.docs import app


def test_docs():
    response = app.lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert response['headers']['Access-Control-Allow-Origin'] == '*'
    assert body['name'] == 'Bolt'
    assert body['version'] == '0.1.0'
    assert body['description'] == 'URL compression engine'
    assert set(body['endpoints']) == {
        'POST /api/shorturl',
        'GET /api/shorturl/{shortcode}',
        'GET /api/urls',
        'GET /api/docs',
        'GET /health',
    }
    assert body['errors']['server'] == {'status': 500, 'body': {'error': 'Server error'}}


def test_docs_lists_wire_error_messages():
    endpoints = json.loads(app.lambda_handler({}, None)['body'])['endpoints']

    assert endpoints['POST /api/shorturl']['errors'] == [{'error': 'invalid url'}]
    assert endpoints['GET /api/shorturl/{shortcode}']['errors'] == [
        {'error': 'Wrong format'},
        {'error': 'No short URL found for the given input'},
    ]
    assert endpoints['GET /api/urls']['query'] == {'limit': 'positive integer, default 50'}
