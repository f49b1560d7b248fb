from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field
import pytest

from src.platform.exception.exception_handlers import build_error_body, register_exception_handlers
from src.platform.exception.exceptions import BadRequestError, ConflictError, NotFoundError


class _Body(BaseModel):
    quantity: int = Field(..., ge=1)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/not-found')
    async def not_found() -> None:
        raise NotFoundError('Table not found with ID: 1')

    @app.get('/conflict')
    async def conflict() -> None:
        raise ConflictError('Table is already reserved at that time.')

    @app.get('/bad-request')
    async def bad_request() -> None:
        raise BadRequestError('Invalid lookup', ['email is required', 'phone is required'])

    @app.get('/value-error')
    async def value_error() -> None:
        raise ValueError('bad value')

    @app.get('/boom')
    async def boom() -> None:
        raise RuntimeError('secret internals')

    @app.post('/validate')
    async def validate(body: _Body) -> dict:
        return body.model_dump()

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.unit
class TestExceptionHandlers:
    def test_custom_error(self, client: TestClient) -> None:
        response = client.get('/not-found')

        assert response.status_code == 404
        assert response.json() == {
            'status': 404,
            'message': 'Not Found',
            'errors': ['Table not found with ID: 1'],
        }

    def test_conflict(self, client: TestClient) -> None:
        response = client.get('/conflict')

        assert response.status_code == 409
        assert response.json()['errors'] == ['Table is already reserved at that time.']

    def test_error_with_several_details(self, client: TestClient) -> None:
        response = client.get('/bad-request')

        assert response.status_code == 400
        assert response.json()['errors'] == ['email is required', 'phone is required']

    def test_value_error_is_bad_request(self, client: TestClient) -> None:
        response = client.get('/value-error')

        assert response.status_code == 400
        assert response.json()['errors'] == ['bad value']

    def test_validation_error_lists_fields(self, client: TestClient) -> None:
        response = client.post('/validate', json={'quantity': 0})

        assert response.status_code == 400
        body = response.json()
        assert body['message'] == 'Bad Request'
        assert len(body['errors']) == 1
        assert body['errors'][0].startswith('body.quantity:')

    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get('/missing')

        assert response.status_code == 404
        assert response.json()['status'] == 404

    def test_unhandled_error_hides_details(self, client: TestClient) -> None:
        response = client.get('/boom')

        assert response.status_code == 500
        assert response.json()['errors'] == ['Internal server error']

    def test_unknown_status_phrase(self) -> None:
        assert build_error_body(599, ['x'])['message'] == 'Error'
