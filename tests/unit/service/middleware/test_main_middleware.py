import pytest
from starlette.requests import Request
from starlette.responses import Response

from rapidjobs.service.middleware import util
from rapidjobs.service.middleware.entities import RequestStateKey
from rapidjobs.service.middleware.main_middleware import MainMiddleware


@pytest.fixture
def mock_app():
    async def app(scope, receive, send):
        response = Response("OK", status_code=200)
        await response(scope, receive, send)

    return app


@pytest.fixture
def mock_request():
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/waitlist",
        "headers": [],
    }
    return Request(scope)


async def test_dispatch_sets_request_id(mock_app, mock_request):
    middleware = MainMiddleware(mock_app)

    async def mock_call_next(request):
        assert util.get_state(request, RequestStateKey.REQUEST_ID)
        return Response("OK", status_code=200)

    response = await middleware.dispatch(mock_request, mock_call_next)

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"


async def test_dispatch_reraises(mock_app, mock_request):
    middleware = MainMiddleware(mock_app)

    async def mock_call_next(request):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await middleware.dispatch(mock_request, mock_call_next)
