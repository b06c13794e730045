from unittest import mock

import pytest
import requests

from recipe_api_client import RecipeAPI


def make_response(status_code: int, payload=None, text: str = "") -> requests.Response:
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"x" if payload is not None or text else b""
    response.text = text
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture()
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture()
def api(session):
    return RecipeAPI(base_url="http://recipes.local/", session=session)


def test_list_recipes(api, session):
    session.request.return_value = make_response(200, [{"id": 1, "name": "Tea"}])

    recipes, error = api.list_recipes(limit=5)

    assert error is None
    assert recipes == [{"id": 1, "name": "Tea"}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://recipes.local/api/recipes"
    assert kwargs["params"] == {"limit": 5}


def test_create_recipe_sends_wire_names(api, session):
    session.request.return_value = make_response(201, {"id": 7, "cookTime": "5 minutes"})

    recipe, error = api.create_recipe(
        name="Tea", ingredients="Tea", instructions="Steep.", cook_time="5 minutes"
    )

    assert error is None
    assert recipe["id"] == 7
    assert session.request.call_args.kwargs["json"] == {
        "name": "Tea",
        "ingredients": "Tea",
        "instructions": "Steep.",
        "cookTime": "5 minutes",
    }


def test_get_missing_recipe_reports_error(api, session):
    session.request.return_value = make_response(404, {"error": "Recipe not found"})

    recipe, error = api.get_recipe(999)

    assert recipe is None
    assert error == {"status_code": 404, "message": "Recipe not found"}
    assert session.request.call_args.kwargs["url"] == "http://recipes.local/api/recipes/999"


def test_create_invalid_recipe_reports_error(api, session):
    session.request.return_value = make_response(400, {"error": "All fields are required"})

    recipe, error = api.create_recipe(name="", ingredients="", instructions="", cook_time="")

    assert recipe is None
    assert error == {"status_code": 400, "message": "All fields are required"}


def test_delete_recipe(api, session):
    session.request.return_value = make_response(200, {"message": "Recipe deleted successfully"})

    deleted, error = api.delete_recipe(3)

    assert (deleted, error) == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_non_json_error_body(api, session):
    session.request.return_value = make_response(502, text="Bad Gateway")

    _, error = api.health()

    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_network_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    recipes, error = api.list_recipes()

    assert recipes == []
    assert error == {"status_code": None, "message": "refused"}


def test_api_key_and_prefix(session):
    session.request.return_value = make_response(200, {"status": "healthy", "timestamp": "t"})
    api = RecipeAPI(base_url="http://recipes.local", prefix="/api/v1", api_key="secret", session=session)

    data, error = api.health()

    assert error is None
    assert data["status"] == "healthy"
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "http://recipes.local/api/v1/health"
    assert kwargs["headers"] == {"Authorization": "Bearer secret"}
