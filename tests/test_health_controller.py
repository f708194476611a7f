def test_healthz_is_public(client) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_swagger_spec_is_public_and_lists_routes(client) -> None:
    response = client.get("/docs/swagger/")

    assert response.status_code == 200
    paths = response.get_json()["paths"]
    assert "/goals" in paths
    assert "/goals/quarters" in paths
    assert "/calendar/month" in paths
    assert "/vision-board/images" in paths


def test_unknown_route_returns_json_not_found(client) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    body = response.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
