"""Status codes, headers and bodies of the raw HTTP surface."""
import pytest

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PATCH, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors_and_json(response):
    for header, value in CORS_HEADERS.items():
        assert response.headers[header] == value
    assert response.headers["content-type"].startswith("application/json")


@pytest.mark.asyncio
async def test_create_sets_location_header(http_client):
    response = await http_client.post(
        "/api/clients/", json={"name": "John", "surname": "Doe", "contacts": []}
    )

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["lastName"] == ""
    assert set(body) == {"id", "name", "surname", "lastName", "contacts", "createdAt", "updatedAt"}
    assert response.headers["location"] == f"/api/clients/{body['id']}"
    assert response.headers["access-control-expose-headers"] == "Location"
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_search_finds_created_client(http_client):
    created = (await http_client.post("/api/clients/", json={"name": "John", "surname": "Doe"})).json()

    response = await http_client.get("/api/clients/", params={"search": "Doe"})

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [created["id"]]
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_search_value_is_percent_decoded(http_client):
    created = (await http_client.post("/api/clients/", json={"name": "Анна", "surname": "Doe"})).json()

    response = await http_client.get("/api/clients/?search=%D0%90%D0%BD%D0%BD%D0%B0")

    assert [c["id"] for c in response.json()] == [created["id"]]


@pytest.mark.asyncio
async def test_search_without_value_lists_everything(http_client):
    await http_client.post("/api/clients/", json={"name": "John", "surname": "Doe"})
    await http_client.post("/api/clients/", json={"name": "Jane", "surname": "Roe"})

    response = await http_client.get("/api/clients/?search")

    assert len(response.json()) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/clients", "/api/clients/"])
async def test_collection_path_with_and_without_slash(http_client, path):
    created = await http_client.post(path, json={"name": "John", "surname": "Doe"})
    listed = await http_client.get(path)

    assert created.status_code == 201
    assert listed.status_code == 200
    assert len(listed.json()) == 1


@pytest.mark.asyncio
async def test_get_unknown_client(http_client):
    response = await http_client.get("/api/clients/999999")

    assert response.status_code == 404
    assert response.json() == {"message": "Client Not Found"}
    assert_cors_and_json(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("client_id", ["abc", "1.5", "99999999999999999999999", "-99999999999999999999999"])
@pytest.mark.parametrize("method", ["GET", "PATCH", "DELETE"])
async def test_unmatchable_id_is_client_not_found(http_client, method, client_id):
    await http_client.post("/api/clients/", json={"name": "John", "surname": "Doe"})

    response = await http_client.request(
        method, f"/api/clients/{client_id}", json={"name": "John", "surname": "Doe"}
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Client Not Found"}
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_invalid_update_of_non_integer_id_reports_validation(http_client):
    response = await http_client.patch("/api/clients/abc", json={"name": "John"})

    assert response.status_code == 422
    assert response.json() == {"errors": [{"field": "surname", "message": "surname is required"}]}


@pytest.mark.asyncio
async def test_delete_returns_empty_object(http_client):
    created = (await http_client.post("/api/clients/", json={"name": "John", "surname": "Doe"})).json()

    first = await http_client.delete(f"/api/clients/{created['id']}")
    second = await http_client.delete(f"/api/clients/{created['id']}")

    assert first.status_code == 200
    assert first.json() == {}
    assert second.status_code == 404
    assert second.json() == {"message": "Client Not Found"}


@pytest.mark.asyncio
async def test_validation_error_payload(http_client):
    response = await http_client.patch("/api/clients/1", json={"contacts": [{"type": "email"}]})

    assert response.status_code == 422
    assert response.json() == {
        "errors": [
            {"field": "name", "message": "name is required"},
            {"field": "surname", "message": "surname is required"},
            {"field": "contacts", "message": "one or more contacts incomplete"},
        ]
    }
    assert_cors_and_json(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/clients/", "/api/clients/42", "/api/clients/anything/else"])
async def test_options_preflight(http_client, path):
    response = await http_client.options(path)

    assert response.status_code == 200
    assert response.content == b""
    assert_cors_and_json(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/unrelated/path", "/", "/api", "/api/clientsfoo", "/docs"])
async def test_outside_prefix_is_not_found(http_client, path):
    response = await http_client.get(path)

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_options_outside_prefix_is_not_found(http_client):
    response = await http_client.options("/unrelated/path")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/clients/1/contacts", "/api/clients/1/", "/api/clients/1/2"])
async def test_unknown_path_under_prefix_is_not_found(http_client, path):
    response = await http_client.get(path)

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [("PUT", "/api/clients/1"), ("POST", "/api/clients/1"), ("DELETE", "/api/clients/"), ("PATCH", "/api/clients")],
)
async def test_unsupported_method_is_rejected(http_client, method, path):
    response = await http_client.request(method, path)

    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_malformed_json_is_a_server_error(http_client):
    response = await http_client.post(
        "/api/clients/", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Server Error"}
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_storage_failure_is_a_server_error(http_client, clean_database):
    await clean_database.drop_schema()

    response = await http_client.get("/api/clients/")

    assert response.status_code == 500
    assert response.json() == {"message": "Server Error"}
    assert_cors_and_json(response)


@pytest.mark.asyncio
async def test_oversized_body_is_rejected(http_client, test_container):
    limit = test_container.config().api.max_body_bytes
    payload = b'{"name": "' + b"x" * limit + b'", "surname": "Doe"}'

    response = await http_client.post(
        "/api/clients/", content=payload, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 413
    assert response.json() == {"message": "Payload Too Large"}
    assert (await http_client.get("/api/clients/")).json() == []


@pytest.mark.asyncio
async def test_streamed_oversized_body_is_rejected(http_client, test_container):
    limit = test_container.config().api.max_body_bytes

    async def chunks():
        yield b'{"name": "'
        for _ in range(limit // 1024 + 1):
            yield b"x" * 1024
        yield b'", "surname": "Doe"}'

    response = await http_client.post(
        "/api/clients/", content=chunks(), headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 413
