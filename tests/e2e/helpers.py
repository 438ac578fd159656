"""Request helpers shared by the end-to-end tests."""

from fastapi.testclient import TestClient


def signup(
    client: TestClient,
    email: str = "john@example.com",
    first_name: str = "John",
    last_name: str = "Doe",
    password: str = "password123",
) -> str:
    """Register an account and return its token."""
    response = client.post(
        "/api/auth/signup",
        json={
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["token"]


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_blog(client: TestClient, token: str, **fields) -> dict:
    """Create a draft blog and return its data."""
    payload = {"title": "Test Blog", "body": "Some content for the blog"}
    payload.update(fields)
    response = client.post("/api/blogs", json=payload, headers=auth(token))
    assert response.status_code == 201, response.text
    return response.json()["data"]


def publish(client: TestClient, token: str, blog_id: str) -> dict:
    response = client.patch(
        f"/api/blogs/{blog_id}/state", json={"state": "published"}, headers=auth(token)
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]


def create_published_blog(client: TestClient, token: str, **fields) -> dict:
    blog = create_blog(client, token, **fields)
    return publish(client, token, blog["id"])
