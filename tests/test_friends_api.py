from datetime import timedelta

from friendgraph.core.security import create_access_token
from friendgraph.main import app
from friendgraph.common.deps import get_friend_service
from friendgraph.common.exceptions import ResultValidationError


def test_read_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["message"]


def test_get_friend_profile(client, example_graph, auth_headers):
    response = client.get("/api/v1/my-friends/2", headers=auth_headers(1))
    assert response.status_code == 200
    assert response.json() == {
        "id": 2,
        "full_name": "User 2",
        "phone_number": "555-0002",
        "total_friend_count": 3,
        "mutual_friend_count": 1,
    }


def test_get_friend_profile_not_friends(client, graph, auth_headers):
    graph.users(5, 6)
    response = client.get("/api/v1/my-friends/6", headers=auth_headers(5))
    assert response.status_code == 404


def test_get_friend_profile_rejects_non_positive_id(client, example_graph, auth_headers):
    response = client.get("/api/v1/my-friends/0", headers=auth_headers(1))
    assert response.status_code == 422


def test_get_all_friends(client, example_graph, auth_headers):
    response = client.get("/api/v1/my-friends", headers=auth_headers(1))
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 1
    assert body["full_name"] == "User 1"
    friends = {f["friend_user_id"]: f for f in body["friends"]}
    assert set(friends) == {2, 3}
    assert friends[2]["total_friend_count"] == 3
    assert friends[3]["total_friend_count"] == 2
    assert friends[3]["friend_phone_number"] == "555-0003"


def test_get_all_friends_unknown_user(client, example_graph, auth_headers):
    response = client.get("/api/v1/my-friends", headers=auth_headers(999))
    assert response.status_code == 404


def test_missing_token(client, example_graph):
    response = client.get("/api/v1/my-friends")
    assert response.status_code == 401


def test_invalid_token(client, example_graph):
    response = client.get("/api/v1/my-friends", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_expired_token(client, example_graph):
    token = create_access_token({"sub": "1"}, expires_delta=timedelta(minutes=-5))
    response = client.get("/api/v1/my-friends", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_without_numeric_subject(client, example_graph):
    token = create_access_token({"sub": "alice"})
    response = client.get("/api/v1/my-friends", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_validation_failure_is_a_server_error(client, auth_headers):
    class BrokenService:
        def get_all_friends(self, viewer_id):
            raise ResultValidationError("UserFriends", [])

    app.dependency_overrides[get_friend_service] = lambda: BrokenService()
    response = client.get("/api/v1/my-friends", headers=auth_headers(1))
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
