"""End-to-end tests for the group, post and like endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from tests.di import build_test_container

ALICE = {"Authorization": "Bearer alice"}
BOB = {"Authorization": "Bearer bob"}


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def group_id(client):
    response = client.post(
        "/forum/groups",
        json={"name": "Linear Algebra", "description": "MATH 221"},
        headers=ALICE,
    )
    return response.json()["group_id"]


class TestHealthEndpoint:
    """End-to-end tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGroupEndpoints:
    """End-to-end tests for the group endpoints."""

    def test_create_requires_authentication(self, client):
        # Act
        response = client.post("/forum/groups", json={"name": "Algebra"})

        # Assert
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_rejected_token(self, client):
        response = client.post(
            "/forum/groups",
            json={"name": "Algebra"},
            headers={"Authorization": "Bearer invalid"},
        )

        assert response.status_code == 401

    def test_create_and_get(self, client, group_id):
        # Act
        response = client.get(f"/forum/groups/{group_id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["group_name"] == "Linear Algebra"
        assert data["owner_id"] == "alice"
        assert data["owner_type"] == "User"
        assert data["post_count"] == 0

    def test_get_unknown_group(self, client):
        response = client.get(f"/forum/groups/{uuid4()}")

        assert response.status_code == 404

    def test_malformed_id(self, client):
        response = client.get("/forum/groups/not-a-uuid")

        assert response.status_code == 422

    def test_blank_name_is_rejected(self, client):
        response = client.post("/forum/groups", json={"name": ""}, headers=ALICE)

        assert response.status_code == 422

    def test_search_is_case_insensitive_and_paged(self, client, group_id):
        # Arrange
        client.post("/forum/groups", json={"name": "Organic Chemistry"}, headers=BOB)

        # Act
        response = client.get("/forum/groups", params={"q": "ALGEBRA", "page": "abc"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["current_page"] == 1
        assert data["total_count"] == 1
        assert data["total_pages"] == 1
        assert [g["group_id"] for g in data["rows"]] == [group_id]

    def test_only_owner_can_update_or_delete(self, client, group_id):
        # Act
        update = client.put(
            f"/forum/group/{group_id}", json={"name": "Hijacked"}, headers=BOB
        )
        delete = client.delete(f"/forum/group/{group_id}", headers=BOB)

        # Assert
        assert update.status_code == 403
        assert update.json()["detail"] == (
            f"User bob is not allowed to modify group {group_id}"
        )
        assert delete.status_code == 403
        assert client.get(f"/forum/groups/{group_id}").status_code == 200

    def test_update_unknown_group_is_forbidden(self, client):
        response = client.put(
            f"/forum/group/{uuid4()}", json={"name": "Ghost"}, headers=ALICE
        )

        assert response.status_code == 403

    def test_owner_updates_and_lists_own_groups(self, client, group_id):
        # Act
        update = client.put(
            f"/forum/group/{group_id}",
            json={"description": "Spring term"},
            headers=ALICE,
        )
        mine = client.get("/forum/myGroups", headers=ALICE)
        theirs = client.get("/forum/myGroups", headers=BOB)

        # Assert
        assert update.status_code == 200
        assert update.json()["description"] == "Spring term"
        assert update.json()["group_name"] == "Linear Algebra"
        assert [g["group_id"] for g in mine.json()] == [group_id]
        assert theirs.json() == []

    def test_delete_group_removes_its_posts(self, client, group_id):
        # Arrange
        post = client.post(
            f"/forum/group/{group_id}", json={"title": "Exam"}, headers=BOB
        ).json()

        # Act
        response = client.delete(f"/forum/group/{group_id}", headers=ALICE)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"group_id": group_id, "deleted": True}
        assert client.get(f"/forum/groups/{group_id}").status_code == 404
        assert client.get(f"/forum/post/{post['post_id']}").status_code == 404


class TestPostEndpoints:
    """End-to-end tests for the post endpoints."""

    def test_create_post_counts_in_group(self, client, group_id):
        # Act
        response = client.post(
            f"/forum/group/{group_id}",
            json={"title": "Midterm", "details": "Which chapters?"},
            headers=BOB,
        )

        # Assert
        assert response.status_code == 201
        post = response.json()
        assert post["uid"] == "bob"
        assert (post["likes"], post["replies"], post["views"]) == (0, 0, 0)
        group = client.get(f"/forum/groups/{group_id}").json()
        assert group["post_count"] == 1

    def test_post_in_unknown_group(self, client):
        response = client.post(
            f"/forum/group/{uuid4()}", json={"title": "Lost"}, headers=BOB
        )

        assert response.status_code == 404

    def test_group_listing_carries_group_name(self, client, group_id):
        # Arrange
        client.post(f"/forum/group/{group_id}", json={"title": "First"}, headers=BOB)
        client.post(f"/forum/group/{group_id}", json={"title": "Second"}, headers=BOB)

        # Act
        response = client.get(f"/forum/group/{group_id}")

        # Assert
        data = response.json()
        assert data["group_name"] == "Linear Algebra"
        assert [p["title"] for p in data["rows"]] == ["Second", "First"]

    def test_search_all_posts_by_title(self, client, group_id):
        # Arrange
        client.post(f"/forum/group/{group_id}", json={"title": "Exam prep"}, headers=BOB)
        client.post(f"/forum/group/{group_id}", json={"title": "Office hours"}, headers=BOB)

        # Act
        response = client.get("/forum/posts", params={"q": "exam"})

        # Assert
        assert [p["title"] for p in response.json()["rows"]] == ["Exam prep"]

    def test_only_author_can_edit(self, client, group_id):
        # Arrange
        post = client.post(
            f"/forum/group/{group_id}", json={"title": "Exam"}, headers=BOB
        ).json()

        # Act
        by_owner_of_group = client.put(
            f"/forum/post/{post['post_id']}", json={"title": "Edited"}, headers=ALICE
        )
        by_author = client.put(
            f"/forum/post/{post['post_id']}", json={"details": "Room 101"}, headers=BOB
        )

        # Assert
        assert by_owner_of_group.status_code == 403
        assert by_author.status_code == 200
        assert by_author.json()["title"] == "Exam"
        assert by_author.json()["details"] == "Room 101"

    def test_my_posts(self, client, group_id):
        # Arrange
        client.post(f"/forum/group/{group_id}", json={"title": "Mine"}, headers=BOB)
        client.post(f"/forum/group/{group_id}", json={"title": "Hers"}, headers=ALICE)

        # Act
        response = client.get("/forum/myPosts", headers=BOB)

        # Assert
        assert [p["title"] for p in response.json()] == ["Mine"]


class TestLikeEndpoints:
    """End-to-end tests for the like endpoints."""

    def test_like_post_is_idempotent_and_reflected_for_viewer(self, client, group_id):
        # Arrange
        post = client.post(
            f"/forum/group/{group_id}", json={"title": "Exam"}, headers=BOB
        ).json()

        # Act
        first = client.post(f"/forum/likePost/{post['post_id']}", headers=ALICE)
        second = client.post(f"/forum/likePost/{post['post_id']}", headers=ALICE)

        # Assert
        assert first.json()["changed"] is True
        assert second.json()["changed"] is False
        as_alice = client.get(f"/forum/group/{group_id}", headers=ALICE).json()
        as_anonymous = client.get(f"/forum/group/{group_id}").json()
        assert as_alice["rows"][0]["likes"] == 1
        assert as_alice["rows"][0]["is_liked"] is True
        assert as_anonymous["rows"][0]["is_liked"] is False

    def test_unlike_post(self, client, group_id):
        # Arrange
        post = client.post(
            f"/forum/group/{group_id}", json={"title": "Exam"}, headers=BOB
        ).json()
        client.post(f"/forum/likePost/{post['post_id']}", headers=ALICE)

        # Act
        response = client.delete(f"/forum/likePost/{post['post_id']}", headers=ALICE)
        again = client.delete(f"/forum/likePost/{post['post_id']}", headers=ALICE)

        # Assert
        assert response.json()["is_liked"] is False
        assert again.json()["changed"] is False
        listing = client.get(f"/forum/group/{group_id}").json()
        assert listing["rows"][0]["likes"] == 0

    def test_like_requires_authentication(self, client):
        response = client.post(f"/forum/likePost/{uuid4()}")

        assert response.status_code == 401

    def test_like_unknown_comment(self, client):
        response = client.post(f"/forum/likeComment/{uuid4()}", headers=ALICE)

        assert response.status_code == 404
