"""End-to-end tests for thread endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from agora.interface.api.app import create_app
from agora.util.di.container import setup_di
from tests.conftest import bearer, new_user
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _post(client: TestClient, headers: dict, **fields) -> dict:
    body = {"title": "A thread", "content": "Some content", **fields}
    response = client.post("/threads", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateThread:
    """End-to-end tests for POST /threads."""

    def test_create_thread(self, client):
        """Should create a thread with an empty vote ledger."""
        # Arrange
        author = new_user()

        # Act
        response = client.post(
            "/threads",
            json={
                "title": "  Typed settings?  ",
                "content": "How do you load config?",
                "category": "Questions",
                "tags": ["config", " "],
            },
            headers=bearer(author),
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["title"] == "Typed settings?"
        assert data["authorId"] == str(author)
        assert data["tags"] == ["config"]
        assert data["voteScore"] == 0
        assert data["userVote"] is None
        assert data["views"] == 0

    def test_create_requires_auth(self, client):
        """Should return 401 without a token."""
        # Act
        response = client.post("/threads", json={"title": "t", "content": "c"})

        # Assert
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_unknown_category_rejected(self, client):
        """Should return 400 for a category outside the list."""
        # Act
        response = client.post(
            "/threads",
            json={"title": "t", "content": "c", "category": "Gossip"},
            headers=bearer(new_user()),
        )

        # Assert
        assert response.status_code == 400

    def test_unauthenticated_empty_body_is_401(self, client):
        """Authentication is checked before the body is validated."""
        # Act
        response = client.post("/threads", json={})

        # Assert
        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Authentication required to create threads",
        }

    def test_title_limit_applies_after_trimming(self, client):
        """Surrounding whitespace does not count towards the title limit."""
        # Arrange
        headers = bearer(new_user())
        padded = "  " + "a" * 200 + "  "
        too_long = "  " + "a" * 201 + "  "

        # Act
        accepted = client.post(
            "/threads", json={"title": padded, "content": "c"}, headers=headers
        )
        rejected = client.post(
            "/threads", json={"title": too_long, "content": "c"}, headers=headers
        )

        # Assert
        assert accepted.status_code == 201
        assert accepted.json()["data"]["title"] == "a" * 200
        assert rejected.status_code == 400


class TestReadThreads:
    """End-to-end tests for GET /threads and GET /threads/{id}."""

    def test_list_with_pagination(self, client):
        """Should return threads newest first with page metadata."""
        # Arrange
        headers = bearer(new_user())
        ids = [_post(client, headers, title=f"Thread {i}")["id"] for i in range(3)]

        # Act
        response = client.get("/threads", params={"limit": 2})

        # Assert
        body = response.json()
        assert response.status_code == 200
        assert len(body["data"]) == 2
        assert body["data"][0]["id"] == ids[-1]
        assert body["pagination"] == {"currentPage": 1, "totalPages": 2, "total": 3}

    def test_filter_and_search(self, client):
        """Category and search filters combine."""
        # Arrange
        headers = bearer(new_user())
        wanted = _post(
            client, headers, title="Async Postgres", category="Resources"
        )
        _post(client, headers, title="Async Postgres", category="Questions")
        _post(client, headers, title="Sync MySQL", category="Resources")

        # Act
        response = client.get(
            "/threads", params={"category": "Resources", "search": "postgres"}
        )

        # Assert
        assert [t["id"] for t in response.json()["data"]] == [wanted["id"]]

    def test_unknown_list_category_rejected(self, client):
        """Should return 400 for an unknown category filter."""
        # Act
        response = client.get("/threads", params={"category": "Gossip"})

        # Assert
        assert response.status_code == 400
        assert "Unknown category" in response.json()["message"]

    def test_sort_top(self, client):
        """sort=top should order by net score."""
        # Arrange
        headers = bearer(new_user())
        low = _post(client, headers, title="Low")
        high = _post(client, headers, title="High")
        client.put(
            f"/threads/{low['id']}/vote",
            json={"voteType": "downvote"},
            headers=bearer(new_user()),
        )
        client.put(
            f"/threads/{high['id']}/vote",
            json={"voteType": "upvote"},
            headers=bearer(new_user()),
        )

        # Act
        response = client.get("/threads", params={"sort": "top"})

        # Assert
        assert [t["id"] for t in response.json()["data"]] == [high["id"], low["id"]]

    def test_view_counting(self, client):
        """Signed-in viewers count once; anonymous views always count."""
        # Arrange
        thread = _post(client, bearer(new_user()))
        viewer = bearer(new_user())
        url = f"/threads/{thread['id']}"

        # Act
        client.get(url, headers=viewer)
        client.get(url, headers=viewer)
        client.get(url)
        response = client.get(url)

        # Assert
        assert response.json()["data"]["views"] == 3

    @pytest.mark.parametrize("thread_id", [str(uuid4()), "42"])
    def test_missing_thread_is_404(self, client, thread_id):
        """Unknown or malformed IDs should return 404."""
        # Act
        response = client.get(f"/threads/{thread_id}")

        # Assert
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_list_user_threads(self, client):
        """Should list only the user's threads."""
        # Arrange
        author = new_user()
        mine = _post(client, bearer(author))
        _post(client, bearer(new_user()))

        # Act
        response = client.get(f"/threads/user/{author}")

        # Assert
        assert [t["id"] for t in response.json()["data"]] == [mine["id"]]
        assert response.json()["pagination"]["total"] == 1

    def test_comment_count_includes_replies(self, client):
        """Listing, detail and user views report commentCount."""
        # Arrange
        author = new_user()
        headers = bearer(author)
        busy = _post(client, headers, title="Busy")
        quiet = _post(client, headers, title="Quiet")
        comment = client.post(
            f"/threads/{busy['id']}/comments", json={"content": "Hi"}, headers=headers
        ).json()["data"]
        client.post(
            f"/threads/{busy['id']}/comments",
            json={"content": "Reply", "parentComment": comment["id"]},
            headers=headers,
        )

        # Act
        listing = client.get("/threads").json()["data"]
        detail = client.get(f"/threads/{busy['id']}").json()["data"]
        by_user = client.get(f"/threads/user/{author}").json()["data"]

        # Assert
        counts = {t["id"]: t["commentCount"] for t in listing}
        assert counts == {busy["id"]: 2, quiet["id"]: 0}
        assert detail["commentCount"] == 2
        assert {t["id"]: t["commentCount"] for t in by_user} == counts
        assert quiet["commentCount"] == 0


class TestChangeThread:
    """End-to-end tests for PUT and DELETE /threads/{id}."""

    def test_author_updates_thread(self, client):
        """The author may edit; votes are kept."""
        # Arrange
        author = bearer(new_user())
        thread = _post(client, author)
        client.put(
            f"/threads/{thread['id']}/vote",
            json={"voteType": "upvote"},
            headers=bearer(new_user()),
        )

        # Act
        response = client.put(
            f"/threads/{thread['id']}",
            json={"title": "Renamed", "content": "New body", "category": "Other"},
            headers=author,
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Renamed"
        assert response.json()["data"]["voteScore"] == 1

    def test_non_author_update_forbidden(self, client):
        """Should return 403 for someone else's thread."""
        # Arrange
        thread = _post(client, bearer(new_user()))

        # Act
        response = client.put(
            f"/threads/{thread['id']}",
            json={"title": "Mine", "content": "Now"},
            headers=bearer(new_user()),
        )

        # Assert
        assert response.status_code == 403

    def test_delete_thread_and_comments(self, client):
        """Deleting removes the thread and its comments."""
        # Arrange
        author = bearer(new_user())
        thread = _post(client, author)
        client.post(
            f"/threads/{thread['id']}/comments", json={"content": "Hi"}, headers=author
        )

        # Act
        response = client.delete(f"/threads/{thread['id']}", headers=author)

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Thread deleted successfully",
        }
        assert client.get(f"/threads/{thread['id']}").status_code == 404
        assert client.get(f"/threads/{thread['id']}/comments").json()["data"] == []

    def test_non_author_delete_forbidden(self, client):
        """Should return 403 for someone else's thread."""
        # Arrange
        thread = _post(client, bearer(new_user()))

        # Act
        response = client.delete(
            f"/threads/{thread['id']}", headers=bearer(new_user())
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["success"] is False
