"""
API tests for the pipeline behavior group (/pipeline-behavior-posts).

Same scenarios as the filter group; the differences are the response
envelopes and the error titles chosen by the global handler.
"""

from uuid import UUID, uuid4

from validation_patterns.shared.errors.handlers import VALIDATION_DETAIL
from validation_patterns.shared.errors.problem_details import (
    PROBLEM_JSON_MEDIA_TYPE,
    problem_type_uri,
)

BASE_URL = "/pipeline-behavior-posts/"
NIL_ID = "00000000-0000-0000-0000-000000000000"


def _posts(client) -> list[dict]:
    return client.get(BASE_URL).json()["posts"]


def _create(client, title: str = "Title", content: str = "Body") -> UUID:
    response = client.post(BASE_URL, json={"title": title, "content": content})
    assert response.status_code == 200
    return UUID(response.json()["id"])


class TestGetPosts:
    """Tests for GET /pipeline-behavior-posts/."""

    def test_returns_wrapped_list(self, client) -> None:
        response = client.get(BASE_URL)
        assert response.status_code == 200
        assert set(response.json()) == {"posts"}
        assert set(response.json()["posts"][0]) == {"id", "title", "content"}

    def test_both_groups_share_the_store(self, client) -> None:
        post_id = _create(client, "Shared", "Store")
        filter_ids = {p["id"] for p in client.get("/filter-posts/").json()}
        assert str(post_id) in filter_ids


class TestCreatePost:
    """Tests for POST /pipeline-behavior-posts/."""

    def test_returns_wrapped_identifier(self, client) -> None:
        before = len(_posts(client))
        response = client.post(BASE_URL, json={"title": "A", "content": "B"})
        assert response.status_code == 200
        assert set(response.json()) == {"id"}
        assert len(_posts(client)) == before + 1

    def test_identical_requests_create_distinct_posts(self, client) -> None:
        assert _create(client, "Same", "Same") != _create(client, "Same", "Same")

    def test_empty_title_is_rejected_by_the_pipeline(self, client) -> None:
        before = len(_posts(client))
        response = client.post(BASE_URL, json={"title": "", "content": "B"})

        body = response.json()
        assert response.status_code == 400
        assert response.headers["content-type"].startswith(PROBLEM_JSON_MEDIA_TYPE)
        assert body["type"] == problem_type_uri(400)
        assert body["title"] == "Validation Error"
        assert body["detail"] == VALIDATION_DETAIL
        assert body["instance"] == BASE_URL
        assert body["errors"] == {"title": ["Title is required."]}
        assert body["traceId"]
        assert len(_posts(client)) == before

    def test_all_failures_are_reported_together(self, client) -> None:
        response = client.post(BASE_URL, json={"title": None, "content": ""})
        assert response.status_code == 400
        assert response.json()["errors"] == {
            "title": ["Title is required."],
            "content": ["Content is required."],
        }

    def test_malformed_json_is_rejected(self, client) -> None:
        response = client.post(
            BASE_URL,
            content=b"[1, 2",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["title"] == "Validation Error"

    def test_cancelled_request_has_empty_body(self, cancelled_client) -> None:
        response = cancelled_client.post(BASE_URL, json={"title": "A", "content": "B"})
        assert response.status_code == 499
        assert response.content == b""


class TestUpdatePost:
    """Tests for PUT /pipeline-behavior-posts/."""

    def test_updates_existing_post(self, client) -> None:
        post_id = _create(client)
        response = client.put(
            BASE_URL, json={"id": str(post_id), "title": "New", "content": "Text"}
        )
        assert response.status_code == 200
        assert response.json() == {}
        assert {"id": str(post_id), "title": "New", "content": "Text"} in _posts(client)

    def test_unknown_post_is_mapped_by_the_handler(self, client) -> None:
        missing = uuid4()
        response = client.put(
            BASE_URL, json={"id": str(missing), "title": "New", "content": "Text"}
        )
        body = response.json()
        assert response.status_code == 404
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == f"Entity 'Post' with key '{missing}' was not found."
        assert body["instance"] == BASE_URL

    def test_validation_runs_before_lookup(self, client) -> None:
        response = client.put(
            BASE_URL, json={"id": str(uuid4()), "title": "New", "content": " "}
        )
        assert response.status_code == 400
        assert response.json()["errors"] == {"content": ["Content is required."]}

    def test_nil_identifier_is_rejected(self, client) -> None:
        response = client.put(
            BASE_URL, json={"id": NIL_ID, "title": "New", "content": "Text"}
        )
        assert response.status_code == 400
        assert response.json()["errors"] == {"id": ["Id is required."]}

    def test_missing_identifier_is_rejected(self, client) -> None:
        response = client.put(BASE_URL, json={"title": "New", "content": "Text"})
        assert response.status_code == 400
        assert response.json()["errors"] == {"id": ["Id is required."]}
