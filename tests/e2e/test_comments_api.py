"""End-to-end tests for comment endpoints."""

from uuid import uuid4

from tests.factories import auth_cookies


def _create(client, post_id, content, cookies, parent_id=None):
    body = {"content": content}
    if parent_id:
        body["parent_id"] = parent_id
    return client.post(f"/posts/{post_id}/comments", json=body, cookies=cookies)


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_comment_requires_auth(self, client, post):
        # Act
        response = client.post(f"/posts/{post.id}/comments", json={"content": "Hi"})

        # Assert
        assert response.status_code == 401

    def test_create_comment_with_invalid_token_fails(self, client, post):
        response = client.post(
            f"/posts/{post.id}/comments",
            json={"content": "Hi"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_create_and_list_thread(self, client, post):
        """Should nest replies and reject a fourth level (depth limit)."""
        # Arrange
        cookies = auth_cookies()

        # Act
        c1 = _create(client, post.id, "C1", cookies).json()
        c2 = _create(client, post.id, "C2", cookies, c1["comment_id"]).json()
        c3 = _create(client, post.id, "C3", cookies, c2["comment_id"]).json()
        c4 = _create(client, post.id, "C4", cookies, c3["comment_id"])

        # Assert
        assert [c1["depth"], c2["depth"], c3["depth"]] == [0, 1, 2]
        assert c3["path"] == [c1["comment_id"], c2["comment_id"]]
        assert c4.status_code == 422

        response = client.get(f"/posts/{post.id}/comments")
        assert response.status_code == 200
        data = response.json()
        assert data["meta"]["total"] == 1
        [root] = data["comments"]
        assert root["comment_id"] == c1["comment_id"]
        assert root["has_replies"] is True
        assert root["replies"][0]["replies"][0]["comment_id"] == c3["comment_id"]
        assert root["replies"][0]["replies"][0]["can_reply"] is False

    def test_create_on_unknown_post_returns_404(self, client):
        response = _create(client, uuid4(), "Hello", auth_cookies())

        assert response.status_code == 404

    def test_empty_content_returns_400(self, client, post):
        response = _create(client, post.id, "   ", auth_cookies())

        assert response.status_code == 400

    def test_content_over_limit_returns_400(self, client, post):
        response = _create(client, post.id, "a" * 1001, auth_cookies())

        assert response.status_code == 400

    def test_malformed_post_id_returns_422(self, client):
        response = client.get("/posts/not-a-uuid/comments")

        assert response.status_code == 422

    def test_list_paging_out_of_bounds_returns_400(self, client, post):
        response = client.get(f"/posts/{post.id}/comments", params={"limit": 101})

        assert response.status_code == 400

    def test_edit_own_comment(self, client, post):
        # Arrange
        user_id = uuid4()
        created = _create(client, post.id, "Draft", auth_cookies(user_id)).json()

        # Act
        response = client.patch(
            f"/comments/{created['comment_id']}",
            json={"content": "Final"},
            cookies=auth_cookies(user_id),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["content"] == "Final"
        assert response.json()["is_edited"] is True

    def test_edit_someone_elses_comment_returns_403(self, client, post):
        created = _create(client, post.id, "Mine", auth_cookies()).json()

        response = client.patch(
            f"/comments/{created['comment_id']}",
            json={"content": "Yours"},
            cookies=auth_cookies(),
        )

        assert response.status_code == 403

    def test_delete_leaves_tombstone_and_replies(self, client, post):
        # Arrange
        user_id = uuid4()
        root = _create(client, post.id, "Root", auth_cookies(user_id)).json()
        reply = _create(
            client, post.id, "Reply", auth_cookies(), root["comment_id"]
        ).json()

        # Act
        response = client.delete(
            f"/comments/{root['comment_id']}", cookies=auth_cookies(user_id)
        )

        # Assert
        assert response.status_code == 204
        thread = client.get(f"/comments/{root['comment_id']}").json()
        assert thread["is_deleted"] is True
        assert thread["content"] == "[This comment has been deleted]"
        assert thread["replies"][0]["comment_id"] == reply["comment_id"]
        assert thread["replies"][0]["content"] == "Reply"

        edit = client.patch(
            f"/comments/{root['comment_id']}",
            json={"content": "Back"},
            cookies=auth_cookies(user_id),
        )
        assert edit.status_code == 404

    def test_list_without_deleted_comments(self, client, post):
        # Arrange
        user_id = uuid4()
        kept = _create(client, post.id, "Stays", auth_cookies()).json()
        gone = _create(client, post.id, "Goes", auth_cookies(user_id)).json()
        client.delete(f"/comments/{gone['comment_id']}", cookies=auth_cookies(user_id))

        # Act
        default = client.get(f"/posts/{post.id}/comments").json()
        live_only = client.get(
            f"/posts/{post.id}/comments", params={"include_deleted": "false"}
        ).json()

        # Assert
        assert [c["comment_id"] for c in default["comments"]] == [
            gone["comment_id"],
            kept["comment_id"],
        ]
        assert [c["comment_id"] for c in live_only["comments"]] == [
            kept["comment_id"]
        ]
        assert live_only["meta"]["total"] == 1

    def test_get_unknown_comment_returns_404(self, client):
        response = client.get(f"/comments/{uuid4()}")

        assert response.status_code == 404

    def test_user_comments(self, client, post):
        user_id = uuid4()
        _create(client, post.id, "One", auth_cookies(user_id))
        _create(client, post.id, "Two", auth_cookies(user_id))
        _create(client, post.id, "Other", auth_cookies())

        response = client.get(f"/users/{user_id}/comments")

        assert response.status_code == 200
        assert [c["content"] for c in response.json()["comments"]] == ["Two", "One"]


class TestLikeEndpoints:
    """End-to-end tests for like endpoints."""

    def test_like_and_unlike(self, client, post):
        # Arrange
        user_id = uuid4()
        comment = _create(client, post.id, "Nice", auth_cookies()).json()
        url = f"/comments/{comment['comment_id']}/like"

        # Act
        liked = client.post(url, cookies=auth_cookies(user_id))
        duplicate = client.post(url, cookies=auth_cookies(user_id))
        listing = client.get(
            f"/posts/{post.id}/comments", cookies=auth_cookies(user_id)
        ).json()
        unliked = client.delete(url, cookies=auth_cookies(user_id))

        # Assert
        assert liked.status_code == 200
        assert liked.json() == {
            "comment_id": comment["comment_id"],
            "liked": True,
            "likes_count": 1,
        }
        assert duplicate.status_code == 409
        assert listing["comments"][0]["is_liked"] is True
        assert unliked.json()["likes_count"] == 0

    def test_like_requires_auth(self, client, post):
        comment = _create(client, post.id, "Nice", auth_cookies()).json()

        response = client.post(f"/comments/{comment['comment_id']}/like")

        assert response.status_code == 401
