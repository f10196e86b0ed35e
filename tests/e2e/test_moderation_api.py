"""End-to-end tests for reporting and moderation endpoints."""

import asyncio
from uuid import uuid4

from commentary.domain.repository import PostRepository
from tests.factories import auth_cookies


def _comment(client, post, content="Buy cheap pills"):
    response = client.post(
        f"/posts/{post.id}/comments",
        json={"content": content},
        cookies=auth_cookies(),
    )
    return response.json()


def _report(client, comment_id, category="spam"):
    return client.post(
        f"/comments/{comment_id}/reports",
        json={"reason_category": category},
        cookies=auth_cookies(),
    )


class TestReportEndpoints:
    """End-to-end tests for POST /comments/{id}/reports."""

    def test_report_comment(self, client, post):
        comment = _comment(client, post)

        response = _report(client, comment["comment_id"])

        assert response.status_code == 201
        assert response.json()["status"] == "pending"
        assert response.json()["reason_category"] == "spam"

    def test_unknown_category_returns_400(self, client, post):
        comment = _comment(client, post)

        response = _report(client, comment["comment_id"], "boring")

        assert response.status_code == 400

    def test_report_requires_auth(self, client, post):
        comment = _comment(client, post)

        response = client.post(
            f"/comments/{comment['comment_id']}/reports",
            json={"reason_category": "spam"},
        )

        assert response.status_code == 401


class TestModerationEndpoints:
    """End-to-end tests for the moderation queue."""

    def test_queue_is_moderator_only(self, client):
        response = client.get("/moderation/reports", cookies=auth_cookies())

        assert response.status_code == 403

    def test_resolve_deletes_comment_and_leaves_sibling_pending(self, client, post):
        # Arrange
        moderator = auth_cookies(role="moderator")
        comment = _comment(client, post)
        first = _report(client, comment["comment_id"], "spam").json()
        second = _report(client, comment["comment_id"], "harassment").json()

        queue = client.get("/moderation/reports", cookies=moderator).json()
        assert len(queue["reports"]) == 2
        assert queue["reports"][0]["post_title"] == "On the origin of comments"

        # Act
        response = client.post(
            f"/moderation/reports/{first['report_id']}/resolve", cookies=moderator
        )

        # Assert
        assert response.status_code == 204
        thread = client.get(f"/comments/{comment['comment_id']}").json()
        assert thread["is_deleted"] is True
        assert thread["reports_count"] == 2

        queue = client.get("/moderation/reports", cookies=moderator).json()
        assert [r["report_id"] for r in queue["reports"]] == [second["report_id"]]
        assert queue["reports"][0]["comment_is_deleted"] is True

    def test_dismiss_twice_succeeds(self, client, post):
        moderator = auth_cookies(role="moderator")
        comment = _comment(client, post)
        report = _report(client, comment["comment_id"]).json()
        url = f"/moderation/reports/{report['report_id']}/dismiss"

        first = client.post(url, cookies=moderator)
        second = client.post(url, cookies=moderator)

        assert (first.status_code, second.status_code) == (204, 204)
        queue = client.get("/moderation/reports", cookies=moderator).json()
        assert queue["reports"] == []

    def test_resolve_dismissed_report_returns_409(self, client, post):
        moderator = auth_cookies(role="moderator")
        comment = _comment(client, post)
        report = _report(client, comment["comment_id"]).json()
        client.post(
            f"/moderation/reports/{report['report_id']}/dismiss", cookies=moderator
        )

        response = client.post(
            f"/moderation/reports/{report['report_id']}/resolve", cookies=moderator
        )

        assert response.status_code == 409

    def test_dismiss_unknown_report_returns_404(self, client):
        response = client.post(
            f"/moderation/reports/{uuid4()}/dismiss",
            cookies=auth_cookies(role="moderator"),
        )

        assert response.status_code == 404

    def test_moderator_delete_comment(self, client, post):
        comment = _comment(client, post)

        as_user = client.delete(
            f"/moderation/comments/{comment['comment_id']}", cookies=auth_cookies()
        )
        as_moderator = client.delete(
            f"/moderation/comments/{comment['comment_id']}",
            cookies=auth_cookies(role="moderator"),
        )

        assert as_user.status_code == 403
        assert as_moderator.status_code == 204

    def test_queue_shows_posts_with_foreign_slugs(self, client, container):
        # Arrange
        posts = asyncio.run(container.get(PostRepository))
        legacy = posts.add(title="Imported post", slug="Hello_World")
        comment = _comment(client, legacy)
        _report(client, comment["comment_id"])

        # Act
        response = client.get(
            "/moderation/reports", cookies=auth_cookies(role="moderator")
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["reports"][0]["post_slug"] == "Hello_World"

    def test_reported_comment_hidden_until_dismissed(self, client, post):
        # Arrange
        moderator = auth_cookies(role="moderator")
        comment = _comment(client, post)
        reports = [_report(client, comment["comment_id"]).json() for _ in range(5)]
        listing = f"/posts/{post.id}/comments"

        # Act
        as_reader = client.get(listing).json()
        as_moderator = client.get(listing, cookies=moderator).json()
        thread = client.get(f"/comments/{comment['comment_id']}")

        # Assert
        assert as_reader["comments"] == []
        assert as_moderator["comments"][0]["is_visible"] is False
        assert thread.status_code == 404

        client.post(
            f"/moderation/reports/{reports[0]['report_id']}/dismiss",
            cookies=moderator,
        )
        restored = client.get(listing).json()
        assert [c["comment_id"] for c in restored["comments"]] == [
            comment["comment_id"]
        ]
        assert restored["comments"][0]["is_visible"] is True

    def test_resolve_leaves_moderator_tombstone(self, client, post):
        moderator = auth_cookies(role="moderator")
        comment = _comment(client, post)
        report = _report(client, comment["comment_id"]).json()

        client.post(
            f"/moderation/reports/{report['report_id']}/resolve", cookies=moderator
        )

        thread = client.get(f"/comments/{comment['comment_id']}").json()
        assert thread["content"] == "[This comment has been deleted by admin]"
