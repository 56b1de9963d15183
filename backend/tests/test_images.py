"""Tests for review images and admin moderation."""
from tests.conftest import auth_headers, create_test_admin, create_test_review, create_test_user


def _add_image(client, user, review_id, key="seat-1"):
    return client.post(
        f"/api/reviews/{review_id}/images",
        json={
            "url": f"https://img.example.com/{key}.jpg",
            "storage_key": f"seat-images/{key}",
            "width": 1200,
            "height": 800,
            "format": "jpg",
        },
        headers=auth_headers(user),
    )


def _moderate(client, user, image_id, status):
    return client.patch(f"/api/admin/images/{image_id}", json={"status": status}, headers=auth_headers(user))


def _image_ids(client, review_id, user=None):
    headers = auth_headers(user) if user else {}
    return [i["image_id"] for i in client.get(f"/api/reviews/{review_id}/images", headers=headers).json()]


def _setup(client, db_engine):
    author = create_test_user(client, name="author")
    other = create_test_user(client, name="other")
    admin = create_test_admin(client, db_engine)
    review = create_test_review(client, author)
    return author, other, admin, review


class TestImageUpload:

    def test_new_image_is_pending(self, client, db_engine):
        author, _, _, review = _setup(client, db_engine)
        resp = _add_image(client, author, review["review_id"])
        assert resp.status_code == 201
        data = resp.json()
        assert data["moderation_status"] == "pending"
        assert data["is_visible"] is True
        assert data["moderated_by"] is None

    def test_only_author_may_add(self, client, db_engine):
        _, other, _, review = _setup(client, db_engine)
        assert _add_image(client, other, review["review_id"]).status_code == 403

    def test_anonymous_cannot_add(self, client, db_engine):
        _, _, _, review = _setup(client, db_engine)
        resp = client.post(f"/api/reviews/{review['review_id']}/images",
                           json={"url": "https://x/y.jpg", "storage_key": "k"})
        assert resp.status_code == 401


class TestModeration:

    def test_pending_image_projection(self, client, db_engine):
        author, other, admin, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()

        assert image["image_id"] not in _image_ids(client, review["review_id"])
        assert image["image_id"] not in _image_ids(client, review["review_id"], other)
        assert image["image_id"] in _image_ids(client, review["review_id"], author)
        assert image["image_id"] in _image_ids(client, review["review_id"], admin)

    def test_approve_makes_public(self, client, db_engine):
        author, other, admin, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()

        resp = _moderate(client, admin, image["image_id"], "approved")
        assert resp.status_code == 200
        data = resp.json()
        assert data["moderation_status"] == "approved"
        assert data["moderated_by"] == admin["user_id"]
        assert data["moderated_at"] is not None

        assert image["image_id"] in _image_ids(client, review["review_id"])
        assert image["image_id"] in _image_ids(client, review["review_id"], other)

    def test_rejected_image_hidden(self, client, db_engine):
        author, other, admin, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()
        _moderate(client, admin, image["image_id"], "rejected")

        assert image["image_id"] not in _image_ids(client, review["review_id"], other)
        assert image["image_id"] in _image_ids(client, review["review_id"], admin)

    def test_re_moderation_allowed(self, client, db_engine):
        author, _, admin, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()
        _moderate(client, admin, image["image_id"], "approved")

        resp = _moderate(client, admin, image["image_id"], "rejected")
        assert resp.status_code == 200
        assert resp.json()["moderation_status"] == "rejected"

    def test_approved_image_of_hidden_review(self, client, db_engine):
        author, other, admin, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()
        _moderate(client, admin, image["image_id"], "approved")
        client.patch(f"/api/admin/reviews/{review['review_id']}/visibility",
                     json={"is_visible": False}, headers=auth_headers(admin))

        resp = client.get(f"/api/reviews/{review['review_id']}/images", headers=auth_headers(other))
        assert resp.status_code == 404

    def test_moderation_requires_admin(self, client, db_engine):
        author, _, _, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()
        assert _moderate(client, author, image["image_id"], "approved").status_code == 403

    def test_invalid_status(self, client, db_engine):
        author, _, admin, review = _setup(client, db_engine)
        image = _add_image(client, author, review["review_id"]).json()
        assert _moderate(client, admin, image["image_id"], "pending").status_code == 400
        assert _moderate(client, admin, image["image_id"], "maybe").status_code == 400

    def test_unknown_image(self, client, db_engine):
        _, _, admin, _ = _setup(client, db_engine)
        assert _moderate(client, admin, "00000000-0000-0000-0000-000000000000", "approved").status_code == 404

    def test_moderation_queue(self, client, db_engine):
        author, _, admin, review = _setup(client, db_engine)
        first = _add_image(client, author, review["review_id"], key="a").json()
        second = _add_image(client, author, review["review_id"], key="b").json()
        _moderate(client, admin, first["image_id"], "approved")

        resp = client.get("/api/admin/images?status=pending", headers=auth_headers(admin))
        assert resp.status_code == 200
        assert [i["image_id"] for i in resp.json()] == [second["image_id"]]

        assert client.get("/api/admin/images?status=bogus", headers=auth_headers(admin)).status_code == 400
