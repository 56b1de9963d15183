"""Unit tests for relevance scoring and the visibility projection."""
import math
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from seatspot.models.image import ModerationStatus
from seatspot.models.review import ReviewStatus
from seatspot.models.user import UserRole
from seatspot.services.ranking import rank_reviews, relevance_score
from seatspot.services.visibility import can_view_image, can_view_review


@pytest.mark.parametrize("up, down, expected", [
    (0, 0, 0.0),
    (1, 0, math.log10(2)),
    (9, 1, 0.9 * math.log10(11)),
    (0, 5, 0.0),
])
def test_relevance_score(up, down, expected):
    assert math.isclose(relevance_score(up, down), expected, abs_tol=1e-12)


def test_score_grows_with_volume_at_fixed_ratio():
    assert relevance_score(10, 0) > relevance_score(1, 0)
    assert relevance_score(9, 1) > relevance_score(1, 0)


def test_rank_reviews_ties_newest_first():
    now = datetime(2026, 1, 1)
    a = SimpleNamespace(score=0.0, created_at=now)
    b = SimpleNamespace(score=0.0, created_at=now + timedelta(seconds=1))
    c = SimpleNamespace(score=0.5, created_at=now - timedelta(days=1))
    assert rank_reviews([a, b, c]) == [c, b, a]


def _user(user_id, role=UserRole.user):
    return SimpleNamespace(user_id=user_id, is_admin=role == UserRole.admin)


def _review(**kw):
    base = dict(user_id="author", is_visible=True, status=ReviewStatus.active)
    base.update(kw)
    return SimpleNamespace(**base)


class TestReviewProjection:

    def test_visible_active_review_seen_by_all(self):
        review = _review()
        assert can_view_review(review, None)
        assert can_view_review(review, _user("someone"))

    def test_hidden_review(self):
        review = _review(is_visible=False)
        assert not can_view_review(review, None)
        assert not can_view_review(review, _user("someone"))
        assert can_view_review(review, _user("author"))
        assert can_view_review(review, _user("boss", UserRole.admin))

    def test_deleted_review_seen_by_nobody(self):
        review = _review(status=ReviewStatus.deleted)
        assert not can_view_review(review, _user("author"))
        assert not can_view_review(review, _user("boss", UserRole.admin))


class TestImageProjection:

    def _image(self, status, is_visible=True, review=None):
        return SimpleNamespace(moderation_status=status, is_visible=is_visible, review=review or _review())

    def test_approved_visible_image_is_public(self):
        assert can_view_image(self._image(ModerationStatus.approved), None)

    def test_approved_but_hidden_image(self):
        image = self._image(ModerationStatus.approved, is_visible=False)
        assert not can_view_image(image, _user("someone"))
        assert can_view_image(image, _user("boss", UserRole.admin))

    @pytest.mark.parametrize("status", [ModerationStatus.pending, ModerationStatus.rejected])
    def test_unapproved_image(self, status):
        image = self._image(status)
        assert not can_view_image(image, None)
        assert can_view_image(image, _user("author"))
        assert can_view_image(image, _user("boss", UserRole.admin))

    def test_image_follows_parent_review(self):
        image = self._image(ModerationStatus.approved, review=_review(is_visible=False))
        assert not can_view_image(image, _user("someone"))
