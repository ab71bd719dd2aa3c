from datetime import date
from types import SimpleNamespace

from core.services.display import (
    certification_badge, date_range, filter_projects, group_skills,
    is_expired, month_year, star_rating, unread_count,
)


def skill(name, category):
    return SimpleNamespace(name=name, category=category)


class TestGroupSkills:
    def test_same_category_lands_under_one_heading(self):
        rows = [skill("Python", "Backend"), skill("React", "Frontend"), skill("Django", "Backend")]
        groups = group_skills(rows)

        assert [c for c, _ in groups] == ["Backend", "Frontend"]
        assert [s.name for s in dict(groups)["Backend"]] == ["Python", "Django"]

    def test_categories_keep_emergence_order(self):
        rows = [skill("Docker", "DevOps"), skill("Python", "Backend"), skill("K8s", "DevOps")]
        assert [c for c, _ in group_skills(rows)] == ["DevOps", "Backend"]

    def test_category_match_is_exact(self):
        rows = [skill("a", "Backend"), skill("b", "backend")]
        assert len(group_skills(rows)) == 2

    def test_empty(self):
        assert group_skills([]) == []


class TestCertificationBadge:
    today = date(2024, 6, 15)

    def test_expired_when_expiry_strictly_before_today(self):
        cert = SimpleNamespace(expiry_date=date(2024, 6, 14))
        assert certification_badge(cert, self.today) == "Expired"

    def test_valid_on_expiry_day(self):
        cert = SimpleNamespace(expiry_date=date(2024, 6, 15))
        assert certification_badge(cert, self.today) == "Valid"

    def test_valid_in_future(self):
        cert = SimpleNamespace(expiry_date=date(2030, 1, 1))
        assert certification_badge(cert, self.today) == "Valid"

    def test_no_expiry(self):
        cert = SimpleNamespace(expiry_date=None)
        assert certification_badge(cert, self.today) == "No Expiry"

    def test_is_expired_without_date(self):
        assert is_expired(None) is False


def test_star_rating():
    assert star_rating(3) == [True, True, True, False, False]
    assert star_rating(5) == [True] * 5
    assert star_rating(None) == [False] * 5


def test_filter_projects_featured():
    a = SimpleNamespace(title="a", featured=True)
    b = SimpleNamespace(title="b", featured=False)
    assert filter_projects([a, b], "featured") == [a]
    assert filter_projects([a, b], "all") == [a, b]


def test_date_range():
    assert month_year(date(2022, 1, 5)) == "Jan 2022"
    assert date_range(date(2022, 1, 1), date(2024, 3, 1)) == "Jan 2022 - Mar 2024"
    assert date_range(date(2022, 1, 1), date(2024, 3, 1), current=True) == "Jan 2022 - Present"
    assert date_range(None, None) == ""


def test_unread_count():
    rows = [SimpleNamespace(status=s) for s in ("unread", "read", "unread", "replied")]
    assert unread_count(rows) == 2
