from datetime import date

from django.utils import timezone

MAX_STARS = 5

def _today():
    return timezone.localdate()

def group_skills(skills):
    """[(category, [skills...]), ...] in the order categories first appear."""
    groups = {}
    for s in skills:
        groups.setdefault(s.category, []).append(s)
    return list(groups.items())

def star_rating(proficiency):
    # [True, True, True, False, False] for proficiency 3
    level = max(0, min(MAX_STARS, proficiency or 0))
    return [i < level for i in range(MAX_STARS)]

def is_expired(expiry, today: date = None) -> bool:
    if not expiry: return False
    return expiry < (today or _today())

def certification_badge(cert, today: date = None) -> str:
    if not cert.expiry_date:
        return "No Expiry"
    return "Expired" if is_expired(cert.expiry_date, today) else "Valid"

def filter_projects(projects, mode="all"):
    if mode == "featured":
        return [p for p in projects if p.featured]
    return list(projects)

def month_year(d):
    return d.strftime("%b %Y") if d else ""

def date_range(start, end, current=False):
    """'Jan 2022 - Mar 2024', 'Jan 2022 - Present', or '' with no dates."""
    left = month_year(start)
    right = "Present" if current else month_year(end)
    if left and right:
        return f"{left} - {right}"
    return left or right

def unread_count(messages):
    return sum(1 for m in messages if m.status == "unread")
