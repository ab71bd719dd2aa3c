NAV_ITEMS = [
    ("Home", "#hero"),
    ("About", "#about"),
    ("Skills", "#skills"),
    ("Experience", "#experience"),
    ("Education", "#education"),
    ("Projects", "#projects"),
    ("Certifications", "#certifications"),
    ("Contact", "#contact"),
]


def navigation(request):
    """Header links; admin links only show while a session exists."""
    user = getattr(request, "user", None)
    signed_in = bool(user and user.is_authenticated)
    return {
        "nav_items": NAV_ITEMS,
        "signed_in": signed_in,
        "show_admin_link": signed_in and user.is_staff,
    }
