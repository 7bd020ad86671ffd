def get_current_school(request):
    """
    Helper to get the current school from the request.
    It checks in order of priority:
    1. School already attached by an admin gate
    2. The school of the Admin matching the request identity
    Returns None when neither applies.
    """
    school = getattr(request, "school", None)
    if school is not None:
        return school

    admin = get_request_admin(request)
    if admin is not None:
        return admin.school
    return None


def get_request_admin(request):
    """Return the Admin row for the request identity, or None."""
    from accounts.models import Admin

    admin = getattr(request, "admin", None)
    if admin is not None:
        return admin

    identity = getattr(request, "identity", None)
    if identity is None or not identity.is_authenticated:
        return None
    return Admin.objects.for_identity(identity)
