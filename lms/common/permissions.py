from rest_framework.permissions import BasePermission, SAFE_METHODS

# ------------------------------------------------------------
# Staff (is_staff) is the administrator role of the LMS: it authors quizzes,
# references and lesson resources. Everyone else reads.
# ------------------------------------------------------------


def is_staff_user(user) -> bool:
    return bool(user and user.is_authenticated and user.is_staff)


class IsStaffOrReadOnly(BasePermission):
    """Authenticated users may read, only staff may write."""

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return is_staff_user(request.user)


class IsSelfOrStaff(BasePermission):
    """
    Grants access to per-user endpoints only for the user named in the URL
    (``user_id`` kwarg) or for staff.
    """

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        if is_staff_user(request.user):
            return True
        user_id = view.kwargs.get("user_id")
        return user_id is None or int(user_id) == request.user.id
