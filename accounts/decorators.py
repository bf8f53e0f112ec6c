from functools import wraps

from swifthire.exceptions import error_response

from .models import Role
from .roles import role_of

ROLE_DENIED_MESSAGES = {
    Role.ADMIN: 'Access denied. Admin account required.',
    Role.EMPLOYER: 'Access denied. Employer account required.',
    Role.JOB_SEEKER: 'Access denied. Job seeker account required.',
}


def role_required(*roles):
    """
    Decorator factory that requires the user to be logged in, enabled, and
    hold one of ``roles``.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return error_response('Please log in to access this page.', 401)
            if not request.user.is_active:
                return error_response('Your account is disabled.', 403)

            role = role_of(request.user)
            if role is None:
                return error_response('Please complete your profile first.', 403)
            if role not in roles:
                return error_response(ROLE_DENIED_MESSAGES[roles[0]], 403)

            return view_func(request, *args, **kwargs)
        return _wrapped_view
    return decorator


employer_required = role_required(Role.EMPLOYER)
jobseeker_required = role_required(Role.JOB_SEEKER)
admin_required = role_required(Role.ADMIN)


def login_required_json(view_func):
    """Like ``login_required`` but answers with a JSON 401 instead of a redirect."""
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return error_response('Please log in to access this page.', 401)
        return view_func(request, *args, **kwargs)
    return _wrapped_view
