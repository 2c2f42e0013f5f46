"""Custom decorators for authorization."""
from functools import wraps
from flask_jwt_extended import get_jwt_identity
from qr_attend.models.user import UserRole
from qr_attend.services.auth_service import AuthService
from qr_attend.utils.helpers import error_response

def role_required(role: UserRole):
    """Require the caller to hold ``role``; passes ``identity`` to the view.

    Must be stacked under ``jwt_required()``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            identity = AuthService.resolve_identity(get_jwt_identity())

            if identity is None:
                return error_response("User not found or inactive", 401)

            if identity.role != role:
                return error_response(f"{role.value.title()} access required", 403)

            return f(*args, identity=identity, **kwargs)
        return decorated_function
    return decorator

teacher_required = role_required(UserRole.TEACHER)
student_required = role_required(UserRole.STUDENT)
