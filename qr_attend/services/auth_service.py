"""Authentication service for user management."""
from collections import namedtuple
from typing import Optional, Tuple
from flask_jwt_extended import create_access_token, create_refresh_token
from qr_attend.models.user import User, UserRole
from qr_attend.utils.helpers import utcnow
from qr_attend.utils.validators import Validator

# What the rest of the app knows about the caller
Identity = namedtuple('Identity', ['user_id', 'role'])

class AuthService:
    @staticmethod
    def _issue_tokens(user: User) -> dict:
        claims = {"role": user.role.value}
        return {
            "access_token": create_access_token(identity=str(user.id), additional_claims=claims),
            "refresh_token": create_refresh_token(identity=str(user.id), additional_claims=claims),
            "user": user.to_dict()
        }

    @staticmethod
    def login(email: str, password: str) -> Tuple[Optional[dict], Optional[str]]:
        """Authenticate user and return tokens."""
        if not email or not password:
            return None, "Email and password are required"

        if not Validator.validate_email(email):
            return None, "Invalid email format"

        user = User.query.filter_by(email=email.lower().strip()).first()

        if not user or not user.check_password(password):
            return None, "Invalid email or password"

        if not user.is_active:
            return None, "Account is deactivated"

        user.last_login = utcnow()
        user.save()

        return AuthService._issue_tokens(user), None

    @staticmethod
    def register(email: str, password: str, name: str, role: str = "student") -> Tuple[Optional[dict], Optional[str]]:
        """Register new user."""
        if not all([email, password, name]):
            return None, "Email, password and name are required"

        if not Validator.validate_email(email):
            return None, "Invalid email format"

        password_check = Validator.validate_password(password)
        if not password_check["is_valid"]:
            return None, password_check["errors"][0]

        name_check = Validator.validate_name(name)
        if not name_check["is_valid"]:
            return None, name_check["errors"][0]

        try:
            user_role = UserRole((role or "student").lower())
        except ValueError:
            return None, "Role must be 'teacher' or 'student'"

        email = email.lower().strip()
        if User.query.filter_by(email=email).first():
            return None, "Email already exists"

        user = User(
            email=email,
            name=name.strip(),
            role=user_role
        )
        user.set_password(password)
        user.save()

        return user.to_dict(), None

    @staticmethod
    def get_user_by_id(user_id) -> Optional[User]:
        """Get user by ID."""
        try:
            return User.get_by_id(int(user_id))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def resolve_identity(user_id) -> Optional[Identity]:
        """Map a JWT subject to (user_id, role); None if the account is unusable."""
        user = AuthService.get_user_by_id(user_id)
        if not user or not user.is_active:
            return None
        return Identity(user.id, user.role)

    @staticmethod
    def refresh_token(user_id) -> Tuple[Optional[dict], Optional[str]]:
        """Generate new access token."""
        user = AuthService.get_user_by_id(user_id)
        if not user or not user.is_active:
            return None, "User not found or inactive"

        access_token = create_access_token(
            identity=str(user.id),
            additional_claims={"role": user.role.value}
        )

        return {
            "access_token": access_token,
            "user": user.to_dict()
        }, None
