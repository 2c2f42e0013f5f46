"""Validation utilities for the application."""
import re
from typing import Dict, Any

SUBJECT_MAX_LENGTH = 200

class Validator:
    """Validation helper class."""

    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format."""
        if not email:
            return False
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return bool(re.match(pattern, email))

    @staticmethod
    def validate_password(password: str) -> Dict[str, Any]:
        """Validate password strength."""
        errors = []

        if not password:
            errors.append("Password is required")
        elif len(password) < 6:
            errors.append("Password must be at least 6 characters long")
        elif len(password) > 128:
            errors.append("Password is too long")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }

    @staticmethod
    def validate_name(name: str) -> Dict[str, Any]:
        """Validate user name."""
        errors = []

        if not name or not name.strip():
            errors.append("Name is required")
        elif len(name.strip()) < 2:
            errors.append("Name must be at least 2 characters long")
        elif len(name.strip()) > 100:
            errors.append("Name is too long")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }

    @staticmethod
    def validate_subject(subject: Any) -> Dict[str, Any]:
        """Validate a session subject label."""
        errors = []

        if not isinstance(subject, str) or not subject.strip():
            errors.append("Subject is required")
        elif len(subject.strip()) > SUBJECT_MAX_LENGTH:
            errors.append(f"Subject must be at most {SUBJECT_MAX_LENGTH} characters")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }

    @staticmethod
    def validate_duration(duration: Any, minimum: int, maximum: int) -> Dict[str, Any]:
        """Validate a session duration given in whole minutes."""
        errors = []

        # bool is an int subclass; True must not pass as one minute
        if isinstance(duration, bool) or not isinstance(duration, int):
            errors.append("Duration must be a whole number of minutes")
        elif duration < minimum or duration > maximum:
            errors.append(f"Duration must be between {minimum} and {maximum} minutes")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }

