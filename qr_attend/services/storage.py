"""Database fault handling shared by the services."""
from functools import wraps
from flask import current_app
from sqlalchemy.exc import DBAPIError, IntegrityError
from qr_attend import db
from qr_attend.utils.errors import StorageUnavailable

def storage_guarded(f):
    """Turn driver-level failures into StorageUnavailable.

    The session is rolled back first so nothing is left half written.
    Constraint violations are not faults and pass through untouched.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except IntegrityError:
            raise
        except DBAPIError as e:
            db.session.rollback()
            current_app.logger.error('Storage failure in %s: %s', f.__qualname__, e.orig)
            raise StorageUnavailable() from e
    return decorated_function
