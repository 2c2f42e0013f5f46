"""Shared fixtures."""
import pytest
from flask_jwt_extended import create_access_token
from qr_attend import create_app, db
from qr_attend.models.user import User, UserRole

@pytest.fixture
def app():
    """Create test app."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()

def make_user(email, name, role, password='password123'):
    user = User(email=email, name=name, role=role)
    user.set_password(password)
    return user.save()

@pytest.fixture
def teacher(app):
    return make_user('teacher@example.com', 'Test Teacher', UserRole.TEACHER)

@pytest.fixture
def other_teacher(app):
    return make_user('teacher2@example.com', 'Other Teacher', UserRole.TEACHER)

@pytest.fixture
def student(app):
    return make_user('student@example.com', 'Student A', UserRole.STUDENT)

@pytest.fixture
def students(app):
    return [
        make_user(f'student{i}@example.com', f'Student {i}', UserRole.STUDENT)
        for i in range(3)
    ]

def auth_headers(user):
    token = create_access_token(identity=str(user.id), additional_claims={'role': user.role.value})
    return {'Authorization': f'Bearer {token}'}

@pytest.fixture
def teacher_headers(teacher):
    return auth_headers(teacher)

@pytest.fixture
def student_headers(student):
    return auth_headers(student)
