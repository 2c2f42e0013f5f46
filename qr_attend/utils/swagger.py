# qr_attend/utils/swagger.py
"""Swagger/OpenAPI configuration for the application."""
from flask_swagger_ui import get_swaggerui_blueprint

# Swagger UI configuration
SWAGGER_URL = '/api/docs'
API_URL = '/api/swagger.json'

def get_swagger_blueprint():
    """Create and return swagger UI blueprint."""
    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            'app_name': "QR Attend API",
            'defaultModelsExpandDepth': -1,
            'docExpansion': 'list',
            'supportedSubmitMethods': ['get', 'post'],
            'validatorUrl': None,
        }
    )
    return swaggerui_blueprint

def _json_body(schema):
    return {
        "required": True,
        "content": {"application/json": {"schema": schema}}
    }

def _responses(success_code, success_description, errors):
    responses = {
        str(success_code): {
            "description": success_description,
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Success"}}}
        }
    }
    for code, description in errors.items():
        responses[str(code)] = {
            "description": description,
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Error"}}}
        }
    return responses

def generate_swagger_spec():
    """Generate OpenAPI/Swagger specification."""
    secured = [{"bearerAuth": []}]
    return {
        "openapi": "3.0.0",
        "info": {
            "title": "QR Attend API",
            "description": "Time-boxed class sessions with token check-in",
            "version": "1.0.0"
        },
        "servers": [
            {
                "url": "http://127.0.0.1:5000/api",
                "description": "Development server"
            }
        ],
        "components": {
            "securitySchemes": {
                "bearerAuth": {
                    "type": "http",
                    "scheme": "bearer",
                    "bearerFormat": "JWT"
                }
            },
            "schemas": {
                "User": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "email": {"type": "string", "format": "email"},
                        "name": {"type": "string"},
                        "role": {"type": "string", "enum": ["student", "teacher"]},
                        "created_at": {"type": "string", "format": "date-time"}
                    }
                },
                "Session": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "subject": {"type": "string"},
                        "owner_id": {"type": "integer"},
                        "token": {"type": "string"},
                        "created_at": {"type": "string", "format": "date-time"},
                        "expires_at": {"type": "string", "format": "date-time"},
                        "is_active": {"type": "boolean", "description": "Display flag only"},
                        "is_open": {"type": "boolean", "description": "Computed from expires_at"},
                        "attendance_count": {"type": "integer"}
                    }
                },
                "AttendanceRecord": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "session_id": {"type": "integer"},
                        "student_id": {"type": "integer"},
                        "status": {"type": "string", "enum": ["present", "absent", "late", "excused"]},
                        "timestamp": {"type": "string", "format": "date-time"}
                    }
                },
                "Error": {
                    "type": "object",
                    "properties": {
                        "error": {"type": "boolean"},
                        "code": {"type": "string"},
                        "message": {"type": "string"},
                        "status_code": {"type": "integer"}
                    }
                },
                "Success": {
                    "type": "object",
                    "properties": {
                        "error": {"type": "boolean", "default": False},
                        "message": {"type": "string"},
                        "data": {"type": "object"}
                    }
                }
            }
        },
        "paths": {
            "/auth/register": {
                "post": {
                    "tags": ["Authentication"],
                    "summary": "Register new user",
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["email", "password", "name"],
                        "properties": {
                            "email": {"type": "string", "format": "email"},
                            "password": {"type": "string", "minLength": 6},
                            "name": {"type": "string", "minLength": 2},
                            "role": {"type": "string", "enum": ["student", "teacher"]}
                        }
                    }),
                    "responses": _responses(201, "User created", {400: "Validation error", 409: "Email taken"})
                }
            },
            "/auth/login": {
                "post": {
                    "tags": ["Authentication"],
                    "summary": "User login",
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["email", "password"],
                        "properties": {
                            "email": {"type": "string", "format": "email"},
                            "password": {"type": "string"}
                        }
                    }),
                    "responses": _responses(200, "Tokens issued", {400: "Missing fields", 401: "Bad credentials"})
                }
            },
            "/sessions": {
                "post": {
                    "tags": ["Sessions"],
                    "summary": "Open an attendance session",
                    "security": secured,
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["subject"],
                        "properties": {
                            "subject": {"type": "string"},
                            "duration": {"type": "integer", "minimum": 5, "maximum": 180, "default": 30}
                        }
                    }),
                    "responses": _responses(201, "Session created", {400: "Validation error", 403: "Teacher access required"})
                },
                "get": {
                    "tags": ["Sessions"],
                    "summary": "List own sessions, newest first",
                    "security": secured,
                    "responses": _responses(200, "Sessions", {403: "Teacher access required"})
                }
            },
            "/sessions/summary": {
                "get": {
                    "tags": ["Sessions"],
                    "summary": "Session and attendance counters",
                    "security": secured,
                    "responses": _responses(200, "Counters", {403: "Teacher access required"})
                }
            },
            "/sessions/{session_id}/attendance": {
                "get": {
                    "tags": ["Sessions"],
                    "summary": "Roster of one session",
                    "security": secured,
                    "parameters": [
                        {"name": "session_id", "in": "path", "required": True, "schema": {"type": "integer"}}
                    ],
                    "responses": _responses(200, "Roster", {404: "Session not found"})
                }
            },
            "/attendance/checkin": {
                "post": {
                    "tags": ["Attendance"],
                    "summary": "Check in with a scanned token",
                    "security": secured,
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["token"],
                        "properties": {"token": {"type": "string"}}
                    }),
                    "responses": _responses(201, "Marked present", {
                        404: "invalid_token",
                        409: "duplicate_check_in",
                        410: "session_expired",
                        503: "storage_unavailable"
                    })
                }
            },
            "/attendance/mine": {
                "get": {
                    "tags": ["Attendance"],
                    "summary": "Own attendance history",
                    "security": secured,
                    "responses": _responses(200, "History", {403: "Student access required"})
                }
            }
        }
    }
