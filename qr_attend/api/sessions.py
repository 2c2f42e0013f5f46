# qr_attend/api/sessions.py
"""Teacher-facing session endpoints."""
from flask import Blueprint, current_app, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from qr_attend import limiter
from qr_attend.services.session_service import SessionService
from qr_attend.utils.decorators import teacher_required
from qr_attend.utils.helpers import success_response, error_response, utcnow

sessions_bp = Blueprint('sessions', __name__)

@sessions_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return success_response(message='Session service is running')

@sessions_bp.route('', methods=['POST'])
@jwt_required()
@teacher_required
@limiter.limit("30 per hour", key_func=get_jwt_identity)
def create_session(identity):
    """Open a new attendance session; the response carries the token to display."""
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    duration = data.get('duration', current_app.config['SESSION_DEFAULT_DURATION_MINUTES'])
    session = SessionService.create(
        subject=data.get('subject'),
        owner_id=identity.user_id,
        duration=duration
    )

    return success_response(
        data=session.to_dict(attendance_count=0),
        message="Session created successfully",
        status_code=201
    )

@sessions_bp.route('', methods=['GET'])
@jwt_required()
@teacher_required
def list_sessions(identity):
    """List the caller's sessions, newest first."""
    sessions = SessionService.list_by_owner(identity.user_id)
    return success_response(data={'sessions': sessions, 'count': len(sessions)})

@sessions_bp.route('/summary', methods=['GET'])
@jwt_required()
@teacher_required
def session_summary(identity):
    """Dashboard counters for the caller."""
    return success_response(data=SessionService.owner_summary(identity.user_id))

@sessions_bp.route('/<int:session_id>', methods=['GET'])
@jwt_required()
@teacher_required
def get_session(session_id, identity):
    """Show one of the caller's sessions."""
    session = SessionService.get_owned(session_id, identity.user_id)
    return success_response(
        data=session.to_dict(now=utcnow(), attendance_count=session.records.count())
    )

@sessions_bp.route('/<int:session_id>/attendance', methods=['GET'])
@jwt_required()
@teacher_required
def session_attendance(session_id, identity):
    """Who checked in to one of the caller's sessions."""
    roster = SessionService.list_attendance_for_session(session_id, identity.user_id)
    return success_response(data={'attendance': roster, 'total_present': len(roster)})
