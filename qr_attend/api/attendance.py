# qr_attend/api/attendance.py
"""Student-facing attendance endpoints."""
from flask import Blueprint, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from qr_attend import limiter
from qr_attend.services.checkin_service import CheckInService
from qr_attend.utils.decorators import student_required
from qr_attend.utils.helpers import success_response, error_response

attendance_bp = Blueprint('attendance', __name__)

@attendance_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return success_response(message='Attendance service is running')

@attendance_bp.route('/checkin', methods=['POST'])
@jwt_required()
@student_required
@limiter.limit("30 per minute", key_func=get_jwt_identity)
def check_in(identity):
    """Redeem a scanned session token."""
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'token' not in data:
        return error_response("Missing required field: token", 400)

    record = CheckInService.check_in(data['token'], identity.user_id)
    session = record.session

    return success_response(
        data={
            'attendance': record.to_dict(),
            'session': {
                'id': session.id,
                'subject': session.subject
            }
        },
        message=f"Attendance marked for {session.subject}!",
        status_code=201
    )

@attendance_bp.route('/mine', methods=['GET'])
@jwt_required()
@student_required
def my_attendance(identity):
    """The caller's attendance history."""
    history = CheckInService.list_for_student(identity.user_id)
    return success_response(data={'attendance': history, 'count': len(history)})
