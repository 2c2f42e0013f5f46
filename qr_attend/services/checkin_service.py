"""Student check-in service."""
from datetime import datetime
from typing import Dict, List
from flask import current_app
from sqlalchemy.exc import IntegrityError
from qr_attend import db
from qr_attend.models.attendance import AttendanceRecord, AttendanceStatus
from qr_attend.models.attendance_session import AttendanceSession
from qr_attend.services.session_service import SessionService
from qr_attend.services.storage import storage_guarded
from qr_attend.utils.errors import DuplicateCheckIn, InvalidToken, NotFound, SessionExpired
from qr_attend.utils.helpers import utcnow

class CheckInService:
    """Service for redeeming session tokens."""

    @staticmethod
    @storage_guarded
    def check_in(token: str, student_id: int, now: datetime = None) -> AttendanceRecord:
        """
        Record the student as present in the session the token belongs to.

        Raises InvalidToken, SessionExpired or DuplicateCheckIn. There is no
        lookup for an existing record: the insert itself is the check, backed
        by the (session_id, student_id) unique constraint, so concurrent scans
        cannot both succeed.
        """
        now = now or utcnow()

        try:
            session = SessionService.resolve_by_token(token)
        except NotFound as e:
            current_app.logger.info('Check-in by student %s rejected: unknown token', student_id)
            raise InvalidToken() from e

        if not SessionService.is_valid(session, now):
            current_app.logger.info(
                'Check-in by student %s rejected: session %s closed at %s',
                student_id, session.id, session.expires_at.isoformat()
            )
            raise SessionExpired()

        session_id = session.id
        record = AttendanceRecord(
            session_id=session_id,
            student_id=student_id,
            status=AttendanceStatus.PRESENT,
            timestamp=now
        )
        db.session.add(record)

        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            current_app.logger.info(
                'Check-in by student %s rejected: already present in session %s',
                student_id, session_id
            )
            raise DuplicateCheckIn() from e

        current_app.logger.info('Student %s checked in to session %s', student_id, session_id)
        return record

    @staticmethod
    @storage_guarded
    def list_for_student(student_id: int) -> List[Dict]:
        """A student's attendance history, most recent first."""
        rows = (
            db.session.query(AttendanceRecord, AttendanceSession)
            .join(AttendanceSession, AttendanceSession.id == AttendanceRecord.session_id)
            .filter(AttendanceRecord.student_id == student_id)
            .order_by(AttendanceRecord.timestamp.desc(), AttendanceRecord.id.desc())
            .all()
        )

        history = []
        for record, session in rows:
            entry = record.to_dict()
            entry['session'] = {
                'subject': session.subject,
                'created_at': session.created_at.isoformat()
            }
            history.append(entry)
        return history
