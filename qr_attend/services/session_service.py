"""Attendance session management service."""
from datetime import datetime, timedelta
from typing import Dict, List
from flask import current_app
from sqlalchemy import func
from qr_attend import db
from qr_attend.models.attendance import AttendanceRecord
from qr_attend.models.attendance_session import AttendanceSession
from qr_attend.services.storage import storage_guarded
from qr_attend.services.token_service import TokenService
from qr_attend.utils.errors import NotFound, ValidationError
from qr_attend.utils.helpers import utcnow
from qr_attend.utils.validators import Validator

# Longest string resolve_by_token will even look up
TOKEN_MAX_LENGTH = 128

class SessionService:
    """Service for creating and resolving attendance sessions."""
    
    @staticmethod
    def is_valid(session: AttendanceSession, now: datetime) -> bool:
        """Check the half-open window [created_at, expires_at)."""
        return now < session.expires_at
    
    @staticmethod
    @storage_guarded
    def create(subject: str, owner_id: int, duration: int, now: datetime = None) -> AttendanceSession:
        """Open a new session for ``duration`` minutes starting at ``now``."""
        subject_check = Validator.validate_subject(subject)
        if not subject_check['is_valid']:
            raise ValidationError(subject_check['errors'][0])
        
        duration_check = Validator.validate_duration(
            duration,
            current_app.config['SESSION_MIN_DURATION_MINUTES'],
            current_app.config['SESSION_MAX_DURATION_MINUTES']
        )
        if not duration_check['is_valid']:
            raise ValidationError(duration_check['errors'][0])
        
        now = now or utcnow()
        session = AttendanceSession(
            subject=subject.strip(),
            owner_id=owner_id,
            token=TokenService.generate(owner_id, now),
            created_at=now,
            expires_at=now + timedelta(minutes=duration),
            is_active=True
        )
        db.session.add(session)
        db.session.commit()
        
        current_app.logger.info(
            'Session %s opened by user %s for %s minutes (%r)',
            session.id, owner_id, duration, session.subject
        )
        return session
    
    @staticmethod
    @storage_guarded
    def resolve_by_token(token) -> AttendanceSession:
        """Find the session carrying exactly this token."""
        # Malformed and unknown tokens fail the same way
        if not isinstance(token, str) or not token or len(token) > TOKEN_MAX_LENGTH:
            raise NotFound('Session not found')
        
        session = AttendanceSession.query.filter_by(token=token).first()
        if session is None:
            raise NotFound('Session not found')
        return session
    
    @staticmethod
    @storage_guarded
    def get_owned(session_id: int, owner_id: int) -> AttendanceSession:
        """Get a session, hiding sessions that belong to someone else."""
        session = db.session.get(AttendanceSession, session_id)
        if session is None or session.owner_id != owner_id:
            raise NotFound('Session not found')
        return session
    
    @staticmethod
    @storage_guarded
    def list_by_owner(owner_id: int, now: datetime = None) -> List[Dict]:
        """List an owner's sessions, newest first, with attendance counts."""
        now = now or utcnow()
        counts = (
            db.session.query(AttendanceRecord.session_id, func.count(AttendanceRecord.id).label('total'))
            .group_by(AttendanceRecord.session_id)
            .subquery()
        )
        rows = (
            db.session.query(AttendanceSession, func.coalesce(counts.c.total, 0))
            .outerjoin(counts, counts.c.session_id == AttendanceSession.id)
            .filter(AttendanceSession.owner_id == owner_id)
            .order_by(AttendanceSession.created_at.desc(), AttendanceSession.id.desc())
            .all()
        )
        return [session.to_dict(now=now, attendance_count=total) for session, total in rows]
    
    @staticmethod
    @storage_guarded
    def list_attendance_for_session(session_id: int, owner_id: int) -> List[Dict]:
        """Roster of one owned session, earliest check-in first."""
        session = SessionService.get_owned(session_id, owner_id)
        records = session.records.order_by(AttendanceRecord.timestamp.asc(), AttendanceRecord.id.asc()).all()
        
        roster = []
        for record in records:
            entry = record.to_dict()
            entry['student_name'] = record.student.name
            roster.append(entry)
        return roster
    
    @staticmethod
    @storage_guarded
    def owner_summary(owner_id: int, now: datetime = None) -> Dict[str, int]:
        """Counters for an owner's dashboard."""
        now = now or utcnow()
        base = AttendanceSession.query.filter(AttendanceSession.owner_id == owner_id)
        
        total_sessions = base.count()
        open_sessions = base.filter(AttendanceSession.expires_at > now).count()
        total_attendance = (
            db.session.query(func.count(AttendanceRecord.id))
            .join(AttendanceSession, AttendanceSession.id == AttendanceRecord.session_id)
            .filter(AttendanceSession.owner_id == owner_id)
            .scalar()
        )
        
        return {
            'total_sessions': total_sessions,
            'open_sessions': open_sessions,
            'total_attendance': total_attendance or 0
        }
