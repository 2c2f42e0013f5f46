"""Attendance record model."""
from enum import Enum
from qr_attend import db
from qr_attend.models.base import BaseModel
from qr_attend.utils.helpers import utcnow

class AttendanceStatus(Enum):
    """Attendance status enumeration.

    Check-in only ever writes PRESENT; the other values belong to
    absence marking done outside this service.
    """
    PRESENT = 'present'
    ABSENT = 'absent'
    LATE = 'late'
    EXCUSED = 'excused'

class AttendanceRecord(BaseModel):
    """One student's check-in to one session."""
    
    __tablename__ = 'attendance'
    __table_args__ = (
        db.UniqueConstraint('session_id', 'student_id', name='uq_attendance_session_student'),
    )
    
    session_id = db.Column(db.Integer, db.ForeignKey('sessions.id'), nullable=False, index=True)
    student_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    status = db.Column(
        db.Enum(AttendanceStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AttendanceStatus.PRESENT
    )
    timestamp = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def to_dict(self, exclude: list = None) -> dict:
        """Convert to dictionary."""
        result = super().to_dict(exclude=exclude)
        if 'status' in result:
            result['status'] = self.status.value
        return result
    
    def __repr__(self):
        return f'<AttendanceRecord {self.session_id}-{self.student_id}>'
