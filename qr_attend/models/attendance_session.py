"""Attendance session opened by a teacher and redeemed by token."""
from datetime import datetime
from qr_attend import db
from qr_attend.models.base import BaseModel
from qr_attend.utils.helpers import utcnow

class AttendanceSession(BaseModel):
    """A time-boxed attendance window for one class meeting."""
    
    __tablename__ = 'sessions'
    __table_args__ = (
        db.CheckConstraint('expires_at > created_at', name='ck_sessions_expiry_after_creation'),
    )
    
    subject = db.Column(db.String(200), nullable=False)
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    token = db.Column(db.String(128), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)
    expires_at = db.Column(db.DateTime, nullable=False)
    
    # Display state only; validity always comes from expires_at
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    
    # Relationships
    records = db.relationship('AttendanceRecord', backref='session', lazy='dynamic')
    
    def is_open(self, now: datetime = None) -> bool:
        """Check whether the token can still be redeemed at ``now``."""
        return (now or utcnow()) < self.expires_at
    
    def to_dict(self, now: datetime = None, attendance_count: int = None):
        """Convert to dictionary."""
        result = {
            'id': self.id,
            'subject': self.subject,
            'owner_id': self.owner_id,
            'token': self.token,
            'created_at': self.created_at.isoformat(),
            'expires_at': self.expires_at.isoformat(),
            'is_active': self.is_active,
            'is_open': self.is_open(now)
        }
        if attendance_count is not None:
            result['attendance_count'] = attendance_count
        return result
    
    def __repr__(self) -> str:
        return f'<AttendanceSession {self.id} {self.subject!r}>'
