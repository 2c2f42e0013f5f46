"""Test session creation, lookup and listing."""
from datetime import datetime, timedelta
import pytest
from qr_attend import db
from qr_attend.models.attendance import AttendanceRecord, AttendanceStatus
from qr_attend.models.attendance_session import AttendanceSession
from qr_attend.services.session_service import SessionService
from qr_attend.utils.errors import NotFound, ValidationError

T0 = datetime(2025, 3, 3, 9, 0, 0)

def test_create_sets_expiry_and_token(teacher):
    session = SessionService.create('Algebra I', teacher.id, 30, now=T0)

    assert session.id is not None
    assert session.subject == 'Algebra I'
    assert session.owner_id == teacher.id
    assert session.created_at == T0
    assert session.expires_at == T0 + timedelta(minutes=30)
    assert session.is_active is True
    assert session.token.startswith(f'{teacher.id}-')

@pytest.mark.parametrize('duration', [5, 180])
def test_duration_bounds_accepted(teacher, duration):
    session = SessionService.create('Physics', teacher.id, duration, now=T0)
    assert session.expires_at - session.created_at == timedelta(minutes=duration)

@pytest.mark.parametrize('duration', [4, 181, 0, -30, '30', 30.0, True, None])
def test_duration_out_of_bounds_or_wrong_type_rejected(teacher, duration):
    with pytest.raises(ValidationError):
        SessionService.create('Physics', teacher.id, duration, now=T0)
    assert AttendanceSession.query.count() == 0

@pytest.mark.parametrize('subject', ['', '   ', None, 'x' * 201])
def test_bad_subject_rejected(teacher, subject):
    with pytest.raises(ValidationError):
        SessionService.create(subject, teacher.id, 30, now=T0)
    assert AttendanceSession.query.count() == 0

def test_subject_is_trimmed(teacher):
    session = SessionService.create('  Chemistry  ', teacher.id, 30, now=T0)
    assert session.subject == 'Chemistry'

def test_resolve_by_token_exact_match(teacher):
    first = SessionService.create('Algebra I', teacher.id, 30, now=T0)
    second = SessionService.create('Geometry', teacher.id, 30, now=T0)

    assert SessionService.resolve_by_token(first.token).id == first.id
    assert SessionService.resolve_by_token(second.token).id == second.id

@pytest.mark.parametrize('token', [None, '', 123, 'not-a-token', 'x' * 500])
def test_resolve_unknown_or_malformed_token(teacher, token):
    SessionService.create('Algebra I', teacher.id, 30, now=T0)
    with pytest.raises(NotFound):
        SessionService.resolve_by_token(token)

def test_resolve_does_not_match_prefix_or_case(teacher):
    session = SessionService.create('Algebra I', teacher.id, 30, now=T0)

    with pytest.raises(NotFound):
        SessionService.resolve_by_token(session.token[:-1])
    with pytest.raises(NotFound):
        SessionService.resolve_by_token(session.token + 'x')

def test_is_valid_is_half_open(teacher):
    session = SessionService.create('Algebra I', teacher.id, 30, now=T0)

    assert SessionService.is_valid(session, T0)
    assert SessionService.is_valid(session, session.expires_at - timedelta(microseconds=1))
    assert not SessionService.is_valid(session, session.expires_at)
    assert not SessionService.is_valid(session, session.expires_at + timedelta(minutes=1))

def test_is_valid_ignores_advisory_flag(teacher):
    session = SessionService.create('Algebra I', teacher.id, 30, now=T0)
    session.is_active = False
    db.session.commit()

    assert SessionService.is_valid(session, T0 + timedelta(minutes=1))

    session.is_active = True
    db.session.commit()
    assert not SessionService.is_valid(session, T0 + timedelta(minutes=31))

def test_list_by_owner_newest_first_with_counts(teacher, other_teacher, students):
    old = SessionService.create('Monday', teacher.id, 30, now=T0)
    new = SessionService.create('Tuesday', teacher.id, 30, now=T0 + timedelta(days=1))
    SessionService.create('Not mine', other_teacher.id, 30, now=T0 + timedelta(days=2))

    for s in students[:2]:
        db.session.add(AttendanceRecord(
            session_id=old.id, student_id=s.id, status=AttendanceStatus.PRESENT, timestamp=T0
        ))
    db.session.commit()

    listed = SessionService.list_by_owner(teacher.id, now=T0 + timedelta(days=1, minutes=1))

    assert [s['id'] for s in listed] == [new.id, old.id]
    assert [s['attendance_count'] for s in listed] == [0, 2]
    assert listed[0]['is_open'] is True
    assert listed[1]['is_open'] is False

def test_get_owned_hides_other_owners(teacher, other_teacher):
    session = SessionService.create('Algebra I', teacher.id, 30, now=T0)

    assert SessionService.get_owned(session.id, teacher.id).id == session.id
    with pytest.raises(NotFound):
        SessionService.get_owned(session.id, other_teacher.id)
    with pytest.raises(NotFound):
        SessionService.get_owned(9999, teacher.id)

def test_roster_ordered_by_check_in_time(teacher, students):
    session = SessionService.create('Algebra I', teacher.id, 30, now=T0)
    late, early = students[0], students[1]
    db.session.add_all([
        AttendanceRecord(session_id=session.id, student_id=late.id, timestamp=T0 + timedelta(minutes=9)),
        AttendanceRecord(session_id=session.id, student_id=early.id, timestamp=T0 + timedelta(minutes=2)),
    ])
    db.session.commit()

    roster = SessionService.list_attendance_for_session(session.id, teacher.id)

    assert [r['student_id'] for r in roster] == [early.id, late.id]
    assert roster[0]['student_name'] == early.name
    assert roster[0]['status'] == 'present'

def test_owner_summary_counts(teacher, other_teacher, students):
    open_session = SessionService.create('Open', teacher.id, 60, now=T0)
    closed_session = SessionService.create('Closed', teacher.id, 5, now=T0)
    foreign = SessionService.create('Foreign', other_teacher.id, 60, now=T0)

    db.session.add_all([
        AttendanceRecord(session_id=open_session.id, student_id=students[0].id, timestamp=T0),
        AttendanceRecord(session_id=closed_session.id, student_id=students[0].id, timestamp=T0),
        AttendanceRecord(session_id=foreign.id, student_id=students[1].id, timestamp=T0),
    ])
    db.session.commit()

    summary = SessionService.owner_summary(teacher.id, now=T0 + timedelta(minutes=10))

    assert summary == {
        'total_sessions': 2,
        'open_sessions': 1,
        'total_attendance': 2
    }
