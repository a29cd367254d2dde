"""
User model and the instructor link table.
"""

import enum
from werkzeug.security import generate_password_hash, check_password_hash
from . import db
from .base import SerializerMixin


class UserRole(enum.Enum):
    FACULTY = 'faculty'
    ADMIN = 'admin'
    EXAM_CELL = 'exam_cell'


# Instructors of a course offering; owned by the user side.
courseoffering_user = db.Table(
    'courseoffering_user',
    db.Column('username', db.String(100), db.ForeignKey('app_user.username'), primary_key=True),
    db.Column('courseofferings_id', db.Integer, db.ForeignKey('courseoffering.id'), primary_key=True),
)


class User(db.Model, SerializerMixin):
    __tablename__ = 'app_user'

    username = db.Column(db.String(100), primary_key=True)
    password_hash = db.Column('password', db.String(255))
    role = db.Column(
        db.Enum(UserRole, values_callable=lambda x: [e.value for e in x], name='user_role'),
        nullable=False,
        default=UserRole.FACULTY
    )
    name = db.Column(db.String(200))

    # Relationships
    course_offerings = db.relationship('CourseOffering', secondary=courseoffering_user,
                                       backref=db.backref('instructors', lazy='dynamic'))

    def set_password(self, password):
        """Hash and set the user's password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Verify the password against the hash. Users without a password never match."""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def is_admin(self):
        return self.role == UserRole.ADMIN

    def is_faculty(self):
        return self.role == UserRole.FACULTY

    def is_exam_cell(self):
        return self.role == UserRole.EXAM_CELL

    def to_dict(self):
        data = self.column_dict(exclude=('password_hash',))
        data['course_offering_ids'] = [offering.id for offering in self.course_offerings]
        return data

    def __repr__(self):
        return f'<User {self.username} ({self.role})>'
