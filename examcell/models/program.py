"""
Program model.
"""

from . import db
from .base import SerializerMixin


program_user = db.Table(
    'program_user',
    db.Column('program_id', db.Integer, db.ForeignKey('program.id'), primary_key=True),
    db.Column('username', db.String(100), db.ForeignKey('app_user.username'), primary_key=True),
)


class Program(db.Model, SerializerMixin):
    __tablename__ = 'program'

    id = db.Column(db.Integer, primary_key=True)
    program_name = db.Column('name', db.String(200))
    year_of_study = db.Column(db.Integer)
    # Free-text label, not a foreign key to department
    department = db.Column('departement', db.String(100))
    academic_year = db.Column(db.String(20))
    semester = db.Column(db.Integer)
    chief_faculty_username = db.Column('chief_faculty', db.String(100),
                                       db.ForeignKey('app_user.username'), nullable=False)

    # Relationships
    chief_faculty = db.relationship('User', foreign_keys=[chief_faculty_username],
                                    backref=db.backref('chief_of_programs', lazy='dynamic',
                                                       passive_deletes='all'))
    teaching_faculties = db.relationship('User', secondary=program_user,
                                         backref=db.backref('teaching_programs', lazy='dynamic'))

    def to_dict(self):
        data = self.column_dict()
        data['teaching_faculties'] = [user.username for user in self.teaching_faculties]
        return data

    def __repr__(self):
        return f'<Program {self.program_name} ({self.academic_year})>'
