"""
Course, CourseOffering, and Module models.
"""

from . import db
from .base import SerializerMixin


class Course(db.Model, SerializerMixin):
    __tablename__ = 'course'

    course_code = db.Column('coursecode', db.String(20), primary_key=True)
    course_title = db.Column('title', db.String(200))
    credits = db.Column(db.Float)

    def to_dict(self, include_questions=False):
        data = self.column_dict()
        if include_questions:
            data['questions'] = [q.to_dict(include_course=False) for q in self.questions]
        return data

    def __repr__(self):
        return f'<Course {self.course_code}: {self.course_title}>'


class CourseOffering(db.Model, SerializerMixin):
    __tablename__ = 'courseoffering'

    id = db.Column(db.Integer, primary_key=True)
    academic_year = db.Column('academicyear', db.String(20))
    semester = db.Column(db.String(20))
    year_of_study = db.Column('yearofstudy', db.String(20))
    department_id = db.Column(db.Integer, db.ForeignKey('department.id'), nullable=False)
    course_id = db.Column(db.String(20), db.ForeignKey('course.coursecode'), nullable=False)
    program_id = db.Column(db.Integer, db.ForeignKey('program.id'), nullable=False)
    regulation_code = db.Column('regulation', db.String(50), db.ForeignKey('regulation.regulation'))
    submitter_username = db.Column('submitter_user_id', db.String(100),
                                   db.ForeignKey('app_user.username'))

    # Relationships
    department = db.relationship('Department',
                                 backref=db.backref('course_offerings', lazy='dynamic', passive_deletes='all'))
    course = db.relationship('Course',
                             backref=db.backref('offerings', lazy='dynamic', passive_deletes='all'))
    program = db.relationship('Program',
                              backref=db.backref('course_offerings', lazy='dynamic', passive_deletes='all'))
    regulation = db.relationship('Regulation',
                                 backref=db.backref('course_offerings', lazy='dynamic', passive_deletes='all'))
    submitter = db.relationship('User', foreign_keys=[submitter_username],
                                backref=db.backref('submitted_offerings', lazy='dynamic',
                                                   passive_deletes='all'))

    __table_args__ = (
        db.UniqueConstraint('course_id', 'program_id', 'department_id',
                            name='uq_courseoffering_course_program_department'),
    )

    @classmethod
    def create_with_modules(cls, module_infos=(), instructors=(), **fields):
        """
        Create an offering together with its modules and instructors.

        ``module_infos`` is a sequence of ``{'module_no': ..., 'module_name': ...}``
        dicts. Nothing is committed; pass the result to ``store.save``.
        """
        offering = cls(**fields)
        for user in instructors:
            offering.instructors.append(user)
        db.session.add(offering)
        for info in module_infos:
            offering.modules.append(Module(
                module_no=info['module_no'],
                module_name=info.get('module_name')
            ))
        return offering

    def get_module(self, module_no):
        return self.modules.filter_by(module_no=module_no).first()

    def to_dict(self, include_department=True):
        data = self.column_dict()
        if include_department and self.department is not None:
            # The department is rendered without its offerings to cut the cycle
            data['department'] = self.department.to_dict(include_offerings=False)
        data['course'] = self.course.to_dict() if self.course else None
        data['program'] = self.program.column_dict() if self.program else None
        data['regulation'] = self.regulation.column_dict() if self.regulation else None
        data['instructors'] = [user.username for user in self.instructors]
        data['question_bank_ids'] = [bank.id for bank in self.question_banks]
        return data

    def to_detail_dict(self):
        """Flattened view of an offering with display names instead of keys."""
        from .user import User

        return {
            'id': self.id,
            'academic_year': self.academic_year,
            'semester': self.semester,
            'year_of_study': self.year_of_study,
            'department_name': self.department.department_name if self.department else None,
            'course_code': self.course_id,
            'course_title': self.course.course_title if self.course else None,
            'program_name': self.program.program_name if self.program else None,
            'regulation_name': self.regulation_code,
            'submitter_name': self.submitter.name if self.submitter else None,
            'instructor_names': [user.name for user in self.instructors.order_by(User.username)],
            'modules_info': [
                {'module_no': m.module_no, 'module_name': m.module_name}
                for m in self.modules.order_by(Module.module_no)
            ],
        }

    def __repr__(self):
        return f'<CourseOffering {self.course_id} program={self.program_id} dept={self.department_id}>'


class Module(db.Model, SerializerMixin):
    __tablename__ = 'module'

    id = db.Column(db.Integer, primary_key=True)
    module_no = db.Column(db.Integer)
    module_name = db.Column(db.String(200))
    courseoffering_id = db.Column(db.Integer, db.ForeignKey('courseoffering.id'), nullable=False)

    # Relationships
    course_offering = db.relationship('CourseOffering',
                                      backref=db.backref('modules', lazy='dynamic', passive_deletes='all'))

    def __repr__(self):
        return f'<Module {self.module_no}: {self.module_name}>'
