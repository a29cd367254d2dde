"""
QuestionBank, Question, and Subquestion models.
"""

import enum
from . import db
from .base import SerializerMixin


class ReviewStatus(enum.Enum):
    PENDING = 'pending'
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'


class QuestionBank(db.Model, SerializerMixin):
    __tablename__ = 'question_bank'

    id = db.Column(db.Integer, primary_key=True)
    review_status = db.Column(
        'reviewstatus',
        db.Enum(ReviewStatus, values_callable=lambda x: [e.value for e in x], name='review_status'),
        default=ReviewStatus.PENDING
    )
    review_comment = db.Column('reviewcomment', db.Text)
    courseoffering_id = db.Column('courseoffering', db.Integer,
                                  db.ForeignKey('courseoffering.id'), nullable=False)

    # Relationships
    course_offering = db.relationship('CourseOffering',
                                      backref=db.backref('question_banks', lazy='dynamic',
                                                         passive_deletes='all'))

    def mark_accepted(self):
        self.review_status = ReviewStatus.ACCEPTED
        self.review_comment = None

    def mark_rejected(self, comment=None):
        self.review_status = ReviewStatus.REJECTED
        self.review_comment = comment

    def to_dict(self, include_offering=True, include_questions=False):
        data = self.column_dict()
        if include_offering and self.course_offering is not None:
            data['course_offering'] = self.course_offering.column_dict()
        if include_questions:
            data['questions'] = [
                q.to_dict(include_bank=False)
                for q in self.questions.order_by(Question.id)
            ]
        return data

    def __repr__(self):
        return f'<QuestionBank {self.id} offering={self.courseoffering_id} ({self.review_status})>'


class Question(db.Model, SerializerMixin):
    __tablename__ = 'question'

    id = db.Column(db.Integer, primary_key=True)
    marks = db.Column(db.Integer)
    course_outcome = db.Column('courseoutcome', db.Integer)
    course_code = db.Column('coursecode', db.String(20), db.ForeignKey('course.coursecode'))
    module_id = db.Column(db.Integer, db.ForeignKey('module.id'), nullable=False)
    question_bank_id = db.Column(db.Integer, db.ForeignKey('question_bank.id'), nullable=False)

    # Relationships
    course = db.relationship('Course',
                             backref=db.backref('questions', lazy='dynamic', passive_deletes='all'))
    module = db.relationship('Module',
                             backref=db.backref('questions', lazy='dynamic', passive_deletes='all'))
    question_bank = db.relationship('QuestionBank',
                                    backref=db.backref('questions', lazy='dynamic', passive_deletes='all'))

    def total_marks(self):
        """Sum of subquestion marks; may differ from ``marks`` if edited by hand."""
        return sum(sub.marks or 0 for sub in self.subquestions)

    def to_dict(self, include_bank=True, include_course=True):
        data = self.column_dict()
        if include_bank and self.question_bank is not None:
            data['question_bank'] = self.question_bank.column_dict()
        if include_course and self.course is not None:
            data['course'] = self.course.column_dict()
        data['module_no'] = self.module.module_no if self.module else None
        data['subquestions'] = [
            sub.to_dict(include_question=False)
            for sub in self.subquestions.order_by(Subquestion.id)
        ]
        return data

    def __repr__(self):
        return f'<Question {self.id} marks={self.marks} CO{self.course_outcome}>'


class Subquestion(db.Model, SerializerMixin):
    __tablename__ = 'subquestion'

    id = db.Column(db.Integer, primary_key=True)
    marks = db.Column(db.Integer)
    content = db.Column(db.Text)
    blooms_level = db.Column('bloomslevel', db.Integer)
    question_id = db.Column(db.Integer, db.ForeignKey('question.id'), nullable=False)

    # Relationships
    question = db.relationship('Question',
                               backref=db.backref('subquestions', lazy='dynamic', passive_deletes='all'))

    def to_dict(self, include_question=True):
        data = self.column_dict()
        if include_question and self.question is not None:
            data['question'] = self.question.column_dict()
        return data

    def __repr__(self):
        return f'<Subquestion {self.id} question={self.question_id} BL{self.blooms_level}>'
