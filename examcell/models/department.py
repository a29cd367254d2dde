"""
Department and DepartmentReviewer models.
"""

from . import db
from .base import SerializerMixin


class Department(db.Model, SerializerMixin):
    __tablename__ = 'department'

    id = db.Column(db.Integer, primary_key=True)
    department_name = db.Column('departmentname', db.String(100))
    abbreviation = db.Column(db.String(20))

    def get_reviewers(self):
        """Users assigned to review this department's question banks."""
        return [link.user for link in self.reviewer_links.order_by(DepartmentReviewer.user_name)]

    def to_dict(self, include_offerings=False):
        data = self.column_dict()
        if include_offerings:
            # Offerings are rendered without their department to cut the cycle
            data['course_offerings'] = [
                offering.to_dict(include_department=False)
                for offering in self.course_offerings
            ]
        return data

    def __repr__(self):
        return f'<Department {self.abbreviation}: {self.department_name}>'


class DepartmentReviewer(db.Model, SerializerMixin):
    __tablename__ = 'department_reviewer'

    user_name = db.Column(db.String(100), db.ForeignKey('app_user.username'), primary_key=True)
    department_id = db.Column(db.Integer, db.ForeignKey('department.id'), primary_key=True)

    # Relationships
    user = db.relationship('User',
                           backref=db.backref('reviewer_links', lazy='dynamic', passive_deletes='all'))
    department = db.relationship('Department',
                                 backref=db.backref('reviewer_links', lazy='dynamic', passive_deletes='all'))

    @classmethod
    def assign(cls, user, department):
        """Link a reviewer to a department. The caller commits."""
        link = cls(user_name=user.username, department_id=department.id)
        db.session.add(link)
        return link

    def to_dict(self):
        data = self.column_dict()
        data['reviewer_name'] = self.user.name if self.user else None
        data['department_name'] = self.department.department_name if self.department else None
        return data

    def __repr__(self):
        return f'<DepartmentReviewer {self.user_name} -> department={self.department_id}>'
