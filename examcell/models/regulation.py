"""
Regulation and SectionRules models.
"""

from . import db
from .base import SerializerMixin


class Regulation(db.Model, SerializerMixin):
    __tablename__ = 'regulation'

    regulation = db.Column(db.String(50), primary_key=True)
    section_count = db.Column('categoriescount', db.Integer)

    def add_section_rule(self, section_name, marks, min_questions_count):
        """Attach a section rule to this regulation. The caller commits."""
        rule = SectionRules(
            regulation_code=self.regulation,
            section_name=section_name,
            marks=marks,
            min_questions_count=min_questions_count
        )
        db.session.add(rule)
        return rule

    def total_marks(self):
        """Marks across all sections (marks per question times the minimum count)."""
        return sum((rule.marks or 0) * (rule.min_questions_count or 0)
                   for rule in self.section_rules)

    def to_dict(self):
        data = self.column_dict()
        data['section_rules'] = [
            rule.to_dict(include_regulation=False)
            for rule in self.section_rules.order_by(SectionRules.id)
        ]
        return data

    def __repr__(self):
        return f'<Regulation {self.regulation} (sections: {self.section_count})>'


class SectionRules(db.Model, SerializerMixin):
    __tablename__ = 'sectionrules'

    id = db.Column(db.Integer, primary_key=True)
    section_name = db.Column('sectionname', db.String(50))
    marks = db.Column(db.Integer)
    min_questions_count = db.Column('minquestionscount', db.Integer)
    regulation_code = db.Column('regulation', db.String(50),
                                db.ForeignKey('regulation.regulation'), nullable=False)

    # Relationships
    regulation = db.relationship('Regulation',
                                 backref=db.backref('section_rules', lazy='dynamic', passive_deletes='all'))

    def to_dict(self, include_regulation=True):
        data = self.column_dict()
        if include_regulation and self.regulation is not None:
            data['regulation'] = self.regulation.column_dict()
        return data

    def __repr__(self):
        return f'<SectionRules {self.section_name} regulation={self.regulation_code}>'
