"""
Exceptions raised by the exam cell persistence layer.

Constraint violations reported by the database arrive as SQLAlchemy
``IntegrityError``; ``translate_integrity_error`` maps them onto the
hierarchy below so callers can tell a duplicate from a dangling reference.
"""

# SQLSTATE codes used by PostgreSQL for integrity failures
PG_UNIQUE_VIOLATION = '23505'
PG_FOREIGN_KEY_VIOLATION = '23503'
PG_NOT_NULL_VIOLATION = '23502'


class ExamCellError(Exception):
    """Base class for all exam cell errors."""


class RecordNotFound(ExamCellError):
    def __init__(self, model, ident):
        self.model = model
        self.ident = ident
        super().__init__(f'{model.__name__} {ident!r} not found')


class ConstraintViolation(ExamCellError):
    """A write was rejected by a database constraint."""


class UniqueViolation(ConstraintViolation):
    pass


class ForeignKeyViolation(ConstraintViolation):
    pass


class NotNullViolation(ConstraintViolation):
    pass


class ImportFormatError(ExamCellError):
    """A question import file could not be mapped onto the schema."""


def translate_integrity_error(exc):
    """Return the ConstraintViolation matching an ``IntegrityError``."""
    orig = getattr(exc, 'orig', None)
    message = str(orig if orig is not None else exc)
    pgcode = getattr(orig, 'pgcode', None)
    lowered = message.lower()

    if pgcode == PG_UNIQUE_VIOLATION or 'unique constraint' in lowered:
        return UniqueViolation(message)
    if pgcode == PG_FOREIGN_KEY_VIOLATION or 'foreign key constraint' in lowered:
        return ForeignKeyViolation(message)
    if pgcode == PG_NOT_NULL_VIOLATION or 'not null constraint' in lowered \
            or 'not-null constraint' in lowered:
        return NotNullViolation(message)
    return ConstraintViolation(message)
