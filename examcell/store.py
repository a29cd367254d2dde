"""
CRUD access to the exam cell models.

Every write commits immediately. Integrity failures roll the session back and
surface as ``ConstraintViolation`` subclasses from ``examcell.errors``.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError

from .errors import RecordNotFound, UniqueViolation, translate_integrity_error
from .models import db


def _commit(action, description):
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        current_app.logger.warning('[Store] %s %s rejected: %s', action, description, e.orig)
        raise translate_integrity_error(e) from e


def _reject_duplicate_key(instance):
    """Refuse a new row whose primary key is already taken."""
    model = type(instance)
    identity = model.primary_key_of(instance)
    if identity is None:
        return
    with db.session.no_autoflush:
        existing = db.session.get(model, identity)
    if existing is not None and existing is not instance:
        db.session.rollback()
        current_app.logger.warning('[Store] %s %r already exists', model.__name__, identity)
        raise UniqueViolation(f'{model.__name__} {identity!r} already exists')


def create(model, **fields):
    """Insert a new row and return the persisted instance."""
    instance = model(**fields)
    _reject_duplicate_key(instance)
    db.session.add(instance)
    _commit('Create', model.__name__)
    current_app.logger.info('[Store] Created %r', instance)
    return instance


def save(*instances):
    """Commit instances built by model helpers (e.g. ``create_with_modules``)."""
    for instance in instances:
        if instance not in db.session or instance in db.session.new:
            _reject_duplicate_key(instance)
        db.session.add(instance)
    _commit('Save', ', '.join(type(i).__name__ for i in instances))
    return instances[0] if len(instances) == 1 else instances


def get(model, ident):
    instance = db.session.get(model, ident)
    if instance is None:
        raise RecordNotFound(model, ident)
    return instance


def list_all(model, **filters):
    """All rows of ``model`` matching equality filters, ordered by primary key."""
    return model.query.filter_by(**filters).order_by(*model.__mapper__.primary_key).all()


def update(model, ident, **fields):
    unknown = [key for key in fields if not hasattr(model, key)]
    if unknown:
        raise AttributeError(f'{model.__name__} has no attribute(s) {unknown}')
    instance = get(model, ident)
    for key, value in fields.items():
        setattr(instance, key, value)
    _commit('Update', f'{model.__name__} {ident!r}')
    current_app.logger.info('[Store] Updated %r', instance)
    return instance


def delete(model, ident):
    """Delete a row. Rows still referenced by children are rejected."""
    instance = get(model, ident)
    db.session.delete(instance)
    _commit('Delete', f'{model.__name__} {ident!r}')
    current_app.logger.info('[Store] Deleted %s %r', model.__name__, ident)
