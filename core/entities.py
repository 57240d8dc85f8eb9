"""
Explicit constructors and updaters for stored entities.

Every model that goes through here declares:

    EDITABLE_FIELDS     fields a caller may set on create and on update
    CREATE_ONLY_FIELDS  fields a caller may set on create only (e.g. farm)

Anything else in the payload is rejected with InvalidInput, so a caller can
never overwrite id, timestamps, or derived fields such as Product.available.
Model validation (choices, MinValueValidator, clean()) runs before any write
and its errors are reported as InvalidInput as well.
"""

import logging

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.db import models
from django.utils import timezone

from core.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def _check_fields(model, data, allowed):
    for key in data:
        if key not in allowed:
            if key in ('id', 'created_at', 'updated_at') or hasattr(model, key):
                raise InvalidInput(key, 'field is read-only')
            raise InvalidInput(key, f'unknown field for {model.__name__}')


def _assign(instance, data):
    for key, value in data.items():
        field = instance._meta.get_field(key)
        if isinstance(field, models.ForeignKey) and not isinstance(value, models.Model):
            setattr(instance, field.attname, value)
        else:
            setattr(instance, key, value)


def _validate(instance):
    try:
        instance.full_clean()
    except ValidationError as exc:
        if hasattr(exc, 'error_dict'):
            field, errors = next(iter(exc.message_dict.items()))
            if field == NON_FIELD_ERRORS:
                field = instance.__class__.__name__
            raise InvalidInput(field, '; '.join(errors)) from exc
        raise InvalidInput(instance.__class__.__name__, '; '.join(exc.messages)) from exc


def construct(model, data, **extra):
    """
    Build, validate and persist a new ``model`` record from ``data``.

    ``extra`` carries values the caller has already resolved (e.g. a Farm
    instance) and is subject to the same field checks.
    """
    payload = {**data, **extra}
    allowed = tuple(model.EDITABLE_FIELDS) + tuple(getattr(model, 'CREATE_ONLY_FIELDS', ()))
    _check_fields(model, payload, allowed)

    instance = model()
    _assign(instance, payload)
    _validate(instance)
    instance.save()
    logger.debug(f"Created {model.__name__} {instance.pk}")
    return instance


def update(instance, data):
    """
    Apply a partial overwrite to ``instance`` and persist the full record.

    Sets ``updated_at`` on every successful write.
    """
    model = instance.__class__
    _check_fields(model, data, tuple(model.EDITABLE_FIELDS))

    _assign(instance, data)
    _validate(instance)
    instance.updated_at = timezone.now()
    instance.save()
    logger.debug(f"Updated {model.__name__} {instance.pk}: {sorted(data)}")
    return instance
