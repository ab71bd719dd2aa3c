"""Fetch-or-create helpers for tables that hold at most one row (profile, contact info)."""
import logging

from django.db import transaction

logger = logging.getLogger(__name__)


def fetch_singleton(model):
    """Maybe-single fetch: the row, or None when the table is empty."""
    return model.objects.order_by("pk").first()


def save_singleton(model, values: dict):
    """Update the existing row with ``values``, or insert one if there is none.

    The row is looked up again at save time, so saving twice never produces a
    second row. Returns ``(row, created)``.
    """
    with transaction.atomic():
        row = fetch_singleton(model)
        if row is None:
            row = model.objects.create(**values)
            logger.info("Inserted %s row id=%s", model._meta.db_table, row.pk)
            return row, True

        for field, value in values.items():
            setattr(row, field, value)
        row.save()
        logger.info("Updated %s row id=%s", model._meta.db_table, row.pk)
        return row, False
