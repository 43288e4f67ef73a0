"""Helpers around the entity store (the Django ORM)."""

import functools
import logging

from django.db import InterfaceError, OperationalError

from .exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


def translate_store_errors(func):
    """
    Re-raise connectivity and timeout failures as StoreUnavailableError.

    Integrity and programming errors are not connectivity problems and
    propagate unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            logger.error("Entity store unavailable in %s: %s", func.__qualname__, exc)
            raise StoreUnavailableError("Storage is temporarily unavailable, please retry") from exc

    return wrapper
