"""Reading and saving the remembered interest rate.

The calculator remembers a single value between sessions: the last monthly
rate the user saved. The store itself is injected (see ``PreferenceStore``);
this module only decides what may be written and what a stored value is worth
when it is read back.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from . import config
from .exceptions import InvalidRateError, PreferenceStoreError
from .utils import parse_number
from .validation import validate_interest_rate

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    """Key/value storage for user preferences.

    Implementations raise ``PreferenceStoreError`` when the backing storage
    fails.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryPreferenceStore:
    """Dictionary-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


def load_interest_rate(store: PreferenceStore) -> float:
    """Return the saved monthly rate, or the default when none is usable.

    A stored value that is not a number or lies outside [0.1, 100] is removed
    from the store so it is not read again.

    Raises
    ------
    PreferenceStoreError
        If the store cannot be read or cleared.
    """
    key = config.CUSTOM_INTEREST_RATE_KEY
    try:
        stored = store.get(key)
    except PreferenceStoreError:
        logger.error("Failed to load custom interest rate", exc_info=True)
        raise
    if stored is None:
        return config.DEFAULT_MONTHLY_RATE

    rate = parse_number(stored)
    if rate is not None and validate_interest_rate(rate) is None:
        logger.info("Loaded custom interest rate %s", rate)
        return rate

    logger.warning("Discarding stored interest rate %r", stored)
    try:
        store.remove(key)
    except PreferenceStoreError:
        logger.error("Failed to clear invalid interest rate", exc_info=True)
        raise
    return config.DEFAULT_MONTHLY_RATE


def save_interest_rate(store: PreferenceStore, value: Any) -> float:
    """Validate ``value`` and persist it as the custom rate.

    Returns the accepted rate. The rate is written as ``str(rate)`` so reading
    it back yields the same float.

    Raises
    ------
    InvalidRateError
        If the value is not a number or lies outside [0.1, 100]. The store is
        not touched.
    PreferenceStoreError
        If the store cannot be written.
    """
    rate = parse_number(value)
    if rate is None:
        raise InvalidRateError("Please enter a valid number for interest rate.", value)
    error = validate_interest_rate(rate)
    if error is not None:
        raise InvalidRateError(error.message, rate)
    try:
        store.set(config.CUSTOM_INTEREST_RATE_KEY, str(rate))
    except PreferenceStoreError:
        logger.error("Failed to save custom interest rate", exc_info=True)
        raise
    logger.info("Saved custom interest rate %s", rate)
    return rate
