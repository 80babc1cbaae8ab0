"""
Custom exceptions for wealthcalc.

Purpose
-------
Provides a unified exception hierarchy for the boundaries of wealthcalc:
configuration, snapshot validation and storage. All exceptions inherit from
WealthCalcError, enabling catch-all handling when needed.

The calculation engine itself never raises for numeric content. Out-of-range
amounts flow through the arithmetic and unsolvable goal-seeks fall back to
documented sentinel values; these exceptions only guard the edges where data
enters or leaves the package.

Exception Hierarchy
-------------------
WealthCalcError (base)
├── ConfigurationError - Invalid projection configuration or settings
├── ValidationError - Snapshot payload fails schema validation
└── StorageError - Snapshot store failures

Usage
-----
>>> from wealthcalc.exceptions import ValidationError
>>>
>>> try:
...     snapshot = snapshot_from_dict(payload)
... except ValidationError as e:
...     print(f"Invalid snapshot: {e}")
"""


class WealthCalcError(Exception):
    """
    Base exception for all wealthcalc errors.

    Examples
    --------
    >>> try:
    ...     store.save("financeData", snapshot)
    ... except WealthCalcError as e:
    ...     logger.error(f"Could not persist snapshot: {e}")
    """
    pass


class ConfigurationError(WealthCalcError):
    """
    Invalid configuration or parameters.

    Raised when a projection configuration cannot be built, such as:
    - Milestone thresholds that are not strictly ascending
    - Checkpoint horizons outside 1..100 years
    - Contribution split shares that do not sum to 1

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "milestones must be strictly ascending, got 50000 after 100000."
    ... )
    """
    pass


class ValidationError(WealthCalcError):
    """
    Snapshot validation failures.

    Raised when an incoming snapshot payload fails schema checks:
    - Negative monetary amounts
    - Tax or inflation rates outside [0, 100]
    - Unknown risk tolerance or unexpected fields

    Examples
    --------
    >>> raise ValidationError(
    ...     "income.monthlyGross: Input should be greater than or equal to 0"
    ... )
    """
    pass


class StorageError(WealthCalcError):
    """
    Snapshot store failures.

    Raised when the key-value store cannot complete a request:
    - Keys that are empty or contain path separators
    - Write failures on the underlying file system

    Examples
    --------
    >>> raise StorageError(f"Could not write snapshot '{key}': {exc}")
    """
    pass
