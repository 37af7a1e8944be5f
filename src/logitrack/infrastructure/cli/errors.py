"""Maps domain errors onto click's exit-code conventions."""

from __future__ import annotations

import click

from logitrack.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)


class NotFoundException(click.ClickException):
    exit_code = 3


class InvalidInputException(click.ClickException):
    exit_code = 2


def to_click_exception(exc: DomainException) -> click.ClickException:
    """Keep "not found" and "invalid input" distinguishable to scripts."""
    if isinstance(exc, EntityNotFoundError):
        return NotFoundException(f"Not found: {exc}")
    if isinstance(exc, ValidationError):
        return InvalidInputException(f"Invalid input: {exc}")
    return click.ClickException(str(exc))
