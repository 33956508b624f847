"""Bureaucrats: named officials holding a grade from 1 (highest) to 150 (lowest)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from officialdom.forms import ExecutableForm, Form

HIGHEST_GRADE = 1
LOWEST_GRADE = 150


class GradeTooHighError(Exception):
    """Raised when a grade would rise above the highest rank."""

    def __init__(self, message: str = "Grade cannot be higher than 1") -> None:
        super().__init__(message)


class GradeTooLowError(Exception):
    """Raised when a grade would fall below the lowest rank."""

    def __init__(self, message: str = "Grade cannot be lower than 150") -> None:
        super().__init__(message)


class Bureaucrat:
    """An official with a fixed name and a grade that can move up or down."""

    def __init__(self, name: str, grade: int) -> None:
        if grade < HIGHEST_GRADE:
            raise GradeTooHighError()
        if grade > LOWEST_GRADE:
            raise GradeTooLowError()
        self._name = name
        self._grade = grade

    @property
    def name(self) -> str:
        return self._name

    @property
    def grade(self) -> int:
        return self._grade

    def __str__(self) -> str:
        return f"{self._name}, bureaucrat grade {self._grade}"

    def __repr__(self) -> str:
        return f"Bureaucrat({self._name!r}, {self._grade!r})"

    def increment(self) -> None:
        """Raise the rank by one (the grade number goes down)."""
        if self._grade <= HIGHEST_GRADE:
            raise GradeTooHighError()
        self._grade -= 1

    def decrement(self) -> None:
        """Lower the rank by one (the grade number goes up)."""
        if self._grade >= LOWEST_GRADE:
            raise GradeTooLowError()
        self._grade += 1

    def sign_form(self, form: Form, out: TextIO | None = None) -> None:
        """Try to sign a form and report the outcome."""
        stream = sys.stdout if out is None else out
        try:
            form.be_signed(self)
        except Exception as exc:
            stream.write(f"{self._name} couldn’t sign {form.name} because {exc}\n")
        else:
            stream.write(f"{self._name} signed {form.name}\n")

    def execute_form(self, form: ExecutableForm, out: TextIO | None = None) -> None:
        """Try to execute a form and report the outcome."""
        stream = sys.stdout if out is None else out
        try:
            form.execute(self, stream)
        except Exception as exc:
            stream.write(
                f"{self._name} couldn’t execute {form.name} because {exc}\n"
            )
        else:
            stream.write(f"{self._name} executed {form.name}\n")