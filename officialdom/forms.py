"""Forms that bureaucrats sign and, for executable forms, carry out."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from officialdom.bureaucrat import Bureaucrat

HIGHEST_GRADE = 1
LOWEST_GRADE = 150

_SHRUBBERY = (
    "    _-_\n"
    "  /~~   ~~\\\n"
    " /~~       ~~\\\n"
    " {   树   }\n"
    "  \\  树  /\n"
    "   \\_~~_/\n"
)


class FormGradeTooHighError(Exception):
    """Raised when a form grade is above the highest rank."""

    def __init__(self, message: str = "form grade is too high (must be ≥ 1)") -> None:
        super().__init__(message)


class FormGradeTooLowError(Exception):
    """Raised when a grade is below what a form allows or requires."""

    def __init__(self, message: str = "form grade is too low (must be ≤ 150)") -> None:
        super().__init__(message)


class FormNotSignedError(Exception):
    """Raised when executing a form that has not been signed."""

    def __init__(self, message: str = "form is not signed") -> None:
        super().__init__(message)


class Form:
    """A named form with the grades needed to sign and to execute it."""

    _label = "Form"

    def __init__(self, name: str, sign_grade: int, exec_grade: int) -> None:
        if sign_grade < HIGHEST_GRADE or exec_grade < HIGHEST_GRADE:
            raise FormGradeTooHighError()
        if sign_grade > LOWEST_GRADE or exec_grade > LOWEST_GRADE:
            raise FormGradeTooLowError()
        self._name = name
        self._signed = False
        self._sign_grade = sign_grade
        self._exec_grade = exec_grade

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_signed(self) -> bool:
        return self._signed

    @property
    def sign_grade(self) -> int:
        return self._sign_grade

    @property
    def exec_grade(self) -> int:
        return self._exec_grade

    def _describe(self, label: str) -> str:
        state = "signed" if self._signed else "not signed"
        return (
            f'{label} "{self._name}": {state}, '
            f"sign grade {self._sign_grade}, exec grade {self._exec_grade}"
        )

    def __str__(self) -> str:
        return self._describe("Form")

    def be_signed(self, bureaucrat: Bureaucrat) -> None:
        """Sign the form, if the bureaucrat's grade is high enough."""
        if bureaucrat.grade > self._sign_grade:
            raise FormGradeTooLowError()
        self._signed = True


class ExecutableForm(Form, ABC):
    """A form that, once signed, can be executed to perform an action."""

    def __init__(self, name: str, sign_grade: int, exec_grade: int) -> None:
        super().__init__(name, sign_grade, exec_grade)

    def __str__(self) -> str:
        return self._describe("Executable form")

    def execute(self, executor: Bureaucrat, out: TextIO | None = None) -> None:
        """Check the form is signed and the executor ranks high enough, then act."""
        if not self.is_signed:
            raise FormNotSignedError()
        if executor.grade > self.exec_grade:
            raise FormGradeTooLowError()
        self.action(sys.stdout if out is None else out)

    @abstractmethod
    def action(self, out: TextIO | None = None) -> None:
        """Carry out what the form is for."""


class ShrubberyCreationForm(ExecutableForm):
    """Plants an ASCII shrubbery in a file named after the target."""

    def __init__(self, target: str, directory: str | Path | None = None) -> None:
        super().__init__("ShrubberyCreationForm", 145, 137)
        self._target = target
        self._directory = Path(".") if directory is None else Path(directory)

    @property
    def target(self) -> str:
        return self._target

    @property
    def path(self) -> Path:
        return self._directory / f"{self._target}_shrubbery"

    def action(self, out: TextIO | None = None) -> None:
        path = self.path
        try:
            with path.open("w", encoding="utf-8") as fh:
                fh.write(_SHRUBBERY)
        except OSError:
            sys.stderr.write(f"Error: could not open {path}\n")


class _CoinSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class RobotomyRequestForm(ExecutableForm):
    """Attempts to robotomize the target; succeeds half of the time."""

    def __init__(self, target: str, rng: _CoinSource | None = None) -> None:
        super().__init__("Robotomy", 72, 45)
        self._target = target
        self._rng = random.Random() if rng is None else rng

    @property
    def target(self) -> str:
        return self._target

    def action(self, out: TextIO | None = None) -> None:
        stream = sys.stdout if out is None else out
        stream.write("* drilling noises *\n")
        if self._rng.randrange(2):
            stream.write(f"{self._target} has been robotomized successfully.\n")
        else:
            stream.write(f"Robotomy failed on {self._target}.\n")


class PresidentialPardonForm(ExecutableForm):
    """Announces a presidential pardon for the target."""

    def __init__(self, target: str) -> None:
        super().__init__("PresidentialPardon", 25, 5)
        self._target = target

    @property
    def target(self) -> str:
        return self._target

    def action(self, out: TextIO | None = None) -> None:
        stream = sys.stdout if out is None else out
        stream.write(f"{self._target} has been pardoned by Zaphod Beeblebrox.\n")