"""Walk-throughs of bureaucrats' grades, signing forms and executing them."""

from __future__ import annotations

import argparse
import copy
import sys
from pathlib import Path
from typing import TextIO

from officialdom.bureaucrat import Bureaucrat, GradeTooHighError, GradeTooLowError
from officialdom.forms import (
    Form,
    FormGradeTooHighError,
    FormGradeTooLowError,
    PresidentialPardonForm,
    RobotomyRequestForm,
    ShrubberyCreationForm,
)

_GRADE_ERRORS = (GradeTooHighError, GradeTooLowError)
_FORM_ERRORS = (FormGradeTooHighError, FormGradeTooLowError)


def _assign_grade(target: Bureaucrat, source: Bureaucrat) -> None:
    """Give ``target`` the grade of ``source``; a bureaucrat's name never changes."""
    if target is not source:
        target._grade = source.grade


def _assign_signature(target: Form, source: Form) -> None:
    """Give ``target`` the signed state of ``source``; name and grades stay fixed."""
    if target is not source:
        target._signed = source.is_signed


def grades_demo(out: TextIO | None = None, err: TextIO | None = None) -> None:
    """Show bureaucrat creation, grade changes, copies and grade limits."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    out.write("=== Valid Creation & Basic Operations ===\n")
    try:
        john = Bureaucrat("John Doe", 75)
        out.write(f"{john}\n")
        john.increment()
        out.write(f"After increment: {john}\n")
        john.decrement()
        out.write(f"After decrement: {john}\n\n")
    except _GRADE_ERRORS as exc:
        err.write(f"Error: {exc}\n\n")

    out.write("=== Copy Constructor Test ===\n")
    try:
        original = Bureaucrat("Original", 42)
        duplicate = copy.copy(original)
        out.write(f"Original: {original}\nCopy-constructed: {duplicate}\n\n")
    except _GRADE_ERRORS as exc:
        err.write(f"Error: {exc}\n\n")

    out.write("=== Assignment Operator Test ===\n")
    try:
        a = Bureaucrat("A", 30)
        b = Bureaucrat("B", 100)
        out.write(f"Before assignment:\n  a: {a}\n  b: {b}\n")
        _assign_grade(b, a)
        out.write(f"After b = a:\n  a: {a}\n  b: {b}\n\n")
    except _GRADE_ERRORS as exc:
        err.write(f"Error: {exc}\n\n")

    out.write("=== Boundary Increment at Grade 1 ===\n")
    try:
        top = Bureaucrat("Top", 1)
        out.write(f"{top}\n")
        top.increment()
    except _GRADE_ERRORS as exc:
        err.write(f"Expected exception: {exc}\n\n")

    out.write("=== Boundary Decrement at Grade 150 ===\n")
    try:
        bottom = Bureaucrat("Bottom", 150)
        out.write(f"{bottom}\n")
        bottom.decrement()
    except _GRADE_ERRORS as exc:
        err.write(f"Expected exception: {exc}\n\n")

    out.write("=== Invalid Construction (Too High) ===\n")
    try:
        Bureaucrat("TooHigh", 0)
    except _GRADE_ERRORS as exc:
        err.write(f"Expected exception: {exc}\n\n")

    out.write("=== Invalid Construction (Too Low) ===\n")
    try:
        Bureaucrat("TooLow", 151)
    except _GRADE_ERRORS as exc:
        err.write(f"Expected exception: {exc}\n")


def signing_demo(out: TextIO | None = None, err: TextIO | None = None) -> None:
    """Show form creation limits, signing attempts and grade-dependent signing."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    out.write("=== Form Creation Tests ===\n")
    invalid = [
        ("TooHighSign", 0, 10, "signGrade=0", "\n"),
        ("TooLowSign", 151, 10, "signGrade=151", "\n"),
        ("TooHighExec", 10, 0, "execGrade=0", "\n"),
        ("TooLowExec", 10, 151, "execGrade=151", "\n\n"),
    ]
    for name, sign_grade, exec_grade, label, ending in invalid:
        try:
            Form(name, sign_grade, exec_grade)
        except _FORM_ERRORS as exc:
            err.write(f"Expected exception for {label}: {exc}{ending}")

    out.write("=== Successful Form & Bureaucrat Creation ===\n")
    alice = Bureaucrat("Alice", 45)
    bob = Bureaucrat("Bob", 75)
    tax_form = Form("TaxForm", 50, 25)
    out.write(f"{alice}\n{bob}\n{tax_form}\n\n")

    out.write("=== Signing Attempts ===\n")
    bob.sign_form(tax_form, out)
    out.write(f"{tax_form}\n\n")
    alice.sign_form(tax_form, out)
    out.write(f"{tax_form}\n\n")

    out.write("=== Double-Signing ===\n")
    alice.sign_form(tax_form, out)
    out.write(f"{tax_form}\n\n")

    out.write("=== Copy & Assignment of Form ===\n")
    duplicate = copy.copy(tax_form)
    out.write(f"Copy-constructed: {duplicate}\n")
    assigned = Form("Placeholder", 100, 100)
    out.write(f"Before assignment: {assigned}\n")
    _assign_signature(assigned, tax_form)
    out.write(f"After assignment:  {assigned}\n")

    out.write("=== Another Test ===\n")
    roh = Bureaucrat("Roh", 1)
    grade_form = Form("Grade", 5, 10)
    roh.sign_form(grade_form, out)
    out.write(f"{grade_form}\n{roh}\n\n Let's make it unsignable...\n\n")
    for _ in range(9):
        roh.decrement()
    out.write(f"{roh}\n")
    roh.sign_form(grade_form, out)
    out.write(f"{grade_form}\n\n Let's make it signable again...\n\n")
    for _ in range(5):
        roh.increment()
    out.write(f"{roh}\n")
    roh.sign_form(grade_form, out)
    out.write(f"{grade_form}\n")


def execution_demo(
    out: TextIO | None = None,
    err: TextIO | None = None,
    directory: str | Path | None = None,
) -> None:
    """Sign and execute the three executable forms."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    boss = Bureaucrat("Boss", 1)
    intern = Bureaucrat("Intern", 140)

    shrub = ShrubberyCreationForm("home", directory)
    robo = RobotomyRequestForm("Bender")
    pardon = PresidentialPardonForm("Marvin")

    intern.sign_form(shrub, out)
    boss.sign_form(robo, out)
    boss.sign_form(pardon, out)

    out.write("\n")

    intern.execute_form(shrub, out)
    boss.execute_form(shrub, out)
    boss.execute_form(robo, out)
    boss.execute_form(pardon, out)
    err.flush()


_DEMOS = ("grades", "signing", "execution")


def main(argv: list[str] | None = None) -> int:
    """Run one demo, or all of them in order."""
    parser = argparse.ArgumentParser(
        prog="officialdom", description="Bureaucrats, grades and forms."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=(*_DEMOS, "all"),
        default="all",
        help="which walk-through to run (default: all)",
    )
    parser.add_argument(
        "--directory",
        default=None,
        help="where the shrubbery file is planted (default: current directory)",
    )
    args = parser.parse_args(argv)

    chosen = _DEMOS if args.demo == "all" else (args.demo,)
    for name in chosen:
        if name == "grades":
            grades_demo(sys.stdout, sys.stderr)
        elif name == "signing":
            signing_demo(sys.stdout, sys.stderr)
        else:
            execution_demo(sys.stdout, sys.stderr, args.directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())