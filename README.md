# officialdom

A small model of an office. Bureaucrats hold a grade from 1 (highest) to
150 (lowest). Forms require one minimum grade to be signed and another to be
executed. Any grade out of range raises an exception.

## Install

```
pip install .
```

## Bureaucrats

`officialdom.bureaucrat` provides `Bureaucrat`, `GradeTooHighError` and
`GradeTooLowError`.

```python
from officialdom.bureaucrat import Bureaucrat

john = Bureaucrat("John Doe", 75)
print(john)          # John Doe, bureaucrat grade 75
john.increment()     # john.grade == 74
john.decrement()     # john.grade == 75

Bureaucrat("Top", 0)     # raises GradeTooHighError: Grade cannot be higher than 1
Bureaucrat("Low", 151)   # raises GradeTooLowError: Grade cannot be lower than 150
```

`name` and `grade` are read-only properties. At grade 1, `increment()` raises
`GradeTooHighError`. At grade 150, `decrement()` raises `GradeTooLowError`.

`sign_form(form, out=None)` and `execute_form(form, out=None)` attempt the
action and write a line describing the result to `out`, which defaults to
standard output. Neither method raises an exception:

- `Alice signed TaxForm` / `Bob couldn’t sign TaxForm because <reason>`
- `Boss executed PresidentialPardon` / `Intern couldn’t execute ShrubberyCreationForm because <reason>`

## Forms

`officialdom.forms` provides these exceptions:

- `FormGradeTooHighError`
- `FormGradeTooLowError`
- `FormNotSignedError`

A `Form(name, sign_grade, exec_grade)` checks both grades when it is created.
A grade below 1 raises `FormGradeTooHighError`, and a grade above 150 raises
`FormGradeTooLowError`. `be_signed(bureaucrat)` marks the form as signed. If
the bureaucrat's grade number is higher than `sign_grade`, it raises
`FormGradeTooLowError` instead. You can sign a form more than once.

```python
import sys
from officialdom.bureaucrat import Bureaucrat
from officialdom.forms import Form

tax = Form("TaxForm", 50, 25)
Bureaucrat("Bob", 75).sign_form(tax, sys.stdout)
# Bob couldn’t sign TaxForm because form grade is too low (must be ≤ 150)
Bureaucrat("Alice", 45).sign_form(tax, sys.stdout)
# Alice signed TaxForm
print(tax)
# Form "TaxForm": signed, sign grade 50, exec grade 25
```

### Executable forms

`ExecutableForm` is an abstract `Form`. Its `execute(executor, out=None)`
method checks two conditions before it calls `action(out)`:

- The form must be signed. Otherwise it raises `FormNotSignedError`.
- The executor's grade must meet `exec_grade`. Otherwise it raises `FormGradeTooLowError`.

There are three concrete forms:

| Class | Sign | Exec | Action |
|---|---|---|---|
| `ShrubberyCreationForm(target, directory=None)` | 145 | 137 | Writes an ASCII tree to `<target>_shrubbery` in `directory` (default: the current directory). If the file cannot be opened, it prints an error to standard error. |
| `RobotomyRequestForm(target, rng=None)` | 72 | 45 | Prints `* drilling noises *`, then reports either success or failure. The outcome comes from `rng.randrange(2)`, using a fresh `random.Random` unless you supply one. |
| `PresidentialPardonForm(target)` | 25 | 5 | Prints `<target> has been pardoned by Zaphod Beeblebrox.` |

```python
import sys
from officialdom.bureaucrat import Bureaucrat
from officialdom.forms import PresidentialPardonForm

boss = Bureaucrat("Boss", 1)
pardon = PresidentialPardonForm("Marvin")
boss.sign_form(pardon, sys.stdout)
boss.execute_form(pardon, sys.stdout)
# Boss signed PresidentialPardon
# Marvin has been pardoned by Zaphod Beeblebrox.
# Boss executed PresidentialPardon
```

## Demonstration

```
officialdom
officialdom grades
officialdom signing
officialdom execution --directory /tmp
```

The command runs one walk-through or, by default, all of them in order:

- **grades**: bureaucrat creation and grade limits.
- **signing**: form creation and signing attempts.
- **execution**: signing and executing the three executable forms.

The execution walk-through writes `home_shrubbery` to `--directory`, or to the
current directory if you give none. The same walk-throughs are available as
`grades_demo`, `signing_demo` and `execution_demo` in `officialdom.demo`.