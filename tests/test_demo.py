import io

import pytest

from officialdom.bureaucrat import Bureaucrat, GradeTooHighError, GradeTooLowError
from officialdom.demo import execution_demo, grades_demo, main, signing_demo
from officialdom.forms import FormGradeTooHighError, FormGradeTooLowError


def test_grades_demo_sections_in_order():
    out, err = io.StringIO(), io.StringIO()
    grades_demo(out, err)
    text = out.getvalue()
    headers = [
        "=== Valid Creation & Basic Operations ===",
        "=== Copy Constructor Test ===",
        "=== Assignment Operator Test ===",
        "=== Boundary Increment at Grade 1 ===",
        "=== Boundary Decrement at Grade 150 ===",
        "=== Invalid Construction (Too High) ===",
        "=== Invalid Construction (Too Low) ===",
    ]
    positions = [text.index(h) for h in headers]
    assert positions == sorted(positions)


def test_grades_demo_increment_then_decrement_restores_grade():
    out, err = io.StringIO(), io.StringIO()
    grades_demo(out, err)
    text = out.getvalue()
    assert text.startswith(
        "=== Valid Creation & Basic Operations ===\nJohn Doe, bureaucrat grade 75\n"
    )
    assert "After increment: John Doe, bureaucrat grade 74\n" in text
    assert "After decrement: John Doe, bureaucrat grade 75\n" in text


def test_grades_demo_copy_matches_original():
    out, err = io.StringIO(), io.StringIO()
    grades_demo(out, err)
    text = out.getvalue()
    original = str(Bureaucrat("Original", 42))
    assert f"Original: {original}\nCopy-constructed: {original}\n" in text


def test_grades_demo_assignment_keeps_name_takes_grade():
    out, err = io.StringIO(), io.StringIO()
    grades_demo(out, err)
    after = out.getvalue().split("After b = a:\n", 1)[1].splitlines()
    assert after[:2] == [
        "  a: A, bureaucrat grade 30",
        "  b: B, bureaucrat grade 30",
    ]


def test_grades_demo_reports_expected_exceptions():
    out, err = io.StringIO(), io.StringIO()
    grades_demo(out, err)
    errors = err.getvalue()
    for error in (GradeTooHighError(), GradeTooLowError()):
        assert errors.count(f"Expected exception: {error}") == 2
    assert "Error:" not in errors


@pytest.mark.parametrize(
    ("label", "error"),
    [
        ("signGrade=0", FormGradeTooHighError),
        ("signGrade=151", FormGradeTooLowError),
        ("execGrade=0", FormGradeTooHighError),
    ],
)
def test_signing_demo_form_creation_errors(label, error):
    out, err = io.StringIO(), io.StringIO()
    signing_demo(out, err)
    assert f"Expected exception for {label}: {error()}\n" in err.getvalue()


def test_signing_demo_last_creation_error_ends_section():
    out, err = io.StringIO(), io.StringIO()
    signing_demo(out, err)
    errors = err.getvalue()
    assert errors.endswith(
        f"Expected exception for execGrade=151: {FormGradeTooLowError()}\n\n"
    )
    assert errors.count("Expected exception for") == 4


def test_signing_demo_bob_fails_alice_succeeds():
    out, err = io.StringIO(), io.StringIO()
    signing_demo(out, err)
    text = out.getvalue()
    failure = f"Bob couldn’t sign TaxForm because {FormGradeTooLowError()}\n"
    success = "Alice signed TaxForm\n"
    assert failure in text
    assert text.index(failure) < text.index(success)
    assert text.count(success) == 2


def test_signing_demo_assignment_copies_only_signature():
    out, err = io.StringIO(), io.StringIO()
    signing_demo(out, err)
    line = out.getvalue().split("After assignment:  ", 1)[1].splitlines()[0]
    assert line == 'Form "Placeholder": signed, sign grade 100, exec grade 100'


def test_signing_demo_roh_sequence():
    out, err = io.StringIO(), io.StringIO()
    signing_demo(out, err)
    tail = out.getvalue().split("=== Another Test ===\n", 1)[1]
    assert tail.count("Roh signed Grade\n") == 2
    assert tail.count("Roh couldn’t sign Grade because") == 1
    assert f"{Bureaucrat('Roh', 10)}\n" in tail
    assert tail.endswith(
        f"{Bureaucrat('Roh', 5)}\nRoh signed Grade\n" + tail.splitlines()[-1] + "\n"
    )


def test_execution_demo_plants_shrubbery(tmp_path):
    out, err = io.StringIO(), io.StringIO()
    execution_demo(out, err, tmp_path)
    planted = tmp_path / "home_shrubbery"
    assert planted.read_text(encoding="utf-8").count("树") == 2
    assert "Boss executed ShrubberyCreationForm\n" in out.getvalue()


def test_execution_demo_intern_cannot_execute(tmp_path):
    out, err = io.StringIO(), io.StringIO()
    execution_demo(out, err, tmp_path)
    text = out.getvalue()
    expected = (
        f"Intern couldn’t execute ShrubberyCreationForm because "
        f"{FormGradeTooLowError()}\n"
    )
    assert expected in text
    assert text.index("Intern signed ShrubberyCreationForm") < text.index(expected)


def test_execution_demo_robotomy_and_pardon(tmp_path):
    out, err = io.StringIO(), io.StringIO()
    execution_demo(out, err, tmp_path)
    text = out.getvalue()
    assert "* drilling noises *\n" in text
    success = "Bender has been robotomized successfully.\n" in text
    failure = "Robotomy failed on Bender.\n" in text
    assert success != failure
    assert text.endswith(
        "Marvin has been pardoned by Zaphod Beeblebrox.\n"
        "Boss executed PresidentialPardon\n"
    )


def test_main_runs_single_demo(tmp_path, capsys):
    assert main(["execution", "--directory", str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert "Boss executed Robotomy\n" in captured.out
    assert (tmp_path / "home_shrubbery").exists()
    assert "=== Form Creation Tests ===" not in captured.out


def test_main_runs_all_by_default(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.index("=== Valid Creation & Basic Operations ===") < (
        captured.out.index("=== Form Creation Tests ===")
    )
    assert (tmp_path / "home_shrubbery").exists()


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2