"""Bureaucrats, graded forms and the rules for signing and executing them."""

__version__ = "0.1.0"
__all__ = ["bureaucrat", "forms", "demo"]