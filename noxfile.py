"""Sesiones de QA locales para Índices BCB."""

from __future__ import annotations

import nox

SOURCE_DIRS = ("infrastructure", "shared")

nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ("lint", "typecheck", "tests", "security")


@nox.session
def lint(session: nox.Session) -> None:
    """Ejecuta flake8 sobre los módulos principales."""

    session.install("flake8>=7.0.0")
    session.run("flake8", "--max-line-length=120", *SOURCE_DIRS)


@nox.session
def typecheck(session: nox.Session) -> None:
    """Valida los tipos usando mypy."""

    session.install("-e", ".", "mypy>=1.11.0", "types-requests")
    session.run("mypy", *SOURCE_DIRS)


@nox.session
def tests(session: nox.Session) -> None:
    """Ejecuta la suite de pytest con cobertura."""

    session.install("-e", ".[test]")
    session.run("pytest", "--cov", "--cov-report=term-missing")


@nox.session
def security(session: nox.Session) -> None:
    """Ejecuta verificaciones de seguridad con bandit y pip-audit."""

    session.install("bandit>=1.7.9", "pip-audit>=2.7.3")
    session.run("bandit", "-q", "-r", *SOURCE_DIRS, "-x", "*/test/*")
    session.run("pip-audit")
