import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]


def _install(session: nox.Session) -> None:
    session.install("-e", ".[test]")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_domain(session: nox.Session) -> None:
    """Aggregate and stock ledger tests; no HTTP and no handlers."""
    _install(session)
    session.run("pytest", "-m", "domain", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_bdd(session: nox.Session) -> None:
    """Stock reservation scenarios."""
    _install(session)
    session.run("pytest", "tests/ordering/bdd/", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_postgres(session: nox.Session) -> None:
    """Full suite against the PostgreSQL overlay in domain.toml; needs a running server."""
    _install(session)
    session.run("pytest", "--env", "production", *session.posargs)
