# type: ignore
from invoke import task


@task
def venv(ctx):
    """Create the development environment with test and dev extras."""
    ctx.run("uv sync --extra test --extra dev")


@task
def lint(ctx):
    """
    Static analysis: ruff lint and format check, then mypy.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=btconnect --cov-report=term-missing", pty=True)


@task
def sample(ctx):
    """List devices from the built-in sample dump."""
    ctx.run("btconnect list --sample", pty=True)


@task
def build_package(ctx):
    """
    Build package using uv.
    """
    ctx.run("rm -rf dist")
    ctx.run("uv build")
