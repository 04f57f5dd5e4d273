from pathlib import Path

from invoke import task
from invoke.context import Context

from tasks.common import project_root

api_root = project_root / Path("api")


@task
def install(ctx: Context) -> None:
    """Install the firestore-probe API in editable mode with its test extra"""
    with ctx.cd(project_root):
        print("Install firestore-probe API")
        ctx.run("pip install -e '.[test]'")


@task(help={"init": "install the project before running the server"})
def run(ctx: Context, init: bool = False) -> None:
    """Run the firestore-probe API server"""
    if init:
        install(ctx)
    with ctx.cd(api_root):
        print("Starting firestore-probe API server")
        ctx.run("python -m firestore_probe.app")


@task(help={"credentials_path": "credential file to check, defaults to the configured one"})
def check_credentials(ctx: Context, credentials_path: str = "") -> None:
    """Load the credential file and build the Firestore client without starting the server"""
    with ctx.cd(api_root):
        arg = repr(credentials_path) if credentials_path else ""
        ctx.run(f'python -c "from firestore_probe.clients.firestore import initialize_firestore; initialize_firestore({arg})"')


@task
def test(ctx: Context) -> None:
    """Run firestore-probe API tests"""
    with ctx.cd(project_root):
        print("Run firestore-probe API tests")
        ctx.run("pytest tests || pytest --last-failed tests")
