import sys
from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


def manage(c, command):
    """Run a Django management command with the current interpreter."""
    manage_py = project_relative("manage.py")
    c.run(f"{sys.executable} {manage_py} {command}", pty=sys.stdout.isatty())


@task
def update(c):
    """Update all dependencies to their latest versions using poetry."""
    c.run("poetry update")


@task
def up(c):
    """Alias for update - update all dependencies to their latest versions."""
    update(c)


@task
def shell(c):
    """Start Django shell."""
    manage(c, "shell")


@task
def test(c, path=None):
    """Run the test suite. Optionally specify a specific test path."""
    settings = "--settings=worldcup.test_settings"
    if path:
        manage(c, f"test {settings} {path}")
    else:
        manage(c, f"test {settings}")


@task
def demo(c, finish=None):
    """Print the World Cup example summary, optionally finishing a team's match."""
    if finish:
        manage(c, f"scoreboard_demo --finish '{finish}'")
    else:
        manage(c, "scoreboard_demo")


@task
def simulate(c, matches=8, finish=0, seed=None):
    """Simulate a scoreboard of random countries."""
    command = f"simulate_scoreboard --matches {matches} --finish {finish}"
    if seed is not None:
        command += f" --seed {seed}"
    manage(c, command)
