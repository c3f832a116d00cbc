"""Locate the directory csscraft writes its logs under."""

from pathlib import Path

MARKERS = {'.git', 'pyproject.toml', '.csscraft'}


def get_project_root() -> Path:
    """Return the nearest directory at or above the CWD holding a project marker.

    A marker is a ``.git`` directory, a ``pyproject.toml`` or an existing
    ``.csscraft`` directory. Without any marker the CWD itself is used.
    """
    cwd = Path.cwd()
    return next((path for path in (cwd, *cwd.parents) if any((path / m).exists() for m in MARKERS)), cwd)


def get_logs_path() -> Path:
    """Return the path to the logs directory in .csscraft."""
    return get_project_root() / '.csscraft' / 'logs'


def init_csscraft() -> Path:
    """Create .csscraft/logs under the project root and return it.

    A ``.gitignore`` ignoring everything is written into ``.csscraft`` on
    first use so run logs never end up in version control.
    """
    logs_dir = get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)

    gitignore = logs_dir.parent / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by csscraft\n*\n')

    return logs_dir
