"""Shared fixtures for tailor tests."""
import json

import pytest


@pytest.fixture(autouse=True)
def tailor_home(tmp_path_factory, monkeypatch):
    """Isolate HOME, the working directory and TAILOR_* settings for every test.

    This ensures tests never read the developer's real config. HOME and
    the working directory live outside ``tmp_path``, so project trees built
    there hold only what a test puts in them.
    """
    home = tmp_path_factory.mktemp("home")
    work = tmp_path_factory.mktemp("work")

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for var in (
        "TAILOR_LOG_LEVEL",
        "TAILOR_MAX_DEPTH",
        "TAILOR_MAX_FILES",
        "TAILOR_IGNORE_MATCH",
        "TAILOR_PROJECT_PATH",
        "TAILOR_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)

    from tailor.core.config_service import reset_config_service
    reset_config_service()

    import tailor.ui as ui
    monkeypatch.setattr(ui, "_plain_mode", False)
    monkeypatch.setattr(ui, "console", ui.console)

    yield home

    reset_config_service()


@pytest.fixture
def make_project(tmp_path):
    """Factory that writes a project tree from a {relative path: content} dict.

    Dict values are written as JSON; ``None`` creates an empty directory.
    """
    def _make(files: dict, name: str = "proj"):
        root = tmp_path / name
        root.mkdir()
        for rel, content in files.items():
            path = root / rel
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, dict):
                content = json.dumps(content)
            path.write_text(content)
        return root

    return _make


@pytest.fixture
def react_project(make_project):
    """A React + TypeScript Node project with no README or instructions."""
    return make_project({
        "package.json": {
            "name": "my-app",
            "description": "A sample app",
            "dependencies": {"react": "^18.0.0"},
            "devDependencies": {"typescript": "^5.0.0"},
        },
        "src/App.tsx": "export const App = () => null;\n",
        "src/index.ts": "import { App } from './App';\n",
        ".git/HEAD": "ref: refs/heads/main\n",
    }, name="my-app")


@pytest.fixture
def python_project(make_project):
    """A Python project with a README."""
    return make_project({
        "pyproject.toml": "[project]\nname = 'pyproj'\n",
        "README.md": "# pyproj\n",
        "pyproj/__init__.py": "",
        "pyproj/main.py": "print('hi')\n",
    }, name="pyproj")
