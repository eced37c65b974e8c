import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_options():
    """
    Fixture providing a typical set of declared options.

    Usage:
        def test_something(sample_options):
            option_map = OptionMap(sample_options)
    """
    from clparse.option_info import OptionInfo

    return [
        OptionInfo("verbose", "v", "verbose", value_type=bool),
        OptionInfo("all", "a", "all", value_type=bool),
        OptionInfo("brief", "b", None, value_type=bool),
        OptionInfo("output", "o", "output"),
        OptionInfo("count", "n", "count", value_type=int),
        OptionInfo("files", "f", "files", is_array=True),
        OptionInfo("numbers", None, "numbers", value_type=int, is_array=True),
    ]


@pytest.fixture
def option_map(sample_options):
    """Fixture for an OptionMap built from sample_options with default settings."""
    from clparse.option_map import OptionMap

    return OptionMap(sample_options)


@pytest.fixture
def bound_options(option_map):
    """Fixture for a blank options object with every default already written."""
    options = SimpleNamespace()
    option_map.set_defaults(options)
    return options


@pytest.fixture
def enumerator_at():
    """
    Fixture creating an ArgumentEnumerator positioned on a given index.

    Usage:
        def test_parse(enumerator_at):
            enumerator = enumerator_at(["--output", "a.txt"], 0)
            assert enumerator.current == "--output"
    """
    from clparse.argument_enumerator import ArgumentEnumerator

    def _create(args, index=0):
        enumerator = ArgumentEnumerator(args)
        for _ in range(index + 1):
            enumerator.move_next()
        return enumerator

    return _create


@pytest.fixture
def temp_config_file():
    """Fixture for temporary schema files."""
    temp_dir = tempfile.mkdtemp()
    config_path = Path(temp_dir) / "clparse.conf"
    yield config_path
    # Cleanup after test
    import shutil

    shutil.rmtree(temp_dir)


@pytest.fixture
def temp_config_with_content(tmp_path):
    """Fixture for temporary schema files with given content."""

    def _create_config(content, name="clparse.conf"):
        config_path = tmp_path / name
        with open(config_path, "w") as f:
            f.write(content)
        return config_path

    yield _create_config


@pytest.fixture
def test_config_content():
    """Fixture providing a schema exercising every line type."""
    return (
        "# sample schema\n"
        "heading=demo 1.0\n"
        "copyright_holder=Jane Doe\n"
        "copyright_years=2005,2006,2012\n"
        "case_sensitive=true\n"
        "mutually_exclusive=yes\n"
        'option verbose=-v --verbose bool "help=Print more output"\n'
        "option output=-o --output str metavar=FILE required\n"
        "option count=-n --count int default=3\n"
        "option files=-f --files array\n"
        "option fast=--fast bool set=mode\n"
        "option slow=--slow bool set=mode\n"
        "values rest 2\n"
    )


@pytest.fixture
def clean_environment(monkeypatch):
    """Fixture removing every CLPARSE_* variable from the environment."""
    for name in ("CLPARSE_DEBUG", "CLPARSE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
