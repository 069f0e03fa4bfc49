import pytest

from langres.services.resource_manager import ResourceManager

TEMPLATE = "language-resource-{CULTURE}.{ANY}.i18n"


@pytest.fixture
def write_resource(tmp_path):
    """Write a resource file into tmp_path and return its path."""

    def _write(name: str, *lines: str, encoding: str = "utf-8") -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return str(path)

    return _write


@pytest.fixture
def resource_dir(tmp_path, write_resource):
    """Two cultures, en-US split over two files, plus files the template ignores."""
    write_resource(
        "language-resource-en-US.v1.i18n",
        "# greetings",
        "Hello=Hello",
        "Format=Hello, {0}!",
        "Shared=from v1",
    )
    write_resource("language-resource-en-US.v2.i18n", "Shared=from v2", "Bye=Goodbye")
    write_resource(
        "language-resource-fr-FR.v1.i18n",
        "Hello=Bonjour",
        "Format=Bonjour, {0}!",
    )
    write_resource("README.txt", "Hello=not a resource")
    (tmp_path / "language-resource-de-DE.dir.i18n").mkdir()
    return str(tmp_path)


@pytest.fixture
def manager(resource_dir):
    mgr = ResourceManager()
    mgr.set_up(resource_dir, TEMPLATE)
    return mgr
