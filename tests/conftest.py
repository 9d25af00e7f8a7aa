import pytest

from catalog import build_dispatcher


@pytest.fixture
def docs_dir(tmp_path):
    root = tmp_path / "docs"
    root.mkdir()
    (root / "project-overview.md").write_text("# Gridiron\n\nOverview.\n", encoding="utf-8")
    (root / "roadmap.md").write_text("# Roadmap\n", encoding="utf-8")
    return root


@pytest.fixture
def dispatcher(docs_dir):
    return build_dispatcher(docs_dir)
