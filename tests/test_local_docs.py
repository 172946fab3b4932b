"""Local documentation store, Filament catalog and Markdown helpers."""

import pytest

from filament_mcp.docs import DocumentationStore, FilamentCatalog
from filament_mcp.docs.markdown import (
    UNTITLED,
    clean_item_name,
    extract_title,
    first_paragraph,
    make_excerpt,
    path_to_title,
    score_relevance,
)
from filament_mcp.errors import (
    DocumentNotFoundError,
    InvalidArgumentError,
    PackageNotFoundError,
)


@pytest.fixture()
def laravel_store(docs_tree) -> DocumentationStore:
    return DocumentationStore(docs_tree / "laravel-docs")


@pytest.fixture()
def catalog(docs_tree) -> FilamentCatalog:
    return FilamentCatalog(DocumentationStore(docs_tree / "filament-docs"))


# ── Markdown helpers ─────────────────────────────────────


def test_markdown_title_and_names() -> None:
    assert extract_title("intro\n# Forms  \n## Sub") == "Forms"
    assert extract_title("## Only second level") == UNTITLED
    assert clean_item_name("01-installation.md") == "installation"
    assert path_to_title("fields/02-getting-started.md") == "Getting Started"
    assert first_paragraph("# Title\n\nFirst line\nsecond line\n\nRest") == "First line second line"
    assert first_paragraph("No heading\n\nText") is None


def test_excerpt_window_and_ellipses() -> None:
    content = "a" * 100 + "needle" + "b" * 200
    excerpt = make_excerpt(content, "NEEDLE")

    assert excerpt.startswith("...")
    assert excerpt.endswith("...")
    assert "needle" in excerpt
    assert len(excerpt) == 3 + 50 + len("needle") + 100 + 3
    assert make_excerpt("short", "missing") == "short..."


def test_relevance_rewards_headings_and_early_hits() -> None:
    in_heading = "# Validation\n\nvalidation rules"
    late = "x" * 2000 + " validation"

    assert score_relevance(in_heading, "validation") == 2 + 10 + 10
    assert score_relevance(late, "validation") == 1
    assert score_relevance("a (b) c", "(b)") == 1 + 10


# ── DocumentationStore ───────────────────────────────────


def test_list_entries(laravel_store) -> None:
    assert laravel_store.list_entries() == ["database", "middleware.md", "routing.md"]
    assert laravel_store.list_entries("database") == ["eloquent.md"]

    with pytest.raises(DocumentNotFoundError):
        laravel_store.list_entries("missing")


def test_read_file_appends_markdown_extension(laravel_store) -> None:
    assert laravel_store.read_file("routing").startswith("# Routing")
    assert laravel_store.read_file("database/eloquent.md").startswith("# Eloquent")

    with pytest.raises(DocumentNotFoundError):
        laravel_store.read_file("nope")


def test_read_file_is_cached(laravel_store, docs_tree) -> None:
    first = laravel_store.read_file("routing")
    (docs_tree / "laravel-docs" / "routing.md").write_text("changed", encoding="utf-8")

    assert laravel_store.read_file("routing") == first


def test_paths_cannot_escape_root(laravel_store) -> None:
    with pytest.raises(InvalidArgumentError):
        laravel_store.read_file("../livewire-docs/components")
    with pytest.raises(InvalidArgumentError):
        laravel_store.list_entries("../..")


def test_search_content_is_recursive_and_case_insensitive(laravel_store) -> None:
    assert laravel_store.search_content("MIDDLEWARE") == ["middleware", "routing"]
    assert laravel_store.search_content("orm") == ["database/eloquent"]
    assert laravel_store.search_content("absent-term") == []


# ── FilamentCatalog ──────────────────────────────────────


def test_list_packages_only_includes_packages_with_docs(catalog) -> None:
    packages = catalog.list_packages()

    assert [p.name for p in packages] == ["forms", "tables"]
    assert packages[0].path == "packages/forms"
    assert packages[0].description == "Filament's form builder package."
    assert packages[1].description == "Documentation for the tables package"


def test_list_docs_orders_directories_first_and_skips_hidden(catalog) -> None:
    listing = catalog.list_docs("forms")
    files = listing["files"]

    assert listing["package"] == "forms"
    assert listing["path"] == ""
    assert [f["path"] for f in files] == ["03-fields", "01-overview.md", "02-getting-started.md"]
    assert files[0] == {
        "name": "fields",
        "path": "03-fields",
        "is_directory": True,
        "title": "Fields",
    }
    assert files[1]["name"] == "overview"
    assert files[1]["title"] == "Overview"


def test_list_docs_in_sub_directory(catalog) -> None:
    listing = catalog.list_docs("forms", "03-fields")

    assert [f["path"] for f in listing["files"]] == ["03-fields/01-text-input.md", "03-fields/02-select.md"]
    assert listing["files"][0]["title"] == "Text input"


def test_list_docs_unknown_path(catalog) -> None:
    with pytest.raises(DocumentNotFoundError):
        catalog.list_docs("forms", "missing")


def test_get_doc(catalog) -> None:
    doc = catalog.get_doc("forms", "03-fields/01-text-input.md")

    assert doc["title"] == "Text input"
    assert doc["path"] == "03-fields/01-text-input"
    assert doc["package"] == "forms"
    assert "rules()" in doc["content"]

    with pytest.raises(DocumentNotFoundError):
        catalog.get_doc("forms", "03-fields/99-missing")


def test_search_ranks_by_relevance(catalog) -> None:
    results = catalog.search("  Validation ")

    assert [(r.package, r.path) for r in results][0] == ("forms", "03-fields/01-text-input")
    assert {(r.package, r.path) for r in results} == {
        ("forms", "03-fields/01-text-input"),
        ("forms", "02-getting-started"),
        ("tables", "02-columns"),
    }
    relevances = [r.relevance for r in results]
    assert relevances == sorted(relevances, reverse=True)


def test_search_limited_to_package(catalog) -> None:
    results = catalog.search("validation", package="tables")
    assert [r.title for r in results] == ["Columns"]


def test_search_rejects_short_queries_and_unknown_packages(catalog) -> None:
    with pytest.raises(InvalidArgumentError):
        catalog.search(" ab ")
    with pytest.raises(PackageNotFoundError) as exc_info:
        catalog.search("validation", package="nope")
    assert exc_info.value.details["available_packages"] == ["forms", "tables"]
