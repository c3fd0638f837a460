"""
Unit tests for the single and multi selectors.

Tests first-match extension resolution, type narrowing, omission of
unresolved paths and short-circuiting on a failed folder.
"""

import os

from fsquery.models.config import QueryConfig, SelectionConfig
from fsquery.models.errors import FsErrorKind
from fsquery.query.navigator import navigate_folder
from fsquery.query.select import MultiSelect, SingleSelect
from fsquery.tools.probe import NodeProbe


def _names(nodes):
    return [node.base_name for node in nodes]


class TestSingleSelect:
    """Test cases for SingleSelect.by_path."""

    def test_select_file_by_bare_name(self, projects, probe):
        """Test selecting a file by its full name without extensions."""
        src = navigate_folder(os.path.join(projects, "projectA"), probe)
        node = src.select.file.by_path("package.json").get()

        assert node.base_name == "package.json"
        assert node.is_file()

    def test_first_match_wins(self, projects, probe):
        """Test that the first existing extension in order is chosen."""
        src_path = os.path.join(projects, "projectA", "src")
        with open(os.path.join(src_path, "index.ts"), "w") as f:
            f.write("export {};")

        node = navigate_folder(src_path, probe).select.file.by_path("index", ".ts", ".js").get()
        assert node.base_name == "index.ts"

        node = navigate_folder(src_path, probe).select.file.by_path("index", ".js", ".ts").get()
        assert node.base_name == "index.js"

    def test_falls_back_to_later_extension(self, projects, probe):
        """Test fallback to a later extension when earlier ones are missing."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        node = src.select.file.by_path("index", ".ts", ".js").get()
        assert node.base_name == "index.js"

    def test_stops_probing_after_first_match(self, projects, probe):
        """Test that no candidate is checked after a match."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        probe.reset_stats()

        src.select.file.by_path("index", "html", "js", "css")

        assert probe.get_stats()['probes'] == 1

    def test_extensions_without_dot(self, projects, probe):
        """Test that extensions without a leading dot are accepted."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        assert src.select.file.by_path("style", "css").get().path == os.path.join(
            projects, "projectA", "src", "style.css"
        )

    def test_not_found_references_folder(self, projects, probe):
        """Test that a missing entry reports the containing folder."""
        folder_path = os.path.join(projects, "projectA", "src")
        result = navigate_folder(folder_path, probe).select.file.by_path("main", "py")

        assert result.error.kind == FsErrorKind.NOT_FOUND
        assert folder_path in result.error.message

    def test_folder_selector_skips_same_named_file(self, projects, probe):
        """Test that a file does not satisfy a folder selector."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        result = src.select.folder.by_path("index", "js")

        assert result.error.kind == FsErrorKind.NOT_FOUND

    def test_file_selector_skips_same_named_folder(self, projects, probe):
        """Test that a folder does not satisfy a file selector."""
        project = navigate_folder(os.path.join(projects, "projectA"), probe)
        result = project.select.file.by_path("docs")
        assert result.error.kind == FsErrorKind.NOT_FOUND

    def test_unusable_name_is_failure(self, projects, probe):
        """Test that a name the OS rejects becomes a failed result."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        result = src.select.file.by_path("ind\x00ex", "js")

        assert result.error.kind == FsErrorKind.NOT_FOUND
        assert probe.get_stats()['errors'] == 1

    def test_unusable_extension_falls_through(self, projects, probe):
        """Test that a rejected candidate moves on to the next extension."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        node = src.select.file.by_path("index", "t\x00s", "js").get()
        assert node.base_name == "index.js"

    def test_select_folder(self, projects, probe):
        """Test selecting a folder by name."""
        node = navigate_folder(projects, probe).select.folder.by_path("projectB").get()
        assert node.is_folder()
        assert node.path == os.path.join(projects, "projectB")

    def test_nested_relative_name(self, projects, probe):
        """Test selecting through a nested relative name."""
        node = navigate_folder(projects, probe).select.file.by_path("projectA/src/index", "js").get()
        assert node.path == os.path.join(projects, "projectA", "src", "index.js")

    def test_failed_folder_short_circuits(self, projects, probe):
        """Test that a failed folder is returned without filesystem access."""
        missing = navigate_folder(os.path.join(projects, "projectC"), probe)
        probe.reset_stats()

        result = missing.select.file.by_path("index", "js")

        assert result.error is missing.result.error
        assert probe.get_stats()['probes'] == 0

    def test_verbatim_extensions(self, projects):
        """Test extensions used verbatim when auto-dot is disabled."""
        probe = NodeProbe(QueryConfig(selection=SelectionConfig(auto_dot_extensions=False)))
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)

        assert src.select.file.by_path("index", "js").is_fail()
        assert src.select.file.by_path("index.", "js").get().base_name == "index.js"

    def test_named_constructors(self, projects, probe):
        """Test the file and folder constructors of SingleSelect."""
        folder_result = probe.probe_folder(projects)
        assert SingleSelect.folder(folder_result, probe).by_path("projectA").is_success()
        assert SingleSelect.file(folder_result, probe).by_path("projectA").is_fail()


class TestMultiSelect:
    """Test cases for MultiSelect.by_path and by_paths."""

    def test_omits_unresolved_paths(self, projects, probe):
        """Test that unresolved paths are left out."""
        project = navigate_folder(os.path.join(projects, "projectA"), probe)
        nodes = project.select.nodes.by_paths(["docs", "missing", "package.json"]).get()

        assert _names(nodes) == ["docs", "package.json"]

    def test_omission_preserves_order(self, projects, probe):
        """Test that results keep input order after omissions."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        nodes = src.select.files.by_paths(["style", "nothing", "index"], "css", "js").get()

        assert len(nodes) == 2
        assert _names(nodes) == ["style.css", "index.js"]

    def test_per_path_extension_pairing(self, projects, probe):
        """Test that extensions pair with each path rather than globbing."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)

        assert _names(src.select.files.by_path("index", "js", "css").get()) == ["index.js"]
        assert _names(src.select.files.by_paths(["index", "style"], "js", "css").get()) == [
            "index.js",
            "style.css",
        ]

    def test_unusable_paths_are_omitted(self, projects, probe):
        """Test that paths the OS rejects are omitted, not raised."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        nodes = src.select.files.by_paths(["index", "bad\x00", "a" * 5000, "style"], "js", "css").get()

        assert _names(nodes) == ["index.js", "style.css"]

    def test_no_match_is_empty_success(self, projects, probe):
        """Test that no matches gives an empty successful list."""
        project = navigate_folder(os.path.join(projects, "projectA"), probe)
        result = project.select.files.by_path("index", "js", "css")

        assert result.is_success()
        assert result.get() == []

    def test_type_filters(self, projects, probe):
        """Test the node, file and folder type filters."""
        project = navigate_folder(os.path.join(projects, "projectA"), probe)
        paths = ["docs", "src", "package.json"]

        assert _names(project.select.files.by_paths(paths).get()) == ["package.json"]
        assert _names(project.select.folders.by_paths(paths).get()) == ["docs", "src"]
        assert _names(project.select.nodes.by_paths(paths).get()) == paths

    def test_duplicates_resolve_independently(self, projects, probe):
        """Test that duplicate paths are each resolved."""
        src = navigate_folder(os.path.join(projects, "projectA", "src"), probe)
        probe.reset_stats()

        nodes = src.select.files.by_paths(["index", "index"], "js").get()

        assert _names(nodes) == ["index.js", "index.js"]
        assert probe.get_stats()['probes'] == 2

    def test_nested_paths(self, projects, probe):
        """Test multi selection through nested relative paths."""
        root = navigate_folder(projects, probe)
        nodes = root.select.files.by_paths(["projectA/docs/readme", "projectB/docs/readme"], "md").get()

        assert [node.path for node in nodes] == [
            os.path.join(projects, "projectA", "docs", "readme.md"),
            os.path.join(projects, "projectB", "docs", "readme.md"),
        ]

    def test_failed_folder_is_overall_failure(self, projects, probe):
        """Test that only a failed folder fails the whole selection."""
        failed = navigate_folder(os.path.join(projects, "projectA", "package.json"), probe)
        probe.reset_stats()

        result = failed.select.nodes.by_paths(["a", "b"])

        assert result.error.kind == FsErrorKind.NOT_FOLDER
        assert probe.get_stats()['probes'] == 0

    def test_named_constructors(self, projects, probe):
        """Test the node, file and folder constructors of MultiSelect."""
        folder_result = probe.probe_folder(projects)
        assert _names(MultiSelect.node(folder_result, probe).by_path("projectA").get()) == ["projectA"]
        assert MultiSelect.file(folder_result, probe).by_path("projectA").get() == []
        assert len(MultiSelect.folder(folder_result, probe).by_path("projectA").get()) == 1
