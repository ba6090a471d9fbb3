import pytest
from ruamel.yaml import YAML

from pvlscan.core.errors import LabelSyntaxError
from pvlscan.scanning.context import ScanOptions
from pvlscan.scanning.pipeline import ScanPipeline
from pvlscan.scanning.reader import PvlReader
from pvlscan.structure.builder import PvlTreeBuilder
from pvlscan.structure.exporter import PvlExporter


def _build(text):
    return PvlTreeBuilder().build(PvlReader(text).scan())


def test_sample_label_tree(sample_label, sample_tree):
    assert _build(sample_label) == sample_tree


def test_unnamed_end_group_closes_innermost():
    assert _build("GROUP = A\nX = 1\nEND_GROUP\nY = 2\n") == {"A": {"X": 1}, "Y": 2}


def test_nested_contexts():
    text = "OBJECT = TABLE\nGROUP = INNER\nX = 1\nEND_GROUP = INNER\nEND_OBJECT = TABLE\n"
    assert _build(text) == {"TABLE": {"INNER": {"X": 1}}}


def test_repeated_objects_become_a_list():
    text = (
        "OBJECT = COLUMN\nNAME = A\nEND_OBJECT = COLUMN\n"
        "OBJECT = COLUMN\nNAME = B\nEND_OBJECT = COLUMN\n"
        "OBJECT = COLUMN\nNAME = C\nEND_OBJECT = COLUMN\n"
    )
    assert _build(text) == {"COLUMN": [{"NAME": "A"}, {"NAME": "B"}, {"NAME": "C"}]}


def test_end_stops_assembly():
    assert _build("A = 1\nEND\nB = 2\n") == {"A": 1}


def test_duplicate_key_keeps_last_value():
    assert _build("A = 1\nA = 2\n") == {"A": 2}


@pytest.mark.parametrize("text", [
    "GROUP = A\nEND_OBJECT = A\n",
    "GROUP = A\nEND_GROUP = B\n",
    "END_GROUP = A\n",
    "OBJECT = A\nX = 1\n",
    "GROUP = \nEND_GROUP\n",
])
def test_structural_errors(text):
    with pytest.raises(LabelSyntaxError):
        _build(text)


def test_pipeline_records_tree_error():
    context = ScanPipeline().run("OBJECT = A\nX = 1\n")
    assert context.tree is None
    assert isinstance(context.tree_error, LabelSyntaxError)
    assert [e.key.name for e in context.entries if e.key.name] == ["X"]
    assert not context.success


def test_pipeline_strict_raises_tree_error():
    with pytest.raises(LabelSyntaxError):
        ScanPipeline(ScanOptions(strict=True)).run("OBJECT = A\nX = 1\n")


def test_pipeline_context(sample_label, sample_tree):
    context = ScanPipeline().run(sample_label)
    assert context.success
    assert len(context.entries) == 20
    assert len(context.comments) == 2
    assert context.tree == sample_tree
    assert context.find("LINES")[0].value.parse_u32() == 1024


def test_pipeline_keeps_blank_lines_on_request(sample_label):
    context = ScanPipeline(ScanOptions(keep_blank_lines=True)).run(sample_label)
    assert len(context.entries) == 22


def test_export_round_trip(sample_label, sample_tree):
    """
    EXPORT TEST: The YAML rendering loads back into the same data and keeps
    the label comments.
    """
    context = ScanPipeline().run(sample_label)
    yaml_text = PvlExporter().export_context(context)

    assert "# FILE DATA ELEMENTS" in yaml_text
    assert "Exposure parameters" in yaml_text
    assert YAML(typ="safe").load(yaml_text) == sample_tree


def test_export_without_tree():
    context = ScanPipeline().run("OBJECT = A\n")
    assert PvlExporter().export_context(context) == ""
