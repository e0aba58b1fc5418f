from pathlib import Path

from fundcheck.config import ValidatorConfig
from fundcheck.images import ImageSequenceValidator, expected_image_name
from fundcheck.models import ArchivalPath, ViolationKind
from fundcheck.natural import list_children
from fundcheck.patterns import compose_rules
from fundcheck.rules import check_directory


def kinds(violations):
    return [v.kind for v in violations]


def make_unit(tmp_path: Path, names, name="42-1-7") -> Path:
    unit = tmp_path / name
    unit.mkdir()
    for n in names:
        (unit / n).touch()
    return unit


class FakeChecker:
    def __init__(self, bad=()):
        self.bad = set(bad)
        self.calls = []

    def verify(self, path):
        self.calls.append(path.name)
        return path.name not in self.bad


# --- structural rule ---------------------------------------------------------

def test_valid_directory(tmp_path):
    rules = compose_rules()
    fund = tmp_path / "42"
    (fund / "42-1").mkdir(parents=True)
    assert check_directory(ArchivalPath(fund), rules.fund, "") == []


def test_file_is_not_a_directory(tmp_path):
    (tmp_path / "42").write_text("x")
    result = check_directory(ArchivalPath(tmp_path / "42"), compose_rules().fund, "")
    assert kinds(result) == [ViolationKind.NOT_A_DIRECTORY]


def test_all_directory_checks_evaluated(tmp_path):
    rules = compose_rules()
    inv = tmp_path / "43-x"
    inv.mkdir()
    result = check_directory(ArchivalPath(inv), rules.inventory, "42")
    assert kinds(result) == [
        ViolationKind.PATTERN_MISMATCH,
        ViolationKind.PREFIX_MISMATCH,
        ViolationKind.EMPTY_DIRECTORY,
    ]


def test_prefix_mismatch_only(tmp_path):
    inv = tmp_path / "43-1"
    inv.mkdir()
    (inv / "43-1-1").mkdir()
    result = check_directory(ArchivalPath(inv), compose_rules().inventory, "42")
    assert kinds(result) == [ViolationKind.PREFIX_MISMATCH]


# --- image names -------------------------------------------------------------

def test_expected_name_with_prefix():
    name = expected_image_name("7_Б", 0, ".jpg", number_length=6, use_prefix=True, archive_prefix="GAYO")
    assert name == "GAYO-7_Б-000000.jpg"


def test_expected_name_without_prefix():
    assert expected_image_name("7_Б", 12, ".jpg", number_length=6) == "000012.jpg"
    assert expected_image_name("7_Б", 3, ".tif", number_length=3, use_prefix=True) == "7_Б-003.tif"


def test_complete_sequence(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg", "000001.jpg", "000002.jpg"])
    v = ImageSequenceValidator(ValidatorConfig(source_roots=("x",)))
    assert v.check(unit, list_children(unit)) == []


def test_missing_index_reported_once(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg", "000002.jpg"])
    v = ImageSequenceValidator(ValidatorConfig(source_roots=("x",)))
    result = v.check(unit, list_children(unit))
    assert kinds(result) == [ViolationKind.BAD_FILE_NAME]
    assert result[0].path.name == "000002.jpg"
    assert "000001.jpg" in result[0].message


def test_stray_entry_shifts_following_indices(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg", "000000_copy.jpg", "000001.jpg"])
    v = ImageSequenceValidator(ValidatorConfig(source_roots=("x",)))
    result = v.check(unit, list_children(unit))
    assert kinds(result) == [ViolationKind.BAD_FILE_NAME, ViolationKind.BAD_FILE_NAME]
    assert [r.path.name for r in result] == ["000000_copy.jpg", "000001.jpg"]


def test_directory_and_extension(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg", "000002.JPG"])
    (unit / "000001").mkdir()
    v = ImageSequenceValidator(ValidatorConfig(source_roots=("x",)))
    result = v.check(unit, list_children(unit))
    assert kinds(result) == [
        ViolationKind.NOT_A_FILE,
        ViolationKind.BAD_EXTENSION,
        ViolationKind.BAD_FILE_NAME,
        ViolationKind.BAD_EXTENSION,
        ViolationKind.BAD_FILE_NAME,
    ]


def test_any_configured_extension(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg", "000001.tif"])
    v = ImageSequenceValidator(ValidatorConfig(source_roots=("x",), extensions=("jpg", "tif")))
    assert v.check(unit, list_children(unit)) == []


def test_prefixed_names(tmp_path):
    unit = make_unit(tmp_path, ["GAYO-42-1-7-000000.jpg", "GAYO-42-1-7-000001.jpg"])
    cfg = ValidatorConfig(source_roots=("x",), use_prefix=True, archive_prefix="GAYO")
    assert ImageSequenceValidator(cfg).check(unit, list_children(unit)) == []


def test_empty_unit_has_no_image_violations(tmp_path):
    unit = make_unit(tmp_path, [])
    v = ImageSequenceValidator(ValidatorConfig(source_roots=("x",)))
    assert v.check(unit, list_children(unit)) == []


def test_integrity_checked_for_files_only(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg", "000001.jpg"])
    (unit / "000002.jpg").mkdir()
    checker = FakeChecker(bad={"000001.jpg"})
    cfg = ValidatorConfig(source_roots=("x",), check_images=True)
    result = ImageSequenceValidator(cfg, checker).check(unit, list_children(unit))
    assert kinds(result) == [ViolationKind.CORRUPT_IMAGE, ViolationKind.NOT_A_FILE]
    assert checker.calls == ["000000.jpg", "000001.jpg"]


def test_integrity_disabled_ignores_checker(tmp_path):
    unit = make_unit(tmp_path, ["000000.jpg"])
    checker = FakeChecker(bad={"000000.jpg"})
    cfg = ValidatorConfig(source_roots=("x",))
    assert ImageSequenceValidator(cfg, checker).check(unit, list_children(unit)) == []
    assert checker.calls == []


def test_archival_path_derived_facts(tmp_path):
    (tmp_path / "42").mkdir()
    p = ArchivalPath.of(str(tmp_path / "42") + "/")
    assert p.name == "42"
    assert p.parent.path == tmp_path
    assert p.exists and p.is_dir() and not p.is_file()
    image = ArchivalPath.of(tmp_path / "42" / "000000.jpg")
    assert image.extension == ".jpg"
    assert not image.exists


def test_prefix_carried_by_rule(tmp_path):
    inv = tmp_path / "43-1"
    inv.mkdir()
    (inv / "43-1-1").mkdir()
    rule = compose_rules().inventory
    assert rule.prefix == ""
    assert check_directory(ArchivalPath(inv), rule) == []
    result = check_directory(ArchivalPath(inv), rule.with_prefix("42"))
    assert kinds(result) == [ViolationKind.PREFIX_MISMATCH]
    assert check_directory(ArchivalPath(inv), rule.with_prefix("42"), "43") == []
