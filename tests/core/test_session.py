"""
End-to-end tests for the unexport pipeline with loader and renamer doubles.
"""

import pytest

from go_unexport.config import UnexportConfig
from go_unexport.core.session import UnexportSession
from go_unexport.enums import ErrorCategory
from go_unexport.errors import LoadError, PipelineError, RenamerUnavailableError
from go_unexport.loading.packages import PackageUnit

DEMO = """package demo

func Foo() int { return bar() }

func bar() int { return 1 }

type Baz struct{}
"""


@pytest.fixture
def demo_unit(go_file):
  return PackageUnit(import_path="example.com/demo", files=[go_file(DEMO)])


def _addresses(unit):
  """Maps renamer addresses of the unit's exported names to those names."""
  source = unit.files[0]
  return {
    f"{source.filename}:#{DEMO.index('Foo')}": "Foo",
    f"{source.filename}:#{DEMO.index('Baz')}": "Baz",
  }


def test_end_to_end(demo_unit, static_loader, scripted_renamer, recorder):
  renamer = scripted_renamer(
    _addresses(demo_unit),
    failures={"Baz": 'renaming this type "Baz" to "baz" would make it unexported\n\tbreaking references from "x"'},
  )
  session = UnexportSession(UnexportConfig(verbose=True), loader=static_loader([demo_unit]), renamer=renamer)

  results = session.run()

  assert [c.name for c in session.candidates] == ["Foo", "bar", "Baz"]
  assert [new for _, new in renamer.calls] == ["foo", "baz"]
  assert list(results.success.values()) == ["Foo -> foo"]

  by_name = {s.candidate.name: s for s in session.statuses}
  assert by_name["Foo"].success
  assert by_name["Baz"].category is ErrorCategory.WOULD_BREAK_CLIENTS

  out = recorder.export_text().replace("... (", "...(")
  assert "trying to unexport Foo...(success)" in out
  assert "trying to unexport Baz...(impossible: would break package clients)" in out
  assert "Foo -> foo" in out
  assert "trying to unexport bar" not in out


def test_skip_wins(demo_unit, static_loader, scripted_renamer, recorder):
  renamer = scripted_renamer(_addresses(demo_unit))
  config = UnexportConfig(skip="Foo")
  session = UnexportSession(config, loader=static_loader([demo_unit]), renamer=renamer)

  session.run()

  assert "Foo" not in [c.name for c in session.candidates]
  assert [new for _, new in renamer.calls] == ["baz"]
  assert "trying to unexport Foo" not in recorder.export_text()


def test_unexport_list_restricts(demo_unit, static_loader, scripted_renamer, recorder):
  renamer = scripted_renamer(_addresses(demo_unit))
  session = UnexportSession(UnexportConfig(unexport="Baz"), loader=static_loader([demo_unit]), renamer=renamer)

  results = session.run()

  assert [c.name for c in session.candidates] == ["Baz"]
  assert list(results.success.values()) == ["Baz -> baz"]


def test_test_variant_preferred(go_file, static_loader, scripted_renamer, recorder):
  base = go_file("package demo\n\nfunc Base() {}\n", path="pkg/base.go")
  extra = go_file("package demo\n\nfunc Helper() {}\n", path="pkg/base_test.go")
  unit = PackageUnit("example.com/demo", files=[base])
  unit.test = PackageUnit("example.com/demo [test]", files=[base, extra])

  session = UnexportSession(UnexportConfig(), loader=static_loader([unit]), renamer=scripted_renamer({}))
  session.load_targets()
  session.collect_symbols()

  assert [c.name for c in session.candidates] == ["Base", "Helper"]


def test_targets_forwarded(static_loader, scripted_renamer, recorder):
  loader = static_loader([])
  UnexportSession(UnexportConfig(targets=["./a/...", "./b"]), loader=loader, renamer=scripted_renamer({})).run()
  assert loader.requested == [["./a/...", "./b"]]


class _FailingLoader:
  def load(self, targets):
    raise LoadError("cannot find module providing package example.com/nope")


def test_load_failure_is_fatal(scripted_renamer, recorder):
  renamer = scripted_renamer({})
  session = UnexportSession(UnexportConfig(), loader=_FailingLoader(), renamer=renamer)

  with pytest.raises(PipelineError) as excinfo:
    session.run()

  assert excinfo.value.phase == "load targets"
  assert str(excinfo.value).startswith("load targets: cannot find module")
  assert renamer.calls == []


def test_missing_renamer_is_fatal(demo_unit, static_loader, scripted_renamer, recorder):
  renamer = scripted_renamer({})

  def locate():
    raise RenamerUnavailableError("'gorename' not found in PATH")

  renamer.locate = locate
  loader = static_loader([demo_unit])
  session = UnexportSession(UnexportConfig(), loader=loader, renamer=renamer)

  with pytest.raises(PipelineError, match="locate renamer"):
    session.run()

  assert loader.requested == []
  assert renamer.calls == []
