"""
Command Line Tests

Tests for configuration loading and end-to-end batches.
"""

import pytest

from skslc import cli
from skslc.compiler import UnavailableCompiler
from skslc.config import ConfigError, DriverConfig, load_compiler_factory, load_config
from skslc.driver.errors import ResultCode


# Importable factory for SKSLC_COMPILER tests
FACTORY_SPEC = "skslc.compiler.base:UnavailableCompiler"


class TestConfig:

    def test_defaults(self):
        config = load_config({})
        assert config == DriverConfig()
        assert config.compiler_factory is UnavailableCompiler
        assert not config.debug

    def test_compiler_from_environment(self):
        config = load_config({"SKSLC_COMPILER": FACTORY_SPEC})
        assert config.compiler_factory is UnavailableCompiler

    @pytest.mark.parametrize("value,debug", [("1", True), ("yes", True), ("0", False), ("", False)])
    def test_debug(self, value, debug):
        assert load_config({"SKSLC_DEBUG": value}).debug is debug

    @pytest.mark.parametrize("spec", [
        "skslc.compiler.base",
        ":UnavailableCompiler",
        "skslc.compiler.base:",
        "skslc.compiler.base:NoSuchFactory",
        "no_such_module_for_skslc:factory",
        "skslc.compiler.caps:CAPS_NAMES",
        ".relative_module:factory",
    ])
    def test_bad_factory(self, spec):
        with pytest.raises(ConfigError):
            load_compiler_factory(spec)

    def test_dotted_attribute(self):
        factory = load_compiler_factory("skslc.compiler:base.UnavailableCompiler")
        assert factory is UnavailableCompiler


class TestRun:

    def test_batch_with_unconfigured_compiler(self, tmp_path, write_source, capsys):
        source = write_source("a.frag")
        argv = ["skslc", source, str(tmp_path / "a.glsl"), "--",
                source, str(tmp_path / "a.txt")]

        assert cli.run(argv, {}) == ResultCode.INPUT_ERROR
        assert (tmp_path / "a.glsl").read_text().startswith("### Compilation failed:")
        out = capsys.readouterr().out
        assert "no SkSL compiler backend is configured" in out
        assert "expected output filename" in out

    def test_bad_config(self, capsys):
        result = cli.run(["skslc", "a.frag", "a.glsl"], {"SKSLC_COMPILER": "nope"})
        assert result == ResultCode.INPUT_ERROR
        assert capsys.readouterr().out.startswith("skslc: SKSLC_COMPILER must look like")

    def test_empty_batch(self):
        assert cli.run(["skslc"], {}) == ResultCode.SUCCESS

    def test_main_exits_with_result(self, monkeypatch):
        monkeypatch.delenv("SKSLC_COMPILER", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["skslc", "--", "--"])
        assert exc_info.value.code == 0

    def test_main_usage_error(self, monkeypatch, capsys):
        monkeypatch.delenv("SKSLC_COMPILER", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["skslc", "only_one.frag"])
        assert exc_info.value.code == 2
        assert capsys.readouterr().out.startswith("usage: skslc")
