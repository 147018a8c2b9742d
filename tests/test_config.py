from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from pb_jelly_gen import gen


def test_builder_defaults() -> None:
    config = gen.GenProtos.builder(context_root="/crate")

    assert config.context_root == Path("/crate")
    assert config.resolved_gen_path() == Path("/crate") / "gen"
    assert config.sources == ()
    assert config.includes == ()
    assert config.extensions is True
    assert config.recreate_out_path is False
    assert config.dedupe is False


def test_builder_reads_context_root_from_environ_once() -> None:
    environ = {"CARGO_MANIFEST_DIR": "/from/env"}

    config = gen.GenProtos.builder(environ=environ)
    environ["CARGO_MANIFEST_DIR"] = "/changed"

    assert config.resolved_gen_path() == Path("/from/env") / "gen"


def test_explicit_context_root_wins_over_environ() -> None:
    config = gen.GenProtos.builder("/explicit", environ={"CARGO_MANIFEST_DIR": "/env"})

    assert config.context_root == Path("/explicit")


def test_missing_context_root_is_config_error_at_resolution() -> None:
    config = gen.GenProtos.builder(environ={})

    with pytest.raises(gen.ConfigError) as exc_info:
        config.resolved_gen_path()

    assert exc_info.value.code == "MISSING_CONTEXT_ROOT"
    assert "abs_out_path" in (exc_info.value.suggestion or "")


def test_abs_out_path_does_not_need_context_root(tmp_path: Path) -> None:
    config = gen.GenProtos.builder(environ={}).abs_out_path(tmp_path / "out")

    assert config.resolved_gen_path() == tmp_path / "out"


def test_out_path_is_relative_to_context_root() -> None:
    config = gen.GenProtos.builder("/crate").out_path("src/generated")

    assert config.resolved_gen_path() == Path("/crate/src/generated")


def test_setters_return_new_values_and_keep_order() -> None:
    base = gen.GenProtos.builder("/crate")

    config = (
        base.src_path("a")
        .src_paths(["b", Path("c")])
        .include_path("x")
        .include_paths(["y", "z"])
        .include_extensions(False)
        .cleanup_out_path(True)
        .dedupe_schema_files(True)
        .protoc_executable("/opt/protoc")
        .python_executable("/usr/bin/python3")
    )

    assert base.sources == ()
    assert config.sources == (Path("a"), Path("b"), Path("c"))
    assert config.includes == (Path("x"), Path("y"), Path("z"))
    assert config.extensions is False
    assert config.recreate_out_path is True
    assert config.dedupe is True
    assert config.protoc == "/opt/protoc"
    assert config.python == "/usr/bin/python3"


def test_config_is_frozen() -> None:
    config = gen.GenProtos.builder("/crate")

    with pytest.raises(FrozenInstanceError):
        config.sources = (Path("x"),)  # type: ignore[misc]


def test_no_existence_checks_at_configuration_time(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist"

    config = gen.GenProtos.builder(tmp_path).src_path(missing).include_path(missing)

    assert config.sources == (missing,)


def test_unknown_error_code_is_rejected() -> None:
    with pytest.raises(ValueError):
        gen.ConfigError("NOT_A_CODE", "boom")
