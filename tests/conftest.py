import sys
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pb_jelly_gen import gen  # noqa: E402


def classify_invocation(invocation: gen.Invocation) -> str:
    args = invocation.args
    if args == ("--version",):
        return "version"
    if args[:2] == ("-m", "venv"):
        return "venv"
    if args[:3] == ("-m", "pip", "install"):
        return "pip_protobuf"
    if args[:2] == ("install", "-e"):
        return "pip_editable"
    if "--python_out" in args:
        return "extensions"
    if "--rust_out" in args:
        return "bindings"
    return "unknown"


class FakeRunner:
    """Records invocations and answers with scripted results per step."""

    def __init__(self, version_output: str = "libprotoc 3.21.7\n"):
        self.calls: list[gen.Invocation] = []
        self.results: dict[str, gen.ProcessResult] = {
            "version": gen.ProcessResult(0, version_output.encode("utf-8"), b""),
        }
        self.hooks: dict[str, Callable[[gen.Invocation], None]] = {}

    def fail(self, step: str, returncode: int = 1, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.results[step] = gen.ProcessResult(returncode, stdout, stderr)

    def __call__(self, invocation: gen.Invocation) -> gen.ProcessResult:
        self.calls.append(invocation)
        step = classify_invocation(invocation)
        hook = self.hooks.get(step)
        if hook is not None:
            hook(invocation)
        return self.results.get(step, gen.ProcessResult(0))

    def steps(self) -> list[str]:
        return [classify_invocation(call) for call in self.calls]

    def call_for(self, step: str) -> gen.Invocation:
        matches = [call for call in self.calls if classify_invocation(call) == step]
        assert len(matches) == 1, f"expected one {step} call, got {len(matches)}"
        return matches[0]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def proto_tree(tmp_path: Path) -> Path:
    src = tmp_path / "protos"
    (src / "pkg").mkdir(parents=True)
    (src / "a.proto").write_text('syntax = "proto3";\n', encoding="utf-8")
    (src / "pkg" / "b.proto").write_text('syntax = "proto3";\n', encoding="utf-8")
    (src / "notes.txt").write_text("not a schema\n", encoding="utf-8")
    return src


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., gen.GenProtos]:
    def _make_config(**overrides: object) -> gen.GenProtos:
        base: dict[str, object] = {
            "gen_path": tmp_path / "gen",
            "context_root": tmp_path,
            "protoc": "protoc",
            "python": "python3",
        }
        base.update(overrides)
        return gen.GenProtos(**base)

    return _make_config


@pytest.fixture
def make_bundle() -> Callable[..., gen.AssetDir]:
    def _make_bundle(
        files: dict[str, bytes] | None = None,
    ) -> gen.AssetDir:
        """Build an AssetDir tree from a flat {posix path: bytes} mapping."""
        if files is None:
            files = {
                "codegen.py": b"print('plugin')\n",
                "rust/extensions.proto": b'syntax = "proto2";\n',
                "proto/__init__.py": b"",
            }

        def _build(rel: Path) -> gen.AssetDir:
            direct = []
            children = set()
            for raw, contents in files.items():
                path = Path(raw)
                if path.parent == rel:
                    direct.append(gen.AssetFile(path, contents))
                elif rel in path.parents:
                    children.add(path.relative_to(rel).parts[0])
            dirs = tuple(_build(rel / name) for name in sorted(children))
            return gen.AssetDir(rel, tuple(direct), dirs)

        return _build(Path("."))

    return _make_bundle
