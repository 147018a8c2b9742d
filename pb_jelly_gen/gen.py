"""Rust bindings generator for protobuf schemas.

Drives `protoc` to turn `.proto` files into Rust modules. The Rust code
itself is emitted by the bundled `protoc-gen-rust` plugin (see the
`codegen` package data), which runs inside a throwaway venv pinned to the
installed protoc version.

Usage:
    python -m pb_jelly_gen --src protos --abs-out-path gen --cleanup-out-path
"""

import argparse
import logging
import os
import shutil
import subprocess
import sys
import tempfile
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

logger = logging.getLogger(__name__)

CONTEXT_ROOT_ENV = "CARGO_MANIFEST_DIR"
DEFAULT_GEN_DIR = Path("gen")
SCHEMA_SUFFIX = ".proto"
PROTOC_VERSION_PREFIX = "libprotoc"
SUPPORT_LIBRARY = "protobuf"

WORKSPACE_PREFIX = "codegen"
VENV_DIRNAME = ".codegen_venv"
EXTENSIONS_SCHEMA = Path("rust") / "extensions.proto"
EXTENSIONS_OUT_DIR = Path("proto")

_IS_WINDOWS = os.name == "nt"


# ===--- Error contracts ---=== #


VALID_ERROR_CODES = {
    "MISSING_CONTEXT_ROOT",
    "NO_SOURCES",
    "MATERIALIZE_FAILED",
    "COMPILER_NOT_FOUND",
    "BAD_COMPILER_VERSION",
    "VENV_FAILED",
    "PIP_FAILED",
    "MISSING_EXTENSIONS",
    "EXTENSIONS_FAILED",
    "BINDINGS_FAILED",
}


class GenerationError(Exception):
    def __init__(self, code: str, message: str, suggestion: str | None = None):
        if code not in VALID_ERROR_CODES:
            raise ValueError(f"Unknown error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion


class ConfigError(GenerationError):
    pass


class MaterializeError(GenerationError):
    def __init__(self, path: Path, cause: OSError):
        super().__init__(
            "MATERIALIZE_FAILED",
            f"Failed to materialize codegen asset {path}: {cause}",
        )
        self.path = path


class ProvisionError(GenerationError):
    def __init__(
        self,
        code: str,
        message: str,
        suggestion: str | None = None,
        result: "ProcessResult | None" = None,
    ):
        super().__init__(code, message, suggestion)
        self.result = result


class CompileError(GenerationError):
    def __init__(self, code: str, phase: str, result: "ProcessResult"):
        super().__init__(
            code,
            f"protoc failed during the {phase} phase (exit status {result.returncode})",
        )
        self.phase = phase
        self.result = result


# ===--- Process contracts ---=== #


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one external process call.

    Attributes:
        returncode: Exit status reported by the OS.
        stdout: Captured standard output, undecoded.
        stderr: Captured standard error, undecoded.
    """

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Invocation:
    """One external command: program, ordered arguments, env overrides.

    env holds only the variables that differ from the ambient environment.
    The runner merges them into a copy of os.environ; the process-wide
    environment is never touched.
    """

    program: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def command_line(self) -> str:
        return subprocess.list2cmdline(self.argv)


Runner = Callable[[Invocation], ProcessResult]


def run_process(invocation: Invocation) -> ProcessResult:
    """Run an invocation to completion, capturing stdout and stderr.

    Raises:
        OSError: The program could not be started (FileNotFoundError when it
            is not on PATH).
    """
    logger.debug("Running: %s", invocation.command_line())
    env = None
    if invocation.env:
        env = dict(os.environ)
        env.update(invocation.env)
    completed = subprocess.run(
        invocation.argv,
        capture_output=True,
        env=env,
        check=False,
    )
    return ProcessResult(
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


# ===--- S1 Configuration ---=== #


def resolve_context_root(environ: Mapping[str, str] | None = None) -> Path | None:
    if environ is None:
        environ = os.environ
    value = environ.get(CONTEXT_ROOT_ENV)
    if not value:
        return None
    return Path(value)


def _as_path(path: str | os.PathLike) -> Path:
    return Path(os.fspath(path))


@dataclass(frozen=True)
class GenProtos:
    """Immutable description of one generation run.

    Build one with GenProtos.builder() and chain the setters; every setter
    returns a new value. Nothing touches the filesystem until generate().

    Attributes:
        gen_path: Output directory. A relative path is resolved against
            context_root when the run starts.
        context_root: Build-context root (the crate manifest directory),
            captured once by builder().
        sources: .proto files or directories holding them. Bindings are
            generated for every schema found under these.
        includes: Extra -I directories. Searched for imports only, no
            bindings are generated for them.
        extensions: Put rust/extensions.proto on the search path.
        recreate_out_path: Delete whatever exists at gen_path before the run.
        dedupe: Drop repeated schema files reached through overlapping
            source paths.
        protoc: Name or path of the protoc executable.
        python: Interpreter used to create the throwaway venv.
    """

    gen_path: Path = DEFAULT_GEN_DIR
    context_root: Path | None = None
    sources: tuple[Path, ...] = ()
    includes: tuple[Path, ...] = ()
    extensions: bool = True
    recreate_out_path: bool = False
    dedupe: bool = False
    protoc: str = "protoc"
    python: str = sys.executable

    @classmethod
    def builder(
        cls,
        context_root: str | os.PathLike | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "GenProtos":
        """Create a default configuration.

        When context_root is not given it is read once from the
        CARGO_MANIFEST_DIR entry of environ (os.environ by default).
        """
        if context_root is None:
            root = resolve_context_root(environ)
        else:
            root = _as_path(context_root)
        return cls(context_root=root)

    def out_path(self, path: str | os.PathLike) -> "GenProtos":
        """Output path relative to the build-context root.

        Defaults to <build-context root>/gen.
        """
        return replace(self, gen_path=_as_path(path))

    def abs_out_path(self, path: str | os.PathLike) -> "GenProtos":
        """Output path used as given, without the build-context root."""
        return replace(self, gen_path=_as_path(path).absolute())

    def src_path(self, path: str | os.PathLike) -> "GenProtos":
        """Add a .proto file, or a directory containing them."""
        return replace(self, sources=(*self.sources, _as_path(path)))

    def src_paths(self, paths: Iterable[str | os.PathLike]) -> "GenProtos":
        added = tuple(_as_path(p) for p in paths)
        return replace(self, sources=(*self.sources, *added))

    def include_path(self, path: str | os.PathLike) -> "GenProtos":
        """Add a directory protoc searches for imports.

        No bindings are generated for schemas found only here.
        """
        return replace(self, includes=(*self.includes, _as_path(path)))

    def include_paths(self, paths: Iterable[str | os.PathLike]) -> "GenProtos":
        added = tuple(_as_path(p) for p in paths)
        return replace(self, includes=(*self.includes, *added))

    def include_extensions(self, include: bool) -> "GenProtos":
        """Make rust/extensions.proto importable. Defaults to True."""
        return replace(self, extensions=include)

    def cleanup_out_path(self, cleanup: bool) -> "GenProtos":
        """Delete and recreate the output path before generating."""
        return replace(self, recreate_out_path=cleanup)

    def dedupe_schema_files(self, dedupe: bool) -> "GenProtos":
        return replace(self, dedupe=dedupe)

    def protoc_executable(self, name: str) -> "GenProtos":
        return replace(self, protoc=name)

    def python_executable(self, path: str | os.PathLike) -> "GenProtos":
        return replace(self, python=os.fspath(path))

    def resolved_gen_path(self) -> Path:
        if self.gen_path.is_absolute():
            return self.gen_path
        if self.context_root is None:
            raise ConfigError(
                "MISSING_CONTEXT_ROOT",
                f"Cannot resolve relative output path {self.gen_path}: "
                f"{CONTEXT_ROOT_ENV} is not set.",
                "Run from a cargo build script, pass context_root to "
                "GenProtos.builder(), or use abs_out_path().",
            )
        return self.context_root / self.gen_path

    def generate(self, runner: Runner | None = None) -> "GenerationResult":
        """Run the full pipeline and generate Rust bindings.

        Raises:
            ConfigError: Output path cannot be resolved.
            MaterializeError: Codegen assets could not be unpacked.
            ProvisionError: protoc version probe or venv setup failed.
            CompileError: Either protoc phase exited non-zero. The captured
                output is on err.result.
            OSError: Output directory could not be prepared.
        """
        if runner is None:
            runner = run_process
        result = run_generate(self, runner)
        if not result.process.ok:
            raise CompileError("BINDINGS_FAILED", "bindings", result.process)
        logger.info("Protos generated successfully into %s", result.output_dir)
        return result


def gen_protos(
    src_paths: Iterable[str | os.PathLike], runner: Runner | None = None
) -> "GenerationResult":
    """No-frills entry point: generate bindings into <context root>/gen."""
    return GenProtos.builder().src_paths(src_paths).generate(runner)


# ===--- S2 Embedded assets ---=== #


@dataclass(frozen=True)
class AssetFile:
    path: Path
    contents: bytes


@dataclass(frozen=True)
class AssetDir:
    """One directory of the bundled codegen tree.

    Paths are relative to the bundle root. The root itself has path ".".
    """

    path: Path
    files: tuple[AssetFile, ...] = ()
    dirs: tuple["AssetDir", ...] = ()

    def walk_files(self) -> Iterator[AssetFile]:
        yield from self.files
        for child in self.dirs:
            yield from child.walk_files()


_BUNDLE_SKIP = {"__pycache__"}


def _load_dir(node: Traversable, rel: Path) -> AssetDir:
    files: list[AssetFile] = []
    dirs: list[AssetDir] = []
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        if child.name in _BUNDLE_SKIP:
            continue
        if child.is_dir():
            dirs.append(_load_dir(child, rel / child.name))
        elif child.is_file():
            files.append(AssetFile(rel / child.name, child.read_bytes()))
    return AssetDir(rel, tuple(files), tuple(dirs))


def load_asset_bundle(root: Traversable | None = None) -> AssetDir:
    """Read the codegen tree shipped as package data."""
    if root is None:
        root = resources.files("pb_jelly_gen") / "codegen"
    return _load_dir(root, Path("."))


def write_bundle(bundle: AssetDir, dest: Path) -> None:
    """Recreate bundle under dest, which must already exist.

    Files are created exclusively; an existing file at a target path is an
    error. Files are made executable (0o777) on platforms with mode bits.

    Raises:
        MaterializeError: Any directory or file could not be created.
    """
    for asset in bundle.files:
        target = dest / asset.path
        try:
            with open(target, "xb") as fh:
                fh.write(asset.contents)
            if not _IS_WINDOWS:
                os.chmod(target, 0o777)
        except OSError as err:
            raise MaterializeError(target, err) from err

    for child in bundle.dirs:
        target = dest / child.path
        try:
            target.mkdir()
        except OSError as err:
            raise MaterializeError(target, err) from err
        write_bundle(child, dest)


def materialize_bundle(bundle: AssetDir) -> tempfile.TemporaryDirectory:
    """Unpack bundle into a new temporary directory owned by the caller.

    The returned TemporaryDirectory removes the tree when closed or used as
    a context manager. On failure the partial tree is removed first.
    """
    workspace = tempfile.TemporaryDirectory(
        prefix=WORKSPACE_PREFIX, ignore_cleanup_errors=True
    )
    try:
        write_bundle(bundle, Path(workspace.name))
    except MaterializeError:
        workspace.cleanup()
        raise
    logger.debug("Materialized codegen assets into %s", workspace.name)
    return workspace


# ===--- S3 Isolated environment ---=== #


@dataclass(frozen=True)
class Venv:
    """Throwaway virtual environment living inside the workspace.

    Attributes:
        root: Venv directory, <workspace>/.codegen_venv.
        bin_dir: Executable directory (bin, or Scripts on Windows).
        protobuf_version: Support library version installed, equal to the
            protoc version.
    """

    root: Path
    bin_dir: Path
    protobuf_version: str

    def executable(self, name: str) -> Path:
        return self.bin_dir / (f"{name}.exe" if _IS_WINDOWS else name)


def parse_protoc_version(output: str) -> str:
    """Extract the version from `protoc --version` output.

    >>> parse_protoc_version("libprotoc 3.21.7\\n")
    '3.21.7'
    """
    parts = output.split()
    if not parts or parts[0] != PROTOC_VERSION_PREFIX:
        raise ProvisionError(
            "BAD_COMPILER_VERSION",
            f"Unexpected protoc --version output: {output.strip()!r}",
            f"Expected '{PROTOC_VERSION_PREFIX} <version>'. Check that protoc "
            "on PATH is the protobuf compiler.",
        )
    if len(parts) < 2:
        raise ProvisionError(
            "BAD_COMPILER_VERSION",
            f"No version found in protoc --version output: {output.strip()!r}",
        )
    return parts[1]


def query_protoc_version(config: GenProtos, runner: Runner = run_process) -> str:
    invocation = Invocation(config.protoc, ("--version",))
    try:
        result = runner(invocation)
    except FileNotFoundError as err:
        raise ProvisionError(
            "COMPILER_NOT_FOUND",
            f"Failed to run {config.protoc} --version: {err}",
            "Install protoc and make sure it is on PATH.",
        ) from err
    if not result.ok:
        raise ProvisionError(
            "BAD_COMPILER_VERSION",
            f"{config.protoc} --version exited with status {result.returncode}",
            result=result,
        )
    return parse_protoc_version(result.stdout_text)


def _venv_bin_dir(venv_root: Path) -> Path:
    return venv_root / ("Scripts" if _IS_WINDOWS else "bin")


def _check_step(code: str, what: str, result: ProcessResult) -> None:
    if not result.ok:
        raise ProvisionError(
            code,
            f"Failed to {what} (exit status {result.returncode})",
            result=result,
        )


def provision_venv(
    workspace: Path, config: GenProtos, runner: Runner = run_process
) -> Venv:
    """Build the throwaway venv the protoc plugin runs in.

    Steps, each fatal on non-zero exit:
      1. probe protoc for its version
      2. python -m venv <workspace>/.codegen_venv
      3. pip install --upgrade pip protobuf==<protoc version>
      4. pip install -e <workspace>

    The protobuf pin keeps the generated extensions_pb2 module loadable by
    the runtime the plugin imports.

    Returns:
        Venv describing the environment. Its bin_dir is not added to
        os.environ; callers pass it explicitly via build_search_path.
    """
    version = query_protoc_version(config, runner)
    logger.info("Detected protoc %s", version)

    venv_root = workspace / VENV_DIRNAME
    _check_step(
        "VENV_FAILED",
        "create venv",
        runner(Invocation(config.python, ("-m", "venv", os.fspath(venv_root)))),
    )
    venv = Venv(
        root=venv_root, bin_dir=_venv_bin_dir(venv_root), protobuf_version=version
    )

    _check_step(
        "PIP_FAILED",
        f"pip install {SUPPORT_LIBRARY}=={version}",
        runner(
            Invocation(
                os.fspath(venv.executable("python")),
                (
                    "-m",
                    "pip",
                    "install",
                    "--upgrade",
                    "pip",
                    f"{SUPPORT_LIBRARY}=={version}",
                ),
            )
        ),
    )
    _check_step(
        "PIP_FAILED",
        "pip install the codegen plugin",
        runner(
            Invocation(
                os.fspath(venv.executable("pip")),
                ("install", "-e", os.fspath(workspace)),
            )
        ),
    )
    logger.info("Provisioned codegen venv at %s", venv_root)
    return venv


def build_search_path(bin_dir: Path, ambient: str | None = None) -> str:
    """PATH value with bin_dir in front of the ambient PATH."""
    if ambient is None:
        ambient = os.environ.get("PATH", "")
    entries = [os.fspath(bin_dir)]
    entries.extend(p for p in ambient.split(os.pathsep) if p)
    return os.pathsep.join(entries)


# ===--- S4 Schema discovery ---=== #


def _walk_schema_files(root: Path) -> Iterator[Path]:
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return

    for entry in entries:
        path = Path(entry.path)
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from _walk_schema_files(path)
            elif path.suffix == SCHEMA_SUFFIX and entry.is_file():
                yield path
        except OSError:
            continue


def iter_schema_files(src_path: Path) -> Iterator[Path]:
    """Yield .proto files under one source path, depth first, by name.

    A source that is not a directory is a single candidate file. Unreadable
    entries and broken symlinks are skipped.
    """
    root = src_path.absolute()
    if root.is_dir():
        yield from _walk_schema_files(root)
    elif root.suffix == SCHEMA_SUFFIX and root.is_file():
        yield root


def discover_schema_files(
    src_paths: Iterable[Path], dedupe: bool = False
) -> tuple[Path, ...]:
    found: list[Path] = []
    seen: set[Path] = set()
    for src in src_paths:
        for path in iter_schema_files(src):
            if dedupe:
                if path in seen:
                    continue
                seen.add(path)
            found.append(path)
    return tuple(found)


# ===--- S5 Compiler invocations ---=== #


def build_extensions_invocation(
    workspace: Path, config: GenProtos, env: Mapping[str, str] | None = None
) -> Invocation:
    """protoc call turning rust/extensions.proto into extensions_pb2.py."""
    return Invocation(
        config.protoc,
        (
            "-I",
            os.fspath(workspace),
            "--python_out",
            os.fspath(workspace / EXTENSIONS_OUT_DIR),
            os.fspath(workspace / EXTENSIONS_SCHEMA),
        ),
        dict(env or {}),
    )


def build_bindings_invocation(
    config: GenProtos,
    workspace: Path,
    gen_path: Path,
    schema_files: Iterable[Path],
    search_path: str,
) -> Invocation:
    """protoc call generating Rust bindings for every schema file.

    Argument order: -I per source path, -I workspace (extensions enabled),
    -I per include path, --rust_out, then the schema files.
    """
    args: list[str] = []
    for path in config.sources:
        args.extend(("-I", os.fspath(path.absolute())))
    if config.extensions:
        args.extend(("-I", os.fspath(workspace)))
    for path in config.includes:
        args.extend(("-I", os.fspath(path.absolute())))
    args.extend(("--rust_out", os.fspath(gen_path)))
    args.extend(os.fspath(p) for p in schema_files)
    return Invocation(config.protoc, tuple(args), {"PATH": search_path})


def check_extensions_schema(workspace: Path) -> None:
    """Fail before provisioning when the bundle lacks rust/extensions.proto."""
    schema = workspace / EXTENSIONS_SCHEMA
    if not schema.is_file():
        raise ProvisionError(
            "MISSING_EXTENSIONS",
            f"Extension schema not found at {schema}",
            "Reinstall pb-jelly-gen; its codegen package data is incomplete.",
        )


def compile_extensions(
    workspace: Path,
    config: GenProtos,
    env: Mapping[str, str] | None = None,
    runner: Runner = run_process,
) -> None:
    invocation = build_extensions_invocation(workspace, config, env)
    logger.debug("Extensions: %s", invocation.command_line())
    result = runner(invocation)
    if not result.ok:
        raise CompileError("EXTENSIONS_FAILED", "extensions", result)


# ===--- S6 Pipeline ---=== #


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation run.

    Attributes:
        output_dir: Resolved directory protoc wrote bindings into.
        schema_files: Files passed to protoc, in argument order.
        process: Raw result of the bindings phase.
    """

    output_dir: Path
    schema_files: tuple[Path, ...]
    process: ProcessResult


def prepare_output_dir(gen_path: Path, cleanup: bool) -> None:
    """Create gen_path, first deleting whatever is there when cleanup is set."""
    if cleanup and (gen_path.exists() or gen_path.is_symlink()):
        logger.info("Cleaning up existing gen path %s", gen_path)
        if gen_path.is_dir() and not gen_path.is_symlink():
            shutil.rmtree(gen_path)
        else:
            gen_path.unlink()
    if not gen_path.exists():
        logger.info("Creating gen path %s", gen_path)
        gen_path.mkdir(parents=True)


def run_generate(
    config: GenProtos,
    runner: Runner = run_process,
    bundle: AssetDir | None = None,
) -> GenerationResult:
    """Execute the pipeline and return the raw bindings-phase result.

    Stages: prepare output -> materialize -> provision -> extensions ->
    discover -> bindings. Every stage before the last raises on failure;
    the bindings result is returned unchecked so the caller decides.
    """
    gen_path = config.resolved_gen_path()
    prepare_output_dir(gen_path, config.recreate_out_path)

    if bundle is None:
        bundle = load_asset_bundle()

    with materialize_bundle(bundle) as workspace_name:
        workspace = Path(workspace_name)
        check_extensions_schema(workspace)
        venv = provision_venv(workspace, config, runner)
        search_path = build_search_path(venv.bin_dir)

        logger.info("Compiling %s", EXTENSIONS_SCHEMA.as_posix())
        compile_extensions(workspace, config, runner=runner)

        schema_files = discover_schema_files(config.sources, dedupe=config.dedupe)
        logger.info("Found %d schema files", len(schema_files))
        for path in schema_files:
            logger.debug("  %s", path)

        invocation = build_bindings_invocation(
            config, workspace, gen_path, schema_files, search_path
        )
        logger.debug("Bindings: %s", invocation.command_line())
        process = runner(invocation)

    return GenerationResult(
        output_dir=gen_path, schema_files=schema_files, process=process
    )


# ===--- CLI ---=== #


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pb-jelly-gen", description="Generate Rust bindings for .proto files"
    )

    out_group = parser.add_mutually_exclusive_group()
    out_group.add_argument("--out-path", type=Path, default=None)
    out_group.add_argument("--abs-out-path", type=Path, default=None)

    parser.add_argument("--src", action="append", type=Path, default=None)
    parser.add_argument("--include", action="append", type=Path, default=None)
    parser.add_argument("--no-extensions", action="store_true", default=False)
    parser.add_argument("--cleanup-out-path", action="store_true", default=False)
    parser.add_argument("--dedupe", action="store_true", default=False)
    parser.add_argument("--context-root", type=Path, default=None)
    parser.add_argument("--protoc", type=str, default="protoc")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_argument_parser().parse_args(argv)


def config_from_args(
    args: argparse.Namespace, environ: Mapping[str, str] | None = None
) -> GenProtos:
    if not args.src:
        raise ConfigError(
            "NO_SOURCES",
            "At least one --src is required.",
            "Pass a .proto file or a directory: --src protos",
        )

    config = GenProtos.builder(args.context_root, environ)
    if args.abs_out_path is not None:
        config = config.abs_out_path(args.abs_out_path)
    elif args.out_path is not None:
        config = config.out_path(args.out_path)

    return (
        config.src_paths(args.src)
        .include_paths(args.include or ())
        .include_extensions(not args.no_extensions)
        .cleanup_out_path(args.cleanup_out_path)
        .dedupe_schema_files(args.dedupe)
        .protoc_executable(args.protoc)
    )


def format_failure(err: GenerationError) -> str:
    """Human-readable diagnostic for a failed run, including protoc output."""
    lines = [f"Error [{err.code}]: {err.message}"]
    if err.suggestion:
        lines.append(f"Hint: {err.suggestion}")
    result = getattr(err, "result", None)
    if result is not None:
        lines.append(f"status={result.returncode}")
        lines.append(f"stdout={result.stdout_text}")
        lines.append(f"stderr={result.stderr_text}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = config_from_args(args)
        config.generate()
    except GenerationError as err:
        print(format_failure(err), file=sys.stderr)
        raise SystemExit(1) from err
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        raise SystemExit(1) from err


if __name__ == "__main__":
    main()
