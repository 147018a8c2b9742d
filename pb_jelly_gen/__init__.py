"""Generate Rust bindings for proto2 and proto3 files.

From a build step::

    from pb_jelly_gen import GenProtos

    (
        GenProtos.builder()
        .out_path("gen")
        .src_path("protos")
        .cleanup_out_path(True)
        .generate()
    )
"""

from pb_jelly_gen.gen import (
    CompileError,
    ConfigError,
    GenerationError,
    GenerationResult,
    GenProtos,
    MaterializeError,
    ProcessResult,
    ProvisionError,
    gen_protos,
)

__all__ = [
    "CompileError",
    "ConfigError",
    "GenerationError",
    "GenerationResult",
    "GenProtos",
    "MaterializeError",
    "ProcessResult",
    "ProvisionError",
    "gen_protos",
]
