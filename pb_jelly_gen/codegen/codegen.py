"""protoc plugin that emits Rust bindings.

Installed into the throwaway venv as the `protoc-gen-rust` entry point.
protoc writes a serialized CodeGeneratorRequest to stdin and reads a
CodeGeneratorResponse from stdout.
"""

import sys
from collections import defaultdict

from google.protobuf.compiler import plugin_pb2
from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from proto.rust import extensions_pb2

SCALAR_TYPES = {
    FieldDescriptorProto.TYPE_DOUBLE: "f64",
    FieldDescriptorProto.TYPE_FLOAT: "f32",
    FieldDescriptorProto.TYPE_INT64: "i64",
    FieldDescriptorProto.TYPE_UINT64: "u64",
    FieldDescriptorProto.TYPE_INT32: "i32",
    FieldDescriptorProto.TYPE_FIXED64: "u64",
    FieldDescriptorProto.TYPE_FIXED32: "u32",
    FieldDescriptorProto.TYPE_BOOL: "bool",
    FieldDescriptorProto.TYPE_STRING: "::std::string::String",
    FieldDescriptorProto.TYPE_BYTES: "::std::vec::Vec<u8>",
    FieldDescriptorProto.TYPE_UINT32: "u32",
    FieldDescriptorProto.TYPE_SFIXED32: "i32",
    FieldDescriptorProto.TYPE_SFIXED64: "i64",
    FieldDescriptorProto.TYPE_SINT32: "i32",
    FieldDescriptorProto.TYPE_SINT64: "i64",
}


def rust_type(field):
    if field.type in SCALAR_TYPES:
        base = SCALAR_TYPES[field.type]
        if field.type == FieldDescriptorProto.TYPE_BYTES:
            override = field.options.Extensions[extensions_pb2.type]
            if override:
                base = override
    else:
        base = field.type_name.rsplit(".", 1)[-1]
    if field.options.Extensions[extensions_pb2.box]:
        base = f"::std::boxed::Box<{base}>"
    if field.label == FieldDescriptorProto.LABEL_REPEATED:
        return f"::std::vec::Vec<{base}>"
    if field.type == FieldDescriptorProto.TYPE_MESSAGE:
        return f"::std::option::Option<{base}>"
    return base


def render_file(proto_file):
    derives = "#[derive(Clone, Debug, Default, PartialEq)]"
    if proto_file.options.Extensions[extensions_pb2.serde_derive]:
        derives = "#[derive(Clone, Debug, Default, PartialEq, Serialize, Deserialize)]"

    lines = [f"// @generated from {proto_file.name}. Do not edit.", ""]
    for enum in proto_file.enum_type:
        lines.append("#[derive(Clone, Copy, Debug, PartialEq, Eq, Hash)]")
        lines.append(f"pub struct {enum.name}(pub i32);")
        lines.append(f"impl {enum.name} {{")
        for value in enum.value:
            lines.append(
                f"    pub const {value.name}: {enum.name} = {enum.name}({value.number});"
            )
        lines.append("}")
        lines.append("")
    for message in proto_file.message_type:
        lines.append(derives)
        lines.append(f"pub struct {message.name} {{")
        for field in message.field:
            lines.append(f"    pub {field.name}: {rust_type(field)},")
        if message.options.Extensions[extensions_pb2.preserve_unrecognized]:
            lines.append("    pub _unrecognized: ::std::vec::Vec<u8>,")
        lines.append("}")
        lines.append("")
    return "\n".join(lines)


def generate(request):
    response = plugin_pb2.CodeGeneratorResponse()
    by_name = {f.name: f for f in request.proto_file}
    modules = defaultdict(set)

    for name in request.file_to_generate:
        proto_file = by_name[name]
        package_dir = proto_file.package.replace(".", "/")
        stem = name.rsplit("/", 1)[-1][: -len(".proto")]
        out = response.file.add()
        out.name = f"{package_dir}/{stem}.rs" if package_dir else f"{stem}.rs"
        out.content = render_file(proto_file)
        modules[package_dir].add(stem)

    for package_dir, stems in sorted(modules.items()):
        out = response.file.add()
        out.name = f"{package_dir}/mod.rs" if package_dir else "mod.rs"
        out.content = "".join(f"pub mod {stem};\n" for stem in sorted(stems))

    return response


def main():
    request = plugin_pb2.CodeGeneratorRequest.FromString(sys.stdin.buffer.read())
    response = generate(request)
    sys.stdout.buffer.write(response.SerializeToString())


if __name__ == "__main__":
    main()
