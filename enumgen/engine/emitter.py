#!/usr/bin/env python3
# Design: DESIGN.md
"""
Java Enum Emitter

Renders an EnumDefinition as Java source, in this fixed order:

    // banner                       (when the source table is known)
    package <package>;              (when configured)
    public enum <TypeName> {
        CONST_A(v0, v1, ...),       ',' after every member but the last
        CONST_B(v0, v1, ...);       ';' after the last
        private final <Type> <field>;
        private <TypeName>(<Type> <field>, ...) { this.<field> = <field>; ... }
        public <Type> get<Field>() / public boolean is<Field>()
    }

A table without rows renders an empty enum body: no constants, no terminator
line, no constructor. The output contains no timestamp, so regenerating from
unchanged data yields byte-identical text.
"""

from .models import EnumDefinition, EnumMember, FieldSchema
from .naming import upper_first

INDENT = "    "


class JavaEnumCodegen:
    """Generate Java enum source from an EnumDefinition."""

    def __init__(self, package: str | None = None):
        self.package = package

    def generate(self, definition: EnumDefinition) -> str:
        """Generate the complete .java file content."""
        lines = self._generate_header(definition)
        lines.append(f"public enum {definition.type_name} {{")

        sections = [
            self._generate_constants(definition.members, definition.schema),
            self._generate_fields(definition.schema),
            self._generate_constructor(definition),
            self._generate_accessors(definition.schema),
        ]
        body: list[str] = []
        for section in sections:
            if not section:
                continue
            if body:
                body.append("")
            body.extend(section)

        lines.extend(body)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _generate_header(self, definition: EnumDefinition) -> list[str]:
        lines = []
        if definition.source_table:
            lines.append(f"// AUTO-GENERATED by enumgen from table {definition.source_table}")
            lines.append("// DO NOT EDIT MANUALLY")
            lines.append("")
        if self.package:
            lines.append(f"package {self.package};")
            lines.append("")
        return lines

    def _generate_constants(self, members: list[EnumMember], schema: FieldSchema) -> list[str]:
        if not members:
            # Fields after an empty constant list still need the terminator
            return [f"{INDENT};"] if len(schema) else []
        lines = []
        last = len(members) - 1
        for i, member in enumerate(members):
            separator = ";" if i == last else ","
            lines.append(f"{INDENT}{member.name}({', '.join(member.values)}){separator}")
        return lines

    def _generate_fields(self, schema: FieldSchema) -> list[str]:
        return [
            f"{INDENT}private final {output_type.java_type} {name};"
            for name, output_type in schema.items()
        ]

    def _generate_constructor(self, definition: EnumDefinition) -> list[str]:
        schema = definition.schema
        if not definition.members and not len(schema):
            return []
        params = ", ".join(f"{t.java_type} {name}" for name, t in schema.items())
        lines = [f"{INDENT}private {definition.type_name}({params}) {{"]
        for name in schema:
            lines.append(f"{INDENT * 2}this.{name} = {name};")
        lines.append(f"{INDENT}}}")
        return lines

    def _generate_accessors(self, schema: FieldSchema) -> list[str]:
        lines: list[str] = []
        for name, output_type in schema.items():
            prefix = "is" if output_type.is_boolean else "get"
            if lines:
                lines.append("")
            lines.append(f"{INDENT}public {output_type.java_type} {prefix}{upper_first(name)}() {{")
            lines.append(f"{INDENT * 2}return this.{name};")
            lines.append(f"{INDENT}}}")
        return lines


def emit(
    type_name: str,
    schema: FieldSchema,
    members: list[EnumMember],
    package: str | None = None,
    source_table: str | None = None,
) -> str:
    """Render one enum definition as Java source text."""
    definition = EnumDefinition(
        type_name=type_name,
        schema=schema,
        members=members,
        source_table=source_table,
    )
    return JavaEnumCodegen(package=package).generate(definition)
