#!/usr/bin/env python3

import importlib.util
import sys
from datetime import datetime, timezone

import pytest

from swagger_to_code.pipeline import CodeGeneratorConfig, PythonBackend, generate
from swagger_to_code.pipeline.analyzer import TypeKind, TypeRef
from swagger_to_code.pipeline.schema_model import parse_document


def render(data: dict, **config) -> str:
    """Generate the models of a document without header or helpers"""
    config = CodeGeneratorConfig(add_generation_comment=False, include_helpers=False, **config)
    return generate(parse_document(data), PythonBackend(config))


class TestPythonTypes:
    """Test cases for Python type rendering"""

    def setup_method(self):
        self.backend = PythonBackend()

    @pytest.mark.parametrize(
        "type_ref,expected",
        [
            (TypeRef.primitive(TypeKind.U16), "int"),
            (TypeRef.primitive(TypeKind.F64), "float"),
            (TypeRef.primitive(TypeKind.STRING), "str"),
            (TypeRef.primitive(TypeKind.DATE_TIME), "datetime"),
            (TypeRef.untyped(), "Any"),
            (TypeRef.list_of(TypeRef.primitive(TypeKind.U8)), "bytes"),
            (TypeRef.list_of(TypeRef.named("pet")), "list[Pet]"),
            (TypeRef.map_of(TypeRef.primitive(TypeKind.BOOL)), "dict[str, bool]"),
            (TypeRef.nullable(TypeRef.map_of(TypeRef.untyped())), "dict[str, Any] | None"),
        ],
    )
    def test_render_type(self, type_ref, expected):
        assert self.backend.render_type(type_ref) == expected

    def test_identifiers(self):
        assert self.backend.format_type_name("class") == "Class"
        assert self.backend.format_var_name("class") == "class_"
        assert self.backend.format_var_name("type") == "type_"
        assert self.backend.format_var_name("str") == "str_"
        assert self.backend.format_var_name("petId") == "pet_id"

    @pytest.mark.parametrize(
        "value,expected",
        [("available", "AVAILABLE"), ("in-progress", "IN_PROGRESS"), ("", "EMPTY"), ("2xx", "VALUE_2_XX")],
    )
    def test_enum_member(self, value, expected):
        assert self.backend.format_enum_member(value) == expected


class TestPythonDeclarations:
    """Test cases for generated Python declarations"""

    def test_record(self):
        """Scenario: required and optional string fields"""
        output = render(
            {
                "definitions": {
                    "Pet": {
                        "type": "object",
                        "required": ["name"],
                        "properties": {"name": {"type": "string"}, "tag": {"type": "string"}},
                    }
                }
            }
        )
        assert output == ("@dataclass_json\n" "@dataclass\n" "class Pet:\n" "    name: str\n" "    tag: str | None = None\n")

    def test_required_fields_come_first(self):
        output = render(
            {
                "definitions": {
                    "Pet": {
                        "type": "object",
                        "required": ["name"],
                        "properties": {"age": {"type": "integer"}, "name": {"type": "string"}},
                    }
                }
            }
        )
        assert output.index("    name: str\n") < output.index("    age: int | None = None\n")

    def test_field_metadata(self):
        output = render(
            {
                "definitions": {
                    "Event": {
                        "type": "object",
                        "required": ["startsAt", "class"],
                        "properties": {
                            "startsAt": {"type": "string", "format": "date-time"},
                            "endsAt": {"type": "string", "format": "date-time"},
                            "class": {"type": "string"},
                        },
                    }
                }
            }
        )
        assert '    class_: str = field(metadata=config(field_name="class"))\n' in output
        assert (
            "    starts_at: datetime = field(metadata=config("
            'field_name="startsAt", encoder=_encode_datetime, decoder=_decode_datetime))\n'
        ) in output
        assert (
            "    ends_at: datetime | None = field(default=None, metadata=config("
            'field_name="endsAt", encoder=_encode_datetime, decoder=_decode_datetime))\n'
        ) in output

    def test_empty_record(self):
        output = render({"definitions": {"Empty": {"type": "object", "properties": {}}}})
        assert output == "@dataclass_json\n@dataclass\nclass Empty:\n    pass\n"

    def test_enum(self):
        output = render(
            {"definitions": {"Status": {"type": "string", "description": "Sale state", "enum": ["available", "sold"]}}}
        )
        assert output == (
            "# Sale state\n"
            "class Status(str, Enum):\n"
            '    AVAILABLE = "available"\n'
            '    SOLD = "sold"\n'
            "\n"
            "    def __str__(self) -> str:\n"
            "        return self.value\n"
        )

    def test_aliases_are_quoted(self):
        output = render(
            {
                "definitions": {
                    "Pet": {"type": "object", "properties": {}},
                    "Pets": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                }
            }
        )
        assert 'Pets: TypeAlias = "list[Pet]"\n' in output

    def test_declarations_are_separated_by_two_blank_lines(self):
        output = render({"definitions": {"A": {"type": "string"}, "B": {"type": "boolean"}}})
        assert output == 'A: TypeAlias = "str"\n\n\nB: TypeAlias = "bool"\n'


class TestGeneratedPythonModule:
    """Test cases importing the generated Python code"""

    @pytest.fixture
    def models(self, petstore, tmp_path, monkeypatch):
        pytest.importorskip("dataclasses_json")
        code = generate(petstore, PythonBackend())
        path = tmp_path / "petstore_models.py"
        path.write_text(code)
        spec = importlib.util.spec_from_file_location("petstore_models", path)
        module = importlib.util.module_from_spec(spec)
        # Type hints are resolved through sys.modules when decoding
        monkeypatch.setitem(sys.modules, "petstore_models", module)
        spec.loader.exec_module(module)
        return module

    def test_decode_and_encode(self, models):
        pet = models.Pet.from_dict({"id": 7, "name": "Rex", "bornAt": "2024-01-02T03:04:05+00:00"})
        assert pet.id == 7
        assert pet.tag is None
        assert pet.born_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        encoded = pet.to_dict()
        assert encoded["bornAt"] == "2024-01-02T03:04:05+00:00"
        assert "born_at" not in encoded

    def test_enum(self, models):
        status = models.PetstatusInlineItem("sold")
        assert status is models.PetstatusInlineItem.SOLD
        assert str(status) == "sold"

    def test_aliases(self, models):
        assert models.Labels == "dict[str, int]"
        assert models.CreatePetPetParam == "NewPet"


if __name__ == "__main__":
    pytest.main([__file__])
