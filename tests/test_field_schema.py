import pytest

from form_fields.errors import (
    EmptySchemaError,
    InvalidFieldSchema,
    MissingRequiredField,
    UnsupportedFieldType,
)
from form_fields.schemas import (
    CheckboxField,
    ChoiceFieldBase,
    FieldBase,
    RadioField,
    SelectField,
    TextField,
    parse_field_schema,
)


def test_parse_picks_model_by_type():
    assert isinstance(parse_field_schema({"type": "text", "name": "a"}), TextField)
    sel = parse_field_schema({"type": "select", "name": "a", "availableValues": ["x"], "multiple": True})
    assert isinstance(sel, SelectField)
    assert sel.multiple is True
    assert sel.allows_multiple() is True
    assert parse_field_schema({"type": "radio", "name": "a", "availableValues": ["x"]}).allows_multiple() is False
    assert parse_field_schema({"type": "checkbox", "name": "a", "availableValues": ["x"]}).allows_multiple() is True


def test_base_key_defaults_to_name():
    assert parse_field_schema({"type": "text", "name": "first_name"}).base_key == "first_name"
    assert parse_field_schema({"type": "text", "name": "first_name", "key": "k"}).base_key == "k"


@pytest.mark.parametrize("label,expected", [("First", "First"), (False, ""), (None, ""), ("", "")])
def test_label_text(label, expected):
    schema = parse_field_schema({"type": "text", "name": "n", "label": label})
    assert schema.label_text == expected


def test_default_value_alias_and_merge_rule():
    only_legacy = parse_field_schema({"type": "select", "name": "n", "availableValues": ["a", "b"], "defaultValue": "b"})
    assert only_legacy.value == "b"
    both = parse_field_schema(
        {"type": "select", "name": "n", "availableValues": ["a", "b"], "value": "a", "defaultValue": "b"}
    )
    assert both.value == "a"
    assert "defaultValue" not in both.extra_attributes


def test_extra_attributes_are_kept_but_include_blank_is_not():
    schema = parse_field_schema(
        {
            "type": "select",
            "name": "n",
            "availableValues": ["a"],
            "includeBlank": True,
            "placeholder": "Pick",
            "data-test": "x",
        }
    )
    assert schema.include_blank is True
    assert schema.extra_attributes == {"placeholder": "Pick", "data-test": "x"}


def test_choice_groups_do_not_forward_select_only_keys():
    schema = parse_field_schema(
        {"type": "radio", "name": "n", "availableValues": ["a"], "includeBlank": True, "multiple": True, "required": True}
    )
    assert isinstance(schema, RadioField)
    assert schema.extra_attributes == {"required": True}
    assert not hasattr(schema, "include_blank")


@pytest.mark.parametrize("raw", [{"type": "text"}, {"type": "text", "name": ""}, {"type": "text", "name": "  "}])
def test_missing_name(raw):
    with pytest.raises(MissingRequiredField) as exc_info:
        parse_field_schema(raw)
    assert exc_info.value.missing == "name"


def test_missing_type():
    with pytest.raises(MissingRequiredField) as exc_info:
        parse_field_schema({"name": "n"})
    assert exc_info.value.missing == "type"
    assert exc_info.value.field_name == "n"


@pytest.mark.parametrize("field_type", ["email", "TEXT", 3])
def test_unsupported_type(field_type):
    with pytest.raises(UnsupportedFieldType) as exc_info:
        parse_field_schema({"type": field_type, "name": "n"})
    assert exc_info.value.field_type == field_type


@pytest.mark.parametrize("field_type", ["select", "radio", "checkbox"])
@pytest.mark.parametrize("extra", [{}, {"availableValues": []}, {"availableValues": None}])
def test_choice_types_require_available_values(field_type, extra):
    with pytest.raises(EmptySchemaError):
        parse_field_schema({"type": field_type, "name": "n", **extra})


def test_other_validation_failures_are_wrapped():
    with pytest.raises(InvalidFieldSchema) as exc_info:
        parse_field_schema({"type": "select", "name": "n", "availableValues": "abc"})
    assert exc_info.value.details
    with pytest.raises(InvalidFieldSchema):
        parse_field_schema(["not", "a", "mapping"])


def test_parsed_models_pass_through():
    schema = CheckboxField.model_validate({"name": "n", "availableValues": ["a"]})
    assert parse_field_schema(schema) is schema


def test_schema_is_frozen():
    schema = parse_field_schema({"type": "text", "name": "n"})
    with pytest.raises(Exception):
        schema.name = "other"


@pytest.mark.parametrize("field_type", ["text", "textarea"])
def test_recognized_keys_are_never_extra_attributes(field_type):
    schema = parse_field_schema(
        {
            "type": field_type,
            "name": "n",
            "availableValues": ["a"],
            "available_values": ["b"],
            "multiple": True,
            "includeBlank": True,
            "defaultValue": "x",
            "rows": 2,
        }
    )
    assert schema.extra_attributes == {"rows": 2}


def test_allows_multiple_defaults_to_single():
    group = ChoiceFieldBase.model_validate({"type": "group", "name": "n", "availableValues": ["a"]})
    assert group.allows_multiple() is False
    assert RadioField.model_validate({"name": "n", "availableValues": ["a"]}).allows_multiple() is False


def test_unregistered_models_are_revalidated_by_type():
    loose = FieldBase(type="select", name="n", availableValues=["a", "b"], value="b")
    schema = parse_field_schema(loose)
    assert isinstance(schema, SelectField)
    assert schema.value == "b"

    with pytest.raises(UnsupportedFieldType):
        parse_field_schema(FieldBase(type="color_wheel", name="c"))


def test_registered_model_subclasses_pass_through():
    class LongText(TextField):
        pass

    schema = LongText(name="n")
    assert parse_field_schema(schema) is schema
