from form_fields import keys
from form_fields.schemas import parse_field_schema


def test_key_formats():
    assert keys.label_key("k") == "k_label"
    assert keys.legend_key("k") == "k_legend"
    assert keys.option_key("k", 2) == "k_select_option_2"
    assert keys.choice_item_key("k", "radio", 0) == "k_radio_0"
    assert keys.choice_label_key("name", 1) == "name_label_1"
    assert keys.choice_input_id("checkbox", "name", 3) == "checkbox_name_3"


def test_base_key_prefers_key_over_name():
    assert keys.base_key(parse_field_schema({"type": "text", "name": "n"})) == "n"
    assert keys.base_key(parse_field_schema({"type": "text", "name": "n", "key": "k"})) == "k"


def test_option_keys_are_pairwise_distinct():
    generated = [keys.option_key("n", i) for i in range(50)]
    assert len(set(generated)) == 50
