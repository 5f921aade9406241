from form_fields import render_field, to_html
from form_fields.render.markup import attributes


def test_text_field_markup():
    html = to_html(render_field({"type": "text", "name": "first_name", "label": "First & Last", "value": "Bat<man>"}))
    assert html == '<label>First &amp; Last<input type="text" name="first_name" value="Bat&lt;man&gt;"></label>'


def test_textarea_value_becomes_content():
    html = to_html(render_field({"type": "textarea", "name": "d", "value": "Hi", "rows": 3}))
    assert html == '<label><textarea name="d" rows="3">Hi</textarea></label>'


def test_select_marks_selected_options():
    html = to_html(
        render_field(
            {
                "type": "select",
                "name": "n",
                "availableValues": [[1, "One"], [2, "Two", True]],
                "includeBlank": "Pick one",
            }
        )
    )
    assert html == (
        "<label>"
        '<select name="n">'
        '<option value="">Pick one</option>'
        '<option value="1">One</option>'
        '<option value="2" selected>Two</option>'
        "</select>"
        "</label>"
    )


def test_multiple_select_attribute():
    html = to_html(render_field({"type": "select", "name": "n", "multiple": True, "availableValues": ["a"], "value": ["a"]}))
    assert '<select name="n" multiple>' in html
    assert '<option value="a" selected>a</option>' in html


def test_checkbox_group_markup():
    html = to_html(
        render_field({"type": "checkbox", "name": "c", "label": "Pick", "availableValues": [["a", "A", True], ["b", "B"]]})
    )
    assert html.startswith("<fieldset><legend>Pick</legend>")
    assert '<input type="checkbox" name="c" value="a" id="checkbox_c_0" checked>' in html
    assert '<label for="checkbox_c_0">A</label>' in html
    assert '<input type="checkbox" name="c" value="b" id="checkbox_c_1">' in html
    assert html.endswith("</fieldset>")


def test_attributes_helper():
    assert attributes({"a": None, "checked": False, "required": True, "className": "x", "data-x": '"q"'}) == (
        'required class="x" data-x="&quot;q&quot;"'
    )


def test_text_markup_ignores_choice_keys():
    html = to_html(render_field({"type": "text", "name": "n", "availableValues": ["a"], "multiple": True}))
    assert html == '<label><input type="text" name="n"></label>'
