import pytest

from optkit import errors, validate


def test_valid_entries():
    validate.validateEntries(
        {
            "a": {"type": "flag"},
            "v": {"type": "count"},
            "o": {"type": "text", "default": "a.out"},
            "n": {"type": "int", "default": 3},
            "l": {"type": "list", "sep": ":"},
            "out": {"type": "alias", "target": "o", "description": "Output file"},
        }
    )


def test_empty_schema_is_valid():
    validate.validateEntries({})


def test_entry_requires_option_and_type():
    with pytest.raises(errors.SchemaError, match="'option' not found"):
        validate.validateEntry({"type": "flag"})
    with pytest.raises(errors.SchemaError, match="'type' not found"):
        validate.validateEntry({"option": "a"})


def test_entry_must_be_a_mapping():
    with pytest.raises(errors.SchemaError):
        validate.validateEntry(["option", "a"])  # type: ignore
    with pytest.raises(errors.SchemaError):
        validate.validateEntries({"a": "flag"})  # type: ignore


def test_text_default_must_be_string():
    with pytest.raises(errors.SchemaError, match="must be a string"):
        validate.validateEntry({"option": "o", "type": "text", "default": 1})


def test_int_default_must_be_integer():
    with pytest.raises(errors.SchemaError, match="must be an integer"):
        validate.validateEntry({"option": "n", "type": "int", "default": "3"})
    with pytest.raises(errors.SchemaError):
        validate.validateEntry({"option": "n", "type": "int", "default": 1.5})
    with pytest.raises(errors.SchemaError):
        validate.validateEntry({"option": "n", "type": "int", "default": True})

    validate.validateEntry({"option": "n", "type": "int", "default": 3.0})


def test_list_sep_must_be_string():
    with pytest.raises(errors.SchemaError, match="sep value"):
        validate.validateEntry({"option": "l", "type": "list", "sep": 1})


def test_alias_requires_string_target():
    with pytest.raises(errors.SchemaError, match="'target' not found in alias option o"):
        validate.validateEntry({"option": "o", "type": "alias"})
    with pytest.raises(errors.SchemaError, match="target value"):
        validate.validateEntry({"option": "o", "type": "alias", "target": 1})


def test_unsupported_type():
    with pytest.raises(errors.UnsupportedTypeError) as e:
        validate.validateEntry({"option": "x", "type": "float"})
    assert e.value.tag == "float"
    assert "'float'" in str(e.value)


def test_dangling_target():
    with pytest.raises(errors.DanglingTargetError) as e:
        validate.validateEntries({"o": {"type": "alias", "target": "output"}})
    assert e.value.name == "o"
    assert e.value.target == "output"
    assert str(e.value) == "target value 'output' for option 'o' was not found"


def test_dangling_target_is_checked_after_entries():
    with pytest.raises(errors.UnsupportedTypeError):
        validate.validateEntries(
            {
                "o": {"type": "alias", "target": "missing"},
                "x": {"type": "bogus"},
            }
        )
