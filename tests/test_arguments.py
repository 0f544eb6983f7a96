import pytest

from mapwise import Options, group_by, key_by
from mapwise.arguments import InvalidInputError, ensure_sequence, resolve_arguments
from mapwise.descriptors import IDENTITY, ComputeFn, FieldName, InvalidDescriptorError
from mapwise.options import DEFAULT_OPTIONS, InvalidOptionsError


def by_index(item, index):
    return index


def test_resolve_key_only():
    resolved = resolve_arguments("id")
    assert resolved.key == FieldName("id")
    assert resolved.value is IDENTITY
    assert resolved.options == DEFAULT_OPTIONS


def test_resolve_key_and_options_mapping():
    resolved = resolve_arguments("id", {"exclude_nullish": True})
    assert resolved.value is IDENTITY
    assert resolved.options.exclude_nullish is True


def test_resolve_key_and_options_instance():
    options = Options(exclude_nullish=True)
    resolved = resolve_arguments(by_index, options)
    assert resolved.key == ComputeFn(by_index)
    assert resolved.options is options


def test_resolve_key_and_field_value():
    resolved = resolve_arguments("id", "name")
    assert resolved.value == FieldName("name")
    assert resolved.options == DEFAULT_OPTIONS


def test_resolve_key_and_function_value():
    resolved = resolve_arguments("id", by_index)
    assert resolved.value == ComputeFn(by_index)


def test_resolve_key_value_and_options():
    resolved = resolve_arguments("id", "name", {"exclude_nullish": True})
    assert resolved.value == FieldName("name")
    assert resolved.options.exclude_nullish is True


def test_resolve_none_value_with_options_is_identity():
    resolved = resolve_arguments("id", None, {"exclude_nullish": True})
    assert resolved.value is IDENTITY
    assert resolved.options.exclude_nullish is True


def test_resolve_none_third_argument_uses_defaults():
    resolved = resolve_arguments("id", None)
    assert resolved.value is IDENTITY
    assert resolved.options == DEFAULT_OPTIONS


def test_resolve_empty_mapping_is_options():
    resolved = resolve_arguments("id", {})
    assert resolved.value is IDENTITY
    assert resolved.options == DEFAULT_OPTIONS


def test_resolve_callable_object_is_value():
    class Upper:
        def __call__(self, item, index):
            return item["name"].upper()

    resolved = resolve_arguments("id", Upper())
    assert isinstance(resolved.value, ComputeFn)


def test_resolve_descriptor_instances_are_accepted():
    resolved = resolve_arguments(FieldName("id"), FieldName("name"))
    assert resolved.key == FieldName("id")
    assert resolved.value == FieldName("name")


@pytest.mark.parametrize("key", [None, 1, 1.5, ["id"], {"exclude_nullish": True}, ""])
def test_resolve_rejects_invalid_key(key):
    with pytest.raises(InvalidDescriptorError):
        resolve_arguments(key)


@pytest.mark.parametrize("value", [1, 2.5, ("name",), b"name"])
def test_resolve_rejects_invalid_value(value):
    with pytest.raises(InvalidDescriptorError):
        resolve_arguments("id", value)


@pytest.mark.parametrize("options", ["exclude_nullish", 1, [("exclude_nullish", True)]])
def test_resolve_rejects_invalid_options_shape(options):
    with pytest.raises(InvalidOptionsError):
        resolve_arguments("id", "name", options)


def test_resolve_rejects_too_many_arguments():
    with pytest.raises(TypeError):
        resolve_arguments("id", "name", {}, {})


def test_operations_reject_too_many_arguments(people):
    with pytest.raises(TypeError):
        key_by(people, "id", "name", {}, {})
    with pytest.raises(TypeError):
        group_by(people, "id", "name", {}, {})


@pytest.mark.parametrize("items", [[], (), range(3), [None]])
def test_ensure_sequence_accepts_sequences(items):
    assert ensure_sequence(items) is items


@pytest.mark.parametrize(
    "items", [None, 1, "abc", b"abc", bytearray(b"abc"), {"a": 1}, {1, 2}, iter([])]
)
def test_ensure_sequence_rejects_other_values(items):
    with pytest.raises(InvalidInputError):
        ensure_sequence(items)
