"""Lifecycle adapter tests."""

import pytest

from pyjsonattr._errors import CodecError, InvalidArgumentError
from pyjsonattr.lifecycle import (
    ALL_EVENTS,
    AttributeHook,
    LifecycleEvent,
    attribute_hooks,
    decode_attributes,
    encode_attributes,
)
from pyjsonattr.registry import AttributeRegistry


class TestDecodeAttributes:
    def test_decodes_text(self, plain_record):
        plain_record.settings = '{"a": {"b": 1}}'
        plain_record.plain = '{"untouched": true}'
        assert decode_attributes(plain_record, ["settings"]) == ["settings"]
        assert plain_record.settings == {"a": {"b": 1}}
        assert plain_record.plain == '{"untouched": true}'

    def test_already_decoded_is_left_alone(self, plain_record):
        value = {"a": 1}
        plain_record.settings = value
        assert decode_attributes(plain_record, ["settings"]) == []
        assert plain_record.settings is value

    def test_blank_text_becomes_none(self, plain_record):
        plain_record.settings = ""
        decode_attributes(plain_record, ["settings"])
        assert plain_record.settings is None

    def test_malformed_text_raises(self, plain_record):
        plain_record.settings = "{broken"
        with pytest.raises(CodecError):
            decode_attributes(plain_record, ["settings"])

    def test_uses_mixin_registry(self, account):
        account.settings = '{"x": 1}'
        account.options = "[1, 2]"
        account.plain = '{"y": 2}'
        assert decode_attributes(account) == ["settings", "options"]
        assert account.settings == {"x": 1}
        assert account.options == [1, 2]
        assert account.plain == '{"y": 2}'

    def test_without_registry_raises(self, plain_record):
        with pytest.raises(InvalidArgumentError, match="no JSON attributes"):
            decode_attributes(plain_record)

    def test_protocol_record(self, protocol_record):
        protocol_record.set_attribute("settings", '{"a": 1}')
        decode_attributes(protocol_record, AttributeRegistry(["settings"]))
        assert protocol_record.get_attribute("settings") == {"a": 1}


class TestEncodeAttributes:
    def test_encodes_containers(self, account):
        account.settings = {"a": [1, 2]}
        account.options = "already text"
        account.plain = {"not": "registered"}
        assert encode_attributes(account) == ["settings"]
        assert account.settings == '{"a":[1,2]}'
        assert account.options == "already text"
        assert account.plain == {"not": "registered"}

    def test_none_is_left_alone(self, plain_record):
        assert encode_attributes(plain_record, ["settings"]) == []
        assert plain_record.settings is None

    def test_unserializable_raises(self, plain_record):
        plain_record.settings = {"bad": object()}
        with pytest.raises(CodecError):
            encode_attributes(plain_record, ["settings"])

    def test_save_load_cycle(self, account):
        account.set_json_attr("settings", "notifications.email", True)
        encode_attributes(account)
        assert isinstance(account.settings, str)
        decode_attributes(account)
        assert account.get_json_attr("settings", "notifications.email") is True


class TestAttributeHooks:
    def test_one_hook_per_attribute(self):
        hooks = attribute_hooks(["settings", "options"])
        assert list(hooks) == ["json_settings", "json_options"]
        assert hooks["json_settings"].attribute == "settings"
        assert hooks["json_settings"].events == ALL_EVENTS
        assert callable(hooks["json_options"])

    def test_after_find_decodes(self, plain_record):
        plain_record.settings = '{"a": 1}'
        hook = attribute_hooks(["settings"])["json_settings"]
        assert hook(plain_record, LifecycleEvent.AFTER_FIND) == {"a": 1}

    @pytest.mark.parametrize("event", [LifecycleEvent.BEFORE_INSERT, "before_update"])
    def test_before_save_encodes(self, plain_record, event):
        plain_record.settings = {"a": 1}
        hook = AttributeHook("settings")
        assert hook(plain_record, event) == '{"a":1}'

    def test_hook_does_not_assign(self, plain_record):
        plain_record.settings = {"a": 1}
        AttributeHook("settings")(plain_record, LifecycleEvent.BEFORE_INSERT)
        assert plain_record.settings == {"a": 1}

    def test_unknown_event(self, plain_record):
        with pytest.raises(InvalidArgumentError, match="lifecycle event"):
            AttributeHook("settings")(plain_record, "after_delete")

    def test_event_not_handled(self, plain_record):
        hook = AttributeHook("settings", events=(LifecycleEvent.AFTER_FIND,))
        with pytest.raises(InvalidArgumentError):
            hook(plain_record, LifecycleEvent.BEFORE_UPDATE)

    def test_event_values(self):
        assert [str(e) for e in LifecycleEvent] == ["before_insert", "before_update", "after_find"]
