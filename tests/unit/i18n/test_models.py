"""Tests for translatable.i18n.models module."""

from dataclasses import FrozenInstanceError
from unittest.mock import Mock

import pytest

from tests.factories.i18n import make_message_catalog, make_renderable_message
from translatable.i18n import ArgumentError, MessageCatalog, RenderableMessage, Translator


@pytest.mark.unit
class TestMessageCatalog:
    """Tests for MessageCatalog."""

    def test_get_message(self):
        """get_message() returns the pattern for a key."""
        catalog = make_message_catalog()
        assert catalog.get_message("welcome") == "Welcome {name}!"

    def test_get_message_missing(self):
        """get_message() returns None for a missing key."""
        catalog = make_message_catalog()
        assert catalog.get_message("nonexistent") is None

    def test_has_message_and_contains(self):
        """has_message() and ``in`` check key presence."""
        catalog = make_message_catalog()
        assert catalog.has_message("welcome")
        assert "goodbye" in catalog
        assert "nonexistent" not in catalog

    def test_len_and_iter(self):
        """Catalogs report size and iterate over keys."""
        catalog = make_message_catalog(messages={"a": "A", "b": "B"})
        assert len(catalog) == 2
        assert sorted(catalog) == ["a", "b"]

    def test_messages_are_read_only(self):
        """Catalog messages cannot be modified in place."""
        catalog = make_message_catalog()
        with pytest.raises(TypeError):
            catalog.messages["welcome"] = "changed"

    def test_source_dict_is_copied(self):
        """Changing the original dict does not affect the catalog."""
        messages = {"a": "A"}
        catalog = MessageCatalog(locale="en", messages=messages)
        messages["a"] = "changed"
        assert catalog.get_message("a") == "A"

    def test_default_domain(self):
        """Catalog domain defaults to messages."""
        assert MessageCatalog(locale="en").domain == "messages"

    def test_merge(self):
        """merge() layers the other catalog over this one."""
        base = make_message_catalog(messages={"a": "A", "b": "B"})
        other = make_message_catalog(messages={"b": "B2", "c": "C"})

        merged = base.merge(other)

        assert dict(merged.messages) == {"a": "A", "b": "B2", "c": "C"}
        assert dict(base.messages) == {"a": "A", "b": "B"}


@pytest.mark.unit
class TestRenderableMessage:
    """Tests for RenderableMessage."""

    def test_render_basic_icu_message(self):
        """render() formats the pattern with its parameters."""
        message = make_renderable_message("Hello {name}", {"name": "John"})
        assert message.render() == "Hello John"

    def test_render_multiple_parameters(self):
        """render() supports plural branches and several parameters."""
        message = make_renderable_message(
            "{count, plural, one{# message} other{# messages}} from {sender}",
            {"count": 5, "sender": "Admin"},
        )
        assert message.render() == "5 messages from Admin"

    def test_render_is_idempotent(self):
        """render() returns the same text on every call."""
        message = make_renderable_message(
            "{count, plural, one{# message} other{# messages}}", {"count": 3}
        )
        assert message.render() == message.render()

    def test_render_falls_back_on_invalid_pattern(self):
        """render() returns the raw pattern when it is malformed."""
        message = make_renderable_message("Hello {name", {"name": "John"})
        assert message.render() == "Hello {name"

    def test_render_uses_default_locale(self):
        """render() formats with default_locale's plural rules."""
        message = make_renderable_message(
            "{count, plural, one{# vez} other{# veces}}",
            {"count": 1},
            default_locale="es",
        )
        assert message.render() == "1 vez"

    def test_str_renders(self):
        """str() is the standalone rendering."""
        message = make_renderable_message("Hello {name}", {"name": "John"})
        assert str(message) == "Hello John"

    def test_render_treats_pattern_literally(self):
        """A lookup key without placeholders renders verbatim."""
        message = make_renderable_message("welcome", {"name": "Ann"})
        assert message.render() == "welcome"

    def test_translate_delegates_to_translator(self):
        """translate() resolves the pattern as an id through the translator."""
        translator = Mock(spec=Translator)
        translator.resolve.return_value = "¡Hola John!"
        message = make_renderable_message(
            "hello.world", {"name": "John"}, domain="messages", default_locale="en"
        )

        result = message.translate(translator, "es")

        assert result == "¡Hola John!"
        translator.resolve.assert_called_once_with(
            "hello.world", {"name": "John"}, "messages", "es"
        )

    def test_translate_defaults_to_default_locale(self):
        """translate() without a locale uses default_locale."""
        translator = Mock(spec=Translator)
        translator.resolve.return_value = "text"
        message = make_renderable_message("key", {}, default_locale="es")

        message.translate(translator)

        translator.resolve.assert_called_once_with("key", {}, None, "es")

    def test_translate_with_real_translator(self, dict_source):
        """The same pattern is a literal alone and an id with a translator."""
        message = RenderableMessage("welcome", {"name": "Ann"})
        translator = Translator(dict_source, fallback_locales=["en"])

        assert message.render() == "welcome"
        assert message.translate(translator) == "Welcome Ann!"

    def test_is_immutable(self):
        """Attributes cannot be reassigned."""
        message = make_renderable_message()
        with pytest.raises(FrozenInstanceError):
            message.pattern = "changed"

    def test_parameters_are_read_only(self):
        """Parameters cannot be modified in place."""
        message = make_renderable_message("Hello {name}", {"name": "John"})
        with pytest.raises(TypeError):
            message.parameters["name"] = "Jane"

    def test_parameters_are_copied(self):
        """Changing the original parameters does not affect the message."""
        parameters = {"name": "John"}
        message = RenderableMessage("Hello {name}", parameters)
        parameters["name"] = "Jane"
        assert message.render() == "Hello John"

    @pytest.mark.parametrize("pattern", ["", None, 42])
    def test_invalid_pattern_raises(self, pattern):
        """An empty or non-string pattern is rejected."""
        with pytest.raises(ArgumentError):
            RenderableMessage(pattern)

    def test_invalid_parameters_raise(self):
        """Parameters must be a mapping."""
        with pytest.raises(ArgumentError):
            RenderableMessage("Hello", ["John"])

    def test_defaults(self):
        """Domain defaults to None and locale to en."""
        message = RenderableMessage("Hello")
        assert message.domain is None
        assert message.default_locale == "en"
        assert dict(message.parameters) == {}
