"""Public API surface of the i18nasset package."""

import i18nasset
from i18nasset import (
    ArgRef,
    DictionaryVariant,
    Literal,
    MessageDictionary,
    MessageFormatter,
    PlainTemplate,
    StructuredTemplate,
    parse_template,
)


class TestPublicExports:
    """Names exported from the top-level package."""

    def test_all_names_resolve(self) -> None:
        for name in i18nasset.__all__:
            assert hasattr(i18nasset, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(i18nasset.__version__, str)
        assert i18nasset.__version__

    def test_template_types_exported(self) -> None:
        assert parse_template("a", ["x", 0]) == StructuredTemplate((Literal("x"), ArgRef(0)))
        assert parse_template("a", "x") == PlainTemplate("x")


class TestEndToEnd:
    """Compiled asset to formatted text."""

    def test_compiled_asset_round(self) -> None:
        asset = {
            "user.greeting": "Welcome back, {0}",
            "user.unread": ["You have ", 0, " unread of ", 1],
        }
        i18n = MessageFormatter(
            MessageDictionary.from_raw(asset, locale="en-GB", variant=DictionaryVariant.STRUCTURED)
        )
        assert i18n.m("user.greeting", ["Ann"]) == "Welcome back, Ann"
        assert i18n.m("user.unread", [3, 10]) == "You have 3 unread of 10"
        assert i18n.md("user.logout", "Sign out") == "Sign out"
        assert i18n.md("user.logout") == "[user.logout]"
        assert i18n.dictionary.locale == "en_GB"
