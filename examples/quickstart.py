"""Quickstart example for i18nasset.

This example shows the typical lifecycle: load a compiled locale asset once
at startup, wrap it in a MessageFormatter, and format messages by code.
"""

import json

from i18nasset import DictionaryVariant, FormatterConfig, MessageDictionary, MessageFormatter

# Example 1: Structured asset (plain strings and fragment lists)
print("=" * 50)
print("Example 1: Structured Dictionary")
print("=" * 50)

asset = json.loads("""
{
    "app.title": "Inbox",
    "inbox.summary": "Hello {0}, you have {1} messages",
    "inbox.summary.fragments": ["Hello ", 0, ", you have ", 1, " messages"]
}
""")

i18n = MessageFormatter(MessageDictionary.from_raw(asset, locale="en-US"))

print(i18n.m("app.title"))
# Output: Inbox

print(i18n.m("inbox.summary", ["Ann", 5]))
# Output: Hello Ann, you have 5 messages

print(i18n.m("inbox.summary.fragments", ["Ann", 5]))
# Output: Hello Ann, you have 5 messages

print(i18n.render("inbox.summary.fragments", "Bob", 2))
# Output: Hello Bob, you have 2 messages

# Example 2: Missing codes
print("\n" + "=" * 50)
print("Example 2: Missing Codes")
print("=" * 50)

print(i18n.md("app.logout"))
# Output: [app.logout]

print(i18n.md("app.logout", "Sign out"))
# Output: Sign out

print(i18n.m("app.welcome", ["Ann"], "Welcome, {0}"))
# Output: Welcome, Ann

# Example 3: Plain-only dictionary with a custom fallback policy
print("\n" + "=" * 50)
print("Example 3: Plain Dictionary")
print("=" * 50)

plain = MessageDictionary.from_raw(
    {"title": "Sveiki, {0}!"},
    locale="lv_LV",
    variant=DictionaryVariant.PLAIN,
)
strict = MessageFormatter(plain, config=FormatterConfig(missing_message="!!{code}!!"))

print(strict.m("title", ["Jānis"]))
# Output: Sveiki, Jānis!

print(strict.m("subtitle"))
# Output: !!subtitle!!
