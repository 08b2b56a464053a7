# tests/test_tui.py - drive the textual app headless

import asyncio

from trie_autocompleter.core.trie import Trie
from trie_autocompleter.tui_app import TUIAutocompleter


def make_app():
    trie = Trie()
    trie.insert_many(["cat", "car", "card", "care"])
    return TUIAutocompleter(trie=trie)


def test_typing_updates_suggestions_and_tab_accepts():
    app = make_app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("c", "a", "r")
            await pilot.pause()
            assert app.suggestions == ["car", "card", "care"]
            await pilot.press("tab")
            await pilot.pause()
            assert app.query_one("#text_input").value == "car"

    asyncio.run(scenario())


def test_insert_and_delete_bindings():
    app = make_app()

    async def scenario():
        async with app.run_test() as pilot:
            await pilot.press("d", "o", "g")
            await pilot.press("ctrl+n")
            await pilot.pause()
            assert app.trie.search("dog")
            assert app.suggestions == ["dog"]
            await pilot.press("ctrl+t")
            await pilot.pause()
            assert not app.trie.search("dog")
            assert app.suggestions == []

    asyncio.run(scenario())
