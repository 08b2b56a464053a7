# __main__.py - entry point: python -m trie_autocompleter {demo,shell,tui,bench}

import argparse

from rich.console import Console
from rich.markup import escape

from trie_autocompleter.cli.cli import CLI, build_trie
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import Log, configure_logging

DEMO_WORDS = ["cat", "car", "card", "care", "careful", "apple", "app", "apply"]


def run_demo(console: Console) -> Trie:
    """Walk through insert / search / prefix search / delete / teardown."""
    trie = Trie()
    console.rule("[bold]Inserting words[/bold]")
    for w in DEMO_WORDS:
        trie.insert(w)
        console.print(f"Inserted: {w}")

    result = trie.enumerate_all()
    console.print(f"\nTotal words: {trie.word_count}")
    for w in result.words:
        console.print(f"  - {w}")

    console.rule("[bold]Exact search[/bold]")
    for w in ("car", "care", "ca"):
        mark = "[green]found[/green]" if trie.search(w) else "[red]not found[/red]"
        console.print(f"'{w}': {mark}")

    console.rule("[bold]Prefix search[/bold]")
    for p in ("car", "app"):
        count, words = trie.prefix_search(p)
        console.print(f"Words starting with '{p}': {count}  {', '.join(words)}")

    console.rule("[bold]Deleting 'car'[/bold]")
    trie.delete("car")
    console.print(f"search('car') -> {trie.search('car')}")
    count, words = trie.prefix_search("car")
    console.print(f"Words starting with 'car': {count}  {', '.join(words)}")

    released = trie.teardown()
    console.print(f"\nTrie torn down, {released} nodes released.")
    return trie


def main(argv=None):
    parser = argparse.ArgumentParser(prog="trie_autocompleter", description="Prefix trie autocompleter")
    parser.add_argument("--config", default="config.json", help="path to the JSON config")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo", help="scripted walkthrough")
    shell = sub.add_parser("shell", help="interactive rich shell")
    shell.add_argument("--words", help="word list to preload, one word per line")
    tui = sub.add_parser("tui", help="live autocomplete TUI")
    tui.add_argument("--words", help="word list to preload, one word per line")
    bench = sub.add_parser("bench", help="prefix search latency")
    bench.add_argument("--words", type=int, default=20000)
    bench.add_argument("--runs", type=int, default=500)
    args = parser.parse_args(argv)

    command = args.command or "demo"
    if command == "demo":
        configure_logging()
        run_demo(Console())
        return 0
    if command == "bench":
        from trie_autocompleter.profiling.profile import main as bench_main
        configure_logging()
        bench_main(n_words=args.words, runs=args.runs)
        return 0

    cfg = Config(args.config)
    configure_logging(cfg["log_level"])
    trie = build_trie(cfg)
    if args.words:
        try:
            with open(args.words, "r", encoding="utf-8") as f:
                trie.insert_many(w.strip() for w in f if w.strip())
        except OSError as e:
            Console().print(f"[red]Cannot read {escape(args.words)}:[/red] {escape(str(e))}")
            return 1

    if command == "shell":
        CLI(trie=trie, cfg=cfg).run()
    else:
        from trie_autocompleter.tui_app import TUIAutocompleter
        TUIAutocompleter(trie=trie, log=Log(cfg["log_path"], echo=False)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
