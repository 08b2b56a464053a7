from .cli import CLI, build_trie, main

__all__ = ["CLI", "build_trie", "main"]
