# word_completion.cli - interactive shell

from .cli import CLI, main

__all__ = ["CLI", "main"]
