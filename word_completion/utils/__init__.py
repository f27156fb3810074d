# word_completion.utils - persistence, config and logging helpers
