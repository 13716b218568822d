"""Terminal helpers: Markdown tree rendering, shell command translation, YAML rules and keybindings, quizzes, input classification and a resource cache."""

__version__ = "0.1.0"