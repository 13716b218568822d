"""Markdown document tree, configuration, themes and ANSI terminal rendering."""