# warpish

A library of building blocks for a terminal application:

- a Markdown document tree and a renderer that turns it into ANSI-styled
  text with boxed code blocks and tables;
- detection, validation and translation of simple shell commands between
  bash, zsh, fish and PowerShell;
- rules and keybindings loaded from YAML files;
- multiple choice quizzes run over any pair of text streams;
- a classifier that tells shell commands apart from natural-language input;
- a thread-safe key/value cache.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `warpish.markdown.ast`

The document tree. `Document` holds `blocks` and a `metadata` dict, with
`add_block` and `add_metadata`. Block nodes are `HeadingBlock` (its level is
clamped to 1–6), `ParagraphBlock`, `CodeBlock`, `ListBlock` with `ListItem`,
`TableBlock` with `TableCell` and `TableAlignment`, `QuoteBlock`,
`ThematicBreak` and `HtmlBlock`; every block has `is_heading`,
`is_code_block` and `is_table`. Inline nodes are `TextInline`,
`EmphasisInline`, `StrongInline`, `CodeInline`, `LinkInline`, `ImageInline`,
`LineBreak`, `SoftBreak` and `HtmlInline`. The `with_*` methods
(`HeadingBlock.with_id`, `CodeBlock.with_language`,
`CodeBlock.with_line_numbers`, `LinkInline.with_title`,
`ImageInline.with_title`) return a changed copy.

### `warpish.markdown.config`

`MarkdownConfig` (defaults: `syntax_highlighting=True`,
`table_rendering=True`, `link_highlighting=True`,
`code_block_theme="monokai"`, `max_width=80`, `indent_size=2`) and the error
classes `MarkdownError`, `ParseError`, `RenderError` and
`InvalidSyntaxError`.

### `warpish.markdown.themes`

`MarkdownTheme` with the built-in themes `default`, `monokai`,
`solarized_dark`, `solarized_light`, `github` and `dracula`.
`MarkdownTheme.by_name(name)` falls back to the default theme for unknown
names; `MarkdownTheme.available_themes()` lists the names.

### `warpish.markdown.renderer`

`TerminalRenderer(config)` renders a `Document` with `render(document)`.
Headings, lists, quotes, inline code, links and images get fixed ANSI
colours; code blocks and tables are drawn in box-drawing characters, padded
to `max_width`. Tables are skipped when `table_rendering` is off, and links
are underlined only when `link_highlighting` is on. `with_theme(theme)`
stores a theme on the renderer's `theme` attribute; the colours used in the
output do not depend on it. A `RenderError` is raised for unknown node
types, for table rows with more cells than the header, and for a code block
when `max_width` is below 2.

### `warpish.lpc`

- `warpish.lpc.detector.detect_shell(cmd)` guesses `"zsh"`, `"bash"` or
  `"fish"` from keywords, or returns `None`.
- `warpish.lpc.validator`: `validate_bash`, `validate_fish` and
  `validate(cmd, shell)`; shells without a check always pass.
- `warpish.lpc.translator`: `ShellCommand` and `ShellTranslator`, whose
  `translate(cmd, target_shell)` knows bash→fish and bash→PowerShell for
  `export NAME=value`, PowerShell→bash for `$env:NAME value`, and zsh→bash;
  other pairs return an unchanged copy.
- `warpish.lpc.runtime.process_command(text, current_shell, target_shell)`
  detects, validates and translates in one step, returning `None` (and
  writing a message to stderr) when validation fails.

### `warpish.rules`

`load_rules_from_yaml(path)` reads a YAML list of rules into `Rule` objects
(`name`, `trigger_phrase`, `action`). Each `RuleAction` has a
`RuleActionKind` (`RUN_COMMAND`, `SUGGEST_FIX`, `OPEN_URL`) and a string
value. Unreadable files, bad YAML and malformed rules raise `RuleError`.

### `warpish.keybindings`

`parse_keybinding_string("ctrl-shift-a")` builds a `KeyBinding` from
modifier names (`ctrl`, `shift`, `alt`, `meta`/`super`) and a key, or
returns `None`. Only the keys `A` to `F` of `KeyCode` are known.
`load_keymap_from_yaml(path)` reads a mapping of action name to key string
into a `Keymap`, whose `get(binding)` returns the action; key strings that
do not parse are logged and skipped, and a file that is not a mapping of
strings raises `ValueError`.

### `warpish.mcq`

`MultipleChoiceQuestion` with `with_explanation`, `with_time_limit`,
`evaluate(answer)`, `correct_answer_text()` and `ask(stdin, stdout)`, which
prompts until a valid option number is read and returns its zero-based
index (or `None` at end of input). `Quiz` collects questions with
`add_question`, runs them with `conduct(stdin, stdout)`, recording a
`QuestionResponse` for each answer and printing a summary by
`QuestionDifficulty`, and reports `score()` as a percentage. Both default to
`sys.stdin` and `sys.stdout`.

### `warpish.nlp`

`NaturalLanguageDetector().detect(text)` returns a
`LanguageDetectionResult` with an `InputType` (`COMMAND`,
`NATURAL_LANGUAGE`, `MIXED`, `QUESTION`, `REQUEST`), a confidence, an intent
(`"help"`, `"file_operation"` or `"system_info"`), entities (`"file"`,
`"path"`, `"url"`), a sentiment between -1 and 1 and a complexity between
0 and 1. All of it comes from fixed word lists and phrases.

### `warpish.resources`

`ResourceCache` with `get`, `set` and `clear`, guarded by a lock; `get`
returns `None` for missing keys.

## Examples

Render a Markdown document:

```python
from warpish.markdown.ast import Document, HeadingBlock, TextInline
from warpish.markdown.config import MarkdownConfig
from warpish.markdown.renderer import TerminalRenderer

doc = Document()
doc.add_block(HeadingBlock(1, [TextInline("Hello")]))
print(TerminalRenderer(MarkdownConfig()).render(doc))
```

Translate a command from bash to fish:

```python
from warpish.lpc.runtime import process_command

print(process_command("export PATH=/usr/bin", "bash", "fish"))
# set -x PATH /usr/bin
```

Load rules from a file such as:

```yaml
- name: fix-push
  trigger_phrase: "failed to push"
  action:
    SuggestFix: "git pull --rebase"
```

```python
from pathlib import Path
from warpish.rules import load_rules_from_yaml

for rule in load_rules_from_yaml(Path("rules.yaml")):
    print(rule.name, rule.action.kind, rule.action.value)
```

Classify input:

```python
from warpish.nlp import NaturalLanguageDetector

result = NaturalLanguageDetector().detect("git status")
print(result.input_type)  # InputType.COMMAND
```

## What this package does not do

- It is a library, not a terminal: it opens no window, runs no shell or
  pseudo-terminal, and installs no command.
- It has no Markdown parser. Documents are built from the classes in
  `warpish.markdown.ast` and then rendered.
- It stores nothing: there is no command history or other persistence.