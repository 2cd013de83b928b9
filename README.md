# boardview

The non-graphical core of a viewer for printed circuit board layouts. It
provides the pieces a viewer front end builds on:

- **Searching** parts and nets by name, as a substring, prefix or whole-name
  match (`boardview.searcher`).
- **Spelling suggestions** for mistyped part or net names, ranked by a
  bounded Levenshtein distance (`boardview.spellcorrector`).
- **Keys and key bindings**: named keys, modifier handling, default bindings
  and their storage in a configuration mapping (`boardview.keys`,
  `boardview.keybindings`).
- **Colour scheme and view enums**: `ColorScheme`, `DrawChannel`, `FlipMode`,
  `ShowMode`, plus a compact `BitVec` (`boardview.colors`).
- **Per-board settings** kept in a `key = value` configuration file:
  top and bottom background images with offset, scaling, mirroring and
  transparency, and the path of the matching PDF document
  (`boardview.boardconf`, `boardview.image`, `boardview.background_image`,
  `boardview.pdffile`, `boardview.board_settings`).
- **PDF viewer bridging**: searching a document open in Evince and picking up
  the text selected there, through the `gdbus` command-line tool
  (`boardview.pdfbridge`).
- **Renderer selection**: checking the reported OpenGL version and falling
  back from one renderer backend to the next (`boardview.renderers`).

It needs Python 3.10 or later and Pillow (used to load background images).

## Searching a board

Anything with a `name` attribute can be searched. With `search_details=True`,
an item's optional `searchable_details` method or attribute (a list of
strings) is searched too.

```python
from dataclasses import dataclass

from boardview.searcher import Searcher, SearchMode


@dataclass
class Part:
    name: str


parts = [Part("R101"), Part("R102"), Part("C12"), Part("U1")]
searcher = Searcher(nets=[], parts=parts, mode=SearchMode.PREFIX, search_details=False)

[p.name for p in searcher.search_parts("r10", limit=-1)]   # ['R101', 'R102']
[p.name for p in searcher.search_parts("r10", limit=1)]    # ['R101']
```

Matching ignores case. `SearchMode.SUB` matches anywhere in the name,
`SearchMode.PREFIX` only at its start, and `SearchMode.WHOLE` only the whole
name. A limit of `None` or a negative number returns every match; an empty
search term returns nothing.

## Suggesting names

```python
from boardview.spellcorrector import SpellCorrector

corrector = SpellCorrector(dictionary=["PP3V3_S5", "PP5V_S0", "GND"], threshold=3)
corrector.suggest("pp3v3_s")   # ['PP3V3_S5']
```

Suggestions are ordered best first; words whose distance exceeds the
threshold are left out. `levenshtein_distance(s1, s2, limit)` is available on
its own.

## Key bindings

```python
from boardview.keybindings import KeyBindings

bindings = KeyBindings(apple=False)
bindings.key_names("Quit")     # '<ModCtrl+Q>'
```

Whether a binding is pressed is decided by two callables you supply, one
telling whether a `Key` is held down and one whether it was just pressed:
`bindings.is_pressed("Quit", is_down, was_pressed)`.

Bindings are written to and read back from any mapping with `get` and item
assignment (such as `boardview.boardconf.ConfigFile`) with `write_to_config`
and `read_from_config`, one `KeyBinding<Name>` entry per action. Several
bindings for one action are separated by `|`, modifiers are joined to their
key with `~`, and the keys `|`, `~` and `=` are stored as `Pipe`, `Tilde` and
`Equals`. Unknown key names are logged and read as `Key.NONE`.

## Board settings

`ConfigFile` reads and writes `key = value` files, keeping comments, and
saves on every `set`. `BackgroundImage.load_from_config(path)` and
`PDFFile.load_from_config(path)` read a board's configuration file; image
and PDF paths are stored relative to it, and the PDF path defaults to the
configuration file's path with a `.pdf` suffix. `BoardSettings` gathers the
two editors so that changes can be saved back, cancelled or cleared
together. An image that cannot be loaded raises `boardview.image.ImageError`
from `Image.reload`; `BackgroundImage.reload` collects such errors into a
string instead.

## What this package does not do

It draws nothing and opens no window: there is no board view screen, no
menus and no OpenGL code. It does not read boardview or layout files.
`init_best_renderer` only chooses among renderer factories you pass in, and
`check_gl1` / `check_gl3` judge a `GLInfo` you fill in from your own
context. The PDF bridge works only where Evince and `gdbus` are available;
`PDFBridge` itself is a bridge that does nothing.