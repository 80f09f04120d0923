# artifactinv

A small inventory for archaeological artifacts. Each artifact has an ID, a
name, a description, a material, a discovery date and a location. The
inventory is kept in a CSV file, a JSON file or in memory. It can be filtered
by any of those fields, and every add, update and removal can be undone and
redone.

It has no third-party dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The interactive shell

```
artifactinv
```

starts a command shell over the inventory. By default the inventory is kept
in `artifacts.csv` in the current directory. One of these options picks a
different store:

- `--csv PATH` – use the CSV file at `PATH`
- `--json PATH` – use the JSON file at `PATH`
- `--memory` – keep artifacts in memory only; nothing is saved

Type `help` in the shell to see the commands and their arguments:

- `list` – list the artifacts that pass the active filters, as `ID: Name`
- `show ID` – show every field of one artifact
- `add id=ID name=NAME [description=..] [material=..] [date=YYYY-MM-DD] [location=..]`
  – add an artifact; ID and name are required
- `update ID [id=NEW_ID] [name=..] [description=..] [material=..] [date=..] [location=..]`
  – change an artifact; fields not given keep their values, and a new ID is
  handled as removing the old artifact and adding the new one
- `remove ID` – delete an artifact
- `undo`, `redo` – step back and forward through the changes
- `filter name|id|material|location TEXT` – add a case-insensitive
  "contains" filter; `filter date START END` adds an inclusive date range;
  `filter` alone lists the active filters
- `unfilter N` – remove the active filter numbered `N`
- `logic and|or` – whether all active filters or any of them must match
  (AND by default)
- `reset` – clear every active filter
- `quit` (or end of input) – leave the shell

Values with spaces can be quoted, e.g. `add id=A1 name="Clay Pot"`.

## Using it as a library

```python
from datetime import date

from artifactinv.csv_repository import CsvRepository
from artifactinv.controller import ArtifactController
from artifactinv.filters import AndFilter, ArtifactFilter, LocationFilter, MaterialFilter

controller = ArtifactController(CsvRepository("artifacts.csv"))
controller.add_artifact("ID001", "Bronze Sword", "Ancient bronze weapon",
                        "Bronze", date(1500, 1, 1), "Rome")
controller.add_artifact("ID002", "Clay Pot", "Cooking vessel",
                        "Clay", date(1200, 6, 15), "Athens")

controller.filter_by_material("bronze", False)   # case-insensitive substring match
controller.undo()                                # the clay pot is gone again
controller.redo()                                # ... and back

both = AndFilter()
both.add_filter(MaterialFilter("Bronze"))
both.add_filter(LocationFilter("Rome"))
ArtifactFilter(both).filter(controller.all_artifacts())
```

The modules:

- `artifactinv.artifact` – the `Artifact` dataclass; a missing discovery
  date is `None`.
- `artifactinv.repository` – the `Repository` base class, an
  `InMemoryRepository` (adding an existing ID replaces it), and the errors
  `RepositoryError`, `ArtifactNotFoundError` and `DuplicateArtifactError`.
- `artifactinv.csv_repository` – `CsvRepository`, plus the helpers
  `escape_field`, `unescape_field`, `parse_line` and `format_line`. The file
  has the header `ID,Name,Description,Material,DiscoveryDate,Location` and
  dates in ISO form.
- `artifactinv.json_repository` – `JsonRepository`, plus `artifact_to_dict`
  and `artifact_from_dict`. The document holds an `artifacts` list, a
  `version` of `"1.0"` and the `timestamp` of the last save.
- `artifactinv.filters` – `NameFilter`, `IdFilter`, `MaterialFilter`,
  `LocationFilter`, `DateRangeFilter`, the composites `AndFilter` and
  `OrFilter` (both match nothing when empty), and `ArtifactFilter`, which
  applies a strategy to a list (with no strategy everything passes).
- `artifactinv.commands` – `AddArtifactCommand`, `RemoveArtifactCommand` and
  `UpdateArtifactCommand`, the reversible operations behind undo and redo.
- `artifactinv.controller` – `ArtifactController`, which validates edits,
  keeps the undo and redo history, and offers the `filter_by_*` shortcuts.
- `artifactinv.session` – `FilterSession`, a list of `ActiveFilter`s
  combined with `FilterLogic.AND` or `FilterLogic.OR`, and the
  `format_listing` / `parse_listing_id` helpers for `ID: Name` lines.
- `artifactinv.cli` – `ArtifactShell` and `main`, the shell described above.

The file stores read their file once when created and write the whole file
back after every change; they do not notice edits made to the file by
anything else in the meantime.

## What it does not do

There is no graphical window: browsing and editing happen in the text shell
or from Python. There is no multi-user access or locking of the inventory
files.