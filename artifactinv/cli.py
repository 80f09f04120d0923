"""Interactive command shell for browsing and editing the artifact inventory."""

from __future__ import annotations

import argparse
import cmd
import shlex
import sys
from datetime import date
from typing import Dict, List, Optional, Sequence, TextIO

from .controller import ArtifactController
from .csv_repository import CsvRepository
from .json_repository import JsonRepository
from .repository import InMemoryRepository, Repository, RepositoryError
from .session import FilterField, FilterLogic, FilterSession, format_listing

DEFAULT_CSV_PATH = "artifacts.csv"

_FIELD_KEYS = ("id", "name", "description", "material", "date", "location")


def _parse_date(text: str) -> Optional[date]:
    text = text.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date '{text}', expected YYYY-MM-DD.") from None


def _parse_assignments(tokens: Sequence[str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        key = key.strip().lower()
        if not sep:
            raise ValueError(f"Expected key=value, got '{token}'.")
        if key not in _FIELD_KEYS:
            raise ValueError(
                f"Unknown field '{key}'; use one of: {', '.join(_FIELD_KEYS)}."
            )
        values[key] = value
    return values


def _iso(value: Optional[date]) -> str:
    return "" if value is None else value.isoformat()


class ArtifactShell(cmd.Cmd):
    """A line-oriented interface to an artifact controller."""

    prompt = "artifacts> "
    intro = "Artifact inventory. Type 'help' for a list of commands."

    def __init__(
        self,
        controller: ArtifactController,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.controller = controller
        self.session = FilterSession()

    def _say(self, message: str) -> None:
        self.stdout.write(message + "\n")

    def emptyline(self) -> bool:
        return False

    def precmd(self, line: str) -> str:
        return "quit" if line == "EOF" else line

    def _visible(self) -> List[str]:
        # Drop the "create new" entry and the separator that head the listing.
        return format_listing(self.session.apply(self.controller.all_artifacts()))[2:]

    def do_list(self, arg: str) -> None:
        """list: show the artifacts that pass the active filters."""
        lines = self._visible()
        if not lines:
            self._say("No artifacts.")
            return
        for line in lines:
            self._say(line)

    def do_show(self, arg: str) -> None:
        """show ID: show every field of one artifact."""
        try:
            artifact = self.controller.get_artifact(arg.strip())
        except (ValueError, RepositoryError) as exc:
            self._say(f"Could not retrieve artifact details: {exc}")
            return
        self._say(f"ID: {artifact.id}")
        self._say(f"Name: {artifact.name}")
        self._say(f"Description: {artifact.description}")
        self._say(f"Material: {artifact.material}")
        self._say(f"Discovery date: {_iso(artifact.discovery_date)}")
        self._say(f"Location: {artifact.location}")

    def do_add(self, arg: str) -> None:
        """add id=ID name=NAME [description=..] [material=..] [date=YYYY-MM-DD] [location=..]"""
        try:
            values = _parse_assignments(shlex.split(arg))
            self.controller.add_artifact(
                values.get("id", "").strip(),
                values.get("name", "").strip(),
                values.get("description", ""),
                values.get("material", ""),
                _parse_date(values.get("date", "")),
                values.get("location", ""),
            )
        except (ValueError, RepositoryError) as exc:
            self._say(f"Failed to add artifact: {exc}")
            return
        self._say("Artifact added.")

    def do_update(self, arg: str) -> None:
        """update ID [id=NEW_ID] [name=..] [description=..] [material=..] [date=..] [location=..]

        Fields that are not given keep their current values.
        """
        try:
            tokens = shlex.split(arg)
            if not tokens or "=" in tokens[0]:
                raise ValueError("Give the ID of the artifact to update first.")
            original_id = tokens[0]
            values = _parse_assignments(tokens[1:])
            existing = self.controller.get_artifact(original_id)
            found = (
                _parse_date(values["date"])
                if "date" in values
                else existing.discovery_date
            )
            self.controller.update_artifact(
                original_id,
                values.get("id", existing.id).strip(),
                values.get("name", existing.name).strip(),
                values.get("description", existing.description),
                values.get("material", existing.material),
                found,
                values.get("location", existing.location),
            )
        except (ValueError, RepositoryError) as exc:
            self._say(f"Failed to update artifact: {exc}")
            return
        self._say("Artifact updated.")

    def do_remove(self, arg: str) -> None:
        """remove ID: delete an artifact."""
        try:
            self.controller.remove_artifact(arg.strip())
        except (ValueError, RepositoryError) as exc:
            self._say(f"Failed to remove artifact: {exc}")
            return
        self._say("Artifact removed.")

    def do_undo(self, arg: str) -> None:
        """undo: reverse the last change."""
        if not self.controller.can_undo():
            self._say("Nothing to undo.")
            return
        try:
            self.controller.undo()
        except (ValueError, RepositoryError) as exc:
            self._say(f"Failed to undo: {exc}")
            return
        self._say("Last action undone.")

    def do_redo(self, arg: str) -> None:
        """redo: repeat the last undone change."""
        if not self.controller.can_redo():
            self._say("Nothing to redo.")
            return
        try:
            self.controller.redo()
        except (ValueError, RepositoryError) as exc:
            self._say(f"Failed to redo: {exc}")
            return
        self._say("Last undone action redone.")

    def do_filter(self, arg: str) -> None:
        """filter [name|id|material|location TEXT | date START END]

        With no arguments, list the active filters.
        """
        parts = arg.split(None, 1)
        if not parts:
            self._say(f"Logic: {self.session.logic.name}")
            if not self.session.filters:
                self._say("No active filters.")
            for number, active in enumerate(self.session.filters, start=1):
                self._say(f"{number}. {active.label}")
            return
        rest = parts[1] if len(parts) > 1 else ""
        try:
            field = FilterField(parts[0].lower())
        except ValueError:
            names = ", ".join(f.value for f in FilterField)
            self._say(f"Unknown filter field '{parts[0]}'; use one of: {names}.")
            return
        try:
            if field is FilterField.DATE:
                bounds = rest.split()
                if len(bounds) != 2:
                    raise ValueError("A date filter needs a start and an end date.")
                active = self.session.add_date_filter(
                    _parse_date(bounds[0]), _parse_date(bounds[1])
                )
            else:
                active = self.session.add_text_filter(field, rest)
                if active is None:
                    raise ValueError("Filter text cannot be empty.")
        except ValueError as exc:
            self._say(f"Invalid filter: {exc}")
            return
        self._say(f"Added filter: {active.label}")
        self.do_list("")

    def do_logic(self, arg: str) -> None:
        """logic [and|or]: choose how active filters combine."""
        choice = arg.strip().lower()
        if choice:
            try:
                self.session.set_logic(FilterLogic(choice))
            except ValueError:
                self._say(f"Unknown logic '{choice}'; use 'and' or 'or'.")
                return
        self._say(f"Filter logic: {self.session.logic.name}")
        if choice and self.session.filters:
            self.do_list("")

    def do_unfilter(self, arg: str) -> None:
        """unfilter N: remove the active filter numbered N."""
        try:
            removed = self.session.remove(int(arg.strip()) - 1)
        except ValueError:
            self._say("Give the number of the filter to remove.")
            return
        except IndexError as exc:
            self._say(str(exc))
            return
        self._say(f"Removed filter: {removed.label}")
        self.do_list("")

    def do_reset(self, arg: str) -> None:
        """reset: drop every active filter."""
        self.session.reset()
        self._say("Filters cleared.")
        self.do_list("")

    def do_quit(self, arg: str) -> bool:
        """quit: leave the shell."""
        return True


def _open_repository(args: argparse.Namespace) -> Repository:
    if args.memory:
        return InMemoryRepository()
    if args.json is not None:
        return JsonRepository(args.json)
    return CsvRepository(args.csv if args.csv is not None else DEFAULT_CSV_PATH)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shell over the chosen repository."""
    parser = argparse.ArgumentParser(
        prog="artifactinv", description="Archaeological artifact inventory."
    )
    storage = parser.add_mutually_exclusive_group()
    storage.add_argument(
        "--csv", metavar="PATH", help=f"CSV file to use (default {DEFAULT_CSV_PATH})"
    )
    storage.add_argument("--json", metavar="PATH", help="JSON file to use")
    storage.add_argument(
        "--memory", action="store_true", help="keep artifacts in memory only"
    )
    args = parser.parse_args(argv)

    try:
        repository = _open_repository(args)
    except RepositoryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    shell = ArtifactShell(ArtifactController(repository))
    shell.cmdloop()
    return 0