"""Search scopes and their header text."""

from __future__ import annotations

import enum


class Scope(enum.IntEnum):
    """Where history is searched, from narrowest to broadest."""

    SESSION = 0
    DIRECTORY = 1
    MACHINE = 2
    EVERYWHERE = 3

    def toggle(self) -> Scope:
        """Next broader scope, wrapping back to the session."""
        members = list(Scope)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def parse(cls, name: str) -> Scope:
        key = name.strip().upper()
        if key == "HOST":
            key = "MACHINE"
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"Unknown scope {name!r} (choose from: {choices})") from None


SCOPE_LABELS: dict[Scope, str] = {
    Scope.SESSION: "Session location history",
    Scope.DIRECTORY: "Directory location history",
    Scope.MACHINE: "Machine location history",
    Scope.EVERYWHERE: "Everywhere",
}

KEY_HINT = "C-g: Toggle group, C-s: Lock Session, C-d: Lock Dir"

# The active cell is drawn heavy and opens onto the rule below
SCOPE_HEADERS: dict[Scope, str] = {
    Scope.SESSION: (
        " ┏━━━━━━━━━┱───────────┬──────┬────────────┐\n"
        f" ┃ Session ┃ Directory │ Host │ Everywhere │ {KEY_HINT}\n"
        "━┛         ┗━━━━━━━━━━━┷━━━━━━┷━━━━━━━━━━━━┷━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━"
    ),
    Scope.DIRECTORY: (
        " ┌─────────┲━━━━━━━━━━━┱──────┬────────────┐\n"
        f" │ Session ┃ Directory ┃ Host │ Everywhere │ {KEY_HINT}\n"
        "━┷━━━━━━━━━┛           ┗━━━━━━┷━━━━━━━━━━━━┷━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━"
    ),
    Scope.MACHINE: (
        " ┌─────────┬───────────┲━━━━━━┱────────────┐\n"
        f" │ Session │ Directory ┃ Host ┃ Everywhere │ {KEY_HINT}\n"
        "━┷━━━━━━━━━┷━━━━━━━━━━━┛      ┗━━━━━━━━━━━━┷━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━"
    ),
    Scope.EVERYWHERE: (
        " ┌─────────┬───────────┬──────┲━━━━━━━━━━━━┓\n"
        f" │ Session │ Directory │ Host ┃ Everywhere ┃ {KEY_HINT}\n"
        "━┷━━━━━━━━━┷━━━━━━━━━━━┷━━━━━━┛            ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━"
    ),
}


def _check_exhaustive() -> None:
    for table_name, table in (("SCOPE_LABELS", SCOPE_LABELS), ("SCOPE_HEADERS", SCOPE_HEADERS)):
        missing = [s.name for s in Scope if s not in table]
        if missing:
            raise RuntimeError(f"{table_name} has no entry for: {', '.join(missing)}")


_check_exhaustive()
