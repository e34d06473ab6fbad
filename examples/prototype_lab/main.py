"""CLI entry point for the prototype lab.

Usage:
    python main.py                                  # Interactive mode
    python main.py --commands "mass 3" "damage 2"   # Run commands, then exit
    python main.py --batch 10                       # Change default mass clone size
"""

from __future__ import annotations

import argparse
import shlex
import sys
from collections.abc import Callable

from prototypelab import ActionResult, ActionStatus, LabSession, LabSettings

HELP = """Commands:
  list              Show the roster
  card              Show the original player
  clone [i]         Clone player i (default: original)
  mass [n]          Clone the original n times
  clear             Remove every clone
  damage i          Player i takes damage
  heal i            Heal player i
  xp i              Give player i experience
  levelup i         Level up player i
  remove i          Remove clone i
  rename i NAME     Rename player i
  help              Show this help
  quit              Exit"""


def _index(args: list[str]) -> int | None:
    return int(args[0]) if args else None


def _show(result: ActionResult) -> None:
    if result.status is ActionStatus.REJECTED:
        print(f"! {result.message}")
        return
    for line in result.lines:
        print(f"  {line}")
    if result.message:
        print(result.message)


def build_commands(session: LabSession) -> dict[str, Callable[[list[str]], ActionResult]]:
    """Map command words to session actions."""
    return {
        "clone": lambda a: session.clone(_index(a)),
        "mass": lambda a: session.mass_clone(_index(a)),
        "clear": lambda a: session.clear_clones(),
        "damage": lambda a: session.damage(_index(a)),
        "heal": lambda a: session.heal(_index(a)),
        "xp": lambda a: session.gain_experience(_index(a)),
        "levelup": lambda a: session.level_up(_index(a)),
        "remove": lambda a: session.remove(_index(a)),
        "rename": lambda a: session.rename(_index(a[:1]), " ".join(a[1:])),
    }


def run_command(session: LabSession, line: str) -> bool:
    """Execute one command line. Returns False when the user asked to quit."""
    try:
        words = shlex.split(line)
    except ValueError as e:
        print(f"! {e}")
        return True
    if not words:
        return True

    word, args = words[0].lower(), words[1:]
    if word in ("quit", "exit"):
        return False
    if word == "help":
        print(HELP)
    elif word == "list":
        for row in session.render():
            print(f"  {row}")
    elif word == "card":
        for row in session.original_card():
            print(f"  {row}")
    elif word in (commands := build_commands(session)):
        try:
            _show(commands[word](args))
        except ValueError:
            print(f"! Expected a number, got {' '.join(args)!r}")
    else:
        print(f"! Unknown command {word!r}. Type 'help'.")
    return True


def run_interactive(session: LabSession) -> None:
    """Read commands until quit or EOF."""
    print(HELP)
    run_command(session, "list")
    while True:
        try:
            line = input("lab> ")
        except EOFError:
            print()
            break
        if not run_command(session, line):
            break


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="prototype-lab",
        description="Prototype Lab - player cloning playground",
    )
    parser.add_argument("--batch", type=int, help="Default mass clone count")
    parser.add_argument("--commands", nargs="+", help="Commands to run non-interactively")

    args = parser.parse_args(argv)
    overrides = {"default_batch_size": args.batch} if args.batch is not None else {}
    session = LabSession(LabSettings(**overrides))

    if args.commands:
        for line in args.commands:
            print(f"lab> {line}")
            if not run_command(session, line):
                break
    else:
        run_interactive(session)

    return 0


if __name__ == "__main__":
    sys.exit(main())
