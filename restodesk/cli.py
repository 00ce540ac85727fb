"""Command-line entry point for the restaurant system."""

from __future__ import annotations

import argparse
import sys

from restodesk.system import RestaurantSystem


def _first_int(line: str) -> int | None:
    parts = line.split()
    if not parts:
        return None
    try:
        return int(parts[0])
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Ask for the kind of user and run the matching menu."""
    parser = argparse.ArgumentParser(
        prog="restodesk", description="Restaurant reservations and orders."
    )
    parser.parse_args(argv)

    system = RestaurantSystem()
    out = sys.stdout
    print("Bun venit la Sistemul de Administrare a Restaurantului!", file=out)
    print("Selectati tipul de utilizator:", file=out)
    print("1. Client", file=out)
    print("2. Angajat", file=out)
    out.write("Alegeti optiunea: ")

    user_type = _first_int(sys.stdin.readline())
    if user_type == 1:
        system.client_menu(sys.stdin, out)
    elif user_type == 2:
        system.employee_menu(sys.stdin, out)
    else:
        print("Optiune invalida!", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())