"""The restaurant's tables, reservations, orders and menu, with text menus."""

from __future__ import annotations

import re
from typing import Iterable, TextIO

from restodesk.models import Order, Reservation, Table
from restodesk.users import Employee, User

_MENU = {
    "Supa de pui": 15.50,
    "Salata Caesar": 22.00,
    "Friptura de vita": 45.00,
    "Paste Carbonara": 32.50,
    "Tiramisu": 18.00,
    "Apa minerala": 7.00,
    "Suc natural": 12.00,
}

_TABLES = ((1, 2), (2, 4), (3, 4), (4, 6), (5, 8))

_STAFF_USERNAME = "admin"
_STAFF_PASSWORD = "password"

SEPARATOR = "-------------------"

_INTEGER = re.compile(r"[+-]?\d+")
_NON_SPACE_RUN = re.compile(r"\S+")


class _Guest(User):
    """A client identified only by name and phone number."""

    def role_description(self) -> str:
        return f"Client - {self.name}"


class _Console:
    """Reads whitespace-separated numbers and whole lines from one text stream."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout
        self._pending = ""

    def write(self, text: str) -> None:
        self._out.write(text)

    def say(self, *lines: str) -> None:
        for line in lines:
            self._out.write(line + "\n")

    def read_int(self) -> int | None:
        """Read the next word; return it as an int, or None if it is not one."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            line = self._in.readline()
            if not line:
                raise EOFError
            self._pending = line
        number = _INTEGER.match(stripped)
        if number:
            self._pending = stripped[number.end():]
            return int(number.group())
        word = _NON_SPACE_RUN.match(stripped)
        self._pending = stripped[word.end():]
        return None

    def skip_char(self) -> None:
        self._pending = self._pending[1:]

    def read_line(self) -> str:
        if self._pending:
            line, self._pending = self._pending, ""
        else:
            line = self._in.readline()
            if not line:
                raise EOFError
        return line.rstrip("\r\n")

    def ask_line(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_line()

    def ask_int(self, prompt: str) -> int | None:
        self.write(prompt)
        value = self.read_int()
        self.skip_char()
        return value


class RestaurantSystem:
    """Holds the restaurant's state and runs the client and staff menus."""

    def __init__(self) -> None:
        self.tables: list[Table] = [Table(table_id, seats) for table_id, seats in _TABLES]
        self.reservations: list[Reservation] = []
        self.orders: list[Order] = []
        self.menu: dict[str, float] = dict(sorted(_MENU.items()))

    # State operations

    def available_tables(self) -> list[Table]:
        """Return the tables that are currently free."""
        return [table for table in self.tables if table.available]

    def find_table(self, table_id: int) -> Table | None:
        """Return the table with this number, or None if there is none."""
        return next((table for table in self.tables if table.id == table_id), None)

    def menu_lines(self) -> list[str]:
        """Return the numbered menu, one line per item."""
        return [
            f"{number}. {name} - {price:g} RON"
            for number, (name, price) in enumerate(self.menu.items(), start=1)
        ]

    def reserve(self, table_id: int, client: User, date_time: str) -> Reservation:
        """Book a free table for a client; raise LookupError if it is not free."""
        table = self.find_table(table_id)
        if table is None or not table.available:
            raise LookupError(f"table #{table_id} is not available")
        reservation = Reservation(table, client, date_time)
        self.reservations.append(reservation)
        table.available = False
        return reservation

    def place_order(self, choices: Iterable[int]) -> Order:
        """Order menu items by their 1-based numbers under the latest reservation."""
        if not self.reservations:
            raise LookupError("a reservation must be made before ordering")
        entries = list(self.menu.items())
        names: list[str] = []
        total = 0.0
        for choice in choices:
            if not 1 <= choice <= len(entries):
                raise ValueError(f"invalid menu choice: {choice}")
            name, price = entries[choice - 1]
            names.append(name)
            total += price
        if not names:
            raise ValueError("no items selected")
        order = Order(self.reservations[-1], names, total)
        self.orders.append(order)
        return order

    def release_table(self, table_id: int) -> Table:
        """Free a table and drop its reservations; raise LookupError if unknown."""
        table = self.find_table(table_id)
        if table is None:
            raise LookupError(f"table #{table_id} not found")
        table.available = True
        self.reservations = [r for r in self.reservations if r.table.id != table_id]
        return table

    def complete_orders(self, table_id: int) -> list[Order]:
        """Remove and return every order placed for this table."""
        completed = [o for o in self.orders if o.reservation.table.id == table_id]
        self.orders = [o for o in self.orders if o.reservation.table.id != table_id]
        return completed

    def report_total(self) -> float:
        """Return the sum of all open orders."""
        total = 0.0
        for order in self.orders:
            total += order.total
        return total

    # Interactive menus

    def client_menu(self, stdin: TextIO, stdout: TextIO) -> None:
        """Run the client menu until the client leaves or input ends."""
        console = _Console(stdin, stdout)
        try:
            self._run_client(console)
        except EOFError:
            pass

    def employee_menu(self, stdin: TextIO, stdout: TextIO) -> None:
        """Run the staff menu until the employee leaves or input ends."""
        console = _Console(stdin, stdout)
        try:
            self._run_employee(console)
        except EOFError:
            pass

    def _show_available_tables(self, console: _Console) -> None:
        console.say("\nMese disponibile:")
        console.say(*(table.describe() for table in self.available_tables()))

    def _show_menu(self, console: _Console) -> None:
        console.say("\nMeniul restaurantului:")
        console.say(*self.menu_lines())

    def _run_client(self, console: _Console) -> None:
        name = console.ask_line("\nIntroduceti numele dvs: ")
        phone = console.ask_line("Introduceti numarul de telefon: ")
        client = _Guest(name, phone)

        option = None
        while option != 4:
            console.say(
                "\n=== MENIU CLIENT ===",
                "1. Faceti o rezervare",
                "2. Plasati o comanda",
                "3. Afisati meniul",
                "4. Iesire",
            )
            option = console.ask_int("Alegeti optiunea: ")
            if option == 1:
                self._client_reserve(console, client)
            elif option == 2:
                self._client_order(console)
            elif option == 3:
                self._show_menu(console)
            elif option == 4:
                console.say("La revedere!")
            else:
                console.say("Optiune invalida!")

    def _client_reserve(self, console: _Console, client: User) -> None:
        self._show_available_tables(console)
        table_id = console.ask_int("Introduceti numarul mesei dorite: ")
        table = self.find_table(table_id) if table_id is not None else None
        if table is None or not table.available:
            console.say("Masa selectata nu este disponibila!")
            return
        date_time = console.ask_line("Introduceti data si ora (ex: 15/06/2024 19:00): ")
        reservation = self.reserve(table.id, client, date_time)
        console.say(reservation.describe())

    def _client_order(self, console: _Console) -> None:
        if not self.reservations:
            console.say("Trebuie sa faceti mai intai o rezervare!")
            return
        self._show_menu(console)
        console.say(
            "\nSelectati produsele (introduceti numere separate prin spatiu, "
            "0 pentru a termina):"
        )
        names = list(self.menu)
        choices: list[int] = []
        while True:
            choice = console.read_int()
            if choice == 0:
                break
            if choice is None or not 1 <= choice <= len(names):
                console.say("Optiune invalida!")
                continue
            choices.append(choice)
            console.say(f"Adaugat: {names[choice - 1]}")
        console.skip_char()

        if not choices:
            console.say("Nu ati selectat niciun produs!")
            return
        console.say(self.place_order(choices).describe())

    def _run_employee(self, console: _Console) -> None:
        name = console.ask_line("\nIntroduceti numele angajatului: ")
        phone = console.ask_line("Introduceti numarul de telefon: ")
        position = console.ask_line("Introduceti functia: ")
        employee = Employee(name, phone, position)
        console.say(employee.role_description())

        username = console.ask_line("Username: ")
        given = console.ask_line("Parola: ")
        employee.set_credentials(_STAFF_USERNAME, _STAFF_PASSWORD)
        if not employee.authenticate(username, given):
            console.say("Autentificare esuata!")
            return

        option = None
        while option != 6:
            console.say(
                "\n=== MENIU ANGAJAT ===",
                "1. Vizualizare rezervari",
                "2. Eliberare masa",
                "3. Vizualizare comenzi",
                "4. Finalizare comanda",
                "5. Raport comenzi",
                "6. Iesire",
            )
            option = console.ask_int("Alegeti optiunea: ")
            if option == 1:
                self._staff_list_reservations(console)
            elif option == 2:
                self._staff_release_table(console)
            elif option == 3:
                self._staff_list_orders(console, "\nComenzi active:")
            elif option == 4:
                self._staff_complete_order(console)
            elif option == 5:
                if self._staff_list_orders(console, "\nRaport comenzi:"):
                    console.say(f"TOTAL ZI: {self.report_total():g} RON")
            elif option == 6:
                console.say("La revedere!")
            else:
                console.say("Optiune invalida!")

    def _staff_list_reservations(self, console: _Console) -> None:
        if not self.reservations:
            console.say("Nu exista rezervari!")
            return
        console.say("\nRezervari active:")
        for reservation in self.reservations:
            console.say(reservation.describe(), SEPARATOR)

    def _staff_release_table(self, console: _Console) -> None:
        if not self.tables:
            console.say("Nu exista mese!")
            return
        console.say("\nStare curenta mese:")
        console.say(*(table.describe() for table in self.tables))
        table_id = console.ask_int("Introduceti numarul mesei de eliberat: ")
        if table_id is None:
            console.say("Optiune invalida!")
            return
        try:
            self.release_table(table_id)
        except LookupError:
            console.say(f"Masa #{table_id} nu a fost gasita!")
        else:
            console.say(f"Masa #{table_id} a fost eliberata.")

    def _staff_list_orders(self, console: _Console, heading: str) -> bool:
        if not self.orders:
            console.say("Nu exista comenzi!")
            return False
        console.say(heading)
        for order in self.orders:
            console.say(order.describe(), SEPARATOR)
        return True

    def _staff_complete_order(self, console: _Console) -> None:
        if not self.orders:
            console.say("Nu exista comenzi!")
            return
        table_id = console.ask_int(
            "\nSelectati comanda de finalizat (introduceti numarul mesei): "
        )
        completed = self.complete_orders(table_id) if table_id is not None else []
        for _ in completed:
            console.say(f"Comanda finalizata pentru masa #{table_id}")
        if not completed:
            console.say(f"Nu s-a gasit comanda pentru masa #{table_id}")