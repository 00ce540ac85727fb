# restodesk

A small interactive console desk for a restaurant floor: clients reserve
tables and order from the menu, while staff review reservations, free tables,
close orders and print an order report.

The prompts and messages are in Romanian.

## Installation

```
pip install .
```

## Running

```
restodesk
```

The program greets you and asks which kind of user you are:

1. **Client**: enter your name and phone number, then choose from:
   - reserve one of the free tables for a date and time you type in
     (for example `15/06/2024 19:00`);
   - place an order: type menu item numbers separated by spaces and finish
     with `0`. The order is attached to the most recent reservation, and at
     least one reservation must exist first;
   - show the menu;
   - leave.
2. **Angajat** (employee): enter your name, phone number and position, then
   log in. The staff login is username `admin` with password `password`.
   After logging in you can:
   - list the reservations;
   - free a table, which also drops every reservation for it;
   - list the orders;
   - close all orders for a table number;
   - print the order report followed by the total of all open orders in RON;
   - leave.

Any other answer to the first question prints `Optiune invalida!` and ends the
program. A session also ends when input runs out.

Every run starts with five tables (numbers 1 to 5, with 2, 4, 4, 6 and 8
seats) and a fixed menu of seven items, listed in alphabetical order.

## Using it from Python

- `restodesk.system.RestaurantSystem` holds `tables`, `reservations`,
  `orders` and `menu`, and offers:
  - `available_tables()` and `find_table(table_id)`;
  - `menu_lines()`, the numbered menu as text lines;
  - `reserve(table_id, client, date_time)`, which raises `LookupError` if the
    table does not exist or is taken;
  - `place_order(choices)`, taking 1-based menu numbers; it raises
    `LookupError` when there is no reservation and `ValueError` for an
    invalid number or an empty selection;
  - `release_table(table_id)`, which raises `LookupError` for an unknown table;
  - `complete_orders(table_id)`, returning the orders it removed;
  - `report_total()`;
  - `client_menu(stdin, stdout)` and `employee_menu(stdin, stdout)`, which run
    the interactive sessions over any pair of text streams.
- `restodesk.models` defines `Table`, `Reservation` and `Order`, each with a
  `describe()` method giving the text the console prints.
- `restodesk.users` defines the abstract `User` (name and contact) and
  `Employee`, with `set_credentials`, `authenticate` and `role_description`.
- `restodesk.products` defines the abstract `Product` base class (name and
  price); a subclass supplies `description()`, and `str()` gives
  `"<description> - <price> lei"`.
- `restodesk.cli.main` is the function behind the `restodesk` command.

## What it does not do

- Nothing is stored: tables, reservations and orders live only while the
  program runs.
- One run serves a single client or a single employee, so from the command
  line the employee menu always starts with no reservations or orders. To
  see both sides together, drive one `RestaurantSystem` from Python and call
  both menus on it.
- The menu is fixed; `Product` is not used by it and the package ships no
  concrete products.

## Tests

```
pip install .[test]
pytest
```