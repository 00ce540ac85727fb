import io

import pytest

from restodesk.models import Table
from restodesk.system import RestaurantSystem
from restodesk.users import Employee


def _client():
    return Employee("Ana", "0700", "client")


def _run_client(system, script):
    out = io.StringIO()
    system.client_menu(io.StringIO(script), out)
    return out.getvalue()


def _run_employee(system, script):
    out = io.StringIO()
    system.employee_menu(io.StringIO(script), out)
    return out.getvalue()


def test_all_tables_start_available():
    system = RestaurantSystem()
    assert [t.id for t in system.available_tables()] == [1, 2, 3, 4, 5]


def test_find_table():
    system = RestaurantSystem()
    assert system.find_table(4) == Table(4, 6)
    assert system.find_table(99) is None


def test_menu_lines_sorted_by_name():
    system = RestaurantSystem()
    lines = system.menu_lines()
    assert len(lines) == len(system.menu)
    assert lines[0] == "1. Apa minerala - 7 RON"
    names = [line.split(". ", 1)[1].rsplit(" - ", 1)[0] for line in lines]
    assert names == sorted(names)


def test_reserve_marks_table_taken():
    system = RestaurantSystem()
    reservation = system.reserve(2, _client(), "15/06/2024 19:00")
    assert reservation.table.id == 2
    assert system.find_table(2).available is False
    assert system.reservations == [reservation]
    assert 2 not in [t.id for t in system.available_tables()]


def test_reserve_taken_or_unknown_table_fails():
    system = RestaurantSystem()
    system.reserve(1, _client(), "azi")
    with pytest.raises(LookupError):
        system.reserve(1, _client(), "maine")
    with pytest.raises(LookupError):
        system.reserve(42, _client(), "maine")
    assert len(system.reservations) == 1


def test_place_order_requires_reservation():
    system = RestaurantSystem()
    with pytest.raises(LookupError):
        system.place_order([1])
    assert system.orders == []


def test_place_order_uses_latest_reservation():
    system = RestaurantSystem()
    system.reserve(1, _client(), "azi")
    latest = system.reserve(3, _client(), "azi")
    order = system.place_order([1, 7])
    assert order.reservation == latest
    assert order.items == ("Apa minerala", "Tiramisu")
    assert order.total == pytest.approx(system.menu["Apa minerala"] + system.menu["Tiramisu"])
    assert system.orders == [order]


@pytest.mark.parametrize("choices", [[0], [8], [-1], [2, 9]])
def test_place_order_rejects_invalid_choice(choices):
    system = RestaurantSystem()
    system.reserve(1, _client(), "azi")
    with pytest.raises(ValueError):
        system.place_order(choices)
    assert system.orders == []


def test_place_order_rejects_empty():
    system = RestaurantSystem()
    system.reserve(1, _client(), "azi")
    with pytest.raises(ValueError):
        system.place_order([])


def test_release_table_frees_and_drops_reservations():
    system = RestaurantSystem()
    system.reserve(1, _client(), "azi")
    kept = system.reserve(2, _client(), "azi")
    table = system.release_table(1)
    assert table.available is True
    assert system.reservations == [kept]


def test_release_unknown_table_fails():
    system = RestaurantSystem()
    with pytest.raises(LookupError):
        system.release_table(77)


def test_complete_orders_removes_only_that_table():
    system = RestaurantSystem()
    system.reserve(1, _client(), "azi")
    first = system.place_order([1])
    second = system.place_order([2])
    system.reserve(2, _client(), "azi")
    other = system.place_order([3])
    assert system.complete_orders(1) == [first, second]
    assert system.orders == [other]
    assert system.complete_orders(1) == []


def test_report_total_is_sum_of_orders():
    system = RestaurantSystem()
    assert system.report_total() == 0.0
    system.reserve(1, _client(), "azi")
    orders = [system.place_order([1, 2]), system.place_order([5])]
    assert system.report_total() == pytest.approx(sum(o.total for o in orders))


def test_client_menu_reserve_and_order():
    system = RestaurantSystem()
    script = "Ana\n0700\n1\n2\n15/06/2024 19:00\n2\n1 5 0\n4\n"
    output = _run_client(system, script)
    assert "Rezervare confirmata:" in output
    assert "Data si ora: 15/06/2024 19:00" in output
    assert "Adaugat: Apa minerala" in output
    assert "Comanda confirmata:" in output
    assert output.rstrip().endswith("La revedere!")
    assert system.orders[0].items == ("Apa minerala", "Suc natural")
    assert system.reservations[0].client.name == "Ana"
    assert system.find_table(2).available is False


def test_client_menu_order_without_reservation():
    system = RestaurantSystem()
    output = _run_client(system, "Ana\n0700\n2\n4\n")
    assert "Trebuie sa faceti mai intai o rezervare!" in output
    assert system.orders == []


def test_client_menu_unavailable_table_and_invalid_option():
    system = RestaurantSystem()
    output = _run_client(system, "Ana\n0700\n1\n9\n7\n4\n")
    assert "Masa selectata nu este disponibila!" in output
    assert "Optiune invalida!" in output
    assert system.reservations == []


def test_client_menu_stops_at_end_of_input():
    system = RestaurantSystem()
    output = _run_client(system, "Ana\n0700\n3\n")
    assert "1. Apa minerala - 7 RON" in output
    assert "La revedere!" not in output


def test_employee_menu_rejects_bad_login():
    system = RestaurantSystem()
    output = _run_employee(system, "Ion\n0711\nOspatar\nadmin\ngresit\n1\n")
    assert "Rol: Angajat - Ion (Ospatar)" in output
    assert "Autentificare esuata!" in output
    assert "MENIU ANGAJAT" not in output


def test_employee_menu_releases_table_and_reports():
    system = RestaurantSystem()
    system.reserve(3, _client(), "azi")
    system.place_order([1])
    output = _run_employee(
        system, "Ion\n0711\nOspatar\nadmin\npassword\n5\n2\n3\n4\n3\n6\n"
    )
    assert "Raport comenzi:" in output
    assert "Masa #3 a fost eliberata." in output
    assert "Comanda finalizata pentru masa #3" in output
    assert system.find_table(3).available is True
    assert system.reservations == []
    assert system.orders == []


def test_employee_menu_empty_lists():
    system = RestaurantSystem()
    output = _run_employee(
        system, "Ion\n0711\nOspatar\nadmin\npassword\n1\n3\n2\n99\n6\n"
    )
    assert "Nu exista rezervari!" in output
    assert "Nu exista comenzi!" in output
    assert "Masa #99 nu a fost gasita!" in output