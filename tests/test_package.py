import pytest

from hanoisim.package import Package, PackageState


def make_package(route=(0, 1, 2)):
    return Package(id=7, origin=route[0], destination=route[-1], posted_at=10, route=list(route))


def test_walks_along_route():
    p = make_package()
    assert p.current_warehouse() == 0
    assert p.next_warehouse() == 1
    assert p.advance_route() is True
    assert p.current_warehouse() == 1
    assert p.next_warehouse() == 2
    assert p.advance_route() is True
    assert p.current_warehouse() == 2
    assert p.next_warehouse() is None


def test_advance_route_stops_at_end():
    p = make_package()
    steps = 0
    while p.advance_route():
        steps += 1
    assert steps == len(p.route) - 1
    assert p.advance_route() is False
    assert p.current_warehouse() == p.destination


def test_empty_route_has_no_warehouses():
    p = Package(id=1, origin=0, destination=3)
    assert p.current_warehouse() is None
    assert p.next_warehouse() is None
    assert p.advance_route() is False


def test_route_is_copied():
    route = [0, 1]
    p = Package(id=1, origin=0, destination=1, route=route)
    route.append(5)
    assert p.route == [0, 1]


def test_state_starts_not_posted_and_advances():
    p = make_package()
    assert p.state == PackageState.NOT_POSTED
    p.advance_state()
    assert p.state == PackageState.ARRIVAL_SCHEDULED
    p.advance_state()
    assert p.state == PackageState.STORED


def test_state_has_a_ceiling():
    p = make_package()
    for _ in range(20):
        p.advance_state()
    assert p.state == 6


def test_time_accounting_accumulates():
    p = make_package()
    p.record_storage_time(10, 25)
    p.record_storage_time(30, 31)
    p.record_transit_time(25, 30)
    assert p.storage_time == (25 - 10) + (31 - 30)
    assert p.transit_time == 30 - 25


def test_statistics_report():
    p = Package(id=7, origin=0, destination=2, sender="org", recipient="dst", kind="pac", route=[0, 2])
    report = p.statistics().splitlines()
    assert report[0] == "Pacote ID: 7"
    assert "Origem: 0 → Destino: 2" in report
    assert "Remetente: org" in report
    assert report[-1] == "Tempo transporte total: 0"