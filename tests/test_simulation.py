import pytest

from hanoisim.simulation import Simulation, main, parse_input

EXAMPLE = """
2 20 100 1
3
0 1 0
1 0 1
0 1 0
2
10 pac 0 org 0 dst 2
20 pac 1 org 2 dst 0
"""


def test_parse_input():
    config = parse_input(EXAMPLE)
    assert (config.capacity, config.transit_time, config.interval, config.removal_cost) == (
        2,
        20,
        100,
        1,
    )
    assert len(config.graph) == 3
    assert len(config.packages) == 2
    assert config.packages.find(1).route == [2, 1, 0]


def test_parse_input_missing_parameters():
    with pytest.raises(ValueError):
        parse_input("1 2")


def test_run_delivers_every_package():
    config = parse_input(EXAMPLE)
    lines = Simulation(config).run()
    assert lines[0] == "0000010 pacote 000 armazenado em 000 na secao 001"
    delivered = [line for line in lines if "entregue" in line]
    assert len(delivered) == 2
    assert any(line.endswith("pacote 000 entregue em 002") for line in delivered)
    assert any(line.endswith("pacote 001 entregue em 000") for line in delivered)
    assert "entregue" in lines[-1]
    assert config.graph.warehouses_empty()


def test_each_removal_is_followed_by_transit_or_restore():
    lines = Simulation(parse_input(EXAMPLE)).run()
    removed = sum("removido" in line for line in lines)
    moved = sum("em transito" in line or "rearmazenado" in line for line in lines)
    assert removed == moved
    assert removed > 0


def test_package_at_destination_is_delivered_on_posting():
    text = "1 1 1 1 1 0 1 5 pac 0 org 0 dst 0"
    assert Simulation(parse_input(text)).run() == ["0000005 pacote 000 entregue em 000"]


def test_no_packages_gives_empty_log():
    text = "1 1 1 1 2 0 1 1 0 0"
    assert Simulation(parse_input(text)).run() == []


def test_unreachable_package_raises():
    text = "1 1 1 1 2 0 0 0 0 1 0 pac 0 org 0 dst 1"
    with pytest.raises(ValueError):
        Simulation(parse_input(text)).run()


def test_main_without_arguments():
    assert main([]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1


def test_main_prints_log(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    printed = capsys.readouterr().out.splitlines()
    assert printed == Simulation(parse_input(EXAMPLE)).run()