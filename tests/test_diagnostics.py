import random
import pytest
from hashring.hash_ring import HashRing
from hashring.diagnostics import (
    analyze_distribution,
    print_distribution,
    print_ring_details,
    visualize_ring,
    remap_report,
)


def make_ring(*servers):
    ring = HashRing()
    for server in servers:
        ring.add_server(server)
    return ring


def test_analyze_distribution_counts_every_sample():
    ring = make_ring("A", "B", "C")
    result = analyze_distribution(ring, 3000, random.Random(7))

    assert result["sample_size"] == 3000
    assert result["expected_per_server"] == 1000
    assert set(result["servers"]) == {"A", "B", "C"}
    assert sum(s["keys"] for s in result["servers"].values()) == 3000
    assert sum(s["percentage"] for s in result["servers"].values()) == pytest.approx(100.0)

    for stats in result["servers"].values():
        assert stats["deviation"] == pytest.approx(abs(stats["keys"] - 1000) / 1000 * 100)


def test_analyze_distribution_is_reproducible_with_seed():
    ring = make_ring("A", "B", "C")
    assert analyze_distribution(ring, 500, random.Random(1)) == \
        analyze_distribution(ring, 500, random.Random(1))


def test_analyze_distribution_lists_idle_servers():
    ring = make_ring("A", "B")
    result = analyze_distribution(ring, 1, random.Random(3))
    assert set(result["servers"]) == {"A", "B"}
    assert sorted(s["keys"] for s in result["servers"].values()) == [0, 1]


def test_analyze_distribution_does_not_mutate_ring():
    ring = make_ring("A", "B", "C")
    before = ring.positions()
    analyze_distribution(ring, 200)
    assert ring.positions() == before


def test_analyze_distribution_empty_ring():
    assert analyze_distribution(HashRing(), 100) is None


def test_analyze_distribution_rejects_bad_sample_size():
    with pytest.raises(ValueError):
        analyze_distribution(make_ring("A"), 0)


def test_print_distribution(capsys):
    ring = make_ring("A", "B", "C")
    capsys.readouterr()
    print_distribution(ring, 900, random.Random(5))
    out = capsys.readouterr().out

    assert "Sample size: 900 random keys" in out
    assert "Expected per server: 300 keys" in out
    for server in ["A", "B", "C"]:
        assert server in out

    assert print_distribution(HashRing(), 10) is None
    assert "No servers in ring" in capsys.readouterr().out


def test_print_ring_details_and_visualize(capsys):
    ring = make_ring("A", "B", "C")
    capsys.readouterr()

    print_ring_details(ring)
    out = capsys.readouterr().out
    assert "Total Servers: 3" in out
    assert "Ring Positions: 3" in out
    assert str(ring.compute_hash("A")) in out

    visualize_ring(ring, ["k5"])
    out = capsys.readouterr().out
    assert out.index("1. C") < out.index("2. A") < out.index("3. B")
    assert "Key: k5" in out and out.rstrip().splitlines()[-2].endswith("-> B")

    visualize_ring(HashRing())
    assert "Ring is empty!" in capsys.readouterr().out


def test_remap_report_on_removal():
    ring = make_ring("A", "B", "C")
    keys = ["k1", "k2", "k5"]

    moved = remap_report(ring, keys, lambda r: r.remove_server("B"))

    assert moved == {"k5": ("B", "C")}
    assert "B" not in ring
