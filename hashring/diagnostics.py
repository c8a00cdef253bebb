import random

SAMPLE_KEYS = ["user1", "user2", "user3", "session123", "data456"]


def analyze_distribution(ring, sample_size=10000, rng=None):
    """Route random keys through the ring and tally how many land on each server.

    Returns None when the ring has no servers. Deviation is the absolute
    difference from the ideal share, as a percentage of that share.
    """
    if sample_size <= 0:
        raise ValueError("sample_size must be > 0")

    servers = ring.get_all_servers()
    if not servers:
        return None

    rng = rng or random.Random()
    counts = {server: 0 for server in servers}
    for _ in range(sample_size):
        key = f"key_{rng.randrange(100000)}"
        server = ring.get_server(key)
        if server is not None:
            counts[server] += 1

    expected = sample_size / len(servers)
    report = {}
    for server in sorted(counts):
        count = counts[server]
        report[server] = {
            "keys": count,
            "percentage": count * 100.0 / sample_size,
            "deviation": abs(count - expected) / expected * 100.0,
        }

    return {
        "sample_size": sample_size,
        "expected_per_server": expected,
        "servers": report,
    }


def print_distribution(ring, sample_size=10000, rng=None):
    result = analyze_distribution(ring, sample_size, rng)
    if result is None:
        print("No servers in ring for distribution analysis")
        return None

    print("\n=== DISTRIBUTION ANALYSIS (Basic Ring) ===")
    print(f"Sample size: {sample_size} random keys")
    print(f"Expected per server: {int(result['expected_per_server'])} keys")
    print("Note: Without virtual nodes, distribution may be uneven!\n")
    for server, stats in result["servers"].items():
        print(f"{server:<20}: {stats['keys']:6d} keys ({stats['percentage']:5.1f}%) "
              f"| Deviation: {stats['deviation']:5.1f}%")
    print("=" * 47 + "\n")
    return result


def print_ring_details(ring):
    servers = sorted(ring.get_all_servers())
    print("\n=== BASIC RING INFORMATION ===")
    print(f"Total Servers: {len(servers)}")
    print(f"Ring Positions: {ring.size()}")
    print(f"Active Servers: {servers}")

    if not ring.is_empty():
        print("\nServer Positions on Ring:")
        for position, server in ring.positions():
            print(f"  Hash: {position:20d} -> Server: {server}")
    print("=" * 30 + "\n")


def visualize_ring(ring, sample_keys=None):
    print("\n=== BASIC RING VISUALIZATION ===")
    if ring.is_empty():
        print("Ring is empty!")
        return

    print("Ring positions (clockwise order):")
    for i, (position, server) in enumerate(ring.positions(), start=1):
        print(f"{i}. {server} (Hash: {position})")

    print("\nSample key mappings:")
    for key in sample_keys or SAMPLE_KEYS:
        print(f"Key: {key:<10} (Hash: {ring.compute_hash(key):20d}) -> {ring.get_server(key)}")
    print("=" * 32 + "\n")


def remap_report(ring, keys, mutate):
    """Apply ``mutate(ring)`` and return {key: (before, after)} for every key that moved."""
    before = {key: ring.get_server(key) for key in keys}
    mutate(ring)
    moved = {}
    for key in keys:
        after = ring.get_server(key)
        if after != before[key]:
            moved[key] = (before[key], after)
    return moved
