from hashring.hash_ring import HashRing
from hashring.diagnostics import (
    print_distribution,
    print_ring_details,
    visualize_ring,
    remap_report,
)

TEST_KEYS = [
    "user_123", "session_456", "cache_789",
    "data_abc", "file_xyz", "token_999",
    "image_001", "video_002", "document_003",
]

SERVER_SETS = [
    ["ServerA", "ServerB", "ServerC"],
    ["Web-01", "Web-02", "Web-03"],
    ["192.168.1.10", "192.168.1.20", "192.168.1.30"],
]


def print_moved(moved, keys):
    for key in keys:
        if key in moved:
            before, after = moved[key]
            print(f"{key:<15} -> {after} (moved from {before})")
        else:
            print(f"{key:<15} -> unchanged")
    print(f"\n{len(moved)}/{len(keys)} keys moved")


def compare_naming_patterns(sample_size=5000):
    print("Creating rings with different server names to show distribution variance:\n")
    for i, servers in enumerate(SERVER_SETS, start=1):
        print(f"Test Set {i}: {servers}")
        ring = HashRing()
        for server in servers:
            ring.add_server(server)
        print_distribution(ring, sample_size)


def print_hash_values(ring):
    print("Hash values for current servers:")
    for position, server in ring.positions():
        print(f"{server:<20} -> Hash: {position:20d}")

    print("\nHash values for sample keys:")
    for key in ["key1", "key2", "key3", "user123", "session456"]:
        print(f"{key:<15} -> Hash: {ring.compute_hash(key):20d} -> Server: {ring.get_server(key)}")


def run_demo(sample_size=10000):
    print("=== BASIC CONSISTENT HASHING DEMO (without virtual nodes) ===\n")

    ring = HashRing()

    print("DEMO 1: Adding servers to the ring")
    print("-" * 34)
    ring.add_server("Server-A:8080")
    ring.add_server("Server-B:8081")
    ring.add_server("Server-C:8082")
    print_ring_details(ring)
    visualize_ring(ring)

    print("DEMO 2: Key-to-server mapping")
    print("-" * 29)
    for key in TEST_KEYS:
        print(f"{key:<15} -> {ring.get_server(key)}")

    print("\nDEMO 3: Distribution analysis")
    print("-" * 29)
    print_distribution(ring, sample_size)

    print("DEMO 4: Server failure impact")
    print("-" * 29)
    print("Simulating Server-B failure...\n")
    moved = remap_report(ring, TEST_KEYS, lambda r: r.remove_server("Server-B:8081"))
    print_moved(moved, TEST_KEYS)
    print("Only keys owned by the failed server moved to its clockwise successor.\n")

    print("DEMO 5: Adding a new server")
    print("-" * 27)
    moved = remap_report(ring, TEST_KEYS, lambda r: r.add_server("Server-D:8083"))
    print_moved(moved, TEST_KEYS)
    print_distribution(ring, sample_size)

    print("DEMO 6: Problems with basic hashing")
    print("-" * 35)
    compare_naming_patterns(max(sample_size // 2, 1))

    print("DEMO 7: Understanding hash distribution")
    print("-" * 39)
    print_hash_values(ring)

    print("\n=== KEY LEARNINGS ===")
    print("+ Keys map consistently to the same servers")
    print("+ Adding/removing a server only moves the keys next to it")
    print("- Distribution can be highly uneven without virtual nodes")
    print("- A failed server hands its whole range to a single neighbour")

    return ring


if __name__ == "__main__":
    run_demo()
