import bisect
import hashlib


class HashCollisionError(ValueError):
    """Two distinct servers hashed to the same ring position."""

    def __init__(self, server, existing, position):
        super().__init__(
            f"Server {server} collides with {existing} at position {position}"
        )
        self.server = server
        self.existing = existing
        self.position = position


def compute_hash(value):
    # first 8 bytes of the MD5 digest, big-endian, unsigned
    digest = hashlib.md5(value.encode("utf-8")).hexdigest()
    return int(digest[:16], 16)


class HashRing:
    def __init__(self):
        try:
            hashlib.new("md5")
        except ValueError as e:
            raise RuntimeError("MD5 algorithm not available") from e

        self.ring = {}  # hash_position -> server
        self.sorted_hashes = []
        self.servers = set()

    def compute_hash(self, value):
        return compute_hash(value)

    def add_server(self, server):
        if server in self.servers:
            print(f"Server {server} already exists in the ring")
            return None

        server_hash = self.compute_hash(server)
        existing = self.ring.get(server_hash)
        if existing is not None:
            raise HashCollisionError(server, existing, server_hash)

        self.servers.add(server)
        self.ring[server_hash] = server
        bisect.insort(self.sorted_hashes, server_hash)
        print(f"Added server {server} at position {server_hash}")
        return server_hash

    def remove_server(self, server):
        if server not in self.servers:
            print(f"Server {server} not found in the ring")
            return False

        self.servers.remove(server)
        server_hash = self.compute_hash(server)
        if server_hash in self.ring:
            del self.ring[server_hash]
            idx = bisect.bisect_left(self.sorted_hashes, server_hash)
            self.sorted_hashes.pop(idx)
        print(f"Removed server {server}")
        print(f"Ring stats: {len(self.servers)} servers, {len(self.ring)} positions on ring")
        return True

    def get_server(self, key):
        """Return the first server clockwise from the key's position, or None."""
        if not self.sorted_hashes:
            return None

        key_hash = self.compute_hash(key)
        idx = bisect.bisect_left(self.sorted_hashes, key_hash)
        if idx == len(self.sorted_hashes):
            idx = 0  # wrap around
        return self.ring[self.sorted_hashes[idx]]

    def get_all_servers(self):
        return set(self.servers)

    def positions(self):
        return [(h, self.ring[h]) for h in self.sorted_hashes]

    def is_empty(self):
        return not self.ring

    def size(self):
        return len(self.ring)

    def __len__(self):
        return self.size()

    def __contains__(self, server):
        return server in self.servers
