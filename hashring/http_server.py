from aiohttp import web
from .hash_ring import HashRing, HashCollisionError
from .diagnostics import analyze_distribution

MAX_SAMPLES = 1000000


class HTTPHashRing:
    def __init__(self, host="localhost", port=8000, ring=None):
        self.ring = ring if ring is not None else HashRing()
        self.host = host
        self.port = port
        self.runner = None
        self.app = self._create_app()

    def _create_app(self):
        app = web.Application()

        app.router.add_get('/servers', self.handle_list_servers)
        app.router.add_put('/servers/{server}', self.handle_add_server)
        app.router.add_delete('/servers/{server}', self.handle_remove_server)
        app.router.add_get('/keys/{key}', self.handle_lookup)
        app.router.add_get('/ring', self.handle_ring)
        app.router.add_get('/stats', self.handle_stats)

        return app

    async def handle_list_servers(self, request):
        return web.json_response({
            "servers": sorted(self.ring.get_all_servers()),
            "ring_size": self.ring.size()
        })

    async def handle_add_server(self, request):
        server = request.match_info['server']

        if server in self.ring:
            return web.json_response({"message": f"Server '{server}' already exists", "server": server})

        try:
            position = self.ring.add_server(server)
        except HashCollisionError as e:
            return web.json_response({"error": str(e)}, status=409)

        return web.json_response({"server": server, "position": position}, status=201)

    async def handle_remove_server(self, request):
        server = request.match_info['server']

        if self.ring.remove_server(server):
            return web.json_response({"message": f"Server '{server}' removed"})
        else:
            return web.json_response({"error": "Server not found"}, status=404)

    async def handle_lookup(self, request):
        key = request.match_info['key']
        server = self.ring.get_server(key)

        if server is None:
            return web.json_response({"error": "No server available"}, status=503)
        return web.json_response({
            "key": key,
            "hash": self.ring.compute_hash(key),
            "server": server
        })

    async def handle_ring(self, request):
        return web.json_response({
            "positions": [
                {"position": position, "server": server}
                for position, server in self.ring.positions()
            ]
        })

    async def handle_stats(self, request):
        try:
            samples = int(request.query.get('samples', 10000))
            if samples > MAX_SAMPLES:
                raise ValueError(f"must be at most {MAX_SAMPLES}")
            result = analyze_distribution(self.ring, samples)
        except ValueError as e:
            return web.json_response({"error": f"Invalid sample count: {e}"}, status=400)

        if result is None:
            return web.json_response({"error": "No server available"}, status=503)
        return web.json_response(result)

    async def start(self):
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()

        site = web.TCPSite(self.runner, self.host, self.port)
        await site.start()

        print(f"Hash ring server running on http://{self.host}:{self.port}")
        print("Routes:")
        print("  GET    /servers            - List servers")
        print("  PUT    /servers/{server}   - Add a server")
        print("  DELETE /servers/{server}   - Remove a server")
        print("  GET    /keys/{key}         - Find the server for a key")
        print("  GET    /ring               - Ring positions in clockwise order")
        print("  GET    /stats?samples=N    - Key distribution analysis")

    async def stop(self):
        if self.runner:
            await self.runner.cleanup()
            self.runner = None
