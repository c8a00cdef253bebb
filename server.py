import asyncio
import sys
from hashring.http_server import HTTPHashRing


async def serve(port=8000):
    ring_server = HTTPHashRing(port=port)
    await ring_server.start()

    print("\nTry these commands in another terminal:")
    print(f"curl -X PUT http://localhost:{port}/servers/10.0.0.1:6379")
    print(f"curl -X PUT http://localhost:{port}/servers/10.0.0.2:6379")
    print(f"curl http://localhost:{port}/keys/user1")
    print(f"curl http://localhost:{port}/stats?samples=1000")
    print(f"curl -X DELETE http://localhost:{port}/servers/10.0.0.1:6379")

    try:
        while True:
            await asyncio.sleep(1)
    finally:
        await ring_server.stop()


if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000
    try:
        asyncio.run(serve(port))
    except KeyboardInterrupt:
        print("\nShutting down...")
