#!/usr/bin/env python3

import asyncio
import aiohttp
import sys
from typing import Optional
from urllib.parse import quote


class HashRingShell:
    def __init__(self, base_url: str = None):
        self.base_url = (base_url or "http://localhost:8000").rstrip("/")
        self.session: Optional[aiohttp.ClientSession] = None

    async def start(self):
        """Start the shell session"""
        self.session = aiohttp.ClientSession()

        print("Welcome to the Hash Ring Shell!")
        print(f"Connected to: {self.base_url}")
        self.print_commands()
        print("=" * 60)

        while True:
            try:
                command = input("ring> ").strip()

                if not command:
                    continue

                if command.lower() in ['quit', 'exit', 'q']:
                    break

                await self.execute_command(command)

            except KeyboardInterrupt:
                print("\nGoodbye!")
                break
            except EOFError:
                break

        await self.session.close()

    def print_commands(self):
        print("\nCommands:")
        print("  add <server>        - Add a server to the ring")
        print("  remove <server>     - Remove a server from the ring")
        print("  get <key>           - Find the server owning a key")
        print("  servers             - List servers")
        print("  ring                - Show ring positions clockwise")
        print("  stats [samples]     - Analyze key distribution")
        print("  help                - Show this help")
        print("  quit                - Exit the shell")

    async def execute_command(self, command: str):
        """Execute a shell command"""
        parts = command.split()
        if not parts:
            return

        cmd = parts[0].lower()

        if cmd == 'add' and len(parts) >= 2:
            await self.add(parts[1])
        elif cmd == 'remove' and len(parts) >= 2:
            await self.remove(parts[1])
        elif cmd == 'get' and len(parts) >= 2:
            await self.get(parts[1])
        elif cmd == 'servers':
            await self.servers()
        elif cmd == 'ring':
            await self.show_ring()
        elif cmd == 'stats':
            await self.stats(parts[1] if len(parts) > 1 else "10000")
        elif cmd == 'help':
            self.print_commands()
        else:
            print("Invalid command. Type 'help' for available commands.")

    def _url(self, *segments):
        return "/".join([self.base_url] + [quote(s, safe="") for s in segments])

    async def _request(self, method, url, **kwargs):
        try:
            async with self.session.request(method, url, **kwargs) as resp:
                return resp.status, await resp.json()
        except aiohttp.ClientError as e:
            print(f"Network error: {e}")
            return None, None

    async def add(self, server: str):
        status, result = await self._request("PUT", self._url("servers", server))
        if status == 201:
            print(f"Added {result['server']} at position {result['position']}")
        elif status == 200:
            print(result['message'])
        elif status is not None:
            print(f"ADD failed: {result.get('error', 'Unknown error')}")

    async def remove(self, server: str):
        status, result = await self._request("DELETE", self._url("servers", server))
        if status == 200:
            print(result['message'])
        elif status is not None:
            print(f"REMOVE failed: {result.get('error', 'Unknown error')}")

    async def get(self, key: str):
        status, result = await self._request("GET", self._url("keys", key))
        if status == 200:
            print(f"Key '{result['key']}' (hash {result['hash']}) -> {result['server']}")
        elif status is not None:
            print(f"GET failed: {result.get('error', 'Unknown error')}")

    async def servers(self):
        status, result = await self._request("GET", self._url("servers"))
        if status == 200:
            print(f"Servers ({result['ring_size']} positions):")
            for server in result['servers']:
                print(f"   {server}")

    async def show_ring(self):
        status, result = await self._request("GET", self._url("ring"))
        if status == 200:
            if not result['positions']:
                print("Ring is empty!")
            for i, entry in enumerate(result['positions'], start=1):
                print(f"   {i}. {entry['server']} (Hash: {entry['position']})")

    async def stats(self, samples: str):
        status, result = await self._request("GET", self._url("stats"), params={"samples": samples})
        if status == 200:
            print(f"Sample size: {result['sample_size']}, expected per server: {result['expected_per_server']:.0f}")
            for server, entry in result['servers'].items():
                print(f"   {server:<20}: {entry['keys']:6d} keys ({entry['percentage']:5.1f}%) "
                      f"| Deviation: {entry['deviation']:5.1f}%")
        elif status is not None:
            print(f"STATS failed: {result.get('error', 'Unknown error')}")


async def main():
    """Main entry point"""
    base_url = sys.argv[1] if len(sys.argv) > 1 else None

    shell = HashRingShell(base_url)
    await shell.start()

if __name__ == "__main__":
    asyncio.run(main())
