#!/usr/bin/env python3

import asyncio
import sys
from hashring.hash_ring import HashRing
from hashring.diagnostics import print_distribution, print_ring_details, visualize_ring
from demo import run_demo, compare_naming_patterns


class HashRingMenu:
    def __init__(self, ring=None, input_func=input):
        self.ring = ring if ring is not None else HashRing()
        self.input = input_func
        self.handlers = {
            1: self.add_server,
            2: self.remove_server,
            3: self.find_server_for_key,
            4: self.analyze_distribution,
            5: self.show_ring_status,
            6: self.visualize,
            7: self.run_full_demo,
            8: self.experiment,
            9: self.reset_ring,
        }

    def read_choice(self):
        try:
            return int(self.input("Enter your choice (0-9): ").strip())
        except ValueError:
            return -1

    def pause(self):
        self.input("\nPress Enter to continue...")
        print()

    def _require_servers(self):
        if self.ring.is_empty():
            print("No servers in ring. Add some first!")
            self.pause()
            return False
        return True

    def handle_choice(self, choice):
        """Dispatch one menu command. Returns False when the user asked to quit."""
        print()
        if choice == 0:
            print("Thanks for exploring basic consistent hashing!")
            return False

        handler = self.handlers.get(choice)
        if handler is None:
            print("Invalid choice. Please enter 0-9.\n")
            return True

        try:
            handler()
        except EOFError:
            raise
        except Exception as e:
            print(f"Error: {e}")
            print("Please try again")
        return True

    def add_server(self):
        if not self.ring.get_all_servers():
            print("Tip: try names like ServerA, Web-01 or 192.168.1.10:8080\n")

        server = self.input("Enter server name: ").strip()
        if server:
            self.ring.add_server(server)
            if len(self.ring.get_all_servers()) >= 3:
                print("\nNow try option 4 to analyze distribution.")
        else:
            print("Invalid server name.")
        self.pause()

    def remove_server(self):
        if not self._require_servers():
            return

        print(f"Current servers: {sorted(self.ring.get_all_servers())}")
        server = self.input("Enter server to remove: ").strip()
        if server:
            self.ring.remove_server(server)
        else:
            print("Invalid server name.")
        self.pause()

    def find_server_for_key(self):
        if not self._require_servers():
            return

        key = self.input("Enter key to look for: ").strip()
        if key:
            print(f"Key '{key}' -> Server: {self.ring.get_server(key)}")
            print("\nMore keys to try:")
            for suggestion in [key + "1", key + "2", "user_" + key, key + "_session"]:
                print(f"  {suggestion}: {self.ring.get_server(suggestion)}")
        else:
            print("Invalid key.")
        self.pause()

    def analyze_distribution(self):
        if not self._require_servers():
            return

        print("Analyzing distribution...")
        print_distribution(self.ring, 10000)
        print("Without virtual nodes some servers own far larger arcs of the ring than others.")
        self.pause()

    def show_ring_status(self):
        print_ring_details(self.ring)
        self.pause()

    def visualize(self):
        visualize_ring(self.ring)
        self.pause()

    def run_full_demo(self):
        print("Running full demo...\n")
        run_demo()
        self.pause()

    def experiment(self):
        print("=== EXPERIMENT: Problems with Basic Hashing ===\n")
        compare_naming_patterns(5000)
        print("Hash clustering gives some servers much more load than others.")
        self.pause()

    def reset_ring(self):
        self.ring = HashRing()
        print("Ring reset! Start fresh by adding servers.")
        self.pause()

    def run(self):
        while True:
            try:
                show_menu()
                if not self.handle_choice(self.read_choice()):
                    return 0
            except KeyboardInterrupt:
                print("\nGoodbye!")
                return 0
            except EOFError:
                return 0


def show_menu():
    print("Basic Hash Ring")
    print("=" * 40)
    print("1. Add Server")
    print("2. Remove Server")
    print("3. Find Server for Key")
    print("4. Analyze Distribution")
    print("5. Show Ring Status")
    print("6. Visualize Ring")
    print("7. Run Full Demo")
    print("8. Experiment with Problems")
    print("9. Reset Ring")
    print("0. Exit")
    print("=" * 40)


def show_help():
    print("\nHelp - Basic Consistent Hashing")
    print("=" * 50)
    print("USAGE:")
    print("  python main.py                 - Interactive menu")
    print("  python main.py --demo          - Run the scripted demo")
    print("  python main.py --server [port] - Serve a ring over HTTP (default 8000)")
    print("  python main.py --help          - Show this help")
    print()
    print("Each server is hashed (MD5, first 8 bytes) onto a 64-bit ring.")
    print("A key belongs to the first server clockwise from its own hash.")


async def run_server(port):
    from server import serve
    await serve(port)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    if argv:
        if argv[0] == "--demo":
            run_demo()
            return 0
        elif argv[0] == "--server":
            port = int(argv[1]) if len(argv) > 1 else 8000
            asyncio.run(run_server(port))
            return 0
        elif argv[0] == "--help":
            show_help()
            return 0

    print("=== CONSISTENT HASHING SYSTEM ===")
    print("Interactive demo of a distributed hash ring.\n")
    return HashRingMenu().run()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nGoodbye!")
