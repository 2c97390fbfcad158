"""
redis_map — Hello World

A Redis namespace behaves like a map of strings. Keys go to the server
as "<namespace>:<key>" and come back without the prefix.

Needs a Redis server on localhost:6379.
"""

import logging

from redis_map import ViewConfig, open_view


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s]: %(message)s")

    # ──────────────────────────────────────
    #  1. Connect (fails fast if the server is down)
    # ──────────────────────────────────────
    config = ViewConfig(host="localhost", port=6379, namespace="hello")

    with open_view(config) as greetings:
        # ──────────────────────────────────
        #  2. Write
        # ──────────────────────────────────
        greetings.put("en", "hello")
        greetings.put_all({"fr": "bonjour", "es": "hola", "pt": "hola"})

        # ──────────────────────────────────
        #  3. Read
        # ──────────────────────────────────
        print(f"  size       = {greetings.size()}")
        print(f"  get('fr')  = {greetings.get('fr')}")
        print(f"  'de' in    = {'de' in greetings}")
        print(f"  keys       = {sorted(greetings.key_set())}")
        print(f"  values     = {sorted(greetings.values())}  (duplicates collapse)")
        print(f"  entries    = {sorted(greetings.entry_set())}")

        # ──────────────────────────────────
        #  4. Clean up the namespace
        # ──────────────────────────────────
        greetings.remove("en")
        greetings.clear()
        print(f"  after clear, empty = {greetings.is_empty()}")


if __name__ == "__main__":
    main()
