"""Quick start example for prime_scroll.

Run this script to walk through chunked generation and a scroll session.
"""

import threading
import time


def main():
    print("Prime Scroll - Quick Start Demo")
    print("=" * 50)

    print("\n1. First chunk of ten primes...")
    from prime_scroll.core.chunks import next_chunk

    first = next_chunk(0, 10)
    print(f"   {first.primes.tolist()} (cursor {first.cursor})")

    print("\n2. Resuming from the cursor...")
    second = next_chunk(first.cursor, 5)
    print(f"   {second.primes.tolist()} (cursor {second.cursor})")

    print("\n3. Scrolling from 1,000,000,007...")
    from prime_scroll.session.scroll import PrimeScroll
    from prime_scroll.session.render import format_grid

    session = PrimeScroll()
    session.start(1_000_000_007)
    start = time.perf_counter()
    for _ in range(4):
        session.extend()
    elapsed = time.perf_counter() - start

    print(f"   Loaded {len(session):,} primes, last extensions took {elapsed:.3f}s")
    print(format_grid(session.primes[:12], columns=4))

    print("\n4. Cancelling a long scan...")
    from prime_scroll.core.errors import ScanCancelledError

    event = threading.Event()
    threading.Timer(0.05, event.set).start()
    try:
        next_chunk(10**12, 10_000, cancel_event=event)
    except ScanCancelledError as e:
        print(f"   {e}")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'prime-scroll --help' to see CLI options")
    print("  - Try 'prime-scroll scroll -n 1000000007 --pages 3'")


if __name__ == "__main__":
    main()
