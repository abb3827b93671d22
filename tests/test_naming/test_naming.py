"""Tests for class-name minting."""

import threading

from domstylesheet.naming import Namer, default_namer


class TestNamer:
    def test_format(self):
        namer = Namer()
        assert namer.mint("style") == "Style_style1"

    def test_counter_increases(self):
        namer = Namer()
        assert namer.mint("a") == "A_a1"
        assert namer.mint("a") == "A_a2"
        assert namer.mint("b") == "B_b3"

    def test_only_first_letter_is_capitalized(self):
        namer = Namer(start=7)
        assert namer.mint("primaryButton") == "PrimaryButton_primaryButton7"

    def test_peek_does_not_consume(self):
        namer = Namer()
        assert namer.peek() == 1
        assert namer.peek() == 1
        namer.mint("x")
        assert namer.peek() == 2

    def test_instances_are_independent(self):
        first, second = Namer(), Namer()
        first.mint("x")
        assert second.mint("x") == "X_x1"

    def test_default_namer_is_shared(self):
        before = default_namer.peek()
        default_namer.mint("shared")
        assert default_namer.peek() == before + 1

    def test_concurrent_minting_never_repeats(self):
        namer = Namer()
        names: list[str] = []
        lock = threading.Lock()

        def worker():
            minted = [namer.mint("t") for _ in range(200)]
            with lock:
                names.extend(minted)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(names) == len(set(names)) == 1600
